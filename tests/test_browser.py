from __future__ import annotations

import os
from pathlib import Path

import pytest

from conftest import write_image
from picview.errors import (
    InvalidNameError,
    IoError,
    NameConflictError,
    NotFoundError,
    UnsupportedFormatError,
)
from picview.state import DirectoryBrowser


def names(browser: DirectoryBrowser):
    return [os.path.basename(p) for p in browser.files]


def test_load_selects_file_in_sorted_sibling_list(browser, abc_dir: Path):
    result = browser.load(str(abc_dir / "b.png"))
    assert names(browser) == ["a.png", "b.png", "c.jpg"]
    assert result.index == 1
    assert result.count == 3
    assert result.position == 2
    assert browser.current_path == str(abc_dir / "b.png")


def test_next_wraps_around(browser, abc_dir: Path):
    browser.load(str(abc_dir / "b.png"))
    assert os.path.basename(browser.next()) == "c.jpg"
    assert os.path.basename(browser.next()) == "a.png"
    assert browser.index == 0


def test_previous_wraps_around(browser, abc_dir: Path):
    browser.load(str(abc_dir / "a.png"))
    assert os.path.basename(browser.previous()) == "c.jpg"
    assert browser.index == 2


def test_next_then_previous_returns_to_start(browser, abc_dir: Path):
    browser.load(str(abc_dir / "c.jpg"))
    start = browser.index
    browser.next()
    browser.previous()
    assert browser.index == start


def test_navigation_on_empty_list_is_noop():
    browser = DirectoryBrowser()
    assert browser.next() is None
    assert browser.previous() is None
    assert browser.jump_first() is None
    assert browser.jump_last() is None
    assert browser.index == -1
    assert browser.position == 0


def test_jump_first_last_and_to(browser, abc_dir: Path):
    browser.load(str(abc_dir / "b.png"))
    browser.jump_last()
    assert browser.index == 2
    browser.jump_first()
    assert browser.index == 0
    assert browser.jump_to(5) is None
    assert browser.index == 0
    browser.jump_to(1)
    assert browser.index == 1


def test_sort_is_case_insensitive(browser, tmp_path: Path):
    for name in ("b.png", "A.PNG", "c.gif"):
        write_image(tmp_path / name)
    browser.load(str(tmp_path / "c.gif"))
    assert names(browser) == ["A.PNG", "b.png", "c.gif"]
    assert browser.index == 2


def test_load_prefers_exact_case_over_case_twin(browser, tmp_path: Path):
    write_image(tmp_path / "A.png")
    if (tmp_path / "a.png").exists():
        pytest.skip("case-insensitive filesystem")
    write_image(tmp_path / "a.png")

    result = browser.load(str(tmp_path / "a.png"))
    assert result.path == str(tmp_path / "a.png")
    assert browser.current_path == str(tmp_path / "a.png")

    browser.load(str(tmp_path / "A.png"))
    assert browser.current_path == str(tmp_path / "A.png")


def test_uppercase_extension_is_listed(browser, tmp_path: Path):
    write_image(tmp_path / "photo.png")
    upper = tmp_path / "SHOT.JPG"
    upper.write_bytes((tmp_path / "photo.png").read_bytes())
    browser.load(str(upper))
    assert names(browser) == ["photo.png", "SHOT.JPG"]


def test_load_missing_file_raises(browser, tmp_path: Path):
    with pytest.raises(NotFoundError):
        browser.load(str(tmp_path / "nope.png"))


def test_load_unsupported_file_resets_browser(browser, abc_dir: Path):
    browser.load(str(abc_dir / "a.png"))
    with pytest.raises(UnsupportedFormatError):
        browser.load(str(abc_dir / "notes.txt"))
    assert browser.files == []
    assert browser.index == -1
    assert browser.current_path is None


def test_load_unreadable_directory_raises_io_error(browser, abc_dir: Path, monkeypatch):
    def boom(dirpath, exts):
        raise PermissionError("denied")

    monkeypatch.setattr("picview.state.browser.list_images", boom)
    with pytest.raises(IoError):
        browser.load(str(abc_dir / "a.png"))


def test_custom_extension_set(tmp_path: Path):
    write_image(tmp_path / "a.png")
    write_image(tmp_path / "b.bmp")
    browser = DirectoryBrowser(extensions=frozenset({".bmp"}))
    browser.load(str(tmp_path / "b.bmp"))
    assert names(browser) == ["b.bmp"]


# ── delete ──────────────────────────────────────────────────────────────


def test_delete_middle_keeps_index(browser, fileops, abc_dir: Path):
    browser.load(str(abc_dir / "b.png"))
    result = browser.delete_current()
    assert result.path == str(abc_dir / "b.png")
    assert result.companion is None
    assert names(browser) == ["a.png", "c.jpg"]
    assert browser.index == 1
    assert os.path.basename(browser.current_path) == "c.jpg"
    assert not (abc_dir / "b.png").exists()


def test_delete_last_moves_index_back(browser, abc_dir: Path):
    browser.load(str(abc_dir / "c.jpg"))
    result = browser.delete_current()
    assert result.index == 1
    assert os.path.basename(browser.current_path) == "b.png"


def test_delete_only_image_empties_list(browser, tmp_path: Path):
    write_image(tmp_path / "only.png")
    browser.load(str(tmp_path / "only.png"))
    result = browser.delete_current()
    assert result.index == -1
    assert result.count == 0
    assert browser.files == []
    assert browser.current_path is None


def test_delete_with_nothing_selected():
    assert DirectoryBrowser().delete_current() is None


def test_delete_trashes_companion_first(browser, fileops, abc_dir: Path):
    (abc_dir / "b.mov").write_bytes(b"clip")
    browser.load(str(abc_dir / "b.png"))
    result = browser.delete_current()
    assert result.companion == str(abc_dir / "b.mov")
    assert fileops.trashed == [str(abc_dir / "b.mov"), str(abc_dir / "b.png")]


def test_delete_failure_leaves_list_unchanged(browser, fileops, abc_dir: Path):
    browser.load(str(abc_dir / "b.png"))
    fileops.fail_on.add(str(abc_dir / "b.png"))
    with pytest.raises(IoError):
        browser.delete_current()
    assert names(browser) == ["a.png", "b.png", "c.jpg"]
    assert browser.index == 1


# ── rename ──────────────────────────────────────────────────────────────


def test_rename_keeps_extension_and_position(browser, abc_dir: Path):
    browser.load(str(abc_dir / "b.png"))
    result = browser.rename_current("zebra")
    assert result.old_path == str(abc_dir / "b.png")
    assert result.new_path == str(abc_dir / "zebra.png")
    # Not re-sorted
    assert names(browser) == ["a.png", "zebra.png", "c.jpg"]
    assert browser.index == 1
    assert (abc_dir / "zebra.png").exists()
    assert not (abc_dir / "b.png").exists()


def test_rename_unchanged_name_is_noop(browser, fileops, abc_dir: Path):
    browser.load(str(abc_dir / "b.png"))
    assert browser.rename_current("b") is None
    assert fileops.moved == []


def test_rename_conflict_leaves_everything_unchanged(browser, fileops, abc_dir: Path):
    browser.load(str(abc_dir / "a.png"))
    (abc_dir / "taken.png").write_bytes(b"x")
    with pytest.raises(NameConflictError):
        browser.rename_current("taken")
    assert fileops.moved == []
    assert (abc_dir / "a.png").exists()
    assert os.path.basename(browser.current_path) == "a.png"


@pytest.mark.parametrize("bad", ["", "   ", "a/b", "what?", "x:y", "..", "tab\tname"])
def test_rename_rejects_invalid_names(browser, fileops, abc_dir: Path, bad):
    browser.load(str(abc_dir / "a.png"))
    with pytest.raises(InvalidNameError):
        browser.rename_current(bad)
    assert fileops.moved == []


def test_rename_moves_companion_first(browser, fileops, abc_dir: Path):
    (abc_dir / "a.xmp").write_text("sidecar")
    browser.load(str(abc_dir / "a.png"))
    result = browser.rename_current("alpha")
    assert result.old_companion == str(abc_dir / "a.xmp")
    assert result.new_companion == str(abc_dir / "alpha.xmp")
    assert fileops.moved == [
        (str(abc_dir / "a.xmp"), str(abc_dir / "alpha.xmp")),
        (str(abc_dir / "a.png"), str(abc_dir / "alpha.png")),
    ]


def test_rename_companion_conflict_moves_nothing(browser, fileops, abc_dir: Path):
    (abc_dir / "a.xmp").write_text("sidecar")
    (abc_dir / "alpha.xmp").write_text("other")
    browser.load(str(abc_dir / "a.png"))
    with pytest.raises(NameConflictError):
        browser.rename_current("alpha")
    assert fileops.moved == []


def test_rename_failure_keeps_entry(browser, fileops, abc_dir: Path):
    browser.load(str(abc_dir / "c.jpg"))
    fileops.fail_on.add(str(abc_dir / "c.jpg"))
    with pytest.raises(IoError):
        browser.rename_current("d")
    assert names(browser) == ["a.png", "b.png", "c.jpg"]


def test_rename_with_nothing_selected():
    assert DirectoryBrowser().rename_current("x") is None
