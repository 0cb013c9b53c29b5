from __future__ import annotations

import os
from pathlib import Path

import pytest

from conftest import write_image
from picview.commands import (
    ActualSize,
    CancelRename,
    CommandQueue,
    DeleteImage,
    DropFiles,
    EndPan,
    FitToWindow,
    JumpFirst,
    JumpLast,
    NavigateNext,
    NavigatePrev,
    OpenFileDialog,
    OpenPath,
    RenameBackspace,
    RenameInput,
    ResizeViewport,
    ShowRenamePrompt,
    StartPan,
    SubmitRename,
    ToggleMaximize,
    UpdatePan,
    WheelZoom,
    ZoomIn,
    ZoomOut,
)
from picview.state import AppState
from picview.types import TextureInfo


@pytest.fixture
def state(browser) -> AppState:
    st = AppState(browser=browser)
    ResizeViewport(800, 600).execute(st)
    return st


def opened(state: AppState, path: Path, size=(1600, 1200)) -> AppState:
    assert OpenPath(str(path)).execute(state)
    state.view.set_image(*size)
    state.displayed_path = state.browser.current_path
    return state


def current_name(state: AppState) -> str:
    return os.path.basename(state.browser.current_path)


def test_open_path_reports_errors_as_messages(state, tmp_path: Path):
    assert not OpenPath(str(tmp_path / "missing.png")).execute(state)
    assert state.ui.message.is_error
    assert "not found" in state.ui.message.text


def test_navigation_commands(state, abc_dir: Path):
    opened(state, abc_dir / "a.png")
    assert NavigateNext().execute(state)
    assert current_name(state) == "b.png"
    assert NavigatePrev().execute(state)
    assert NavigatePrev().execute(state)
    assert current_name(state) == "c.jpg"
    assert JumpFirst().execute(state)
    assert current_name(state) == "a.png"
    assert JumpLast().execute(state)
    assert current_name(state) == "c.jpg"


def test_navigation_without_images_is_guarded(state):
    queue = CommandQueue()
    for cmd in (NavigateNext(), NavigatePrev(), JumpFirst(), JumpLast()):
        assert not queue.execute(cmd, state)
    assert queue.history == []


def test_zoom_commands(state, abc_dir: Path):
    opened(state, abc_dir / "a.png")
    assert state.view.zoom == pytest.approx(0.5)
    assert ZoomIn().execute(state)
    assert state.view.zoom == pytest.approx(0.625)
    assert ZoomOut().execute(state)
    assert state.view.zoom == pytest.approx(0.5)
    assert ActualSize().execute(state)
    assert state.view.zoom == 1.0
    assert not state.view.fit_mode
    assert FitToWindow().execute(state)
    assert state.view.zoom == pytest.approx(0.5)


def test_wheel_zoom_direction_and_anchor(state, abc_dir: Path):
    opened(state, abc_dir / "a.png")
    anchor = (100.0, 100.0)
    point = state.view.image_point_at(*anchor)
    assert WheelZoom(1.0, anchor).execute(state)
    assert state.view.zoom == pytest.approx(0.5 * 1.15)
    assert state.view.image_point_at(*anchor) == pytest.approx(point)
    assert WheelZoom(-1.0, anchor).execute(state)
    assert state.view.zoom == pytest.approx(0.5)
    assert not WheelZoom(0.0, anchor).can_execute(state)


def test_zoom_without_image_does_nothing(state):
    queue = CommandQueue()
    assert not queue.execute(ZoomIn(), state)
    assert not queue.execute(WheelZoom(1.0, (0.0, 0.0)), state)
    assert not queue.execute(ActualSize(), state)


def test_drag_pans_image(state, abc_dir: Path):
    opened(state, abc_dir / "a.png")
    ActualSize().execute(state)
    assert state.view.pan_offset == (-400.0, -300.0)
    assert StartPan(100, 100).execute(state)
    assert UpdatePan(150, 120).execute(state)
    assert state.view.pan_offset == (-350.0, -280.0)
    # No movement since the last update
    assert not UpdatePan(150, 120).execute(state)
    assert EndPan().execute(state)
    assert not UpdatePan(300, 300).execute(state)


def test_resize_viewport_refits(state, abc_dir: Path):
    opened(state, abc_dir / "a.png")
    ResizeViewport(400, 300).execute(state)
    assert state.view.zoom == pytest.approx(0.25)


def test_drop_files_opens_first_image(state, abc_dir: Path):
    dropped = [str(abc_dir / "notes.txt"), str(abc_dir / "c.jpg"), str(abc_dir / "a.png")]
    assert DropFiles(dropped).execute(state)
    assert current_name(state) == "c.jpg"


def test_drop_files_without_images(state, abc_dir: Path):
    cmd = DropFiles([str(abc_dir / "notes.txt")])
    assert not cmd.can_execute(state)
    assert not cmd.execute(state)
    assert state.browser.current_path is None


def test_open_file_dialog_uses_chooser(state, abc_dir: Path):
    opened(state, abc_dir / "a.png")
    asked = []

    def chooser(initial_dir):
        asked.append(initial_dir)
        return str(abc_dir / "b.png")

    assert OpenFileDialog(chooser).execute(state)
    assert asked == [str(abc_dir)]
    assert current_name(state) == "b.png"


def test_open_file_dialog_cancelled(state):
    assert not OpenFileDialog(lambda initial_dir: None).execute(state)
    assert state.browser.current_path is None


def test_delete_image_advances(state, abc_dir: Path):
    opened(state, abc_dir / "b.png")
    assert DeleteImage().execute(state)
    assert current_name(state) == "c.jpg"
    assert state.needs_display


def test_delete_failure_shows_message(state, fileops, abc_dir: Path):
    opened(state, abc_dir / "b.png")
    fileops.fail_on.add(str(abc_dir / "b.png"))
    assert not DeleteImage().execute(state)
    assert state.ui.message.is_error
    assert state.browser.count == 3


def test_rename_prompt_flow(state, abc_dir: Path):
    opened(state, abc_dir / "b.png")
    state.texture = TextureInfo(tex=object(), w=1600, h=1200, path=str(abc_dir / "b.png"))

    assert ShowRenamePrompt().execute(state)
    prompt = state.ui.rename_prompt
    assert prompt.visible
    assert prompt.edit_value == "b"
    assert not ShowRenamePrompt().can_execute(state)

    RenameBackspace().execute(state)
    RenameInput("beta").execute(state)
    assert prompt.edit_value == "beta"

    assert SubmitRename().execute(state)
    new_path = str(abc_dir / "beta.png")
    assert not prompt.visible
    assert state.browser.current_path == new_path
    assert state.displayed_path == new_path
    assert state.texture.path == new_path
    assert not state.needs_display
    assert state.window.title == "PicView - beta.png"


def test_reopening_displayed_file_refits(state, abc_dir: Path):
    opened(state, abc_dir / "b.png")
    ZoomIn().execute(state)
    assert not state.view.fit_mode

    assert OpenPath(str(abc_dir / "b.png")).execute(state)
    assert not state.needs_display
    assert state.view.fit_mode
    assert state.view.zoom == pytest.approx(0.5)


def test_rename_conflict_shows_message_and_closes_prompt(state, abc_dir: Path):
    opened(state, abc_dir / "b.png")
    ShowRenamePrompt().execute(state)
    assert not SubmitRename("a").execute(state)
    assert not state.ui.rename_prompt.visible
    assert "already exists" in state.ui.message.text
    assert current_name(state) == "b.png"


def test_blank_rename_acts_as_cancel(state, fileops, abc_dir: Path):
    opened(state, abc_dir / "b.png")
    ShowRenamePrompt().execute(state)
    assert not SubmitRename("   ").execute(state)
    assert not state.ui.rename_prompt.visible
    assert state.ui.message.text == ""
    assert fileops.moved == []


def test_cancel_rename(state, abc_dir: Path):
    opened(state, abc_dir / "b.png")
    ShowRenamePrompt().execute(state)
    assert CancelRename().execute(state)
    assert not state.ui.rename_prompt.visible
    assert not CancelRename().can_execute(state)


def test_toggle_maximize(state):
    assert ToggleMaximize().execute(state)
    assert state.window.maximized
    ToggleMaximize().execute(state)
    assert not state.window.maximized


def test_queue_history_is_bounded(state, abc_dir: Path):
    opened(state, abc_dir / "a.png")
    queue = CommandQueue(max_history=2)
    for _ in range(5):
        queue.execute(NavigateNext(), state)
    assert len(queue.history) == 2
    queue.clear_history()
    assert queue.history == []
