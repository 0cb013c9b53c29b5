import sys
from pathlib import Path
from typing import Tuple

import pytest
from PIL import Image

# Allow importing picview from repository root
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


def write_image(path: Path, size: Tuple[int, int] = (8, 6), color=(200, 30, 30)) -> Path:
    """Write a small real image; the format follows the extension."""
    img = Image.new("RGB", size, color)
    if path.suffix.lower() == ".ico":
        img.save(path, format="ICO", sizes=[size])
    else:
        img.save(path)
    return path


class FakeFileOps:
    """Records trash/move calls and can be told to fail on a given path."""

    def __init__(self):
        self.trashed = []
        self.moved = []
        self.fail_on = set()

    def trash(self, path: str) -> None:
        from picview.errors import TrashFailedError
        if path in self.fail_on:
            raise TrashFailedError(path, "simulated failure")
        Path(path).unlink()
        self.trashed.append(path)

    def move(self, src: str, dst: str) -> None:
        from picview.errors import RenameFailedError
        if src in self.fail_on:
            raise RenameFailedError(src, dst, "simulated failure")
        Path(src).rename(dst)
        self.moved.append((src, dst))


@pytest.fixture
def fileops() -> FakeFileOps:
    return FakeFileOps()


@pytest.fixture
def browser(fileops):
    from picview.state import DirectoryBrowser
    return DirectoryBrowser(trash=fileops.trash, mover=fileops.move)


@pytest.fixture
def abc_dir(tmp_path: Path) -> Path:
    """Directory with a.png, b.png, c.jpg plus non-image noise."""
    for name in ("a.png", "b.png", "c.jpg"):
        write_image(tmp_path / name)
    (tmp_path / "notes.txt").write_text("not an image")
    (tmp_path / "sub").mkdir()
    return tmp_path
