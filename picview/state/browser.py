"""Directory browser - ordered sibling list and the current position in it."""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import AbstractSet, Callable, List, Optional

from ..config import IMG_EXTS
from ..errors import NotFoundError, UnsupportedFormatError, IoError, NameConflictError
from ..fileops import move_to_trash, move_file
from ..image_utils import (
    list_images,
    find_companion_file,
    validate_basename,
    same_path,
)
from ..types import LoadResult, DeleteResult, RenameResult
from ..logging import log


@dataclass
class DirectoryBrowser:
    """Image list of one directory plus the current index.

    ``index`` is -1 when nothing is selected. The list is replaced on
    ``load``, shrinks by one on delete, and has one entry rewritten in
    place on rename (no re-sort, so the navigation position stays put).
    """
    extensions: AbstractSet[str] = IMG_EXTS
    trash: Callable[[str], None] = move_to_trash
    mover: Callable[[str, str], None] = move_file
    files: List[str] = field(default_factory=list)
    index: int = -1

    @property
    def count(self) -> int:
        """Total number of images."""
        return len(self.files)

    @property
    def has_selection(self) -> bool:
        return 0 <= self.index < len(self.files)

    @property
    def current_path(self) -> Optional[str]:
        """Get current image path or None."""
        if self.has_selection:
            return self.files[self.index]
        return None

    @property
    def position(self) -> int:
        """1-based position of the current image (0 if none)."""
        return self.index + 1 if self.has_selection else 0

    def clear(self) -> None:
        self.files = []
        self.index = -1

    def load(self, path: str) -> LoadResult:
        """Rebuild the list from ``path``'s directory and select ``path``.

        Raises:
            NotFoundError: ``path`` is not an existing file.
            UnsupportedFormatError: ``path`` is not in the resulting list;
                the browser is reset to empty.
            IoError: The directory could not be enumerated.
        """
        path = os.path.abspath(path)
        if not os.path.isfile(path):
            raise NotFoundError(path)

        directory = os.path.dirname(path)
        try:
            files = list_images(directory, self.extensions)
        except OSError as e:
            log(f"[DIR][ERR] Cannot list {directory}: {e!r}")
            raise IoError(f"Cannot read folder: {directory}", directory) from e

        # Exact match wins over a case twin (A.png / a.png on case-sensitive filesystems)
        index = next((i for i, f in enumerate(files) if f == path), -1)
        if index < 0:
            index = next((i for i, f in enumerate(files) if same_path(f, path)), -1)
        if index < 0:
            self.clear()
            log(f"[DIR] Not an image: {path}")
            raise UnsupportedFormatError(path)

        self.files = files
        self.index = index
        log(f"[DIR] {directory} files={len(files)} start={index} -> {os.path.basename(path)}")
        return LoadResult(path=files[index], index=index, count=len(files))

    def next(self) -> Optional[str]:
        """Advance with wraparound. No-op on an empty list."""
        n = len(self.files)
        if n == 0:
            return None
        self.index = (self.index + 1) % n
        return self.files[self.index]

    def previous(self) -> Optional[str]:
        """Step back with wraparound. No-op on an empty list."""
        n = len(self.files)
        if n == 0:
            return None
        self.index = (self.index - 1 + n) % n
        return self.files[self.index]

    def jump_first(self) -> Optional[str]:
        if not self.files:
            return None
        self.index = 0
        return self.files[0]

    def jump_last(self) -> Optional[str]:
        if not self.files:
            return None
        self.index = len(self.files) - 1
        return self.files[self.index]

    def jump_to(self, index: int) -> Optional[str]:
        """Select an explicit index; out-of-range values are ignored."""
        if not 0 <= index < len(self.files):
            return None
        self.index = index
        return self.files[index]

    def find_companion(self, path: Optional[str] = None) -> Optional[str]:
        """Companion (same base name, non-image extension) of ``path`` or the current file."""
        path = path or self.current_path
        if path is None:
            return None
        return find_companion_file(path, self.extensions)

    def delete_current(self) -> Optional[DeleteResult]:
        """Send the current image (and its companion) to the trash.

        The companion goes first. If the image then fails, the companion
        stays trashed; the list is only updated once both succeed.

        Returns:
            DeleteResult, or None if nothing is selected.

        Raises:
            IoError: The trash call failed; list and index are unchanged.
        """
        if not self.has_selection:
            return None

        path = self.files[self.index]
        companion = self.find_companion(path)
        if companion is not None:
            log(f"[DELETE] Companion: {os.path.basename(companion)}")
            self.trash(companion)
        self.trash(path)

        del self.files[self.index]
        if not self.files:
            self.index = -1
            log("[DELETE] No more images in directory")
        else:
            self.index = min(self.index, len(self.files) - 1)
            log(f"[DELETE] Now showing index {self.index} of {len(self.files)}")
        return DeleteResult(path=path, companion=companion,
                            index=self.index, count=len(self.files))

    def rename_current(self, new_base: str) -> Optional[RenameResult]:
        """Rename the current image (and companion) to ``new_base`` + original extension.

        Returns:
            RenameResult, or None if nothing is selected or the name is unchanged.

        Raises:
            InvalidNameError: Empty name or forbidden characters.
            NameConflictError: Target image or companion path exists.
            RenameFailedError: OS failure. If the image move fails after the
                companion moved, the companion is not moved back.
        """
        if not self.has_selection:
            return None

        path = self.files[self.index]
        directory = os.path.dirname(path)
        current_base, image_ext = os.path.splitext(os.path.basename(path))
        if new_base == current_base:
            return None
        validate_basename(new_base)

        new_path = os.path.join(directory, new_base + image_ext)
        _check_target_free(path, new_path)

        companion = self.find_companion(path)
        new_companion = None
        if companion is not None:
            new_companion = os.path.join(directory, new_base + os.path.splitext(companion)[1])
            _check_target_free(companion, new_companion)
            self.mover(companion, new_companion)

        self.mover(path, new_path)
        self.files[self.index] = new_path
        return RenameResult(old_path=path, new_path=new_path,
                            old_companion=companion, new_companion=new_companion)


def _check_target_free(src: str, dst: str) -> None:
    """Raise NameConflictError if ``dst`` exists and is not ``src`` itself."""
    if not os.path.exists(dst):
        return
    try:
        if os.path.samefile(src, dst):
            # Case-only rename on a case-insensitive filesystem
            return
    except OSError:
        pass
    raise NameConflictError(dst)
