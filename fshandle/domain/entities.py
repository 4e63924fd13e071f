"""File and directory handles.

A handle is a lightweight value that names a filesystem entry. Creating one
never touches the disk; whether the entry exists is only checked when an
operation needs it.
"""

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from fshandle.domain.exceptions import HandleMovedError


@dataclass(frozen=True)
class Location:
    """Where a handle currently points.

    Attributes:
        path: Path string as given (not normalized).
        deleted: True once the entry was removed through this handle.
    """

    path: str
    deleted: bool = False


@dataclass(init=False, repr=False)
class _Handle:
    """State shared by both handle kinds.

    The location only changes through ``relocate`` and ``mark_deleted``.
    """

    _location: Location

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._location = Location(os.fspath(path))

    @property
    def path(self) -> str:
        """Path string of the entry.

        Raises:
            HandleMovedError: If the entry was deleted through this handle.
        """
        if self._location.deleted:
            raise HandleMovedError(
                f"'{self._location.path}' was deleted",
                hint="Create a new handle if the entry has been recreated",
            )
        return self._location.path

    @property
    def location(self) -> Location:
        return self._location

    @property
    def name(self) -> str:
        """Final path component."""
        return os.path.basename(self.path.rstrip("/\\")) or self.path

    def to_path(self) -> Path:
        return Path(self.path)

    def relocate(self, new_path: str | os.PathLike[str]) -> None:
        """Point this handle at a new location after a move."""
        self._location = Location(os.fspath(new_path))

    def mark_deleted(self) -> None:
        self._location = Location(self._location.path, deleted=True)

    def __hash__(self) -> int:
        # Changes on relocate/mark_deleted; don't move a handle used as a key
        return hash((type(self), self._location))

    def __str__(self) -> str:
        return self._location.path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._location.path!r})"


class FileHandle(_Handle):
    """Handle naming a file."""


class DirectoryHandle(_Handle):
    """Handle naming a directory."""

    def get_file(self, relative_path: str) -> FileHandle:
        """Return a handle for a file below this directory (it may not exist)."""
        return FileHandle(os.path.join(self.path, relative_path))

    def get_directory(self, relative_path: str) -> "DirectoryHandle":
        """Return a handle for a directory below this one (it may not exist)."""
        return DirectoryHandle(os.path.join(self.path, relative_path))

    def get_dir(self, relative_path: str) -> "DirectoryHandle":
        """Shortcut for get_directory."""
        return self.get_directory(relative_path)


def paths(handles: Iterable[_Handle]) -> list[str]:
    """Return the path strings of the given handles, in order."""
    return [handle.path for handle in handles]
