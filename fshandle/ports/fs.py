"""File System port interface.

Defines the filesystem provider the core algorithms call into. The core
never touches the disk directly; everything goes through this protocol, so
providers can be swapped for tests or alternative backends.

All methods are synchronous and blocking. Failures are reported by raising
OSError (or a subclass); callers in the core let them propagate unchanged.
"""

from typing import Protocol


class FileSystem(Protocol):
    """Protocol for filesystem operations used by fshandle."""

    @property
    def sep(self) -> str:
        """Primary path separator of the host platform."""
        ...

    def is_file(self, path: str) -> bool:
        """Check if path names an existing regular file."""
        ...

    def is_dir(self, path: str) -> bool:
        """Check if path names an existing directory."""
        ...

    def make_dirs(self, path: str) -> None:
        """Create a directory and any missing parents.

        Existing directories are left alone.
        """
        ...

    def touch(self, path: str) -> None:
        """Create an empty file if missing, including parent directories."""
        ...

    def remove_file(self, path: str) -> None:
        """Delete a single file.

        Raises:
            FileNotFoundError: If the file doesn't exist.
        """
        ...

    def remove_tree(self, path: str) -> None:
        """Delete a directory and everything below it.

        Raises:
            FileNotFoundError: If the directory doesn't exist.
        """
        ...

    def walk_files(self, path: str) -> list[str]:
        """List paths of all files below a directory, at any depth.

        Raises:
            FileNotFoundError: If the directory doesn't exist.
        """
        ...

    def walk_dirs(self, path: str) -> list[str]:
        """List paths of all directories below a directory, at any depth.

        Parents are listed before their children.

        Raises:
            FileNotFoundError: If the directory doesn't exist.
        """
        ...

    def list_dirs(self, path: str) -> list[str]:
        """List paths of the immediate child directories of a directory."""
        ...

    def copy_file(self, source: str, destination: str) -> None:
        """Copy file contents to an exact destination path.

        The destination's parent directory must already exist.
        """
        ...

    def move(self, source: str, destination: str) -> None:
        """Relocate a file or directory with a single rename.

        Raises:
            OSError: If the platform cannot rename (e.g. across devices).
        """
        ...

    def read_bytes(self, path: str) -> bytes:
        """Read file contents."""
        ...

    def write_bytes(self, path: str, content: bytes) -> None:
        """Write file contents, replacing anything already there."""
        ...

    def full_path(self, path: str) -> str:
        """Return the absolute, normalized form of path.

        Relative paths are resolved against the current working directory.
        """
        ...

    def parent(self, path: str) -> str | None:
        """Return the parent directory of path, or None at the root."""
        ...

    def join(self, *parts: str) -> str:
        """Join path parts with the platform separator."""
        ...

    def basename(self, path: str) -> str:
        """Return the final component of path."""
        ...

    def normcase(self, path: str) -> str:
        """Normalize case for comparisons on case-insensitive platforms."""
        ...
