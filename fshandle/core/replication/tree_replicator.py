"""Copy and move of files and directory trees.

Destination policy (shared by every operation here): the destination parts
are joined into one path. If that path is an existing directory, the entry
lands inside it under its own name; otherwise it lands at exactly that path.
"""

import logging
from typing import TypeVar

from fshandle.core.paths.relative import PathResolver
from fshandle.domain.entities import DirectoryHandle, FileHandle
from fshandle.ports.fs import FileSystem

logger = logging.getLogger(__name__)

H = TypeVar("H", FileHandle, DirectoryHandle)


class TreeReplicator:
    """Replicate or relocate filesystem entries.

    Args:
        fs: Filesystem provider doing the actual I/O.
        resolver: Resolver used to place each descendant under the target.
    """

    def __init__(self, fs: FileSystem, resolver: PathResolver) -> None:
        self._fs = fs
        self._resolver = resolver

    def resolve_destination(
        self, source: FileHandle | DirectoryHandle, *destination_parts: str
    ) -> str:
        """Return the exact path an entry would be copied or moved to.

        Raises:
            ValueError: If no destination parts are given.
        """
        if not destination_parts:
            raise ValueError("A destination path is required")
        destination = self._fs.join(*destination_parts)
        if self._fs.is_dir(destination):
            # "." and ".." only get a usable name once normalized
            name = self._fs.basename(self._fs.full_path(source.path))
            return self._fs.join(destination, name)
        return destination

    def copy(self, source: DirectoryHandle, *destination_parts: str) -> DirectoryHandle:
        """Copy a directory tree.

        Returns:
            The source handle, unchanged.
        """
        self.copy_to_exact_path(source, self.resolve_destination(source, *destination_parts))
        return source

    def copy_to_exact_path(self, source: DirectoryHandle, exact_path: str) -> DirectoryHandle:
        """Copy a directory tree so its root is exactly ``exact_path``.

        Every directory is created before any file is written, so a file's
        parent always exists. The tree is listed before the target is made,
        which keeps a target inside the source out of the copy.

        Returns:
            Handle for the new copy.
        """
        directories = self._fs.walk_dirs(source.path)
        files = self._fs.walk_files(source.path)

        logger.debug(
            "Copying %d dir(s) and %d file(s) from %s to %s",
            len(directories),
            len(files),
            source,
            exact_path,
        )
        self._fs.make_dirs(exact_path)
        for directory in directories:
            self._fs.make_dirs(self._target_for(source, directory, exact_path))
        for file in files:
            self._fs.copy_file(file, self._target_for(source, file, exact_path))

        logger.info("Copied %s to %s", source, exact_path)
        return DirectoryHandle(exact_path)

    def move(self, source: DirectoryHandle, *destination_parts: str) -> DirectoryHandle:
        """Move a directory tree with one rename and repoint the handle.

        Provider errors, such as a cross-device rename, propagate unchanged
        and leave the handle where it was.

        Returns:
            The source handle, now pointing at the new location.
        """
        return self._relocate(source, self.resolve_destination(source, *destination_parts))

    def copy_file(self, source: FileHandle, *destination_parts: str) -> FileHandle:
        """Copy a single file.

        Missing parent directories of the destination are created.

        Returns:
            Handle for the new copy.
        """
        destination = self.resolve_destination(source, *destination_parts)
        parent = self._fs.parent(self._fs.full_path(destination))
        if parent is not None:
            self._fs.make_dirs(parent)
        self._fs.copy_file(source.path, destination)
        logger.info("Copied %s to %s", source, destination)
        return FileHandle(destination)

    def move_file(self, source: FileHandle, *destination_parts: str) -> FileHandle:
        """Move a single file and repoint the handle."""
        return self._relocate(source, self.resolve_destination(source, *destination_parts))

    def _relocate(self, source: H, destination: str) -> H:
        old_path = source.path
        self._fs.move(old_path, destination)
        source.relocate(destination)
        logger.info("Moved %s to %s", old_path, destination)
        return source

    def _target_for(self, source: DirectoryHandle, entry: str, exact_path: str) -> str:
        relative = self._resolver.relative(source, entry)
        if relative is None:
            raise ValueError(f"'{entry}' is not below '{source}'")
        return self._fs.join(exact_path, relative) if relative else exact_path
