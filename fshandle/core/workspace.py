"""Workspace facade over files and directories.

Binds a filesystem provider and configuration together and exposes every
operation available on handles: simple pass-throughs (exists, create,
delete, listing) and the relative/search/copy/move algorithms.
"""

import logging
import re

from fshandle.core.paths.relative import PathLike, PathResolver
from fshandle.core.replication.tree_replicator import TreeReplicator
from fshandle.core.search.searcher import DirectorySearcher
from fshandle.domain.config import FsHandleConfig
from fshandle.domain.entities import DirectoryHandle, FileHandle
from fshandle.domain.value_objects import GlobPattern
from fshandle.ports.fs import FileSystem

logger = logging.getLogger(__name__)


class Workspace:
    """Entry point for filesystem operations on handles.

    Args:
        fs: Filesystem provider.
        config: Configuration; built-in defaults when omitted.

    Example:
        ws = Workspace(LocalFileSystem())
        src = ws.directory("project")
        ws.copy(src, "backup")
        txt = ws.search(src, "**/*.txt")
    """

    def __init__(self, fs: FileSystem, config: FsHandleConfig | None = None) -> None:
        self.fs = fs
        self.config = config or FsHandleConfig.default()
        self.resolver = PathResolver(fs, segment_matching=self.config.paths.segment_matching)
        self.searcher = DirectorySearcher(
            fs, self.resolver, case_sensitive=self.config.search.case_sensitive
        )
        self.replicator = TreeReplicator(fs, self.resolver)

    # Handles

    def file(self, *parts: str) -> FileHandle:
        return FileHandle(self.fs.join(*parts))

    def directory(self, *parts: str) -> DirectoryHandle:
        return DirectoryHandle(self.fs.join(*parts))

    # Pass-throughs shared by both kinds

    def exists(self, entry: FileHandle | DirectoryHandle) -> bool:
        if isinstance(entry, DirectoryHandle):
            return self.fs.is_dir(entry.path)
        return self.fs.is_file(entry.path)

    def does_not_exist(self, entry: FileHandle | DirectoryHandle) -> bool:
        return not self.exists(entry)

    def full_path(self, entry: FileHandle | DirectoryHandle) -> str:
        return self.fs.full_path(entry.path)

    def create(self, entry: FileHandle | DirectoryHandle) -> FileHandle | DirectoryHandle:
        """Create the entry (and missing parents) if it doesn't exist yet."""
        if isinstance(entry, DirectoryHandle):
            self.fs.make_dirs(entry.path)
        else:
            self.fs.touch(entry.path)
        return entry

    def delete(self, entry: FileHandle | DirectoryHandle) -> None:
        """Delete the entry; directories are removed recursively.

        The handle is marked deleted and refuses further use.

        Raises:
            FileNotFoundError: If the entry doesn't exist.
        """
        if isinstance(entry, DirectoryHandle):
            self.fs.remove_tree(entry.path)
        else:
            self.fs.remove_file(entry.path)
        logger.debug("Deleted %s", entry)
        entry.mark_deleted()

    # File contents

    def read_bytes(self, file: FileHandle) -> bytes:
        return self.fs.read_bytes(file.path)

    def read_text(self, file: FileHandle, encoding: str = "utf-8") -> str:
        return self.read_bytes(file).decode(encoding)

    def write_bytes(self, file: FileHandle, content: bytes) -> FileHandle:
        """Write content, creating parent directories as needed."""
        parent = self.fs.parent(self.fs.full_path(file.path))
        if parent is not None:
            self.fs.make_dirs(parent)
        self.fs.write_bytes(file.path, content)
        return file

    def write_text(self, file: FileHandle, content: str, encoding: str = "utf-8") -> FileHandle:
        return self.write_bytes(file, content.encode(encoding))

    # Directory listing

    def files(self, directory: DirectoryHandle) -> list[FileHandle]:
        """All files below directory, at any depth."""
        return [FileHandle(path) for path in self.fs.walk_files(directory.path)]

    def directories(self, directory: DirectoryHandle) -> list[DirectoryHandle]:
        """All directories below directory, at any depth."""
        return [DirectoryHandle(path) for path in self.fs.walk_dirs(directory.path)]

    def dirs(self, directory: DirectoryHandle) -> list[DirectoryHandle]:
        """Shortcut for directories()."""
        return self.directories(directory)

    def subdirectories(self, directory: DirectoryHandle) -> list[DirectoryHandle]:
        """Only the immediate child directories. See directories() for all."""
        return [DirectoryHandle(path) for path in self.fs.list_dirs(directory.path)]

    def subdirs(self, directory: DirectoryHandle) -> list[DirectoryHandle]:
        """Shortcut for subdirectories()."""
        return self.subdirectories(directory)

    # Algorithms

    def relative(self, base: DirectoryHandle, target: PathLike) -> str | None:
        return self.resolver.relative(base, target)

    def search(
        self, directory: DirectoryHandle, glob: str, case_sensitive: bool | None = None
    ) -> list[FileHandle]:
        return self.searcher.search(directory, glob, case_sensitive)

    def search_matching(
        self, directory: DirectoryHandle, matcher: GlobPattern | re.Pattern[str]
    ) -> list[FileHandle]:
        return self.searcher.search_matching(directory, matcher)

    def copy(self, entry: FileHandle | DirectoryHandle, *destination_parts: str):
        """Copy a file or directory tree.

        Directories return the unchanged source handle; files return a handle
        for the new copy.
        """
        if isinstance(entry, DirectoryHandle):
            return self.replicator.copy(entry, *destination_parts)
        return self.replicator.copy_file(entry, *destination_parts)

    def copy_to_exact_path(self, directory: DirectoryHandle, exact_path: str) -> DirectoryHandle:
        return self.replicator.copy_to_exact_path(directory, exact_path)

    def move(self, entry: FileHandle | DirectoryHandle, *destination_parts: str):
        """Move a file or directory; the handle is repointed and returned."""
        if isinstance(entry, DirectoryHandle):
            return self.replicator.move(entry, *destination_parts)
        return self.replicator.move_file(entry, *destination_parts)
