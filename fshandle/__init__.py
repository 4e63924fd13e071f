"""fshandle - file and directory handles with relative paths, glob search and tree copy.

Handles are plain values; operations live on a Workspace bound to a
filesystem provider::

    from fshandle import as_dir, default_workspace

    ws = default_workspace()
    docs = as_dir("docs")
    ws.search(docs, "**/*.md")
    ws.copy(docs, "backup")
"""

import os

from fshandle.adapters.fs.local import LocalFileSystem
from fshandle.core.search.glob_translator import compile_glob
from fshandle.core.workspace import Workspace
from fshandle.domain.config import FsHandleConfig
from fshandle.domain.entities import DirectoryHandle, FileHandle, paths
from fshandle.domain.exceptions import FsHandleDomainError, HandleMovedError
from fshandle.domain.value_objects import GlobPattern

__all__ = [
    "DirectoryHandle",
    "FileHandle",
    "FsHandleConfig",
    "FsHandleDomainError",
    "GlobPattern",
    "HandleMovedError",
    "LocalFileSystem",
    "Workspace",
    "as_dir",
    "as_directory",
    "as_file",
    "compile_glob",
    "default_workspace",
    "paths",
]


def as_file(path: str | os.PathLike[str]) -> FileHandle:
    """Treat path as a file. Nothing is checked on disk."""
    return FileHandle(path)


def as_directory(path: str | os.PathLike[str]) -> DirectoryHandle:
    """Treat path as a directory. Nothing is checked on disk."""
    return DirectoryHandle(path)


def as_dir(path: str | os.PathLike[str]) -> DirectoryHandle:
    """Alias for as_directory()."""
    return as_directory(path)


def default_workspace(config: FsHandleConfig | None = None) -> Workspace:
    """Workspace on the local filesystem with the given (or default) config."""
    return Workspace(LocalFileSystem(), config)
