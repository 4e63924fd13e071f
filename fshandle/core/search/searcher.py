"""Recursive file search below a directory."""

import logging
import re

from fshandle.core.paths.relative import PathResolver
from fshandle.core.search.glob_translator import compile_glob
from fshandle.domain.entities import DirectoryHandle, FileHandle
from fshandle.domain.value_objects import GlobPattern
from fshandle.ports.fs import FileSystem

logger = logging.getLogger(__name__)


class DirectorySearcher:
    """Find files below a directory whose relative path matches a pattern.

    The directory tree is listed afresh on every call; nothing is cached.

    Args:
        fs: Filesystem provider used to list files.
        resolver: Resolver giving each file's path relative to the root.
        case_sensitive: Default for ``search`` when the caller passes None.
    """

    def __init__(
        self, fs: FileSystem, resolver: PathResolver, case_sensitive: bool = False
    ) -> None:
        self._fs = fs
        self._resolver = resolver
        self._case_sensitive = case_sensitive

    def search(
        self, root: DirectoryHandle, glob: str, case_sensitive: bool | None = None
    ) -> list[FileHandle]:
        """Return files below root matching a glob.

        Args:
            root: Directory to search.
            glob: Glob expression matched against paths relative to root.
            case_sensitive: Override the configured case sensitivity.

        Returns:
            Matching files in the provider's listing order.

        Raises:
            re.error: If the glob is malformed.
            OSError: If root cannot be listed.
        """
        if case_sensitive is None:
            case_sensitive = self._case_sensitive
        return self.search_matching(root, compile_glob(glob, case_sensitive))

    def search_matching(
        self, root: DirectoryHandle, matcher: GlobPattern | re.Pattern[str]
    ) -> list[FileHandle]:
        """Return files below root accepted by a compiled matcher.

        A GlobPattern must match the whole relative path; a plain regular
        expression only has to match somewhere in it.
        """
        if isinstance(matcher, GlobPattern):
            accept = matcher.matches
        else:
            accept = lambda candidate: matcher.search(candidate) is not None  # noqa: E731

        matched = []
        for path in self._fs.walk_files(root.path):
            relative = self._resolver.relative(root, path)
            if relative is None:
                continue
            if accept(relative.replace(self._fs.sep, "/").lstrip("/")):
                matched.append(FileHandle(path))

        logger.debug("Search in %s for %s matched %d file(s)", root, matcher, len(matched))
        return matched
