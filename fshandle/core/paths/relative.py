"""Relative path resolution between handles.

Computes the path of an entry as seen from a directory, walking up with
``..`` segments when the entry does not live below that directory.
"""

import logging
import os

from fshandle.domain.entities import DirectoryHandle, FileHandle
from fshandle.ports.fs import FileSystem

logger = logging.getLogger(__name__)

PathLike = FileHandle | DirectoryHandle | str | os.PathLike[str]


def _as_path_string(entry: PathLike) -> str:
    if isinstance(entry, (FileHandle, DirectoryHandle)):
        return entry.path
    return os.fspath(entry)


class PathResolver:
    """Resolve paths of entries relative to a base directory.

    Both paths are first made absolute through the filesystem provider; no
    other I/O happens, so neither path has to exist.

    Args:
        fs: Filesystem provider used for normalization and parent queries.
        segment_matching: When True (default), "lies under" means whole path
            segments match. When False, a raw substring test is used instead,
            which treats "/home/al" as containing "/home/alice/x".
    """

    def __init__(self, fs: FileSystem, segment_matching: bool = True) -> None:
        self._fs = fs
        self._segment_matching = segment_matching

    def relative(self, base: DirectoryHandle | str, target: PathLike) -> str | None:
        """Return target's path relative to base.

        Args:
            base: Directory to resolve from.
            target: File or directory to resolve.

        Returns:
            The relative path, without a leading separator. An empty string
            when target is base. Paths above base start with one ``..``
            segment per level climbed. None when no common ancestor exists
            (for example two different drives).
        """
        full_base = self._fs.full_path(_as_path_string(base))
        full_target = self._fs.full_path(_as_path_string(target))

        remainder = self._strip_prefix(full_base, full_target)
        if remainder is not None:
            return remainder

        dirs_up = 1
        ancestor = self._fs.parent(full_base)
        while ancestor is not None:
            remainder = self._strip_prefix(ancestor, full_target)
            if remainder is not None:
                prefix = (".." + self._fs.sep) * dirs_up
                logger.debug(
                    "Resolved %s from %s via ancestor %s (%d up)",
                    full_target,
                    full_base,
                    ancestor,
                    dirs_up,
                )
                return prefix + remainder
            dirs_up += 1
            ancestor = self._fs.parent(ancestor)

        logger.debug("%s and %s share no common ancestor", full_base, full_target)
        return None

    def _strip_prefix(self, directory: str, full_target: str) -> str | None:
        """Return what remains of full_target below directory, or None."""
        if self._segment_matching:
            return self._strip_segments(directory, full_target)
        return self._strip_substring(directory, full_target)

    def _strip_segments(self, directory: str, full_target: str) -> str | None:
        dir_parts = self._segments(directory)
        target_parts = self._segments(full_target)
        if len(dir_parts) > len(target_parts):
            return None
        for dir_part, target_part in zip(dir_parts, target_parts):
            if self._fs.normcase(dir_part) != self._fs.normcase(target_part):
                return None
        return self._fs.sep.join(target_parts[len(dir_parts):])

    def _strip_substring(self, directory: str, full_target: str) -> str | None:
        index = full_target.find(directory)
        if index < 0:
            return None
        return full_target[index + len(directory):].lstrip(self._separators())

    def _segments(self, path: str) -> list[str]:
        normalized = path
        for sep in self._separators()[1:]:
            normalized = normalized.replace(sep, self._fs.sep)
        return [part for part in normalized.split(self._fs.sep) if part]

    def _separators(self) -> str:
        # Windows paths may carry either separator
        if self._fs.sep == "\\":
            return "\\/"
        return self._fs.sep
