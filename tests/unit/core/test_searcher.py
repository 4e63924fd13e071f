"""Tests for DirectorySearcher."""

import os
import re
import sys
from pathlib import Path

import pytest

from fshandle.adapters.fs.local import LocalFileSystem
from fshandle.core.paths.relative import PathResolver
from fshandle.core.search.glob_translator import compile_glob
from fshandle.core.search.searcher import DirectorySearcher
from fshandle.domain.entities import DirectoryHandle, FileHandle
from tests.helpers import make_tree


@pytest.fixture
def searcher(fs: LocalFileSystem, resolver: PathResolver) -> DirectorySearcher:
    return DirectorySearcher(fs, resolver)


def _relative_set(root: DirectoryHandle, files: list[FileHandle]) -> set[str]:
    return {Path(f.path).relative_to(root.path).as_posix() for f in files}


class TestSearch:
    """Tests for glob search."""

    def test_double_star_below_directory(
        self, searcher: DirectorySearcher, sample_tree: DirectoryHandle
    ) -> None:
        """'a/**/*.txt' finds txt files directly in a and deeper."""
        result = searcher.search(sample_tree, "a/**/*.txt")
        assert _relative_set(sample_tree, result) == {"a/x.txt", "a/b/y.txt"}

    def test_single_star_stays_at_top(
        self, searcher: DirectorySearcher, sample_tree: DirectoryHandle
    ) -> None:
        result = searcher.search(sample_tree, "*.txt")
        assert _relative_set(sample_tree, result) == {"top.txt"}

    def test_everything_under_tree(
        self, searcher: DirectorySearcher, sample_tree: DirectoryHandle
    ) -> None:
        result = searcher.search(sample_tree, "**")
        assert _relative_set(sample_tree, result) == {
            "top.txt",
            "a/x.txt",
            "a/b/y.txt",
            "a/b/z.md",
        }

    def test_returns_file_handles(
        self, searcher: DirectorySearcher, sample_tree: DirectoryHandle
    ) -> None:
        result = searcher.search(sample_tree, "**/*.md")
        assert result == [FileHandle(os.path.join(sample_tree.path, "a", "b", "z.md"))]

    def test_no_match_is_empty_list(
        self, searcher: DirectorySearcher, sample_tree: DirectoryHandle
    ) -> None:
        assert searcher.search(sample_tree, "**/*.rs") == []

    @pytest.mark.skipif(sys.platform == "win32", reason="newline not allowed in names")
    def test_trailing_newline_in_name_is_not_matched(
        self, searcher: DirectorySearcher, sample_tree: DirectoryHandle
    ) -> None:
        """The whole name has to match, including a trailing newline."""
        Path(sample_tree.path, "evil.txt\n").write_text("x")
        result = searcher.search(sample_tree, "*.txt")
        assert _relative_set(sample_tree, result) == {"top.txt"}

    def test_missing_root_raises(self, searcher: DirectorySearcher, tmp_path: Path) -> None:
        """Provider errors propagate to the caller."""
        with pytest.raises(FileNotFoundError):
            searcher.search(DirectoryHandle(tmp_path / "missing"), "*")

    def test_sees_changes_between_calls(
        self, searcher: DirectorySearcher, sample_tree: DirectoryHandle
    ) -> None:
        """Listings are not cached."""
        assert searcher.search(sample_tree, "new.txt") == []
        Path(sample_tree.path, "new.txt").write_text("new")
        assert len(searcher.search(sample_tree, "new.txt")) == 1


class TestCaseSensitivity:
    """Tests for the case sensitivity default and override."""

    @pytest.fixture
    def upper_tree(self, tmp_path: Path) -> DirectoryHandle:
        return DirectoryHandle(make_tree(tmp_path / "docs", {"guide/README.MD": "#"}))

    def test_default_ignores_case(
        self, searcher: DirectorySearcher, upper_tree: DirectoryHandle
    ) -> None:
        assert len(searcher.search(upper_tree, "**/*.md")) == 1

    def test_explicit_case_sensitive(
        self, searcher: DirectorySearcher, upper_tree: DirectoryHandle
    ) -> None:
        assert searcher.search(upper_tree, "**/*.md", case_sensitive=True) == []

    def test_configured_default(
        self,
        fs: LocalFileSystem,
        resolver: PathResolver,
        upper_tree: DirectoryHandle,
    ) -> None:
        """The constructor default applies when the caller passes None."""
        strict = DirectorySearcher(fs, resolver, case_sensitive=True)
        assert strict.search(upper_tree, "**/*.md") == []
        assert len(strict.search(upper_tree, "**/*.md", case_sensitive=False)) == 1


class TestSearchMatching:
    """Tests for searching with precompiled matchers."""

    def test_glob_pattern(
        self, searcher: DirectorySearcher, sample_tree: DirectoryHandle
    ) -> None:
        result = searcher.search_matching(sample_tree, compile_glob("a/b/*"))
        assert _relative_set(sample_tree, result) == {"a/b/y.txt", "a/b/z.md"}

    def test_regex_is_unanchored(
        self, searcher: DirectorySearcher, sample_tree: DirectoryHandle
    ) -> None:
        """A plain regex only needs to match part of the relative path."""
        result = searcher.search_matching(sample_tree, re.compile(r"b/y"))
        assert _relative_set(sample_tree, result) == {"a/b/y.txt"}
