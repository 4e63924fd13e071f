"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from fshandle.adapters.fs.local import LocalFileSystem
from fshandle.core.paths.relative import PathResolver
from fshandle.core.workspace import Workspace
from fshandle.domain.entities import DirectoryHandle
from tests.helpers.tree import make_tree

# ============================================================================
# Config Isolation
# ============================================================================
# Point the global config location at an empty temp directory so a user's
# own ~/.config/fshandle/config.toml never changes test outcomes.


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the global config directory into the test's temp dir."""
    config_home = tmp_path / "config_home"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("APPDATA", str(config_home))
    return config_home / "fshandle" / "config.toml"


@pytest.fixture
def fs() -> LocalFileSystem:
    """Local filesystem provider."""
    return LocalFileSystem()


@pytest.fixture
def resolver(fs: LocalFileSystem) -> PathResolver:
    """Resolver using whole-segment containment."""
    return PathResolver(fs)


@pytest.fixture
def workspace(fs: LocalFileSystem) -> Workspace:
    """Workspace with default configuration."""
    return Workspace(fs)


@pytest.fixture
def sample_tree(tmp_path: Path) -> DirectoryHandle:
    """A small tree used by search and copy tests.

    Layout:
        src/top.txt
        src/a/x.txt
        src/a/b/y.txt
        src/a/b/z.md
        src/empty/
    """
    root = make_tree(
        tmp_path / "src",
        {
            "top.txt": "top",
            "a/x.txt": "x",
            "a/b/y.txt": "y",
            "a/b/z.md": "z",
        },
        dirs=("empty",),
    )
    return DirectoryHandle(str(root))
