"""Factory classes for adapter and workspace instantiation.

Centralizes the creation of the filesystem provider, configuration provider
and Workspace, keeping the CLI layer free from direct adapter imports.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fshandle.core.workspace import Workspace
    from fshandle.domain.config import FsHandleConfig
    from fshandle.ports.config import ConfigProvider
    from fshandle.ports.fs import FileSystem


class ConfigFactory:
    """Factory for creating configuration providers."""

    def create_config_provider(self) -> ConfigProvider:
        from fshandle.adapters.config.toml_config_provider import TomlConfigProvider

        return TomlConfigProvider()


class WorkspaceFactory:
    """Factory for creating a Workspace bound to the local filesystem.

    Args:
        config: Configuration to use; loaded from TOML files when None.
    """

    def __init__(self, config: FsHandleConfig | None = None) -> None:
        self._config = config

    def create_file_system(self) -> FileSystem:
        from fshandle.adapters.fs.local import LocalFileSystem

        return LocalFileSystem()

    def load_config(self, config_dir: Path | None = None) -> FsHandleConfig:
        from fshandle.shared.config_io import get_local_config_dir

        if self._config is None:
            provider = ConfigFactory().create_config_provider()
            self._config = provider.load(config_dir or get_local_config_dir())
        return self._config

    def create_workspace(self, config_dir: Path | None = None) -> Workspace:
        from fshandle.core.workspace import Workspace

        return Workspace(self.create_file_system(), self.load_config(config_dir))
