"""Configuration provider port.

Defines the interface for loading and accessing application configuration.
"""

from pathlib import Path
from typing import Protocol

from fshandle.domain.config import FsHandleConfig


class ConfigProvider(Protocol):
    """Protocol for loading and providing configuration."""

    def load(self, config_dir: Path) -> FsHandleConfig:
        """Load configuration from a local config directory.

        Args:
            config_dir: Path to a .fshandle directory containing config.toml

        Returns:
            FsHandleConfig instance with loaded or default values

        Note:
            Implementations should gracefully fall back to defaults
            if config file is missing or invalid.
        """
        ...
