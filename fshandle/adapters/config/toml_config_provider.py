"""TOML-based configuration provider.

Loads configuration from .fshandle/config.toml with global config fallback.

Config loading priority (highest to lowest):
1. Local: .fshandle/config.toml (in the working directory)
2. Global: ~/.config/fshandle/config.toml (user defaults)
3. Built-in defaults
"""

import logging
from pathlib import Path

from fshandle.domain.config import FsHandleConfig
from fshandle.domain.exceptions import InvalidConfigError
from fshandle.shared.config_io import get_global_config_path, load_config_data

logger = logging.getLogger(__name__)


class TomlConfigProvider:
    """Configuration provider that loads from TOML files.

    Implements config cascade:
    1. Load global config if present
    2. Load local config if present
    3. Local values override global values (key-level merge)
    4. Missing values fall back to built-in defaults

    Gracefully handles missing or invalid configs with warnings.
    """

    def load(self, config_dir: Path) -> FsHandleConfig:
        """Load configuration with global fallback.

        Args:
            config_dir: Path to .fshandle directory containing config.toml

        Returns:
            FsHandleConfig instance with merged global/local values or defaults
        """
        config = FsHandleConfig.default()
        for label, path in (
            ("global", get_global_config_path()),
            ("local", config_dir / "config.toml"),
        ):
            if not path.exists():
                continue
            try:
                config = FsHandleConfig.from_partial(config, load_config_data(path))
                logger.debug("Loaded %s config from %s", label, path)
            except (FileNotFoundError, ValueError, InvalidConfigError) as e:
                logger.warning("Failed to load %s config at %s: %s. Ignoring it.", label, path, e)
        return config
