"""Configuration I/O utilities for reading and writing TOML config files.

This module handles serialization/deserialization of FsHandleConfig to/from TOML format.
"""

import os
import platform
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from fshandle.domain.config import FsHandleConfig

LOCAL_CONFIG_DIR = ".fshandle"


def get_global_config_path() -> Path:
    """Get the path to the global config file.

    The location is platform-dependent:
    - Linux/macOS: $XDG_CONFIG_HOME/fshandle/config.toml or ~/.config/fshandle/config.toml
    - Windows: %APPDATA%/fshandle/config.toml

    Returns:
        Path to the global config file (may not exist)
    """
    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "fshandle" / "config.toml"
        return Path.home() / ".config" / "fshandle" / "config.toml"
    xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg_config:
        return Path(xdg_config) / "fshandle" / "config.toml"
    return Path.home() / ".config" / "fshandle" / "config.toml"


def get_local_config_dir(cwd: Path | None = None) -> Path:
    """Return the local .fshandle directory for cwd (may not exist)."""
    return (cwd or Path.cwd()) / LOCAL_CONFIG_DIR


def load_config_data(path: Path) -> dict[str, Any]:
    """Load raw TOML data from a config file.

    Args:
        path: Path to config.toml file

    Returns:
        Dictionary with parsed TOML data

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in config file: {e}") from e


def load_config(path: Path) -> FsHandleConfig:
    """Load configuration from a single TOML file on top of the defaults.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
        InvalidConfigError: If values fail validation
    """
    return FsHandleConfig.from_partial(FsHandleConfig.default(), load_config_data(path))


def config_to_data(config: FsHandleConfig) -> dict[str, Any]:
    return {
        "search": {"case_sensitive": config.search.case_sensitive},
        "paths": {"segment_matching": config.paths.segment_matching},
    }


def save_config(config: FsHandleConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: FsHandleConfig to save
        path: Destination path for config.toml
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        tomli_w.dump(config_to_data(config), f)
