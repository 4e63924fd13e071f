"""Tests for TOML config reading and writing."""

from pathlib import Path

import pytest

from fshandle.domain.config import FsHandleConfig, PathsConfig, SearchConfig
from fshandle.shared.config_io import (
    get_global_config_path,
    get_local_config_dir,
    load_config,
    load_config_data,
    save_config,
)


class TestPaths:
    """Tests for config file locations."""

    def test_global_path_respects_xdg(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("platform.system", lambda: "Linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        assert get_global_config_path() == tmp_path / "xdg" / "fshandle" / "config.toml"

    def test_global_path_on_windows_uses_appdata(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("platform.system", lambda: "Windows")
        monkeypatch.setenv("APPDATA", str(tmp_path / "roaming"))
        assert get_global_config_path() == tmp_path / "roaming" / "fshandle" / "config.toml"

    def test_local_dir(self, tmp_path: Path) -> None:
        assert get_local_config_dir(tmp_path) == tmp_path / ".fshandle"


class TestLoadSave:
    """Tests for loading and saving config files."""

    def test_save_then_load(self, tmp_path: Path) -> None:
        config = FsHandleConfig(
            search=SearchConfig(case_sensitive=True),
            paths=PathsConfig(segment_matching=False),
        )
        path = tmp_path / "nested" / "config.toml"
        save_config(config, path)
        assert load_config(path) == config

    def test_partial_file_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("[paths]\nsegment_matching = false\n")
        config = load_config(path)
        assert config.paths.segment_matching is False
        assert config.search == SearchConfig()

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config_data(tmp_path / "absent.toml")

    def test_malformed_toml_raises_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("[search\ncase_sensitive = ")
        with pytest.raises(ValueError, match="Invalid TOML"):
            load_config_data(path)
