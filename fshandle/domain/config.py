"""Config domain models for fshandle.

Configuration is read from TOML files (see ``fshandle.shared.config_io``)
and represents user preferences for searching and path resolution.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any

from fshandle.domain.exceptions import InvalidConfigError


@dataclass(frozen=True)
class SearchConfig:
    """Configuration for directory search.

    Attributes:
        case_sensitive: Default case sensitivity for glob searches when the
            caller does not pass one (default: False).
    """

    case_sensitive: bool = False

    def __post_init__(self) -> None:
        """Validate search config after initialization."""
        if not isinstance(self.case_sensitive, bool):
            raise InvalidConfigError(
                f"search.case_sensitive must be a boolean, got {self.case_sensitive!r}"
            )


@dataclass(frozen=True)
class PathsConfig:
    """Configuration for relative path resolution.

    Attributes:
        segment_matching: Compare whole path segments when deciding whether a
            path lies under a directory (default: True). When False, a plain
            substring test is used, so "/home/al" is treated as containing
            "/home/alice/readme".
    """

    segment_matching: bool = True

    def __post_init__(self) -> None:
        """Validate paths config after initialization."""
        if not isinstance(self.segment_matching, bool):
            raise InvalidConfigError(
                f"paths.segment_matching must be a boolean, got {self.segment_matching!r}"
            )


@dataclass(frozen=True)
class FsHandleConfig:
    """Complete fshandle configuration.

    Attributes:
        search: Search configuration
        paths: Path resolution configuration
    """

    search: SearchConfig = field(default_factory=SearchConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)

    @staticmethod
    def default() -> "FsHandleConfig":
        """Create a config with all default values."""
        return FsHandleConfig(search=SearchConfig(), paths=PathsConfig())

    @staticmethod
    def from_partial(base: "FsHandleConfig", data: dict[str, Any]) -> "FsHandleConfig":
        """Overlay raw TOML data on an existing config.

        Unknown sections and keys are rejected so typos do not pass silently.

        Args:
            base: Config providing values for everything not in ``data``.
            data: Parsed TOML document.

        Returns:
            New FsHandleConfig with the overrides applied.

        Raises:
            InvalidConfigError: On unknown sections/keys or invalid values.
        """
        sections = {"search": base.search, "paths": base.paths}
        updated: dict[str, Any] = {}
        for name, values in data.items():
            if name not in sections:
                raise InvalidConfigError(f"Unknown config section [{name}]")
            if not isinstance(values, dict):
                raise InvalidConfigError(f"Config section [{name}] must be a table")
            current = sections[name]
            known = {f.name for f in fields(current)}
            unknown = set(values) - known
            if unknown:
                raise InvalidConfigError(
                    f"Unknown key(s) in [{name}]: {', '.join(sorted(unknown))}"
                )
            updated[name] = replace(current, **values)
        return replace(base, **updated)
