"""Configuration management for tunequery."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from tunequery.exceptions import (
    ConfigParseError,
    ConfigValidationError,
)
from tunequery.library.marking import DEFAULT_IGNORED_PLAYLISTS, BypassRule
from tunequery.sorting.comparator import ARTIST_COLUMN_KINDS, TRACK_COLUMN_KINDS, ColumnKind


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "tunequery" / "config.toml"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        colored_output: Whether to use colored terminal output.
        ignored_playlists: Playlist names hidden from the hierarchy and from
            track playlist counts.
        bypass_rules: Playlists excluded from track playlist counts.
        numeric_columns: Extra column names sorted as whole numbers.
        duration_columns: Extra column names sorted as ``[H:]MM:SS`` durations.
        config_path: Path where config was loaded from (None if defaults).
    """

    colored_output: bool = True
    ignored_playlists: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORED_PLAYLISTS))
    bypass_rules: list[BypassRule] = field(default_factory=list)
    numeric_columns: list[str] = field(default_factory=list)
    duration_columns: list[str] = field(default_factory=list)
    config_path: Path | None = None

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of warning messages for non-fatal issues.
        """
        warnings: list[str] = []

        overlap = set(self.numeric_columns) & set(self.duration_columns)
        for column in sorted(overlap):
            warnings.append(f"Column '{column}' is listed as numeric and duration; using duration")

        names = [rule.playlist_name for rule in self.bypass_rules]
        for name in sorted({n for n in names if names.count(n) > 1}):
            warnings.append(f"Playlist '{name}' has more than one bypass rule; the last one wins")

        return warnings

    def column_kinds(self, base: dict[str, ColumnKind] | None = None) -> dict[str, ColumnKind]:
        """Merge the configured extra columns into a column-kind table."""
        kinds = dict(base or {})
        for column in self.numeric_columns:
            kinds[column] = ColumnKind.NUMERIC
        for column in self.duration_columns:
            kinds[column] = ColumnKind.DURATION
        return kinds

    def track_column_kinds(self) -> dict[str, ColumnKind]:
        return self.column_kinds(dict(TRACK_COLUMN_KINDS))

    def artist_column_kinds(self) -> dict[str, ColumnKind]:
        return self.column_kinds(dict(ARTIST_COLUMN_KINDS))


def load_config(config_path: Path | None = None) -> tuple[Config, list[str]]:
    """Load configuration from file or use defaults.

    Args:
        config_path: Explicit config file path. If None, uses default location.

    Returns:
        Tuple of (Config object, list of warning messages).

    Raises:
        ConfigParseError: If config file exists but has invalid syntax.
        ConfigValidationError: If config values are invalid.
    """
    warnings: list[str] = []

    if config_path is None:
        config_path = get_default_config_path()

    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        config = Config()
        warnings.append(
            f"No config file found at {config_path}. Using defaults. "
            f"Create config with: tunequery init-config"
        )
        return config, warnings + config.validate()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    config = _parse_config_dict(data, config_path)
    return config, warnings + config.validate()


def _string_list(key: str, value: object) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigValidationError(key, value, "must be a list of strings")
    return list(value)


def _parse_bypass_rules(value: object) -> list[BypassRule]:
    if not isinstance(value, list):
        raise ConfigValidationError("playlists.bypass", value, "must be an array of tables")

    rules: list[BypassRule] = []
    for entry in value:
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            raise ConfigValidationError("playlists.bypass", entry, "each rule needs a string name")
        include_children = entry.get("include_children", False)
        if not isinstance(include_children, bool):
            raise ConfigValidationError(
                "playlists.bypass.include_children", include_children, "must be a boolean"
            )
        rules.append(BypassRule(entry["name"], include_children))
    return rules


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    # Parse [display] section
    display = data.get("display", {})
    if "colored_output" in display:
        value = display["colored_output"]
        if not isinstance(value, bool):
            raise ConfigValidationError("display.colored_output", value, "must be a boolean")
        config.colored_output = value

    # Parse [playlists] section
    playlists = data.get("playlists", {})
    if "ignored" in playlists:
        config.ignored_playlists = _string_list("playlists.ignored", playlists["ignored"])
    if "bypass" in playlists:
        config.bypass_rules = _parse_bypass_rules(playlists["bypass"])

    # Parse [columns] section
    columns = data.get("columns", {})
    if "numeric" in columns:
        config.numeric_columns = _string_list("columns.numeric", columns["numeric"])
    if "duration" in columns:
        config.duration_columns = _string_list("columns.duration", columns["duration"])

    return config


def save_config(config: Config, config_path: Path | None = None) -> None:
    """Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Path to save to. If None, uses config.config_path or default.
    """
    if config_path is None:
        config_path = config.config_path or get_default_config_path()

    config_path = config_path.expanduser().resolve()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, Any] = {
        "display": {
            "colored_output": config.colored_output,
        },
        "playlists": {
            "ignored": list(config.ignored_playlists),
        },
    }

    if config.bypass_rules:
        data["playlists"]["bypass"] = [
            {"name": rule.playlist_name, "include_children": rule.include_children}
            for rule in config.bypass_rules
        ]

    # Build [columns] section (only if non-default values)
    columns: dict[str, Any] = {}
    if config.numeric_columns:
        columns["numeric"] = list(config.numeric_columns)
    if config.duration_columns:
        columns["duration"] = list(config.duration_columns)
    if columns:
        data["columns"] = columns

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
