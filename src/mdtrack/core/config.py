"""Configuration management for mdtrack."""

import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from loguru import logger

from .instrumentation import TracingConfig


@dataclass
class SourceSettings:
    """How documents are discovered and dated."""

    glob_patterns: list[str] = field(default_factory=lambda: ["**/*.md"])
    # Format of the date embedded in each file name
    date_format: str = "YYYY-MM-DD"
    date_prefix: str = ""
    date_suffix: str = ""
    encoding: str = "utf-8"


@dataclass
class TrackingSettings:
    """Defaults applied when building queries and scanning."""

    default_weight: float = 1.0
    # Upper bound on regex matches per document for text queries
    text_match_limit: int = 10_000


def _apply_table(target: Any, table: dict[str, Any]) -> None:
    """Copy known keys from a TOML table onto a dataclass instance."""
    known = {f.name for f in fields(target)}
    for key, value in table.items():
        if key in known:
            setattr(target, key, value)
        else:
            logger.warning(f"Ignoring unknown config key: {key!r}")


@dataclass
class Config:
    """Main application configuration."""

    source: SourceSettings = field(default_factory=SourceSettings)
    tracking: TrackingSettings = field(default_factory=TrackingSettings)
    tracing: TracingConfig = field(default_factory=TracingConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()
        config._apply_env()
        return config

    @classmethod
    def from_file(cls, path: Path | str) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to a TOML file with [source], [tracking] and [tracing] tables.

        Returns:
            Config with file values and environment overrides applied.
        """
        with open(path, "rb") as f:
            data = tomllib.load(f)

        config = cls()
        for section in ("source", "tracking", "tracing"):
            if section in data:
                _apply_table(getattr(config, section), data[section])

        config._apply_env()
        return config

    @classmethod
    def from_env_or_file(cls, path: Path | str | None = None) -> "Config":
        """Load from an explicit path, $MDTRACK_CONFIG, or the environment only."""
        config_path = path or os.environ.get("MDTRACK_CONFIG")
        if config_path:
            return cls.from_file(config_path)
        return cls.from_env()

    def _apply_env(self) -> None:
        if date_format := os.environ.get("MDTRACK_DATE_FORMAT"):
            self.source.date_format = date_format
        if prefix := os.environ.get("MDTRACK_DATE_PREFIX"):
            self.source.date_prefix = prefix
        if suffix := os.environ.get("MDTRACK_DATE_SUFFIX"):
            self.source.date_suffix = suffix
        if glob := os.environ.get("MDTRACK_GLOB"):
            self.source.glob_patterns = [p.strip() for p in glob.split(",") if p.strip()]

        if tracing := os.environ.get("MDTRACK_TRACING"):
            self.tracing.enabled = tracing.lower() in ("1", "true", "yes")
        if endpoint := os.environ.get("PHOENIX_ENDPOINT"):
            self.tracing.phoenix_endpoint = endpoint
