"""Tests for Config TOML loading and env overrides."""

from pathlib import Path

import pytest

from mdtrack.core.config import Config

ENV_VARS = [
    "MDTRACK_CONFIG",
    "MDTRACK_DATE_FORMAT",
    "MDTRACK_DATE_PREFIX",
    "MDTRACK_DATE_SUFFIX",
    "MDTRACK_GLOB",
    "MDTRACK_TRACING",
    "PHOENIX_ENDPOINT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run each test without mdtrack variables from the outer environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = Config()

    assert config.source.glob_patterns == ["**/*.md"]
    assert config.source.date_format == "YYYY-MM-DD"
    assert config.source.date_prefix == ""
    assert config.tracking.default_weight == 1.0
    assert config.tracking.text_match_limit == 10_000
    assert config.tracing.enabled is False


def test_from_env(monkeypatch):
    monkeypatch.setenv("MDTRACK_DATE_FORMAT", "DD.MM.YYYY")
    monkeypatch.setenv("MDTRACK_DATE_PREFIX", "Daily ")
    monkeypatch.setenv("MDTRACK_GLOB", "journal/**/*.md, !journal/templates/**")
    monkeypatch.setenv("MDTRACK_TRACING", "true")
    monkeypatch.setenv("PHOENIX_ENDPOINT", "http://phoenix:6006/v1/traces")

    config = Config.from_env()

    assert config.source.date_format == "DD.MM.YYYY"
    assert config.source.date_prefix == "Daily "
    assert config.source.glob_patterns == ["journal/**/*.md", "!journal/templates/**"]
    assert config.tracing.enabled is True
    assert config.tracing.phoenix_endpoint == "http://phoenix:6006/v1/traces"


def test_tracing_flag_false_values(monkeypatch):
    monkeypatch.setenv("MDTRACK_TRACING", "0")
    assert Config.from_env().tracing.enabled is False


def test_from_file_applies_toml_then_env(tmp_path: Path, monkeypatch):
    """Environment variables should override TOML values."""
    toml_path = tmp_path / "mdtrack.toml"
    toml_path.write_text(
        "\n".join(
            [
                "[source]",
                'date_format = "YYYYMMDD"',
                'date_suffix = " journal"',
                'glob_patterns = ["daily/*.md"]',
                "",
                "[tracking]",
                "default_weight = 2.0",
                "text_match_limit = 50",
                "",
                "[tracing]",
                "enabled = true",
            ]
        ),
        encoding="utf-8",
    )

    monkeypatch.setenv("MDTRACK_DATE_FORMAT", "DD-MM-YYYY")

    config = Config.from_file(toml_path)

    assert config.source.date_format == "DD-MM-YYYY"
    assert config.source.date_suffix == " journal"
    assert config.source.glob_patterns == ["daily/*.md"]
    assert config.tracking.default_weight == 2.0
    assert config.tracking.text_match_limit == 50
    assert config.tracing.enabled is True


def test_from_file_ignores_unknown_keys(tmp_path: Path):
    toml_path = tmp_path / "mdtrack.toml"
    toml_path.write_text('[source]\ncolour = "red"\ndate_prefix = "Log "\n', encoding="utf-8")

    config = Config.from_file(toml_path)

    assert config.source.date_prefix == "Log "
    assert not hasattr(config.source, "colour")


def test_from_env_or_file_uses_mdtrack_config(tmp_path: Path, monkeypatch):
    """MDTRACK_CONFIG should be used when no explicit path is provided."""
    toml_path = tmp_path / "mdtrack.toml"
    toml_path.write_text('[source]\ndate_prefix = "Daily "\n', encoding="utf-8")

    monkeypatch.setenv("MDTRACK_CONFIG", str(toml_path))

    config = Config.from_env_or_file()

    assert config.source.date_prefix == "Daily "


def test_from_env_or_file_prefers_explicit_path(tmp_path: Path, monkeypatch):
    explicit = tmp_path / "explicit.toml"
    explicit.write_text('[source]\ndate_prefix = "A "\n', encoding="utf-8")
    other = tmp_path / "other.toml"
    other.write_text('[source]\ndate_prefix = "B "\n', encoding="utf-8")
    monkeypatch.setenv("MDTRACK_CONFIG", str(other))

    assert Config.from_env_or_file(explicit).source.date_prefix == "A "


def test_from_env_or_file_without_file():
    config = Config.from_env_or_file()
    assert config.source.date_format == "YYYY-MM-DD"
