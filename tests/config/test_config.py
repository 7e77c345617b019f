"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest

from webpath.config.config import Config, ConfigError
from webpath.config.paths import default_config_path
from webpath.shared.host_location import HostLocation


def test_defaults_when_file_missing(fresh_config: Path) -> None:
    """Loading without a config file returns defaults and writes nothing."""
    _ = fresh_config
    config = Config.load()
    assert config.location_pathname == "/"
    assert config.origin == ""
    assert config.log_file is None
    assert not default_config_path().exists()


def test_load_is_cached(fresh_config: Path) -> None:
    _ = fresh_config
    assert Config.load() is Config.load()


def test_save_load_round_trip(fresh_config: Path) -> None:
    _ = fresh_config
    original = Config(
        location_pathname="/app/docs/",
        origin="https://example.com",
        log_file=Path("/test/logs/webpath.log"),
    )
    written = original.save()
    assert written == default_config_path()

    Config.reset()
    loaded = Config.load()
    assert loaded.location_pathname == "/app/docs/"
    assert loaded.origin == "https://example.com"
    assert loaded.log_file == Path("/test/logs/webpath.log")


def test_saved_file_is_valid_toml(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "webpath.toml"
    _ = Config(location_pathname='/we"ird\\path').save(target)

    with open(target, "rb") as f:
        data = tomllib.load(f)
    assert data["location_pathname"] == '/we"ird\\path'
    assert "log_file" not in data


def test_explicit_file_bypasses_cache(fresh_config: Path, tmp_path: Path) -> None:
    _ = fresh_config
    _ = Config.load()
    other = tmp_path / "other.toml"
    _ = other.write_text('origin = "https://other.org"\n', encoding="utf-8")
    assert Config.load(other).origin == "https://other.org"


def test_blank_log_file_is_none(tmp_path: Path) -> None:
    source = tmp_path / "webpath.toml"
    _ = source.write_text('log_file = ""\n', encoding="utf-8")
    Config.reset()
    try:
        assert Config.load(source).log_file is None
    finally:
        Config.reset()


def test_to_location() -> None:
    config = Config(location_pathname="/app", origin="https://example.com")
    assert config.to_location() == HostLocation(pathname="/app", origin="https://example.com")


def test_mistyped_value_raises(tmp_path: Path) -> None:
    source = tmp_path / "webpath.toml"
    _ = source.write_text("origin = 5\n", encoding="utf-8")
    Config.reset()
    with pytest.raises(ConfigError) as exc_info:
        _ = Config.load(source)
    assert exc_info.value.key == "origin"
    Config.reset()


def test_unknown_key_raises(tmp_path: Path) -> None:
    source = tmp_path / "webpath.toml"
    _ = source.write_text('base_path = "/music"\n', encoding="utf-8")
    Config.reset()
    with pytest.raises(ConfigError, match="unknown setting"):
        _ = Config.load(source)
    Config.reset()
