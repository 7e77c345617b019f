"""Shared fixtures isolating CLI runs from the developer's configuration."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from webpath.config.config import Config
from webpath.platform.logging import setup_logger


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the config lookup at a temporary file and reset cached state.

    Yields:
        Path: Location of the (initially missing) configuration file.
    """
    config_file = tmp_path / "webpath.toml"
    monkeypatch.setenv("WEBPATH_CONFIG", str(config_file))
    Config.reset()
    yield config_file
    Config.reset()
    _ = setup_logger()
