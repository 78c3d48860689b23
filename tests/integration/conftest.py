"""Fixtures for invoking the CLI against snapshot files."""

from __future__ import annotations

import json
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from tunequery.config import Config
from tunequery.utils import output


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def mock_config() -> Generator[Config, None, None]:
    """Bypass the config file lookup; tests may tweak the returned Config."""
    config = Config(colored_output=False)
    with patch("tunequery.cli.load_config") as mock_load:
        mock_load.return_value = (config, [])
        yield config


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep table cells on one line so output can be searched."""
    monkeypatch.setattr(output.console, "_width", 200)


@pytest.fixture
def broken_snapshot(temp_dir: Path) -> Path:
    """A snapshot whose playlist points at a parent that does not exist."""
    data = {
        "playlists": [{"id": "P01", "name": "Orphan", "parent_id": "GONE", "tracks": [1]}],
        "tracks": [{"id": 1, "name": "Heroes", "artist": "David Bowie"}],
    }
    path = temp_dir / "broken.json"
    path.write_text(json.dumps(data))
    return path
