"""Shared pytest fixtures."""

from __future__ import annotations

import json
import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from tunequery.library.models import Playlist, Track

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def sample_config(temp_dir: Path) -> Path:
    """Create a sample config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""[display]
colored_output = false

[playlists]
ignored = ["Library", "Music"]

[[playlists.bypass]]
name = "Recently Added"
include_children = false

[[playlists.bypass]]
name = "Archive"
include_children = true

[columns]
numeric = ["Size"]
""")
    return config_path


@pytest.fixture
def sample_tracks() -> list[Track]:
    """A handful of tracks covering every filterable attribute."""
    return [
        Track(
            track_id=1,
            name="Heroes",
            artist="David Bowie",
            album="Heroes",
            kind="MPEG audio file",
            year=1977,
            rating=100,
            duration_ms=371000,
            play_count=12,
        ),
        Track(
            track_id=2,
            name="Ashes to Ashes",
            artist="David Bowie",
            album="Scary Monsters",
            kind="AAC audio file",
            year=1980,
            rating=80,
            duration_ms=263000,
        ),
        Track(
            track_id=3,
            name="Sexy Boy",
            artist="Air",
            album="Moon Safari",
            kind="AAC audio file",
            year=1998,
            rating=60,
            duration_ms=298000,
            remote=True,
        ),
        Track(
            track_id=4,
            name="Cherry Blossom Girl",
            artist="Air",
            album="Talkie Walkie",
            kind="Purchased AAC audio file",
            year=2004,
            rating=40,
            duration_ms=219000,
        ),
        Track(track_id=5, name="Untitled", kind="MPEG audio file"),
    ]


@pytest.fixture
def sample_playlists() -> list[Playlist]:
    """A small folder hierarchy with an ignored built-in playlist."""
    return [
        Playlist("P01", "Library", track_ids=(1, 2, 3, 4, 5)),
        Playlist("P02", "Favourites", track_ids=(1, 3)),
        Playlist("P03", "Decades", is_folder=True),
        Playlist("P04", "70s", parent_id="P03", track_ids=(1,)),
        Playlist("P05", "80s", parent_id="P03", track_ids=(2,)),
        Playlist("P06", "Electronic", is_folder=True),
        Playlist("P07", "French", parent_id="P06", is_folder=True),
        Playlist("P08", "Air", parent_id="P07", track_ids=(3, 4)),
        Playlist("P09", "Archive", is_folder=True),
        Playlist("P10", "Old Mix", parent_id="P09", track_ids=(1, 2, 3)),
    ]


@pytest.fixture
def sample_snapshot(temp_dir: Path) -> Path:
    """Write a JSON library snapshot."""
    data = {
        "playlists": [
            {"id": "P01", "name": "Library", "tracks": [1, 2, 3, 4]},
            {"id": "P02", "name": "Favourites", "tracks": [1, 3]},
            {"id": "P03", "name": "Decades", "folder": True},
            {"id": "P04", "name": "70s", "parent_id": "P03", "tracks": [1]},
            {"id": "P05", "name": "80s", "parent_id": "P03", "tracks": [2]},
            {"id": "P06", "name": "Road Trip", "tracks": [1, 2, 3]},
        ],
        "tracks": [
            {
                "id": 1,
                "name": "Heroes",
                "artist": "David Bowie",
                "year": 1977,
                "rating": 100,
                "duration_ms": 371000,
                "kind": "MPEG audio file",
            },
            {
                "id": 2,
                "name": "Ashes to Ashes",
                "artist": "David Bowie",
                "year": 1980,
                "rating": 80,
                "duration_ms": 263000,
                "kind": "AAC audio file",
            },
            {
                "id": 3,
                "name": "Sexy Boy",
                "artist": "Air",
                "year": 1998,
                "rating": 60,
                "duration_ms": 298000,
                "kind": "AAC audio file",
                "remote": True,
            },
            {
                "id": 4,
                "name": "Cherry Blossom Girl",
                "artist": "Air",
                "year": 2004,
                "duration_ms": 9000,
                "kind": "AAC audio file",
            },
        ],
    }
    path = temp_dir / "library.json"
    path.write_text(json.dumps(data))
    return path
