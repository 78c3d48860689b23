"""Load a JSON dump of already-parsed playlist and track records.

Expected layout::

    {
      "playlists": [
        {"id": "A1", "name": "Rock", "parent_id": null, "folder": true, "tracks": []}
      ],
      "tracks": [
        {"id": 1, "name": "Heroes", "artist": "David Bowie", "year": 1977,
         "rating": 80, "duration_ms": 371000, "kind": "MPEG audio file"}
      ]
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tunequery.exceptions import SnapshotError
from tunequery.library.models import Playlist, Track

logger = logging.getLogger(__name__)


@dataclass
class LibrarySnapshot:
    """Playlists and tracks read from one snapshot file."""

    playlists: list[Playlist] = field(default_factory=list)
    tracks: list[Track] = field(default_factory=list)


def _playlist_from_dict(data: dict[str, Any]) -> Playlist:
    parent_id = data.get("parent_id")
    return Playlist(
        playlist_id=str(data["id"]),
        name=data.get("name"),
        parent_id=str(parent_id) if parent_id is not None else None,
        is_folder=bool(data.get("folder", False)),
        track_ids=tuple(int(t) for t in data.get("tracks", ())),
    )


def _track_from_dict(data: dict[str, Any]) -> Track:
    duration_ms = data.get("duration_ms")
    return Track(
        track_id=int(data["id"]),
        name=data.get("name"),
        artist=data.get("artist"),
        album=data.get("album"),
        kind=data.get("kind"),
        genre=data.get("genre"),
        year=int(data.get("year") or 0),
        rating=int(data.get("rating") or 0),
        duration_ms=int(duration_ms) if duration_ms is not None else None,
        play_count=int(data.get("play_count") or 0),
        remote=bool(data.get("remote", False)),
    )


def load_snapshot(path: Path) -> LibrarySnapshot:
    """Load playlists and tracks from a JSON snapshot.

    Args:
        path: Snapshot file.

    Returns:
        The records, in file order.

    Raises:
        SnapshotError: If the file is missing or not a valid snapshot.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SnapshotError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise SnapshotError(path, f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise SnapshotError(path, "top level must be an object")

    try:
        snapshot = LibrarySnapshot(
            playlists=[_playlist_from_dict(p) for p in data.get("playlists", [])],
            tracks=[_track_from_dict(t) for t in data.get("tracks", [])],
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise SnapshotError(path, f"malformed record: {e}") from e

    logger.info(
        "loaded %d playlists and %d tracks from %s",
        len(snapshot.playlists),
        len(snapshot.tracks),
        path,
    )
    return snapshot
