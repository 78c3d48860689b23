"""Build display rows (column name -> text) for tracks and artists."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tunequery.library.models import Track
from tunequery.utils.durations import format_duration

TRACK_COLUMNS: tuple[str, ...] = (
    "Number",
    "ID",
    "Name",
    "Artist",
    "Album",
    "Kind",
    "Duration",
    "Year",
    "Rating",
    "Play Count",
)

ARTIST_COLUMNS: tuple[str, ...] = (
    "Artist",
    "TotalLocalTracks",
    "TotalLocalTime",
    "TotalRemoteTracks",
    "TotalRemoteTime",
)


def track_row(track: Track, number: int) -> dict[str, str]:
    """Build the display row of one track; absent values are omitted."""
    row: dict[str, str] = {"Number": str(number), "ID": str(track.track_id)}
    for column, value in (
        ("Name", track.name),
        ("Artist", track.artist),
        ("Album", track.album),
        ("Kind", track.kind),
    ):
        if value is not None:
            row[column] = value
    if track.duration_ms is not None:
        row["Duration"] = format_duration(track.duration_ms)
    if track.year:
        row["Year"] = str(track.year)
    row["Rating"] = str(track.corrected_rating)
    row["Play Count"] = str(track.play_count)
    return row


def track_rows(tracks: Iterable[Track]) -> list[dict[str, str]]:
    """Build display rows; ``Number`` is the 1-based position in the input."""
    return [track_row(track, number) for number, track in enumerate(tracks, start=1)]


@dataclass
class _ArtistTotals:
    local_tracks: int = 0
    local_ms: int = 0
    remote_tracks: int = 0
    remote_ms: int = 0


def artist_rows(tracks: Iterable[Track]) -> list[dict[str, str]]:
    """Summarize track counts and total time per artist.

    Tracks without an artist are skipped. Rows come out in order of first
    appearance; sort them with ``ARTIST_COLUMN_KINDS``.
    """
    totals: dict[str, _ArtistTotals] = {}
    for track in tracks:
        if track.artist is None:
            continue
        entry = totals.setdefault(track.artist, _ArtistTotals())
        duration = track.duration_ms or 0
        if track.remote:
            entry.remote_tracks += 1
            entry.remote_ms += duration
        else:
            entry.local_tracks += 1
            entry.local_ms += duration

    return [
        {
            "Artist": artist,
            "TotalLocalTracks": str(entry.local_tracks),
            "TotalLocalTime": format_duration(entry.local_ms),
            "TotalRemoteTracks": str(entry.remote_tracks),
            "TotalRemoteTime": format_duration(entry.remote_ms),
        }
        for artist, entry in totals.items()
    ]
