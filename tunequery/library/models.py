"""Plain library records handed to the query and hierarchy engines."""

from __future__ import annotations

from dataclasses import dataclass

# Library ratings are stored as 0-100; the UI shows 0-5 stars.
RATING_DIVISOR = 20


@dataclass(frozen=True)
class Playlist:
    """A playlist or folder from the library snapshot.

    Attributes:
        playlist_id: Stable unique identifier (persistent ID).
        name: Display name; None for nameless entries.
        parent_id: Identifier of the enclosing folder, None for roots.
        is_folder: Whether this entry is a folder of other playlists.
        track_ids: Track identifiers in playlist order.
        ignored: Excluded from the hierarchy and from track counts.
        bypassed: Excluded from track playlist counts only.
    """

    playlist_id: str
    name: str | None
    parent_id: str | None = None
    is_folder: bool = False
    track_ids: tuple[int, ...] = ()
    ignored: bool = False
    bypassed: bool = False


@dataclass(frozen=True)
class Track:
    """A track from the library snapshot."""

    track_id: int
    name: str | None = None
    artist: str | None = None
    album: str | None = None
    kind: str | None = None
    genre: str | None = None
    year: int = 0
    rating: int = 0
    duration_ms: int | None = None
    play_count: int = 0
    remote: bool = False
    playlist_count: int = 0

    @property
    def corrected_rating(self) -> int:
        """Rating on the 0-5 star scale."""
        return self.rating // RATING_DIVISOR
