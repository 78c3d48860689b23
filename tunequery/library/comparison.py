"""Compare the track membership of several playlists."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from tunequery.exceptions import ComparisonError, PlaylistNotFoundError
from tunequery.library.models import Playlist

logger = logging.getLogger(__name__)


@dataclass
class PlaylistComparison:
    """Track ids bucketed by how many of the compared playlists hold them.

    Attributes:
        names: The compared playlist names.
        all: Tracks present in every playlist.
        some: Tracks in more than one playlist, but not all.
        one: Tracks in exactly one playlist.
    """

    names: list[str] = field(default_factory=list)
    all: set[int] = field(default_factory=set)
    some: set[int] = field(default_factory=set)
    one: set[int] = field(default_factory=set)

    def bucket(self, name: str) -> set[int]:
        """Return one bucket by name ("all", "some" or "one")."""
        if name not in ("all", "some", "one"):
            raise ValueError(f"Unknown comparison bucket: {name}")
        return getattr(self, name)


def compare_playlists(playlists: Iterable[Playlist], names: Sequence[str]) -> PlaylistComparison:
    """Compare the tracks of the named playlists.

    Args:
        playlists: Snapshot of playlist records.
        names: At least two playlist names. The first non-folder playlist
            with each name is used.

    Returns:
        The comparison buckets.

    Raises:
        ComparisonError: If fewer than two names are given.
        PlaylistNotFoundError: If a name matches no playlist.
    """
    if len(names) < 2:
        raise ComparisonError("You need at least two playlists for comparison")

    by_name: dict[str, Playlist] = {}
    for playlist in playlists:
        if playlist.is_folder or playlist.name is None:
            continue
        by_name.setdefault(playlist.name, playlist)

    counts: Counter[int] = Counter()
    for name in names:
        playlist = by_name.get(name)
        if playlist is None:
            raise PlaylistNotFoundError(name)
        counts.update(set(playlist.track_ids))

    result = PlaylistComparison(names=list(names))
    total = len(names)
    for track_id, count in counts.items():
        if count == total:
            result.all.add(track_id)
        elif count > 1:
            result.some.add(track_id)
        else:
            result.one.add(track_id)

    logger.debug(
        "compared %d playlists: all=%d some=%d one=%d",
        total,
        len(result.all),
        len(result.some),
        len(result.one),
    )
    return result
