"""Mark ignored and bypassed playlists and count track memberships."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Collection, Iterable
from dataclasses import dataclass, replace

from tunequery.library.models import Playlist, Track

logger = logging.getLogger(__name__)

# Built-in library playlists that are hidden by default.
DEFAULT_IGNORED_PLAYLISTS: tuple[str, ...] = (
    "Downloaded",
    "Library",
    "Movies",
    "Music",
    "Podcasts",
    "Purchased",
    "TV Shows",
)


@dataclass(frozen=True)
class BypassRule:
    """Exclude a playlist (and optionally its descendants) from playlist counts."""

    playlist_name: str
    include_children: bool = False


def is_playlist_ignored(name: str | None, ignored_names: Collection[str]) -> bool:
    """Return whether a playlist name is on the ignore list (exact match)."""
    return name is not None and name in ignored_names


def _is_bypassed(
    playlist: Playlist,
    by_id: dict[str, Playlist],
    rules: dict[str, BypassRule],
) -> bool:
    if playlist.name in rules:
        return True

    seen = {playlist.playlist_id}
    current = playlist
    while current.parent_id is not None and current.parent_id not in seen:
        parent = by_id.get(current.parent_id)
        if parent is None:
            break
        rule = rules.get(parent.name) if parent.name is not None else None
        if rule is not None and rule.include_children:
            logger.debug(
                "bypassing '%s' due to parent playlist '%s'", playlist.name, parent.name
            )
            return True
        seen.add(parent.playlist_id)
        current = parent
    return False


def mark_playlists(
    playlists: Iterable[Playlist],
    ignored_names: Collection[str] = DEFAULT_IGNORED_PLAYLISTS,
    bypass_rules: Iterable[BypassRule] = (),
) -> list[Playlist]:
    """Return copies of the playlists with ``ignored`` and ``bypassed`` set.

    Args:
        playlists: Snapshot of playlist records.
        ignored_names: Playlist names hidden from the hierarchy.
        bypass_rules: Playlists whose membership does not count toward a
            track's playlist count.

    Returns:
        Marked playlists in input order.
    """
    items = list(playlists)
    by_id = {p.playlist_id: p for p in items}
    rules = {rule.playlist_name: rule for rule in bypass_rules}

    return [
        replace(
            p,
            ignored=is_playlist_ignored(p.name, ignored_names),
            bypassed=_is_bypassed(p, by_id, rules),
        )
        for p in items
    ]


def count_track_playlists(playlists: Iterable[Playlist], tracks: Iterable[Track]) -> list[Track]:
    """Return copies of the tracks with ``playlist_count`` filled in.

    Only non-folder playlists that are neither ignored nor bypassed count.
    A track listed twice in one playlist counts once for that playlist.
    """
    counts: Counter[int] = Counter()
    for playlist in playlists:
        if playlist.is_folder or playlist.ignored or playlist.bypassed:
            continue
        counts.update(set(playlist.track_ids))

    return [replace(t, playlist_count=counts[t.track_id]) for t in tracks]
