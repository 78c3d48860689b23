"""Find tracks that share a name and match on chosen attributes.

Candidates are tracks with the same name. A pair of candidates is a
duplicate when every selected criterion holds for it. The exact preset
requires artist, album, kind, duration, year and rating to agree.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Collection, Iterable

from tunequery.exceptions import DuplicateCriteriaError
from tunequery.library.models import Track
from tunequery.utils.durations import format_duration

logger = logging.getLogger(__name__)


class MatchCriterion(enum.Enum):
    """An attribute two same-named tracks are compared on."""

    ARTIST = "artist"
    NOT_ARTIST = "not-artist"
    ALBUM = "album"
    KIND = "kind"
    DURATION = "duration"
    YEAR = "year"
    RATING = "rating"


EXACT_CRITERIA: frozenset[MatchCriterion] = frozenset(
    {
        MatchCriterion.ARTIST,
        MatchCriterion.ALBUM,
        MatchCriterion.KIND,
        MatchCriterion.DURATION,
        MatchCriterion.YEAR,
        MatchCriterion.RATING,
    }
)


def _display_duration(track: Track) -> str | None:
    # Durations differing by milliseconds still show the same MM:SS.
    if track.duration_ms is None:
        return None
    return format_duration(track.duration_ms)


def tracks_match(a: Track, b: Track, criteria: Collection[MatchCriterion]) -> bool:
    """Return whether two tracks agree on every criterion.

    Absent values are equal to each other and to nothing else.
    """
    for criterion in criteria:
        if criterion is MatchCriterion.ARTIST:
            ok = a.artist == b.artist
        elif criterion is MatchCriterion.NOT_ARTIST:
            ok = a.artist != b.artist
        elif criterion is MatchCriterion.ALBUM:
            ok = a.album == b.album
        elif criterion is MatchCriterion.KIND:
            ok = a.kind == b.kind
        elif criterion is MatchCriterion.DURATION:
            ok = _display_duration(a) == _display_duration(b)
        elif criterion is MatchCriterion.YEAR:
            ok = a.year == b.year
        else:
            ok = a.corrected_rating == b.corrected_rating
        if not ok:
            return False
    return True


def find_duplicates(
    tracks: Iterable[Track],
    criteria: Collection[MatchCriterion] = EXACT_CRITERIA,
    *,
    include_remote: bool = True,
) -> list[Track]:
    """Return tracks that duplicate another track under the given criteria.

    Args:
        tracks: Tracks to search.
        criteria: Attributes that must agree (or, for NOT_ARTIST, differ).
            An empty collection matches on name alone.
        include_remote: Whether remote tracks take part.

    Returns:
        Duplicate tracks, grouped by name in name order; each group keeps
        input order and lists every track once.

    Raises:
        DuplicateCriteriaError: If both ARTIST and NOT_ARTIST are requested.
    """
    selected = frozenset(criteria)
    if {MatchCriterion.ARTIST, MatchCriterion.NOT_ARTIST} <= selected:
        raise DuplicateCriteriaError("Cannot match on both artist and not-artist")

    by_name: dict[str, list[Track]] = {}
    for track in tracks:
        if track.name is None or (track.remote and not include_remote):
            continue
        by_name.setdefault(track.name, []).append(track)

    result: list[Track] = []
    for name in sorted(by_name):
        candidates = by_name[name]
        if len(candidates) < 2:
            continue
        logger.debug("checking possible duplicate '%s', %d tracks", name, len(candidates))

        matched: set[int] = set()
        for i, first in enumerate(candidates):
            for second in candidates[i + 1 :]:
                if tracks_match(first, second, selected):
                    matched.update((first.track_id, second.track_id))
        result.extend(t for t in candidates if t.track_id in matched)

    logger.info("found %d duplicate tracks", len(result))
    return result
