"""Evaluate a validated Query against track records."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tunequery.exceptions import InapplicableOperatorError, InvalidClauseValueError
from tunequery.library.models import Track
from tunequery.query.model import Clause, Logic, Operator, Query, Subject

logger = logging.getLogger(__name__)

_TEXT_OPERATORS: frozenset[Operator] = frozenset({Operator.IS, Operator.CONTAINS})
_NUMERIC_OPERATORS: frozenset[Operator] = frozenset(
    {Operator.IS, Operator.IS_NOT, Operator.GREATER, Operator.LESS}
)


def _text_value(track: Track, subject: Subject) -> str | None:
    if subject is Subject.ARTIST:
        return track.artist
    if subject is Subject.KIND:
        return track.kind
    return track.name


def _numeric_value(track: Track, subject: Subject) -> int:
    if subject is Subject.PLAYLIST_COUNT:
        return track.playlist_count
    if subject is Subject.RATING:
        return track.corrected_rating
    return track.year


def _check_text(clause: Clause, value: str | None) -> bool:
    if clause.operator not in _TEXT_OPERATORS:
        raise InapplicableOperatorError(clause.operator.value, clause.subject.value)
    if value is None:
        return False
    if clause.operator is Operator.IS:
        return value == clause.text
    return clause.text in value


def _check_numeric(clause: Clause, value: int) -> bool:
    if clause.operator not in _NUMERIC_OPERATORS:
        raise InapplicableOperatorError(clause.operator.value, clause.subject.value)
    try:
        target = int(clause.text)
    except ValueError:
        raise InvalidClauseValueError(clause.subject.value, clause.text) from None

    op = clause.operator
    if op is Operator.IS:
        return value == target
    if op is Operator.IS_NOT:
        return value != target
    if op is Operator.GREATER:
        return value >= target
    return value <= target


def check_clause(clause: Clause, track: Track) -> bool:
    """Test a single clause against a track.

    Raises:
        InapplicableOperatorError: If the operator does not apply to the subject.
        InvalidClauseValueError: If a numeric subject gets non-numeric text.
    """
    if clause.subject in (Subject.ARTIST, Subject.KIND, Subject.NAME):
        return _check_text(clause, _text_value(track, clause.subject))
    return _check_numeric(clause, _numeric_value(track, clause.subject))


def _combine(logic: Logic, clauses: Iterable[Clause], track: Track) -> bool:
    if logic is Logic.AND:
        return all(check_clause(c, track) for c in clauses)
    return any(check_clause(c, track) for c in clauses)


def matches(query: Query, track: Track) -> bool:
    """Return whether a track satisfies a query.

    With initial logic AND this is ``all(primary) and any(subgroup)``; with OR
    it is ``any(primary) or all(subgroup)``. An empty query matches everything.
    """
    if not query.clauses:
        return True

    if query.logic is Logic.AND:
        if query.primary and not _combine(Logic.AND, query.primary, track):
            return False
        return not query.subgroup or _combine(Logic.OR, query.subgroup, track)

    if query.primary and _combine(Logic.OR, query.primary, track):
        return True
    if not query.subgroup:
        return False
    return _combine(Logic.AND, query.subgroup, track)


def filter_tracks(query: Query, tracks: Iterable[Track]) -> list[Track]:
    """Return the tracks matching a query, in input order."""
    result = [track for track in tracks if matches(query, track)]
    logger.debug("query matched %d tracks", len(result))
    return result
