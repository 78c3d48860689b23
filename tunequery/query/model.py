"""Filter clause vocabulary and query validation."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeVar

from tunequery.exceptions import TooManyLogicGroupsError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=enum.Enum)


class Logic(enum.Enum):
    """How a clause combines with its neighbours: match all rules or any rule."""

    AND = "All"
    OR = "Any"


class Subject(enum.Enum):
    """The track attribute a clause tests."""

    ARTIST = "Artist"
    KIND = "Kind"
    PLAYLIST_COUNT = "Playlist Count"
    RATING = "Rating"
    YEAR = "Year"
    NAME = "Name"


class Operator(enum.Enum):
    """The comparison a clause applies."""

    IS = "is"
    LESS = "less than or equal"
    GREATER = "greater than or equal"
    CONTAINS = "contains"
    IS_NOT = "is not"


def _build_label_table(enum_cls: type[E]) -> Mapping[str, E]:
    return MappingProxyType({member.value: member for member in enum_cls})


# Reverse lookup tables, built once at import.
_LABEL_TABLES: Mapping[type[enum.Enum], Mapping[str, enum.Enum]] = MappingProxyType(
    {enum_cls: _build_label_table(enum_cls) for enum_cls in (Logic, Subject, Operator)}
)


def label_of(member: Logic | Subject | Operator) -> str:
    """Return the display label of an enum member."""
    return member.value


def value_of_label(enum_cls: type[E], label: str) -> E | None:
    """Reverse lookup an enum member from its display label.

    Matching is exact and case-sensitive.

    Args:
        enum_cls: One of ``Logic``, ``Subject`` or ``Operator``.
        label: Display label to look up.

    Returns:
        The member, or None if no member carries that label.
    """
    return _LABEL_TABLES[enum_cls].get(label)  # type: ignore[return-value]


def labels(enum_cls: type[enum.Enum]) -> list[str]:
    """Return all display labels of an enum in declaration order."""
    return list(_LABEL_TABLES[enum_cls])


@dataclass(frozen=True)
class Clause:
    """One ``(logic, subject, operator, text)`` unit, e.g. ``All Year greater than or equal 2001``.

    A ``logic`` of None inherits the logic currently in effect.
    """

    subject: Subject
    operator: Operator
    text: str
    logic: Logic | None = None


@dataclass(frozen=True)
class Query:
    """A validated clause sequence.

    ``primary`` clauses combine with ``logic``; the ``subgroup`` clauses
    combine with the opposite logic and the subgroup as a whole joins the
    primary clauses as one more term.
    """

    logic: Logic = Logic.AND
    primary: tuple[Clause, ...] = ()
    subgroup: tuple[Clause, ...] = field(default=())

    @property
    def clauses(self) -> tuple[Clause, ...]:
        return self.primary + self.subgroup

    @property
    def subgroup_logic(self) -> Logic:
        return Logic.OR if self.logic is Logic.AND else Logic.AND


def validate_query(clauses: Iterable[Clause]) -> Query:
    """Validate a clause sequence and fold it into a Query.

    The first clause's logic (AND if absent) applies until a clause switches
    it. One switch opens a subgroup, a second switch back closes it; any
    further switch is rejected.

    Args:
        clauses: Clauses in the order the user entered them.

    Returns:
        The validated Query, with the subgroup moved after the primary clauses.

    Raises:
        TooManyLogicGroupsError: If the logic changes a third time.
    """
    items = list(clauses)
    if not items:
        return Query()

    initial = items[0].logic or Logic.AND
    current = initial
    start: int | None = None
    stop: int | None = None

    for index, clause in enumerate(items):
        if clause.logic is None or clause.logic is current:
            continue
        if start is None:
            start = index
        elif stop is None:
            stop = index
        else:
            logger.warning("multiple subgroups detected, start=%d stop=%d", start, stop)
            raise TooManyLogicGroupsError(start, stop, index)
        current = clause.logic

    if start is None:
        return Query(logic=initial, primary=tuple(items))

    end = stop if stop is not None else len(items)
    logger.debug("subgroup detected, start=%d stop=%s", start, stop)
    return Query(
        logic=initial,
        primary=tuple(items[:start] + items[end:]),
        subgroup=tuple(items[start:end]),
    )
