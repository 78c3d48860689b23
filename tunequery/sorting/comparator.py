"""Multi-key, type-aware ordering of display rows.

A row maps column names to display strings. Each column is compared
according to its ColumnKind; unlisted columns compare lexically.
"""

from __future__ import annotations

import enum
import functools
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from tunequery.exceptions import ColumnValueError
from tunequery.utils.durations import parse_duration

Row = Mapping[str, str]


class ColumnKind(enum.Enum):
    """How the values of a column are interpreted when sorting."""

    LEXICAL = "lexical"
    NUMERIC = "numeric"
    DURATION = "duration"


class SortDirection(enum.Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class SortKey:
    """One level of a multi-key ordering."""

    column: str
    direction: SortDirection = SortDirection.ASCENDING


TRACK_COLUMN_KINDS: Mapping[str, ColumnKind] = MappingProxyType(
    {
        "Number": ColumnKind.NUMERIC,
        "Duration": ColumnKind.DURATION,
    }
)

ARTIST_COLUMN_KINDS: Mapping[str, ColumnKind] = MappingProxyType(
    {
        "TotalLocalTracks": ColumnKind.NUMERIC,
        "TotalLocalTime": ColumnKind.DURATION,
        "TotalRemoteTracks": ColumnKind.NUMERIC,
        "TotalRemoteTime": ColumnKind.DURATION,
    }
)


def _sign(a: int | str, b: int | str) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


def _parse_number(column: str, value: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise ColumnValueError(column, value, ColumnKind.NUMERIC.value)
    return int(value)


def _parse_time(column: str, value: str) -> int:
    try:
        return parse_duration(value)
    except ValueError:
        raise ColumnValueError(column, value, ColumnKind.DURATION.value) from None


def compare_values(column: str, a: str | None, b: str | None, kind: ColumnKind) -> int:
    """Compare two values of one column in ascending order.

    Absent values sort first; two absent values are equal.

    Raises:
        ColumnValueError: If a numeric or duration column holds an unparseable value.
    """
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1

    if kind is ColumnKind.NUMERIC:
        return _sign(_parse_number(column, a), _parse_number(column, b))
    if kind is ColumnKind.DURATION:
        return _sign(_parse_time(column, a), _parse_time(column, b))
    return _sign(a, b)


def compare_rows(
    row_a: Row,
    row_b: Row,
    sort_keys: Sequence[SortKey],
    column_kinds: Mapping[str, ColumnKind] | None = None,
) -> int:
    """Three-way compare two rows by an ordered list of sort keys.

    Args:
        row_a: First row.
        row_b: Second row.
        sort_keys: Keys in priority order; empty means every row is equal.
        column_kinds: Column name to ColumnKind; unlisted columns are lexical.

    Returns:
        -1, 0 or 1.

    Raises:
        ColumnValueError: If a numeric or duration column holds an unparseable value.
    """
    kinds = column_kinds or {}
    for key in sort_keys:
        kind = kinds.get(key.column, ColumnKind.LEXICAL)
        result = compare_values(key.column, row_a.get(key.column), row_b.get(key.column), kind)
        if result:
            return -result if key.direction is SortDirection.DESCENDING else result
    return 0


class RowComparator:
    """Comparator bound to one sort operation.

    Usage:
        comparator = RowComparator([SortKey("Artist"), SortKey("Number")], TRACK_COLUMN_KINDS)
        rows = comparator.sort(rows)
    """

    def __init__(
        self,
        sort_keys: Iterable[SortKey] = (),
        column_kinds: Mapping[str, ColumnKind] | None = None,
    ) -> None:
        self.sort_keys: tuple[SortKey, ...] = tuple(sort_keys)
        self.column_kinds: Mapping[str, ColumnKind] = MappingProxyType(dict(column_kinds or {}))

    def __call__(self, row_a: Row, row_b: Row) -> int:
        return compare_rows(row_a, row_b, self.sort_keys, self.column_kinds)

    def sort(self, rows: Iterable[Row]) -> list[Row]:
        """Return the rows in sorted order (stable for equal rows)."""
        return sorted(rows, key=functools.cmp_to_key(self))


def parse_sort_spec(spec: str) -> list[SortKey]:
    """Build sort keys from ``"-Duration,Name"``; a leading ``-`` means descending."""
    keys: list[SortKey] = []
    for part in spec.split(","):
        column = part.strip()
        if not column:
            continue
        if column.startswith("-"):
            keys.append(SortKey(column[1:].strip(), SortDirection.DESCENDING))
        else:
            keys.append(SortKey(column))
    return keys
