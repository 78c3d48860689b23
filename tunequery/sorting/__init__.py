"""Type-aware multi-key row ordering."""

from tunequery.sorting.comparator import (
    ARTIST_COLUMN_KINDS,
    TRACK_COLUMN_KINDS,
    ColumnKind,
    RowComparator,
    SortDirection,
    SortKey,
    compare_rows,
    compare_values,
    parse_sort_spec,
)

__all__ = [
    "ARTIST_COLUMN_KINDS",
    "TRACK_COLUMN_KINDS",
    "ColumnKind",
    "RowComparator",
    "SortDirection",
    "SortKey",
    "compare_rows",
    "compare_values",
    "parse_sort_spec",
]
