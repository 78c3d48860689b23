"""Unit tests for multi-key row ordering."""

from __future__ import annotations

import pytest

from tunequery.exceptions import ColumnValueError, InternalError
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

DESC = SortDirection.DESCENDING


# ---------------------------------------------------------------------------
# Single values
# ---------------------------------------------------------------------------


class TestCompareValues:
    def test_lexical(self) -> None:
        assert compare_values("Name", "Air", "Bowie", ColumnKind.LEXICAL) == -1
        assert compare_values("Name", "Bowie", "Air", ColumnKind.LEXICAL) == 1
        assert compare_values("Name", "Air", "Air", ColumnKind.LEXICAL) == 0

    def test_lexical_orders_digits_as_text(self) -> None:
        assert compare_values("ID", "10", "2", ColumnKind.LEXICAL) == -1

    def test_numeric(self) -> None:
        assert compare_values("Number", "2", "10", ColumnKind.NUMERIC) == -1
        assert compare_values("Number", "007", "7", ColumnKind.NUMERIC) == 0

    def test_duration(self) -> None:
        assert compare_values("Duration", "01:05", "00:59", ColumnKind.DURATION) == 1
        assert compare_values("Duration", "1:00:00", "59:59", ColumnKind.DURATION) == 1
        assert compare_values("Duration", "01:00:00", "60:00", ColumnKind.DURATION) == 0

    @pytest.mark.parametrize("kind", list(ColumnKind))
    def test_absent_first(self, kind) -> None:
        present = "1" if kind is ColumnKind.NUMERIC else "00:01"
        assert compare_values("X", None, present, kind) == -1
        assert compare_values("X", present, None, kind) == 1
        assert compare_values("X", None, None, kind) == 0

    def test_bad_numeric(self) -> None:
        with pytest.raises(ColumnValueError) as exc_info:
            compare_values("Number", "2", "two", ColumnKind.NUMERIC)
        assert exc_info.value.column == "Number"
        assert exc_info.value.value == "two"
        assert isinstance(exc_info.value, InternalError)

    def test_negative_numeric_rejected(self) -> None:
        with pytest.raises(ColumnValueError):
            compare_values("Number", "-1", "1", ColumnKind.NUMERIC)

    def test_bad_duration(self) -> None:
        with pytest.raises(ColumnValueError):
            compare_values("Duration", "1m", "00:30", ColumnKind.DURATION)


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------


class TestCompareRows:
    def test_no_keys_means_equal(self) -> None:
        assert compare_rows({"Name": "a"}, {"Name": "b"}, []) == 0

    def test_tie_breaks_on_next_key(self) -> None:
        a = {"Artist": "Air", "Name": "Sexy Boy"}
        b = {"Artist": "Air", "Name": "Cherry Blossom Girl"}
        keys = [SortKey("Artist"), SortKey("Name")]
        assert compare_rows(a, b, keys) == 1

    def test_descending_negates(self) -> None:
        a = {"Year": "1977"}
        b = {"Year": "1980"}
        assert compare_rows(a, b, [SortKey("Year")]) == -1
        assert compare_rows(a, b, [SortKey("Year", DESC)]) == 1

    def test_descending_puts_absent_last(self) -> None:
        assert compare_rows({}, {"Year": "1977"}, [SortKey("Year", DESC)]) == 1

    def test_antisymmetric(self) -> None:
        rows = [{"Number": "2"}, {"Number": "10"}, {}, {"Number": "10"}]
        keys = [SortKey("Number", DESC)]
        for a in rows:
            for b in rows:
                assert compare_rows(a, b, keys, TRACK_COLUMN_KINDS) == -compare_rows(
                    b, a, keys, TRACK_COLUMN_KINDS
                )

    def test_single_key_transitive(self) -> None:
        rows = [{"Duration": d} for d in ("00:59", "1:00:00", "01:05", "59:59")] + [{}]
        keys = [SortKey("Duration")]
        for a in rows:
            for b in rows:
                for c in rows:
                    ab = compare_rows(a, b, keys, TRACK_COLUMN_KINDS)
                    bc = compare_rows(b, c, keys, TRACK_COLUMN_KINDS)
                    if ab <= 0 and bc <= 0:
                        assert compare_rows(a, c, keys, TRACK_COLUMN_KINDS) <= 0

    def test_column_kinds_tables(self) -> None:
        assert TRACK_COLUMN_KINDS["Number"] is ColumnKind.NUMERIC
        assert TRACK_COLUMN_KINDS["Duration"] is ColumnKind.DURATION
        assert ARTIST_COLUMN_KINDS["TotalLocalTracks"] is ColumnKind.NUMERIC
        assert ARTIST_COLUMN_KINDS["TotalRemoteTime"] is ColumnKind.DURATION
        assert "Name" not in TRACK_COLUMN_KINDS


class TestRowComparator:
    def test_sort_numeric_then_lexical(self) -> None:
        rows = [
            {"Number": "10", "Name": "b"},
            {"Number": "2", "Name": "z"},
            {"Number": "2", "Name": "a"},
        ]
        comparator = RowComparator([SortKey("Number"), SortKey("Name")], TRACK_COLUMN_KINDS)
        assert [r["Name"] for r in comparator.sort(rows)] == ["a", "z", "b"]

    def test_sort_duration_descending(self) -> None:
        rows = [{"Duration": "00:59"}, {"Duration": "1:00:00"}, {"Duration": "01:05"}]
        comparator = RowComparator([SortKey("Duration", DESC)], TRACK_COLUMN_KINDS)
        assert [r["Duration"] for r in comparator.sort(rows)] == ["1:00:00", "01:05", "00:59"]

    def test_sort_is_stable(self) -> None:
        rows = [{"Artist": "Air", "Name": "2"}, {"Artist": "Air", "Name": "1"}]
        assert RowComparator([SortKey("Artist")]).sort(rows) == rows

    def test_callable(self) -> None:
        comparator = RowComparator([SortKey("Name")])
        assert comparator({"Name": "a"}, {"Name": "b"}) == -1


class TestParseSortSpec:
    def test_ascending_and_descending(self) -> None:
        assert parse_sort_spec("Artist, -Duration") == [
            SortKey("Artist"),
            SortKey("Duration", DESC),
        ]

    def test_empty_parts_skipped(self) -> None:
        assert parse_sort_spec(",Name,,") == [SortKey("Name")]
        assert parse_sort_spec("") == []

    def test_column_with_space(self) -> None:
        assert parse_sort_spec("-Play Count") == [SortKey("Play Count", DESC)]
