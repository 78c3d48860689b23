"""Unit tests for query string rendering and parsing."""

from __future__ import annotations

import pytest

from tunequery.exceptions import QueryParseError
from tunequery.query.model import Clause, Logic, Operator, Subject
from tunequery.query.parser import parse_query_string, render_clause, render_query


class TestRender:
    def test_single_clause(self) -> None:
        clause = Clause(Subject.YEAR, Operator.GREATER, "2001", logic=Logic.AND)
        assert render_clause(clause) == "All Year greater than or equal 2001"

    def test_inherited_logic_omitted(self) -> None:
        clause = Clause(Subject.ARTIST, Operator.CONTAINS, "Bowie")
        assert render_clause(clause) == "Artist contains Bowie"

    def test_multiple_clauses(self) -> None:
        clauses = [
            Clause(Subject.YEAR, Operator.LESS, "1990", logic=Logic.AND),
            Clause(Subject.RATING, Operator.IS, "5", logic=Logic.OR),
        ]
        assert render_query(clauses) == "All Year less than or equal 1990; Any Rating is 5"

    def test_text_with_separator_is_quoted(self) -> None:
        clause = Clause(Subject.NAME, Operator.IS, "a;b")
        assert render_clause(clause) == 'Name is "a;b"'

    def test_empty_text_is_quoted(self) -> None:
        clause = Clause(Subject.KIND, Operator.IS, "")
        assert render_clause(clause) == 'Kind is ""'


class TestParse:
    def test_empty_string(self) -> None:
        assert parse_query_string("   ") == []

    def test_single_clause(self) -> None:
        [clause] = parse_query_string("All Year greater than or equal 2001")
        assert clause == Clause(Subject.YEAR, Operator.GREATER, "2001", logic=Logic.AND)

    def test_clause_without_logic(self) -> None:
        [clause] = parse_query_string("Artist contains David Bowie")
        assert clause.logic is None
        assert clause.subject is Subject.ARTIST
        assert clause.operator is Operator.CONTAINS
        assert clause.text == "David Bowie"

    def test_multiword_subject(self) -> None:
        [clause] = parse_query_string("Playlist Count is not 0")
        assert clause.subject is Subject.PLAYLIST_COUNT
        assert clause.operator is Operator.IS_NOT
        assert clause.text == "0"

    def test_is_followed_by_word_starting_with_not(self) -> None:
        [clause] = parse_query_string("Name is nothing else")
        assert clause.operator is Operator.IS
        assert clause.text == "nothing else"

    def test_multiple_clauses_trim_text(self) -> None:
        clauses = parse_query_string("Any Rating is 5 ;Rating is 4;  All Kind contains AAC")
        assert [c.text for c in clauses] == ["5", "4", "AAC"]
        assert [c.logic for c in clauses] == [Logic.OR, None, Logic.AND]

    def test_quoted_text(self) -> None:
        [clause] = parse_query_string('Name is "say \\"hi\\"; bye"')
        assert clause.text == 'say "hi"; bye'

    def test_round_trip(self) -> None:
        clauses = [
            Clause(Subject.ARTIST, Operator.IS, "Air", logic=Logic.AND),
            Clause(Subject.NAME, Operator.CONTAINS, " padded "),
            Clause(Subject.YEAR, Operator.LESS, "2004", logic=Logic.OR),
            Clause(Subject.KIND, Operator.IS, ""),
        ]
        assert parse_query_string(render_query(clauses)) == clauses

    def test_unknown_subject(self) -> None:
        with pytest.raises(QueryParseError):
            parse_query_string("Genre is Rock")

    def test_lowercase_label_rejected(self) -> None:
        with pytest.raises(QueryParseError):
            parse_query_string("all Year is 2001")

    def test_missing_text(self) -> None:
        with pytest.raises(QueryParseError):
            parse_query_string("Year is")

    def test_is_with_text_starting_with_not_round_trips(self) -> None:
        clause = Clause(Subject.NAME, Operator.IS, "not fade away")
        rendered = render_clause(clause)
        assert rendered == 'Name is "not fade away"'
        assert parse_query_string(rendered) == [clause]

    def test_is_not_with_text_starting_with_not_round_trips(self) -> None:
        clauses = [
            Clause(Subject.YEAR, Operator.IS_NOT, "not 5", logic=Logic.AND),
            Clause(Subject.NAME, Operator.CONTAINS, "nothing"),
        ]
        assert render_query(clauses).endswith("Name contains nothing")
        assert parse_query_string(render_query(clauses)) == clauses
