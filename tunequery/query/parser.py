"""Render clauses as query strings and parse them back."""

from __future__ import annotations

import re
from collections.abc import Iterable
from importlib import resources
from typing import Any

from lark import Lark, Token, Transformer, UnexpectedInput

from tunequery.exceptions import QueryParseError
from tunequery.query.model import Clause, Logic, Operator, Subject, value_of_label

CLAUSE_SEPARATOR = "; "

_ESCAPE_RE = re.compile(r"\\(.)")

# Bare text starting with "not " would be read back as part of "is not".
_LEADING_NOT_RE = re.compile(r"not\s")


def _load_grammar() -> str:
    """Load the Lark grammar from the package resources."""
    return resources.files("tunequery.query").joinpath("grammar.lark").read_text()


_parser = Lark(_load_grammar(), parser="lalr")


class _ClauseTransformer(Transformer):
    """Transform the Lark parse tree into Clause objects."""

    def start(self, items: list[Any]) -> list[Clause]:
        return list(items)

    def clause(self, items: list[Any]) -> Clause:
        logic: Logic | None = None
        if isinstance(items[0], Logic):
            logic = items.pop(0)
        subject, operator, text = items
        return Clause(subject=subject, operator=operator, text=text, logic=logic)

    def logic(self, items: list[Token]) -> Logic:
        return value_of_label(Logic, str(items[0]))

    def subject(self, items: list[Token]) -> Subject:
        return value_of_label(Subject, str(items[0]))

    def operator(self, items: list[Token]) -> Operator:
        return value_of_label(Operator, str(items[0]))

    def quoted_value(self, items: list[Token]) -> str:
        raw = str(items[0])[1:-1]
        return _ESCAPE_RE.sub(r"\1", raw)

    def bare_value(self, items: list[Token]) -> str:
        return str(items[0]).strip()


_transformer = _ClauseTransformer()


def _needs_quotes(text: str) -> bool:
    if not text or text != text.strip() or ";" in text or text.startswith('"'):
        return True
    return _LEADING_NOT_RE.match(text) is not None


def _render_text(text: str) -> str:
    if not _needs_quotes(text):
        return text
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_clause(clause: Clause) -> str:
    """Render one clause, e.g. ``All Year greater than or equal 2001``."""
    parts = [clause.subject.value, clause.operator.value, _render_text(clause.text)]
    if clause.logic is not None:
        parts.insert(0, clause.logic.value)
    return " ".join(parts)


def render_query(clauses: Iterable[Clause]) -> str:
    """Render clauses as a single query string."""
    return CLAUSE_SEPARATOR.join(render_clause(c) for c in clauses)


def parse_query_string(query_string: str) -> list[Clause]:
    """Parse a query string into clauses.

    The result is not validated; pass it to ``validate_query``.

    Args:
        query_string: Text produced by ``render_query`` or typed by a user.

    Returns:
        The clauses in order. An empty string yields no clauses.

    Raises:
        QueryParseError: If the string cannot be parsed.
    """
    query_string = query_string.strip()
    if not query_string:
        return []

    try:
        tree = _parser.parse(query_string)
        return _transformer.transform(tree)
    except UnexpectedInput as e:
        raise QueryParseError(query_string, str(e)) from e
