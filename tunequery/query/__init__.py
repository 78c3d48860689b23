"""Filter clause model, validation, evaluation and query strings."""

from tunequery.query.evaluate import check_clause, filter_tracks, matches
from tunequery.query.model import (
    Clause,
    Logic,
    Operator,
    Query,
    Subject,
    label_of,
    labels,
    validate_query,
    value_of_label,
)
from tunequery.query.parser import parse_query_string, render_clause, render_query

__all__ = [
    "Clause",
    "Logic",
    "Operator",
    "Query",
    "Subject",
    "check_clause",
    "filter_tracks",
    "label_of",
    "labels",
    "matches",
    "parse_query_string",
    "render_clause",
    "render_query",
    "validate_query",
    "value_of_label",
]
