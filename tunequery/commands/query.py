"""Filter tracks of a library snapshot with a query string."""

from __future__ import annotations

import json
from pathlib import Path

import click

from tunequery.cli import Context, pass_context
from tunequery.commands._common import (
    EXIT_QUERY_ERROR,
    get_config,
    library_option,
    load_library,
    resolve_sort_keys,
    sort_keys_option,
)
from tunequery.exceptions import QueryError
from tunequery.library.rows import TRACK_COLUMNS, track_rows
from tunequery.query.evaluate import filter_tracks
from tunequery.query.model import validate_query
from tunequery.query.parser import parse_query_string, render_query
from tunequery.sorting.comparator import RowComparator
from tunequery.utils.output import console, error, print_rows, verbose

RIGHT_ALIGNED = ("Number", "ID", "Duration", "Year", "Rating", "Play Count")


@click.command("query")
@click.argument("query", nargs=-1, required=True)
@library_option
@sort_keys_option(default="Artist,Name")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)",
)
@pass_context
def cli(
    ctx: Context,
    query: tuple[str, ...],
    library_path: Path,
    sort_spec: str | None,
    output_format: str,
) -> None:
    """Show tracks matching a filter query.

    QUERY is a list of clauses separated by ";". Each clause is
    [All|Any] SUBJECT OPERATOR TEXT. Multiple arguments are joined
    with spaces.

    \b
    Subjects:  Artist, Kind, Playlist Count, Rating, Year, Name
    Operators: is, is not, contains,
               less than or equal, greater than or equal

    \b
    Examples:
      tunequery query "Artist contains Bowie" -L library.json
      tunequery query "All Year greater than or equal 1990; Any Rating is 5; Rating is 4" -L library.json
    """
    config = get_config(ctx)
    sort_keys = resolve_sort_keys(sort_spec, TRACK_COLUMNS)

    try:
        clauses = parse_query_string(" ".join(query))
        validated = validate_query(clauses)
    except QueryError as e:
        error(f"Invalid query: {e}")
        raise SystemExit(EXIT_QUERY_ERROR)

    verbose(f"Query: {render_query(validated.clauses)}")

    snapshot = load_library(ctx, library_path)
    try:
        matched = filter_tracks(validated, snapshot.tracks)
    except QueryError as e:
        error(str(e))
        raise SystemExit(EXIT_QUERY_ERROR)

    rows = RowComparator(sort_keys, config.track_column_kinds()).sort(track_rows(matched))

    if output_format == "json":
        click.echo(json.dumps(rows, indent=2))
        return

    if not rows:
        console.print("No tracks found.")
        return

    print_rows(rows, TRACK_COLUMNS, title=f"{len(rows)} tracks", right_aligned=RIGHT_ALIGNED)
