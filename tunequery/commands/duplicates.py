"""Find duplicate tracks in the library."""

from __future__ import annotations

from pathlib import Path

import click

from tunequery.cli import Context, pass_context
from tunequery.commands._common import (
    EXIT_QUERY_ERROR,
    library_option,
    load_library,
)
from tunequery.exceptions import DuplicateCriteriaError
from tunequery.library.duplicates import EXACT_CRITERIA, MatchCriterion, find_duplicates
from tunequery.library.rows import TRACK_COLUMNS, track_rows
from tunequery.utils.output import console, error, print_rows


@click.command("duplicates")
@library_option
@click.option(
    "--match",
    "-m",
    "criteria",
    multiple=True,
    type=click.Choice([c.value for c in MatchCriterion]),
    help="Attribute same-named tracks must share (repeatable; default: exact match)",
)
@click.option(
    "--name-only",
    is_flag=True,
    help="Treat any tracks sharing a name as duplicates",
)
@click.option(
    "--no-remote",
    is_flag=True,
    help="Leave remote tracks out of the search",
)
@pass_context
def cli(
    ctx: Context,
    library_path: Path,
    criteria: tuple[str, ...],
    name_only: bool,
    no_remote: bool,
) -> None:
    """List tracks that share a name and match on the chosen attributes.

    Without --match, tracks must agree on artist, album, kind, duration,
    year and rating. Results are grouped by track name.

    \b
    Examples:
      tunequery duplicates -L library.json
      tunequery duplicates -m artist -m duration -L library.json
      tunequery duplicates -m not-artist --no-remote -L library.json
    """
    if name_only:
        selected: frozenset[MatchCriterion] = frozenset()
    elif criteria:
        selected = frozenset(MatchCriterion(c) for c in criteria)
    else:
        selected = EXACT_CRITERIA

    snapshot = load_library(ctx, library_path)

    try:
        tracks = find_duplicates(snapshot.tracks, selected, include_remote=not no_remote)
    except DuplicateCriteriaError as e:
        error(str(e))
        raise SystemExit(EXIT_QUERY_ERROR)

    if not tracks:
        console.print("No duplicate tracks found.")
        return

    print_rows(
        track_rows(tracks),
        TRACK_COLUMNS,
        title=f"{len(tracks)} duplicate tracks",
        right_aligned=("Number", "ID", "Duration", "Year", "Rating", "Play Count"),
    )
