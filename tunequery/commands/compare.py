"""Compare the tracks of several playlists."""

from __future__ import annotations

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
from tunequery.exceptions import ComparisonError, NotFoundError
from tunequery.library.comparison import compare_playlists
from tunequery.library.rows import TRACK_COLUMNS, track_rows
from tunequery.sorting.comparator import RowComparator
from tunequery.utils.output import console, error, print_rows

BUCKET_TITLES = {
    "all": "in all playlists",
    "some": "in some playlists",
    "one": "in only one playlist",
}


@click.command("compare")
@click.argument("names", nargs=-1, required=True)
@library_option
@click.option(
    "--bucket",
    "-b",
    type=click.Choice(["all", "some", "one"]),
    default="all",
    show_default=True,
    help="Which tracks to show",
)
@sort_keys_option(default="Artist,Name")
@pass_context
def cli(
    ctx: Context,
    names: tuple[str, ...],
    library_path: Path,
    bucket: str,
    sort_spec: str | None,
) -> None:
    """Compare the tracks of two or more playlists.

    \b
    Examples:
      tunequery compare "Road Trip" "Workout" -L library.json
      tunequery compare A B C --bucket one -L library.json
    """
    config = get_config(ctx)
    sort_keys = resolve_sort_keys(sort_spec, TRACK_COLUMNS)
    snapshot = load_library(ctx, library_path)

    try:
        comparison = compare_playlists(snapshot.playlists, names)
    except (ComparisonError, NotFoundError) as e:
        error(str(e))
        raise SystemExit(EXIT_QUERY_ERROR)

    track_ids = comparison.bucket(bucket)
    tracks = [t for t in snapshot.tracks if t.track_id in track_ids]
    if not tracks:
        console.print(f"No tracks {BUCKET_TITLES[bucket]}.")
        return

    rows = RowComparator(sort_keys, config.track_column_kinds()).sort(track_rows(tracks))
    print_rows(
        rows,
        TRACK_COLUMNS,
        title=f"{len(rows)} tracks {BUCKET_TITLES[bucket]}",
        right_aligned=("Number", "ID", "Duration", "Year", "Rating", "Play Count"),
    )
