"""Summarize track counts and playing time per artist."""

from __future__ import annotations

from pathlib import Path

import click

from tunequery.cli import Context, pass_context
from tunequery.commands._common import (
    get_config,
    library_option,
    load_library,
    resolve_sort_keys,
    sort_keys_option,
)
from tunequery.library.rows import ARTIST_COLUMNS, artist_rows
from tunequery.sorting.comparator import RowComparator
from tunequery.utils.output import console, print_rows


@click.command("artists")
@library_option
@sort_keys_option(default="Artist")
@pass_context
def cli(ctx: Context, library_path: Path, sort_spec: str | None) -> None:
    """List artists with local and remote track totals.

    \b
    Examples:
      tunequery artists -L library.json --sort -TotalLocalTime
    """
    config = get_config(ctx)
    sort_keys = resolve_sort_keys(sort_spec, ARTIST_COLUMNS)
    snapshot = load_library(ctx, library_path)

    rows = RowComparator(sort_keys, config.artist_column_kinds()).sort(
        artist_rows(snapshot.tracks)
    )
    if not rows:
        console.print("No artists found.")
        return

    print_rows(rows, ARTIST_COLUMNS, title=f"{len(rows)} artists", right_aligned=ARTIST_COLUMNS[1:])
