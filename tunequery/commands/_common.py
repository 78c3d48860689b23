"""Helpers shared by commands that read a library snapshot."""

from __future__ import annotations

from pathlib import Path

import click

from tunequery.cli import Context
from tunequery.config import Config
from tunequery.exceptions import TuneQueryError
from tunequery.library.marking import count_track_playlists, mark_playlists
from tunequery.library.snapshot import LibrarySnapshot, load_snapshot
from tunequery.sorting.comparator import SortKey, parse_sort_spec
from tunequery.utils.output import error

EXIT_SUCCESS = 0
EXIT_QUERY_ERROR = 1
EXIT_LIBRARY_ERROR = 2

library_option = click.option(
    "--library",
    "-L",
    "library_path",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    required=True,
    help="JSON library snapshot to read",
)


def get_config(ctx: Context) -> Config:
    """Return the loaded config, or defaults when a command runs standalone."""
    return ctx.config if ctx.config is not None else Config()


def load_library(ctx: Context, path: Path) -> LibrarySnapshot:
    """Load a snapshot and apply ignore/bypass marks and playlist counts.

    Exits with EXIT_LIBRARY_ERROR if the snapshot cannot be read.
    """
    config = get_config(ctx)
    try:
        snapshot = load_snapshot(path)
    except TuneQueryError as e:
        error(str(e))
        raise SystemExit(EXIT_LIBRARY_ERROR)

    playlists = mark_playlists(snapshot.playlists, config.ignored_playlists, config.bypass_rules)
    tracks = count_track_playlists(playlists, snapshot.tracks)
    return LibrarySnapshot(playlists=playlists, tracks=tracks)


def sort_keys_option(default: str | None):
    """Build the --sort option with a per-command default."""
    return click.option(
        "--sort",
        "-s",
        "sort_spec",
        default=default,
        show_default=default is not None,
        help="Comma-separated sort columns; prefix with - for descending (e.g. -Duration,Name)",
    )


def resolve_sort_keys(sort_spec: str | None, columns: tuple[str, ...]) -> list[SortKey]:
    """Parse a --sort value, exiting on unknown columns."""
    if not sort_spec:
        return []
    keys = parse_sort_spec(sort_spec)
    for key in keys:
        if key.column not in columns:
            error(f"Unknown sort column: {key.column}", hint=f"Available: {', '.join(columns)}")
            raise SystemExit(EXIT_QUERY_ERROR)
    return keys
