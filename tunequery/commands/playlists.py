"""Show the playlist folder hierarchy of a library snapshot."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from tunequery.cli import Context, pass_context
from tunequery.commands._common import EXIT_LIBRARY_ERROR, library_option, load_library
from tunequery.exceptions import HierarchyError
from tunequery.library.hierarchy import Branch, Leaf, Node, build_playlist_tree
from tunequery.utils.output import error, print_playlist_tree


def _node_to_dict(node: Node) -> dict[str, Any]:
    if isinstance(node, Branch):
        return {
            "name": node.name,
            "id": node.playlist_id,
            "children": [_node_to_dict(child) for child in node.children],
        }
    assert isinstance(node, Leaf)
    return {"name": node.name, "id": node.playlist_id}


@click.command("playlists")
@library_option
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["tree", "json"]),
    default="tree",
    help="Output format (default: tree)",
)
@pass_context
def cli(ctx: Context, library_path: Path, output_format: str) -> None:
    """Show playlists nested in their folders.

    Playlists on the ignore list are hidden; folders needed to reach a
    visible playlist are always shown.
    """
    snapshot = load_library(ctx, library_path)

    try:
        tree = build_playlist_tree(snapshot.playlists)
    except HierarchyError as e:
        error(str(e), hint="The snapshot's parent references are inconsistent")
        raise SystemExit(EXIT_LIBRARY_ERROR)

    if output_format == "json":
        click.echo(json.dumps([_node_to_dict(n) for n in tree], indent=2))
        return

    print_playlist_tree(tree)
