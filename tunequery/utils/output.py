"""Rich console output helpers for tunequery."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.theme import Theme
from rich.tree import Tree

from tunequery.library.hierarchy import Branch, Leaf, Node

# Module-level verbosity flags (set by cli.py after argument parsing)
_verbose_enabled: bool = False
_debug_enabled: bool = False

# Custom theme for tunequery
THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "folder": "bold blue",
        "playlist": "default",
        "track.artist": "bold",
        "track.title": "italic",
    }
)

# Global console instances
console = Console(theme=THEME, stderr=False)
error_console = Console(theme=THEME, stderr=True)


def set_verbosity(*, verbose: bool = False, debug: bool = False) -> None:
    """Configure module-level verbosity flags and the log level.

    Called from the CLI entry point after argument parsing.
    """
    global _verbose_enabled, _debug_enabled
    _verbose_enabled = verbose or debug  # debug implies verbose
    _debug_enabled = debug
    configure_logging()


def configure_logging() -> None:
    """Route package log records to stderr through rich."""
    if _debug_enabled:
        level = logging.DEBUG
    elif _verbose_enabled:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = logging.getLogger("tunequery")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=error_console, show_path=_debug_enabled))
    logger.setLevel(level)
    logger.propagate = False


def is_verbose() -> bool:
    """Return whether verbose mode is enabled."""
    return _verbose_enabled


def set_color(enabled: bool) -> None:
    """Enable or disable color on both console instances."""
    console.no_color = not enabled
    error_console.no_color = not enabled


def info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/info]")


def warning(message: str) -> None:
    """Print a warning message to stderr."""
    error_console.print(f"[warning]Warning:[/warning] {message}")


def error(message: str, hint: str | None = None) -> None:
    """Print an error message to stderr.

    Args:
        message: The error message.
        hint: Optional hint for resolution.
    """
    error_console.print(f"[error]Error:[/error] {message}")
    if hint:
        error_console.print(f"  [info]Hint:[/info] {hint}")


def success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/success]")


def verbose(message: str) -> None:
    """Print a message only when verbose mode is enabled."""
    if _verbose_enabled:
        console.print(f"[info]{message}[/info]")


def create_table(title: str | None = None, **kwargs: Any) -> Table:
    """Create a styled table.

    Args:
        title: Optional table title.
        **kwargs: Additional Table arguments.

    Returns:
        Rich Table instance.
    """
    return Table(title=title, **kwargs)


def print_rows(
    rows: Iterable[Mapping[str, str]],
    columns: Sequence[str],
    *,
    title: str | None = None,
    right_aligned: Iterable[str] = (),
) -> None:
    """Print display rows as a table; missing cells are left blank."""
    right = set(right_aligned)
    table = create_table(title=title)
    for column in columns:
        table.add_column(column, justify="right" if column in right else "left")
    for row in rows:
        table.add_row(*(row.get(column, "") for column in columns))
    console.print(table)


def _add_nodes(parent: Tree, nodes: Iterable[Node]) -> None:
    for node in nodes:
        label = node.name if node.name is not None else "(unnamed)"
        if isinstance(node, Branch):
            branch = parent.add(f"[folder]{label}[/folder]")
            _add_nodes(branch, node.children)
        elif isinstance(node, Leaf):
            parent.add(f"[playlist]{label}[/playlist]")


def print_playlist_tree(nodes: Iterable[Node], title: str = "Playlists") -> None:
    """Print a playlist hierarchy as an indented tree."""
    root = Tree(f"[bold]{title}[/bold]")
    _add_nodes(root, nodes)
    console.print(root)
