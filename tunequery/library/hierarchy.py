"""Rebuild the playlist folder tree from flat parent-pointer records.

Folders reachable through several records collapse into one Branch per
enclosing scope, matched by exact name. Every level of the result is sorted
by name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Union

from tunequery.exceptions import PlaylistCycleError, UnresolvedParentError
from tunequery.library.models import Playlist

logger = logging.getLogger(__name__)


@dataclass
class Leaf:
    """A playlist that is not a folder."""

    name: str | None
    playlist_id: str | None = field(default=None, compare=False)


@dataclass
class Branch:
    """A folder and the nodes it contains."""

    name: str | None
    playlist_id: str | None = field(default=None, compare=False)
    children: list[Node] = field(default_factory=list)


Node = Union[Branch, Leaf]


def _find_branch(scope: list[Node], name: str | None) -> Branch | None:
    for node in scope:
        if isinstance(node, Branch) and node.name == name:
            return node
    return None


def _name_key(node: Node) -> tuple[bool, str]:
    # Absent names sort before any present name.
    return (node.name is not None, node.name or "")


def _sort_scope(scope: list[Node]) -> None:
    scope.sort(key=_name_key)
    for node in scope:
        if isinstance(node, Branch):
            _sort_scope(node.children)


class _TreeBuilder:
    """Places playlists into a tree; lives for a single build."""

    def __init__(self, playlists: Mapping[str, Playlist]) -> None:
        self.playlists = playlists
        self.top: list[Node] = []

    def scope_for(self, playlist: Playlist, seen: frozenset[str] = frozenset()) -> list[Node]:
        """Return the children list a playlist belongs in, creating ancestors as needed."""
        parent_id = playlist.parent_id
        if parent_id is None:
            return self.top
        if playlist.playlist_id in seen:
            raise PlaylistCycleError(playlist.playlist_id)

        parent = self.playlists.get(parent_id)
        if parent is None:
            raise UnresolvedParentError(playlist.playlist_id, parent_id)
        enclosing = self.scope_for(parent, seen | {playlist.playlist_id})

        branch = _find_branch(enclosing, parent.name)
        if branch is None:
            logger.debug("adding parent folder '%s'", parent.name)
            branch = Branch(parent.name, parent.playlist_id)
            enclosing.append(branch)
        return branch.children

    def insert(self, playlist: Playlist) -> None:
        scope = self.scope_for(playlist)
        if not playlist.is_folder:
            logger.debug("adding playlist '%s'", playlist.name)
            scope.append(Leaf(playlist.name, playlist.playlist_id))
        elif _find_branch(scope, playlist.name) is None:
            logger.debug("adding folder '%s'", playlist.name)
            scope.append(Branch(playlist.name, playlist.playlist_id))


def build_playlist_tree(playlists: Iterable[Playlist]) -> list[Node]:
    """Build the playlist hierarchy from a flat snapshot.

    Records are placed in ascending ``playlist_id`` order, so the first
    folder of a given name in that order supplies the Branch's id. Ignored
    playlists are not placed, but still materialize as folders when a
    visible descendant needs them.

    Args:
        playlists: Snapshot of playlist records.

    Returns:
        The top-level nodes, sorted by name at every level.

    Raises:
        UnresolvedParentError: If a parent id is not in the snapshot.
        PlaylistCycleError: If parent pointers form a loop.
    """
    by_id = {p.playlist_id: p for p in playlists}
    builder = _TreeBuilder(by_id)

    for playlist_id in sorted(by_id):
        playlist = by_id[playlist_id]
        if playlist.ignored:
            continue
        builder.insert(playlist)

    _sort_scope(builder.top)
    return builder.top


def iter_tree(nodes: Iterable[Node], depth: int = 0) -> Iterator[tuple[int, Node]]:
    """Yield ``(depth, node)`` pairs depth-first, parents before children."""
    for node in nodes:
        yield depth, node
        if isinstance(node, Branch):
            yield from iter_tree(node.children, depth + 1)


def find_branch(nodes: Iterable[Node], name: str) -> Branch | None:
    """Find the first Branch with the given name anywhere in the tree."""
    for _, node in iter_tree(nodes):
        if isinstance(node, Branch) and node.name == name:
            return node
    return None
