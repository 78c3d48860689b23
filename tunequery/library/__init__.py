"""Library records, playlist hierarchy, marking and comparison."""

from tunequery.library.comparison import PlaylistComparison, compare_playlists
from tunequery.library.duplicates import EXACT_CRITERIA, MatchCriterion, find_duplicates
from tunequery.library.hierarchy import (
    Branch,
    Leaf,
    Node,
    build_playlist_tree,
    find_branch,
    iter_tree,
)
from tunequery.library.marking import (
    DEFAULT_IGNORED_PLAYLISTS,
    BypassRule,
    count_track_playlists,
    is_playlist_ignored,
    mark_playlists,
)
from tunequery.library.models import Playlist, Track
from tunequery.library.snapshot import LibrarySnapshot, load_snapshot

__all__ = [
    "DEFAULT_IGNORED_PLAYLISTS",
    "EXACT_CRITERIA",
    "Branch",
    "BypassRule",
    "Leaf",
    "LibrarySnapshot",
    "MatchCriterion",
    "Node",
    "Playlist",
    "PlaylistComparison",
    "Track",
    "build_playlist_tree",
    "compare_playlists",
    "count_track_playlists",
    "find_branch",
    "find_duplicates",
    "is_playlist_ignored",
    "iter_tree",
    "load_snapshot",
    "mark_playlists",
]
