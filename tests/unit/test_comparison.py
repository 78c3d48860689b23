"""Unit tests for playlist comparison."""

from __future__ import annotations

import pytest

from tunequery.exceptions import ComparisonError, NotFoundError, PlaylistNotFoundError
from tunequery.library.comparison import PlaylistComparison, compare_playlists
from tunequery.library.models import Playlist


class TestComparePlaylists:
    def test_buckets(self, sample_playlists) -> None:
        result = compare_playlists(sample_playlists, ["Favourites", "Old Mix", "70s"])
        assert result.all == {1}
        assert result.some == {3}
        assert result.one == {2}

    def test_two_playlists(self, sample_playlists) -> None:
        result = compare_playlists(sample_playlists, ["Favourites", "Old Mix"])
        assert result.all == {1, 3}
        assert result.some == set()
        assert result.one == {2}

    def test_first_playlist_with_name_wins(self) -> None:
        playlists = [
            Playlist("A", "Mix", track_ids=(1,)),
            Playlist("B", "Mix", track_ids=(2,)),
            Playlist("C", "Other", track_ids=(1,)),
        ]
        assert compare_playlists(playlists, ["Mix", "Other"]).all == {1}

    def test_needs_two_names(self, sample_playlists) -> None:
        with pytest.raises(ComparisonError):
            compare_playlists(sample_playlists, ["Favourites"])

    def test_unknown_name(self, sample_playlists) -> None:
        with pytest.raises(PlaylistNotFoundError) as exc_info:
            compare_playlists(sample_playlists, ["Favourites", "Nope"])
        assert exc_info.value.name == "Nope"
        assert isinstance(exc_info.value, NotFoundError)

    def test_folders_not_comparable(self, sample_playlists) -> None:
        with pytest.raises(PlaylistNotFoundError):
            compare_playlists(sample_playlists, ["Favourites", "Decades"])


class TestBucket:
    def test_by_name(self) -> None:
        result = PlaylistComparison(names=["a", "b"], all={1}, some=set(), one={2})
        assert result.bucket("all") == {1}
        assert result.bucket("one") == {2}

    def test_unknown_bucket(self) -> None:
        with pytest.raises(ValueError):
            PlaylistComparison().bucket("none")
