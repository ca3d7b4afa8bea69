"""Pytest configuration for PlayDeck."""

from __future__ import annotations

import pytest

from playdeck.models import AlbumSimple, Playlist, Track, TrackStatus


@pytest.fixture
def tracks() -> list[Track]:
    return [
        Track(1, "Intro", TrackStatus.PLAYED),
        Track(7, "Main Theme", TrackStatus.PLAYING),
        Track(9, "Outro"),
    ]


@pytest.fixture
def playlists() -> list[Playlist]:
    return [
        Playlist(1, "Favorites", {7: 101}),
        Playlist(2, "Road Trip", {1: 201, 9: 202}),
    ]


@pytest.fixture
def albums() -> list[AlbumSimple]:
    return [AlbumSimple("alb-a", "A"), AlbumSimple("alb-b", "B")]
