from __future__ import annotations

import pytest

from playdeck.models import Playlist, Track, TrackStatus


def test_track_defaults_to_unplayed() -> None:
    assert Track(3, "Song").status is TrackStatus.UNPLAYED


def test_playlist_entry_lookup() -> None:
    playlist = Playlist(1, "Mix", {7: 101})
    assert playlist.entry_id_for(7) == 101
    assert playlist.entry_id_for(8) is None


def test_playlist_mapping_is_read_only_snapshot() -> None:
    source = {7: 101}
    playlist = Playlist(1, "Mix", source)
    source[8] = 102
    assert playlist.entry_id_for(8) is None
    with pytest.raises(TypeError):
        playlist.playlist_track_ids[9] = 103  # type: ignore[index]
