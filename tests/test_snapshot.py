"""Tests for library snapshot loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from playdeck.models import TrackStatus
from playdeck.snapshot import LibrarySnapshot, load_snapshot, snapshot_from_mapping


def test_snapshot_from_mapping_parses_tracks_and_playlists() -> None:
    snapshot = snapshot_from_mapping(
        {
            "queue": [
                {"id": 7, "title": "Song", "status": "playing"},
                {"id": "8", "title": "Other"},
            ],
            "playlists": [{"id": 1, "title": "Mix", "tracks": {"7": 101}}],
        }
    )
    assert [track.track_id for track in snapshot.queue] == [7, 8]
    assert snapshot.queue[0].status is TrackStatus.PLAYING
    assert snapshot.queue[1].status is TrackStatus.UNPLAYED
    assert snapshot.playlists[0].entry_id_for(7) == 101


def test_snapshot_skips_invalid_entries(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="playdeck.snapshot")
    snapshot = snapshot_from_mapping(
        {
            "queue": [
                {"title": "No id"},
                "nope",
                {"id": True, "title": "Bool id"},
                {"id": 3, "title": "Ok", "status": "weird"},
            ],
            "playlists": [
                {"id": 1},
                {"id": 2, "title": "Mix", "tracks": {"x": 1, "4": "y", "5": 6}},
            ],
        }
    )
    assert [track.track_id for track in snapshot.queue] == [3]
    assert snapshot.queue[0].status is TrackStatus.UNPLAYED
    assert dict(snapshot.playlists[0].playlist_track_ids) == {5: 6}
    assert "Skipping invalid track entry" in caplog.text


def test_snapshot_ignores_non_list_sections() -> None:
    assert snapshot_from_mapping({"queue": {}, "playlists": "x"}) == LibrarySnapshot()


def test_load_snapshot_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "library.json"
    path.write_text(
        json.dumps({"queue": [{"id": 1, "title": "One"}], "playlists": []}),
        encoding="utf-8",
    )
    snapshot = load_snapshot(path)
    assert [track.title for track in snapshot.queue] == ["One"]


def test_load_snapshot_falls_back_on_errors(tmp_path: Path) -> None:
    missing = load_snapshot(tmp_path / "missing.json")
    assert missing == LibrarySnapshot()
    corrupt = tmp_path / "corrupt.json"
    corrupt.write_text("{", encoding="utf-8")
    assert load_snapshot(corrupt) == LibrarySnapshot()
    wrong = tmp_path / "wrong.json"
    wrong.write_text("[]", encoding="utf-8")
    assert load_snapshot(wrong) == LibrarySnapshot()


def test_load_snapshot_falls_back_on_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "library.json"
    path.write_bytes(b'{"queue": [{"id": 1, "title": "\xff\xfe"}]}')
    assert load_snapshot(path) == LibrarySnapshot()


def test_snapshot_skips_non_numeric_string_ids() -> None:
    snapshot = snapshot_from_mapping(
        {
            "queue": [
                {"id": "²", "title": "Superscript"},
                {"id": "abc", "title": "Letters"},
                {"id": " -5 ", "title": "Negative"},
            ],
            "playlists": [{"id": "²", "title": "Bad"}],
        }
    )
    assert [track.track_id for track in snapshot.queue] == [-5]
    assert snapshot.playlists == ()
