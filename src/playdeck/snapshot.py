"""Load queue and playlist snapshots from JSON files."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from playdeck.models import Playlist, Track, TrackStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LibrarySnapshot:
    """Queue tracks and user playlists as delivered by the sync layer."""

    queue: tuple[Track, ...] = ()
    playlists: tuple[Playlist, ...] = ()


def load_snapshot(path: Path) -> LibrarySnapshot:
    """Load a snapshot, returning an empty one when the file is unusable."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        logger.exception("Failed to load library snapshot from %s", path)
        return LibrarySnapshot()
    if not isinstance(raw, dict):
        logger.warning("Ignoring library snapshot %s: not a JSON object", path)
        return LibrarySnapshot()
    snapshot = snapshot_from_mapping(raw)
    logger.info(
        "Loaded snapshot from %s tracks=%s playlists=%s",
        path,
        len(snapshot.queue),
        len(snapshot.playlists),
    )
    return snapshot


def snapshot_from_mapping(raw: dict[str, Any]) -> LibrarySnapshot:
    queue = _parse_entries(raw.get("queue"), _track_from_mapping, "track")
    playlists = _parse_entries(raw.get("playlists"), _playlist_from_mapping, "playlist")
    return LibrarySnapshot(queue=tuple(queue), playlists=tuple(playlists))


def _parse_entries(
    entries: Any, parse: Callable[[dict[str, Any]], Any], kind: str
) -> list[Any]:
    if not isinstance(entries, list):
        return []
    parsed = []
    for entry in entries:
        item = parse(entry) if isinstance(entry, dict) else None
        if item is None:
            logger.warning("Skipping invalid %s entry: %r", kind, entry)
            continue
        parsed.append(item)
    return parsed


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _track_from_mapping(raw: dict[str, Any]) -> Optional[Track]:
    track_id = _as_int(raw.get("id"))
    title = raw.get("title")
    if track_id is None or not isinstance(title, str):
        return None
    try:
        status = TrackStatus(raw.get("status", TrackStatus.UNPLAYED.value))
    except ValueError:
        status = TrackStatus.UNPLAYED
    return Track(track_id=track_id, title=title, status=status)


def _playlist_from_mapping(raw: dict[str, Any]) -> Optional[Playlist]:
    playlist_id = _as_int(raw.get("id"))
    title = raw.get("title")
    if playlist_id is None or not isinstance(title, str):
        return None
    tracks = raw.get("tracks")
    entries = tracks.items() if isinstance(tracks, dict) else ()
    return Playlist(
        playlist_id=playlist_id,
        title=title,
        playlist_track_ids=dict(_entry_pairs(entries)),
    )


def _entry_pairs(entries: Iterable[tuple[Any, Any]]) -> Iterable[tuple[int, int]]:
    for track_key, entry_value in entries:
        track_id = _as_int(track_key)
        entry_id = _as_int(entry_value)
        if track_id is None or entry_id is None:
            continue
        yield track_id, entry_id
