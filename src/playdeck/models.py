"""Track, playlist and album modeling for PlayDeck."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class TrackStatus(Enum):
    """Playback status of a queued track."""

    UNPLAYED = "unplayed"
    PLAYING = "playing"
    PLAYED = "played"
    UNPLAYABLE = "unplayable"


@dataclass(frozen=True)
class Track:
    """Represents a single queued track."""

    track_id: int
    title: str
    status: TrackStatus = TrackStatus.UNPLAYED


@dataclass(frozen=True)
class AlbumSimple:
    """Read-only album summary shown in the artist popup."""

    album_id: str
    title: str


@dataclass(frozen=True)
class Playlist:
    """A user playlist.

    ``playlist_track_ids`` maps a track id to the id of its entry in this
    playlist. Removing a track needs the entry id, not the track id.
    """

    playlist_id: int
    title: str
    playlist_track_ids: Mapping[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "playlist_track_ids",
            MappingProxyType(dict(self.playlist_track_ids)),
        )

    def entry_id_for(self, track_id: int) -> int | None:
        return self.playlist_track_ids.get(track_id)
