"""Domain commands emitted by the UI and the per-event result protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from typing_extensions import TypeAlias, assert_never

if TYPE_CHECKING:
    from playdeck.ui.popup import Popup


@dataclass(frozen=True)
class PlayAlbum:
    album_id: str


@dataclass(frozen=True)
class PlayPlaylist:
    playlist_id: int
    shuffle: bool


@dataclass(frozen=True)
class SeekQueueToPosition:
    index: int


@dataclass(frozen=True)
class AddTrackToPlaylist:
    track_id: int
    playlist_id: int


@dataclass(frozen=True)
class RemoveTrackFromPlaylist:
    """Remove one playlist entry; ``playlist_entry_id`` is not a track id."""

    playlist_entry_id: int
    playlist_id: int


Outcome: TypeAlias = Union[
    PlayAlbum,
    PlayPlaylist,
    SeekQueueToPosition,
    AddTrackToPlaylist,
    RemoveTrackFromPlaylist,
]


@dataclass(frozen=True)
class Consumed:
    """The event was handled and produced nothing for the caller."""


@dataclass(frozen=True)
class NotConsumed:
    """The event is irrelevant to the component; try another handler."""


@dataclass(frozen=True)
class OutcomeEmitted:
    """The event produced a command for the caller to execute."""

    outcome: Outcome


@dataclass(frozen=True)
class PopupRequested:
    """The event asks the owner of the popup slot to open ``popup``."""

    popup: Popup


EventResult: TypeAlias = Union[Consumed, NotConsumed, OutcomeEmitted, PopupRequested]

CONSUMED = Consumed()
NOT_CONSUMED = NotConsumed()


def describe_outcome(outcome: Outcome) -> str:
    """Return a short human readable description of an outcome."""
    if isinstance(outcome, PlayAlbum):
        return f"Play album {outcome.album_id}"
    if isinstance(outcome, PlayPlaylist):
        verb = "Shuffle" if outcome.shuffle else "Play"
        return f"{verb} playlist {outcome.playlist_id}"
    if isinstance(outcome, SeekQueueToPosition):
        return f"Skip to queue position {outcome.index + 1}"
    if isinstance(outcome, AddTrackToPlaylist):
        return f"Add track {outcome.track_id} to playlist {outcome.playlist_id}"
    if isinstance(outcome, RemoveTrackFromPlaylist):
        return (
            f"Remove entry {outcome.playlist_entry_id} "
            f"from playlist {outcome.playlist_id}"
        )
    assert_never(outcome)

