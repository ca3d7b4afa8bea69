"""Play queue state, key handling and row rendering."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from rich.text import Text

from playdeck.models import Playlist, Track, TrackStatus
from playdeck.outcomes import (
    CONSUMED,
    NOT_CONSUMED,
    EventResult,
    OutcomeEmitted,
    PopupRequested,
    SeekQueueToPosition,
)
from playdeck.ui.keys import (
    ADD_TO_PLAYLIST_KEY,
    CONFIRM_KEY,
    MOVE_DOWN_KEYS,
    MOVE_UP_KEYS,
)
from playdeck.ui.popup import QueueAddToPlaylistPopup, QueueDeleteFromPlaylistPopup
from playdeck.ui.selectable_list import SelectableList

logger = logging.getLogger(__name__)

_STATUS_STYLES: dict[TrackStatus, str] = {
    TrackStatus.UNPLAYED: "",
    TrackStatus.PLAYING: "bold",
    TrackStatus.PLAYED: "strike",
    TrackStatus.UNPLAYABLE: "strike",
}


def track_row_style(status: TrackStatus) -> str:
    """Return the rich style for a queue row with ``status``."""
    return _STATUS_STYLES[status]


def format_queue_row(index: int, track: Track) -> Text:
    return Text(f"{index + 1} {track.title}", style=track_row_style(track.status))


class QueuePanel:
    """The persistent queue view plus the cached user playlists.

    Both sequences are replaced wholesale by the sync layer between events.
    The playlist cache keeps its own selection, which this panel never uses.
    """

    def __init__(
        self,
        tracks: Iterable[Track] = (),
        playlists: Iterable[Playlist] = (),
    ) -> None:
        self.queue: SelectableList[Track] = SelectableList(tracks)
        self.playlists: SelectableList[Playlist] = SelectableList(playlists)

    def set_queue(self, tracks: Iterable[Track]) -> None:
        self.queue.replace_items(tracks)
        logger.debug("Queue replaced count=%s", len(self.queue))

    def set_playlists(self, playlists: Iterable[Playlist]) -> None:
        self.playlists.replace_items(playlists)
        logger.debug("Playlist cache replaced count=%s", len(self.playlists))

    def selected_track(self) -> Optional[Track]:
        return self.queue.selected_item()

    def handle_key(self, key: str) -> EventResult:
        if key in MOVE_DOWN_KEYS:
            self.queue.select_next()
            return CONSUMED
        if key in MOVE_UP_KEYS:
            self.queue.select_previous()
            return CONSUMED
        if key == CONFIRM_KEY:
            index = self.queue.selected()
            if index is None:
                return CONSUMED
            return OutcomeEmitted(SeekQueueToPosition(index))
        if key == ADD_TO_PLAYLIST_KEY:
            popup = self.add_to_playlist_popup()
            if popup is None:
                return CONSUMED
            return PopupRequested(popup)
        return NOT_CONSUMED

    def add_to_playlist_popup(self) -> Optional[QueueAddToPlaylistPopup]:
        track = self.selected_track()
        if track is None:
            return None
        # The popup shares the immutable playlist tuple; replacing the cache
        # later swaps in a new tuple and leaves this one untouched.
        return QueueAddToPlaylistPopup(track.track_id, self.playlists.items)

    def delete_from_playlist_popup(self) -> Optional[QueueDeleteFromPlaylistPopup]:
        track = self.selected_track()
        if track is None:
            return None
        return QueueDeleteFromPlaylistPopup(track.track_id, self.playlists.items)

    def render_rows(self) -> list[Text]:
        return [
            format_queue_row(index, track)
            for index, track in enumerate(self.queue.items)
        ]
