"""Modal popup states and their key handling."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional, Sequence, Union

from rich.text import Text
from typing_extensions import TypeAlias, assert_never

from playdeck.models import AlbumSimple, Playlist
from playdeck.outcomes import (
    AddTrackToPlaylist,
    Outcome,
    PlayAlbum,
    PlayPlaylist,
    RemoveTrackFromPlaylist,
)
from playdeck.ui.keys import CONFIRM_KEY, MOVE_DOWN_KEYS, MOVE_UP_KEYS, TOGGLE_KEYS
from playdeck.ui.selectable_list import SelectableList

logger = logging.getLogger(__name__)

HIGHLIGHT_STYLE = "on blue"
HIGHLIGHT_SYMBOL = ">"
LIST_CHROME_HEIGHT = 2
CHOICE_WIDTH = 18
CHOICE_HEIGHT = 3
CHOICE_TABS = ("Play", "Shuffle")
ADD_TO_PLAYLIST_TITLE = "Add to Playlist"
DELETE_FROM_PLAYLIST_TITLE = "Delete from Playlist"


@dataclass
class ArtistAlbumsPopup:
    """Pick one of an artist's albums to play."""

    artist_name: str
    albums: Sequence[AlbumSimple]
    selection: SelectableList[AlbumSimple] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.albums = tuple(self.albums)
        self.selection = SelectableList(self.albums)


@dataclass
class PlaylistChoicePopup:
    """Choose between playing and shuffling a playlist."""

    playlist_name: str
    playlist_id: int
    shuffle: bool = False


@dataclass
class QueueAddToPlaylistPopup:
    """Pick a playlist to add the captured track to."""

    track_id: int
    playlists: Sequence[Playlist]
    selection: SelectableList[Playlist] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.playlists = tuple(self.playlists)
        self.selection = SelectableList(self.playlists)


@dataclass
class QueueDeleteFromPlaylistPopup:
    """Pick a playlist to remove the captured track from."""

    track_id: int
    playlists: Sequence[Playlist]
    selection: SelectableList[Playlist] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.playlists = tuple(self.playlists)
        self.selection = SelectableList(self.playlists)


Popup: TypeAlias = Union[
    ArtistAlbumsPopup,
    PlaylistChoicePopup,
    QueueAddToPlaylistPopup,
    QueueDeleteFromPlaylistPopup,
]


def _move_selection(selection: SelectableList, key: str) -> bool:
    if key in MOVE_DOWN_KEYS:
        selection.select_next()
        return True
    if key in MOVE_UP_KEYS:
        selection.select_previous()
        return True
    return False


def handle_popup_key(popup: Popup, key: str) -> Optional[Outcome]:
    """Apply ``key`` to ``popup`` and return the outcome it resolves to.

    Popups are modal: the caller treats every key as consumed, whether or not
    an outcome comes back. A ``None`` result after Enter means the selection
    did not resolve and the popup stays open.
    """
    if isinstance(popup, PlaylistChoicePopup):
        if key in TOGGLE_KEYS:
            popup.shuffle = not popup.shuffle
            return None
        if key == CONFIRM_KEY:
            return PlayPlaylist(popup.playlist_id, popup.shuffle)
        return None

    if _move_selection(popup.selection, key) or key != CONFIRM_KEY:
        return None

    if isinstance(popup, ArtistAlbumsPopup):
        album = popup.selection.selected_item()
        if album is None:
            return None
        return PlayAlbum(album.album_id)
    if isinstance(popup, QueueAddToPlaylistPopup):
        playlist = popup.selection.selected_item()
        if playlist is None:
            return None
        return AddTrackToPlaylist(popup.track_id, playlist.playlist_id)
    if isinstance(popup, QueueDeleteFromPlaylistPopup):
        playlist = popup.selection.selected_item()
        if playlist is None:
            return None
        entry_id = playlist.entry_id_for(popup.track_id)
        if entry_id is None:
            logger.debug(
                "Track %s is not in playlist %s",
                popup.track_id,
                playlist.playlist_id,
            )
            return None
        return RemoveTrackFromPlaylist(entry_id, playlist.playlist_id)
    assert_never(popup)


def popup_title(popup: Popup) -> str:
    if isinstance(popup, ArtistAlbumsPopup):
        return popup.artist_name
    if isinstance(popup, PlaylistChoicePopup):
        return popup.playlist_name
    if isinstance(popup, QueueAddToPlaylistPopup):
        return ADD_TO_PLAYLIST_TITLE
    if isinstance(popup, QueueDeleteFromPlaylistPopup):
        return DELETE_FROM_PLAYLIST_TITLE
    assert_never(popup)


def popup_labels(popup: Popup) -> list[str]:
    """Return the row labels shown by a list popup."""
    if isinstance(popup, ArtistAlbumsPopup):
        return [album.title for album in popup.albums]
    if isinstance(popup, PlaylistChoicePopup):
        return list(CHOICE_TABS)
    if isinstance(popup, (QueueAddToPlaylistPopup, QueueDeleteFromPlaylistPopup)):
        return [playlist.title for playlist in popup.playlists]
    assert_never(popup)


def popup_size(popup: Popup, width_percent: int = 50) -> tuple[str | int, int]:
    """Return the overlay ``(width, height)`` including its border.

    List popups take a percentage of the screen width and grow with their
    item count. The play/shuffle choice has a fixed size.
    """
    if isinstance(popup, PlaylistChoicePopup):
        return CHOICE_WIDTH, CHOICE_HEIGHT
    return f"{width_percent}%", len(popup_labels(popup)) + LIST_CHROME_HEIGHT


def render_popup_body(popup: Popup) -> Text:
    """Render the popup content without its border."""
    if isinstance(popup, PlaylistChoicePopup):
        return _render_choice_tabs(popup.shuffle)
    selected = popup.selection.selected()
    output = Text()
    for index, label in enumerate(popup_labels(popup)):
        if index:
            output.append("\n")
        if index == selected:
            output.append(f"{HIGHLIGHT_SYMBOL}{label}", style=HIGHLIGHT_STYLE)
        else:
            output.append(f" {label}")
    return output


def _render_choice_tabs(shuffle: bool) -> Text:
    active = 1 if shuffle else 0
    output = Text()
    for index, label in enumerate(CHOICE_TABS):
        if index:
            output.append("│")
        output.append(f" {label} ", style=HIGHLIGHT_STYLE if index == active else "")
    return output
