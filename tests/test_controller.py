"""Tests for key routing between popups and the queue."""

from __future__ import annotations

from playdeck.models import AlbumSimple, Playlist, Track
from playdeck.outcomes import (
    CONSUMED,
    NOT_CONSUMED,
    AddTrackToPlaylist,
    OutcomeEmitted,
    PlayAlbum,
    PlayPlaylist,
    RemoveTrackFromPlaylist,
    SeekQueueToPosition,
)
from playdeck.ui.controller import UIController
from playdeck.ui.popup import (
    ArtistAlbumsPopup,
    PlaylistChoicePopup,
    QueueAddToPlaylistPopup,
    QueueDeleteFromPlaylistPopup,
)
from playdeck.ui.queue_panel import QueuePanel


def _controller(
    tracks: list[Track], playlists: list[Playlist], **kwargs
) -> UIController:
    return UIController(QueuePanel(tracks, playlists), **kwargs)


def test_queue_handles_keys_without_popup(
    tracks: list[Track], playlists: list[Playlist]
) -> None:
    controller = _controller(tracks, playlists)
    for _ in range(4):
        assert controller.handle_key("down") == CONSUMED
    assert controller.handle_key("enter") == OutcomeEmitted(SeekQueueToPosition(2))
    assert controller.handle_key("q") == NOT_CONSUMED


def test_add_flow_opens_popup_and_closes_on_outcome(
    tracks: list[Track], playlists: list[Playlist]
) -> None:
    controller = _controller(tracks, playlists)
    controller.handle_key("down")
    assert controller.handle_key("a") == CONSUMED
    assert isinstance(controller.popup, QueueAddToPlaylistPopup)
    controller.handle_key("down")
    result = controller.handle_key("enter")
    assert result == OutcomeEmitted(AddTrackToPlaylist(1, 1))
    assert controller.popup is None


def test_popup_uses_track_captured_at_open(
    tracks: list[Track], playlists: list[Playlist]
) -> None:
    controller = _controller(tracks, playlists)
    controller.handle_key("down")
    controller.handle_key("a")
    controller.queue_panel.queue.select(2)
    controller.handle_key("down")
    assert controller.handle_key("enter") == OutcomeEmitted(AddTrackToPlaylist(1, 1))


def test_popup_swallows_every_key(
    tracks: list[Track], playlists: list[Playlist], albums: list[AlbumSimple]
) -> None:
    controller = _controller(tracks, playlists)
    controller.open_artist_albums("Artist", albums)
    for key in ("q", "a", "d", "left", "x"):
        assert controller.handle_key(key) == CONSUMED
    assert isinstance(controller.popup, ArtistAlbumsPopup)
    assert controller.queue_panel.queue.selected() is None


def test_failed_enter_keeps_popup_open(
    tracks: list[Track], playlists: list[Playlist]
) -> None:
    controller = _controller(tracks, playlists)
    controller.queue_panel.queue.select(2)
    assert controller.open_delete_from_playlist()
    assert controller.handle_key("enter") == CONSUMED
    controller.handle_key("down")
    assert controller.handle_key("enter") == CONSUMED
    assert isinstance(controller.popup, QueueDeleteFromPlaylistPopup)
    controller.handle_key("down")
    assert controller.handle_key("enter") == OutcomeEmitted(
        RemoveTrackFromPlaylist(202, 2)
    )
    assert controller.popup is None


def test_delete_popup_requires_selected_track(
    tracks: list[Track], playlists: list[Playlist]
) -> None:
    controller = _controller(tracks, playlists)
    assert controller.open_delete_from_playlist() is False
    assert controller.popup is None


def test_escape_cancels_popup(
    tracks: list[Track], playlists: list[Playlist], albums: list[AlbumSimple]
) -> None:
    controller = _controller(tracks, playlists)
    controller.open_artist_albums("Artist", albums)
    assert controller.handle_key("escape") == CONSUMED
    assert controller.popup is None
    assert controller.handle_key("escape") == NOT_CONSUMED


def test_artist_popup_flow(
    tracks: list[Track], playlists: list[Playlist], albums: list[AlbumSimple]
) -> None:
    controller = _controller(tracks, playlists)
    controller.open_artist_albums("Artist", albums)
    controller.handle_key("down")
    assert controller.handle_key("enter") == OutcomeEmitted(PlayAlbum("alb-a"))
    assert controller.popup is None


def test_playlist_choice_uses_shuffle_default(
    tracks: list[Track], playlists: list[Playlist]
) -> None:
    controller = _controller(tracks, playlists, shuffle_default=True)
    popup = controller.open_playlist_choice("Mix", 5)
    assert isinstance(popup, PlaylistChoicePopup)
    assert popup.shuffle is True
    controller.handle_key("h")
    assert controller.handle_key("enter") == OutcomeEmitted(PlayPlaylist(5, False))


def test_opening_popup_replaces_previous(
    tracks: list[Track], playlists: list[Playlist], albums: list[AlbumSimple]
) -> None:
    controller = _controller(tracks, playlists)
    controller.open_artist_albums("Artist", albums)
    controller.open_playlist_choice("Mix", 5)
    assert isinstance(controller.popup, PlaylistChoicePopup)
    controller.close_popup()
    controller.close_popup()
    assert controller.popup is None
