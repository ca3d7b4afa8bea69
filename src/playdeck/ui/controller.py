"""Top-level key routing between the active popup and the queue."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from typing_extensions import assert_never

from playdeck.models import AlbumSimple
from playdeck.outcomes import (
    CONSUMED,
    Consumed,
    EventResult,
    NotConsumed,
    OutcomeEmitted,
    PopupRequested,
)
from playdeck.ui.keys import CANCEL_KEY
from playdeck.ui.popup import (
    ArtistAlbumsPopup,
    PlaylistChoicePopup,
    Popup,
    handle_popup_key,
)
from playdeck.ui.queue_panel import QueuePanel

logger = logging.getLogger(__name__)


class UIController:
    """Owns the single popup slot and routes each key event.

    An open popup sees every key first and swallows it. Without a popup the
    queue panel gets the key and may decline it, in which case the result is
    ``NotConsumed`` and the app's global bindings apply.
    """

    def __init__(self, queue_panel: QueuePanel, *, shuffle_default: bool = False):
        self.queue_panel = queue_panel
        self.shuffle_default = shuffle_default
        self._popup: Optional[Popup] = None

    @property
    def popup(self) -> Optional[Popup]:
        return self._popup

    def open_popup(self, popup: Popup) -> None:
        if self._popup is not None:
            logger.debug("Replacing open popup %s", type(self._popup).__name__)
        self._popup = popup
        logger.debug("Popup opened %s", type(popup).__name__)

    def close_popup(self) -> None:
        if self._popup is None:
            return
        logger.debug("Popup closed %s", type(self._popup).__name__)
        self._popup = None

    def open_artist_albums(
        self, artist_name: str, albums: Iterable[AlbumSimple]
    ) -> ArtistAlbumsPopup:
        popup = ArtistAlbumsPopup(artist_name, tuple(albums))
        self.open_popup(popup)
        return popup

    def open_playlist_choice(
        self, playlist_name: str, playlist_id: int
    ) -> PlaylistChoicePopup:
        popup = PlaylistChoicePopup(
            playlist_name, playlist_id, shuffle=self.shuffle_default
        )
        self.open_popup(popup)
        return popup

    def open_delete_from_playlist(self) -> bool:
        """Open the delete popup for the selected queue track."""
        popup = self.queue_panel.delete_from_playlist_popup()
        if popup is None:
            return False
        self.open_popup(popup)
        return True

    def handle_key(self, key: str) -> EventResult:
        if self._popup is not None:
            return self._handle_popup_key(self._popup, key)
        result = self.queue_panel.handle_key(key)
        if isinstance(result, PopupRequested):
            self.open_popup(result.popup)
            return CONSUMED
        if isinstance(result, (Consumed, NotConsumed, OutcomeEmitted)):
            return result
        assert_never(result)

    def _handle_popup_key(self, popup: Popup, key: str) -> EventResult:
        if key == CANCEL_KEY:
            self.close_popup()
            return CONSUMED
        outcome = handle_popup_key(popup, key)
        if outcome is None:
            return CONSUMED
        self.close_popup()
        return OutcomeEmitted(outcome)
