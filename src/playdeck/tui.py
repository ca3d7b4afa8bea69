"""Textual-based TUI for PlayDeck."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

try:
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Footer, Header
except Exception as exc:  # pragma: no cover - depends on environment
    raise RuntimeError(
        "Textual is required for the TUI. Install the 'textual' dependency."
    ) from exc

from playdeck.config import AppConfig, load_config
from playdeck.executor import LoggingExecutor, OutcomeExecutor
from playdeck.logging_setup import set_console_level
from playdeck.models import AlbumSimple
from playdeck.outcomes import EventResult, Outcome, OutcomeEmitted, describe_outcome
from playdeck.snapshot import LibrarySnapshot
from playdeck.ui.controller import UIController
from playdeck.ui.help_modal import HelpModal
from playdeck.ui.messages import ControllerResult
from playdeck.ui.popup_screen import PopupScreen
from playdeck.ui.queue_panel import QueuePanel
from playdeck.ui.queue_view import QueueView

logger = logging.getLogger(__name__)


class PlayDeckApp(App):
    """PlayDeck Textual application."""

    TITLE = "PlayDeck"

    # Reached only when no popup is open and the queue declined the key.
    BINDINGS = [
        Binding("d", "remove_from_playlist", "Remove from Playlist"),
        Binding("?", "show_help", "Help"),
        Binding("f1", "show_help", "Help"),
        Binding("q", "quit_app", "Quit"),
    ]

    def __init__(
        self,
        *,
        snapshot: Optional[LibrarySnapshot] = None,
        executor: Optional[OutcomeExecutor] = None,
        config: Optional[AppConfig] = None,
    ) -> None:
        super().__init__()
        self._config = config or load_config()
        snapshot = snapshot or LibrarySnapshot()
        self.executor: OutcomeExecutor = executor or LoggingExecutor()
        self.controller = UIController(
            QueuePanel(snapshot.queue, snapshot.playlists),
            shuffle_default=self._config.shuffle_default,
        )

    def compose(self) -> ComposeResult:
        yield Header()
        yield QueueView(self.controller, id="queue_view")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(QueueView).focus()

    def on_controller_result(self, message: ControllerResult) -> None:
        self._apply_result(message.result)

    def update_library(self, snapshot: LibrarySnapshot) -> None:
        """Replace the queue and playlist cache between key events."""
        self.controller.queue_panel.set_queue(snapshot.queue)
        self.controller.queue_panel.set_playlists(snapshot.playlists)
        self.query_one(QueueView).notify_data_changed()

    def open_artist_albums(
        self, artist_name: str, albums: Iterable[AlbumSimple]
    ) -> None:
        self.controller.open_artist_albums(artist_name, albums)
        self._sync_popup_screen()

    def open_playlist_choice(self, playlist_name: str, playlist_id: int) -> None:
        self.controller.open_playlist_choice(playlist_name, playlist_id)
        self._sync_popup_screen()

    def action_remove_from_playlist(self) -> None:
        if not self.controller.open_delete_from_playlist():
            self.notify("Select a track first", severity="warning")
            return
        self._sync_popup_screen()

    def action_show_help(self) -> None:
        self.push_screen(HelpModal(self.BINDINGS))

    def action_quit_app(self) -> None:
        logger.info("Quit requested")
        self.exit()

    def _apply_result(self, result: EventResult) -> None:
        if isinstance(result, OutcomeEmitted):
            self._execute(result.outcome)
        self._sync_popup_screen()
        self.query_one(QueueView).refresh()

    def _execute(self, outcome: Outcome) -> None:
        description = describe_outcome(outcome)
        try:
            self.executor.execute(outcome)
        except Exception:
            logger.exception("Failed to execute outcome %r", outcome)
            self.notify(f"Failed: {description}", severity="error")
            return
        self.notify(description)

    def _sync_popup_screen(self) -> None:
        screen = self.screen
        if self.controller.popup is None:
            if isinstance(screen, PopupScreen):
                self.pop_screen()
            return
        if isinstance(screen, PopupScreen):
            screen.refresh_popup()
            return
        self.push_screen(
            PopupScreen(self.controller, width_percent=self._config.popup_width_percent)
        )


def run_tui(
    snapshot: LibrarySnapshot,
    *,
    config: Optional[AppConfig] = None,
    executor: Optional[OutcomeExecutor] = None,
) -> int:
    """Run the TUI and return an exit code."""
    logger.info(
        "TUI start tracks=%s playlists=%s",
        len(snapshot.queue),
        len(snapshot.playlists),
    )
    set_console_level(logging.WARNING)
    app = PlayDeckApp(snapshot=snapshot, executor=executor, config=config)
    app.run()
    logger.info("TUI exit")
    return 0
