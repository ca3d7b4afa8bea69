"""Modal overlay that draws the controller's active popup."""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from playdeck.ui.controller import UIController
from playdeck.ui.messages import ControllerResult
from playdeck.ui.popup import popup_size, popup_title, render_popup_body


class PopupScreen(ModalScreen[None]):
    """Centered popup overlay; every key goes to the controller."""

    DEFAULT_CSS = """
    PopupScreen {
        align: center middle;
    }
    #popup {
        border: round $accent;
        background: $surface;
    }
    """

    def __init__(self, controller: UIController, *, width_percent: int = 50) -> None:
        super().__init__()
        self._controller = controller
        self._width_percent = width_percent

    def compose(self) -> ComposeResult:
        with Container(id="popup"):
            yield Static(id="popup_body")

    def on_mount(self) -> None:
        self.refresh_popup()

    def refresh_popup(self) -> None:
        popup = self._controller.popup
        if popup is None:
            return
        container = self.query_one("#popup", Container)
        width, height = popup_size(popup, self._width_percent)
        container.styles.width = width
        container.styles.height = height
        container.border_title = popup_title(popup)
        self.query_one("#popup_body", Static).update(render_popup_body(popup))

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        result = self._controller.handle_key(event.key)
        self.refresh_popup()
        self.post_message(ControllerResult(result))
