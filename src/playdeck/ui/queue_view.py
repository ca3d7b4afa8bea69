from __future__ import annotations

from rich.text import Text
from textual import events
from textual.widget import Widget

from playdeck.outcomes import NotConsumed
from playdeck.ui.controller import UIController
from playdeck.ui.messages import ControllerResult


class QueueView(Widget):
    """Queue list that forwards keys to the UI controller.

    Keys the controller declines keep bubbling so app bindings can run.
    """

    DEFAULT_CSS = """
    QueueView {
        height: 1fr;
        border: round $accent;
        border-title-align: left;
    }
    """

    def __init__(self, controller: UIController, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.can_focus = True
        self._controller = controller
        self._scroll_offset = 0
        self.border_title = " Queue "

    def on_key(self, event: events.Key) -> None:
        result = self._controller.handle_key(event.key)
        if isinstance(result, NotConsumed):
            return
        event.stop()
        event.prevent_default()
        self._ensure_cursor_visible()
        self.refresh()
        self.post_message(ControllerResult(result))

    def on_resize(self) -> None:
        self._ensure_cursor_visible()
        self.refresh()

    def notify_data_changed(self) -> None:
        self._ensure_cursor_visible()
        self.refresh()

    def render(self) -> Text:
        rows = self._controller.queue_panel.render_rows()
        selected = self._controller.queue_panel.queue.selected()
        height = max(1, self.size.height)
        output = Text()
        for offset in range(height):
            index = self._scroll_offset + offset
            if offset:
                output.append("\n")
            if not 0 <= index < len(rows):
                continue
            row = rows[index]
            if index == selected:
                row.stylize("reverse")
            output.append_text(row)
        return output

    def _ensure_cursor_visible(self) -> None:
        selected = self._controller.queue_panel.queue.selected()
        height = max(1, self.size.height)
        if selected is not None:
            if selected < self._scroll_offset:
                self._scroll_offset = selected
            elif selected >= self._scroll_offset + height:
                self._scroll_offset = selected - height + 1
        count = len(self._controller.queue_panel.queue)
        max_offset = max(0, count - height)
        self._scroll_offset = max(0, min(self._scroll_offset, max_offset))

    @property
    def scroll_offset(self) -> int:
        return self._scroll_offset
