from __future__ import annotations

from textual.message import Message

from playdeck.outcomes import EventResult


class ControllerResult(Message):
    """Posted after the UI controller handled a key event."""

    def __init__(self, result: EventResult) -> None:
        super().__init__()
        self.result = result
