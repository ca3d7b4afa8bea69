"""Help modal for PlayDeck."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Static

_GENERAL_ACTIONS = ["remove_from_playlist", "show_help", "quit_app"]

_ACTION_OVERRIDES: dict[str, str] = {
    "show_help": "Open help",
}

_QUEUE_HELP: list[tuple[str, str]] = [
    ("↓, J", "Select next track"),
    ("↑, K", "Select previous track"),
    ("Enter", "Skip to selected track"),
    ("A", "Add selected track to a playlist"),
]

_POPUP_HELP: list[tuple[str, str]] = [
    ("↓/↑, J/K", "Move selection"),
    ("←/→, H/L", "Switch between Play and Shuffle"),
    ("Enter", "Confirm"),
    ("Esc", "Close without action"),
]

_HEADING_STYLE = "bold #5fc9d6"


def _format_key(key: str) -> str:
    key_map = {
        "left": "←",
        "right": "→",
        "up": "↑",
        "down": "↓",
        "enter": "Enter",
        "escape": "Esc",
    }
    if key in key_map:
        return key_map[key]
    formatted: list[str] = []
    for part in key.split("+"):
        formatted.append(part.upper() if len(part) == 1 else part.capitalize())
    return "+".join(formatted)


def _append_section(content: Text, title: str, rows: Iterable[tuple[str, str]]) -> None:
    if content.plain:
        content.append("\n")
    content.append(f"{title}\n", style=_HEADING_STYLE)
    for keys, label in rows:
        content.append(f"{keys} — {label}\n")


def build_help_text(bindings: Iterable[Binding]) -> Text:
    by_action: dict[str, list[str]] = defaultdict(list)
    by_desc: dict[str, str] = {}
    for binding in bindings:
        by_action[binding.action].append(binding.key)
        if binding.description:
            by_desc[binding.action] = binding.description

    general: list[tuple[str, str]] = []
    for action in _GENERAL_ACTIONS:
        keys = by_action.get(action)
        if not keys:
            continue
        key_text = ", ".join(_format_key(key) for key in keys)
        label = _ACTION_OVERRIDES.get(action, by_desc.get(action, action))
        general.append((key_text, label))

    content = Text()
    _append_section(content, "Queue", _QUEUE_HELP)
    _append_section(content, "Popups", _POPUP_HELP)
    _append_section(content, "General", general)
    content.append("\nLogs — %LOCALAPPDATA%/PlayDeck/logs or ~/.playdeck/logs\n")
    return content


class HelpModal(ModalScreen[None]):
    """Help modal listing keybinds."""

    DEFAULT_CSS = """
    HelpModal {
        align: center middle;
    }
    #help_modal {
        width: 64;
        height: 80%;
        border: round $accent;
        background: $surface;
    }
    #help_footer {
        height: 3;
    }
    """

    def __init__(self, bindings: Iterable[Binding]) -> None:
        super().__init__()
        self._help_bindings = list(bindings)

    def compose(self) -> ComposeResult:
        with Vertical(id="help_modal"):
            yield Static("PlayDeck Help", id="help_title")
            with VerticalScroll(id="help_scroll"):
                yield Static(build_help_text(self._help_bindings), id="help_content")
            with Horizontal(id="help_footer"):
                yield Static("Esc/q — Close", id="help_hint")
                yield Button("Close", id="help_close")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "help_close":
            self.dismiss(None)

    def on_key(self, event: events.Key) -> None:
        if event.key in {"escape", "q"}:
            event.stop()
            self.dismiss(None)
