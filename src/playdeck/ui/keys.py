"""Key names recognized by the queue and popups.

Names follow Textual's ``events.Key.key`` values.
"""

from __future__ import annotations

MOVE_DOWN_KEYS = frozenset({"down", "j"})
MOVE_UP_KEYS = frozenset({"up", "k"})
TOGGLE_KEYS = frozenset({"left", "h", "right", "l"})
CONFIRM_KEY = "enter"
ADD_TO_PLAYLIST_KEY = "a"
CANCEL_KEY = "escape"
