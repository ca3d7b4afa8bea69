"""Ordered items with a single optional selection."""

from __future__ import annotations

from typing import Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


class SelectableList(Generic[T]):
    """Immutable item sequence plus one optional selected index.

    Moves clamp at both ends. From no selection, ``select_next`` picks the
    first item and ``select_previous`` the last one. An empty list never has
    a selection.
    """

    def __init__(self, items: Iterable[T] = (), selected: Optional[int] = None):
        self._items: tuple[T, ...] = tuple(items)
        self._selected: Optional[int] = None
        self.select(selected)

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def selected(self) -> Optional[int]:
        return self._selected

    def selected_item(self) -> Optional[T]:
        return self.get(self._selected)

    def get(self, index: Optional[int]) -> Optional[T]:
        if index is None or not 0 <= index < len(self._items):
            return None
        return self._items[index]

    def select(self, index: Optional[int]) -> None:
        if index is None or self.is_empty():
            self._selected = None
            return
        self._selected = self._clamp(index)

    def select_next(self) -> None:
        if self.is_empty():
            return
        if self._selected is None:
            self._selected = 0
            return
        self._selected = self._clamp(self._selected + 1)

    def select_previous(self) -> None:
        if self.is_empty():
            return
        if self._selected is None:
            self._selected = len(self._items) - 1
            return
        self._selected = self._clamp(self._selected - 1)

    def replace_items(self, items: Iterable[T]) -> None:
        """Swap in a new sequence, keeping the selection inside its bounds."""
        self._items = tuple(items)
        self.select(self._selected)

    def _clamp(self, index: int) -> int:
        return max(0, min(index, len(self._items) - 1))

    def __repr__(self) -> str:
        return f"SelectableList(len={len(self._items)}, selected={self._selected})"
