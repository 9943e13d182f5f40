"""A list with a single wraparound selection cursor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class StatefulList(Generic[T]):
    """
    Ordered items plus an optional selected index.

    The list only moves the cursor. Callers mutate ``items[selected()]``
    themselves.
    """

    def __init__(self, items: Iterable[T] = ()):
        self.items: list[T] = list(items)
        self._selected: int | None = None

    @classmethod
    def with_items(cls, items: Iterable[T]) -> StatefulList[T]:
        return cls(items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def selected(self) -> int | None:
        """Return the selected index, or None when unset or empty."""
        if not self.items:
            return None
        return self._selected

    def selected_item(self) -> T | None:
        index = self.selected()
        if index is None:
            return None
        return self.items[index]

    def select(self, index: int | None) -> None:
        """Move the cursor to *index* (None clears it)."""
        if index is not None and not 0 <= index < len(self.items):
            raise IndexError(f"selection {index} out of range for {len(self.items)} items")
        self._selected = index

    def next(self) -> None:
        """Select the following item, wrapping to the first."""
        if not self.items:
            self._selected = None
            return
        if self._selected is None or self._selected >= len(self.items) - 1:
            self._selected = 0
        else:
            self._selected += 1

    def previous(self) -> None:
        """Select the preceding item, wrapping to the last."""
        if not self.items:
            self._selected = None
            return
        if self._selected is None:
            self._selected = 0
        elif self._selected == 0:
            self._selected = len(self.items) - 1
        else:
            self._selected -= 1
