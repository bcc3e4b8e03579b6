"""A max-priority heap holding arbitrary data."""

from __future__ import annotations

from typing import Any


class PriorityHeap:
    """Binary heap whose top is the item with the highest priority."""

    def __init__(self) -> None:
        self._items: list[tuple[int, Any]] = []

    def top(self) -> Any:
        """Return the data with the highest priority, or ``None`` if empty."""
        return self._items[0][1] if self._items else None

    def push(self, data: Any, priority: int) -> None:
        """Add ``data`` with the given priority."""
        items = self._items
        items.append((priority, data))
        now = len(items) - 1
        while now > 0 and items[(now - 1) // 2][0] < priority:
            items[now] = items[(now - 1) // 2]
            now = (now - 1) // 2
        items[now] = (priority, data)

    def pop(self) -> Any:
        """Remove the top item and return its data."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        removed = items[0][1]
        last = items.pop()
        if not items:
            return removed
        items[0] = last
        priority = last[0]
        size = len(items)
        now = 1
        while (now < size and items[now][0] > priority) or (
            now + 1 < size and items[now + 1][0] > priority
        ):
            if now + 1 < size and items[now][0] < items[now + 1][0]:
                now += 1
            parent = (now - 1) // 2
            items[parent], items[now] = items[now], items[parent]
            now = now * 2 + 1
        return removed

    def __len__(self) -> int:
        return len(self._items)