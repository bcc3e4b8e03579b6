"""A sequence with a movable cursor, plus queue and stack built on deques."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Iterable, Iterator


class CursorList:
    """A list that remembers a current position for first/next traversal."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)
        self._cursor: int | None = None

    def first(self) -> Any:
        """Move the cursor to the first element and return it, or ``None``."""
        if not self._items:
            return None
        self._cursor = 0
        return self._items[0]

    def next(self) -> Any:
        """Advance the cursor and return the element, or ``None`` at the end."""
        if self._cursor is None or self._cursor + 1 >= len(self._items):
            return None
        self._cursor += 1
        return self._items[self._cursor]

    def push_front(self, data: Any) -> None:
        self._items.insert(0, data)
        if self._cursor is not None:
            self._cursor += 1

    def push_back(self, data: Any) -> None:
        self._items.append(data)

    def push_current(self, data: Any) -> None:
        """Insert ``data`` after the cursor; does nothing if there is no cursor."""
        if self._cursor is None:
            return
        self._items.insert(self._cursor + 1, data)

    def sorted_insert(self, data: Any, lower_than: Callable[[Any, Any], bool]) -> None:
        """Insert ``data`` before the first element it is lower than."""
        if not self._items or lower_than(data, self._items[0]):
            self.push_front(data)
            return
        position = next(
            (i for i, item in enumerate(self._items[1:], 1) if lower_than(data, item)),
            len(self._items),
        )
        self._cursor = position - 1
        self.push_current(data)

    def pop_front(self) -> Any:
        if not self._items:
            return None
        data = self._items.pop(0)
        if self._cursor is not None:
            self._cursor = None if self._cursor == 0 else self._cursor - 1
        return data

    def pop_back(self) -> Any:
        if not self._items:
            return None
        data = self._items.pop()
        if self._cursor == len(self._items):
            self._cursor = None
        return data

    def pop_current(self) -> Any:
        """Remove the element at the cursor; the cursor moves to its successor."""
        if self._cursor is None:
            return None
        index = self._cursor
        data = self._items.pop(index)
        self._cursor = index if index < len(self._items) else None
        return data

    def clean(self) -> None:
        self._items.clear()
        self._cursor = None

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))


class Queue:
    """First-in first-out queue; reads from an empty queue give ``None``."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def insert(self, data: Any) -> None:
        self._items.append(data)

    def remove(self) -> Any:
        return self._items.popleft() if self._items else None

    def front(self) -> Any:
        return self._items[0] if self._items else None

    def clean(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class Stack:
    """Last-in first-out stack; reads from an empty stack give ``None``."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, data: Any) -> None:
        self._items.append(data)

    def top(self) -> Any:
        return self._items[-1] if self._items else None

    def pop(self) -> Any:
        return self._items.pop() if self._items else None

    def clean(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)