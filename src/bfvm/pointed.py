from __future__ import annotations

from typing import Any, Sequence


class PointedBuffer:
    """A fixed sequence with one movable cursor.

    Cursor moves are unchecked; the engine decides what an out-of-range
    cursor means before moving it.
    """

    __slots__ = ('_items', '_cursor')

    def __init__(self, items: Sequence[Any]):
        self._items = items
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def items(self) -> Sequence[Any]:
        return self._items

    def right(self) -> None:
        self._cursor += 1

    def left(self) -> None:
        self._cursor -= 1

    def read(self) -> Any:
        return self._items[self._cursor]

    def write(self, value: Any) -> None:
        self._items[self._cursor] = value

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"PointedBuffer(len={len(self._items)}, cursor={self._cursor})"
