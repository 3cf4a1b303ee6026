"""A growable list with an optional comparator and a swap notification hook."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

Comparator = Callable[[Any, Any], int]
SwapUpdater = Callable[[Any, int], None]


class ArrayList:
    """Sequence of items that can carry a three-way comparator and a swap hook.

    The comparator returns a negative number, zero or a positive number,
    like ``cmp``.  The swap updater is called with each item and its new
    index whenever :meth:`swap` moves items around.
    """

    def __init__(
        self,
        items: Optional[Iterable[Any]] = None,
        comparator: Optional[Comparator] = None,
        swap_updater: Optional[SwapUpdater] = None,
    ) -> None:
        self._items: list[Any] = list(items) if items is not None else []
        self.comparator = comparator
        self.swap_updater = swap_updater

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ArrayList({self._items!r})"

    def append(self, item: Any) -> int:
        """Add an item at the end and return the index it was stored at."""
        self._items.append(item)
        return len(self._items) - 1

    def pop(self) -> Any:
        """Remove and return the last item, or None when empty."""
        return self._items.pop() if self._items else None

    def pop_front(self) -> Any:
        """Remove and return the first item, or None when empty."""
        return self._items.pop(0) if self._items else None

    def remove(self, index: int) -> Any:
        """Remove and return the item at ``index``, or None if it is out of range."""
        if not 0 <= index < len(self._items):
            return None
        return self._items.pop(index)

    def contains(self, value: Any) -> bool:
        """Tell whether any item compares equal to ``value`` under the comparator."""
        if self.comparator is None:
            raise TypeError("contains() needs a comparator to be set")
        return any(self.comparator(value, item) == 0 for item in self._items)

    def swap(self, a: int, b: int) -> None:
        """Exchange the items at ``a`` and ``b`` and notify the swap updater."""
        items = self._items
        items[a], items[b] = items[b], items[a]
        if self.swap_updater is not None:
            self.swap_updater(items[a], a)
            self.swap_updater(items[b], b)