"""Ordered set of non-negative indices with a universe size for complements."""

from __future__ import annotations

from collections.abc import Iterator


class IndexSet:
    """A set of indices with a ``count`` that bounds complement operations."""

    def __init__(self) -> None:
        self._items: set[int] = set()
        self.count = 0

    def fill(self, count: int, value: bool) -> None:
        """Set the universe size to ``count`` and set or clear indices ``0..count-1``."""
        if self.count >= count and not value:
            self.count = count
            self._items.clear()
            return
        self.count = count
        self.fill_range(0, count, value)

    def fill_range(self, start: int, stop: int, value: bool) -> None:
        """Set or clear every index in ``[start, stop)``."""
        span = range(start, stop)
        if value:
            self._items.update(span)
        else:
            self._items.difference_update(span)

    def clear(self) -> None:
        """Remove every index."""
        self._items.clear()

    def _combine(self, other: IndexSet, items: set[int]) -> IndexSet:
        result = IndexSet()
        result._items = items
        result.count = max(self.count, other.count)
        return result

    def __and__(self, other: IndexSet) -> IndexSet:
        return self._combine(other, self._items & other._items)

    def __or__(self, other: IndexSet) -> IndexSet:
        return self._combine(other, self._items | other._items)

    def __sub__(self, other: IndexSet) -> IndexSet:
        return self._combine(other, self._items - other._items)

    def __xor__(self, other: IndexSet) -> IndexSet:
        return self._combine(other, self._items ^ other._items)

    def __invert__(self) -> IndexSet:
        result = IndexSet()
        result._items = set(range(self.count)) - self._items
        result.count = self.count
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexSet):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __contains__(self, n: object) -> bool:
        return n in self._items

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __str__(self) -> str:
        return "".join(f"{el} " for el in self)

    def __repr__(self) -> str:
        return f"IndexSet({sorted(self._items)!r}, count={self.count})"

    def get(self, n: int) -> bool:
        """Return whether index ``n`` is present."""
        return n in self._items

    def set(self, n: int) -> None:
        """Add index ``n``."""
        self._items.add(n)

    def reset(self, n: int) -> None:
        """Remove index ``n`` if present."""
        self._items.discard(n)

    def max(self) -> int:
        """Return the highest index; raises ValueError when empty."""
        if not self._items:
            raise ValueError("max() of an empty IndexSet")
        return max(self._items)

    def min(self) -> int:
        """Return the lowest index; raises ValueError when empty."""
        if not self._items:
            raise ValueError("min() of an empty IndexSet")
        return min(self._items)