"""Fixed-size bit map."""

from __future__ import annotations


class BitMap:
    """A bit map holding at least ``capacity`` bits, stored in bytes."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._bits = bytearray(capacity // 8 + 1)

    def _locate(self, x: int) -> tuple[int, int]:
        if x < 0 or x // 8 >= len(self._bits):
            raise IndexError(f"bit {x} out of range")
        return x // 8, 1 << (x % 8)

    def set(self, x: int) -> None:
        """Set bit ``x`` to 1."""
        byte, mask = self._locate(x)
        self._bits[byte] |= mask

    def reset(self, x: int) -> None:
        """Set bit ``x`` to 0."""
        byte, mask = self._locate(x)
        self._bits[byte] &= ~mask & 0xFF

    def test(self, x: int) -> bool:
        """Return whether bit ``x`` is set."""
        byte, mask = self._locate(x)
        return bool(self._bits[byte] & mask)