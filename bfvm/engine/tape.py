"""
The tape: a fixed-length row of unsigned 8-bit cells.

Cell arithmetic wraps modulo 256. The tape itself never checks pointer
movement; that belongs to the pointer-move handlers, which must reject a
move before the tape is indexed.
"""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_TAPE_SIZE = 30000


class Tape:
    """Zero-initialised byte cells, addressed from 0 to ``size - 1``."""

    def __init__(self, size: int = DEFAULT_TAPE_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"tape size must be > 0, got {size}")
        self._cells = bytearray(size)

    @property
    def size(self) -> int:
        return len(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, index: int) -> int:
        return self._cells[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._cells[index] = value

    def __iter__(self) -> Iterator[int]:
        return iter(self._cells)

    def increment(self, index: int) -> None:
        self._cells[index] = (self._cells[index] + 1) % 256

    def decrement(self, index: int) -> None:
        self._cells[index] = (self._cells[index] - 1) % 256

    def snapshot(self) -> bytes:
        """Return an immutable copy of every cell."""
        return bytes(self._cells)
