from __future__ import annotations

from typing import Iterable

import numpy as np


class Tape:
    """
    Growable tape of unsigned 8-bit cells plus the cursor addressing it.

    Logical cell 0 is always the leftmost cell. Physically the cells live in
    a window of a larger uint8 buffer, so growing to the left only moves the
    window start; the buffer is reallocated (window re-centred) when either
    side runs out of room.
    """

    def __init__(self, capacity: int = 64):
        capacity = max(2, capacity)
        self._buf = np.zeros(capacity, dtype=np.uint8)
        self._lo = capacity // 2  # physical index of logical cell 0
        self._hi = self._lo + 1
        self.cursor = 0

    @classmethod
    def from_cells(cls, cells: Iterable[int], cursor: int = 0) -> "Tape":
        values = np.asarray([c & 0xFF for c in cells], dtype=np.uint8)
        if values.size == 0:
            raise ValueError("a tape needs at least one cell")
        if not 0 <= cursor < values.size:
            raise ValueError(f"cursor {cursor} outside tape of length {values.size}")
        tape = cls(capacity=values.size * 2)
        tape._lo = (len(tape._buf) - values.size) // 2
        tape._hi = tape._lo + values.size
        tape._buf[tape._lo:tape._hi] = values
        tape.cursor = cursor
        return tape

    def __len__(self) -> int:
        return self._hi - self._lo

    def __repr__(self) -> str:
        return f"Tape(cells={self.cells().tolist()!r}, cursor={self.cursor})"

    def cells(self) -> np.ndarray:
        """Copy of the logical cells, leftmost first."""
        return self._buf[self._lo:self._hi].copy()

    # ===== Cell access =====

    def read(self) -> int:
        return int(self._buf[self._lo + self.cursor])

    def write(self, value: int) -> None:
        self._buf[self._lo + self.cursor] = np.uint8(value & 0xFF)

    def increment(self) -> None:
        pos = self._lo + self.cursor
        self._buf[pos] = np.uint8((int(self._buf[pos]) + 1) % 256)

    def decrement(self) -> None:
        pos = self._lo + self.cursor
        self._buf[pos] = np.uint8((int(self._buf[pos]) - 1) % 256)

    # ===== Cursor movement =====

    def shift_left(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1
            return
        # Grow leftward: a fresh zero cell becomes logical cell 0 and the
        # cursor stays pinned to it.
        if self._lo == 0:
            self._regrow()
        self._lo -= 1
        self._buf[self._lo] = 0

    def shift_right(self) -> None:
        self.cursor += 1
        if self.cursor == len(self):
            if self._hi == len(self._buf):
                self._regrow()
            self._buf[self._hi] = 0
            self._hi += 1

    def _regrow(self) -> None:
        size = len(self)
        new_buf = np.zeros(max(len(self._buf) * 2, size + 2), dtype=np.uint8)
        new_lo = (len(new_buf) - size) // 2
        new_buf[new_lo:new_lo + size] = self._buf[self._lo:self._hi]
        self._buf = new_buf
        self._lo = new_lo
        self._hi = new_lo + size
