"""Bit-packed lighting pattern."""

import numpy as np

from .addressing import PATTERN_LENGTH, SIZE, CubePosition, address, invert


class PatternBuffer:
    """
    The 16-byte on/off state of every LED.

    Each byte holds one row of four LEDs in its low nibble; the high nibble
    is never written. Callers address LEDs by position only, never by raw
    byte.
    """

    def __init__(self):
        self._data = np.zeros(PATTERN_LENGTH, dtype=np.uint8)

    def set(self, position: CubePosition, on: bool) -> None:
        """Turn the LED at `position` on or off."""
        index, mask = address(position)
        if on:
            self._data[index] |= mask
        else:
            self._data[index] &= ~np.uint8(mask)

    def get(self, position: CubePosition) -> bool:
        """Return True if the LED at `position` is on."""
        index, mask = address(position)
        return bool(self._data[index] & mask)

    def clear(self) -> None:
        """Turn every LED off."""
        self._data.fill(0)

    def to_bytes(self) -> bytes:
        """Wire representation, bytes 0-15 in order."""
        return self._data.tobytes()

    def to_array(self) -> np.ndarray:
        """
        Decode the pattern into a boolean array indexed [x, y, z].

        Useful for rendering and for comparing patterns in tests.
        """
        grid = np.zeros((SIZE, SIZE, SIZE), dtype=bool)
        for x in range(SIZE):
            for y in range(SIZE):
                for z in range(SIZE):
                    index = SIZE * invert(y) + invert(z)
                    grid[x, y, z] = bool(self._data[index] & (1 << invert(x)))
        return grid

    def count(self) -> int:
        """Number of LEDs currently on."""
        return int(np.unpackbits(self._data).sum())

    def __eq__(self, other) -> bool:
        if not isinstance(other, PatternBuffer):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        rows = " ".join(f"{int(b):04b}" for b in self._data)
        return f"PatternBuffer({rows})"
