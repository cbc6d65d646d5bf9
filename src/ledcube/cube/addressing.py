"""Coordinate addressing for the 4x4x4 cube."""

import operator
from typing import Sequence, Tuple

from ledcube.exceptions import CubePositionError

# A position on the cube, of the form (x, y, z)
CubePosition = Sequence[int]

SIZE = 4
PATTERN_LENGTH = SIZE * SIZE


def invert(n: int) -> int:
    """Flip an axis value to the cube's wiring order (0 <-> 3, 1 <-> 2)."""
    return SIZE - 1 - n


def check_bounds(position: CubePosition) -> Tuple[int, int, int]:
    """
    Validate a position and return it as a tuple of plain ints.

    Raises:
        CubePositionError: If the position is not three values in 0-3.
            Negative values are rejected rather than wrapped.
    """
    if len(position) != 3:
        raise CubePositionError(position)

    x, y, z = (operator.index(n) for n in position)
    if not (0 <= x < SIZE and 0 <= y < SIZE and 0 <= z < SIZE):
        raise CubePositionError(position)

    return x, y, z


def address(position: CubePosition) -> Tuple[int, int]:
    """
    Map a position to its location in the pattern buffer.

    The cube scans its layers in the reverse of the logical axis order,
    so every axis is inverted before packing:

        byte index = 4 * inv(y) + inv(z)
        bit        = inv(x)

    Args:
        position: (x, y, z), each 0-3

    Returns:
        (byte_index, bit_mask) with byte_index in 0-15 and a single bit
        set in the low nibble of bit_mask

    Example:
        (0, 0, 0) -> (15, 0b1000)
        (3, 3, 3) -> (0, 0b0001)
    """
    x, y, z = check_bounds(position)
    return SIZE * invert(y) + invert(z), 1 << invert(x)
