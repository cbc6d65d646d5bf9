"""LED cube addressing, pattern buffer and controller."""

from .addressing import PATTERN_LENGTH, SIZE, CubePosition, address, check_bounds, invert
from .controller import Cube
from .pattern import PatternBuffer

__all__ = [
    "PATTERN_LENGTH",
    "SIZE",
    "Cube",
    "CubePosition",
    "PatternBuffer",
    "address",
    "check_bounds",
    "invert",
]
