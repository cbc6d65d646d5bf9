"""ledcube: drive a 4x4x4 LED cube over a serial port."""

__version__ = "0.1.0"

from .cube import Cube, CubePosition, PatternBuffer, address

__all__ = [
    "Cube",
    "CubePosition",
    "PatternBuffer",
    "address",
]
