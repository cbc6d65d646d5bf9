"""Enumerations for cube state."""

from enum import Enum


class CubeState(str, Enum):
    """Lifecycle state of a Cube connection."""

    CONNECTING = "connecting"
    CONNECTED = "connected"
    CLOSED = "closed"
