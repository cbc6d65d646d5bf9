"""Byte-oriented transports that carry the pattern to the cube."""

from .memory import MemoryTransport, memory_opener
from .protocols import Transport, TransportOpener
from .serial_transport import SerialTransport, serial_opener

__all__ = [
    "MemoryTransport",
    "SerialTransport",
    "Transport",
    "TransportOpener",
    "memory_opener",
    "serial_opener",
]
