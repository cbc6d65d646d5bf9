"""Transport protocols.

The cube only needs a byte sink: something that can be opened from a port
identifier, accepts whole writes, and can be closed. Anything satisfying
these protocols can drive a Cube (pyserial, a socket bridge, a test fake).
"""

from __future__ import annotations

from typing import Protocol


class Transport(Protocol):
    """Protocol for an opened byte-oriented connection."""

    def write(self, data: bytes) -> int:
        """
        Write bytes to the device.

        Returns:
            Number of bytes accepted. Anything other than the full length,
            including None, is reported by the cube as a failed write.

        Raises:
            Any exception on I/O failure; the cube wraps it in CubeIOError.
        """
        ...

    def close(self) -> None:
        """Release the connection."""
        ...


class TransportOpener(Protocol):
    """Protocol for the callable that opens a Transport."""

    def __call__(self, port: str) -> Transport:
        """
        Open a connection to `port`.

        Raises:
            Any exception if the port cannot be opened; the cube wraps it
            in CubeConnectionError.
        """
        ...
