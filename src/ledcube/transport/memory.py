"""In-memory transport for dry runs and tests."""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class MemoryTransport:
    """
    Records every write instead of sending it anywhere.

    Can be told to fail or to accept fewer bytes than offered, which makes
    it useful for exercising the cube's error paths without hardware.
    """

    def __init__(
        self,
        port: str = "memory",
        fail_with: Optional[Exception] = None,
        accept: Optional[int] = None,
    ):
        """
        Args:
            port: Name reported in logs
            fail_with: Exception raised by every write (None = succeed)
            accept: Maximum bytes accepted per write (None = all)
        """
        self.port = port
        self.fail_with = fail_with
        self.accept = accept
        self.writes: list[bytes] = []
        self.closed = False

    def write(self, data: bytes) -> int:
        if self.fail_with is not None:
            raise self.fail_with

        data = bytes(data)
        if self.accept is not None:
            data = data[:self.accept]

        self.writes.append(data)
        logger.debug(f"{self.port}: wrote {data.hex()}")
        return len(data)

    def close(self) -> None:
        self.closed = True

    @property
    def last_write(self) -> Optional[bytes]:
        """Most recent write, or None if nothing was written."""
        return self.writes[-1] if self.writes else None


def memory_opener(transport: Optional[MemoryTransport] = None):
    """
    Build a TransportOpener that hands out a MemoryTransport.

    Args:
        transport: Instance to return (a new one per open if None)
    """
    def open_port(port: str) -> MemoryTransport:
        return transport if transport is not None else MemoryTransport(port)

    return open_port
