"""
Controller for a 4x4x4 LED cube on a serial link.

Lighting changes are buffered: `set` and `clear` only touch the in-memory
pattern, and nothing reaches the cube until `flush` writes all 16 bytes in
a single call.

Usage Example
-------------

.. code-block:: python

    with Cube("/dev/ttyUSB0") as cube:
        cube.set((0, 0, 0), True)
        cube.set((3, 3, 3), True)
        cube.flush()
"""

import contextlib
import logging
from typing import Optional

import numpy as np

from ledcube.exceptions import CubeClosedError, CubeIOError, ErrorContext, wrap_serial_error
from ledcube.models.enums import CubeState
from ledcube.transport import Transport, TransportOpener, serial_opener

from .addressing import PATTERN_LENGTH, CubePosition
from .pattern import PatternBuffer

logger = logging.getLogger(__name__)


class Cube:
    """
    A connection to an LED cube.

    Construction opens the transport and flushes an all-off pattern so the
    cube starts in a known state. There is no reconnect: the transport is
    opened exactly once and lives as long as the Cube.
    """

    def __init__(self, port: str, opener: Optional[TransportOpener] = None):
        """
        Connect to an LED cube.

        Args:
            port: Port identifier passed to the opener (e.g. "/dev/ttyUSB0", "COM5")
            opener: Callable that opens a Transport for `port`
                    (default: pyserial at 9600 baud)

        Raises:
            CubeConnectionError: If the transport cannot be opened
            CubeIOError: If the initial all-off flush fails
        """
        self.port = port
        self.state = CubeState.CONNECTING
        self._pattern = PatternBuffer()
        opener = opener or serial_opener()

        with ErrorContext(f"connect to cube on {port}", logger_instance=logger):
            try:
                self._transport: Transport = opener(port)
            except Exception as e:
                raise wrap_serial_error(e, port, "open") from e

            try:
                self.flush()
            except CubeIOError:
                with contextlib.suppress(Exception):
                    self._transport.close()
                raise

        self.state = CubeState.CONNECTED
        logger.info(f"Connected to LED cube on {port}")

    # ================================================================
    # PATTERN
    # ================================================================

    def set(self, position: CubePosition, on: bool) -> None:
        """
        Turn the LED at `position` on or off.

        Takes effect on the cube at the next `flush`.

        Raises:
            CubePositionError: If any axis of `position` is outside 0-3
        """
        self._pattern.set(position, on)

    def get(self, position: CubePosition) -> bool:
        """
        Return True if the LED at `position` is on in the buffer.

        Reflects the last `set`, which may not have been flushed yet.

        Raises:
            CubePositionError: If any axis of `position` is outside 0-3
        """
        return self._pattern.get(position)

    def clear(self) -> None:
        """Turn off all LEDs (in the buffer)."""
        self._pattern.clear()

    def to_array(self) -> np.ndarray:
        """Current buffer as a boolean array indexed [x, y, z]."""
        return self._pattern.to_array()

    @property
    def pattern(self) -> bytes:
        """The 16 bytes the next flush will send."""
        return self._pattern.to_bytes()

    # ================================================================
    # TRANSFER
    # ================================================================

    def flush(self) -> None:
        """
        Update the LED cube to match the internal buffer.

        Writes the whole pattern in one call. A failed or short write is
        reported as-is, with no retry; the buffer is left untouched so the
        caller can flush again.

        Raises:
            CubeIOError: If the transport raised or accepted fewer than 16 bytes
            CubeClosedError: If the cube has been closed
        """
        if self.state == CubeState.CLOSED:
            raise CubeClosedError(self.port)

        data = self._pattern.to_bytes()
        try:
            written = self._transport.write(data)
        except Exception as e:
            logger.error(f"Write to {self.port} failed: {e}")
            raise wrap_serial_error(e, self.port, "write") from e

        if written is None:
            logger.error(f"Write to {self.port} did not report a byte count")
            raise CubeIOError(port=self.port, original_error="transport did not report bytes written")

        if written < PATTERN_LENGTH:
            logger.error(f"Short write to {self.port}: {written}/{PATTERN_LENGTH} bytes")
            raise CubeIOError(port=self.port, written=written, expected=PATTERN_LENGTH)

        logger.debug(f"Flushed pattern {data.hex()} to {self.port}")

    # ================================================================
    # LIFECYCLE
    # ================================================================

    def close(self) -> None:
        """Release the transport. The Cube cannot be flushed afterwards."""
        if self.state == CubeState.CLOSED:
            return

        self._transport.close()
        self.state = CubeState.CLOSED
        logger.info(f"Disconnected from LED cube on {self.port}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"Cube(port={self.port!r}, state={self.state.value})"
