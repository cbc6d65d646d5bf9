"""Cube-related exceptions.

This module defines exceptions for talking to the LED cube:
- CubeError: Base class for cube transport errors
- CubeConnectionError: Serial port could not be opened
- CubeIOError: Pattern could not be written to the cube
- CubeClosedError: Cube was used after being closed
- CubePositionError: Coordinate outside the 4x4x4 grid (programming error)
"""

from typing import Optional

from .base import LedCubeError


class CubeError(LedCubeError):
    """Cube connection or transfer failed."""

    def __init__(self, user_message: str, port: Optional[str] = None, **kwargs):
        """
        Initialize cube error.

        Args:
            user_message: User-friendly error message
            port: The port the cube is attached to (if known)
        """
        super().__init__(user_message, **kwargs)
        self.port = port


class CubeConnectionError(CubeError):
    """The transport to the cube could not be opened."""

    def __init__(self, port: str, original_error: Optional[str] = None):
        """
        Initialize connection error.

        Args:
            port: Port identifier that failed to open
            original_error: The original error message from the serial library
        """
        user_msg = f"Could not connect to LED cube on '{port}'."
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        recovery = (
            "Check that the cube is plugged in and no other program holds the port. "
            "Run 'ledcube ports list' to see available serial ports."
        )

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            port=port,
            recovery_hint=recovery,
        )


class CubeIOError(CubeError):
    """Writing the pattern buffer to the cube failed or was short."""

    def __init__(
        self,
        port: Optional[str] = None,
        original_error: Optional[str] = None,
        written: Optional[int] = None,
        expected: Optional[int] = None,
    ):
        """
        Initialize I/O error.

        Args:
            port: Port the write was sent to
            original_error: The original error message from the transport
            written: Bytes accepted by the transport on a short write
            expected: Bytes that should have been accepted
        """
        if written is not None and expected is not None:
            user_msg = f"Short write to LED cube ({written} of {expected} bytes)."
        else:
            user_msg = "Failed to write pattern to LED cube."

        tech_msg = user_msg
        if port:
            tech_msg += f" Port: {port}"
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            port=port,
            recovery_hint="The pattern is unchanged in memory; flush again to retry.",
        )
        self.written = written
        self.expected = expected


class CubeClosedError(CubeError):
    """The cube connection was already closed."""

    def __init__(self, port: Optional[str] = None):
        super().__init__(
            user_message="LED cube connection is closed.",
            port=port,
            recovery_hint="Create a new Cube to reconnect.",
        )


class CubePositionError(IndexError):
    """Coordinate component outside [0, 4).

    A programming error, so not a LedCubeError.
    """

    def __init__(self, position):
        super().__init__(f"Cube position out of range: {tuple(position)!r} (each axis must be 0-3)")
        self.position = position
