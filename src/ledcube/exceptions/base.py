"""Base exception class for ledcube."""

from typing import Optional


class LedCubeError(Exception):
    """
    Base exception for errors a user of the cube can act on.

    Attributes:
        user_message: Short message shown by the CLI
        technical_message: Detailed message for the log file
        recovery_hint: What to try next, shown under the message
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message
