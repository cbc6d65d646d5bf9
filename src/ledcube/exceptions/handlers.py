"""
Centralized error handling utilities.

Errors are translated one layer at a time:

1. **Transport layer** (pyserial) raises `serial.SerialException` / `OSError`
2. **Cube layer** converts those with `wrap_serial_error` into `CubeError`
   subclasses that carry a user message and a recovery hint
3. **CLI layer** renders them with `format_error_for_display`

| Scenario | Use This |
|----------|----------|
| Port cannot be opened | `raise wrap_serial_error(e, port, "open") from e` |
| Write failed | `raise wrap_serial_error(e, port, "write") from e` |
| Config value invalid | `raise wrap_pydantic_error(e, str(path)) from e` |
| Critical section with auto-logging | `with ErrorContext("connect to cube"): ...` |
"""

import logging
from typing import Optional

from .base import LedCubeError
from .config import ConfigFileInvalidError, ConfigValidationError
from .cube import CubeConnectionError, CubeError, CubeIOError


logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Log the start, completion or failure of a critical section.

    Exceptions are never suppressed.

    Example:
        ```python
        with ErrorContext("connect to cube", logger_instance=logger):
            transport = opener(port)
        ```
    """

    def __init__(self, operation: str, logger_instance: Optional[logging.Logger] = None):
        """
        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
        """
        self.operation = operation
        self.logger = logger_instance or logger

    def __enter__(self):
        """Enter the context."""
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Log any exception and let it propagate."""
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        if isinstance(exc_val, LedCubeError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        return False


def wrap_serial_error(error: Exception, port: Optional[str], operation: str) -> CubeError:
    """
    Convert low-level transport errors to cube exceptions.

    Args:
        error: The original exception from the transport (pyserial, OS, fake)
        port: Port identifier involved in the error
        operation: "open" or "write"

    Returns:
        CubeConnectionError for open failures, CubeIOError for write failures
    """
    if isinstance(error, CubeError):
        return error

    error_msg = str(error) or type(error).__name__

    if operation == "open":
        return CubeConnectionError(port=port or "<unknown>", original_error=error_msg)

    return CubeIOError(port=port, original_error=error_msg)


def wrap_pydantic_error(error: Exception, file_path: str) -> LedCubeError:
    """
    Convert Pydantic validation errors to ledcube exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input'),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
                file_path=file_path
            )

    return ConfigValidationError(field="unknown", value=None, error_msg=error_msg, file_path=file_path)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, LedCubeError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
