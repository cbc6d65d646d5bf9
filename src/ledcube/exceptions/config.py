"""Configuration-related exceptions.

- ConfigurationError: Base class for configuration errors
- ConfigFileInvalidError: Config file is not valid JSON
- ConfigValidationError: Config values fail validation
"""

from typing import Any, Optional

from .base import LedCubeError


class ConfigurationError(LedCubeError):
    """Configuration is invalid or cannot be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """Configuration file could not be parsed."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the invalid config file
            parse_error: The parsing error message
        """
        if "trailing comma" in parse_error.lower():
            user_msg = "Configuration file has a trailing comma"
        elif parse_error == "File is empty":
            user_msg = "Configuration file is empty"
        else:
            user_msg = "Configuration file has invalid syntax"

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recovery_hint=(
                f"Fix or delete {file_path}\n"
                "Run 'ledcube config reset' to restore the defaults"
            ),
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """Configuration values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Initialize config validation error.

        Args:
            field: The configuration field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the config file (optional)
        """
        user_msg = f"Invalid configuration value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your configuration"
        if file_path:
            recovery += f"\nConfig file: {file_path}"

        if field == "port":
            recovery += "\nRun 'ledcube ports list' to see available serial ports"
        elif "baudrate" in field:
            recovery += "\nThe cube firmware expects the baud rate it was flashed with (usually 9600)"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Config validation failed for {field}={value}: {error_msg}",
            recovery_hint=recovery
        )
        self.field = field
        self.value = value
        self.file_path = file_path
