"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

from ledcube.persistence import PydanticPersistence

DEFAULT_CONFIG_DIR = Path.home() / ".ledcube"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.json"


class SerialConfig(BaseModel):
    """Serial line settings for the cube's controller board."""

    baudrate: int = Field(default=9600, gt=0, description="Serial line speed in baud")
    timeout: float | None = Field(
        default=None,
        ge=0,
        description="Read timeout in seconds (None = block)",
    )
    write_timeout: float | None = Field(
        default=None,
        ge=0,
        description="Write timeout in seconds (None = block until the pattern is sent)",
    )


class AppConfig(BaseModel):
    """Application configuration and settings."""

    port: str | None = Field(
        default=None,
        description="Serial port the cube is attached to (e.g. /dev/ttyUSB0 or COM5)",
    )
    serial: SerialConfig = Field(
        default_factory=SerialConfig,
        description="Serial line settings",
    )
    sweep_interval: float = Field(
        default=0.5,
        ge=0,
        description="Seconds each LED stays lit during a sweep",
    )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file (default: ~/.ledcube/config.json)

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)

    def opener(self):
        """TransportOpener using this config's serial settings."""
        from ledcube.transport import serial_opener

        return serial_opener(
            baudrate=self.serial.baudrate,
            timeout=self.serial.timeout,
            write_timeout=self.serial.write_timeout,
        )
