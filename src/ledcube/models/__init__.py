"""Data models for ledcube."""

from .config import DEFAULT_CONFIG_PATH, AppConfig, SerialConfig
from .enums import CubeState

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AppConfig",
    "CubeState",
    "SerialConfig",
]
