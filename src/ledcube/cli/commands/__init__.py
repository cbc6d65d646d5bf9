"""CLI commands for ledcube."""

from .config import config
from .cube import clear, light, sweep
from .ports import ports_group

__all__ = ["clear", "config", "light", "ports_group", "sweep"]
