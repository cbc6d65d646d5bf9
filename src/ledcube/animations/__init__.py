"""Caller-side sequences built on the Cube API."""

from .sweep import positions, sweep

__all__ = ["positions", "sweep"]
