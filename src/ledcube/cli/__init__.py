"""Command-line interface for ledcube."""
