"""Main entry point for ledcube."""

from ledcube.cli.main import cli

if __name__ == "__main__":
    cli()
