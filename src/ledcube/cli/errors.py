"""Error reporting for CLI commands."""

import logging
import sys
from contextlib import contextmanager

import click

from ledcube.exceptions import format_error_for_display

logger = logging.getLogger(__name__)


@contextmanager
def report_errors(operation: str):
    """
    Show errors raised inside the block as a clean message and exit 1.

    Click's own exceptions and KeyboardInterrupt pass through untouched.
    """
    try:
        yield
    except (click.ClickException, click.Abort):
        raise
    except KeyboardInterrupt:
        logger.info(f"{operation} interrupted by user")
        click.echo("\nStopped.", err=True)
    except Exception as e:
        logger.exception(f"Error during {operation}")

        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "=" * 70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("=" * 70, err=True)

        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)

        ctx = click.get_current_context(silent=True)
        log_path = ctx.obj.get("log_path") if ctx is not None and ctx.obj else None
        if log_path:
            click.echo(f"\nFor details, check the log file: {log_path}", err=True)

        sys.exit(1)
