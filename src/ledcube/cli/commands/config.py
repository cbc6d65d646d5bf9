"""
Config commands.

Commands:
    - config show                           # Display configuration
    - config set --port PORT --baudrate N   # Update configuration
    - config reset                          # Restore defaults
"""

import logging
from typing import Optional

import click
from pydantic import ValidationError

from ledcube.exceptions import wrap_pydantic_error
from ledcube.models import AppConfig

from ..errors import report_errors

logger = logging.getLogger(__name__)


@click.group(name="config")
def config():
    """View and change ledcube settings."""
    pass


@config.command(name="show")
@click.pass_context
def show(ctx):
    """Display the current configuration."""
    path = ctx.obj["config_path"]
    with report_errors("show config"):
        config_obj = AppConfig.load_or_default(path)

        click.echo(f"Config file: {path}{'' if path.exists() else ' (not saved yet)'}\n")
        click.echo(f"  port:                 {config_obj.port or '(not set)'}")
        click.echo(f"  serial.baudrate:      {config_obj.serial.baudrate}")
        click.echo(f"  serial.timeout:       {config_obj.serial.timeout}")
        click.echo(f"  serial.write_timeout: {config_obj.serial.write_timeout}")
        click.echo(f"  sweep_interval:       {config_obj.sweep_interval}")


@config.command(name="set")
@click.pass_context
@click.option('--port', '-p', type=str, default=None, help='Serial port of the cube')
@click.option('--baudrate', '-b', type=int, default=None, help='Serial line speed in baud')
@click.option('--timeout', type=float, default=None, help='Read timeout in seconds')
@click.option('--write-timeout', type=float, default=None, help='Write timeout in seconds')
@click.option('--sweep-interval', type=float, default=None, help='Seconds per LED during sweep')
def set_values(
    ctx,
    port: Optional[str],
    baudrate: Optional[int],
    timeout: Optional[float],
    write_timeout: Optional[float],
    sweep_interval: Optional[float],
):
    """Update configuration values and save."""
    path = ctx.obj["config_path"]
    with report_errors("set config"):
        config_obj = AppConfig.load_or_default(path)

        updates = {}
        if port is not None:
            updates["port"] = port
        if sweep_interval is not None:
            updates["sweep_interval"] = sweep_interval

        serial_updates = {}
        if baudrate is not None:
            serial_updates["baudrate"] = baudrate
        if timeout is not None:
            serial_updates["timeout"] = timeout
        if write_timeout is not None:
            serial_updates["write_timeout"] = write_timeout
        if serial_updates:
            updates["serial"] = config_obj.serial.model_dump() | serial_updates

        if not updates:
            click.echo("Nothing to change. See 'ledcube config set --help'.")
            return

        try:
            new_config = AppConfig.model_validate(config_obj.model_dump() | updates)
        except ValidationError as e:
            raise wrap_pydantic_error(e, str(path)) from e

        new_config.save(path)
        logger.info(f"Updated config {path}: {updates}")
        click.echo(f"[OK] Saved {path}")


@config.command(name="reset")
@click.pass_context
@click.confirmation_option(prompt="Reset all settings to defaults?")
def reset(ctx):
    """Restore default settings (the old file is kept as .bak)."""
    path = ctx.obj["config_path"]
    with report_errors("reset config"):
        AppConfig().save(path)
        logger.info(f"Reset config {path}")
        click.echo(f"[OK] Reset {path}")
