"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from ledcube import __version__
from ledcube.models import DEFAULT_CONFIG_PATH

from .commands import clear, config, light, ports_group, sweep

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG), also echoed to stderr
        debug: If True, log at DEBUG level to ./ledcube-debug.log
        log_file: Custom log file path (optional)
        log_level: Log level for the custom log file (DEBUG/INFO/WARNING/ERROR)

    Returns:
        Path of the log file in use
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())
        log_path = log_file
    elif debug:
        log_path = Path.cwd() / "ledcube-debug.log"
    else:
        log_dir = DEFAULT_CONFIG_PATH.parent / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / "ledcube.log"

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    if verbose:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        root_logger.addHandler(console_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="ledcube")
@click.option(
    '--config-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f'Configuration file (default: {DEFAULT_CONFIG_PATH})'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./ledcube-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    LED Cube - drive a 4x4x4 LED cube over a serial port.

    Coordinates are X Y Z, each 0-3. Changes are sent to the cube as one
    16-byte pattern.

    \b
    Examples:
      # Find the cube's serial port
      ledcube ports list

      # Remember the port
      ledcube config set --port /dev/ttyUSB0

      # Light two corners
      ledcube light 0 0 0 3 3 3

      # Run the sweep demo without hardware
      ledcube sweep --dry-run --interval 0
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_file or DEFAULT_CONFIG_PATH
    ctx.obj["log_path"] = setup_logging(verbose, debug, log_file, log_level)


cli.add_command(ports_group)
cli.add_command(light)
cli.add_command(clear)
cli.add_command(sweep)
cli.add_command(config)

if __name__ == "__main__":
    cli()
