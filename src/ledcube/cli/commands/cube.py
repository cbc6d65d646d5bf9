"""Commands that drive the cube."""

import logging
from typing import Optional

import click

from ledcube.animations import sweep as run_sweep
from ledcube.cube import SIZE, Cube
from ledcube.models import AppConfig
from ledcube.transport import memory_opener

from ..errors import report_errors

logger = logging.getLogger(__name__)

port_option = click.option(
    '--port',
    '-p',
    type=str,
    default=None,
    help='Serial port of the cube (default: "port" from config)'
)
dry_run_option = click.option(
    '--dry-run',
    is_flag=True,
    help='Print the pattern instead of sending it to a cube'
)


def open_cube(ctx: click.Context, port: Optional[str], dry_run: bool) -> Cube:
    """Connect to the configured cube, or an in-memory one for --dry-run."""
    config_obj = AppConfig.load_or_default(ctx.obj["config_path"])

    if dry_run:
        return Cube(port or "dry-run", opener=memory_opener())

    port = port or config_obj.port
    if not port:
        raise click.UsageError(
            "No serial port given. Use --port, or save one with 'ledcube config set --port PORT'."
        )

    return Cube(port, opener=config_obj.opener())


def render(cube: Cube) -> str:
    """Draw the buffer as one X/Y grid per Z layer ('#' = on)."""
    grid = cube.to_array()
    lines = []
    for z in range(SIZE):
        lines.append(f"z={z}")
        for y in reversed(range(SIZE)):
            lines.append("  " + " ".join("#" if grid[x, y, z] else "." for x in range(SIZE)))
    lines.append(f"pattern: {cube.pattern.hex()}")
    return "\n".join(lines)


def parse_positions(values: tuple[int, ...]) -> list[tuple[int, int, int]]:
    """Group a flat list of numbers into X Y Z triples, checking each is 0-3."""
    if not values or len(values) % 3:
        raise click.BadParameter("expected one or more X Y Z triples", param_hint="POSITIONS")

    for value in values:
        if not 0 <= value < SIZE:
            raise click.BadParameter(f"{value} is outside 0-{SIZE - 1}", param_hint="POSITIONS")

    return [tuple(values[i:i + 3]) for i in range(0, len(values), 3)]


@click.command(name="light")
@click.pass_context
@click.argument('positions', nargs=-1, type=int)
@port_option
@dry_run_option
def light(ctx, positions: tuple[int, ...], port: Optional[str], dry_run: bool):
    """
    Turn on the LEDs at the given X Y Z positions; all others go off.

    \b
    Example:
      ledcube light 0 0 0 1 1 1
    """
    triples = parse_positions(positions)

    with report_errors("light"):
        with open_cube(ctx, port, dry_run) as cube:
            for position in triples:
                cube.set(position, True)
            cube.flush()
            logger.info(f"Lit {len(triples)} LED(s) on {cube.port}")

            if dry_run:
                click.echo(render(cube))
            else:
                click.echo(f"[OK] Lit {len(triples)} LED(s)")


@click.command(name="clear")
@click.pass_context
@port_option
@dry_run_option
def clear(ctx, port: Optional[str], dry_run: bool):
    """Turn off every LED."""
    with report_errors("clear"):
        # Connecting already flushes an all-off pattern
        with open_cube(ctx, port, dry_run) as cube:
            if dry_run:
                click.echo(render(cube))
            else:
                click.echo("[OK] Cube cleared")


@click.command(name="sweep")
@click.pass_context
@port_option
@dry_run_option
@click.option(
    '--interval',
    '-i',
    type=click.FloatRange(min=0),
    default=None,
    help='Seconds each LED stays lit (default: "sweep_interval" from config)'
)
@click.option(
    '--cycles',
    '-n',
    type=click.IntRange(min=0),
    default=1,
    help='Number of passes over the cube, 0 = until Ctrl+C (default: 1)'
)
def sweep(ctx, port: Optional[str], dry_run: bool, interval: Optional[float], cycles: int):
    """Light each LED in turn."""
    if interval is None:
        interval = AppConfig.load_or_default(ctx.obj["config_path"]).sweep_interval

    def show_step(position):
        if dry_run:
            click.echo(f"{position[0]} {position[1]} {position[2]}  {cube.pattern.hex()}")

    with report_errors("sweep"):
        with open_cube(ctx, port, dry_run) as cube:
            try:
                steps = run_sweep(cube, interval=interval, cycles=cycles or None, on_step=show_step)
                click.echo(f"[OK] Swept {steps} step(s)")
            except KeyboardInterrupt:
                logger.info("Sweep interrupted by user")
                click.echo("\nCleaning up...")
            finally:
                # Leave the cube dark however the sweep ended
                cube.clear()
                cube.flush()
