"""Serial port commands."""

import click

from ledcube.transport import SerialTransport


@click.group(name="ports")
def ports_group():
    """Serial port commands."""
    pass


@ports_group.command(name="list")
def list_ports():
    """List available serial ports."""
    ports = SerialTransport.list_ports()

    click.echo("Serial Ports:\n")
    if not ports:
        click.echo("  No serial ports found.")
        return

    for i, (device, description) in enumerate(ports):
        click.echo(f"  [{i}] {device}  {description}")
