"""MIDI command implementations."""

import click

from lampmix.transport import MidiCommandTransport


@click.group(name="midi")
def midi_group():
    """MIDI transport commands."""
    pass


@midi_group.command(name="list")
def list_midi():
    """List available MIDI output ports."""
    ports = MidiCommandTransport.list_ports()

    click.echo("MIDI Output Ports:\n")
    if not ports:
        click.echo("  No MIDI output ports found.")
    else:
        for i, port in enumerate(ports):
            click.echo(f"  [{i}] {port}")
