"""Palette commands: inspect the configured fixture."""

import click

from lampmix.cli.session import load_config, report_errors
from lampmix.mixing import MixingAllocator
from lampmix.models import Chromaticity


@click.group(name="palette")
def palette_group():
    """Fixture palette commands."""
    pass


@palette_group.command(name="show")
@click.pass_context
def show_palette(ctx):
    """Show primaries in priority order, their capacities and the wiring."""
    with report_errors("show palette"):
        config = load_config(ctx)
        fixture = config.fixture
        palette = fixture.build_palette()
        wiring = fixture.build_wiring()

        click.echo(f"{fixture.name} (device type {fixture.device_type})\n")
        click.echo("Primaries (priority order):\n")
        for rank, primary in enumerate(palette):
            click.echo(
                f"  [{rank}] {primary.name:<8} x={primary.x:<6} y={primary.y:<6} "
                f"capacity={primary.capacity:<8g} gamma={primary.gamma:g}"
            )

        click.echo("\nWiring (slot order):\n")
        for slot, name in enumerate(wiring.slots):
            click.echo(f"  slot {slot}: {name}")

        click.echo(f"\nCommand id: {fixture.command_id}, duty codes 0-{fixture.max_code}")


@palette_group.command(name="max")
@click.argument("x", type=float)
@click.argument("y", type=float)
@click.pass_context
def max_luminance(ctx, x: float, y: float):
    """Show the highest luminance the fixture can emit at (X, Y)."""
    with report_errors("compute maximum luminance"):
        config = load_config(ctx)
        try:
            chromaticity = Chromaticity(x=x, y=y)
        except ValueError as e:
            raise click.BadParameter(str(e)) from e

        allocator = MixingAllocator(config.fixture.build_palette())
        click.echo(f"{allocator.max_luminance(chromaticity):.3f}")
