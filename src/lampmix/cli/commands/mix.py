"""Mix and raw commands: drive the lamp with a color or with raw duty codes."""

import logging
from typing import Optional

import click

from lampmix.cli.session import load_config, open_lamp, report_errors
from lampmix.devices import Frame
from lampmix.mixing import Allocation
from lampmix.models import Color

logger = logging.getLogger(__name__)


def echo_allocation(allocation: Allocation) -> None:
    """Print an allocation as a table of primaries."""
    click.echo("Allocation:")
    if allocation.is_empty:
        click.echo("  (all primaries off)")
        return
    for primary, luminance in allocation:
        share = luminance / primary.capacity * 100
        click.echo(f"  {primary.name:<8} {luminance:10.3f} / {primary.capacity:<8.1f} ({share:5.1f}%)")


def echo_frame(frame: Frame) -> None:
    """Print a frame in wire order plus its payload bytes."""
    click.echo(f"Frame:   {frame}")
    click.echo(f"Payload: {frame.to_bytes().hex(' ')}")


@click.command(name="mix")
@click.argument("x", type=float)
@click.argument("y", type=float)
@click.argument("luminance", type=float)
@click.option(
    "--send/--dry-run",
    default=False,
    help="Send the frame over MIDI (default: dry run, nothing is sent)",
)
@click.option("--port", "-p", type=str, default=None, help="MIDI output port name")
@click.pass_context
def mix(ctx, x: float, y: float, luminance: float, send: bool, port: Optional[str]):
    """
    Mix the color (X, Y) at LUMINANCE and show the resulting frame.

    \b
    Examples:
      lampmix mix 0.434 0.403 300
      lampmix mix 0.41 0.25 100 --send
    """
    with report_errors("mix color"):
        config = load_config(ctx)
        try:
            color = Color.from_xyY(x, y, luminance)
        except ValueError as e:
            raise click.BadParameter(str(e)) from e

        with open_lamp(config, send, port) as lamp:
            frame = lamp.set_color(color)
            click.echo(f"Target:  x={x} y={y} Y={luminance}")
            echo_allocation(lamp.last_allocation)
            echo_frame(frame)
            if not send:
                click.echo("(dry run, use --send to transmit)")


@click.command(name="raw")
@click.option(
    "--code",
    "-c",
    "codes",
    multiple=True,
    metavar="NAME=CODE",
    help="Duty code for a channel, e.g. -c red=255 (repeatable)",
)
@click.option("--send/--dry-run", default=False, help="Send the frame over MIDI")
@click.option("--port", "-p", type=str, default=None, help="MIDI output port name")
@click.pass_context
def raw(ctx, codes: tuple[str, ...], send: bool, port: Optional[str]):
    """
    Set raw PWM duty codes by channel name. Unnamed channels are off.

    \b
    Examples:
      lampmix raw -c red=255 -c white=40
      lampmix raw --send            # all channels off
    """
    parsed: dict[str, int] = {}
    for item in codes:
        name, sep, value = item.partition("=")
        if not sep:
            raise click.BadParameter(f"expected NAME=CODE, got '{item}'", param_hint="--code")
        try:
            parsed[name.strip()] = int(value)
        except ValueError:
            raise click.BadParameter(f"code for '{name}' must be an integer", param_hint="--code") from None

    with report_errors("set raw duty codes"):
        config = load_config(ctx)
        with open_lamp(config, send, port) as lamp:
            try:
                frame = lamp.set_pwm_state(**parsed)
            except KeyError as e:
                raise click.BadParameter(
                    f"unknown channel {e}; wired channels: {', '.join(lamp.wiring.slots)}",
                    param_hint="--code",
                ) from e
            except ValueError as e:
                raise click.BadParameter(str(e), param_hint="--code") from e
            echo_frame(frame)
