"""Play command: run a scripted color sequence."""

import logging
import time
from pathlib import Path
from typing import Optional

import click

from lampmix.cli.session import load_config, open_lamp, report_errors
from lampmix.producers import ColorSequence, SequencePlayer

logger = logging.getLogger(__name__)


@click.command(name="play")
@click.argument("sequence_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--loops", "-n", type=click.IntRange(min=1), default=1, help="Number of passes")
@click.option(
    "--keep-going/--stop-on-error",
    default=False,
    help="Skip colors the fixture cannot reproduce (default: stop)",
)
@click.option("--send/--dry-run", default=False, help="Send frames over MIDI")
@click.option("--port", "-p", type=str, default=None, help="MIDI output port name")
@click.option("--no-wait", is_flag=True, help="Ignore hold times (useful for dry runs)")
@click.pass_context
def play(
    ctx,
    sequence_file: Path,
    loops: int,
    keep_going: bool,
    send: bool,
    port: Optional[str],
    no_wait: bool,
):
    """
    Play a color sequence from SEQUENCE_FILE (JSON).

    \b
    Example file:
      {"name": "fade", "steps": [
        {"x": 0.434, "y": 0.403, "luminance": 50, "hold": 1.0},
        {"x": 0.434, "y": 0.403, "luminance": 400, "hold": 1.0}
      ]}
    """
    with report_errors("play sequence"):
        config = load_config(ctx)
        sequence = ColorSequence.load(sequence_file)
        logger.info(f"Playing '{sequence.name}' ({len(sequence.steps)} steps, {loops} loop(s))")

        with open_lamp(config, send, port) as lamp:
            sleep = (lambda _seconds: None) if no_wait else time.sleep
            player = SequencePlayer(lamp, sleep=sleep)
            collector = player.play(sequence, loops=loops, keep_going=keep_going)

        click.echo(f"Sent {collector.success_count} color(s) from '{sequence.name}'")
        if collector.has_errors:
            click.echo(collector.get_summary(), err=True)
