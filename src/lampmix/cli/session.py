"""Shared helpers for CLI commands: config loading, lamp setup, error display."""

import contextlib
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

import click

from lampmix.devices import LedLamp
from lampmix.exceptions import LampMixError, format_error_for_display
from lampmix.models import AppConfig
from lampmix.transport import MidiCommandTransport, RecordingTransport

logger = logging.getLogger(__name__)


def load_config(ctx: click.Context) -> AppConfig:
    """Load the config selected by the top-level --config option."""
    path: Optional[Path] = (ctx.obj or {}).get("config_path")
    return AppConfig.load_or_default(path)


@contextlib.contextmanager
def report_errors(operation: str) -> Iterator[None]:
    """
    Show lampmix errors as a message plus recovery hint and exit with code 1.

    Other exceptions propagate with their traceback.
    """
    try:
        yield
    except LampMixError as e:
        logger.error(f"Failed to {operation}: {e.technical_message}")
        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        sys.exit(1)


@contextlib.contextmanager
def open_lamp(config: AppConfig, send: bool, port: Optional[str] = None) -> Iterator[LedLamp]:
    """
    Create a lamp for the configured fixture.

    Args:
        config: Application config
        send: Send over MIDI; otherwise record frames without sending
        port: MIDI output port overriding the configured one
    """
    if not send:
        yield LedLamp.from_config(config.fixture, RecordingTransport(), device_id=config.device_id)
        return

    transport = MidiCommandTransport(
        device_id=config.device_id,
        port_name=port or config.midi_port,
        header=config.sysex_header,
    )
    try:
        transport.open()
    except OSError as e:
        raise click.ClickException(f"Cannot open MIDI output: {e}") from e

    try:
        yield LedLamp.from_config(config.fixture, transport, device_id=config.device_id)
    finally:
        transport.close()
