"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from lampmix import __version__

from .commands import config_group, midi_group, mix, palette_group, play, raw

logger = logging.getLogger(__name__)

# Handlers added by setup_logging, replaced on each call
_installed_handlers: list[logging.Handler] = []


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Console output goes to stderr. A rotating log file is added when
    --debug or --log-file is given.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.setLevel(logging.DEBUG if (debug or log_file) else level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    if debug or log_file:
        if log_file:
            log_path = log_file
            file_level = getattr(logging, log_level.upper())
        else:
            log_path = Path.cwd() / "lampmix-debug.log"
            file_level = logging.DEBUG

        # Keeps last 5 files, max 10MB each
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

        logger.info(f"Logging configured: level={logging.getLevelName(file_level)}, file={log_path}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="lampmix")
@click.option(
    '--config',
    '-C',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.lampmix/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./lampmix-debug.log)'
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
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    lampmix - Multi-primary LED lamp color mixer.

    Turns a target color (CIE x, y and luminance) into PWM duty codes for
    a lamp with several colored emitters, and sends them to the fixture.

    \b
    Examples:
      # Show the configured primaries and wiring
      lampmix palette show

      # Compute the frame for a warm white at 300 lm (dry run)
      lampmix mix 0.45 0.41 300

      # Send it to the lamp over MIDI
      lampmix mix 0.45 0.41 300 --send

      # Play a scripted sequence
      lampmix play examples/sunrise.json --send
    """
    setup_logging(verbose, debug, log_file, log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


cli.add_command(mix)
cli.add_command(raw)
cli.add_command(palette_group)
cli.add_command(play)
cli.add_command(config_group)
cli.add_command(midi_group)

if __name__ == "__main__":
    cli()
