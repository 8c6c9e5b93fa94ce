"""CLI commands for lampmix."""

from .config import config_group
from .midi import midi_group
from .mix import mix, raw
from .palette import palette_group
from .play import play

__all__ = ["config_group", "midi_group", "mix", "palette_group", "play", "raw"]
