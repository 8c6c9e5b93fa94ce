"""Transports that deliver fixture commands."""

from .midi import MidiCommandTransport
from .recording import RecordingTransport
from .sysex import CommandSysEx, pack_7bit, unpack_7bit

__all__ = [
    "CommandSysEx",
    "MidiCommandTransport",
    "RecordingTransport",
    "pack_7bit",
    "unpack_7bit",
]
