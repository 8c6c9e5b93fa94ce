"""Capability protocols at the edges of the mixing core.

The core needs exactly two collaborators:

- something that produces target colors (pickers, scripted sequences,
  sensor-driven controllers)
- something that can deliver a command with a byte payload to a fixture

Neither is a base class. Anything with the right method can be plugged in.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lampmix.models import Color


@runtime_checkable
class CommandTransport(Protocol):
    """Delivers commands to one fixture."""

    def send_command(self, command_id: int, payload: bytes) -> bool:
        """
        Send a command to the fixture.

        Args:
            command_id: Firmware command identifier
            payload: Command payload bytes

        Returns:
            True if the command was handed to the fixture, False otherwise

        Note:
            Called with the fixture's lock held. Implementations may block,
            but must not retry indefinitely.
        """
        ...


@runtime_checkable
class ColorProducer(Protocol):
    """Source of target colors."""

    def colors(self) -> Iterator[tuple[Color, float]]:
        """
        Yield target colors.

        Returns:
            Iterator of (color, hold_seconds) pairs
        """
        ...
