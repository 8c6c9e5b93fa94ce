"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from lampmix.devices import LedLamp
from lampmix.models import Palette, Primary, WiringTable, reference_primaries, reference_wiring
from lampmix.transport import RecordingTransport


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def palette():
    """Reference RGBAW palette (white, green, red, blue, amber)."""
    return Palette(reference_primaries())


@pytest.fixture
def wiring():
    """Reference board wiring (red, blue, green, amber, white)."""
    return WiringTable(slots=tuple(reference_wiring()))


@pytest.fixture
def red(palette):
    """The reference red primary (0.68, 0.3), 400 lm."""
    return palette["red"]


@pytest.fixture
def transport():
    """Transport that records every command."""
    return RecordingTransport()


@pytest.fixture
def lamp(palette, wiring, transport):
    """Reference lamp on a recording transport."""
    return LedLamp(device_id=7, palette=palette, wiring=wiring, transport=transport)


@pytest.fixture
def line_palette():
    """
    Three primaries on the line y = 0.3.

    'dim' sits exactly halfway between 'left' and 'right' and has a tiny
    capacity, so bright requests at its chromaticity need the outer pair.
    """
    return Palette([
        Primary.from_xy("dim", 0.3, 0.3, capacity=10),
        Primary.from_xy("right", 0.5, 0.3, capacity=1000),
        Primary.from_xy("left", 0.1, 0.3, capacity=1000),
    ])
