"""Scripted color sequences.

A sequence is a JSON file listing colors and how long to hold each::

    {
      "name": "sunrise",
      "steps": [
        {"x": 0.57, "y": 0.43, "luminance": 20, "hold": 2.0},
        {"x": 0.434, "y": 0.403, "luminance": 300, "hold": 5.0}
      ]
    }

SequencePlayer drives a lamp from any ColorProducer, a ColorSequence
being the one shipped here.
"""

import logging
import time
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator

from lampmix.exceptions import ErrorCollector, collect_errors
from lampmix.models import Color
from lampmix.protocols import ColorProducer
from lampmix.utils.persistence import PydanticPersistence

logger = logging.getLogger(__name__)


class ColorStep(BaseModel):
    """
    One color of a sequence.

    Files use the flat form {"x", "y", "luminance", "hold"}; the color
    part is validated by Color itself.
    """

    color: Color
    hold: float = Field(default=1.0, ge=0.0, description="Seconds to hold the color")

    @model_validator(mode="before")
    @classmethod
    def nest_color(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "color" in data:
            return data
        data = dict(data)
        color: dict[str, Any] = {
            "chromaticity": {key: data.pop(key) for key in ("x", "y") if key in data}
        }
        if "luminance" in data:
            color["luminance"] = data.pop("luminance")
        data["color"] = color
        return data


class ColorSequence(BaseModel):
    """Ordered list of color steps."""

    name: str = Field(default="sequence")
    steps: list[ColorStep] = Field(default_factory=list)

    @classmethod
    def load(cls, path: Path) -> "ColorSequence":
        """
        Load a sequence from JSON.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the JSON is malformed
            ConfigValidationError: If a step is invalid
        """
        return PydanticPersistence.load_json(path, cls)

    def colors(self) -> Iterator[tuple[Color, float]]:
        for step in self.steps:
            yield step.color, step.hold


class SequencePlayer:
    """Send a producer's colors to a lamp, holding each for its duration."""

    def __init__(self, lamp, sleep: Callable[[float], None] = time.sleep):
        """
        Initialize player.

        Args:
            lamp: Anything with set_color(color), usually an LedLamp
            sleep: Delay function (injected for tests)
        """
        self.lamp = lamp
        self._sleep = sleep

    def play(
        self, producer: ColorProducer, loops: int = 1, keep_going: bool = False
    ) -> ErrorCollector:
        """
        Play the producer's colors.

        Args:
            producer: Source of (color, hold) pairs
            loops: How many times to run through the producer
            keep_going: Skip colors that fail (out of gamut, too bright,
                transport failure) instead of stopping at the first one.
                Errors that are not recoverable still stop playback.

        Returns:
            Collector with the number of colors sent and any skipped failures

        Raises:
            LampMixError: First failure, when keep_going is False
        """
        collector = collect_errors("play sequence")

        for loop in range(loops):
            for index, (color, hold) in enumerate(producer.colors()):
                label = f"loop {loop + 1} step {index + 1}"
                if keep_going:
                    with collector.try_operation(label):
                        self.lamp.set_color(color)
                else:
                    self.lamp.set_color(color)
                    collector.success_count += 1

                logger.debug(f"{label}: holding for {hold}s")
                if hold > 0:
                    self._sleep(hold)

        return collector
