"""Allocation result of a mixing request.

Allocations are runtime values, produced fresh for every request and
never persisted, so they are a plain frozen dataclass rather than a
Pydantic model.
"""

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from lampmix.models import Primary


@dataclass(frozen=True, slots=True)
class Allocation:
    """
    Luminance contribution of each active primary.

    Entries are ordered by palette priority. Every luminance is in
    (0, capacity] of its primary; silent primaries are simply absent.
    """

    entries: tuple[tuple[Primary, float], ...] = ()

    @classmethod
    def empty(cls) -> "Allocation":
        """Allocation with every primary off."""
        return cls(())

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def primaries(self) -> tuple[Primary, ...]:
        return tuple(primary for primary, _ in self.entries)

    @property
    def total_luminance(self) -> float:
        return sum(luminance for _, luminance in self.entries)

    def tristimulus(self) -> npt.NDArray[np.float64]:
        """XYZ vector of the additive mix."""
        total = np.zeros(3, dtype=np.float64)
        for primary, luminance in self.entries:
            total += primary.unit_tristimulus * luminance
        return total

    def as_dict(self) -> dict[str, float]:
        """Mapping of primary name to luminance, in priority order."""
        return {primary.name: luminance for primary, luminance in self.entries}

    def get(self, name: str, default: float = 0.0) -> float:
        """Luminance of a primary by name, `default` when it is silent."""
        for primary, luminance in self.entries:
            if primary.name == name:
                return luminance
        return default

    def __contains__(self, name: object) -> bool:
        return any(primary.name == name for primary, _ in self.entries)

    def __iter__(self) -> Iterator[tuple[Primary, float]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
