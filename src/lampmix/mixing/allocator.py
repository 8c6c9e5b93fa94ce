"""
Multi-primary additive mixing allocator.

Mixing in a Nutshell
====================

Light from several emitters adds up linearly in CIE XYZ. A primary with
chromaticity (x, y) emitting luminance L contributes

    L * (x/y, 1, (1-x-y)/y)

so any non-negative mix of primaries lands inside the convex hull of their
chromaticity points (the fixture's gamut). Targets outside that hull cannot
be reproduced at any luminance.

How a Target is Allocated
-------------------------

::

    target (x, y, Y)
          ↓
    subsets of the palette, smallest first:
      size 1: point      size 2: segment      size 3: triangle
      (lexicographic by palette index, so high-priority primaries first)
          ↓
    first subset whose figure contains (x, y)
    and whose contributions all fit within capacity
          ↓
    Allocation {primary: luminance}

Inside a figure the target's barycentric coordinates b_i say how much of
each vertex's *chromaticity* is in the mix. Converting them to luminance
weights each by the vertex's y, because a primary with luminance L
contributes L / y to X + Y + Z:

    L_i = Y * b_i * y_i / sum_j(b_j * y_j)

The resulting allocation reproduces the target's XYZ vector exactly. A
subset whose weights miss the target by more than a fixed tolerance is
treated as not containing it.

Failures
--------

- DegenerateChromaticityError: target has y = 0
- OutOfGamutError: no subset contains the target chromaticity
- CapacityExceededError: some subset contains it, none at this luminance

OutOfGamutError wins when both would apply. A luminance of 0 is always
satisfiable by the empty allocation.
"""

import logging
from itertools import combinations
from typing import Optional, Sequence

import numpy as np

from lampmix.colorimetry import to_tristimulus, unit_tristimulus
from lampmix.exceptions import CapacityExceededError, OutOfGamutError
from lampmix.models import Chromaticity, Color, Palette, Primary

from .allocation import Allocation
from .geometry import point_coordinates, segment_coordinates, triangle_coordinates

logger = logging.getLogger(__name__)

# Chromaticity-space slack for containment tests (xy units)
DEFAULT_TOLERANCE = 1e-9

# Relative tolerance of the tristimulus check on accepted allocations
REALIZABILITY_TOLERANCE = 1e-6

# Relative overshoot of a capacity still accepted (absorbs rounding)
CAPACITY_SLACK = 1e-9

MAX_SUBSET_SIZE = 3


class MixingAllocator:
    """
    Compute per-primary luminance for a target color.

    The allocator is a pure function of its palette and the requested
    color: it holds no mutable state and may be shared between threads.

    Example:
        ```python
        allocator = MixingAllocator(palette)
        allocation = allocator.allocate(Color.from_xyY(0.41, 0.25, 100.0))
        allocation.as_dict()  # {"white": ..., "red": ..., "blue": ...}
        ```
    """

    def __init__(
        self,
        palette: Palette,
        tolerance: float = DEFAULT_TOLERANCE,
        max_subset_size: int = MAX_SUBSET_SIZE,
    ):
        """
        Initialize allocator.

        Args:
            palette: Primaries in priority order
            tolerance: Slack for containment tests in xy units
            max_subset_size: Largest subset tried (1 = points only,
                2 = points and segments, 3 = also triangles)
        """
        if not 1 <= max_subset_size <= MAX_SUBSET_SIZE:
            raise ValueError(
                f"max_subset_size must be between 1 and {MAX_SUBSET_SIZE}, got {max_subset_size}"
            )
        if tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {tolerance}")

        self._palette = palette
        self._tolerance = tolerance
        self._max_subset_size = max_subset_size

    @property
    def palette(self) -> Palette:
        return self._palette

    def allocate(self, color: Color) -> Allocation:
        """
        Allocate the target color to the fewest, highest-priority primaries.

        Args:
            color: Target chromaticity and luminance

        Returns:
            Allocation reproducing the target exactly

        Raises:
            DegenerateChromaticityError: If the target has y = 0
            OutOfGamutError: If the chromaticity is outside the palette's gamut
            CapacityExceededError: If the gamut contains the chromaticity but
                no subset can emit the requested luminance
        """
        target = to_tristimulus(color)

        if color.luminance == 0:
            return Allocation.empty()

        first_overload: Optional[tuple[Primary, float]] = None

        for subset, coordinates in self._containing_subsets(color.chromaticity):
            luminances = self._luminances(subset, coordinates, color.luminance)
            if not self._reproduces(subset, luminances, target):
                logger.debug(
                    f"Subset [{_names(subset)}] is within tolerance of the target "
                    "but does not reproduce it, skipping"
                )
                continue

            overload = self._find_overload(subset, luminances)

            if overload is not None:
                if first_overload is None:
                    first_overload = overload
                logger.debug(
                    f"Subset [{_names(subset)}] contains target but "
                    f"{overload[0].name} would need {overload[1]:.3f}"
                )
                continue

            allocation = self._build(subset, luminances)
            logger.debug(
                f"Allocated ({color.x}, {color.y}, {color.luminance}) "
                f"to [{_names(allocation.primaries)}]"
            )
            return allocation

        if first_overload is None:
            raise OutOfGamutError(color.x, color.y, self._palette.names)

        primary, luminance = first_overload
        raise CapacityExceededError(
            primary=primary.name,
            luminance=luminance,
            capacity=primary.capacity,
        )

    def max_luminance(self, chromaticity: Chromaticity) -> float:
        """
        Highest luminance the palette can emit at a chromaticity.

        Useful for callers that want to scale a request down instead of
        failing with CapacityExceededError.

        Raises:
            DegenerateChromaticityError: If y = 0
            OutOfGamutError: If the chromaticity is outside the gamut
        """
        unit = unit_tristimulus(chromaticity)

        best: Optional[float] = None
        for subset, coordinates in self._containing_subsets(chromaticity):
            shares = self._luminances(subset, coordinates, 1.0)
            if not self._reproduces(subset, shares, unit):
                continue
            limit = min(
                primary.capacity / share
                for primary, share in zip(subset, shares)
                if share > 0
            )
            if best is None or limit > best:
                best = limit

        if best is None:
            raise OutOfGamutError(chromaticity.x, chromaticity.y, self._palette.names)
        return best

    def _containing_subsets(self, chromaticity: Chromaticity):
        """Yield (subset, barycentric coordinates) in priority order."""
        point = chromaticity.as_tuple()
        primaries = self._palette.primaries

        for size in range(1, self._max_subset_size + 1):
            for indices in combinations(range(len(primaries)), size):
                subset = tuple(primaries[i] for i in indices)
                coordinates = self._locate(point, subset)
                if coordinates is not None:
                    yield subset, coordinates

    def _locate(self, point, subset: Sequence[Primary]) -> Optional[tuple[float, ...]]:
        vertices = [p.chromaticity.as_tuple() for p in subset]
        if len(vertices) == 1:
            return point_coordinates(point, vertices[0], self._tolerance)
        if len(vertices) == 2:
            return segment_coordinates(point, vertices[0], vertices[1], self._tolerance)
        return triangle_coordinates(point, vertices[0], vertices[1], vertices[2], self._tolerance)

    @staticmethod
    def _luminances(
        subset: Sequence[Primary], coordinates: Sequence[float], luminance: float
    ) -> list[float]:
        """Convert chromaticity-space coordinates to luminance contributions."""
        weighted = [b * primary.y for primary, b in zip(subset, coordinates)]
        total = sum(weighted)
        return [luminance * w / total for w in weighted]

    @staticmethod
    def _find_overload(
        subset: Sequence[Primary], luminances: Sequence[float]
    ) -> Optional[tuple[Primary, float]]:
        """First primary whose contribution exceeds its capacity, if any."""
        for primary, luminance in zip(subset, luminances):
            if luminance > primary.capacity * (1.0 + CAPACITY_SLACK):
                return primary, luminance
        return None

    @staticmethod
    def _build(subset: Sequence[Primary], luminances: Sequence[float]) -> Allocation:
        entries = tuple(
            (primary, min(luminance, primary.capacity))
            for primary, luminance in zip(subset, luminances)
            if luminance > 0
        )
        return Allocation(entries)

    @staticmethod
    def _reproduces(
        subset: Sequence[Primary], luminances: Sequence[float], target: np.ndarray
    ) -> bool:
        """
        Check that the contributions sum to the target's XYZ vector.

        A loose tolerance lets a subset pass containment for a point that is
        only near its figure; its weights then describe the projected point.
        """
        mix = sum(
            (primary.unit_tristimulus * luminance for primary, luminance in zip(subset, luminances)),
            np.zeros(3, dtype=np.float64),
        )
        error = float(np.linalg.norm(mix - target))
        return error <= REALIZABILITY_TOLERANCE * max(1.0, float(np.linalg.norm(target)))


def _names(primaries: Sequence[Primary]) -> str:
    return ", ".join(p.name for p in primaries)
