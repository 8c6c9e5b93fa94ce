"""Conversions from chromaticity form (x, y, Y) to CIE XYZ tristimulus form.

Additive light mixes sum linearly in XYZ, so every mixing computation works
on tristimulus vectors. Only the forward direction is needed here: targets
and primaries are always described by a chromaticity plus a luminance.

    X = (x / y) * Y
    Y = Y
    Z = ((1 - x - y) / y) * Y

The projection is undefined for y = 0 and raises DegenerateChromaticityError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

from lampmix.exceptions import DegenerateChromaticityError

if TYPE_CHECKING:
    from lampmix.models import Chromaticity, Color


def unit_tristimulus(
    chromaticity: Chromaticity, subject: str = "target color"
) -> npt.NDArray[np.float64]:
    """
    Tristimulus direction of a chromaticity, scaled to unit luminance.

    Args:
        chromaticity: Point in the CIE 1931 xy diagram
        subject: Description used in the error message

    Returns:
        Array (X/Y, 1, Z/Y)

    Raises:
        DegenerateChromaticityError: If y is zero
    """
    x, y = chromaticity.x, chromaticity.y
    if y == 0:
        raise DegenerateChromaticityError(x, y, subject=subject)
    return np.array([x / y, 1.0, (1.0 - x - y) / y], dtype=np.float64)


def to_tristimulus(color: Color) -> npt.NDArray[np.float64]:
    """
    Convert a color (chromaticity + luminance) to its XYZ vector.

    Raises:
        DegenerateChromaticityError: If the color's y is zero
    """
    return unit_tristimulus(color.chromaticity) * color.luminance
