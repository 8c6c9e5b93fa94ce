"""Conversion for producers that work in XYZ space.

Color pickers built on Lab or HSLuv end up with an XYZ triple. The mixing
core only accepts chromaticity + luminance, so those producers convert
here before calling in. The luminance scale maps the picker's relative Y
(usually 0-1 or 0-100) onto the fixture's luminance units.
"""

from lampmix.exceptions import DegenerateChromaticityError
from lampmix.models import Color


def xyz_to_color(X: float, Y: float, Z: float, luminance_scale: float = 1.0) -> Color:
    """
    Convert a CIE XYZ triple to a target color.

    Args:
        X, Y, Z: Tristimulus values (non-negative)
        luminance_scale: Factor applied to Y to obtain the target luminance

    Raises:
        DegenerateChromaticityError: If X + Y + Z is zero (black has no chromaticity)
        ValueError: If a component or the scale is negative
    """
    if min(X, Y, Z) < 0:
        raise ValueError(f"XYZ components must be non-negative, got ({X}, {Y}, {Z})")
    if luminance_scale < 0:
        raise ValueError(f"luminance_scale must be non-negative, got {luminance_scale}")

    total = X + Y + Z
    if total == 0:
        raise DegenerateChromaticityError(0.0, 0.0, subject="XYZ black")

    return Color.from_xyY(X / total, Y / total, Y * luminance_scale)
