"""Color mixing exceptions.

This module defines the errors the mixing core reports to its callers:
- MixingError: Base class for mixing errors
- DegenerateChromaticityError: Chromaticity with y = 0 has no tristimulus form
- OutOfGamutError: Target chromaticity lies outside the palette's gamut
- CapacityExceededError: Requested luminance exceeds a primary's capacity
- InvalidPaletteError: Palette cannot be used for mixing

None of these are ValueError subclasses, so pydantic validators let them
propagate unchanged instead of folding them into a ValidationError.
"""

from typing import Optional

from .base import LampMixError


class MixingError(LampMixError):
    """A target color could not be turned into primary contributions."""
    pass


class DegenerateChromaticityError(MixingError):
    """Chromaticity has y = 0, so the projection to XYZ is undefined."""

    def __init__(self, x: float, y: float, subject: str = "target color"):
        """
        Initialize degenerate chromaticity error.

        Args:
            x: Chromaticity x coordinate
            y: Chromaticity y coordinate (zero)
            subject: What carried the chromaticity (target color, primary name)
        """
        super().__init__(
            user_message=f"Chromaticity of {subject} has y = 0 and cannot be converted",
            technical_message=f"Degenerate chromaticity for {subject}: x={x}, y={y}",
            recoverable=True,
            recovery_hint="Pick a chromaticity with y > 0",
        )
        self.x = x
        self.y = y
        self.subject = subject


class OutOfGamutError(MixingError):
    """Target chromaticity cannot be reproduced by any mix of the palette."""

    def __init__(self, x: float, y: float, palette_names: tuple[str, ...] = ()):
        """
        Initialize out-of-gamut error.

        Args:
            x: Target chromaticity x coordinate
            y: Target chromaticity y coordinate
            palette_names: Names of the primaries that were considered
        """
        names = ", ".join(palette_names) if palette_names else "palette"
        super().__init__(
            user_message=f"Color ({x:.4f}, {y:.4f}) is outside the gamut of the fixture",
            technical_message=f"No subset of [{names}] contains chromaticity ({x}, {y})",
            recoverable=True,
            recovery_hint=(
                "Choose a chromaticity inside the area spanned by the primaries. "
                "Run 'lampmix palette show' to list their chromaticities."
            ),
        )
        self.x = x
        self.y = y
        self.palette_names = palette_names


class CapacityExceededError(MixingError):
    """A primary would have to emit more than its maximum output."""

    def __init__(
        self,
        primary: str,
        luminance: float,
        capacity: float,
        code: Optional[int] = None,
    ):
        """
        Initialize capacity exceeded error.

        Args:
            primary: Name of the primary (or "fixture" when no subset fits)
            luminance: Requested luminance
            capacity: Maximum luminance available
            code: Clamped duty code, when raised by quantization
        """
        super().__init__(
            user_message=(
                f"Requested luminance {luminance:.2f} exceeds the capacity "
                f"of {primary} ({capacity:.2f})"
            ),
            technical_message=(
                f"Capacity exceeded for {primary}: luminance={luminance}, "
                f"capacity={capacity}, clamped_code={code}"
            ),
            recoverable=True,
            recovery_hint="Lower the requested luminance",
        )
        self.primary = primary
        self.luminance = luminance
        self.capacity = capacity
        self.code = code


class InvalidPaletteError(MixingError):
    """Palette has no usable primaries or degenerate geometry."""

    def __init__(self, reason: str):
        """
        Initialize invalid palette error.

        Args:
            reason: Why the palette was rejected
        """
        super().__init__(
            user_message=f"Invalid palette: {reason}",
            technical_message=f"Palette validation failed: {reason}",
            recoverable=False,
            recovery_hint="Fix the primaries in the fixture configuration",
        )
        self.reason = reason
