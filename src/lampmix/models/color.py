"""Chromaticity and color value models.

Colors are expressed the way the mixing core consumes them: a CIE 1931
chromaticity (x, y) plus a luminance Y. Perceptual color spaces (Lab, HSL,
CCT pickers) are converted upstream before a Color is built.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Chromaticity(BaseModel):
    """
    Point in the CIE 1931 xy chromaticity diagram.

    Only the x + y <= 1 bound is enforced; points outside the spectral locus
    are accepted. y = 0 is representable so that conversions can report it
    as a degenerate chromaticity instead of a validation failure.
    """

    model_config = ConfigDict(frozen=True)

    x: float = Field(ge=0.0, le=1.0, description="CIE x coordinate")
    y: float = Field(ge=0.0, le=1.0, description="CIE y coordinate")

    @model_validator(mode="after")
    def check_sum(self) -> "Chromaticity":
        """Ensure x + y <= 1 (z must be non-negative)."""
        if self.x + self.y > 1.0:
            raise ValueError(f"x + y must be <= 1, got {self.x} + {self.y}")
        return self

    def as_tuple(self) -> tuple[float, float]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)


class Color(BaseModel):
    """
    Target color: a chromaticity plus a luminance.

    Luminance has no upper bound here; whether a fixture can actually emit it
    is decided by the mixing allocator.
    """

    model_config = ConfigDict(frozen=True)

    chromaticity: Chromaticity
    luminance: float = Field(ge=0.0, description="Luminance Y (same unit as primary capacities)")

    @classmethod
    def from_xyY(cls, x: float, y: float, luminance: float) -> "Color":
        """Create a color from CIE xyY components."""
        return cls(chromaticity=Chromaticity(x=x, y=y), luminance=luminance)

    @property
    def x(self) -> float:
        return self.chromaticity.x

    @property
    def y(self) -> float:
        return self.chromaticity.y

    def with_luminance(self, luminance: float) -> "Color":
        """Same chromaticity at a different luminance."""
        return Color(chromaticity=self.chromaticity, luminance=luminance)
