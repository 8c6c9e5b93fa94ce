"""Primary (light source) model.

A primary describes one physical emitter of a fixture: its chromaticity,
the maximum luminance it can produce, and how luminance maps to the PWM
duty code that drives it. Primaries are configured once per fixture and
never mutated.
"""

from typing import Optional

import numpy as np
import numpy.typing as npt
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from lampmix.colorimetry import unit_tristimulus
from lampmix.exceptions import CapacityExceededError
from lampmix.response import ResponseCurve, response_for_gamma

from .color import Chromaticity


class Primary(BaseModel):
    """
    One physical emitter with a fixed chromaticity and bounded output.

    The unit tristimulus direction is derived once, at construction, so a
    primary with y = 0 is rejected immediately with
    DegenerateChromaticityError.

    Example:
        >>> red = Primary(name="red", chromaticity=Chromaticity(x=0.68, y=0.3), capacity=400)
        >>> red.quantize(200, 255)
        128
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Logical channel name")
    chromaticity: Chromaticity
    capacity: float = Field(gt=0.0, description="Maximum luminance at full duty")
    gamma: float = Field(
        default=1.0,
        gt=0.0,
        description="Response exponent (output = duty ** gamma); 1.0 is linear",
    )

    _unit: tuple[float, float, float] = PrivateAttr()

    def model_post_init(self, __context) -> None:
        unit = unit_tristimulus(self.chromaticity, subject=f"primary '{self.name}'")
        self._unit = (float(unit[0]), float(unit[1]), float(unit[2]))

    @classmethod
    def from_xy(
        cls, name: str, x: float, y: float, capacity: float, gamma: float = 1.0
    ) -> "Primary":
        """Create a primary from bare chromaticity coordinates."""
        return cls(
            name=name,
            chromaticity=Chromaticity(x=x, y=y),
            capacity=capacity,
            gamma=gamma,
        )

    @property
    def x(self) -> float:
        return self.chromaticity.x

    @property
    def y(self) -> float:
        return self.chromaticity.y

    @property
    def unit_tristimulus(self) -> npt.NDArray[np.float64]:
        """Tristimulus vector (X/Y, 1, Z/Y) emitted per unit of luminance."""
        return np.array(self._unit, dtype=np.float64)

    @property
    def response_curve(self) -> ResponseCurve:
        """Default response curve derived from gamma."""
        return response_for_gamma(self.gamma)

    def quantize(
        self, luminance: float, max_code: int, curve: Optional[ResponseCurve] = None
    ) -> int:
        """
        Convert a luminance contribution to a duty code.

        Args:
            luminance: Requested luminance, expected in [0, capacity]
            max_code: Code for full output (255 for 8-bit channels)
            curve: Response curve overriding the primary's default

        Returns:
            Duty code in [0, max_code]

        Raises:
            ValueError: If max_code is not positive
            CapacityExceededError: If luminance is outside [0, capacity].
                The clamped code is available as ``error.code``.
        """
        if max_code < 1:
            raise ValueError(f"max_code must be positive, got {max_code}")

        curve = curve or self.response_curve

        if luminance < 0 or luminance > self.capacity:
            clamped = min(max(luminance, 0.0), self.capacity)
            code = curve.to_code(clamped / self.capacity, max_code)
            raise CapacityExceededError(
                primary=self.name,
                luminance=luminance,
                capacity=self.capacity,
                code=code,
            )

        return curve.to_code(luminance / self.capacity, max_code)
