"""Response curves mapping a luminance fraction to a PWM duty code.

A response curve answers one question: which duty code makes a primary emit
`fraction` of its capacity? Every curve must be monotonic and must map
0.0 to code 0 and 1.0 to `max_code` exactly.

- LinearResponse: code = round(fraction * max_code)
- GammaResponse: code = round(fraction ** (1 / gamma) * max_code), for
  emitters whose output follows duty ** gamma

Rounding is half-up so that equal fractions always land on the same code.
"""

import math
from typing import Protocol, runtime_checkable


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp_code(code: int, max_code: int) -> int:
    return max(0, min(max_code, code))


@runtime_checkable
class ResponseCurve(Protocol):
    """Protocol for luminance-to-duty-code mappings."""

    def to_code(self, fraction: float, max_code: int) -> int:
        """
        Map a luminance fraction in [0, 1] to a duty code in [0, max_code].

        Args:
            fraction: Requested luminance divided by the primary's capacity
            max_code: Largest code the channel accepts
        """
        ...


class LinearResponse:
    """Duty code proportional to luminance."""

    def to_code(self, fraction: float, max_code: int) -> int:
        fraction = min(max(fraction, 0.0), 1.0)
        return _clamp_code(_round_half_up(fraction * max_code), max_code)

    def __repr__(self) -> str:
        return "LinearResponse()"


class GammaResponse:
    """Duty code for emitters whose light output follows duty ** gamma."""

    def __init__(self, gamma: float):
        if gamma <= 0:
            raise ValueError(f"gamma must be positive, got {gamma}")
        self.gamma = gamma

    def to_code(self, fraction: float, max_code: int) -> int:
        fraction = min(max(fraction, 0.0), 1.0)
        return _clamp_code(_round_half_up(fraction ** (1.0 / self.gamma) * max_code), max_code)

    def __repr__(self) -> str:
        return f"GammaResponse(gamma={self.gamma})"


def response_for_gamma(gamma: float) -> ResponseCurve:
    """Return the linear curve for gamma 1.0, a gamma curve otherwise."""
    if gamma == 1.0:
        return LinearResponse()
    return GammaResponse(gamma)
