"""
Custom exception hierarchy for lampmix.

## Exception Hierarchy

```
LampMixError (base)
├── MixingError
│   ├── DegenerateChromaticityError
│   ├── OutOfGamutError
│   ├── CapacityExceededError
│   └── InvalidPaletteError
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
└── TransportError
```

All custom exceptions carry a `user_message`, a `technical_message` for
logs, a `recoverable` flag and an optional `recovery_hint`. Batch helpers
such as `ErrorCollector` record recoverable errors and let the rest propagate.

Mixing errors are always reported synchronously to the caller of the
allocation. Clamping to the nearest reproducible color, if wanted, is a
policy for the caller to apply.
"""

from .base import LampMixError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    collect_errors,
    format_error_for_display,
    wrap_pydantic_error,
)
from .mixing import (
    CapacityExceededError,
    DegenerateChromaticityError,
    InvalidPaletteError,
    MixingError,
    OutOfGamutError,
)
from .transport import TransportError

__all__ = [
    # Base
    "LampMixError",
    # Mixing
    "CapacityExceededError",
    "DegenerateChromaticityError",
    "InvalidPaletteError",
    "MixingError",
    "OutOfGamutError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Transport
    "TransportError",
    # Handlers
    "ErrorCollector",
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]
