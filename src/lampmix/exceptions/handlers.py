"""
Helpers that turn lampmix errors into something a caller can act on.

| Scenario | Helper |
|----------|--------|
| JSON file failed pydantic validation | `wrap_pydantic_error(error, path)` |
| Show an error on the console | `format_error_for_display(error)` |
| Keep going through a batch of colors | `collect_errors("play sequence")` |

Mixing errors are never swallowed inside the core. These helpers live at the
edges (CLI, sequence playback) where a caller decides what to do with them.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from .base import LampMixError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)


def _field_path(details: dict) -> str:
    return ".".join(str(loc) for loc in details.get("loc", ("unknown",)))


def wrap_pydantic_error(error: Exception, file_path: str) -> LampMixError:
    """
    Convert a pydantic error raised while loading a JSON file.

    Syntax errors become ConfigFileInvalidError; value errors become a
    ConfigValidationError naming the field (or all failing fields).
    """
    from pydantic import ValidationError

    if not isinstance(error, ValidationError):
        return ConfigValidationError("unknown", None, str(error), file_path=file_path)

    details = error.errors()
    syntax = [d for d in details if d.get("type") == "json_invalid"]
    if syntax:
        return ConfigFileInvalidError(file_path, syntax[0].get("msg", str(error)))

    if len(details) == 1:
        only = details[0]
        return ConfigValidationError(
            _field_path(only),
            only.get("input"),
            only.get("msg", "validation failed"),
            file_path=file_path,
        )

    lines = [f"  - {_field_path(d)}: {d.get('msg', 'validation failed')}" for d in details]
    return ConfigValidationError(
        "multiple fields",
        None,
        f"{len(details)} validation errors:\n" + "\n".join(lines),
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return (message, hint or None) for console output."""
    if isinstance(error, LampMixError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create an error collector for batch operations.

    Example:
        ```python
        collector = collect_errors("play sequence")

        for index, step in enumerate(sequence.steps):
            with collector.try_operation(f"step {index}"):
                lamp.set_color(step.color)

        if collector.has_errors:
            print(collector.get_summary())
        ```
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Records recoverable failures of a batch so the batch can carry on.

    A recoverable error (out of gamut, over capacity, a refused send) only
    spoils the item that raised it. Anything else, including lampmix errors
    marked non-recoverable such as an unusable palette, propagates and ends
    the batch.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, LampMixError]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @contextmanager
    def try_operation(self, sub_operation: str) -> Iterator[None]:
        """Run one item of the batch, recording it if it fails recoverably."""
        try:
            yield
        except LampMixError as error:
            if not error.recoverable:
                raise
            logger.warning(f"{sub_operation} failed: {error.technical_message}")
            self.errors.append((sub_operation, error))
        else:
            self.success_count += 1

    def get_summary(self) -> str:
        """Get a multi-line summary of collected errors."""
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        total = self.error_count + self.success_count
        lines = [f"Failed {self.error_count} of {total} operations ({self.operation}):"]
        lines.extend(f"  - {sub_op}: {error.user_message}" for sub_op, error in self.errors)
        return "\n".join(lines)
