"""JSON files backing lampmix models (app config, color sequences).

Reads go through pydantic's JSON validation and come back as lampmix
configuration errors; writes keep a .bak copy of the previous file and
replace the target atomically so a crash never leaves half a config behind.
Mixing errors raised while a model validates (a primary with y = 0, for
instance) are not configuration errors and propagate unchanged.
"""

import logging
import os
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from lampmix.exceptions import ConfigFileInvalidError, wrap_pydantic_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def backup_path(path: Path) -> Path:
    """Where save_json keeps the previous contents of path."""
    return path.with_name(path.name + ".bak")


class PydanticPersistence:
    """
    Load and save pydantic models as JSON files.

    Example:
        ```python
        config = PydanticPersistence.load_json(Path("config.json"), AppConfig)
        PydanticPersistence.save_json(config, Path("config.json"))
        ```
    """

    @staticmethod
    def load_json(path: Path, model_type: type[M]) -> M:
        """
        Read and validate a model.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the file is empty, unreadable or not JSON
            ConfigValidationError: If a value fails validation
            MixingError: If the content describes an unusable primary
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise FileNotFoundError(f"File not found: {path}") from None
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigFileInvalidError(str(path), f"cannot read file: {e}") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(path), "file is empty")

        try:
            model = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"Rejected {path} as {model_type.__name__}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def save_json(data: BaseModel, path: Path, indent: int = 2, backup: bool = True) -> None:
        """
        Write a model, replacing the file in one step.

        Args:
            data: Model to write
            path: Destination; missing parent directories are created
            indent: JSON indentation
            backup: Copy an existing file to <name>.bak first

        Raises:
            OSError: If the file cannot be written
        """
        text = data.model_dump_json(indent=indent)

        path.parent.mkdir(parents=True, exist_ok=True)
        if backup and path.exists():
            shutil.copy2(path, backup_path(path))

        fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            os.replace(temp_name, path)
        except OSError:
            if os.path.exists(temp_name):
                os.unlink(temp_name)
            raise

        logger.debug(f"Saved {type(data).__name__} to {path}")

    @staticmethod
    def load_json_or_default(
        path: Path, model_type: type[M], default_factory: Callable[[], M] | None = None
    ) -> M:
        """
        Like load_json, but a missing file yields a default model.

        Invalid files still raise, and nothing is written to disk.
        """
        if not path.exists():
            logger.info(f"{path} does not exist, using default {model_type.__name__}")
            return default_factory() if default_factory else model_type()
        return PydanticPersistence.load_json(path, model_type)
