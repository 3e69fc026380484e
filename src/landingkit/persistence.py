"""JSON storage for site files and the application config.

Reading turns syntax, validation and I/O failures into ConfigurationError
subclasses (see `landingkit.exceptions`). Writing keeps the previous file as
``<name>.bak`` and replaces the target atomically through ``<name>.tmp``.
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from landingkit.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def _sibling(path: Path, extra_suffix: str) -> Path:
    return path.with_suffix(path.suffix + extra_suffix)


def _read_text(path: Path) -> str:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read {path}: {e}")
        raise ConfigFileInvalidError(str(path), f"Unreadable file: {e}") from e

    if not text.strip():
        raise ConfigFileInvalidError(str(path), "File is empty")
    return text


class PydanticPersistence:
    """
    Static helpers to load and save any pydantic model as JSON.

    Example Usage:
        ```python
        site = PydanticPersistence.load_json(Path("site.json"), SiteConfig)
        PydanticPersistence.save_json(site, Path("site.json"), by_alias=True)
        ```
    """

    @staticmethod
    def load_json(path: Path, model_type: type[T]) -> T:
        """
        Read `path` and validate it as `model_type`.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the file is empty, unreadable or not JSON
            ConfigValidationError: If the content fails validation
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        text = _read_text(path)
        try:
            model = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def save_json(
        data: BaseModel,
        path: Path,
        indent: int = 2,
        create_parents: bool = True,
        backup: bool = True,
        by_alias: bool = False,
        exclude_none: bool = False,
    ) -> None:
        """
        Write `data` to `path` as JSON.

        Args:
            data: Model to save
            path: Destination file
            indent: JSON indentation
            create_parents: Create missing parent directories
            backup: Copy an existing file to ``<name>.bak`` first
            by_alias: Write field aliases (camelCase keys for site files)
            exclude_none: Omit fields whose value is None

        Raises:
            OSError: If the file cannot be written
        """
        name = type(data).__name__
        content = data.model_dump_json(indent=indent, by_alias=by_alias, exclude_none=exclude_none)
        temp_path = _sibling(path, ".tmp")

        try:
            if create_parents:
                path.parent.mkdir(parents=True, exist_ok=True)

            if backup and path.exists():
                shutil.copy2(path, _sibling(path, ".bak"))
                logger.debug(f"Backed up {path}")

            temp_path.write_text(content, encoding="utf-8")
            temp_path.replace(path)
        except OSError as e:
            logger.error(f"Could not save {name} to {path}: {e}")
            raise
        finally:
            temp_path.unlink(missing_ok=True)

        logger.debug(f"Saved {name} to {path}")

    @staticmethod
    def load_json_or_default(
        path: Path, model_type: type[T], default_factory: Callable[[], T] | None = None
    ) -> T:
        """
        Like `load_json`, but a missing file yields a default model.

        The default is not written to disk. A file that exists but is broken
        still raises.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"{path} not found, using default {model_type.__name__}")
            return default_factory() if default_factory else model_type()

    @staticmethod
    def validate_json(path: Path, model_type: type[T]) -> tuple[bool, str | None]:
        """Check a file without raising. Returns (is_valid, error_message)."""
        try:
            PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            return False, f"File not found: {path}"
        except ConfigurationError as e:
            return False, e.user_message
        return True, None
