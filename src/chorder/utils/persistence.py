"""Shared utilities for Pydantic model persistence.

Stateless helpers for loading and saving Pydantic models to/from JSON files.
Low-level errors are converted into ChorderError subclasses with recovery
hints:

- Invalid JSON or schema violations -> ConfigFileInvalidError / ConfigValidationError
- Filesystem failures -> ConfigIOError

Writes are atomic (temp file + rename).
"""

import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from chorder.exceptions import ConfigFileInvalidError, ConfigIOError, wrap_pydantic_error

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class PydanticPersistence:
    """
    Utility class providing shared Pydantic persistence operations.

    Example Usage:
        ```python
        config = PydanticPersistence.load_json(Path("config.json"), ChorderConfig)
        PydanticPersistence.save_json(config, Path("config.json"))
        ```
    """

    @staticmethod
    def load_json(path: Path, model_type: type[T]) -> T:
        """
        Load and validate a Pydantic model from a JSON file.

        Args:
            path: Path to the JSON file to load
            model_type: The Pydantic model class to validate against

        Returns:
            Validated model instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the JSON syntax is invalid or the file is empty
            ConfigValidationError: If the JSON content fails Pydantic validation
            ConfigIOError: If the file exists but cannot be read
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            json_content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {path}: {e}")
            raise ConfigIOError(str(path), "read", str(e)) from e

        if not json_content.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        return PydanticPersistence.load_json_text(json_content, model_type, source=str(path))

    @staticmethod
    def load_json_text(json_content: str, model_type: type[T], source: str = "<string>") -> T:
        """
        Validate a Pydantic model from a JSON string.

        Args:
            json_content: Raw JSON document
            model_type: The Pydantic model class to validate against
            source: Where the document came from, used in error messages

        Raises:
            ConfigFileInvalidError: If the JSON syntax is invalid
            ConfigValidationError: If the JSON content fails Pydantic validation
        """
        try:
            model = model_type.model_validate_json(json_content)
        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {source}: {e}")
            raise wrap_pydantic_error(e, source) from e

        logger.debug(f"Loaded {model_type.__name__} from {source}")
        return model

    @staticmethod
    def save_json(
        data: BaseModel,
        path: Path,
        indent: int = 2,
        create_parents: bool = True,
    ) -> None:
        """
        Save a Pydantic model to a JSON file with an atomic write.

        Args:
            data: The Pydantic model instance to save
            path: Path where the file should be saved
            indent: JSON indentation level (default: 2 spaces)
            create_parents: Create parent directories if they don't exist (default: True)

        Raises:
            ConfigIOError: If the directory or file cannot be written
        """
        if create_parents:
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.error(f"Error creating {path.parent}: {e}")
                raise ConfigIOError(str(path.parent), "create directory", str(e)) from e

        json_content = data.model_dump_json(indent=indent)

        # Atomic write: write to temp file first, then rename
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            temp_path.write_text(json_content, encoding="utf-8")
            temp_path.replace(path)
            logger.debug(f"Saved {type(data).__name__} to {path}")
        except OSError as e:
            logger.error(f"OS error saving {type(data).__name__} to {path}: {e}")
            raise ConfigIOError(str(path), "write", str(e)) from e
        finally:
            if temp_path.exists():
                temp_path.unlink()
