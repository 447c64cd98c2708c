"""Configuration store: locate, load, validate and write back config.json."""

import logging
import os
from pathlib import Path
from typing import Optional

from chorder.core.validator import validate
from chorder.models import ChorderConfig
from chorder.utils import PydanticPersistence

logger = logging.getLogger(__name__)

APP_DIR_NAME = "chorder"
CONFIG_FILE_NAME = "config.json"
CONFIG_PATH_ENV = "CHORDER_CONFIG"


def user_config_dir() -> Path:
    """Platform config directory ($XDG_CONFIG_HOME or ~/.config)."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    return Path(xdg) if xdg else Path.home() / ".config"


def app_config_dir() -> Path:
    return user_config_dir() / APP_DIR_NAME


def default_config_path() -> Path:
    """Config file location, honouring the CHORDER_CONFIG override."""
    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return app_config_dir() / CONFIG_FILE_NAME


def parse_config(raw_document: Optional[str], source: str = "<string>") -> ChorderConfig:
    """
    Build a configuration from a raw JSON document.

    An absent document yields the all-defaults configuration. Missing keys
    take their defaults and unknown keys are ignored.

    Raises:
        ConfigFileInvalidError: Malformed JSON
        ConfigValidationError: Well-formed JSON with wrong types or ranges
    """
    if raw_document is None:
        return ChorderConfig()
    return PydanticPersistence.load_json_text(raw_document, ChorderConfig, source=source)


class ConfigService:
    """
    Loads the configuration document once at startup.

    Usage Example:
        ```python
        service = ConfigService()
        config = service.load_and_persist()
        ```

    After a successful load the fully defaulted document is written back, so
    the file on disk always lists every setting explicitly. Every failure is
    fatal and surfaces as a ConfigurationError.
    """

    def __init__(self, path: Optional[Path] = None):
        """
        Initialize the service.

        Args:
            path: Config file location (defaults to default_config_path())
        """
        self.path = path or default_config_path()

    def load(self) -> ChorderConfig:
        """
        Load and validate the configuration without writing it back.

        A missing file yields the default configuration.

        Raises:
            ConfigurationError: Malformed document, invalid value or capacity violation
        """
        try:
            config = PydanticPersistence.load_json(self.path, ChorderConfig)
        except FileNotFoundError:
            logger.info(f"No configuration at {self.path}, using defaults")
            config = ChorderConfig()

        validate(config)
        return config

    def save(self, config: ChorderConfig) -> None:
        """Write the configuration, creating the directory if needed."""
        PydanticPersistence.save_json(config, self.path)
        logger.info(f"Saved configuration to {self.path}")

    def load_and_persist(self) -> ChorderConfig:
        """Load, validate, then write back the fully defaulted document."""
        config = self.load()
        self.save(config)
        logger.info(
            f"Configuration ready: {config.max_rows}x{config.max_columns} grid, "
            f"{len(config.options)} page(s)"
        )
        return config
