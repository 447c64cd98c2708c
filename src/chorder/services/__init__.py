"""Application services."""

from .config_service import (
    ConfigService,
    app_config_dir,
    default_config_path,
    parse_config,
    user_config_dir,
)

__all__ = [
    "ConfigService",
    "app_config_dir",
    "default_config_path",
    "parse_config",
    "user_config_dir",
]
