"""Data models for Chorder."""

from .config import DEFAULT_PAGE, ChorderConfig, GridGeometry, OptionsTable
from .option import ActionKind, OptionRecord

__all__ = [
    "DEFAULT_PAGE",
    # Models
    "ChorderConfig",
    "GridGeometry",
    "OptionRecord",
    "OptionsTable",
    # Enums
    "ActionKind",
]
