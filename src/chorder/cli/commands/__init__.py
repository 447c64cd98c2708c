"""CLI commands for chorder."""

from .config import config
from .keys import keys

__all__ = ["config", "keys"]
