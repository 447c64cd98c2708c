"""Textual user interface."""

from .app import ChorderApp

__all__ = ["ChorderApp"]
