"""Reusable UI widgets for the TUI."""

from .slot_grid import SlotGrid
from .slot_widget import SlotWidget

__all__ = [
    "SlotGrid",
    "SlotWidget",
]
