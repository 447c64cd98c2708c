"""Protocol definitions for observers and collaborators."""

from .events import PageEvent
from .observers import PageObserver, SlotRenderer

__all__ = [
    # Events
    "PageEvent",
    # Observers
    "PageObserver",
    "SlotRenderer",
]
