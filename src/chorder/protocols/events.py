"""Domain events for the observer pattern."""

from enum import Enum


class PageEvent(Enum):
    """Events from the page state machine."""

    PAGE_RENDERED = "page_rendered"  # Slots were repopulated from a page
    PAGE_CHANGED = "page_changed"    # A switch action changed the active page
