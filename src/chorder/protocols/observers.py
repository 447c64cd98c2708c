"""Observer and collaborator protocols.

- PageObserver: reacts to page changes (logging, status displays, tests)
- SlotRenderer: the rendering collaborator that draws the grid
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .events import PageEvent

if TYPE_CHECKING:
    from chorder.models import GridGeometry


@runtime_checkable
class PageObserver(Protocol):
    """Observer that receives page state machine events."""

    def on_page_event(self, event: PageEvent, page: str) -> None:
        """
        Handle a page event.

        Args:
            event: What happened
            page: Name of the page now active
        """
        ...


@runtime_checkable
class SlotRenderer(Protocol):
    """
    Rendering sink for the launcher grid.

    The renderer only observes the active page. It never changes it.
    """

    def render_layout(self, rows: int, cols: int, geometry: "GridGeometry") -> None:
        """Create the rows x cols grid of hidden slots."""
        ...

    def set_slot(self, index: int, visible: bool, shortcut_text: str, description_text: str) -> None:
        """Show or hide one slot (row-major index) and set its labels."""
        ...

    def notify_page_changed(self, new_page: str) -> None:
        """Called after a switch action changed the active page."""
        ...
