"""State machine tracking the active page and driving slot rendering."""

import logging

from chorder.models import DEFAULT_PAGE, ChorderConfig
from chorder.protocols import PageEvent, PageObserver, SlotRenderer
from chorder.utils import ObserverManager

logger = logging.getLogger(__name__)


class PageStateMachine:
    """
    Owns the name of the active page.

    The active page is the only piece of state that changes after startup.
    It changes through `switch_to()`, which is called by the dispatcher for
    matched switch actions. Any string is a valid page: a name missing from
    the options table renders as an empty grid.

    Renderers and observers are notified after the state has changed.
    """

    def __init__(self, config: ChorderConfig, initial_page: str = DEFAULT_PAGE) -> None:
        """
        Initialize the state machine.

        Args:
            config: Loaded configuration (read-only)
            initial_page: Page active at startup
        """
        self._config = config
        self._current_page = initial_page
        self._renderers = ObserverManager[SlotRenderer](observer_type_name="renderer")
        self._observers = ObserverManager[PageObserver](observer_type_name="page")

    @property
    def current_page(self) -> str:
        return self._current_page

    def attach_renderer(self, renderer: SlotRenderer) -> None:
        self._renderers.register(renderer)

    def register_observer(self, observer: PageObserver) -> None:
        """
        Register an observer to receive page events.

        Args:
            observer: Object implementing PageObserver protocol
        """
        self._observers.register(observer)

    def unregister_observer(self, observer: PageObserver) -> None:
        self._observers.unregister(observer)

    def layout(self) -> None:
        """Ask renderers to build the empty grid."""
        config = self._config
        self._renderers.notify("render_layout", config.max_rows, config.max_columns, config.geometry)

    def render(self) -> None:
        """
        Hide every slot, then show the active page's displayable options.

        A record missing its shortcut or its description is skipped entirely,
        and so are records beyond the grid capacity.
        """
        capacity = self._config.capacity
        for index in range(capacity):
            self._renderers.notify("set_slot", index, False, "", "")

        records = self._config.page_options(self._current_page)
        for index, record in enumerate(records[:capacity]):
            logger.debug(f"{index} -> {record.model_dump(exclude_none=True)}")
            if not record.is_displayable:
                continue
            self._renderers.notify("set_slot", index, True, record.shortcut, record.description)

        self._observers.notify("on_page_event", PageEvent.PAGE_RENDERED, self._current_page)

    def switch_to(self, page: str) -> None:
        """
        Make `page` the active page and re-render.

        The target is not validated; an unknown page shows an empty grid.
        """
        previous = self._current_page
        self._current_page = page
        logger.info(f"Switched page: {previous!r} -> {page!r}")

        self.render()
        self._renderers.notify("notify_page_changed", page)
        self._observers.notify("on_page_event", PageEvent.PAGE_CHANGED, page)
