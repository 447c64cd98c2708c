"""Textual front end: renders the slot grid and feeds keypresses to the launcher."""

import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Header

from chorder.core import Launcher, parse_key_binding
from chorder.core.dispatcher import Spawner
from chorder.models import DEFAULT_PAGE, ChorderConfig, GridGeometry

from .widgets import SlotGrid

logger = logging.getLogger(__name__)


class ChorderApp(App[None], inherit_bindings=False):
    """
    Textual TUI for Chorder.

    This is a pure UI layer. It implements the SlotRenderer protocol
    (structurally, to avoid metaclass conflicts between App and Protocol)
    and forwards every keypress to the Launcher. When the launcher asks to
    terminate, the app exits with the requested return code.

    Built-in app bindings (ctrl+q and friends) are not inherited: every key
    reaches the launcher, and Escape is the only key that quits on its own.
    """

    TITLE = "Chorder"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        align: center middle;
    }
    """

    def __init__(
        self,
        config: ChorderConfig,
        initial_page: str = DEFAULT_PAGE,
        spawner: Optional[Spawner] = None,
    ):
        """
        Initialize the Textual UI application.

        Args:
            config: Loaded and validated configuration
            initial_page: Page shown at startup
            spawner: Process launcher (tests pass a fake)
        """
        super().__init__()
        self.config = config
        self.launcher = Launcher(config, renderer=self, spawner=spawner, initial_page=initial_page)

    def compose(self) -> ComposeResult:
        yield Header()
        yield SlotGrid(self.config.shortcut_font, self.config.description_font)

    def on_mount(self) -> None:
        self.sub_title = self.launcher.current_page
        self.launcher.start()

    # =================================================================
    # SlotRenderer protocol
    # =================================================================

    def render_layout(self, rows: int, cols: int, geometry: GridGeometry) -> None:
        self.query_one(SlotGrid).build(rows, cols, geometry)

    def set_slot(self, index: int, visible: bool, shortcut_text: str, description_text: str) -> None:
        self.query_one(SlotGrid).set_slot(index, visible, shortcut_text, description_text)

    def notify_page_changed(self, new_page: str) -> None:
        self.sub_title = new_page

    # =================================================================
    # Input
    # =================================================================

    def on_key(self, event: events.Key) -> None:
        """Every keypress is consumed and dispatched."""
        event.stop()
        event.prevent_default()

        key_name, modifiers = parse_key_binding(event.key)
        outcome = self.launcher.handle_key_event(key_name, modifiers)

        if outcome.should_terminate:
            logger.info(f"Exiting with code {outcome.exit_code}")
            self.exit(return_code=outcome.exit_code)
