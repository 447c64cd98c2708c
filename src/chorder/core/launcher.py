"""Launcher: wires configuration, page state, dispatch and a renderer."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from chorder.core.dispatcher import ActionDispatcher, DispatchOutcome, Spawner
from chorder.core.keys import Modifier, normalize
from chorder.core.state_machine import PageStateMachine
from chorder.models import DEFAULT_PAGE, ChorderConfig
from chorder.protocols import SlotRenderer

logger = logging.getLogger(__name__)


class Launcher:
    """
    Core of the application, independent of any UI toolkit.

    The host delivers (key name, modifiers) pairs to `handle_key_event()` one
    at a time and executes TERMINATE outcomes. Spawn failures are logged here
    and otherwise discarded.
    """

    def __init__(
        self,
        config: ChorderConfig,
        renderer: Optional[SlotRenderer] = None,
        spawner: Optional[Spawner] = None,
        initial_page: str = DEFAULT_PAGE,
        home: Optional[Path] = None,
    ) -> None:
        self.config = config
        self.state = PageStateMachine(config, initial_page=initial_page)
        self.dispatcher = ActionDispatcher(config, self.state, spawner=spawner, home=home)
        if renderer is not None:
            self.state.attach_renderer(renderer)

    @property
    def current_page(self) -> str:
        return self.state.current_page

    def start(self) -> None:
        """Build the grid and render the initial page."""
        logger.info(f"Starting on page {self.current_page!r}")
        self.state.layout()
        self.state.render()

    def handle_key_event(
        self, key_name: str, modifiers: Modifier | Iterable[Modifier] = Modifier.NONE
    ) -> DispatchOutcome:
        """Normalize a keypress and dispatch it."""
        canonical = normalize(key_name, modifiers)
        outcome = self.dispatcher.handle_key(canonical)

        for result in outcome.spawns:
            if not result.ok:
                logger.warning(f"Ignoring spawn failure: {result.error.technical_message}")

        return outcome
