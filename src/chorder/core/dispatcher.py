"""Action dispatch: canonical shortcut -> page switch or process launch."""

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Protocol

from chorder.core.keys import ESCAPE
from chorder.core.state_machine import PageStateMachine
from chorder.exceptions import SpawnError
from chorder.models import ActionKind, ChorderConfig, OptionRecord

logger = logging.getLogger(__name__)

HOME_PLACEHOLDER = "$HOME"


@dataclass(frozen=True)
class SpawnResult:
    """Result of a fire-and-forget process launch."""

    command: list[str]
    error: Optional[SpawnError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Spawner(Protocol):
    def spawn(self, command: Sequence[str]) -> SpawnResult: ...


class ProcessSpawner:
    """
    Starts detached child processes.

    The child is not waited on and its output is discarded. It is started in
    a new session so it survives the launcher exiting right after.
    """

    def spawn(self, command: Sequence[str]) -> SpawnResult:
        argv = list(command)
        try:
            subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except (OSError, ValueError) as e:
            return SpawnResult(command=argv, error=SpawnError(argv, str(e)))

        logger.info(f"Spawned {argv}")
        return SpawnResult(command=argv)


class OutcomeKind(Enum):
    NO_OP = "no_op"          # Nothing matched, or the match had no action
    SWITCHED = "switched"    # Active page changed, keep running
    TERMINATE = "terminate"  # The driver must exit with exit_code


@dataclass(frozen=True)
class DispatchOutcome:
    """
    What handling one key produced.

    The dispatcher never exits the process itself. A TERMINATE outcome is
    executed by the top-level driver.
    """

    kind: OutcomeKind
    exit_code: Optional[int] = None
    page: Optional[str] = None
    record: Optional[OptionRecord] = None
    spawns: list[SpawnResult] = field(default_factory=list)

    @classmethod
    def no_op(cls, record: Optional[OptionRecord] = None) -> "DispatchOutcome":
        return cls(OutcomeKind.NO_OP, record=record)

    @classmethod
    def switched(cls, page: str, record: OptionRecord) -> "DispatchOutcome":
        return cls(OutcomeKind.SWITCHED, page=page, record=record)

    @classmethod
    def terminate(
        cls,
        exit_code: int = 0,
        page: Optional[str] = None,
        record: Optional[OptionRecord] = None,
        spawns: Optional[list[SpawnResult]] = None,
    ) -> "DispatchOutcome":
        return cls(OutcomeKind.TERMINATE, exit_code, page, record, spawns or [])

    @property
    def should_terminate(self) -> bool:
        return self.kind is OutcomeKind.TERMINATE


class ActionDispatcher:
    """
    Resolves a canonical shortcut against the active page and executes it.

    Resolution order:
        1. ``escape`` terminates with code 0 before anything else.
        2. The first record of the active page whose shortcut equals the
           canonical string is the match; other pages are never searched.
        3. ``switch`` is applied first and does not end the pass. Then
           ``run`` (with ``args``) or else ``script`` (through ``shell``) is
           spawned and the outcome is TERMINATE(0), whether or not the
           spawn succeeded.
    """

    def __init__(
        self,
        config: ChorderConfig,
        state: PageStateMachine,
        spawner: Optional[Spawner] = None,
        home: Optional[Path] = None,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            config: Loaded configuration (read-only)
            state: Page state machine owning the active page
            spawner: Process launcher (defaults to ProcessSpawner)
            home: Directory substituted for $HOME in script paths
                (defaults to the user's home directory)
        """
        self._config = config
        self._state = state
        self._spawner = spawner or ProcessSpawner()
        self._home = home

    def find_record(self, canonical: str) -> Optional[OptionRecord]:
        """First record of the active page bound to `canonical`, in slot order."""
        for record in self._config.page_options(self._state.current_page):
            if record.matches(canonical):
                return record
        return None

    def expand_script_path(self, script: str) -> str:
        home = self._home if self._home is not None else Path.home()
        return script.replace(HOME_PLACEHOLDER, str(home))

    def script_command(self, record: OptionRecord) -> list[str]:
        """``[interpreter, path]``; the record's shell wins over the global one."""
        interpreter = record.shell if record.shell is not None else self._config.shell
        return [interpreter, self.expand_script_path(record.script or "")]

    def handle_key(self, canonical: str) -> DispatchOutcome:
        """
        Handle one canonical shortcut.

        Returns:
            DispatchOutcome describing what happened
        """
        if canonical == ESCAPE:
            logger.info("Escape pressed, terminating")
            return DispatchOutcome.terminate(0, page=self._state.current_page)

        record = self.find_record(canonical)
        if record is None:
            logger.debug(f"No option for {canonical!r} on page {self._state.current_page!r}")
            return DispatchOutcome.no_op()

        kinds = record.action_kinds()
        logger.debug(f"Matched {canonical!r} -> {[kind.value for kind in kinds]}")

        if ActionKind.SWITCH in kinds:
            self._state.switch_to(record.switch)

        if ActionKind.RUN in kinds:
            command = [record.run, *record.resolved_args()]
        elif ActionKind.SCRIPT in kinds:
            command = self.script_command(record)
        elif ActionKind.SWITCH in kinds:
            return DispatchOutcome.switched(self._state.current_page, record)
        else:
            return DispatchOutcome.no_op(record)

        result = self._spawner.spawn(command)
        return DispatchOutcome.terminate(
            0, page=self._state.current_page, record=record, spawns=[result]
        )
