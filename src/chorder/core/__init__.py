"""Core launcher engine: validation, key normalization, page state, dispatch."""

from .dispatcher import (
    ActionDispatcher,
    DispatchOutcome,
    OutcomeKind,
    ProcessSpawner,
    SpawnResult,
)
from .keys import Modifier, normalize, parse_key_binding
from .launcher import Launcher
from .state_machine import PageStateMachine
from .validator import validate

__all__ = [
    "ActionDispatcher",
    "DispatchOutcome",
    "Launcher",
    "Modifier",
    "OutcomeKind",
    "PageStateMachine",
    "ProcessSpawner",
    "SpawnResult",
    "normalize",
    "parse_key_binding",
    "validate",
]
