"""Option record model: one bound action in a page of the grid."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ActionKind(Enum):
    """How the dispatcher interprets a matched option record."""

    SWITCH = "switch"  # Change the active page
    RUN = "run"        # Spawn an executable with args, then exit
    SCRIPT = "script"  # Spawn a script through a shell, then exit


class OptionRecord(BaseModel):
    """
    A single option bound to a slot.

    Any subset of the keys may be present. The record is not a tagged union
    at rest; the dispatcher interprets it using a fixed priority order
    (switch, then run, else script). See `action_kinds()`.

    Keys outside the known fields are kept as extras: nothing reads them,
    but they survive the write-back on startup.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    shortcut: str | None = Field(default=None, description="Canonical key combo, e.g. 'c-s-a'")
    description: str | None = Field(default=None, description="Text shown under the shortcut")
    switch: str | None = Field(default=None, description="Page to switch to")
    run: str | None = Field(default=None, description="Executable path or name")
    args: list[Any] | None = Field(default=None, description="Arguments passed to 'run'")
    script: str | None = Field(default=None, description="Script path, may contain $HOME")
    shell: str | None = Field(default=None, description="Interpreter override for 'script'")

    @property
    def is_displayable(self) -> bool:
        """A slot is only shown when both shortcut and description are set."""
        return self.shortcut is not None and self.description is not None

    def matches(self, canonical: str) -> bool:
        """
        Check whether this record is bound to a canonical shortcut.

        A record without a shortcut compares as the empty string, so it
        matches an empty canonical shortcut.
        """
        return (self.shortcut or "") == canonical

    def resolved_args(self) -> list[str]:
        """Arguments for 'run'; non-string elements become empty strings."""
        if self.args is None:
            return []
        return [arg if isinstance(arg, str) else "" for arg in self.args]

    def action_kinds(self) -> tuple[ActionKind, ...]:
        """
        Actions this record fires, in execution order.

        A switch is applied first and does not end the pass, so a record can
        both switch pages and run something. 'run' takes precedence over
        'script'.
        """
        kinds = []
        if self.switch is not None:
            kinds.append(ActionKind.SWITCH)
        if self.run is not None:
            kinds.append(ActionKind.RUN)
        elif self.script is not None:
            kinds.append(ActionKind.SCRIPT)
        return tuple(kinds)

