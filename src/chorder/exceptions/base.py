"""Root of the Chorder error hierarchy.

Chorder errors fall into two families:

- ConfigurationError and its subclasses are raised while the config document
  is loaded, validated or written back. They happen before the grid is shown
  and abort startup; the CLI prints them in a boxed ERROR block.
- SpawnError comes back from the process spawner after a key has matched.
  It is logged and dropped, and the launcher still exits normally.

Every error carries a short message for the terminal, a longer one for the
log file, and optionally a hint naming what to change in config.json.
"""

from typing import Optional


class ChorderError(Exception):
    """
    Base exception for all Chorder errors.

    Attributes:
        user_message: Shown on stderr by the CLI
        technical_message: Written to the log file
        recoverable: True when editing config.json or the command fixes it
        recovery_hint: What to change, e.g. "Remove 2 option(s) from page 'main'"
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the hint, if there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
