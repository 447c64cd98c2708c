"""Process-launch exceptions."""

from collections.abc import Sequence

from .base import ChorderError


class SpawnError(ChorderError):
    """A child process could not be started."""

    def __init__(self, command: Sequence[str], error: str):
        """
        Initialize spawn error.

        Args:
            command: The argv that failed to start
            error: The underlying OS error message
        """
        shown = " ".join(command) or "<empty command>"
        super().__init__(
            user_message=f"Could not start {shown}",
            technical_message=f"Spawn of {list(command)!r} failed: {error}",
            recoverable=True,
            recovery_hint="Check the run/script path and the configured shell",
        )
        self.command = list(command)
        self.error = error
