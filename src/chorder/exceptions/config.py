"""Configuration-related exceptions.

This module defines exceptions for configuration errors:
- ConfigurationError: Base class for configuration errors
- ConfigFileInvalidError: Config file has invalid syntax
- ConfigValidationError: Config values fail schema validation
- CapacityExceededError: A page holds more options than the grid has slots
- ConfigIOError: The config directory or file could not be read or written
"""

from typing import Any, Optional

from .base import ChorderError


class ConfigurationError(ChorderError):
    """Configuration is invalid or cannot be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """Configuration file has invalid JSON syntax."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the invalid config file
            parse_error: The parsing error message
        """
        user_msg = f"Configuration file has invalid syntax: {parse_error}"
        recovery = "Check for common JSON errors:\n"
        recovery += "  - Trailing commas (remove commas after last item)\n"
        recovery += "  - Missing quotes around strings\n"
        recovery += "  - Unclosed braces or brackets\n"
        recovery += f"  - Edit: {file_path}"

        if "trailing comma" in parse_error.lower():
            user_msg = "Configuration file has a trailing comma"
            recovery = (
                f"Remove the trailing comma from {file_path}\n"
                "JSON doesn't allow commas after the last item in an object or array"
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """Configuration values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Initialize config validation error.

        Args:
            field: The configuration field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the config file (optional)
        """
        user_msg = f"Invalid configuration value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your configuration"
        if file_path:
            recovery += f"\nConfig file: {file_path}"

        if field in ("max_rows", "max_columns"):
            recovery += "\nThe grid needs at least one row and one column"
        elif field.startswith("options"):
            recovery += (
                "\nEach option is an object with string values for "
                "shortcut, description, switch, run, script and shell, "
                "and a list of strings for args"
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
        self.file_path = file_path


class CapacityExceededError(ConfigurationError):
    """A page has more options than the grid has slots."""

    def __init__(self, page: str, limit: int, actual: int):
        """
        Initialize capacity exceeded error.

        Args:
            page: Name of the offending page
            limit: Number of slots in the grid (max_rows * max_columns)
            actual: Number of options configured for the page
        """
        super().__init__(
            user_message=(
                f"Page '{page}' has {actual} options but the grid only has {limit} slots"
            ),
            technical_message=f"Capacity exceeded for page {page!r}: {actual} > {limit}",
            recoverable=False,
            recovery_hint=(
                f"Remove {actual - limit} option(s) from page '{page}' "
                "or increase max_rows / max_columns"
            ),
        )
        self.page = page
        self.limit = limit
        self.actual = actual


class ConfigIOError(ConfigurationError):
    """The configuration directory or file could not be accessed."""

    def __init__(self, path: str, operation: str, error: str):
        """
        Initialize config I/O error.

        Args:
            path: File or directory involved
            operation: What was attempted (e.g. "read", "write", "create directory")
            error: The underlying OS error message
        """
        super().__init__(
            user_message=f"Could not {operation} {path}: {error}",
            technical_message=f"I/O error during {operation} of {path}: {error}",
            recoverable=False,
            recovery_hint="Check file permissions and available disk space",
        )
        self.path = path
        self.operation = operation
        self.error = error
