"""
Custom exception hierarchy for Chorder.

```
ChorderError (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   ├── ConfigValidationError
│   ├── CapacityExceededError
│   └── ConfigIOError
└── SpawnError
```

Every configuration error is fatal at startup. SpawnError is the only
non-fatal error: the dispatcher reports it in its outcome and the caller
discards it.
"""

from .base import ChorderError
from .config import (
    CapacityExceededError,
    ConfigFileInvalidError,
    ConfigIOError,
    ConfigurationError,
    ConfigValidationError,
)
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error
from .process import SpawnError

__all__ = [
    # Base
    "ChorderError",
    # Config
    "CapacityExceededError",
    "ConfigFileInvalidError",
    "ConfigIOError",
    "ConfigurationError",
    "ConfigValidationError",
    # Process
    "SpawnError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_pydantic_error",
]
