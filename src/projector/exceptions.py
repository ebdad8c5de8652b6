"""Custom exception hierarchy for projector.

All exceptions that cross layer boundaries must inherit from
:class:`ProjectorError`.  Raw ``OSError`` instances raised while
touching the filesystem must NEVER propagate beyond the infrastructure
layer — they must be caught and re-raised as a typed subclass defined
here.

A missing or corrupt store file is deliberately *not* part of this
hierarchy: it is recovered from inside the infrastructure layer and
never reaches the user.

Hierarchy
---------
ProjectorError
├── UsageError
├── EnvironmentError
│   └── ConfigResolutionError
└── StoreWriteError
"""

from __future__ import annotations


class ProjectorError(Exception):
    """Base exception for all projector errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument handling -----------------------------------------------------

class UsageError(ProjectorError):
    """Raised when the positional arguments do not form a valid operation."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(ProjectorError):
    """Raised when a required runtime dependency is not available."""


class ConfigResolutionError(EnvironmentError):
    """Raised when the store path or working directory cannot be determined."""


# --- Persistence -----------------------------------------------------------

class StoreWriteError(ProjectorError):
    """Raised when the store file or its directory cannot be written."""
