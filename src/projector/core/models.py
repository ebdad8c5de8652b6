"""Domain models for projector.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

StoreData = dict[str, dict[str, str]]
"""Path string → key → value.  The whole persisted dataset."""


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PrintAll:
    """Print every key visible from the working directory."""


@dataclass(frozen=True, slots=True)
class PrintKey:
    """Print the value of a single key, if any level defines it."""

    key: str


@dataclass(frozen=True, slots=True)
class Add:
    """Set *key* to *value* on the working directory itself."""

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class Remove:
    """Delete *key* from the working directory's own entry."""

    key: str


Operation = PrintAll | PrintKey | Add | Remove
"""Closed set of operations; exactly one is active per invocation."""


# ---------------------------------------------------------------------------
# Resolved invocation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResolvedConfig:
    """Everything a single invocation needs, with defaults applied."""

    operation: Operation
    """The operation requested on the command line."""

    store_path: Path
    """Location of the JSON store file."""

    working_directory: Path
    """Directory that lookups and mutations are scoped to."""
