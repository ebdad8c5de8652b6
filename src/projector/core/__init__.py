"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from projector.core.models import (
    Add,
    Operation,
    PrintAll,
    PrintKey,
    Remove,
    ResolvedConfig,
    StoreData,
)
from projector.core.operations import parse_operation
from projector.core.projector import Projector, ancestor_chain
from projector.core.protocols import StoreBackend

__all__: list[str] = [
    "Add",
    "Operation",
    "PrintAll",
    "PrintKey",
    "Projector",
    "Remove",
    "ResolvedConfig",
    "StoreBackend",
    "StoreData",
    "ancestor_chain",
    "parse_operation",
]
