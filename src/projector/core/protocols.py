"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from projector.core.models import StoreData


class StoreBackend(Protocol):
    """Contract for store persistence backends.

    Any object that implements :meth:`load` and :meth:`save` with the
    correct signatures satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def load(self) -> StoreData:
        """Return the persisted store, or an empty mapping.

        Implementations must never raise for missing or unreadable
        state; absence and corruption both mean "no data yet".
        """
        ...  # pragma: no cover

    def save(self, data: StoreData) -> None:
        """Persist *data* in full, replacing any previous content.

        Raises
        ------
        StoreWriteError
            When the data cannot be written.
        """
        ...  # pragma: no cover
