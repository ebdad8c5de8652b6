"""Core store engine — ancestor-walk lookup and path-scoped mutation.

The engine holds the whole store in memory and delegates persistence
to a :class:`~projector.core.protocols.StoreBackend` injected at
construction time, keeping the core free of filesystem access.

Resolution
----------
Lookups consider the *ancestor chain* of the working directory: the
directory itself, its parent, and so on up to the filesystem root.
Values set on deeper paths win over values set on shallower ones.
Mutations only ever touch the working directory's own entry.

Paths are matched by their canonical string form (see :func:`path_key`);
symlinks and ``..`` components are not resolved.
"""

from __future__ import annotations

import logging
from pathlib import PurePath

from projector.core.models import StoreData
from projector.core.protocols import StoreBackend

logger = logging.getLogger(__name__)


def path_key(path: PurePath) -> str:
    """Return the store key for *path*.

    Redundant separators and trailing slashes are already dropped by
    :mod:`pathlib`; the POSIX-reserved leading ``//`` is folded to ``/``
    as well so every spelling of a directory maps to one entry.
    """
    key = str(path)
    if key.startswith("//") and not key.startswith("///"):
        return key[1:]
    return key


def ancestor_chain(path: PurePath) -> list[PurePath]:
    """Return *path* followed by each of its parents, root last.

    The chain is never empty; a root path yields a single element.
    """
    chain = [path]
    current = path
    while current.parent != current:
        current = current.parent
        chain.append(current)
    return chain


class Projector:
    """In-memory path → key → value store scoped to a working directory.

    Parameters
    ----------
    backend:
        Any object satisfying the :class:`StoreBackend` protocol.
    working_directory:
        The directory lookups start from and mutations apply to.
    data:
        Initial store contents.  Use :meth:`load` to read them from
        *backend* instead.
    """

    def __init__(
        self,
        backend: StoreBackend,
        working_directory: PurePath,
        data: StoreData | None = None,
    ) -> None:
        self._backend: StoreBackend = backend
        self._pwd: PurePath = working_directory
        self._data: StoreData = data if data is not None else {}

    @classmethod
    def load(cls, backend: StoreBackend, working_directory: PurePath) -> Projector:
        """Build an engine from the backend's persisted state."""
        return cls(backend, working_directory, backend.load())

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def working_directory(self) -> PurePath:
        return self._pwd

    @property
    def data(self) -> StoreData:
        """Deep copy of the current store contents."""
        return {path: dict(values) for path, values in self._data.items()}

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_value(self, key: str) -> str | None:
        """Return the most specific value for *key*, or ``None``."""
        for path in ancestor_chain(self._pwd):
            values = self._data.get(path_key(path))
            if values is not None and key in values:
                logger.debug("Resolved %r at %s", key, path)
                return values[key]
        return None

    def get_value_all(self) -> dict[str, str]:
        """Merge every level of the chain, deeper paths overriding."""
        merged: dict[str, str] = {}
        for path in reversed(ancestor_chain(self._pwd)):
            values = self._data.get(path_key(path))
            if values:
                merged.update(values)
        return merged

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_value(self, key: str, value: str) -> None:
        """Set *key* on the working directory's own entry."""
        self._data.setdefault(path_key(self._pwd), {})[key] = value

    def remove_value(self, key: str) -> None:
        """Drop *key* from the working directory's own entry.

        Inherited keys are left alone; this is a no-op when the
        working directory never set *key* itself.
        """
        values = self._data.get(path_key(self._pwd))
        if values is not None:
            values.pop(key, None)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self) -> None:
        """Write the full store through the backend.

        Raises
        ------
        StoreWriteError
            When the backend cannot persist the data.
        """
        self._backend.save(self._data)
