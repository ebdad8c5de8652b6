"""Infrastructure: the single-file JSON store backend.

File layout::

    {
      "projector": {
        "/some/path": {"key": "value"}
      }
    }

Rules
-----
* Reads never fail: a missing, unreadable, undecodable, or wrongly
  shaped file yields an empty store.  The reason is logged at DEBUG.
* Path keys are canonicalised on load, so "/a/b/" and "/a/b" share an entry.
* Writes replace the whole file and create missing parent directories.
  Text is written as raw UTF-8, not ``\\uXXXX`` escapes.
* Write failures are re-raised as
  :class:`~projector.exceptions.StoreWriteError`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path, PurePath
from typing import Any

from projector.core.models import StoreData
from projector.core.projector import path_key
from projector.exceptions import StoreWriteError
from projector.utils.constants import JSON_INDENT, STORE_FIELD

logger = logging.getLogger(__name__)


class MalformedStoreError(ValueError):
    """Internal signal that a decoded document has the wrong shape."""


def parse_document(document: Any) -> StoreData:
    """Validate a decoded JSON document and extract the store mapping.

    Raises
    ------
    MalformedStoreError
        If any level of the document has an unexpected type.
    """
    if not isinstance(document, dict):
        raise MalformedStoreError("top-level value is not an object")
    paths = document.get(STORE_FIELD)
    if not isinstance(paths, dict):
        raise MalformedStoreError(f"missing or invalid {STORE_FIELD!r} field")

    data: StoreData = {}
    for path, values in paths.items():
        if not isinstance(values, dict):
            raise MalformedStoreError(f"entry for {path!r} is not an object")
        for key, value in values.items():
            if not isinstance(value, str):
                raise MalformedStoreError(f"value of {key!r} at {path!r} is not a string")
        data.setdefault(path_key(PurePath(path)), {}).update(values)
    return data


def render_document(data: StoreData) -> str:
    """Serialise *data* the way it is written to disk."""
    return json.dumps({STORE_FIELD: data}, indent=JSON_INDENT, ensure_ascii=False)


class JsonFileStore:
    """:class:`~projector.core.protocols.StoreBackend` over one JSON file.

    Parameters
    ----------
    path:
        Location of the store file.  It need not exist yet.
    """

    def __init__(self, path: Path) -> None:
        self._path: Path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> StoreData:
        """Read the store, falling back to an empty one on any problem."""
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No store at %s; starting empty", self._path)
            return {}
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Ignoring unreadable store at %s: %s", self._path, exc)
            return {}
        try:
            data = parse_document(json.loads(raw))
        except (json.JSONDecodeError, MalformedStoreError) as exc:
            logger.debug("Ignoring malformed store at %s: %s", self._path, exc)
            return {}
        logger.debug("Loaded %d path(s) from %s", len(data), self._path)
        return data

    def save(self, data: StoreData) -> None:
        """Overwrite the store file with *data*.

        Raises
        ------
        StoreWriteError
            If the parent directory cannot be created or the file
            cannot be written.
        """
        contents = render_document(data)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(contents, encoding="utf-8")
        except (OSError, UnicodeEncodeError) as exc:
            raise StoreWriteError(
                f"Unable to write store {self._path}: {exc}",
                hint="Check permissions or choose another location with --config PATH.",
            ) from exc
        logger.debug("Saved %d path(s) to %s", len(data), self._path)
