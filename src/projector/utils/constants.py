"""Fixed names shared by the resolver, the store, and the CLI."""

from __future__ import annotations

STORE_FIELD: str = "projector"
"""Top-level JSON field wrapping the path → key → value mapping."""

STORE_DIRNAME: str = "projector"
"""Directory created under the home directory for the default store."""

STORE_FILENAME: str = "projector.json"
"""File name of the default store."""

HOME_ENV_VAR: str = "HOME"
"""Environment variable consulted when no ``--config`` is supplied."""

JSON_INDENT: int = 2
"""Indentation used for the store file and for ``print all`` output."""
