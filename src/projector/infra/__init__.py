"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system: the
process environment, the current directory, and the store file.
Every raw ``OSError`` must be caught here and re-raised as a
:class:`~projector.exceptions.ProjectorError` subclass, except where a
failure is recovered from locally.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from projector.infra.config_resolver import (
    resolve_config,
    resolve_store_path,
    resolve_working_directory,
)
from projector.infra.json_store import JsonFileStore

__all__: list[str] = [
    "JsonFileStore",
    "resolve_config",
    "resolve_store_path",
    "resolve_working_directory",
]
