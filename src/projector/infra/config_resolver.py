"""Infrastructure: resolve the store location and working directory.

Explicit overrides always win.  Otherwise the store lives under the
user's home directory and the working directory is the process's
current directory.

Rules
-----
* Path construction only. Nothing is checked or created on disk.
* ``OSError`` and missing environment variables are re-raised as
  :class:`~projector.exceptions.ConfigResolutionError`.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from projector.core.models import Operation, ResolvedConfig
from projector.exceptions import ConfigResolutionError
from projector.utils.constants import HOME_ENV_VAR, STORE_DIRNAME, STORE_FILENAME

logger = logging.getLogger(__name__)


def resolve_store_path(
    override: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Return *override*, or ``$HOME/projector/projector.json``.

    Raises
    ------
    ConfigResolutionError
        If no override is given and ``HOME`` is unset or empty.
    """
    if override is not None:
        return override

    env = os.environ if environ is None else environ
    home = env.get(HOME_ENV_VAR)
    if not home:
        raise ConfigResolutionError(
            f"Unable to find {HOME_ENV_VAR}",
            hint="Set HOME or pass the store location with --config PATH.",
        )
    return Path(home) / STORE_DIRNAME / STORE_FILENAME


def resolve_working_directory(override: Path | None = None) -> Path:
    """Return *override*, or the process's current directory.

    Raises
    ------
    ConfigResolutionError
        If the current directory cannot be determined (for example
        because it was deleted while the process was running).
    """
    if override is not None:
        return override

    try:
        return Path.cwd()
    except OSError as exc:
        raise ConfigResolutionError(
            f"Unable to get current directory: {exc}",
            hint="Pass the directory explicitly with --pwd PATH.",
        ) from exc


def resolve_config(
    operation: Operation,
    *,
    config: Path | None = None,
    pwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ResolvedConfig:
    """Apply defaults to the raw overrides and bundle the result."""
    resolved = ResolvedConfig(
        operation=operation,
        store_path=resolve_store_path(config, environ),
        working_directory=resolve_working_directory(pwd),
    )
    logger.debug(
        "Resolved store=%s pwd=%s operation=%r",
        resolved.store_path,
        resolved.working_directory,
        resolved.operation,
    )
    return resolved
