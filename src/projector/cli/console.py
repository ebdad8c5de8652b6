"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so every command remains functional even when Rich is not
installed.  All diagnostics go to stderr; stdout is reserved for the
values the user asked for.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from projector.exceptions import EnvironmentError

_PACKAGE_LOGGER = "projector"
_HANDLER_NAME = "projector-cli"
_PLAIN_FORMAT = "%(levelname)s %(name)s - %(message)s"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def _build_log_handler() -> logging.Handler:
	"""Return a Rich log handler on stderr, or a plain one without Rich."""
	try:
		from rich.logging import RichHandler

		handler: logging.Handler = RichHandler(
			console=get_rich_console(),
			show_time=False,
			show_path=False,
		)
	except (ModuleNotFoundError, EnvironmentError):
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
	handler.set_name(_HANDLER_NAME)
	return handler


def configure_logging(verbose: bool = False) -> logging.Logger:
	"""Attach the CLI handler to the ``projector`` logger.

	Calling this again replaces the previous handler instead of
	stacking a second one.
	"""
	logger = logging.getLogger(_PACKAGE_LOGGER)
	for existing in list(logger.handlers):
		if existing.get_name() == _HANDLER_NAME:
			logger.removeHandler(existing)
	logger.addHandler(_build_log_handler())
	logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
	return logger
