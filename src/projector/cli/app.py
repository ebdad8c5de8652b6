"""CLI application entry point and command routing for projector.

This module is the **sole error boundary** for the entire application.
It catches :class:`~projector.exceptions.ProjectorError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* Requested values are written to stdout as plain text; everything else
  (errors, hints, logs) goes to stderr through the console.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from projector.cli import exit_codes
from projector.cli.console import configure_logging, console
from projector.core.models import Add, Operation, PrintAll, PrintKey, Remove
from projector.core.operations import parse_operation
from projector.core.projector import Projector
from projector.exceptions import ProjectorError
from projector.infra.config_resolver import resolve_config
from projector.infra.json_store import JsonFileStore
from projector.utils.constants import JSON_INDENT
from projector.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands are not used; verbs are plain positional tokens so that
    any other single token can be looked up as a key:
    * ``projector``                  — print every visible key
    * ``projector <key>``            — print one value
    * ``projector add <key> <value>``
    * ``projector rm <key>``
    """
    parser = argparse.ArgumentParser(
        prog="projector",
        allow_abbrev=False,
        description="Directory-scoped key-value store.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Store file to use instead of $HOME/projector/projector.json.",
    )
    parser.add_argument(
        "-p",
        "--pwd",
        type=Path,
        default=None,
        help="Directory to act on instead of the current directory.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log diagnostics to stderr.",
    )
    parser.add_argument(
        "args",
        nargs="*",
        default=[],
        help="KEY to print, 'add KEY VALUE', or 'rm KEY'.",
    )
    return parser


def _split_passthrough(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split *argv* at the first ``--``.

    Everything after the marker is positional, even tokens starting
    with a dash.  ``parse_intermixed_args`` rejects those when ``--``
    precedes the verb, so they never reach argparse.
    """
    if "--" not in argv:
        return list(argv), []
    index = argv.index("--")
    return list(argv[:index]), list(argv[index + 1 :])


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def dispatch(
    projector: Projector,
    operation: Operation,
    *,
    out: TextIO | None = None,
) -> int:
    """Execute *operation* against *projector*.

    Mutating operations are saved immediately; a save failure
    propagates as :class:`~projector.exceptions.StoreWriteError`.
    """
    stream = sys.stdout if out is None else out

    if isinstance(operation, PrintAll):
        values = projector.get_value_all()
        print(json.dumps(values, indent=JSON_INDENT, ensure_ascii=False), file=stream)
    elif isinstance(operation, PrintKey):
        value = projector.get_value(operation.key)
        if value is not None:
            print(value, file=stream)
        else:
            logger.debug("No value for %r", operation.key)
    elif isinstance(operation, Add):
        projector.set_value(operation.key, operation.value)
        projector.save()
    elif isinstance(operation, Remove):
        projector.remove_value(operation.key)
        projector.save()
    else:  # pragma: no cover
        raise TypeError(f"Unknown operation: {operation!r}")

    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the projector CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    options, passthrough = _split_passthrough(sys.argv[1:] if argv is None else argv)
    args = parser.parse_intermixed_args(options)
    args.args = [*args.args, *passthrough]
    configure_logging(args.verbose)

    operation = parse_operation(args.args)
    config = resolve_config(operation, config=args.config, pwd=args.pwd)

    projector = Projector.load(
        JsonFileStore(config.store_path),
        config.working_directory,
    )
    return dispatch(projector, config.operation)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ProjectorError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
