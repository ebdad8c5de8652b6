"""Allow ``python -m projector`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m projector`` behaves identically to the ``projector``
console script.
"""

from __future__ import annotations

from projector.cli.app import cli

if __name__ == "__main__":
    cli()
