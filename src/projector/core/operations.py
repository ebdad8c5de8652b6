"""Positional-argument parsing — raw tokens to a single :class:`Operation`.

Flags (``--config``, ``--pwd``) are handled by argparse in the CLI
layer; this module only interprets what is left over.

Rules
-----
* ``[]``                 → :class:`PrintAll`
* ``[key]``              → :class:`PrintKey`
* ``["add", key, value]`` → :class:`Add`
* ``["rm", key]``        → :class:`Remove`
* Anything else is a :class:`~projector.exceptions.UsageError`.
"""

from __future__ import annotations

from collections.abc import Sequence

from projector.core.models import Add, Operation, PrintAll, PrintKey, Remove
from projector.exceptions import UsageError

ADD_VERB: str = "add"
REMOVE_VERB: str = "rm"

_USAGE_HINT = "Usage: projector [KEY] | projector add KEY VALUE | projector rm KEY"


def _plural(count: int) -> str:
    return "argument" if count == 1 else "arguments"


def _count_error(name: str, expected: int, got: int) -> UsageError:
    return UsageError(
        f"Operation '{name}' expects {expected} {_plural(expected)}, "
        f"got {got} instead",
        hint=_USAGE_HINT,
    )


def parse_operation(args: Sequence[str]) -> Operation:
    """Turn the positional arguments into an :class:`Operation`.

    Raises
    ------
    UsageError
        If a verb receives the wrong number of arguments, or more than
        one non-verb token is given.
    """
    if not args:
        return PrintAll()

    verb = args[0]

    if verb == ADD_VERB:
        if len(args) != 3:
            raise _count_error(ADD_VERB, 2, len(args) - 1)
        return Add(key=args[1], value=args[2])

    if verb == REMOVE_VERB:
        if len(args) != 2:
            raise _count_error(REMOVE_VERB, 1, len(args) - 1)
        return Remove(key=args[1])

    if len(args) > 1:
        raise UsageError(
            f"Operation 'print' expects 0 or 1 arguments, got {len(args)} instead",
            hint=_USAGE_HINT,
        )

    return PrintKey(key=verb)
