"""Parsing of the ``key=value`` command-line arguments.

Keys are matched case-insensitively against the start of each token, so
``PATH=ProjectSettings.asset`` and ``path=ProjectSettings.asset`` are
equivalent.  A later token for the same key overrides an earlier one.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from unity_defines.constants import CSV_SEPARATOR, PATH_ARG, SETS_ARG, UNSETS_ARG
from unity_defines.models import Arguments

logger = logging.getLogger(__name__)


class ArgumentError(Exception):
    """Raised when required arguments are missing.

    ``messages`` holds one line per problem so all of them can be reported
    at once.
    """

    def __init__(self, messages: list[str]) -> None:
        super().__init__("; ".join(messages))
        self.messages = messages


def split_csv(value: str | None) -> tuple[str, ...]:
    """Split a CSV value into distinct, non-empty symbols in input order."""
    if not value:
        return ()
    return tuple(dict.fromkeys(item for item in value.split(CSV_SEPARATOR) if item))


def _value_for(arg: str, key: str) -> str | None:
    if arg[: len(key)].lower() == key:
        return arg[len(key) :]
    return None


def parse_arguments(args: Sequence[str]) -> Arguments:
    """Build ``Arguments`` from raw tokens, raising ArgumentError on missing ones."""
    path: str | None = None
    sets_csv: str | None = None
    unsets_csv: str | None = None

    for arg in args:
        if (value := _value_for(arg, PATH_ARG)) is not None:
            path = value
        elif (value := _value_for(arg, SETS_ARG)) is not None:
            sets_csv = value
        elif (value := _value_for(arg, UNSETS_ARG)) is not None:
            unsets_csv = value
        else:
            logger.warning("Ignoring unrecognised argument: %s", arg)

    messages: list[str] = []
    if not path:
        messages.append("Missing path argument")

    sets = split_csv(sets_csv)
    unsets = split_csv(unsets_csv)
    if not sets and not unsets:
        messages.append("Missing sets or unsets argument. You must supply at least one of them")

    if messages:
        raise ArgumentError(messages)

    return Arguments(path=Path(path), sets=sets, unsets=unsets)
