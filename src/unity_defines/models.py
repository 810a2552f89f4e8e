"""Domain models."""

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path


class SymbolOrder(str, Enum):
    """How a rewritten symbol list is ordered."""

    PRESERVE = "preserve"
    SORTED = "sorted"


class EditError(Enum):
    SECTION_NOT_FOUND = auto()
    MULTIPLE_SECTIONS = auto()


@dataclass
class PlatformDefines:
    """The rewritten symbol list for one numbered platform entry."""

    platform: str
    symbols: tuple[str, ...]

    def joined(self) -> str:
        return ";".join(self.symbols)


@dataclass
class EditResult:
    """Outcome of rewriting the scripting define section of a settings file.

    On failure ``text`` is the untouched input, ``error`` names the failure
    kind and ``diagnostic`` holds a human-readable message. On success
    ``platforms`` lists every entry that was rewritten, in file order.
    """

    text: str
    error: EditError | None = None
    diagnostic: str | None = None
    platforms: list[PlatformDefines] = field(default_factory=list)
    changed: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class Arguments:
    """Parsed ``key=value`` command-line arguments."""

    path: Path
    sets: tuple[str, ...] = ()
    unsets: tuple[str, ...] = ()
