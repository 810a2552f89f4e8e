"""Pure domain functions for rewriting scripting define symbols.

Unity serialises the per-platform define symbols of ``ProjectSettings.asset``
as a small block of numbered lines::

    scriptingDefineSymbols:
      0: SYMBOL_A;SYMBOL_B
      1: SYMBOL_C

These functions locate that block and rewrite each platform's list without
touching any other byte of the file.  No I/O happens here.
"""

import logging
import re
from collections.abc import Iterable

from unity_defines.constants import (
    HEADER,
    MULTIPLE_SECTIONS_MESSAGE,
    SECTION_NOT_FOUND_MESSAGE,
    SYMBOL_SEPARATOR,
)
from unity_defines.models import EditError, EditResult, PlatformDefines, SymbolOrder

logger = logging.getLogger(__name__)

# Header line followed by one or more "<indent><index>:<rest of line>" entries,
# which may be separated by blank lines.
SECTION_PATTERN = re.compile(
    re.escape(HEADER) + r"\r?\n(?:(?:[ \t]*\r?\n)*[ \t]+\d+:[^\r\n]*(?:\r?\n|\Z))+"
)

ENTRY_PATTERN = re.compile(r"^(?P<prefix>[ \t]+(?P<index>\d+)):(?P<symbols>[^\r\n]*)", re.MULTILINE)


def parse_symbols(raw: str) -> list[str]:
    """Split a ``;``-separated symbol list into distinct symbols.

    Spaces are removed before splitting and empty tokens (from leading,
    trailing or doubled separators) are dropped.  Duplicates collapse onto
    their first occurrence, so the original order is otherwise kept.
    """
    tokens = raw.replace(" ", "").split(SYMBOL_SEPARATOR)
    return list(dict.fromkeys(token for token in tokens if token))


def edit_symbols(
    symbols: Iterable[str],
    adds: Iterable[str],
    removes: Iterable[str],
    order: SymbolOrder = SymbolOrder.PRESERVE,
) -> tuple[str, ...]:
    """Return ``(symbols - removes) | adds`` as an ordered tuple.

    Removal happens before addition, so a symbol named in both sets ends up
    present.  With ``SymbolOrder.PRESERVE`` surviving symbols keep their
    position and new ones are appended in the order given.
    """
    removed = set(removes)
    result = dict.fromkeys(symbol for symbol in symbols if symbol not in removed)
    result.update(dict.fromkeys(adds))
    edited = list(result)
    if order is SymbolOrder.SORTED:
        edited.sort()
    return tuple(edited)


def find_define_sections(text: str) -> list[re.Match[str]]:
    """Return every non-overlapping scripting define section in ``text``."""
    return list(SECTION_PATTERN.finditer(text))


def _normalise(symbols: Iterable[str]) -> list[str]:
    # Caller-supplied symbols go through the same tokenisation as the file so
    # that an entry can never gain a symbol containing the separator.
    normalised: list[str] = []
    for symbol in symbols:
        normalised.extend(parse_symbols(symbol))
    return list(dict.fromkeys(normalised))


def apply_defines(
    text: str,
    adds: Iterable[str],
    removes: Iterable[str],
    order: SymbolOrder = SymbolOrder.PRESERVE,
) -> EditResult:
    """Add and remove define symbols on every platform entry of ``text``.

    Exactly one scripting define section must be present.  When none or
    several are found the returned result carries the matching ``EditError``
    and the original text; nothing is rewritten.
    """
    sections = find_define_sections(text)
    if not sections:
        logger.debug("No scripting define section found")
        return EditResult(
            text=text,
            error=EditError.SECTION_NOT_FOUND,
            diagnostic=SECTION_NOT_FOUND_MESSAGE,
        )
    if len(sections) > 1:
        logger.debug("Found %d scripting define sections", len(sections))
        return EditResult(
            text=text,
            error=EditError.MULTIPLE_SECTIONS,
            diagnostic=MULTIPLE_SECTIONS_MESSAGE,
        )

    section = sections[0]
    logger.debug("Scripting define section spans %d-%d", section.start(), section.end())

    add_list = _normalise(adds)
    remove_list = _normalise(removes)
    platforms: list[PlatformDefines] = []

    def rewrite(entry: re.Match[str]) -> str:
        before = parse_symbols(entry["symbols"])
        after = edit_symbols(before, add_list, remove_list, order)
        platform = PlatformDefines(platform=entry["index"], symbols=after)
        platforms.append(platform)
        logger.debug("Platform %s: %s -> %s", platform.platform, before, list(after))
        return f"{entry['prefix']}: {platform.joined()}"

    rewritten = ENTRY_PATTERN.sub(rewrite, section.group(0))
    new_text = text[: section.start()] + rewritten + text[section.end() :]
    return EditResult(text=new_text, platforms=platforms, changed=new_text != text)
