"""Filter engine: decides which entries a filter selects.

All functions are pure. Positions handed out by the UI are positions in
the filtered view; ``resolve_index`` translates them back to positions in
the full entry list with a fresh scan every time.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from enum import StrEnum

from loguru import logger

from ..core.exceptions import EntryIndexError, SearchPatternError
from .models import Active, All, Completed, Entry, EntryStatus, Filter, Search

Predicate = Callable[[Entry], bool]


class SearchMode(StrEnum):
    """How ``Search`` text is interpreted."""

    LITERAL = "literal"  # case-insensitive substring
    PATTERN = "pattern"  # case-insensitive regular expression


def compile_search(text: str, mode: SearchMode = SearchMode.LITERAL) -> Predicate:
    """Build the description matcher for a ``Search`` filter.

    Raises:
        SearchPatternError: ``mode`` is PATTERN and ``text`` is not a valid pattern.
    """
    if mode == SearchMode.PATTERN:
        try:
            needle = re.compile(text, re.IGNORECASE)
        except re.error as e:
            raise SearchPatternError(f"Invalid search pattern {text!r}: {e}") from e
        return lambda entry: needle.search(entry.description) is not None

    folded = text.casefold()
    return lambda entry: folded in entry.description.casefold()


def predicate(flt: Filter, mode: SearchMode = SearchMode.LITERAL) -> Predicate:
    """Return the inclusion test for *flt*. May raise SearchPatternError."""
    if isinstance(flt, All):
        return lambda entry: True
    if isinstance(flt, Active):
        return lambda entry: entry.status in (EntryStatus.NEW, EntryStatus.EDITING)
    if isinstance(flt, Completed):
        return lambda entry: entry.status == EntryStatus.COMPLETED
    if isinstance(flt, Search):
        return compile_search(flt.text, mode)
    raise TypeError(f"Not a filter: {flt!r}")


def fits(flt: Filter, entry: Entry, mode: SearchMode = SearchMode.LITERAL) -> bool:
    """Whether *entry* is selected by *flt*."""
    return predicate(flt, mode)(entry)


def _safe_predicate(flt: Filter, mode: SearchMode) -> Predicate:
    # Search text is typed by the user; a broken pattern simply matches nothing.
    try:
        return predicate(flt, mode)
    except SearchPatternError as e:
        logger.warning(f"{e}; treating as no matches")
        return lambda entry: False


def indexed_view(
    flt: Filter,
    entries: Sequence[Entry],
    mode: SearchMode = SearchMode.LITERAL,
) -> list[tuple[int, Entry]]:
    """Return ``(absolute_index, entry)`` for each entry selected by *flt*, in order."""
    test = _safe_predicate(flt, mode)
    return [(idx, entry) for idx, entry in enumerate(entries) if test(entry)]


def filtered_view(
    flt: Filter,
    entries: Sequence[Entry],
    mode: SearchMode = SearchMode.LITERAL,
) -> list[Entry]:
    """Return the entries selected by *flt*, preserving their relative order."""
    test = _safe_predicate(flt, mode)
    return [entry for entry in entries if test(entry)]


def resolve_index(
    flt: Filter,
    entries: Sequence[Entry],
    filtered_index: int,
    mode: SearchMode = SearchMode.LITERAL,
) -> int:
    """Translate a position in the filtered view to a position in *entries*.

    Raises:
        EntryIndexError: *filtered_index* is negative or past the end of the view.
    """
    view = indexed_view(flt, entries, mode)
    if not 0 <= filtered_index < len(view):
        raise EntryIndexError(filtered_index, len(view))
    absolute_index, _ = view[filtered_index]
    return absolute_index
