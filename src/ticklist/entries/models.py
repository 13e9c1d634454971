"""Core data models for the task list.

An ``Entry`` is one task item. A ``Filter`` is one of four value types;
only ``Search`` carries data.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar


class EntryStatus(StrEnum):
    NEW = "New"
    COMPLETED = "Completed"
    EDITING = "Editing"


@dataclass
class Entry:
    """A task item.

    Attributes:
        description: Free text, may be empty.
        status: Exactly one of New, Completed, Editing.
    """

    description: str
    status: EntryStatus = EntryStatus.NEW

    def to_dict(self) -> dict[str, str]:
        return {"description": self.description, "status": self.status.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Entry:
        """Build an Entry from its serialized form.

        Raises:
            KeyError: A field is missing.
            ValueError: The status tag is unknown.
            TypeError: The payload or description has the wrong type.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Entry must be a mapping, got {type(data).__name__}")
        description = data["description"]
        if not isinstance(description, str):
            raise TypeError(f"Entry description must be a string, got {type(description).__name__}")
        return cls(description=description, status=EntryStatus(data["status"]))


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class All:
    label: ClassVar[str] = "All"
    href: ClassVar[str] = "#/"


@dataclass(frozen=True)
class Active:
    label: ClassVar[str] = "Active"
    href: ClassVar[str] = "#/active"


@dataclass(frozen=True)
class Completed:
    label: ClassVar[str] = "Completed"
    href: ClassVar[str] = "#/completed"


@dataclass(frozen=True)
class Search:
    """Entries whose description contains ``text`` (case-insensitive)."""

    text: str = ""

    label: ClassVar[str] = "Search"
    href: ClassVar[str] = "#/search"


Filter = All | Active | Completed | Search

# Display order of the filter bar
FILTERS: tuple[Filter, ...] = (All(), Search(), Active(), Completed())

_ROUTES: dict[str, Filter] = {}
for _flt in FILTERS:
    _ROUTES[_flt.href] = _flt
    _ROUTES[_flt.label.lower()] = _flt
_ROUTES["#"] = _ROUTES[""] = All()


def parse_filter(route: str) -> Filter:
    """Map a route (``#/active``) or bare name (``active``) to a filter.

    Raises:
        ValueError: The route names no filter.
    """
    key = route.strip().lower()
    if key.startswith("#/") and key != "#/":
        key = key[2:]
    try:
        return _ROUTES[key]
    except KeyError:
        raise ValueError(f"Unknown filter '{route}'. Expected one of: all, search, active, completed") from None
