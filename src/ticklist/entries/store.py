"""Entry store: owns the entry list and applies every mutation to it.

Per-entry operations take a position in the *filtered* view (what the user
sees) and resolve it to an absolute position before touching the list.
Each mutation is persisted through the attached gateway, if any.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from loguru import logger

from .filters import SearchMode, filtered_view, indexed_view, resolve_index
from .models import Active, All, Completed, Entry, EntryStatus, Filter, Search
from .persistence import PersistenceGateway

_TOGGLE: dict[EntryStatus, EntryStatus] = {
    EntryStatus.NEW: EntryStatus.COMPLETED,
    EntryStatus.COMPLETED: EntryStatus.NEW,
}

_TOGGLE_EDIT: dict[EntryStatus, EntryStatus] = {
    EntryStatus.NEW: EntryStatus.EDITING,
    EntryStatus.EDITING: EntryStatus.NEW,
}


class EntryStore:
    """Ordered list of entries plus the active filter and search backup."""

    def __init__(
        self,
        entries: Iterable[Entry] | None = None,
        gateway: PersistenceGateway | None = None,
        search_mode: SearchMode | str = SearchMode.LITERAL,
    ) -> None:
        self.entries: list[Entry] = list(entries or [])
        self.entries_backup: list[Entry] = []
        self._has_backup = False
        self.filter: Filter = All()
        self.gateway = gateway
        self.search_mode = SearchMode(search_mode)

    # -- persistence --------------------------------------------------------

    def _commit(self) -> None:
        if self.gateway is None:
            return
        # While searching, ``entries`` is only a slice and the backup is the full list.
        # Changes made during a search are not saved; clearing the search discards them.
        self.gateway.save(self.entries_backup if self._has_backup else self.entries)

    # -- reads --------------------------------------------------------------

    def filtered_view(self) -> list[Entry]:
        return filtered_view(self.filter, self.entries, self.search_mode)

    def get(self, filtered_index: int) -> Entry:
        """Return the entry at *filtered_index* of the current view."""
        return self.entries[self._resolve(filtered_index)]

    def total(self) -> int:
        return len(self.entries)

    def total_completed(self) -> int:
        return len(filtered_view(Completed(), self.entries))

    def left(self) -> int:
        """Entries still to do (New or Editing)."""
        return len(filtered_view(Active(), self.entries))

    def is_all_completed(self) -> bool:
        """True iff the current view is non-empty and every entry in it is completed."""
        view = self.filtered_view()
        if not view:
            return False
        return all(entry.status == EntryStatus.COMPLETED for entry in view)

    def _resolve(self, filtered_index: int) -> int:
        return resolve_index(self.filter, self.entries, filtered_index, self.search_mode)

    # -- mutations ----------------------------------------------------------

    def add(self, description: str) -> Entry:
        """Append a new entry. Duplicates and empty text are allowed."""
        entry = Entry(description=description, status=EntryStatus.NEW)
        self.entries.append(entry)
        logger.debug(f"Added entry #{len(self.entries) - 1}: {description!r}")
        self._commit()
        return entry

    def toggle(self, filtered_index: int) -> Entry:
        """Flip New <-> Completed. Entries being edited are left alone."""
        entry = self.entries[self._resolve(filtered_index)]
        entry.status = _TOGGLE.get(entry.status, entry.status)
        self._commit()
        return entry

    def toggle_edit(self, filtered_index: int) -> Entry:
        """Flip New <-> Editing. Completed entries are left alone."""
        entry = self.entries[self._resolve(filtered_index)]
        entry.status = _TOGGLE_EDIT.get(entry.status, entry.status)
        self._commit()
        return entry

    def complete_edit(self, filtered_index: int, description: str) -> Entry:
        """Replace the description and leave edit mode (status always becomes New)."""
        entry = self.entries[self._resolve(filtered_index)]
        entry.description = description
        entry.status = EntryStatus.NEW
        self._commit()
        return entry

    def remove(self, filtered_index: int) -> Entry:
        absolute_index = self._resolve(filtered_index)
        entry = self.entries.pop(absolute_index)
        logger.debug(f"Removed entry #{absolute_index}: {entry.description!r}")
        self._commit()
        return entry

    def toggle_all(self, set_completed_to: bool) -> None:
        """Complete (or reopen) every entry in the current view that is not being edited."""
        status = EntryStatus.COMPLETED if set_completed_to else EntryStatus.NEW
        for _, entry in indexed_view(self.filter, self.entries, self.search_mode):
            if entry.status != EntryStatus.EDITING:
                entry.status = status
        self._commit()

    def clear_completed(self) -> int:
        """Drop every completed entry, whatever the filter. Returns how many were dropped."""
        before = len(self.entries)
        self.entries = filtered_view(Active(), self.entries)
        removed = before - len(self.entries)
        logger.debug(f"Cleared {removed} completed entries")
        self._commit()
        return removed

    def set_filter(self, flt: Filter) -> None:
        """Switch the active filter.

        A backup is only held under a non-empty search, so any other filter
        (including a blank ``Search``) restores the full list first.
        """
        if self._has_backup and not (isinstance(flt, Search) and flt.text.strip()):
            self.restore_backup()
        self.filter = flt

    # -- search backup ------------------------------------------------------

    @property
    def has_backup(self) -> bool:
        return self._has_backup

    def snapshot_backup(self) -> None:
        """Save the current entries, unless a backup is already held."""
        if self._has_backup:
            return
        self.entries_backup = [replace(entry) for entry in self.entries]
        self._has_backup = True

    def restore_backup(self) -> None:
        """Put the saved entries back and drop the backup."""
        if not self._has_backup:
            return
        self.entries = self.entries_backup
        self.entries_backup = []
        self._has_backup = False
        logger.debug(f"Restored {len(self.entries)} entries from search backup")
        self._commit()

    def narrow(self, flt: Filter) -> None:
        """Keep only the current entries selected by *flt*."""
        self.entries = filtered_view(flt, self.entries, self.search_mode)
        self._commit()
