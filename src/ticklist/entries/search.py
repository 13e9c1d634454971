"""Search session: narrows the entry list and restores it afterwards.

The first non-empty commit saves the full list as a backup; every commit
then narrows whatever is currently shown. Committing a second, different
search without clearing first narrows the already-narrowed list rather
than starting again from the backup. Committing empty text ends the
session and restores the backup.
"""

from __future__ import annotations

from loguru import logger

from .models import Search
from .store import EntryStore


class SearchSession:
    """Holds the search draft and drives the store's backup/restore cycle."""

    def __init__(self, store: EntryStore) -> None:
        self.store = store
        self.search_value = ""

    @property
    def active(self) -> bool:
        """Whether a search is narrowing the list right now."""
        return self.store.has_backup

    def update_search_text(self, text: str) -> None:
        self.search_value = text

    def commit(self) -> None:
        needle = self.search_value.strip()

        if not needle:
            if self.store.has_backup:
                self.store.restore_backup()
                logger.debug("Search cleared")
            if isinstance(self.store.filter, Search):
                self.store.set_filter(Search())
            return

        self.store.snapshot_backup()
        flt = Search(needle)
        self.store.narrow(flt)
        self.store.set_filter(flt)
        logger.debug(f"Search {needle!r} kept {self.store.total()} entries")

    def clear(self) -> None:
        """End the session: same as committing empty text."""
        self.search_value = ""
        self.commit()
