"""Application controller.

``TodoApp`` is the single object a UI talks to: it turns user intents
(typing, clicking, pressing Enter) into store operations and exposes the
values a renderer needs. Text buffers live here and are never persisted.
"""

from __future__ import annotations

from loguru import logger

from .core.config import Config
from .core.exceptions import ConfigurationError
from .core.storage import open_storage
from .entries import EntryStore, Filter, PersistenceGateway, SearchMode, SearchSession
from .entries.models import Entry


class TodoApp:
    """Owns one EntryStore and the transient input buffers around it."""

    def __init__(self, store: EntryStore, search: SearchSession | None = None) -> None:
        self.store = store
        self.search = search or SearchSession(store)
        self.draft_value = ""
        self.edit_value = ""

    @classmethod
    def from_config(cls, config: Config) -> TodoApp:
        """Open the configured storage and restore the saved entries.

        Raises:
            ConfigurationError: Unknown storage backend or search mode.
            StorageUnavailableError: The storage backend could not be acquired.
        """
        try:
            mode = SearchMode(str(config.get("search.mode", "literal")).lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown search mode '{config.get('search.mode')}'. Expected 'literal' or 'pattern'"
            ) from None

        gateway = PersistenceGateway(open_storage(config), key=config.get("storage.key"))
        entries = gateway.load_or_default(config.get_int("entries.placeholder_count", 0))
        logger.debug(f"Starting with {len(entries)} entries, search mode {mode}")
        return cls(EntryStore(entries, gateway=gateway, search_mode=mode))

    # -- inbound ------------------------------------------------------------

    def update_draft(self, text: str) -> None:
        self.draft_value = text

    def add(self, text: str | None = None) -> Entry:
        """Add *text*, or the current draft (which is then cleared)."""
        if text is None:
            text, self.draft_value = self.draft_value, ""
        return self.store.add(text)

    def set_filter(self, flt: Filter) -> None:
        self.store.set_filter(flt)

    def toggle_all(self) -> None:
        self.store.toggle_all(not self.store.is_all_completed())

    def clear_completed(self) -> int:
        return self.store.clear_completed()

    def update_search_draft(self, text: str) -> None:
        self.search.update_search_text(text)

    def commit_search(self) -> None:
        self.search.commit()

    def toggle(self, index: int) -> Entry:
        return self.store.toggle(index)

    def toggle_edit(self, index: int) -> Entry:
        """Enter or leave edit mode, loading the entry's text into the edit buffer."""
        self.edit_value = self.store.get(index).description
        return self.store.toggle_edit(index)

    def update_edit(self, text: str) -> None:
        self.edit_value = text

    def complete_edit(self, index: int, text: str | None = None) -> Entry:
        """Save *text* (default: the edit buffer) as the entry's description."""
        if text is None:
            text = self.edit_value
        entry = self.store.complete_edit(index, text)
        self.edit_value = ""
        return entry

    def remove(self, index: int) -> Entry:
        return self.store.remove(index)

    # -- outbound -----------------------------------------------------------

    @property
    def filter(self) -> Filter:
        return self.store.filter

    @property
    def search_value(self) -> str:
        return self.search.search_value

    def filtered_view(self) -> list[Entry]:
        return self.store.filtered_view()

    def total(self) -> int:
        return self.store.total()

    def total_completed(self) -> int:
        return self.store.total_completed()

    def left(self) -> int:
        return self.store.left()

    def is_all_completed(self) -> bool:
        return self.store.is_all_completed()
