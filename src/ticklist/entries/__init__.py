"""Entry state management: models, filters, store, search and persistence."""

from .filters import SearchMode, filtered_view, fits, indexed_view, resolve_index
from .models import FILTERS, Active, All, Completed, Entry, EntryStatus, Filter, Search, parse_filter
from .persistence import PersistenceGateway
from .search import SearchSession
from .store import EntryStore

__all__ = [
    "FILTERS",
    "Active",
    "All",
    "Completed",
    "Entry",
    "EntryStatus",
    "EntryStore",
    "Filter",
    "PersistenceGateway",
    "Search",
    "SearchMode",
    "SearchSession",
    "filtered_view",
    "fits",
    "indexed_view",
    "parse_filter",
    "resolve_index",
]
