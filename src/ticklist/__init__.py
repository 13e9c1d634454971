"""Ticklist — a TodoMVC-style task list engine."""

__version__ = "0.1.0"

from .app import TodoApp  # noqa: E402

__all__ = ["TodoApp", "__version__"]
