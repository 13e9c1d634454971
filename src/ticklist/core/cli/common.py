"""Shared setup logic for CLI commands."""

from __future__ import annotations

import click

from ticklist.app import TodoApp
from ticklist.entries import Entry, EntryStatus, Filter, parse_filter

_MARKS = {
    EntryStatus.NEW: "[ ]",
    EntryStatus.COMPLETED: "[x]",
    EntryStatus.EDITING: "[~]",
}


def load_app(ctx: click.Context) -> TodoApp:
    """Build the app from the group's --config/--verbose options."""
    from ticklist.core.config import Config
    from ticklist.core.utils.logging import setup_logging

    options = ctx.obj or {}
    config = Config(config_file=options.get("config_file"))
    setup_logging(config, verbose=bool(options.get("verbose")))
    return TodoApp.from_config(config)


def filter_option(func):
    """Add ``--filter`` so positions refer to the same view ``list`` printed."""
    return click.option(
        "--filter",
        "filter_name",
        default="all",
        show_default=True,
        help="View the positions refer to: all, search, active or completed.",
    )(func)


def resolve_filter(name: str) -> Filter:
    try:
        return parse_filter(name)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--filter") from None


def to_index(position: int) -> int:
    """CLI positions are 1-based."""
    if position < 1:
        raise click.BadParameter("positions start at 1", param_hint="N")
    return position - 1


def format_entry(position: int, entry: Entry) -> str:
    return f"{position:>4}. {_MARKS[entry.status]} {entry.description}"
