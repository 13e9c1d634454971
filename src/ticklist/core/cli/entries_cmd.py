"""Entry commands: list, add, toggle, edit, remove, toggle-all, clear-completed."""

from __future__ import annotations

import click

from ticklist.core.exceptions import EntryIndexError
from ticklist.entries import EntryStatus, Search

from .common import filter_option, format_entry, load_app, resolve_filter, to_index


@click.command("list")
@filter_option
@click.option("--search", "search_text", default=None, help="Only show entries containing this text.")
@click.pass_context
def list_entries(ctx: click.Context, filter_name: str, search_text: str | None) -> None:
    """Show entries in the chosen view."""
    app = load_app(ctx)
    if search_text is not None:
        app.set_filter(Search())
        app.update_search_draft(search_text)
        app.commit_search()
    else:
        app.set_filter(resolve_filter(filter_name))

    for position, entry in enumerate(app.filtered_view(), start=1):
        click.echo(format_entry(position, entry))
    click.echo(f"{app.left()} item(s) left, {app.total_completed()} completed")


@click.command()
@click.argument("text")
@click.pass_context
def add(ctx: click.Context, text: str) -> None:
    """Add a new entry."""
    app = load_app(ctx)
    app.update_draft(text)
    app.add()
    click.echo(format_entry(app.total(), app.store.entries[-1]))


def _apply(ctx: click.Context, filter_name: str, position: int, action) -> None:
    app = load_app(ctx)
    app.set_filter(resolve_filter(filter_name))
    try:
        entry = action(app, to_index(position))
    except EntryIndexError as e:
        raise click.ClickException(f"No entry at position {position} ({e})") from None
    click.echo(format_entry(position, entry))


@click.command()
@click.argument("position", metavar="N", type=int)
@filter_option
@click.pass_context
def toggle(ctx: click.Context, position: int, filter_name: str) -> None:
    """Mark entry N done, or not done again."""
    _apply(ctx, filter_name, position, lambda app, idx: app.toggle(idx))


@click.command()
@click.argument("position", metavar="N", type=int)
@click.argument("text")
@filter_option
@click.pass_context
def edit(ctx: click.Context, position: int, text: str, filter_name: str) -> None:
    """Replace the text of entry N."""
    _apply(ctx, filter_name, position, lambda app, idx: app.complete_edit(idx, text))


@click.command()
@click.argument("position", metavar="N", type=int)
@filter_option
@click.pass_context
def remove(ctx: click.Context, position: int, filter_name: str) -> None:
    """Delete entry N."""
    app = load_app(ctx)
    app.set_filter(resolve_filter(filter_name))
    try:
        entry = app.remove(to_index(position))
    except EntryIndexError as e:
        raise click.ClickException(f"No entry at position {position} ({e})") from None
    click.echo(f"Removed: {entry.description}")


@click.command("toggle-all")
@filter_option
@click.pass_context
def toggle_all(ctx: click.Context, filter_name: str) -> None:
    """Complete every entry in the view, or reopen them if all are done."""
    app = load_app(ctx)
    app.set_filter(resolve_filter(filter_name))
    completing = not app.is_all_completed()
    count = sum(1 for entry in app.filtered_view() if entry.status != EntryStatus.EDITING)
    app.toggle_all()
    click.echo(f"{count} entries {'completed' if completing else 'reopened'}")


@click.command("clear-completed")
@click.pass_context
def clear_completed(ctx: click.Context) -> None:
    """Delete every completed entry."""
    app = load_app(ctx)
    removed = app.clear_completed()
    click.echo(f"Cleared {removed} completed entries")
