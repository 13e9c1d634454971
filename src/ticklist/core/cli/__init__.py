"""Ticklist CLI — manage the task list from a terminal."""

import click

from ticklist import __version__


@click.group()
@click.version_option(version=__version__, package_name="ticklist")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None, help="YAML or JSON config file.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, verbose: bool) -> None:
    """Ticklist — a small persistent task list."""
    ctx.obj = {"config_file": config_file, "verbose": verbose}


# Register subcommands
from .entries_cmd import add, clear_completed, edit, list_entries, remove, toggle, toggle_all

main.add_command(list_entries)
main.add_command(add)
main.add_command(toggle)
main.add_command(edit)
main.add_command(remove)
main.add_command(toggle_all)
main.add_command(clear_completed)
