# Cmdkit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Built-in `help` command.

`help` is registered hidden on every Manager by default and is also the
command dispatched when argv names none.

    ./app                  → version, usage, description, command listing
    ./app help             → same
    ./app help COMMAND     → usage, description and options of COMMAND

Rendering only consumes flat `key → description` listings
(`Command.listing()` and the visible command names) and prints them with rich.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from cmdkit.arguments import HELP_SELECTOR
from cmdkit.command import Command
from cmdkit.console import console as default_console
from cmdkit.exceptions import CommandNotRegisteredError

if TYPE_CHECKING:
    from cmdkit.arguments import Arguments
    from cmdkit.manager import Manager


def render_listing(
    entries: Mapping[str, str], title: str, console: Console = default_console
) -> None:
    """Print `entries` sorted by key under `title`. Prints nothing when empty."""
    if not entries:
        return
    table = Table(box=None, show_header=False, pad_edge=False, padding=(0, 4, 0, 2))
    table.add_column(style="cmdkit.label", no_wrap=True)
    table.add_column(overflow="fold")
    for key in sorted(entries):
        table.add_row(Text(key), Text(entries[key]))
    console.print()
    console.print(f"[cmdkit.title]{escape(title)}:[/]")
    console.print(table)


def _script(arguments: Arguments) -> str:
    return arguments.script or arguments.default_script


def _render_header(manager: Manager, script: str, name: str, description: str) -> None:
    manager.console.print()
    manager.console.print(f"Version: {escape(manager.version)}")
    manager.console.print(f"Usage: {escape(script)} {escape(name)} [OPTIONS]")
    if description:
        manager.console.print()
        manager.console.print(escape(description))


def render_command_help(manager: Manager, arguments: Arguments, command: Command) -> None:
    _render_header(manager, _script(arguments), command.name, command.description)
    render_listing(command.listing(), "Options", manager.console)


def render_manager_help(manager: Manager, arguments: Arguments) -> None:
    script = _script(arguments)
    _render_header(manager, script, "COMMAND", manager.description)
    render_listing(
        {command.name: command.description for command in manager.visible_commands()},
        "Commands",
        manager.console,
    )
    manager.console.print()
    manager.console.print(
        f"[cmdkit.dim]Run '{escape(script)} help COMMAND' for more information on a command[/]"
    )


def handle_help(manager: Manager, arguments: Arguments) -> None:
    if key := arguments.help_selector:
        command = manager.get_command(key)
        if command is None:
            raise CommandNotRegisteredError(key)
        render_command_help(manager, arguments, command)
        return
    render_manager_help(manager, arguments)


def build_help_command() -> Command:
    """Return the hidden built-in help command."""
    return Command(
        HELP_SELECTOR,
        "Show application or command help",
        handle_help,
        hidden=True,
    )
