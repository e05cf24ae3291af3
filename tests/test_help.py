from io import StringIO

import pytest
from rich.console import Console

from cmdkit import Command, Manager, Option, OptionMode, ValueType
from cmdkit.console import CMDKIT_THEME
from cmdkit.exceptions import CommandNotRegisteredError
from cmdkit.help import build_help_command, render_listing


@pytest.fixture
def console():
    return Console(file=StringIO(), color_system=None, width=120, theme=CMDKIT_THEME)


@pytest.fixture
def manager(console):
    manager = Manager("Demo application", version="1.2.3", console=console)
    manager.add_commands(
        [
            Command(
                "run",
                "Run the demo",
                lambda manager, arguments: None,
                options=[
                    Option("name", "n", mode=OptionMode.REQUIRED, description="Who to run as"),
                    Option("level", value_type=ValueType.INTEGER, default=3),
                    Option("verbose", "v", value_type=ValueType.NONE),
                ],
            ),
            Command("build", "Build the demo", lambda manager, arguments: None),
            Command("secret", "Internal only", lambda manager, arguments: None, hidden=True),
        ]
    )
    return manager


def test_manager_help(manager, console):
    manager.run_terminal(["./app", "help"])
    output = console.file.getvalue()

    assert "Version: 1.2.3" in output
    assert "Usage: ./app COMMAND [OPTIONS]" in output
    assert "Demo application" in output
    assert "Commands:" in output
    assert "Run the demo" in output
    assert "Build the demo" in output
    assert "secret" not in output
    assert "Run './app help COMMAND' for more information on a command" in output
    assert output.index("build") < output.index("Run the demo")


def test_manager_help_without_selector(manager, console):
    manager.run_terminal(["./app"])
    assert "Usage: ./app COMMAND [OPTIONS]" in console.file.getvalue()


def test_manager_help_uses_default_script(manager, console):
    manager.run_terminal(["/opt/tools/app.py", "help"])
    assert "Usage: python main.py COMMAND [OPTIONS]" in console.file.getvalue()


def test_command_help(manager, console):
    manager.run_terminal(["./app", "help", "run"])
    output = console.file.getvalue()

    assert "Usage: ./app run [OPTIONS]" in output
    assert "Run the demo" in output
    assert "Options:" in output
    assert "-n, --name=<string>" in output
    assert "Who to run as" in output
    assert "--level[=integer]" in output
    assert "(default: 3)" in output
    assert "-v, --verbose" in output
    assert "Commands:" not in output


def test_hidden_command_help_is_available(manager, console):
    manager.run_terminal(["./app", "help", "secret"])
    assert "Internal only" in console.file.getvalue()


def test_command_help_unknown(manager):
    with pytest.raises(CommandNotRegisteredError) as exc_info:
        manager.run_terminal(["./app", "help", "nope"])
    assert exc_info.value.command == "nope"


def test_render_listing_sorted(console):
    render_listing({"beta": "Second", "alpha": "First"}, "Things", console)
    output = console.file.getvalue()
    assert "Things:" in output
    assert output.index("alpha") < output.index("beta")


def test_render_listing_empty(console):
    render_listing({}, "Nothing", console)
    assert console.file.getvalue() == ""


def test_render_listing_keeps_brackets(console):
    render_listing({"--name[=string]": "[not markup]"}, "Options", console)
    output = console.file.getvalue()
    assert "--name[=string]" in output
    assert "[not markup]" in output


def test_build_help_command():
    command = build_help_command()
    assert command.name == "help"
    assert command.hidden
    assert command.get_options() == []
