"""demo.py"""
import logging
import sys

from cmdkit import Command, Manager, Option, OptionMode, ValueType
from cmdkit.cli import run_cli
from cmdkit.utils import setup_logging

setup_logging(console_log_level=logging.WARNING)


def greet(manager: Manager, arguments) -> None:
    command = arguments.command
    name = command.get_option("name").to_string()
    message = f"Hello, {name}!"
    if command.get_option("shout").assigned:
        message = message.upper()
    for _ in range(command.get_option("times").to_int()):
        print(message)


def divide(manager: Manager, arguments) -> float:
    command = arguments.command
    result = command.get_option("left").to_float() / command.get_option("right").to_float()
    print(f"{result:g}")
    return result


def announce(manager: Manager, arguments) -> None:
    print(f"→ {arguments.selector}")


manager = Manager("🚀 cmdkit demo")
manager.add_commands(
    [
        Command(
            "greet",
            "Print a greeting",
            greet,
            options=[
                Option("name", "n", mode=OptionMode.REQUIRED, description="Who to greet"),
                Option("times", "t", value_type=ValueType.INTEGER, default=1),
                Option("shout", "s", value_type=ValueType.NONE, description="Upper-case it"),
            ],
            before=[announce],
        ),
        Command(
            "divide",
            "Divide two numbers (try --right=0)",
            divide,
            options=[
                Option("left", "l", mode="required", value_type="float"),
                Option("right", "r", mode="required", value_type="float"),
            ],
        ),
    ]
)

if __name__ == "__main__":
    sys.exit(run_cli(manager))
