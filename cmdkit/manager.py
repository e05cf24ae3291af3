# Cmdkit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Main dispatcher for cmdkit applications.

The Manager owns the command registry and runs one invocation at a time
through a fixed sequence of states:

    IDLE → RESOLVING → ASSIGNING → VALIDATING → EXECUTING → DONE
                                                      (any) → FAILED

- RESOLVING: the selector (or the default selector, `help`) is looked up.
- ASSIGNING: every parsed key is resolved against the command's options
  before any value is assigned, then the raw values are assigned.
- VALIDATING: every declared option is validated, in declaration order.
- EXECUTING: the command's hooks and handler run.

The first error ends the invocation; nothing is retried. By default the
registered command is dispatched in place: its options are reset, assigned and
validated while `Command.lock` is held, so runs of the same command are
serialized and a handler sees the values through `arguments.command`, its own
Command, or `manager.get_command()`. With `isolate_invocations=True` each run
works on a `Command.for_invocation()` copy instead, so concurrent dispatches
of one command do not wait for each other; handlers must then read values
through `arguments.command`.

Example:
    manager = Manager("Demo application")
    manager.add_command(Command("run", "Run it", handler, options=[...]))
    manager.run_terminal(["./app", "run", "-n", "demo"])
"""
from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Iterable, Sequence

from rich.console import Console

from cmdkit.arguments import HELP_SELECTOR, Arguments
from cmdkit.command import Command
from cmdkit.console import console as default_console
from cmdkit.exceptions import (
    CommandAlreadyExistsError,
    CommandNotRegisteredError,
    DuplicateOptionAssignmentError,
    InvalidCommandError,
    OptionNotRecognizedError,
)
from cmdkit.help import build_help_command
from cmdkit.logger import logger
from cmdkit.option import Option
from cmdkit.utils import get_program_invocation
from cmdkit.version import __version__


class DispatchState(Enum):
    """States of a single Manager.run() invocation."""

    IDLE = "idle"
    RESOLVING = "resolving"
    ASSIGNING = "assigning"
    VALIDATING = "validating"
    EXECUTING = "executing"
    DONE = "done"
    FAILED = "failed"


class Manager:
    """
    Command registry and dispatcher.

    Args:
        description (str): Application description shown by `help`.
        include_help_command (bool): Register the built-in hidden `help` command.
        default_selector (str): Command used when argv names none.
        version (str): Version shown by `help`.
        console (Console | None): Rich console used by built-in output.
        isolate_invocations (bool): Dispatch on per-run copies of the command
            instead of assigning the registered options in place.

    Methods:
        add_command(): Register a command.
        get_command(): Look up a command by name.
        run(): Dispatch a parsed Arguments.
        run_terminal(): Parse argv and dispatch.
    """

    def __init__(
        self,
        description: str = "",
        *,
        include_help_command: bool = True,
        default_selector: str = HELP_SELECTOR,
        version: str = __version__,
        console: Console | None = None,
        isolate_invocations: bool = False,
    ) -> None:
        self.description: str = description
        self.default_selector: str = default_selector
        self.version: str = version
        self.console: Console = console or default_console
        self.isolate_invocations: bool = isolate_invocations
        self._commands: dict[str, Command] = {}
        self._lock = threading.RLock()
        if include_help_command:
            self.add_command(build_help_command())

    def add_command(self, command: Command) -> None:
        """
        Register a command.

        Raises:
            InvalidCommandError: If `command` is not a named Command.
            CommandAlreadyExistsError: If the name is already registered.
        """
        if not isinstance(command, Command):
            raise InvalidCommandError(
                f"cannot add {type(command).__name__} to manager, expected Command"
            )
        if not command.name:
            raise InvalidCommandError("can not add unnamed command to manager")
        with self._lock:
            if command.name in self._commands:
                raise CommandAlreadyExistsError(command.name)
            self._commands[command.name] = command
        logger.debug("Command '%s' registered.", command.name)

    def add_commands(self, commands: Iterable[Command]) -> None:
        for command in commands:
            self.add_command(command)

    def remove_command(self, name: str) -> Command | None:
        """Unregister a command and return it, or None if it was unknown."""
        with self._lock:
            return self._commands.pop(name, None)

    def get_command(self, name: str) -> Command | None:
        with self._lock:
            return self._commands.get(name)

    def get_commands(self) -> dict[str, Command]:
        with self._lock:
            return dict(self._commands)

    def visible_commands(self) -> list[Command]:
        """Non-hidden commands sorted by name."""
        commands = self.get_commands()
        return [
            commands[name] for name in sorted(commands) if not commands[name].hidden
        ]

    @staticmethod
    def _transition(
        current: DispatchState, state: DispatchState, selector: str
    ) -> DispatchState:
        logger.debug("[Manager:%s] %s -> %s", selector, current.value, state.value)
        return state

    def run(self, arguments: Arguments) -> Any:
        """
        Dispatch one parsed invocation.

        Returns:
            Any: Whatever the command handler returned.

        Raises:
            CommandNotRegisteredError: If the selector names no command.
            OptionNotRecognizedError: If a parsed key is not declared on the command.
            DuplicateOptionAssignmentError: If long and short spellings of one
                option were both given.
            InvalidAssignmentError: If a flag option was given a value.
            MissingRequiredOptionError: If a required option cannot be resolved.
            HandlerPanicError: If the handler fails unexpectedly.
        """
        selector = arguments.selector or self.default_selector
        state = DispatchState.IDLE
        try:
            state = self._transition(state, DispatchState.RESOLVING, selector)
            command = self.get_command(selector)
            if command is None:
                raise CommandNotRegisteredError(selector)
            if self.isolate_invocations:
                command = command.for_invocation()

            with command.lock:
                for option in command.get_options():
                    option.reset()

                state = self._transition(state, DispatchState.ASSIGNING, selector)
                for option, raw in self._resolve_keys(command, arguments):
                    option.assign(raw)

                state = self._transition(state, DispatchState.VALIDATING, selector)
                for option in command.get_options():
                    option.validate()

                state = self._transition(state, DispatchState.EXECUTING, selector)
                arguments.command = command
                result = command.run(self, arguments)
        except Exception as error:
            self._transition(state, DispatchState.FAILED, selector)
            logger.debug("[Manager:%s] %s: %s", selector, type(error).__name__, error)
            raise

        self._transition(state, DispatchState.DONE, selector)
        return result

    def _resolve_keys(
        self, command: Command, arguments: Arguments
    ) -> list[tuple[Option, str]]:
        """Resolve every parsed key before any value is assigned."""
        resolved: list[tuple[Option, str]] = []
        seen: set[str] = set()
        for key, raw in arguments.mapper.items():
            option = command.get_option(key)
            if option is None:
                raise OptionNotRecognizedError(key, command.name)
            if option.name in seen:
                raise DuplicateOptionAssignmentError(option.name)
            seen.add(option.name)
            resolved.append((option, raw))
        return resolved

    def run_terminal(self, argv: Sequence[str] | None = None) -> Any:
        """Parse `argv` (defaults to `sys.argv`) and dispatch it."""
        if argv is None:
            arguments = Arguments.from_argv(default_script=get_program_invocation())
        else:
            arguments = Arguments.from_argv(argv)
        return self.run(arguments)

    def __str__(self) -> str:
        return (
            f"Manager(description='{self.description}', "
            f"commands={sorted(self.get_commands())})"
        )
