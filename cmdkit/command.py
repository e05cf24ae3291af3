# Cmdkit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the Command class for cmdkit.

A Command is a named, ordered collection of Options plus the handler that runs
when the command is selected on the command line. It provides:

- Lookup of options by long or short name
- Deterministic, insertion-ordered option listing and validation order
- Before/after hooks around the handler
- A single guarded boundary that turns unexpected handler failures into
  `HandlerPanicError` instead of crashing the dispatcher

Commands are built once at program start and registered into one Manager.
The Manager resets and assigns the registered options in place for each run,
holding `Command.lock` for the whole dispatch, so handlers can read values
through their own Command or `manager.get_command()`. Managers created with
`isolate_invocations=True` dispatch on `Command.for_invocation()` copies
instead.
"""
from __future__ import annotations

import threading
import traceback
from typing import TYPE_CHECKING, Any, Callable, Iterable

from cmdkit.exceptions import (
    CmdkitError,
    HandlerNotDefinedError,
    HandlerPanicError,
    InvalidOptionError,
    OptionConflictError,
)
from cmdkit.logger import logger
from cmdkit.option import Option

if TYPE_CHECKING:
    from cmdkit.arguments import Arguments
    from cmdkit.manager import Manager

CommandHandler = Callable[["Manager", "Arguments"], Any]


class Command:
    """
    Represents a dispatchable command.

    Attributes:
        name (str): Selector used on the command line, unique within a Manager.
        description (str): Short description for help listings.
        handler (CommandHandler | None): Callable taking `(manager, arguments)`.
        hidden (bool): Excluded from listings, still dispatchable.
        before (list[CommandHandler]): Hooks run before the handler.
        after (list[CommandHandler]): Hooks run after a successful handler.
        lock (threading.RLock): Held by the Manager while it dispatches this command.

    Methods:
        add_option(): Register one or more options.
        get_option(): Resolve a long or short name to its Option.
        get_options(): Options in insertion order.
        run(): Invoke hooks and handler inside the guarded boundary.
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        handler: CommandHandler | None = None,
        *,
        hidden: bool = False,
        options: Iterable[Option] | None = None,
        before: Iterable[CommandHandler] | None = None,
        after: Iterable[CommandHandler] | None = None,
    ) -> None:
        self.name: str = name
        self.description: str = description
        self.handler: CommandHandler | None = handler
        self.hidden: bool = hidden
        self.before: list[CommandHandler] = list(before or [])
        self.after: list[CommandHandler] = list(after or [])
        self.lock = threading.RLock()
        self._options: dict[str, Option] = {}
        self._keys: dict[str, str] = {}
        self._names: list[str] = []
        if options:
            self.add_option(*options)

    def add_option(self, *options: Option) -> None:
        """
        Register options on the command.

        Re-adding an option with an existing long name replaces it. A short
        name may only ever point at one long name.

        Raises:
            InvalidOptionError: If something other than an Option is given.
            OptionConflictError: If a name is already used by another option.
        """
        for option in options:
            if option is None:
                continue
            if not isinstance(option, Option):
                raise InvalidOptionError(
                    f"cannot add {type(option).__name__} to command '{self.name}'"
                )
            self._check_conflicts(option)

            if option.name in self._options:
                logger.warning(
                    "[Command:%s] Option '%s' redefined.", self.name, option.name
                )
                self._drop_keys(option.name)
            else:
                self._names.append(option.name)

            self._options[option.name] = option
            self._keys[option.name] = option.name
            if option.short_name:
                self._keys[option.short_name] = option.name

    def _check_conflicts(self, option: Option) -> None:
        for key in filter(None, (option.name, option.short_name)):
            owner = self._keys.get(key)
            if owner is not None and owner != option.name:
                raise OptionConflictError(
                    f"option key '{key}' already maps to '{owner}' "
                    f"on command '{self.name}'",
                    option.name,
                )

    def _drop_keys(self, name: str) -> None:
        for key in [key for key, owner in self._keys.items() if owner == name]:
            del self._keys[key]

    def get_option(self, key: str) -> Option | None:
        """Return the Option for a long or short name, or None."""
        name = self._keys.get(key)
        if name is None:
            return None
        return self._options.get(name)

    def has_option(self, key: str) -> bool:
        return key in self._keys

    def get_options(self) -> list[Option]:
        """Return the declared options in insertion order."""
        return [self._options[name] for name in self._names]

    @property
    def option_names(self) -> list[str]:
        return list(self._names)

    def listing(self) -> dict[str, str]:
        """Flat `label -> description` mapping for help rendering."""
        return {option.label: option.get_description() for option in self.get_options()}

    def for_invocation(self) -> Command:
        """Return a copy with the same handler and fresh, unassigned options."""
        return Command(
            self.name,
            self.description,
            self.handler,
            hidden=self.hidden,
            options=[option.copy() for option in self.get_options()],
            before=self.before,
            after=self.after,
        )

    def run(self, manager: Manager, arguments: Arguments) -> Any:
        """
        Run before hooks, the handler and after hooks.

        A `CmdkitError` raised along the way propagates unchanged. Any other
        exception is converted into `HandlerPanicError` carrying the formatted
        call trace.

        Raises:
            HandlerNotDefinedError: If no handler was set.
            HandlerPanicError: If a hook or the handler fails unexpectedly.
        """
        if self.handler is None:
            raise HandlerNotDefinedError(self.name)

        try:
            for hook in self.before:
                hook(manager, arguments)
            result = self.handler(manager, arguments)
            for hook in self.after:
                hook(manager, arguments)
            return result
        except CmdkitError:
            raise
        except Exception as error:
            trace = [
                line.rstrip()
                for line in traceback.format_exception(
                    type(error), error, error.__traceback__
                )
            ]
            logger.error(
                "[Command:%s] Handler failed (%s): %s",
                self.name,
                type(error).__name__,
                error,
            )
            raise HandlerPanicError(self.name, error, trace) from error

    def __str__(self) -> str:
        return (
            f"Command(name='{self.name}', description='{self.description}', "
            f"options={self._names})"
        )
