# Cmdkit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the cmdkit CLI framework.

Dispatch errors are local, single-invocation failures: the Manager surfaces the
first one it meets and stops. Setup errors are raised while options, commands
and managers are being declared, before any dispatch happens.

All exceptions inherit from `CmdkitError`, the base exception for the framework.

Exception Hierarchy:
- CmdkitError
    ├── OptionError
    │     ├── InvalidOptionError
    │     ├── OptionConflictError
    │     ├── InvalidAssignmentError
    │     ├── TypeMismatchError
    │     ├── ValueConversionError
    │     ├── MissingRequiredOptionError
    │     ├── OptionNotRecognizedError
    │     └── DuplicateOptionAssignmentError
    ├── CommandError
    │     ├── InvalidCommandError
    │     ├── CommandAlreadyExistsError
    │     ├── CommandNotRegisteredError
    │     ├── HandlerNotDefinedError
    │     └── HandlerPanicError
    └── ConfigError

The top-level caller (see `cmdkit.cli.run_cli`) prints the message and maps any
`CmdkitError` to a non-zero exit status.
"""
from __future__ import annotations


class CmdkitError(Exception):
    """Base exception for the cmdkit framework."""


class OptionError(CmdkitError):
    """Base class for errors tied to a single option."""

    def __init__(self, message: str, option: str = "") -> None:
        super().__init__(message)
        self.option = option


class InvalidOptionError(OptionError):
    """Raised when an option declaration is malformed."""


class OptionConflictError(OptionError):
    """Raised when a short name would map to more than one option."""


class InvalidAssignmentError(OptionError):
    """Raised when a flag option (no value type) is given a value."""

    def __init__(self, option: str) -> None:
        super().__init__(f"option does not accept any value: {option}", option)


class TypeMismatchError(OptionError):
    """Raised when a typed accessor does not match the declared value type."""

    def __init__(self, option: str, expected: str) -> None:
        super().__init__(f"option type not matched on {expected}: {option}", option)
        self.expected = expected


class ValueConversionError(OptionError):
    """Raised when a raw string cannot be converted to the declared value type."""

    def __init__(self, option: str, target: str, value: object = None) -> None:
        super().__init__(
            f"option value convert to {target} failed: {option} ({value!r})", option
        )
        self.target = target
        self.value = value


class MissingRequiredOptionError(OptionError):
    """Raised when a required option has neither a value nor a default."""

    def __init__(self, option: str) -> None:
        super().__init__(f"option is required: {option}", option)


class OptionNotRecognizedError(OptionError):
    """Raised when a parsed key matches no option declared on the command."""

    def __init__(self, option: str, command: str = "") -> None:
        super().__init__(f"option not recognized: {option}", option)
        self.command = command


class DuplicateOptionAssignmentError(OptionError):
    """Raised when the same option is given twice in one invocation."""

    def __init__(self, option: str) -> None:
        super().__init__(f"option specified twice: {option}", option)


class CommandError(CmdkitError):
    """Base class for errors tied to a command."""

    def __init__(self, message: str, command: str = "") -> None:
        super().__init__(message)
        self.command = command


class InvalidCommandError(CommandError):
    """Raised when something that is not a named Command is registered."""


class CommandAlreadyExistsError(CommandError):
    """Raised when a command with the same name is already registered."""

    def __init__(self, command: str) -> None:
        super().__init__(f"command exists in manager: {command}", command)


class CommandNotRegisteredError(CommandError):
    """Raised when the selector names no registered command."""

    def __init__(self, command: str) -> None:
        super().__init__(f"command not registered in manager: {command}", command)


class HandlerNotDefinedError(CommandError):
    """Raised when a command is dispatched without a handler."""

    def __init__(self, command: str) -> None:
        super().__init__(f"command handler not defined: {command}", command)


class HandlerPanicError(CommandError):
    """Raised when a handler fails with an unexpected exception.

    The message holds the original error followed by the formatted call trace,
    so the dispatcher can report it without re-raising the original fault.
    """

    def __init__(self, command: str, error: BaseException, trace: list[str]) -> None:
        lines = [f"command panic on {command}: {error}", *trace]
        super().__init__("\n".join(lines), command)
        self.error = error
        self.trace = trace


class ConfigError(CmdkitError):
    """Raised when a declarative command file cannot be loaded."""
