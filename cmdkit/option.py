# Cmdkit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass used by cmdkit commands to declare a single
command-line flag and to hold the raw value captured for it during dispatch.

An `Option` is declared once, when its command is built, and is treated as an
immutable schema from then on. The Manager dispatches on per-invocation copies
(`Option.copy()`), so `value` and `assigned` are only ever mutated on a copy
that belongs to one run.

Key Attributes:
- `name`: Long name, used as `--name`.
- `short_name`: Optional single character, used as `-n`.
- `mode`: `OptionMode.OPTIONAL` or `OptionMode.REQUIRED`.
- `value_type`: `ValueType` of the value; `ValueType.NONE` marks a presence flag.
- `default`: Typed fallback used when nothing was assigned.
- `description`: Help text.

A flag (`ValueType.NONE`) can never carry a value, so declaring one as
`OptionMode.REQUIRED` raises `InvalidOptionError` (a `ConfigError` when the
option comes from a YAML/TOML file). Declare flags as optional and check
`assigned` to see whether they were given.

Typed access goes through `to_string()`, `to_bool()`, `to_int()` and
`to_float()`; each checks the declared type and falls back to the default,
then to the type's zero value.

Example:
    option = Option("count", "c", value_type=ValueType.INTEGER, default=3)
    option.assign("10")
    option.to_int()   # 10
    option.label      # '-c, --count[=integer]'
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from cmdkit.coercion import coerce_default, coerce_value, zero_value
from cmdkit.exceptions import (
    InvalidAssignmentError,
    InvalidOptionError,
    MissingRequiredOptionError,
    TypeMismatchError,
    ValueConversionError,
)
from cmdkit.option_types import OptionMode, ValueType

OPTION_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9][_a-zA-Z0-9-]*$")
SHORT_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9]$")


@dataclass
class Option:
    """
    Represents a command-line option.

    Attributes:
        name (str): Long name of the option, unique within a command.
        short_name (str): Optional single-character alias.
        mode (OptionMode): Required or optional.
        value_type (ValueType): Type of the value, or NONE for a presence flag.
        default (Any): Fallback used when no value was assigned.
        description (str): Help text for the option.
        value (str): Raw string captured from argv.
        assigned (bool): True once a value was assigned in this invocation.
    """

    name: str
    short_name: str = ""
    mode: OptionMode = OptionMode.OPTIONAL
    value_type: ValueType = ValueType.STRING
    default: Any = None
    description: str = ""
    value: str = field(default="", init=False, compare=False)
    assigned: bool = field(default=False, init=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not OPTION_NAME_PATTERN.match(self.name):
            raise InvalidOptionError(f"invalid option name: {self.name!r}", str(self.name))
        self.short_name = self.short_name or ""
        if self.short_name and not SHORT_NAME_PATTERN.match(self.short_name):
            raise InvalidOptionError(
                f"short name must be a single letter or digit: {self.short_name!r}",
                self.name,
            )
        try:
            self.mode = OptionMode(self.mode)
            self.value_type = ValueType(self.value_type)
        except ValueError as error:
            raise InvalidOptionError(f"{self.name}: {error}", self.name) from error
        if self.value_type is ValueType.NONE and self.mode is OptionMode.REQUIRED:
            raise InvalidOptionError(f"flag option cannot be required: {self.name}", self.name)
        if self.default is not None and not self.is_flag:
            try:
                coerce_default(self.default, self.value_type)
            except ValueError as error:
                raise InvalidOptionError(
                    f"invalid default for {self.name}: {error}", self.name
                ) from error
        self.description = " ".join((self.description or "").split())

    def assign(self, raw: str) -> None:
        """
        Store the raw value captured from argv.

        Raises:
            InvalidAssignmentError: If this is a flag option and `raw` is not empty.
        """
        if self.value_type is ValueType.NONE and raw != "":
            raise InvalidAssignmentError(self.name)
        self.value = raw
        self.assigned = True

    def validate(self) -> None:
        """
        Check the required contract.

        Raises:
            MissingRequiredOptionError: If the option is required and neither a
                non-empty value nor a default is available.
        """
        if self.mode is not OptionMode.REQUIRED:
            return
        if self.value == "" and self.default in (None, ""):
            raise MissingRequiredOptionError(self.name)

    def reset(self) -> None:
        """Forget any value assigned in a previous invocation."""
        self.value = ""
        self.assigned = False

    def copy(self) -> Option:
        """Return an unassigned Option with the same schema."""
        return Option(
            name=self.name,
            short_name=self.short_name,
            mode=self.mode,
            value_type=self.value_type,
            default=self.default,
            description=self.description,
        )

    @property
    def required(self) -> bool:
        return self.mode is OptionMode.REQUIRED

    @property
    def is_flag(self) -> bool:
        return self.value_type is ValueType.NONE

    @property
    def label(self) -> str:
        """Help label such as `-n, --name=<string>` or `    --verbose`."""
        prefix = f"-{self.short_name}, " if self.short_name else "    "
        label = f"{prefix}--{self.name}"
        type_text = self.value_type.label
        if type_text is None:
            return label
        if self.mode is OptionMode.REQUIRED:
            return f"{label}=<{type_text}>"
        return f"{label}[={type_text}]"

    def get_description(self) -> str:
        """Return the description, followed by the default when one exists."""
        parts = [self.description] if self.description else []
        if self.default is not None:
            parts.append(f"(default: {self.default})")
        return " ".join(parts)

    def to_string(self) -> str:
        return self._resolve(ValueType.STRING)

    def to_bool(self) -> bool:
        return self._resolve(ValueType.BOOLEAN)

    def to_int(self) -> int:
        return self._resolve(ValueType.INTEGER)

    def to_float(self) -> float:
        return self._resolve(ValueType.FLOAT)

    def _resolve(self, expected: ValueType) -> Any:
        if self.value_type is not expected:
            raise TypeMismatchError(self.name, expected.value)

        if self.value != "":
            try:
                return coerce_value(self.value, expected)
            except ValueError as error:
                raise ValueConversionError(self.name, expected.value, self.value) from error

        if self.default is not None:
            try:
                return coerce_default(self.default, expected)
            except ValueError as error:
                raise ValueConversionError(
                    self.name, expected.value, self.default
                ) from error

        return zero_value(expected)

    def __str__(self) -> str:
        return (
            f"Option(name='{self.name}', short_name='{self.short_name}', "
            f"mode={self.mode.value}, value_type={self.value_type.value})"
        )
