# Cmdkit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionMode` and `ValueType`, the two enums that describe an option's
contract in a cmdkit command schema.

`OptionMode` decides whether an option must be resolvable at dispatch time.
`ValueType` decides how the raw string captured from argv is interpreted, and
whether the option accepts a value at all (`ValueType.NONE` marks a pure
presence flag).

Both enums accept loose string input so schemas can be declared from YAML/TOML
files or plain keyword arguments.

Example:
    OptionMode("req")     → OptionMode.REQUIRED
    ValueType("int")      → ValueType.INTEGER
    ValueType("flag")     → ValueType.NONE
"""
from __future__ import annotations

from enum import Enum


class OptionMode(Enum):
    """
    Whether an option must be resolvable when a command is dispatched.

    Members:
        OPTIONAL: The option may be omitted.
        REQUIRED: Validation fails unless a value or a default is present.

    Aliases:
        - "opt" → "optional"
        - "req" → "required"
    """

    OPTIONAL = "optional"
    REQUIRED = "required"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "opt": "optional",
            "req": "required",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionMode:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        alias = cls._get_alias(value.strip().lower())
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


class ValueType(Enum):
    """
    The type carried by an option's value.

    Members:
        STRING: Raw text (default).
        BOOLEAN: `true/false`, `yes/no`, `1/0`, `on/off`.
        INTEGER: Base-10 integer.
        FLOAT: Decimal number.
        NONE: Presence-only flag, never carries a value.

    Aliases:
        - "str" → "string"
        - "bool" → "boolean"
        - "int" → "integer"
        - "flag", "null" → "none"
    """

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    NONE = "none"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "bool": "boolean",
            "int": "integer",
            "flag": "none",
            "null": "none",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        alias = cls._get_alias(value.strip().lower())
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def label(self) -> str | None:
        """Type text shown in option labels, or None for flags."""
        if self is ValueType.NONE:
            return None
        return self.value

    def __str__(self) -> str:
        return self.value
