# Cmdkit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion for cmdkit options.

Every conversion from the raw argv string to a typed value goes through this
module, so `Option` never branches on `ValueType` for parsing itself.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_integer: Convert a string to a base-10 integer.
- coerce_float: Convert a string to a float.
- coerce_value: Convert a raw string according to a `ValueType`.
- coerce_default: Check (and normalize) a declared default against a `ValueType`.
- zero_value: The value returned when neither a value nor a default exists.
"""
from typing import Any, Callable

from cmdkit.option_types import ValueType

TRUE_STRINGS = {"1", "t", "true", "y", "yes", "on"}
FALSE_STRINGS = {"0", "f", "false", "n", "no", "off"}


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts truthy and falsy spellings such as 'true', 'yes', '0', 'off'.

    Raises:
        ValueError: If the string is not a recognized boolean spelling.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_STRINGS:
        return True
    if normalized in FALSE_STRINGS:
        return False
    raise ValueError(f"Value '{value}' is not a valid boolean")


def coerce_integer(value: str) -> int:
    """Convert a base-10 string to an int."""
    text = value.strip()
    if not text or "_" in text:
        raise ValueError(f"Value '{value}' is not a valid integer")
    return int(text, 10)


def coerce_float(value: str) -> float:
    text = value.strip()
    if not text or "_" in text:
        raise ValueError(f"Value '{value}' is not a valid float")
    return float(text)


CONVERTERS: dict[ValueType, Callable[[str], Any]] = {
    ValueType.STRING: str,
    ValueType.BOOLEAN: coerce_bool,
    ValueType.INTEGER: coerce_integer,
    ValueType.FLOAT: coerce_float,
}

ZERO_VALUES: dict[ValueType, Any] = {
    ValueType.STRING: "",
    ValueType.BOOLEAN: False,
    ValueType.INTEGER: 0,
    ValueType.FLOAT: 0.0,
}


def coerce_value(value: str, value_type: ValueType) -> Any:
    """
    Convert a raw argv string to the Python type behind `value_type`.

    Raises:
        TypeError: If `value_type` is `ValueType.NONE`.
        ValueError: If the string cannot be converted.
    """
    try:
        converter = CONVERTERS[value_type]
    except KeyError:
        raise TypeError(f"Value type '{value_type}' carries no value") from None
    return converter(value)


def coerce_default(default: Any, value_type: ValueType) -> Any:
    """
    Normalize a declared default for `value_type`.

    A default that already has the right type is returned as-is (an int is
    widened for FLOAT). Strings are converted as if they came from argv, so
    defaults declared in YAML/TOML files behave like typed ones.

    Raises:
        TypeError: If `value_type` is `ValueType.NONE`.
        ValueError: If the default does not fit the type.
    """
    if value_type is ValueType.NONE:
        raise TypeError("Flag options carry no default")
    if isinstance(default, str):
        return coerce_value(default, value_type)
    if value_type is ValueType.BOOLEAN and isinstance(default, bool):
        return default
    if value_type is ValueType.INTEGER:
        if isinstance(default, int) and not isinstance(default, bool):
            return default
    if value_type is ValueType.FLOAT:
        if isinstance(default, (int, float)) and not isinstance(default, bool):
            return float(default)
    raise ValueError(f"Default {default!r} is not a valid {value_type.value}")


def zero_value(value_type: ValueType) -> Any:
    """Return the zero value for `value_type`."""
    return ZERO_VALUES[value_type]
