# Cmdkit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tokenizer for the raw process argument vector.

`Arguments.parse()` turns `argv` into four pieces:

- `script`: how the program was invoked (token 0, normalized)
- `selector`: the command name (token 1 when it is not an option)
- `help_selector`: the command asked about (token 2, only after `help`)
- `mapper`: option key → raw string value

Option token forms:
- `--name=value` / `-n=value`: immediate key/value pair
- `--name`: one pending key
- `-abc`: POSIX-style cluster, one pending key per character
- a following non-option token (or several, joined with a single space)
  becomes the value of the last pending key; the other keys of the
  cluster receive an empty string

An empty value means "flag present, no value" and is distinct from an absent
key. Positional text with no pending key is kept in `extras` and logged.

Example:
    arguments = Arguments().parse(["./app", "run", "-vn", "demo", "--level=3"])
    arguments.selector   # 'run'
    arguments.mapper     # {'v': '', 'n': 'demo', 'level': '3'}
"""
from __future__ import annotations

import re
import sys
from typing import TYPE_CHECKING, Sequence

from cmdkit.exceptions import DuplicateOptionAssignmentError
from cmdkit.logger import logger

if TYPE_CHECKING:
    from cmdkit.command import Command

HELP_SELECTOR = "help"
DEFAULT_SCRIPT = "python main.py"

OPTION_PREFIX = re.compile(r"^-")
OPTION_NAME = re.compile(r"^(-+)([a-zA-Z0-9][_a-zA-Z0-9-]*)$")
OPTION_PAIR = re.compile(r"^-+([a-zA-Z0-9][_a-zA-Z0-9-]*)=(.*)$", re.DOTALL)
SCRIPT_BINARY = re.compile(r"^\./[_a-zA-Z0-9-]+$")
SCRIPT_WORKING = re.compile(r"^[_a-zA-Z0-9-]+$")


class Arguments:
    """
    Parsed view of one process invocation.

    Attributes:
        script (str): Program invocation shown in usage text.
        selector (str): Selected command name, empty when none was given.
        help_selector (str): Command name given after `help`.
        mapper (dict[str, str]): Option key → raw value.
        extras (list[str]): Positional text that did not follow any option.
        command (Command | None): Per-invocation command set by the Manager.
    """

    def __init__(
        self,
        help_name: str = HELP_SELECTOR,
        default_script: str = DEFAULT_SCRIPT,
    ) -> None:
        self.help_name: str = help_name
        self.default_script: str = default_script
        self.script: str = ""
        self.selector: str = ""
        self.help_selector: str = ""
        self.mapper: dict[str, str] = {}
        self.extras: list[str] = []
        self.command: Command | None = None

    @classmethod
    def from_argv(cls, argv: Sequence[str] | None = None, **kwargs) -> Arguments:
        """Build and parse an Arguments from `argv` (defaults to `sys.argv`)."""
        return cls(**kwargs).parse(sys.argv if argv is None else argv)

    def get(self, key: str, default: str = "") -> str:
        return self.mapper.get(key, default)

    def has(self, key: str) -> bool:
        return key in self.mapper

    def get_mapper(self) -> dict[str, str]:
        return dict(self.mapper)

    def parse(self, tokens: Sequence[str]) -> Arguments:
        """
        Consume the full argument vector (index 0 is the program path).

        Returns:
            Arguments: self, for chaining.

        Raises:
            DuplicateOptionAssignmentError: If a key is given twice.
        """
        keys: list[str] = []
        values: list[str] = []

        for index, token in enumerate(tokens):
            if not OPTION_PREFIX.match(token):
                if index == 0:
                    self._parse_script(token)
                elif index == 1:
                    self.selector = token
                elif index == 2 and self.selector == self.help_name:
                    self.help_selector = token
                else:
                    values.append(token)
                continue

            if keys or values:
                self._flush(keys, values)
                keys, values = [], []

            if match := OPTION_PAIR.match(token):
                self._flush([match.group(1)], [match.group(2)])
                continue

            if match := OPTION_NAME.match(token):
                dashes, name = match.groups()
                keys = list(name) if dashes == "-" else [name]
                continue

            logger.warning("Ignoring malformed option token: %r", token)

        if keys or values:
            self._flush(keys, values)
        return self

    def _parse_script(self, token: str) -> None:
        if SCRIPT_BINARY.match(token) or SCRIPT_WORKING.match(token):
            self.script = token
        else:
            self.script = self.default_script

    def _flush(self, keys: list[str], values: list[str]) -> None:
        """Assign the collected value to the last key, empty strings to the rest."""
        if not keys:
            if values:
                logger.warning(
                    "Positional text %r does not follow any option.", " ".join(values)
                )
                self.extras.extend(values)
            return

        joined = " ".join(values)
        last = len(keys) - 1
        for position, key in enumerate(keys):
            if key in self.mapper:
                raise DuplicateOptionAssignmentError(key)
            self.mapper[key] = joined if position == last else ""

    def __str__(self) -> str:
        return (
            f"Arguments(script='{self.script}', selector='{self.selector}', "
            f"help_selector='{self.help_selector}', mapper={self.mapper})"
        )
