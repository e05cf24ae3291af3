# Cmdkit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declarative command loader for cmdkit.

A YAML or TOML file declares the command schema of a Manager: commands, their
options and the dotted import path of each handler. Only schemas are loaded;
option values always come from argv.

Example (YAML):
    description: Deployment helper
    commands:
      - name: deploy
        description: Deploy a service
        handler: myapp.commands:deploy
        options:
          - name: service
            short_name: s
            mode: required
          - name: replicas
            value_type: integer
            default: 1
          - name: dry-run
            value_type: flag
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from cmdkit.command import Command
from cmdkit.exceptions import CmdkitError, ConfigError
from cmdkit.logger import logger
from cmdkit.manager import Manager
from cmdkit.option import Option
from cmdkit.option_types import OptionMode, ValueType


def import_handler(dotted_path: str) -> Callable[..., Any]:
    """
    Resolve a dotted path to a Python callable.
    Example: 'mypackage.mymodule.myfunction' or 'mypackage.mymodule:myfunction'

    Raises:
        ConfigError: If the module or attribute does not exist or is not callable.
    """
    if ":" in dotted_path:
        module_path, _, attr = dotted_path.partition(":")
    else:
        module_path, _, attr = dotted_path.rpartition(".")
    if not module_path or not attr:
        raise ConfigError(f"Invalid handler path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ImportError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(f"Could not import '{dotted_path}': {error}") from error
    try:
        handler = getattr(module, attr)
    except AttributeError as error:
        raise ConfigError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(handler):
        raise ConfigError(f"Resolved attribute '{attr}' is not callable.")
    return handler


class RawOption(BaseModel):
    """Raw option model for cmdkit configuration."""

    name: str
    short_name: str = ""
    mode: OptionMode = OptionMode.OPTIONAL
    value_type: ValueType = ValueType.STRING
    default: Any = None
    description: str = ""

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, value: Any) -> OptionMode:
        return OptionMode(value)

    @field_validator("value_type", mode="before")
    @classmethod
    def validate_value_type(cls, value: Any) -> ValueType:
        return ValueType(value)

    def to_option(self) -> Option:
        return Option(**self.model_dump())


class RawCommand(BaseModel):
    """Raw command model for cmdkit configuration."""

    name: str
    handler: str
    description: str = ""
    hidden: bool = False
    options: list[RawOption] = Field(default_factory=list)

    def to_command(self) -> Command:
        return Command(
            self.name,
            self.description,
            import_handler(self.handler),
            hidden=self.hidden,
            options=[raw_option.to_option() for raw_option in self.options],
        )


class CmdkitConfig(BaseModel):
    """cmdkit configuration model."""

    description: str = ""
    commands: list[RawCommand] = Field(default_factory=list)

    def to_manager(self) -> Manager:
        manager = Manager(self.description)
        manager.add_commands(raw_command.to_command() for raw_command in self.commands)
        return manager


def read_config(path: Path) -> dict[str, Any]:
    suffix = path.suffix
    if suffix not in (".yaml", ".yml", ".toml"):
        raise ConfigError(f"Unsupported config format: {suffix}")

    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raw_config = yaml.safe_load(config_file)
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a dictionary with a list of commands.\n"
            "Example:\n"
            "description: 'My CLI'\n"
            "commands:\n"
            "  - name: 'run'\n"
            "    description: 'Example command'\n"
            "    handler: 'my_module.my_function'"
        )
    return raw_config


def loader(file_path: Path | str) -> Manager:
    """
    Load a cmdkit Manager from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        Manager: A Manager with the declared commands registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file cannot be parsed or declares invalid commands.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")

    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    raw_config = read_config(path)
    try:
        config = CmdkitConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration in {path}:\n{error}") from error

    try:
        return config.to_manager()
    except ConfigError:
        raise
    except CmdkitError as error:
        raise ConfigError(f"Invalid configuration in {path}: {error}") from error
