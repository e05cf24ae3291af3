"""
Cmdkit CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import os
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from cmdkit.cli import run_cli
from cmdkit.config import loader
from cmdkit.console import console
from cmdkit.exceptions import ConfigError
from cmdkit.manager import Manager
from cmdkit.utils import setup_logging


def find_cmdkit_config() -> Path | None:
    candidates = [
        Path.cwd() / "cmdkit.yaml",
        Path.cwd() / "cmdkit.toml",
        Path.cwd() / ".cmdkit.yaml",
        Path.cwd() / ".cmdkit.toml",
        Path(os.environ.get("CMDKIT_CONFIG", "cmdkit.yaml")),
        Path.home() / ".config" / "cmdkit" / "cmdkit.yaml",
        Path.home() / ".config" / "cmdkit" / "cmdkit.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def bootstrap() -> Path | None:
    config_path = find_cmdkit_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def build_manager(config_path: Path | None) -> Manager:
    if config_path is None:
        return Manager("No cmdkit.yaml or cmdkit.toml found; only 'help' is available.")
    return loader(config_path)


def main(argv: Sequence[str] | None = None) -> int:
    if os.getenv("CMDKIT_LOG_MODE"):
        setup_logging()
    try:
        manager = build_manager(bootstrap())
    except (ConfigError, FileNotFoundError) as error:
        console.print(f"[cmdkit.error]❌ {escape(str(error))}[/]")
        return 1
    return run_cli(manager, argv)


if __name__ == "__main__":
    sys.exit(main())
