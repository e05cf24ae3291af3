# Cmdkit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process boundary for cmdkit applications.

`Manager.run()` reports failures by raising; `run_cli()` is the one place that
turns them into console output and an exit status. It still does not exit the
process itself, so it can be reused from tests and embedding code.

Example:
    if __name__ == "__main__":
        sys.exit(run_cli(manager))
"""
from __future__ import annotations

from typing import Sequence

from rich.markup import escape

from cmdkit.exceptions import CmdkitError
from cmdkit.logger import logger
from cmdkit.manager import Manager


def run_cli(manager: Manager, argv: Sequence[str] | None = None) -> int:
    """Dispatch `argv` on `manager` and return the process exit status."""
    try:
        manager.run_terminal(argv)
    except CmdkitError as error:
        logger.debug("Dispatch failed: %s", error, exc_info=True)
        manager.console.print(f"[cmdkit.error]❌ {escape(str(error))}[/]")
        return 1
    return 0
