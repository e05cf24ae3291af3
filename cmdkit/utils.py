# Cmdkit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process-level helpers: the usage prefix shown by `help` and logging setup.

`setup_logging()` is opt-in. Library code only logs to the `cmdkit` logger;
applications (or `python -m cmdkit` with `CMDKIT_LOG_MODE` set) decide where
those records go.
"""
from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
FILE_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def get_program_invocation() -> str:
    """Usage prefix for `help` when the program is started from `sys.argv`."""
    script = sys.argv[0]
    program = shutil.which(script)
    if program:
        return os.path.basename(program)
    return f"python {script}" if "python" in sys.executable else script


def running_in_container(cgroup: Path = Path("/proc/1/cgroup")) -> bool:
    """True when `cgroup` names a known container runtime."""
    try:
        content = cgroup.read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route cmdkit's log records to the console and, optionally, a file.

    Args:
        mode (str | None): "cli" for rich console output, "json" for one JSON
            object per line. Defaults to `CMDKIT_LOG_MODE`, then to "json"
            inside a container and "cli" elsewhere.
        log_filename (str | None): Also write records to this file.
        json_log_to_file (bool): Format file records as JSON.
        file_log_level (int): Level for the file handler.
        console_log_level (int): Level for the console handler.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    mode = mode or os.getenv("CMDKIT_LOG_MODE") or (
        "json" if running_in_container() else "cli"
    )
    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        else:
            file_handler.setFormatter(
                logging.Formatter(FILE_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
            )
        root.addHandler(file_handler)

    logging.getLogger("cmdkit").debug("Logging initialized in '%s' mode.", mode)
