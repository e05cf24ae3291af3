import json
import logging

import pytest
import pythonjsonlogger.json
from rich.logging import RichHandler

from cmdkit.utils import get_program_invocation, running_in_container, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger(monkeypatch):
    monkeypatch.delenv("CMDKIT_LOG_MODE", raising=False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_cli_mode(restore_root_logger):
    setup_logging("cli")
    (handler,) = restore_root_logger.handlers
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.WARNING


def test_json_mode_from_environment(restore_root_logger, monkeypatch):
    monkeypatch.setenv("CMDKIT_LOG_MODE", "json")
    setup_logging(console_log_level=logging.INFO)
    (handler,) = restore_root_logger.handlers
    assert isinstance(handler.formatter, pythonjsonlogger.json.JsonFormatter)
    assert handler.level == logging.INFO


def test_mode_falls_back_to_container_detection(restore_root_logger, monkeypatch):
    monkeypatch.setattr("cmdkit.utils.running_in_container", lambda: True)
    setup_logging()
    (handler,) = restore_root_logger.handlers
    assert isinstance(handler.formatter, pythonjsonlogger.json.JsonFormatter)


def test_invalid_mode(restore_root_logger):
    handlers = list(restore_root_logger.handlers)
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging("xml")
    assert restore_root_logger.handlers == handlers


def test_json_log_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "cmdkit.log"
    setup_logging("cli", log_filename=str(log_file), json_log_to_file=True)
    logging.getLogger("cmdkit").info("dispatched %s", "run")
    for handler in restore_root_logger.handlers:
        handler.flush()

    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert records[-1]["message"] == "dispatched run"
    assert records[-1]["name"] == "cmdkit"


def test_plain_log_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "cmdkit.log"
    setup_logging("json", log_filename=str(log_file))
    logging.getLogger("cmdkit").warning("careful")
    for handler in restore_root_logger.handlers:
        handler.flush()
    assert "[cmdkit] [WARNING] careful" in log_file.read_text()


@pytest.mark.parametrize(
    "content, expected",
    [
        ("0::/system.slice/docker-abc.scope\n", True),
        ("0::/kubepods/besteffort/pod1\n", True),
        ("0::/user.slice\n", False),
    ],
)
def test_running_in_container(tmp_path, content, expected):
    cgroup = tmp_path / "cgroup"
    cgroup.write_text(content)
    assert running_in_container(cgroup) is expected


def test_running_in_container_without_cgroup(tmp_path):
    assert running_in_container(tmp_path / "missing") is False


def test_get_program_invocation_on_path(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/usr/local/bin/app"])
    monkeypatch.setattr("shutil.which", lambda script: "/usr/local/bin/app")
    assert get_program_invocation() == "app"


def test_get_program_invocation_for_script(monkeypatch):
    monkeypatch.setattr("sys.argv", ["main.py"])
    monkeypatch.setattr("shutil.which", lambda script: None)
    monkeypatch.setattr("sys.executable", "/usr/bin/python3")
    assert get_program_invocation() == "python main.py"
