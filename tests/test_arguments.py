import logging

import pytest

from cmdkit.arguments import DEFAULT_SCRIPT, Arguments
from cmdkit.exceptions import DuplicateOptionAssignmentError


def parse(*tokens):
    return Arguments().parse(["./app", *tokens])


@pytest.mark.parametrize(
    "tokens, expected",
    [
        (["run", "--name=demo"], {"name": "demo"}),
        (["run", "-n=demo"], {"n": "demo"}),
        (["run", "--level=3", "--name=demo"], {"level": "3", "name": "demo"}),
        (["run", "--expr=a=b"], {"expr": "a=b"}),
        (["run", "--empty="], {"empty": ""}),
        (["run", "--name", "demo"], {"name": "demo"}),
        (["run", "--verbose"], {"verbose": ""}),
    ],
)
def test_long_and_pair_forms(tokens, expected):
    arguments = parse(*tokens)
    assert arguments.selector == "run"
    assert arguments.mapper == expected


def test_cluster_value_attaches_to_last_flag():
    arguments = parse("run", "-abc", "value")
    assert arguments.mapper == {"a": "", "b": "", "c": "value"}


def test_cluster_without_value():
    arguments = parse("run", "-abc")
    assert arguments.mapper == {"a": "", "b": "", "c": ""}


def test_multiple_words_are_joined():
    arguments = parse("run", "--message", "hello", "big", "world", "-v")
    assert arguments.mapper == {"message": "hello big world", "v": ""}


def test_pair_flushes_pending_keys():
    arguments = parse("run", "-v", "--name=demo", "-q")
    assert arguments.mapper == {"v": "", "name": "demo", "q": ""}


def test_round_trip_tokens():
    arguments = parse("run", "-n", "demo", "-v")
    assert arguments.selector == "run"
    assert arguments.mapper == {"n": "demo", "v": ""}
    assert arguments.extras == []


@pytest.mark.parametrize(
    "script, expected",
    [
        ("./app", "./app"),
        ("app", "app"),
        ("my_tool-2", "my_tool-2"),
        ("/usr/local/bin/app", DEFAULT_SCRIPT),
        ("main.py", DEFAULT_SCRIPT),
    ],
)
def test_script_normalization(script, expected):
    assert Arguments().parse([script]).script == expected


def test_custom_default_script():
    arguments = Arguments(default_script="python -m tool").parse(["/tmp/x/tool.py"])
    assert arguments.script == "python -m tool"


def test_help_selector():
    arguments = parse("help", "run")
    assert arguments.selector == "help"
    assert arguments.help_selector == "run"
    assert arguments.mapper == {}


def test_help_selector_only_after_help():
    arguments = parse("run", "stray")
    assert arguments.help_selector == ""
    assert arguments.extras == ["stray"]


def test_no_selector():
    arguments = Arguments().parse(["./app"])
    assert arguments.selector == ""
    assert arguments.mapper == {}

    arguments = parse("--name=x")
    assert arguments.selector == ""
    assert arguments.mapper == {"name": "x"}


def test_empty_argv():
    arguments = Arguments().parse([])
    assert arguments.script == ""
    assert arguments.selector == ""
    assert arguments.mapper == {}


def test_duplicate_key():
    with pytest.raises(DuplicateOptionAssignmentError) as exc_info:
        parse("run", "-n", "a", "-n", "b")
    assert exc_info.value.option == "n"


def test_duplicate_pair_key():
    with pytest.raises(DuplicateOptionAssignmentError):
        parse("run", "--name=a", "--name=b")


def test_stray_text_goes_to_extras(caplog):
    with caplog.at_level(logging.WARNING, logger="cmdkit"):
        arguments = parse("run", "stray", "words", "--name=x")
    assert arguments.extras == ["stray", "words"]
    assert arguments.mapper == {"name": "x"}
    assert "does not follow any option" in caplog.text


@pytest.mark.parametrize("token", ["-", "--", "--=x", "-!"])
def test_malformed_tokens_are_ignored(caplog, token):
    with caplog.at_level(logging.WARNING, logger="cmdkit"):
        arguments = parse("run", token, "--name=x")
    assert arguments.mapper == {"name": "x"}
    assert "malformed option token" in caplog.text


def test_negative_number_is_a_key():
    arguments = parse("run", "-5")
    assert arguments.mapper == {"5": ""}


def test_accessors():
    arguments = parse("run", "--name=demo", "-v")
    assert arguments.get("name") == "demo"
    assert arguments.get("v") == ""
    assert arguments.get("missing", "fallback") == "fallback"
    assert arguments.has("v")
    assert not arguments.has("missing")

    mapper = arguments.get_mapper()
    mapper["name"] = "changed"
    assert arguments.get("name") == "demo"


def test_from_argv_defaults_to_sys_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["./app", "run", "--name=demo"])
    arguments = Arguments.from_argv()
    assert arguments.script == "./app"
    assert arguments.selector == "run"
    assert arguments.mapper == {"name": "demo"}


def test_str():
    arguments = parse("run", "--name=demo")
    assert str(arguments) == (
        "Arguments(script='./app', selector='run', "
        "help_selector='', mapper={'name': 'demo'})"
    )
