"""
Test cases for the command line entry point.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import json

import pytest

import main


def test_list(capsys):
    assert main.run(["list"]) == main.EXIT_OK
    out = capsys.readouterr().out
    assert "calculator" in out
    assert "forecast" in out
    assert len(out.strip().splitlines()) == 12


def test_schema(capsys):
    assert main.run(["schema", "calculator"]) == main.EXIT_OK
    schema = json.loads(capsys.readouterr().out)
    assert "expression" in schema["properties"]


def test_call_ok(capsys):
    assert main.run(["call", "calculator", '{"expression": "2 * 3"}']) == main.EXIT_OK
    assert capsys.readouterr().out.strip() == "2 * 3 = 6"


def test_call_tool_failure(capsys):
    assert main.run(["call", "calculator", '{"expression": "1 / 0"}']) == main.EXIT_TOOL_FAILED
    assert "division by zero" in capsys.readouterr().err


def test_call_requires_approval(capsys):
    assert main.run(["call", "urban_dictionary", '{"term": "yeet"}']) == main.EXIT_TOOL_FAILED
    err = capsys.readouterr().err
    assert "requires approval" in err
    assert "re-run with --approve" in err


@pytest.mark.parametrize(
    "argv",
    [
        ["call", "nope"],
        ["schema", "nope"],
        ["call", "calculator", "{not json"],
        ["call", "calculator", "[1, 2]"],
    ],
)
def test_usage_errors(argv, capsys):
    assert main.run(argv) == main.EXIT_USAGE
    assert capsys.readouterr().err


def test_missing_command():
    with pytest.raises(SystemExit) as exc:
        main.run([])
    assert exc.value.code == 2
