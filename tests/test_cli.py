"""
Tests for the command line interface.
"""

import json

import pytest

from approve import cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Fixture clearing APPROVE_* settings from the environment."""
    for name in (
        "APPROVE_STRENGTH_MIN",
        "APPROVE_STRENGTH_BONUS",
        "APPROVE_STRICT_PLACEHOLDERS",
        "APPROVE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_check_failing_value(capsys):
    """Test checking a value that fails."""
    status = cli.main(["check", "abc", '{"min": 5, "title": "Username"}'])
    out = capsys.readouterr().out

    assert status == 1
    assert "Username must be a minimum of 5 characters" in out


def test_check_passing_value(capsys):
    """Test checking a value that passes."""
    status = cli.main(["check", "abcdef", '{"min": 5}'])
    assert status == 0
    assert "Value approved" in capsys.readouterr().out


def test_check_json_output(capsys):
    """Test JSON output."""
    status = cli.main(["check", "abcdefgh", '{"strength": {"min": 8, "bonus": 10}}', "--json"])
    data = json.loads(capsys.readouterr().out)

    assert status == 1
    assert data["approved"] is False
    assert data["message"] == "Better"


def test_check_with_format_rule(capsys):
    """Test a format rule whose pattern comes from JSON."""
    status = cli.main(["check", "abc", '{"format": {"regex": "^[a-z]+$"}}'])
    assert status == 0


def test_check_with_rules_file(tmp_path, capsys):
    """Test reading the rule set from a file."""
    path = tmp_path / "rules.json"
    path.write_text('{"email": true, "title": "Email"}')
    status = cli.main(["check", "nope", f"@{path}"])

    assert status == 1
    assert "Email must be a valid email address" in capsys.readouterr().out


def test_list(capsys):
    """Test listing registered tests."""
    assert cli.main(["list"]) == 0
    names = capsys.readouterr().out.split()
    assert "required" in names
    assert "strength" in names


def test_describe(capsys):
    """Test describing a test."""
    assert cli.main(["describe", "range"]) == 0
    out = capsys.readouterr().out
    assert "Expects: min, max" in out
    assert "{title} must be a minimum of {min} and a maximum of {max} characters" in out


def test_errors_exit_with_status_2(capsys):
    """Test engine errors reported on stderr."""
    assert cli.main(["describe", "bogus"]) == 2
    assert "bogus" in capsys.readouterr().err

    assert cli.main(["check", "x", '{"range": 5}']) == 2
    assert cli.main(["check", "x", "not json"]) == 2
    assert cli.main(["check", "Ab1!", '{"strength": {"min": "x", "bonus": 10}}']) == 2


def test_no_command(capsys):
    """Test running without a command."""
    assert cli.main([]) == 2
    assert "usage" in capsys.readouterr().out.lower()


def test_check_with_float_length(capsys):
    """Test that a JSON float length behaves like the integer."""
    assert cli.main(["check", "abcdef", '{"min": 5.0}']) == 0
    assert cli.main(["check", "abc", '{"min": 5.0, "title": "Code"}']) == 1
    assert "Code must be a minimum of 5 characters" in capsys.readouterr().out
