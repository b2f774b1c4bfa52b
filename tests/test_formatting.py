import pytest

from clickup_cli.errors import ClickUpValidationError
from clickup_cli.formatting import (
    OutputMode,
    env_bool,
    format_json,
    format_ms,
    format_plain,
    format_records_md,
    format_tasks_md,
    redact,
)
from clickup_cli.models import Task


def test_output_mode_conflict():
    with pytest.raises(ClickUpValidationError, match="cannot combine"):
        OutputMode.from_flags(True, True)
    assert OutputMode.from_flags(False, True) == OutputMode(plain=True)


@pytest.mark.parametrize("value, expected", [
    ("1", True), ("TRUE", True), (" yes ", True), ("on", True),
    ("0", False), ("no", False), ("", False),
])
def test_env_bool(monkeypatch, value, expected):
    monkeypatch.setenv("CLICKUP_PLAIN", value)
    assert env_bool("CLICKUP_PLAIN") is expected


def test_format_json_uses_aliases_and_drops_none():
    task = Task.model_validate({"id": 1, "name": "Ünïcode", "list": {"id": "2"}})
    out = format_json(task)
    assert '"list": {' in out
    assert "Ünïcode" in out
    assert "description" not in out


def test_format_plain_cells():
    out = format_plain(["A", "B", "C"], [[None, True, "x\ty\nz"]])
    assert out == "A\tB\tC\n\ttrue\tx y z"


def test_format_ms():
    assert format_ms("3900000") == "1h 05m"
    assert format_ms("-60000") == "-0h 01m"
    assert format_ms(None) == ""
    assert format_ms("soon") == "soon"


def test_empty_listings():
    assert format_tasks_md([]) == "No tasks found."
    assert format_records_md("Spaces", [], [("ID", str)]) == "No spaces found."


def test_records_md_headings():
    out = format_records_md("Spaces", ["a"], [("ID", str), ("MEMBER_COUNT", len)])
    assert out == "# Spaces (1)\n\n## a\n- **Member Count**: 1"


def test_redact():
    assert redact("short") == "****"
    assert redact("pk_1234567890") == "pk_1...7890"
