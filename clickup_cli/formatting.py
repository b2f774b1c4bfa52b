"""Output formatting for the CLI.

Three modes: indented JSON (for scripting), plain tab-separated values with
a header row (stable, parseable), and human-readable Markdown-style text,
which is the default.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Sequence

from pydantic import BaseModel

from clickup_cli.errors import ClickUpValidationError

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}


# ---------------------------------------------------------------------------
# Output mode
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OutputMode:
    json: bool = False
    plain: bool = False

    @classmethod
    def from_flags(cls, json_out: bool, plain_out: bool) -> "OutputMode":
        if json_out and plain_out:
            raise ClickUpValidationError("invalid output mode (cannot combine --json and --plain)")
        return cls(json=json_out, plain=plain_out)


def env_bool(name: str) -> bool:
    """True for 1/true/yes/y/on (any case) in the environment variable ``name``."""
    return os.environ.get(name, "").strip().lower() in _TRUE_VALUES


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def to_data(obj: Any) -> Any:
    """Convert models (and containers of models) to JSON-ready data."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(obj, dict):
        return {k: to_data(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_data(v) for v in obj]
    return obj


def format_json(data: Any) -> str:
    """Format data as indented JSON string."""
    return json.dumps(to_data(data), indent=2, ensure_ascii=False, default=str)


# ---------------------------------------------------------------------------
# Plain (TSV)
# ---------------------------------------------------------------------------

Column = tuple[str, Callable[[Any], Any]]


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    # Tabs and newlines would break the row structure.
    return str(value).replace("\t", " ").replace("\n", " ")


def format_plain(headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> str:
    lines = []
    if headers:
        lines.append("\t".join(headers))
    for row in rows:
        lines.append("\t".join(_cell(v) for v in row))
    return "\n".join(lines)


def format_table(items: Iterable[Any], columns: Sequence[Column]) -> str:
    """TSV for ``items`` where each column is ``(HEADER, getter)``."""
    headers = [name for name, _ in columns]
    return format_plain(headers, ([get(item) for _, get in columns] for item in items))


# ---------------------------------------------------------------------------
# Field accessors
# ---------------------------------------------------------------------------

def task_status(task: Any) -> str:
    return task.status.status if task.status else ""


def task_priority(task: Any) -> str:
    return (task.priority.priority or "") if task.priority else ""


def user_name(user: Any) -> str:
    if user is None:
        return ""
    return user.username or user.email or (str(user.id) if user.id is not None else "")


def format_ms(value: Optional[str]) -> str:
    """Milliseconds (as sent by ClickUp) to ``1h 05m``."""
    if not value:
        return ""
    try:
        total = int(value) // 1000
    except ValueError:
        return value
    hours, rest = divmod(abs(total), 3600)
    minutes = rest // 60
    sign = "-" if total < 0 else ""
    return f"{sign}{hours}h {minutes:02d}m"


# ---------------------------------------------------------------------------
# Human-readable formatters
# ---------------------------------------------------------------------------

def format_task_md(task: Any) -> str:
    """Format a single task as Markdown."""
    lines = [f"## {task.name or 'Untitled'}"]
    lines.append(f"- **ID**: `{task.id}`")
    if task.custom_id:
        lines.append(f"- **Custom ID**: `{task.custom_id}`")
    lines.append(f"- **Status**: {task_status(task) or '-'}")
    if task_priority(task):
        lines.append(f"- **Priority**: {task_priority(task)}")
    if task.due_date:
        lines.append(f"- **Due**: {task.due_date}")
    if task.assignees:
        lines.append(f"- **Assignees**: {', '.join(user_name(u) for u in task.assignees)}")
    if task.tags:
        lines.append(f"- **Tags**: {', '.join(t.name for t in task.tags)}")
    if task.home_list:
        lines.append(f"- **List**: {task.home_list.name or task.home_list.id}")
    if task.url:
        lines.append(f"- **URL**: {task.url}")
    if task.description:
        lines.append(f"- **Description**: {task.description[:200]}")
    return "\n".join(lines)


def format_tasks_md(tasks: Sequence[Any]) -> str:
    """Format a list of tasks as Markdown."""
    if not tasks:
        return "No tasks found."
    lines = [f"# Tasks ({len(tasks)})"]
    for t in tasks:
        lines.append("")
        lines.append(format_task_md(t))
    return "\n".join(lines)


def format_records_md(title: str, items: Sequence[Any], columns: Sequence[Column]) -> str:
    """Generic Markdown listing: one heading per item, one bullet per column.

    The first column is used as the heading, the rest as bullets.
    """
    if not items:
        return f"No {title.lower()} found."
    (_, head), rest = columns[0], columns[1:]
    lines = [f"# {title} ({len(items)})"]
    for item in items:
        lines.append("")
        lines.append(f"## {_cell(head(item)) or '-'}")
        for name, get in rest:
            value = _cell(get(item))
            if value:
                lines.append(f"- **{name.replace('_', ' ').title()}**: {value}")
    return "\n".join(lines)


def format_record_md(item: Any, columns: Sequence[Column]) -> str:
    return format_records_md("", [item], columns).split("\n", 2)[2]


def redact(secret: str) -> str:
    """Show the first and last four characters of a long secret."""
    if len(secret) <= 8:
        return "****"
    return f"{secret[:4]}...{secret[-4:]}"
