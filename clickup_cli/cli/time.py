"""``clickup-cli time``: time entries and timers."""

import time as clock
from typing import Optional

import typer

from clickup_cli.cli.common import done, output, run, team_id
from clickup_cli.formatting import format_ms, user_name
from clickup_cli.models import StartTimeEntryRequest, UpdateTimeEntryRequest

app = typer.Typer(no_args_is_help=True, help="Time tracking.")

ENTRY_COLUMNS = [
    ("ID", lambda e: e.id),
    ("TASK", lambda e: e.task.name or e.task.id if e.task else ""),
    ("USER", lambda e: user_name(e.user)),
    ("START", lambda e: e.start),
    ("DURATION", lambda e: format_ms(e.duration)),
    ("DESCRIPTION", lambda e: e.description),
]

TeamOption = typer.Option(None, "--team-id", help="Team ID (defaults to the configured team).")


def _entry(ctx: typer.Context, entry, empty: str) -> None:
    if entry is None:
        output(ctx, None, [], ENTRY_COLUMNS, human=empty)
        return
    output(ctx, entry, [entry], ENTRY_COLUMNS)


@app.command("list")
def list_entries(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID."),
    team: Optional[str] = TeamOption,
):
    """List time entries for a task."""
    tid = team_id(team)
    result = run(ctx, lambda c: c.time.list(tid, task_id))
    output(ctx, result, result.data, ENTRY_COLUMNS, title="Time Entries")


@app.command()
def log(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID."),
    minutes: int = typer.Argument(..., min=1, help="Duration in minutes."),
    start: Optional[int] = typer.Option(None, help="Start time (unix ms); defaults to now minus the duration."),
    team: Optional[str] = TeamOption,
):
    """Log time against a task."""
    tid = team_id(team)
    duration_ms = minutes * 60_000
    start_ms = start if start is not None else int(clock.time() * 1000) - duration_ms
    entry = run(ctx, lambda c: c.time.log(tid, task_id, duration_ms, start_ms))
    _entry(ctx, entry, "Time logged")


@app.command()
def get(
    ctx: typer.Context,
    entry_id: str = typer.Argument(..., help="Time entry ID."),
    team: Optional[str] = TeamOption,
):
    """Get a single time entry."""
    tid = team_id(team)
    _entry(ctx, run(ctx, lambda c: c.time.get(tid, entry_id)), "No such time entry")


@app.command()
def current(ctx: typer.Context, team: Optional[str] = TeamOption):
    """Show the running timer."""
    tid = team_id(team)
    _entry(ctx, run(ctx, lambda c: c.time.current(tid)), "No timer running")


@app.command()
def start(
    ctx: typer.Context,
    task_id: Optional[str] = typer.Argument(None, help="Task ID to track against."),
    description: Optional[str] = typer.Option(None, help="Entry description."),
    billable: Optional[bool] = typer.Option(None, "--billable/--not-billable", help="Billable flag."),
    team: Optional[str] = TeamOption,
):
    """Start a timer."""
    tid = team_id(team)
    req = StartTimeEntryRequest(tid=task_id, description=description, billable=billable)
    _entry(ctx, run(ctx, lambda c: c.time.start(tid, req)), "Timer started")


@app.command()
def stop(ctx: typer.Context, team: Optional[str] = TeamOption):
    """Stop the running timer."""
    tid = team_id(team)
    _entry(ctx, run(ctx, lambda c: c.time.stop(tid)), "Timer stopped")


@app.command()
def update(
    ctx: typer.Context,
    entry_id: str = typer.Argument(..., help="Time entry ID."),
    description: Optional[str] = typer.Option(None, help="New description."),
    duration: Optional[int] = typer.Option(None, help="New duration in minutes."),
    billable: Optional[bool] = typer.Option(None, "--billable/--not-billable", help="Billable flag."),
    team: Optional[str] = TeamOption,
):
    """Update a time entry."""
    tid = team_id(team)
    req = UpdateTimeEntryRequest(
        description=description,
        duration=duration * 60_000 if duration is not None else None,
        billable=billable,
    )
    _entry(ctx, run(ctx, lambda c: c.time.update(tid, entry_id, req)), "Time entry updated")


@app.command()
def delete(
    ctx: typer.Context,
    entry_id: str = typer.Argument(..., help="Time entry ID."),
    team: Optional[str] = TeamOption,
):
    """Delete a time entry."""
    tid = team_id(team)
    run(ctx, lambda c: c.time.delete(tid, entry_id))
    done(ctx, f"Time entry {entry_id} deleted", entry_id=entry_id)


@app.command()
def tags(ctx: typer.Context, team: Optional[str] = TeamOption):
    """List tags used on time entries."""
    tid = team_id(team)
    result = run(ctx, lambda c: c.time.list_tags(tid))
    output(ctx, result, result.data, [("NAME", lambda t: t.name)], title="Tags")
