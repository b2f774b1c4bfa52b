"""``clickup-cli tasks``: task CRUD, search, time-in-status, merge and move."""

from typing import List, Optional

import typer

from clickup_cli.cli.common import done, output, run, team_id
from clickup_cli.formatting import format_task_md, format_tasks_md, task_priority, task_status
from clickup_cli.models import (
    CreateTaskFromTemplateRequest,
    CreateTaskRequest,
    FilteredTeamTasksParams,
    TaskAssigneesUpdate,
    UpdateTaskRequest,
)

app = typer.Typer(no_args_is_help=True, help="Task operations.")

TASK_COLUMNS = [
    ("ID", lambda t: t.id),
    ("NAME", lambda t: t.name),
    ("STATUS", task_status),
    ("PRIORITY", task_priority),
    ("DUE_DATE", lambda t: t.due_date),
    ("URL", lambda t: t.url),
]

STATUS_TIME_COLUMNS = [
    ("STATUS", lambda s: s.status),
    ("MINUTES", lambda s: (s.total_time or {}).get("by_minute")),
    ("SINCE", lambda s: (s.total_time or {}).get("since")),
]


def _tasks(ctx: typer.Context, result) -> None:
    output(ctx, result, result.tasks, TASK_COLUMNS, human=format_tasks_md(result.tasks))


def _task(ctx: typer.Context, task, heading: str = "") -> None:
    human = format_task_md(task)
    output(ctx, task, [task], TASK_COLUMNS, human=f"{heading}\n\n{human}" if heading else human)


@app.command("list")
def list_tasks(
    ctx: typer.Context,
    list_id: str = typer.Option(..., "--list", help="List ID to fetch tasks from."),
    status: str = typer.Option("", help="Filter by status (e.g. open, closed)."),
    assignee: str = typer.Option("", help="Filter by assignee user ID."),
):
    """List tasks in a list."""
    _tasks(ctx, run(ctx, lambda c: c.tasks.list(list_id, status=status, assignee=assignee)))


@app.command()
def get(ctx: typer.Context, task_id: str = typer.Argument(..., help="Task ID.")):
    """Get a task by ID."""
    _task(ctx, run(ctx, lambda c: c.tasks.get(task_id)))


@app.command()
def create(
    ctx: typer.Context,
    list_id: str = typer.Argument(..., help="List ID to create the task in."),
    name: str = typer.Argument(..., help="Task name."),
    description: Optional[str] = typer.Option(None, help="Task description."),
    assignee: Optional[int] = typer.Option(None, help="Assign to user ID."),
    priority: Optional[int] = typer.Option(None, min=1, max=4, help="1=urgent, 2=high, 3=normal, 4=low."),
    due: Optional[int] = typer.Option(None, help="Due date (unix ms)."),
    tag: Optional[List[str]] = typer.Option(None, help="Tag name (repeatable)."),
    parent: Optional[str] = typer.Option(None, help="Parent task ID (creates a subtask)."),
):
    """Create a new task."""
    req = CreateTaskRequest(
        name=name,
        description=description,
        assignees=[assignee] if assignee else None,
        priority=priority,
        due_date=due,
        tags=tag or None,
        parent=parent,
    )
    _task(ctx, run(ctx, lambda c: c.tasks.create(list_id, req)), "Created task")


@app.command()
def update(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID."),
    name: Optional[str] = typer.Option(None, help="New name."),
    status: Optional[str] = typer.Option(None, help="New status."),
    description: Optional[str] = typer.Option(None, help="New description."),
    priority: Optional[int] = typer.Option(None, min=1, max=4, help="New priority."),
    due: Optional[int] = typer.Option(None, help="New due date (unix ms)."),
    assignee: Optional[int] = typer.Option(None, help="Add assignee user ID."),
    unassign: Optional[int] = typer.Option(None, help="Remove assignee user ID."),
):
    """Update a task. Only the given fields change."""
    assignees = None
    if assignee or unassign:
        assignees = TaskAssigneesUpdate(
            add=[assignee] if assignee else None,
            rem=[unassign] if unassign else None,
        )
    req = UpdateTaskRequest(
        name=name,
        status=status,
        description=description,
        priority=priority,
        due_date=due,
        assignees=assignees,
    )
    _task(ctx, run(ctx, lambda c: c.tasks.update(task_id, req)), "Updated task")


@app.command()
def delete(ctx: typer.Context, task_id: str = typer.Argument(..., help="Task ID.")):
    """Delete a task."""
    run(ctx, lambda c: c.tasks.delete(task_id))
    done(ctx, f"Task {task_id} deleted", task_id=task_id)


@app.command()
def search(
    ctx: typer.Context,
    team: Optional[str] = typer.Option(None, "--team-id", help="Team ID (defaults to the configured team)."),
    status: Optional[List[str]] = typer.Option(None, help="Status filter (repeatable)."),
    assignee: Optional[List[int]] = typer.Option(None, help="Assignee user ID (repeatable)."),
    tag: Optional[List[str]] = typer.Option(None, help="Tag filter (repeatable)."),
    due_date_gt: int = typer.Option(0, help="Due date after (unix ms)."),
    due_date_lt: int = typer.Option(0, help="Due date before (unix ms)."),
    include_closed: bool = typer.Option(False, help="Include closed tasks."),
    subtasks: bool = typer.Option(False, help="Include subtasks."),
    page: int = typer.Option(0, help="Page number (0-indexed)."),
    order_by: str = typer.Option("", help="Order by field (e.g. due_date, created)."),
    reverse: bool = typer.Option(False, help="Reverse the sort order."),
):
    """Search tasks across a workspace."""
    params = FilteredTeamTasksParams(
        page=page,
        order_by=order_by,
        reverse=reverse,
        subtasks=subtasks,
        statuses=status or [],
        include_closed=include_closed,
        assignees=assignee or [],
        tags=tag or [],
        due_date_gt=due_date_gt,
        due_date_lt=due_date_lt,
    )
    tid = team_id(team)
    _tasks(ctx, run(ctx, lambda c: c.tasks.search(tid, params)))


@app.command("time-in-status")
def time_in_status(ctx: typer.Context, task_id: str = typer.Argument(..., help="Task ID.")):
    """Show how long a task has spent in each status."""
    result = run(ctx, lambda c: c.tasks.time_in_status(task_id))
    history = list(result.status_history)
    if result.current_status:
        history.append(result.current_status)
    output(ctx, result, history, STATUS_TIME_COLUMNS, title="Statuses")


@app.command("bulk-time-in-status")
def bulk_time_in_status(ctx: typer.Context, task_ids: List[str] = typer.Argument(..., help="Task IDs.")):
    """Time-in-status for several tasks at once."""
    result = run(ctx, lambda c: c.tasks.bulk_time_in_status(task_ids))
    rows = [(tid, s) for tid, r in result.items() for s in r.status_history]
    output(ctx, result, rows, [("TASK_ID", lambda r: r[0])] + [
        (name, lambda r, get=get: get(r[1])) for name, get in STATUS_TIME_COLUMNS
    ], title="Statuses")


@app.command()
def merge(
    ctx: typer.Context,
    target: str = typer.Argument(..., help="Task that survives the merge."),
    sources: List[str] = typer.Argument(..., help="Tasks merged into the target."),
):
    """Merge tasks into one."""
    run(ctx, lambda c: c.tasks.merge(target, sources))
    done(ctx, f"Merged {len(sources)} task(s) into {target}", task_id=target)


@app.command()
def move(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID."),
    list_id: str = typer.Argument(..., help="Destination list ID."),
):
    """Move a task to a different list (needs a workspace ID)."""
    run(ctx, lambda c: c.tasks.move(task_id, list_id))
    done(ctx, f"Task {task_id} moved to list {list_id}", task_id=task_id, list_id=list_id)


@app.command("from-template")
def from_template(
    ctx: typer.Context,
    list_id: str = typer.Argument(..., help="List ID."),
    template_id: str = typer.Argument(..., help="Task template ID."),
    name: str = typer.Argument(..., help="Name for the new task."),
):
    """Create a task from a template."""
    req = CreateTaskFromTemplateRequest(name=name)
    _task(ctx, run(ctx, lambda c: c.tasks.create_from_template(list_id, template_id, req)), "Created task")


@app.command()
def templates(
    ctx: typer.Context,
    team: Optional[str] = typer.Option(None, "--team-id", help="Team ID."),
    page: int = typer.Option(0, help="Page number."),
):
    """List task templates."""
    tid = team_id(team)
    result = run(ctx, lambda c: c.templates.list(tid, page))
    output(ctx, result, result.templates, [("ID", lambda t: t.id), ("NAME", lambda t: t.name)],
           title="Templates")
