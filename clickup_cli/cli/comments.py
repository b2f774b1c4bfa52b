"""``clickup-cli comments``."""

from typing import Optional

import typer

from clickup_cli.cli.common import done, output, run
from clickup_cli.formatting import user_name
from clickup_cli.models import UpdateCommentRequest

app = typer.Typer(no_args_is_help=True, help="Comment operations.")

COMMENT_COLUMNS = [
    ("ID", lambda c: c.id),
    ("USER", lambda c: user_name(c.user)),
    ("DATE", lambda c: c.date),
    ("TEXT", lambda c: c.comment_text),
]


@app.command("list")
def list_comments(ctx: typer.Context, task_id: str = typer.Argument(..., help="Task ID.")):
    """List comments on a task."""
    result = run(ctx, lambda c: c.comments.list(task_id))
    output(ctx, result, result.comments, COMMENT_COLUMNS, title="Comments")


@app.command()
def add(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID."),
    text: str = typer.Argument(..., help="Comment text."),
):
    """Add a comment to a task."""
    comment = run(ctx, lambda c: c.comments.add(task_id, text))
    output(ctx, comment, [comment], COMMENT_COLUMNS)


@app.command()
def update(
    ctx: typer.Context,
    comment_id: str = typer.Argument(..., help="Comment ID."),
    text: Optional[str] = typer.Option(None, help="New text."),
    resolved: Optional[bool] = typer.Option(None, "--resolved/--unresolved", help="Resolution state."),
):
    """Edit or resolve a comment."""
    req = UpdateCommentRequest(comment_text=text, resolved=resolved)
    run(ctx, lambda c: c.comments.update(comment_id, req))
    done(ctx, f"Comment {comment_id} updated", comment_id=comment_id)


@app.command()
def delete(ctx: typer.Context, comment_id: str = typer.Argument(..., help="Comment ID.")):
    """Delete a comment."""
    run(ctx, lambda c: c.comments.delete(comment_id))
    done(ctx, f"Comment {comment_id} deleted", comment_id=comment_id)


@app.command()
def replies(ctx: typer.Context, comment_id: str = typer.Argument(..., help="Comment ID.")):
    """List threaded replies to a comment."""
    result = run(ctx, lambda c: c.comments.replies(comment_id))
    output(ctx, result, result.comments, COMMENT_COLUMNS, title="Replies")


@app.command()
def reply(
    ctx: typer.Context,
    comment_id: str = typer.Argument(..., help="Comment ID."),
    text: str = typer.Argument(..., help="Reply text."),
    assignee: Optional[int] = typer.Option(None, help="Assign the reply to a user ID."),
):
    """Reply to a comment."""
    comment = run(ctx, lambda c: c.comments.reply(comment_id, text, assignee=assignee))
    output(ctx, comment, [comment], COMMENT_COLUMNS)
