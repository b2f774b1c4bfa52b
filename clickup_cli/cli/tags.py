"""``clickup-cli tags``: space tags and task tagging."""

from typing import Optional

import typer

from clickup_cli.cli.common import done, output, run
from clickup_cli.models import CreateSpaceTagRequest, EditSpaceTagRequest, SpaceTag

app = typer.Typer(no_args_is_help=True, help="Tag operations.")

TAG_COLUMNS = [
    ("NAME", lambda t: t.name),
    ("FG", lambda t: t.tag_fg),
    ("BG", lambda t: t.tag_bg),
]


@app.command("list")
def list_tags(ctx: typer.Context, space_id: str = typer.Argument(..., help="Space ID.")):
    """List tags defined in a space."""
    result = run(ctx, lambda c: c.tags.list(space_id))
    output(ctx, result, result.tags, TAG_COLUMNS, title="Tags")


@app.command()
def create(
    ctx: typer.Context,
    space_id: str = typer.Argument(..., help="Space ID."),
    name: str = typer.Argument(..., help="Tag name."),
    fg: Optional[str] = typer.Option(None, help="Foreground color (hex)."),
    bg: Optional[str] = typer.Option(None, help="Background color (hex)."),
):
    """Create a space tag."""
    req = CreateSpaceTagRequest(tag=SpaceTag(name=name, tag_fg=fg, tag_bg=bg))
    run(ctx, lambda c: c.tags.create(space_id, req))
    done(ctx, f"Tag {name} created", space_id=space_id, name=name)


@app.command()
def update(
    ctx: typer.Context,
    space_id: str = typer.Argument(..., help="Space ID."),
    name: str = typer.Argument(..., help="Current tag name."),
    new_name: Optional[str] = typer.Option(None, help="New tag name."),
    fg: Optional[str] = typer.Option(None, help="Foreground color (hex)."),
    bg: Optional[str] = typer.Option(None, help="Background color (hex)."),
):
    """Rename or recolor a space tag."""
    req = EditSpaceTagRequest(tag=SpaceTag(name=new_name or name, tag_fg=fg, tag_bg=bg))
    run(ctx, lambda c: c.tags.update(space_id, name, req))
    done(ctx, f"Tag {name} updated", space_id=space_id, name=new_name or name)


@app.command()
def delete(
    ctx: typer.Context,
    space_id: str = typer.Argument(..., help="Space ID."),
    name: str = typer.Argument(..., help="Tag name."),
):
    """Delete a space tag."""
    run(ctx, lambda c: c.tags.delete(space_id, name))
    done(ctx, f"Tag {name} deleted", space_id=space_id, name=name)


@app.command()
def add(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID."),
    name: str = typer.Argument(..., help="Tag name."),
):
    """Tag a task."""
    run(ctx, lambda c: c.tags.add_to_task(task_id, name))
    done(ctx, f"Tag {name} added to task {task_id}", task_id=task_id, name=name)


@app.command()
def remove(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID."),
    name: str = typer.Argument(..., help="Tag name."),
):
    """Remove a tag from a task."""
    run(ctx, lambda c: c.tags.remove_from_task(task_id, name))
    done(ctx, f"Tag {name} removed from task {task_id}", task_id=task_id, name=name)
