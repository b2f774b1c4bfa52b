"""``clickup-cli spaces | folders | lists``: the workspace hierarchy."""

from typing import Optional

import typer

from clickup_cli.cli.common import done, output, run, team_id, usage_error
from clickup_cli.models import (
    CreateFolderRequest,
    CreateListRequest,
    CreateSpaceRequest,
    UpdateFolderRequest,
    UpdateListRequest,
    UpdateSpaceRequest,
)

spaces_app = typer.Typer(no_args_is_help=True, help="Space operations.")
folders_app = typer.Typer(no_args_is_help=True, help="Folder operations.")
lists_app = typer.Typer(no_args_is_help=True, help="List operations.")

SPACE_COLUMNS = [
    ("ID", lambda s: s.id),
    ("NAME", lambda s: s.name),
    ("PRIVATE", lambda s: s.private),
    ("STATUSES", lambda s: ", ".join(st.status for st in s.statuses)),
]

FOLDER_COLUMNS = [
    ("ID", lambda f: f.id),
    ("NAME", lambda f: f.name),
    ("LISTS", lambda f: len(f.lists)),
    ("TASK_COUNT", lambda f: f.task_count),
]

LIST_COLUMNS = [
    ("ID", lambda lst: lst.id),
    ("NAME", lambda lst: lst.name),
    ("FOLDER", lambda lst: lst.folder.name if lst.folder else ""),
    ("TASK_COUNT", lambda lst: lst.task_count),
]


# ---------------------------------------------------------------------------
# Spaces
# ---------------------------------------------------------------------------

@spaces_app.command("list")
def list_spaces(
    ctx: typer.Context,
    team: Optional[str] = typer.Option(None, "--team-id", help="Team ID (defaults to the configured team)."),
):
    """List spaces in a team."""
    tid = team_id(team)
    result = run(ctx, lambda c: c.spaces.list(tid))
    output(ctx, result, result.spaces, SPACE_COLUMNS, title="Spaces")


@spaces_app.command("get")
def get_space(ctx: typer.Context, space_id: str = typer.Argument(..., help="Space ID.")):
    """Get a space by ID."""
    space = run(ctx, lambda c: c.spaces.get(space_id))
    output(ctx, space, [space], SPACE_COLUMNS)


@spaces_app.command("create")
def create_space(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Space name."),
    team: Optional[str] = typer.Option(None, "--team-id", help="Team ID."),
    multiple_assignees: Optional[bool] = typer.Option(None, help="Allow several assignees per task."),
):
    """Create a space."""
    tid = team_id(team)
    req = CreateSpaceRequest(name=name, multiple_assignees=multiple_assignees)
    space = run(ctx, lambda c: c.spaces.create(tid, req))
    output(ctx, space, [space], SPACE_COLUMNS)


@spaces_app.command("update")
def update_space(
    ctx: typer.Context,
    space_id: str = typer.Argument(..., help="Space ID."),
    name: Optional[str] = typer.Option(None, help="New name."),
    color: Optional[str] = typer.Option(None, help="New color (hex)."),
    private: Optional[bool] = typer.Option(None, "--private/--public", help="Visibility."),
):
    """Update a space."""
    req = UpdateSpaceRequest(name=name, color=color, private=private)
    space = run(ctx, lambda c: c.spaces.update(space_id, req))
    output(ctx, space, [space], SPACE_COLUMNS)


@spaces_app.command("delete")
def delete_space(ctx: typer.Context, space_id: str = typer.Argument(..., help="Space ID.")):
    """Delete a space."""
    run(ctx, lambda c: c.spaces.delete(space_id))
    done(ctx, f"Space {space_id} deleted", space_id=space_id)


# ---------------------------------------------------------------------------
# Folders
# ---------------------------------------------------------------------------

@folders_app.command("list")
def list_folders(ctx: typer.Context, space_id: str = typer.Argument(..., help="Space ID.")):
    """List folders in a space."""
    result = run(ctx, lambda c: c.folders.list(space_id))
    output(ctx, result, result.folders, FOLDER_COLUMNS, title="Folders")


@folders_app.command("get")
def get_folder(ctx: typer.Context, folder_id: str = typer.Argument(..., help="Folder ID.")):
    """Get a folder by ID."""
    folder = run(ctx, lambda c: c.folders.get(folder_id))
    output(ctx, folder, [folder], FOLDER_COLUMNS)


@folders_app.command("create")
def create_folder(
    ctx: typer.Context,
    space_id: str = typer.Argument(..., help="Space ID."),
    name: str = typer.Argument(..., help="Folder name."),
):
    """Create a folder in a space."""
    folder = run(ctx, lambda c: c.folders.create(space_id, CreateFolderRequest(name=name)))
    output(ctx, folder, [folder], FOLDER_COLUMNS)


@folders_app.command("update")
def update_folder(
    ctx: typer.Context,
    folder_id: str = typer.Argument(..., help="Folder ID."),
    name: str = typer.Option(..., help="New name."),
):
    """Rename a folder."""
    folder = run(ctx, lambda c: c.folders.update(folder_id, UpdateFolderRequest(name=name)))
    output(ctx, folder, [folder], FOLDER_COLUMNS)


@folders_app.command("delete")
def delete_folder(ctx: typer.Context, folder_id: str = typer.Argument(..., help="Folder ID.")):
    """Delete a folder."""
    run(ctx, lambda c: c.folders.delete(folder_id))
    done(ctx, f"Folder {folder_id} deleted", folder_id=folder_id)


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------

@lists_app.command("list")
def list_lists(
    ctx: typer.Context,
    folder: Optional[str] = typer.Option(None, help="Folder ID."),
    space: Optional[str] = typer.Option(None, help="Space ID (folderless lists)."),
):
    """List the lists in a folder, or the folderless lists in a space."""
    if bool(folder) == bool(space):
        raise usage_error("pass exactly one of --folder or --space")
    if folder:
        result = run(ctx, lambda c: c.lists.list_by_folder(folder))
    else:
        result = run(ctx, lambda c: c.lists.list_folderless(space))
    output(ctx, result, result.lists, LIST_COLUMNS, title="Lists")


@lists_app.command("get")
def get_list(ctx: typer.Context, list_id: str = typer.Argument(..., help="List ID.")):
    """Get a list by ID."""
    lst = run(ctx, lambda c: c.lists.get(list_id))
    output(ctx, lst, [lst], LIST_COLUMNS)


@lists_app.command("create")
def create_list(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="List name."),
    folder: Optional[str] = typer.Option(None, help="Folder ID."),
    space: Optional[str] = typer.Option(None, help="Space ID (folderless list)."),
    content: Optional[str] = typer.Option(None, help="List description."),
):
    """Create a list in a folder or directly in a space."""
    if bool(folder) == bool(space):
        raise usage_error("pass exactly one of --folder or --space")
    req = CreateListRequest(name=name, content=content)
    if folder:
        lst = run(ctx, lambda c: c.lists.create_in_folder(folder, req))
    else:
        lst = run(ctx, lambda c: c.lists.create_folderless(space, req))
    output(ctx, lst, [lst], LIST_COLUMNS)


@lists_app.command("update")
def update_list(
    ctx: typer.Context,
    list_id: str = typer.Argument(..., help="List ID."),
    name: Optional[str] = typer.Option(None, help="New name."),
    content: Optional[str] = typer.Option(None, help="New description."),
):
    """Update a list."""
    req = UpdateListRequest(name=name, content=content)
    lst = run(ctx, lambda c: c.lists.update(list_id, req))
    output(ctx, lst, [lst], LIST_COLUMNS)


@lists_app.command("delete")
def delete_list(ctx: typer.Context, list_id: str = typer.Argument(..., help="List ID.")):
    """Delete a list."""
    run(ctx, lambda c: c.lists.delete(list_id))
    done(ctx, f"List {list_id} deleted", list_id=list_id)


@lists_app.command("add-task")
def add_task(
    ctx: typer.Context,
    list_id: str = typer.Argument(..., help="List ID."),
    task_id: str = typer.Argument(..., help="Task ID."),
):
    """Add a task to an additional list."""
    run(ctx, lambda c: c.lists.add_task(list_id, task_id))
    done(ctx, f"Task {task_id} added to list {list_id}", list_id=list_id, task_id=task_id)


@lists_app.command("remove-task")
def remove_task(
    ctx: typer.Context,
    list_id: str = typer.Argument(..., help="List ID."),
    task_id: str = typer.Argument(..., help="Task ID."),
):
    """Remove a task from an additional list."""
    run(ctx, lambda c: c.lists.remove_task(list_id, task_id))
    done(ctx, f"Task {task_id} removed from list {list_id}", list_id=list_id, task_id=task_id)
