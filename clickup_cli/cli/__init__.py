"""clickup-cli: ClickUp from the command line.

Global options come before the command group:

    clickup-cli --json tasks list --list 901
    clickup-cli --workspace 9001 chat channels
"""

import logging
import sys
from typing import Optional

import typer
from dotenv import load_dotenv

from clickup_cli import __version__
from clickup_cli.cli import auth, chat, comments, docs, hierarchy, people, tags, tasks, time
from clickup_cli.cli.common import State, get_state, usage_error
from clickup_cli.errors import ClickUpValidationError
from clickup_cli.formatting import OutputMode, env_bool, format_json

app = typer.Typer(
    name="clickup-cli",
    help="ClickUp CLI - Project management from the command line.",
    no_args_is_help=True,
)

app.add_typer(auth.app, name="auth")
app.add_typer(people.workspaces_app, name="workspaces")
app.add_typer(tasks.app, name="tasks")
app.add_typer(hierarchy.spaces_app, name="spaces")
app.add_typer(hierarchy.folders_app, name="folders")
app.add_typer(hierarchy.lists_app, name="lists")
app.add_typer(people.members_app, name="members")
app.add_typer(comments.app, name="comments")
app.add_typer(time.app, name="time")
app.add_typer(tags.app, name="tags")
app.add_typer(chat.app, name="chat")
app.add_typer(docs.app, name="docs")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


@app.callback()
def callback(
    ctx: typer.Context,
    json_out: bool = typer.Option(False, "--json", help="Output JSON to stdout (best for scripting)."),
    plain_out: bool = typer.Option(False, "--plain", help="Output stable TSV to stdout."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    workspace: Optional[str] = typer.Option(
        None, "--workspace", help="Workspace ID for v3 API calls (chat, docs, task move)."
    ),
):
    """ClickUp CLI.

    Credentials come from CLICKUP_API_KEY or the keyring (clickup-cli auth
    set-key). CLICKUP_JSON=1 and CLICKUP_PLAIN=1 set the default output mode.
    """
    configure_logging(verbose)
    json_out = json_out or (env_bool("CLICKUP_JSON") and not plain_out)
    plain_out = plain_out or (env_bool("CLICKUP_PLAIN") and not json_out)
    try:
        mode = OutputMode.from_flags(json_out, plain_out)
    except ClickUpValidationError as e:
        raise usage_error(str(e)) from e
    ctx.obj = State(mode=mode, workspace=workspace)


@app.command()
def version(ctx: typer.Context):
    """Print version."""
    if get_state(ctx).mode.json:
        typer.echo(format_json({"version": __version__}))
    else:
        typer.echo(f"clickup-cli {__version__}")


def main() -> None:
    """Console-script entry point."""
    load_dotenv()
    app()
