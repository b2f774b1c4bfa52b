"""``clickup-cli workspaces | members``."""

from typing import Optional

import typer

from clickup_cli.cli.common import output, run, team_id
from clickup_cli.formatting import user_name

workspaces_app = typer.Typer(no_args_is_help=True, help="Workspace operations.")
members_app = typer.Typer(no_args_is_help=True, help="Team member operations.")

WORKSPACE_COLUMNS = [
    ("ID", lambda w: w.id),
    ("NAME", lambda w: w.name),
    ("MEMBERS", lambda w: len(w.members)),
]

MEMBER_COLUMNS = [
    ("ID", lambda m: m.user.id),
    ("USERNAME", lambda m: user_name(m.user)),
    ("EMAIL", lambda m: m.user.email),
]


@workspaces_app.command("list")
def list_workspaces(ctx: typer.Context):
    """List the workspaces (teams) the key can access."""
    result = run(ctx, lambda c: c.workspaces.list())
    output(ctx, result, result.teams, WORKSPACE_COLUMNS, title="Workspaces")


@workspaces_app.command()
def plan(
    ctx: typer.Context,
    team: Optional[str] = typer.Option(None, "--team-id", help="Team ID."),
):
    """Show the workspace plan."""
    tid = team_id(team)
    result = run(ctx, lambda c: c.workspaces.plan(tid))
    output(ctx, result, [result], [("PLAN_ID", lambda p: p.plan_id), ("PLAN_NAME", lambda p: p.plan_name)])


@workspaces_app.command()
def seats(
    ctx: typer.Context,
    team: Optional[str] = typer.Option(None, "--team-id", help="Team ID."),
):
    """Show used and available seats."""
    tid = team_id(team)
    result = run(ctx, lambda c: c.workspaces.seats(tid))
    rows = [("members", result.members), ("guests", result.guests)]
    output(ctx, result, rows, [
        ("KIND", lambda r: r[0]),
        ("FILLED", lambda r: r[1].get("filled_members_seats", r[1].get("filled_guest_seats"))),
        ("TOTAL", lambda r: r[1].get("total_member_seats", r[1].get("total_guest_seats"))),
        ("EMPTY", lambda r: r[1].get("empty_member_seats", r[1].get("empty_guest_seats"))),
    ])


@members_app.command("list")
def list_members(
    ctx: typer.Context,
    team: Optional[str] = typer.Option(None, "--team-id", help="Team ID."),
):
    """List members of a team."""
    tid = team_id(team)
    members = run(ctx, lambda c: c.members.list(tid))
    output(ctx, members, members, MEMBER_COLUMNS, title="Members")
