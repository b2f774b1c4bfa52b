"""``clickup-cli auth``: credentials, identity and default IDs."""

import os
import sys
from typing import Optional

import typer

from clickup_cli import config
from clickup_cli.cli.common import done, get_state, guard, output, run, usage_error
from clickup_cli.formatting import format_json, redact
from clickup_cli.models import OAuthTokenRequest
from clickup_cli.secret_store import SecretStore

app = typer.Typer(no_args_is_help=True, help="Auth and credentials.")


def _read_key(key: Optional[str], stdin: bool) -> str:
    if key:
        typer.echo(
            "Warning: passing keys as arguments exposes them in shell history. Use --stdin instead.",
            err=True,
        )
        return key.strip()
    if sys.stdin.isatty():
        return typer.prompt("Enter API key", hide_input=True, err=True).strip()
    if stdin:
        return sys.stdin.read().strip()
    return ""


@app.command("set-key")
def set_key(
    ctx: typer.Context,
    key: Optional[str] = typer.Argument(None, help="API key (discouraged; exposes it in shell history)."),
    stdin: bool = typer.Option(True, "--stdin/--no-stdin", help="Read the API key from stdin."),
):
    """Store the API key in the keyring."""
    api_key = _read_key(key, stdin)
    if not api_key:
        raise usage_error("API key cannot be empty")

    guard(lambda: SecretStore.open().set_api_key(api_key))
    done(ctx, "API key stored in keyring")


@app.command()
def status(ctx: typer.Context):
    """Show authentication status."""
    env_override = bool(os.environ.get("CLICKUP_API_KEY", "").strip())
    store = guard(SecretStore.open)
    has_key = guard(store.has_key)

    info = {
        "has_key": has_key,
        "env_override": env_override,
        "storage_backend": store.backend_name,
    }
    if has_key and not env_override:
        info["key_redacted"] = redact(guard(store.get_api_key))

    if get_state(ctx).mode.json:
        typer.echo(format_json(info))
        return

    lines = [f"Storage: {info['storage_backend']}"]
    if env_override:
        lines.append("Status: Using CLICKUP_API_KEY environment variable")
    elif has_key:
        lines.append("Status: Authenticated")
        lines.append(f"Key: {info['key_redacted']}")
    else:
        lines.append("Status: Not authenticated")
        lines.append("Run: clickup-cli auth set-key --stdin")
    typer.echo("\n".join(lines))


@app.command()
def remove(ctx: typer.Context):
    """Remove the stored API key."""
    guard(lambda: SecretStore.open().delete_api_key())
    done(ctx, "API key removed")


@app.command()
def whoami(ctx: typer.Context):
    """Show the user that owns the API key."""
    result = run(ctx, lambda c: c.auth.whoami())
    user = result.user
    output(ctx, result, [user], [
        ("ID", lambda u: u.id),
        ("USERNAME", lambda u: u.username),
        ("EMAIL", lambda u: u.email),
    ])


@app.command("set-team")
def set_team(ctx: typer.Context, team_id: str = typer.Argument(..., help="Team (workspace) ID for v2 calls.")):
    """Save the default team ID to the config file."""
    path = guard(lambda: config.save_config(team_id=team_id.strip()))
    done(ctx, f"Team ID saved to {path}", team_id=team_id.strip())


@app.command("set-workspace")
def set_workspace(ctx: typer.Context, workspace_id: str = typer.Argument(..., help="Workspace ID for v3 calls.")):
    """Save the default workspace ID to the config file."""
    path = guard(lambda: config.save_config(workspace_id=workspace_id.strip()))
    done(ctx, f"Workspace ID saved to {path}", workspace_id=workspace_id.strip())


@app.command("oauth-token")
def oauth_token(
    ctx: typer.Context,
    client_id: str = typer.Option(..., help="OAuth app client ID."),
    client_secret: str = typer.Option(..., help="OAuth app client secret."),
    code: str = typer.Option(..., help="Authorization code from the redirect."),
):
    """Exchange an OAuth authorization code for an access token."""
    req = OAuthTokenRequest(client_id=client_id, client_secret=client_secret, code=code)
    result = run(ctx, lambda c: c.auth.token(req), anonymous=True)
    output(ctx, result, [result], [("ACCESS_TOKEN", lambda r: r.access_token)])
