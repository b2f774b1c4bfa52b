"""Shared plumbing for CLI commands: global state, running, output and errors."""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, Sequence, TypeVar

import typer

from clickup_cli import config
from clickup_cli.client import ClickUpClient
from clickup_cli.errors import (
    ClickUpAPIError,
    ClickUpError,
    ForbiddenError,
    HTTPRequestError,
    MissingAPIKeyError,
    NotFoundError,
    RateLimitedError,
    RequestCancelledError,
    SecretNotFoundError,
    UnauthorizedError,
    WorkspaceIDRequiredError,
)
from clickup_cli.formatting import (
    Column,
    OutputMode,
    format_json,
    format_plain,
    format_record_md,
    format_records_md,
    format_table,
)
from clickup_cli.transport import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

T = TypeVar("T")

EXIT_OK = 0
EXIT_LOCAL = 1
EXIT_SERVICE = 2
EXIT_AUTH = 3

SET_KEY_HINT = "run: clickup-cli auth set-key --stdin"


@dataclass
class State:
    mode: OutputMode = field(default_factory=OutputMode)
    workspace: Optional[str] = None


def get_state(ctx: typer.Context) -> State:
    obj = ctx.find_root().obj
    return obj if isinstance(obj, State) else State()


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

def describe_error(e: ClickUpError) -> tuple[str, int]:
    """User-facing message and exit code for a client error."""
    if isinstance(e, UnauthorizedError):
        return (
            f"{e}\nAuthentication failed. Your ClickUp API key may be expired or invalid; "
            f"{SET_KEY_HINT}",
            EXIT_AUTH,
        )
    if isinstance(e, ForbiddenError):
        return f"{e}\nPermission denied. Check that your key can access this resource.", EXIT_AUTH
    if isinstance(e, (MissingAPIKeyError, SecretNotFoundError)):
        return f"no credentials found; {SET_KEY_HINT}", EXIT_AUTH
    if isinstance(e, NotFoundError):
        return f"{e}\nResource not found. Check that the IDs are correct.", EXIT_SERVICE
    if isinstance(e, RateLimitedError):
        return f"{e}\nRate limit exceeded. Wait a moment before retrying.", EXIT_SERVICE
    if isinstance(e, (ClickUpAPIError, HTTPRequestError, RequestCancelledError)):
        return str(e), EXIT_SERVICE
    if isinstance(e, WorkspaceIDRequiredError):
        return f"{e} (or run: clickup-cli auth set-workspace <ID>)", EXIT_LOCAL
    return str(e), EXIT_LOCAL


def fail(e: ClickUpError) -> typer.Exit:
    message, code = describe_error(e)
    logger.debug("Command failed", exc_info=e)
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(code)


def usage_error(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(EXIT_LOCAL)


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------

def run(
    ctx: typer.Context,
    call: Callable[[ClickUpClient], Awaitable[T]],
    *,
    anonymous: bool = False,
) -> T:
    """Open a client from the environment, await ``call(client)`` and close it.

    The client, and with it the keyring, is opened before the event loop
    starts because keyring backends block. Client errors become
    ``Error: ...`` on stderr and the matching exit code. ``anonymous`` skips
    credential lookup (OAuth code exchange).
    """
    state = get_state(ctx)

    def connect() -> ClickUpClient:
        if anonymous:
            base_url = os.getenv("CLICKUP_BASE_URL", "").strip() or DEFAULT_BASE_URL
            return ClickUpClient("", base_url=base_url)
        return ClickUpClient.from_env(workspace_id=state.workspace)

    async def main(client: ClickUpClient) -> T:
        async with client:
            return await call(client)

    try:
        client = connect()
        return asyncio.run(main(client))
    except ClickUpError as e:
        raise fail(e) from e


def guard(func: Callable[[], T]) -> T:
    """Run a local (non-HTTP) action with the same error mapping as ``run``."""
    try:
        return func()
    except ClickUpError as e:
        raise fail(e) from e


def team_id(flag: Optional[str] = None) -> str:
    """Team ID from the flag, CLICKUP_TEAM_ID or the config file."""
    value = guard(lambda: config.resolve_team_id(flag))
    if not value:
        raise usage_error("no team ID configured; run: clickup-cli auth set-team <TEAM_ID>")
    return value


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def output(
    ctx: typer.Context,
    result: Any,
    items: Sequence[Any],
    columns: Sequence[Column],
    title: str = "",
    human: Optional[str] = None,
) -> None:
    """Print ``result`` as JSON, or ``items`` as TSV or human-readable text."""
    mode = get_state(ctx).mode
    if mode.json:
        typer.echo(format_json(result))
    elif mode.plain:
        typer.echo(format_table(items, columns))
    elif human is not None:
        typer.echo(human)
    elif title:
        typer.echo(format_records_md(title, items, columns))
    else:
        for item in items:
            typer.echo(format_record_md(item, columns))


def done(ctx: typer.Context, message: str, **ids: str) -> None:
    """Confirm an action that returns no body."""
    mode = get_state(ctx).mode
    if mode.json:
        typer.echo(format_json({"status": "success", "message": message, **ids}))
    elif mode.plain:
        headers = ["STATUS"] + [k.upper() for k in ids]
        typer.echo(format_plain(headers, [["success", *ids.values()]]))
    else:
        typer.echo(message, err=True)
