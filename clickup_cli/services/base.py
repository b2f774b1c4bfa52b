"""Shared plumbing for the resource services."""

from __future__ import annotations

from typing import Any

from clickup_cli.errors import ClickUpError, IDRequiredError, NameRequiredError
from clickup_cli.paths import PathBuilder
from clickup_cli.transport import Transport


def require_ids(*values: Any) -> None:
    """Raise IDRequiredError if any value is None or blank."""
    for value in values:
        if value is None or not str(value).strip():
            raise IDRequiredError()


def require_text(value: str | None, error: type[ClickUpError] = NameRequiredError) -> None:
    if value is None or not value.strip():
        raise error()


def clean_ids(values: list[str] | None) -> list[str]:
    """Strip IDs and drop the blank ones."""
    return [v.strip() for v in values or [] if v and v.strip()]


class Service:
    """One resource family. Every public method issues at most one request."""

    def __init__(self, transport: Transport, paths: PathBuilder) -> None:
        self._transport = transport
        self._paths = paths

    async def _call(
        self,
        op: str,
        method: str,
        path: str,
        *,
        query: str = "",
        body: Any = None,
        into: Any = None,
        files: dict[str, Any] | None = None,
    ) -> Any:
        try:
            return await self._transport.execute(
                method, path, query=query, body=body, into=into, files=files
            )
        except ClickUpError as e:
            raise e.add_context(op)
