"""Versioned API path construction.

ClickUp mixes v2 and v3 endpoints. Only v3 is workspace-scoped, so the
workspace check lives here and runs before any request is built.
"""

from __future__ import annotations

import re
from enum import Enum
from urllib.parse import quote

from clickup_cli.errors import IDRequiredError, WorkspaceIDRequiredError

_MULTI_SLASH = re.compile(r"/{2,}")


def escape_segment(value: str | int | Enum) -> str:
    """Percent-escape a single path segment (``/``, ``?``, ``#`` included).

    Enum members contribute their value, so ``ParentType.TASK`` gives ``task``.
    """
    if isinstance(value, Enum):
        value = value.value
    text = str(value).strip()
    if not text:
        raise IDRequiredError()
    return quote(text, safe="")


def _render(template: str, args: tuple) -> str:
    path = template.format(*(escape_segment(a) for a in args))
    if not path.startswith("/"):
        path = "/" + path
    return _MULTI_SLASH.sub("/", path)


class PathBuilder:
    """Builds ``/v2/...`` and ``/v3/workspaces/{id}/...`` paths.

    Templates use ``{}`` placeholders; every argument is path-escaped.

        paths = PathBuilder(workspace_id="9001")
        paths.v2("/task/{}/comment", "abc")      # /v2/task/abc/comment
        paths.v3("/tasks/{}/home_list/{}", t, l) # /v3/workspaces/9001/tasks/...
    """

    def __init__(self, workspace_id: str | None = None) -> None:
        self.workspace_id = (workspace_id or "").strip()

    def v2(self, template: str, *args: str | int) -> str:
        return "/v2" + _render(template, args)

    def v3(self, template: str, *args: str | int) -> str:
        if not self.workspace_id:
            raise WorkspaceIDRequiredError()
        prefix = "/v3/workspaces/" + quote(self.workspace_id, safe="")
        return prefix + _render(template, args)
