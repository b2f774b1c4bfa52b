"""ClickUp API client: one Transport shared by every resource service.

Usage:
    async with ClickUpClient(api_key, workspace_id="9001") as client:
        tasks = await client.tasks.list("list-1", status="open")
        await client.tasks.move("task-1", "list-2")   # v3, needs workspace_id
"""

from __future__ import annotations

import os
from typing import Any, Optional

import httpx

from clickup_cli import config
from clickup_cli.errors import MissingAPIKeyError
from clickup_cli.paths import PathBuilder
from clickup_cli.services import (
    ACLsService,
    AttachmentsService,
    AuditLogsService,
    AuthService,
    ChatService,
    ChecklistsService,
    CommentsService,
    CustomFieldsService,
    DocsService,
    FoldersService,
    GoalsService,
    GuestsService,
    LegacyTimeService,
    ListsService,
    MembersService,
    RelationshipsService,
    RolesService,
    SharedService,
    SpacesService,
    TagsService,
    TasksService,
    TaskTypesService,
    TemplatesService,
    TimeService,
    UserGroupsService,
    UsersService,
    ViewsService,
    WebhooksService,
    WorkspacesService,
)
from clickup_cli.transport import DEFAULT_BASE_URL, Transport


def default_user_agent() -> str:
    from clickup_cli import __version__
    return f"clickup-cli/{__version__}"


class ClickUpClient:
    """Async wrapper around the ClickUp v2 and v3 APIs.

    The credential and workspace ID are fixed at construction. Service
    attributes (``tasks``, ``spaces``, ``comments``, ...) share one
    httpx.AsyncClient and are safe to use from concurrent tasks.
    """

    def __init__(
        self,
        api_key: str,
        *,
        workspace_id: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: Optional[str] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._transport = Transport(
            api_key,
            base_url=base_url,
            user_agent=user_agent or default_user_agent(),
            http_transport=http_transport,
        )
        self.paths = PathBuilder(workspace_id)

        args = (self._transport, self.paths)
        self.auth = AuthService(*args)
        self.workspaces = WorkspacesService(*args)
        self.tasks = TasksService(*args)
        self.spaces = SpacesService(*args)
        self.folders = FoldersService(*args)
        self.lists = ListsService(*args)
        self.members = MembersService(*args)
        self.comments = CommentsService(*args)
        self.time = TimeService(*args)
        self.legacy_time = LegacyTimeService(*args)
        self.tags = TagsService(*args)
        self.checklists = ChecklistsService(*args)
        self.relationships = RelationshipsService(*args)
        self.custom_fields = CustomFieldsService(*args)
        self.views = ViewsService(*args)
        self.webhooks = WebhooksService(*args)
        self.goals = GoalsService(*args)
        self.users = UsersService(*args)
        self.user_groups = UserGroupsService(*args)
        self.roles = RolesService(*args)
        self.guests = GuestsService(*args)
        self.shared = SharedService(*args)
        self.templates = TemplatesService(*args)
        self.task_types = TaskTypesService(*args)
        self.audit_logs = AuditLogsService(*args)
        self.acls = ACLsService(*args)
        self.chat = ChatService(*args)
        self.docs = DocsService(*args)
        self.attachments = AttachmentsService(*args)

    @property
    def workspace_id(self) -> str:
        return self.paths.workspace_id

    @property
    def transport(self) -> Transport:
        return self._transport

    @classmethod
    def from_env(
        cls,
        *,
        workspace_id: Optional[str] = None,
        store: Any = None,
        **kwargs: Any,
    ) -> "ClickUpClient":
        """Build a client from CLICKUP_* variables, the config file and the secret store.

        The API key comes from CLICKUP_API_KEY, else from ``store`` (a
        SecretStore; opened on demand when omitted).
        """
        api_key = os.getenv("CLICKUP_API_KEY", "").strip()
        if not api_key:
            if store is None:
                from clickup_cli.secret_store import SecretStore
                store = SecretStore.open()
            api_key = store.get_api_key().strip()
        if not api_key:
            raise MissingAPIKeyError()
        kwargs.setdefault("base_url", os.getenv("CLICKUP_BASE_URL", "").strip() or DEFAULT_BASE_URL)
        return cls(api_key, workspace_id=config.resolve_workspace_id(workspace_id), **kwargs)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._transport.close()

    async def __aenter__(self) -> "ClickUpClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
