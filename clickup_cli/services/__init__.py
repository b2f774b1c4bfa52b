"""Resource services, one per ClickUp resource family."""

from clickup_cli.services.auth import AuthService, WorkspacesService
from clickup_cli.services.chat import ChatService
from clickup_cli.services.comments import CommentsService
from clickup_cli.services.docs import DocsService
from clickup_cli.services.goals import GoalsService
from clickup_cli.services.hierarchy import FoldersService, ListsService, SharedService, SpacesService
from clickup_cli.services.organize import (
    ChecklistsService,
    CustomFieldsService,
    RelationshipsService,
    TagsService,
)
from clickup_cli.services.people import (
    GuestsService,
    MembersService,
    RolesService,
    UserGroupsService,
    UsersService,
)
from clickup_cli.services.tasks import TasksService, TaskTypesService, TemplatesService
from clickup_cli.services.time import LegacyTimeService, TimeService
from clickup_cli.services.views import ViewsService
from clickup_cli.services.webhooks import WebhooksService
from clickup_cli.services.workspace import ACLsService, AttachmentsService, AuditLogsService

__all__ = [
    "ACLsService",
    "AttachmentsService",
    "AuditLogsService",
    "AuthService",
    "ChatService",
    "ChecklistsService",
    "CommentsService",
    "CustomFieldsService",
    "DocsService",
    "FoldersService",
    "GoalsService",
    "GuestsService",
    "LegacyTimeService",
    "ListsService",
    "MembersService",
    "RelationshipsService",
    "RolesService",
    "SharedService",
    "SpacesService",
    "TagsService",
    "TaskTypesService",
    "TasksService",
    "TemplatesService",
    "TimeService",
    "UserGroupsService",
    "UsersService",
    "ViewsService",
    "WebhooksService",
    "WorkspacesService",
]
