"""Pydantic models for ClickUp requests and responses.

Response models accept unknown fields (``extra="allow"``) so whatever the API
returns survives a decode and re-encode. Request models are strict and are
serialized with ``exclude_none``: ``None`` means "leave unchanged" and is
never sent, while ``False`` is sent as ``false``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _coerce_id(value: Any) -> Any:
    """Normalize a JSON number or string identifier to its string form."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return value


FlexibleID = Annotated[str, BeforeValidator(_coerce_id)]
"""Identifier that may arrive as ``123`` or ``"123"``; always stored as ``"123"``."""


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class KeyringBackend(str, Enum):
    """Secret store backends accepted by CLICKUP_KEYRING_BACKEND."""
    AUTO = "auto"
    KEYCHAIN = "keychain"
    FILE = "file"


class ParentType(str, Enum):
    """Hierarchy levels that can own views, fields, attachments and guests."""
    TEAM = "team"
    SPACE = "space"
    FOLDER = "folder"
    LIST = "list"
    TASK = "task"


# ---------------------------------------------------------------------------
# Shared model config
# ---------------------------------------------------------------------------

_STRICT_CONFIG = ConfigDict(
    str_strip_whitespace=True,
    validate_assignment=True,
    extra="forbid",
)

_RESPONSE_CONFIG = ConfigDict(
    extra="allow",
    populate_by_name=True,
)


class APIModel(BaseModel):
    """Base for decoded API payloads."""
    model_config = _RESPONSE_CONFIG


class RequestModel(BaseModel):
    """Base for request bodies."""
    model_config = _STRICT_CONFIG


# ---------------------------------------------------------------------------
# Users, members, workspaces
# ---------------------------------------------------------------------------

class User(APIModel):
    id: Optional[int] = None
    username: Optional[str] = None
    email: Optional[str] = None
    color: Optional[str] = None
    initials: Optional[str] = None


class Member(APIModel):
    user: User = Field(default_factory=User)


class Workspace(APIModel):
    id: FlexibleID = ""
    name: str = ""
    color: Optional[str] = None
    members: list[Member] = Field(default_factory=list)


class WorkspacesResponse(APIModel):
    teams: list[Workspace] = Field(default_factory=list)


class WorkspacePlanResponse(APIModel):
    plan_name: Optional[str] = None
    plan_id: Optional[FlexibleID] = None


class WorkspaceSeatsResponse(APIModel):
    members: dict[str, Any] = Field(default_factory=dict)
    guests: dict[str, Any] = Field(default_factory=dict)


class AuthorizedUserResponse(APIModel):
    user: User = Field(default_factory=User)


class UserDetail(APIModel):
    user: Optional[User] = None
    invited_by: Optional[User] = None
    shared: Optional[dict[str, Any]] = None


class UserResponse(APIModel):
    member: Optional[UserDetail] = None
    user: Optional[User] = None


class InviteUserRequest(RequestModel):
    email: str = ""
    admin: Optional[bool] = None
    custom_role_id: Optional[int] = None


class EditUserRequest(RequestModel):
    username: Optional[str] = None
    admin: Optional[bool] = None
    custom_role_id: Optional[int] = None


class OAuthTokenRequest(RequestModel):
    client_id: str = ""
    client_secret: str = ""
    code: str = ""


class OAuthTokenResponse(APIModel):
    access_token: str = ""


class UserGroup(APIModel):
    id: FlexibleID = ""
    team_id: Optional[FlexibleID] = None
    name: str = ""
    handle: Optional[str] = None
    members: list[User] = Field(default_factory=list)


class UserGroupsResponse(APIModel):
    groups: list[UserGroup] = Field(default_factory=list)


class MembersDelta(RequestModel):
    """Add/remove delta sent as ``{"add": [...], "rem": [...]}``."""
    add: Optional[list[int]] = None
    rem: Optional[list[int]] = None


class CreateUserGroupRequest(RequestModel):
    name: str = ""
    handle: Optional[str] = None
    members: Optional[list[int]] = None


class UpdateUserGroupRequest(RequestModel):
    name: Optional[str] = None
    handle: Optional[str] = None
    members: Optional[MembersDelta] = None


class CustomRole(APIModel):
    id: Optional[int] = None
    name: str = ""
    inherited_role: Optional[int] = None


class CustomRolesResponse(APIModel):
    custom_roles: list[CustomRole] = Field(default_factory=list)


class Guest(APIModel):
    user: Optional[User] = None
    invited_by: Optional[User] = None
    can_see_time_spent: Optional[bool] = None
    can_see_time_estimated: Optional[bool] = None
    can_edit_tags: Optional[bool] = None


class GuestResponse(APIModel):
    guest: Guest = Field(default_factory=Guest)


class InviteGuestRequest(RequestModel):
    email: str = ""
    can_edit_tags: Optional[bool] = None
    can_see_time_spent: Optional[bool] = None
    can_see_time_estimated: Optional[bool] = None
    can_create_views: Optional[bool] = None
    custom_role_id: Optional[int] = None


class EditGuestRequest(RequestModel):
    username: Optional[str] = None
    can_edit_tags: Optional[bool] = None
    can_see_time_spent: Optional[bool] = None
    can_see_time_estimated: Optional[bool] = None
    can_create_views: Optional[bool] = None
    custom_role_id: Optional[int] = None


class AddGuestToResourceRequest(RequestModel):
    permission_level: str = Field(
        default="read",
        description="One of read, comment, edit, create",
    )


# ---------------------------------------------------------------------------
# Hierarchy: spaces, folders, lists
# ---------------------------------------------------------------------------

class Ref(APIModel):
    """A ``{"id": ..., "name": ...}`` reference embedded in another object."""
    id: FlexibleID = ""
    name: Optional[str] = None


class Status(APIModel):
    status: str = ""
    color: Optional[str] = None
    type: Optional[str] = None
    orderindex: Optional[int] = None


class Space(APIModel):
    id: FlexibleID = ""
    name: str = ""
    private: Optional[bool] = None
    statuses: list[Status] = Field(default_factory=list)
    multiple_assignees: Optional[bool] = None
    features: Optional[dict[str, Any]] = None


class TaskList(APIModel):
    id: FlexibleID = ""
    name: str = ""
    orderindex: Optional[int] = None
    content: Optional[str] = None
    task_count: Optional[int] = None
    folder: Optional[Ref] = None
    space: Optional[Ref] = None


class Folder(APIModel):
    id: FlexibleID = ""
    name: str = ""
    hidden: Optional[bool] = None
    task_count: Optional[FlexibleID] = None
    space: Optional[Ref] = None
    lists: list[TaskList] = Field(default_factory=list)


class SpacesListResponse(APIModel):
    spaces: list[Space] = Field(default_factory=list)


class FoldersListResponse(APIModel):
    folders: list[Folder] = Field(default_factory=list)


class ListsListResponse(APIModel):
    lists: list[TaskList] = Field(default_factory=list)


class CreateSpaceRequest(RequestModel):
    name: str = ""
    multiple_assignees: Optional[bool] = None
    features: Optional[dict[str, Any]] = None


class UpdateSpaceRequest(RequestModel):
    name: Optional[str] = None
    color: Optional[str] = None
    private: Optional[bool] = None
    admin_can_manage: Optional[bool] = None
    multiple_assignees: Optional[bool] = None
    features: Optional[dict[str, Any]] = None


class CreateFolderRequest(RequestModel):
    name: str = ""


class UpdateFolderRequest(RequestModel):
    name: Optional[str] = None


class CreateFolderFromTemplateRequest(RequestModel):
    name: str = ""
    options: Optional[dict[str, Any]] = None


class CreateListRequest(RequestModel):
    name: str = ""
    content: Optional[str] = None
    markdown_content: Optional[str] = None
    due_date: Optional[int] = None
    due_date_time: Optional[bool] = None
    priority: Optional[int] = None
    assignee: Optional[int] = None
    status: Optional[str] = None


class UpdateListRequest(RequestModel):
    name: Optional[str] = None
    content: Optional[str] = None
    markdown_content: Optional[str] = None
    due_date: Optional[int] = None
    due_date_time: Optional[bool] = None
    priority: Optional[int] = None
    assignee: Optional[str] = None
    status: Optional[str] = None
    unset_status: Optional[bool] = None


class CreateListFromTemplateRequest(RequestModel):
    name: str = ""
    options: Optional[dict[str, Any]] = None


class SharedHierarchyResponse(APIModel):
    shared: dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------

class Priority(APIModel):
    id: Optional[FlexibleID] = None
    priority: Optional[str] = None
    color: Optional[str] = None


class Tag(APIModel):
    name: str = ""
    tag_fg: Optional[str] = None
    tag_bg: Optional[str] = None


class Task(APIModel):
    id: FlexibleID = ""
    custom_id: Optional[str] = None
    name: str = ""
    description: Optional[str] = None
    status: Optional[Status] = None
    priority: Optional[Priority] = None
    due_date: Optional[FlexibleID] = None
    date_created: Optional[FlexibleID] = None
    date_updated: Optional[FlexibleID] = None
    assignees: list[User] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    url: Optional[str] = None
    parent: Optional[str] = None
    home_list: Optional[Ref] = Field(default=None, alias="list")
    folder: Optional[Ref] = None
    space: Optional[Ref] = None


class TasksListResponse(APIModel):
    tasks: list[Task] = Field(default_factory=list)
    last_page: Optional[bool] = None


class CreateTaskRequest(RequestModel):
    name: str = ""
    description: Optional[str] = None
    markdown_description: Optional[str] = None
    assignees: Optional[list[int]] = None
    tags: Optional[list[str]] = None
    status: Optional[str] = None
    priority: Optional[int] = Field(default=None, ge=1, le=4, description="1=urgent .. 4=low")
    due_date: Optional[int] = None
    due_date_time: Optional[bool] = None
    start_date: Optional[int] = None
    start_date_time: Optional[bool] = None
    time_estimate: Optional[int] = None
    notify_all: Optional[bool] = None
    parent: Optional[str] = None
    links_to: Optional[str] = None


class TaskAssigneesUpdate(RequestModel):
    """Assignee delta for task updates: ``{"add": [...], "rem": [...]}``."""
    add: Optional[list[int]] = None
    rem: Optional[list[int]] = None


class UpdateTaskRequest(RequestModel):
    name: Optional[str] = None
    description: Optional[str] = None
    markdown_description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[int] = Field(default=None, ge=1, le=4)
    due_date: Optional[int] = None
    due_date_time: Optional[bool] = None
    start_date: Optional[int] = None
    start_date_time: Optional[bool] = None
    time_estimate: Optional[int] = None
    archived: Optional[bool] = None
    parent: Optional[str] = None
    assignees: Optional[TaskAssigneesUpdate] = None


class FilteredTeamTasksParams(RequestModel):
    """Filters for the workspace-wide task search.

    Zero-valued integers and false booleans mean "no filter".
    """
    page: int = 0
    order_by: str = ""
    reverse: bool = False
    subtasks: bool = False
    statuses: list[str] = Field(default_factory=list)
    include_closed: bool = False
    assignees: list[int] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    due_date_gt: int = 0
    due_date_lt: int = 0
    date_created_gt: int = 0
    date_created_lt: int = 0
    date_updated_gt: int = 0
    date_updated_lt: int = 0


class StatusTime(APIModel):
    status: str = ""
    color: Optional[str] = None
    total_time: Optional[dict[str, Any]] = None
    orderindex: Optional[int] = None


class TimeInStatusResponse(APIModel):
    current_status: Optional[StatusTime] = None
    status_history: list[StatusTime] = Field(default_factory=list)


BulkTimeInStatusResponse = dict[str, TimeInStatusResponse]


class MergeTasksRequest(RequestModel):
    merged_task_ids: list[str]


class MergeTasksResponse(APIModel):
    pass


class MoveTaskResponse(APIModel):
    pass


class CreateTaskFromTemplateRequest(RequestModel):
    name: str = ""


class TaskTemplate(APIModel):
    id: FlexibleID = ""
    name: str = ""


class TaskTemplatesResponse(APIModel):
    templates: list[TaskTemplate] = Field(default_factory=list)


class CustomTaskType(APIModel):
    id: Optional[int] = None
    name: str = ""
    name_plural: Optional[str] = None
    description: Optional[str] = None


class CustomTaskTypesResponse(APIModel):
    custom_items: list[CustomTaskType] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------

class Comment(APIModel):
    id: FlexibleID = ""
    comment_text: str = ""
    user: Optional[User] = None
    date: Optional[FlexibleID] = None
    resolved: Optional[bool] = None
    reply_count: Optional[FlexibleID] = None


class CommentsListResponse(APIModel):
    comments: list[Comment] = Field(default_factory=list)


class CommentIDResponse(APIModel):
    id: FlexibleID = ""


class CreateCommentRequest(RequestModel):
    comment_text: str = ""
    assignee: Optional[int] = None
    notify_all: Optional[bool] = None


class UpdateCommentRequest(RequestModel):
    comment_text: Optional[str] = None
    assignee: Optional[int] = None
    resolved: Optional[bool] = None


class PostSubtypesResponse(APIModel):
    data: list[dict[str, Any]] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Time tracking
# ---------------------------------------------------------------------------

class TimeEntry(APIModel):
    id: FlexibleID = ""
    task: Optional[Ref] = None
    wid: Optional[FlexibleID] = None
    user: Optional[User] = None
    billable: Optional[bool] = None
    start: Optional[FlexibleID] = None
    end: Optional[FlexibleID] = None
    duration: Optional[FlexibleID] = None
    description: Optional[str] = None
    tags: list[Tag] = Field(default_factory=list)


class TimeEntriesListResponse(APIModel):
    data: list[TimeEntry] = Field(default_factory=list)


class TimeEntryResponse(APIModel):
    data: Optional[TimeEntry] = None


class TimeEntryHistoryResponse(APIModel):
    data: list[dict[str, Any]] = Field(default_factory=list)


class TimeEntryTagsResponse(APIModel):
    data: list[Tag] = Field(default_factory=list)


class LogTimeRequest(RequestModel):
    duration: int
    tid: str
    start: int


class StartTimeEntryRequest(RequestModel):
    tid: Optional[str] = None
    description: Optional[str] = None
    billable: Optional[bool] = None
    tags: Optional[list[Tag]] = None


class UpdateTimeEntryRequest(RequestModel):
    description: Optional[str] = None
    start: Optional[int] = None
    end: Optional[int] = None
    duration: Optional[int] = None
    tid: Optional[str] = None
    billable: Optional[bool] = None
    tags: Optional[list[Tag]] = None
    tag_action: Optional[str] = None


class TimeEntryTagsRequest(RequestModel):
    time_entry_ids: list[str] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)


class RenameTimeEntryTagRequest(RequestModel):
    name: str = ""
    new_name: str = ""
    tag_bg: Optional[str] = None
    tag_fg: Optional[str] = None


class LegacyTimeResponse(APIModel):
    data: list[dict[str, Any]] = Field(default_factory=list)


class TrackTimeRequest(RequestModel):
    start: Optional[int] = None
    end: Optional[int] = None
    time: int = 0


class TrackTimeResponse(APIModel):
    id: FlexibleID = ""


class EditTimeRequest(RequestModel):
    start: Optional[int] = None
    end: Optional[int] = None
    time: Optional[int] = None


# ---------------------------------------------------------------------------
# Tags, checklists, relationships, custom fields
# ---------------------------------------------------------------------------

class SpaceTagsResponse(APIModel):
    tags: list[Tag] = Field(default_factory=list)


class SpaceTag(RequestModel):
    name: str = ""
    tag_fg: Optional[str] = None
    tag_bg: Optional[str] = None


class CreateSpaceTagRequest(RequestModel):
    tag: SpaceTag = Field(default_factory=SpaceTag)


class EditSpaceTagRequest(RequestModel):
    tag: SpaceTag = Field(default_factory=SpaceTag)


class ChecklistItem(APIModel):
    id: FlexibleID = ""
    name: str = ""
    orderindex: Optional[float] = None
    assignee: Optional[User] = None
    resolved: Optional[bool] = None
    parent: Optional[str] = None


class Checklist(APIModel):
    id: FlexibleID = ""
    task_id: Optional[str] = None
    name: str = ""
    orderindex: Optional[float] = None
    resolved: Optional[int] = None
    unresolved: Optional[int] = None
    items: list[ChecklistItem] = Field(default_factory=list)


class ChecklistResponse(APIModel):
    checklist: Checklist = Field(default_factory=Checklist)


class CreateChecklistRequest(RequestModel):
    name: str = ""


class EditChecklistRequest(RequestModel):
    name: Optional[str] = None
    position: Optional[int] = None


class CreateChecklistItemRequest(RequestModel):
    name: str = ""
    assignee: Optional[int] = None


class EditChecklistItemRequest(RequestModel):
    name: Optional[str] = None
    assignee: Optional[int] = None
    resolved: Optional[bool] = None
    parent: Optional[str] = None


class DependencyRequest(RequestModel):
    """Exactly one of ``depends_on`` / ``dependency_of`` is normally set."""
    depends_on: Optional[str] = None
    dependency_of: Optional[str] = None


class CustomField(APIModel):
    id: FlexibleID = ""
    name: str = ""
    type: Optional[str] = None
    type_config: Optional[dict[str, Any]] = None
    required: Optional[bool] = None
    date_created: Optional[FlexibleID] = None


class CustomFieldsResponse(APIModel):
    fields: list[CustomField] = Field(default_factory=list)


class SetCustomFieldRequest(RequestModel):
    value: Any = None


# ---------------------------------------------------------------------------
# Views, webhooks, goals
# ---------------------------------------------------------------------------

class View(APIModel):
    id: FlexibleID = ""
    name: str = ""
    type: Optional[str] = None
    parent: Optional[dict[str, Any]] = None
    protected: Optional[bool] = None


class ViewsResponse(APIModel):
    views: list[View] = Field(default_factory=list)


class ViewResponse(APIModel):
    view: View = Field(default_factory=View)


class CreateViewRequest(RequestModel):
    name: str = ""
    type: str = ""
    grouping: Optional[dict[str, Any]] = None
    divide: Optional[dict[str, Any]] = None
    sorting: Optional[dict[str, Any]] = None
    filters: Optional[dict[str, Any]] = None
    columns: Optional[dict[str, Any]] = None
    settings: Optional[dict[str, Any]] = None


class UpdateViewRequest(RequestModel):
    name: Optional[str] = None
    type: Optional[str] = None
    settings: Optional[dict[str, Any]] = None


class Webhook(APIModel):
    id: FlexibleID = ""
    userid: Optional[int] = None
    team_id: Optional[FlexibleID] = None
    endpoint: Optional[str] = None
    events: list[str] = Field(default_factory=list)
    status: Optional[str] = None
    secret: Optional[str] = None


class WebhooksResponse(APIModel):
    webhooks: list[Webhook] = Field(default_factory=list)


class CreateWebhookRequest(RequestModel):
    endpoint: str = ""
    events: list[str] = Field(default_factory=list)
    space_id: Optional[int] = None
    folder_id: Optional[int] = None
    list_id: Optional[int] = None
    task_id: Optional[str] = None


class UpdateWebhookRequest(RequestModel):
    endpoint: Optional[str] = None
    events: Optional[list[str]] = None
    status: Optional[str] = None


class KeyResult(APIModel):
    id: FlexibleID = ""
    goal_id: Optional[str] = None
    name: str = ""
    type: Optional[str] = None
    steps_start: Optional[float] = None
    steps_end: Optional[float] = None
    steps_current: Optional[float] = None
    unit: Optional[str] = None


class Goal(APIModel):
    id: FlexibleID = ""
    name: str = ""
    team_id: Optional[FlexibleID] = None
    due_date: Optional[FlexibleID] = None
    description: Optional[str] = None
    color: Optional[str] = None
    percent_completed: Optional[float] = None
    key_results: list[KeyResult] = Field(default_factory=list)


class GoalsResponse(APIModel):
    goals: list[Goal] = Field(default_factory=list)
    folders: list[dict[str, Any]] = Field(default_factory=list)


class GoalResponse(APIModel):
    goal: Goal = Field(default_factory=Goal)


class KeyResultResponse(APIModel):
    key_result: KeyResult = Field(default_factory=KeyResult)


class CreateGoalRequest(RequestModel):
    name: str = ""
    due_date: Optional[int] = None
    description: Optional[str] = None
    multiple_owners: Optional[bool] = None
    owners: Optional[list[int]] = None
    color: Optional[str] = None


class UpdateGoalRequest(RequestModel):
    name: Optional[str] = None
    due_date: Optional[int] = None
    description: Optional[str] = None
    color: Optional[str] = None
    add_owners: Optional[list[int]] = None
    rem_owners: Optional[list[int]] = None


class CreateKeyResultRequest(RequestModel):
    name: str = ""
    type: str = ""
    owners: Optional[list[int]] = None
    steps_start: Optional[float] = None
    steps_end: Optional[float] = None
    unit: Optional[str] = None
    task_ids: Optional[list[str]] = None
    list_ids: Optional[list[str]] = None


class EditKeyResultRequest(RequestModel):
    steps_current: Optional[float] = None
    note: Optional[str] = None


# ---------------------------------------------------------------------------
# Workspace-scoped (v3): audit logs, ACLs, chat, docs, attachments
# ---------------------------------------------------------------------------

class AuditLogQuery(RequestModel):
    filter: dict[str, Any] = Field(default_factory=dict)
    applicability: Optional[str] = None
    pagination: Optional[dict[str, Any]] = None


class AuditLogsResponse(APIModel):
    data: list[dict[str, Any]] = Field(default_factory=list)


class UpdateACLRequest(RequestModel):
    private: Optional[bool] = None
    entries: Optional[list[dict[str, Any]]] = None


class ChatChannel(APIModel):
    id: FlexibleID = ""
    name: Optional[str] = None
    type: Optional[str] = None
    member_count: Optional[int] = None


class ChatChannelsResponse(APIModel):
    channels: list[ChatChannel] = Field(default_factory=list)


class ChatUser(APIModel):
    id: Optional[FlexibleID] = None
    username: Optional[str] = None


class ChatUsersResponse(APIModel):
    users: list[ChatUser] = Field(default_factory=list)


class ChatMessage(APIModel):
    id: FlexibleID = ""
    content: str = ""
    user_id: Optional[FlexibleID] = None
    type: Optional[str] = None
    date_created: Optional[FlexibleID] = None
    date_updated: Optional[FlexibleID] = None
    parent_channel: Optional[str] = None
    parent_message: Optional[str] = None
    resolved: Optional[bool] = None
    replies_count: Optional[int] = None


class ChatPagination(APIModel):
    next_page_token: Optional[str] = None


class ChatMessagesResponse(APIModel):
    data: list[ChatMessage] = Field(default_factory=list)
    pagination: Optional[ChatPagination] = None


class ChatReaction(APIModel):
    id: Optional[FlexibleID] = None
    message_id: Optional[str] = None
    user_id: Optional[FlexibleID] = None
    reaction: str = ""
    date_created: Optional[FlexibleID] = None


class ChatReactionsResponse(APIModel):
    reactions: list[ChatReaction] = Field(default_factory=list)


class CreateChatChannelRequest(RequestModel):
    name: str = ""


class CreateDMRequest(RequestModel):
    members: list[str] = Field(default_factory=list)


class CreateLocationChannelRequest(RequestModel):
    name: Optional[str] = None
    parent_type: str = ""
    parent_id: str = ""


class UpdateChannelRequest(RequestModel):
    name: Optional[str] = None


class SendMessageRequest(RequestModel):
    content: str = ""


class UpdateMessageRequest(RequestModel):
    content: Optional[str] = None


class CreateReactionRequest(RequestModel):
    reaction: str = ""


class Doc(APIModel):
    id: FlexibleID = ""
    name: str = ""
    date_created: Optional[FlexibleID] = None
    creator: Optional[Any] = None


class DocsResponse(APIModel):
    docs: list[Doc] = Field(default_factory=list)


class DocPage(APIModel):
    id: FlexibleID = ""
    name: str = ""
    content: Optional[str] = None
    order: Optional[int] = None


class DocPagesResponse(APIModel):
    pages: list[DocPage] = Field(default_factory=list)


class CreateDocRequest(RequestModel):
    name: str = ""
    parent_type: Optional[str] = None
    parent_id: Optional[str] = None


class CreatePageRequest(RequestModel):
    name: str = ""
    content: Optional[str] = None
    content_format: Optional[str] = Field(default=None, description="'md' or 'html'")


class EditPageRequest(RequestModel):
    name: Optional[str] = None
    content: Optional[str] = None
    content_format: Optional[str] = None


class Attachment(APIModel):
    id: FlexibleID = ""
    title: Optional[str] = None
    url: Optional[str] = None
    size: Optional[int] = None
    extension: Optional[str] = None


class AttachmentsResponse(APIModel):
    attachments: list[Attachment] = Field(default_factory=list)
