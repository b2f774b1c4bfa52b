"""Task endpoints, plus the task templates and custom task types listings."""

from __future__ import annotations

from clickup_cli.errors import SourceTasksRequiredError, TaskIDsRequiredError
from clickup_cli.models import (
    BulkTimeInStatusResponse,
    CreateTaskFromTemplateRequest,
    CreateTaskRequest,
    CustomTaskTypesResponse,
    FilteredTeamTasksParams,
    MergeTasksRequest,
    MergeTasksResponse,
    MoveTaskResponse,
    Task,
    TasksListResponse,
    TaskTemplatesResponse,
    TimeInStatusResponse,
    UpdateTaskRequest,
)
from clickup_cli.query import encode_query
from clickup_cli.services.base import Service, clean_ids, require_ids, require_text


class TasksService(Service):
    """Tasks in lists, workspace search, time-in-status, merge and move."""

    async def list(
        self,
        list_id: str,
        status: str = "",
        assignee: str = "",
    ) -> TasksListResponse:
        """GET /v2/list/{id}/task, closed tasks included.

        ``status`` and ``assignee`` are optional single-value filters.
        """
        require_ids(list_id)
        path = self._paths.v2("/list/{}/task", list_id)
        query = encode_query({
            "include_closed": True,
            "statuses": [status] if status else [],
            "assignees": [assignee] if assignee else [],
        })
        return await self._call("list tasks", "GET", path, query=query, into=TasksListResponse)

    async def get(self, task_id: str) -> Task:
        require_ids(task_id)
        return await self._call(
            "get task", "GET", self._paths.v2("/task/{}", task_id), into=Task
        )

    async def create(self, list_id: str, req: CreateTaskRequest) -> Task:
        require_ids(list_id)
        require_text(req.name)
        return await self._call(
            "create task", "POST", self._paths.v2("/list/{}/task", list_id),
            body=req, into=Task,
        )

    async def update(self, task_id: str, req: UpdateTaskRequest) -> Task:
        """PUT /v2/task/{id}. Only fields that are not None are sent."""
        require_ids(task_id)
        return await self._call(
            "update task", "PUT", self._paths.v2("/task/{}", task_id),
            body=req, into=Task,
        )

    async def delete(self, task_id: str) -> None:
        require_ids(task_id)
        await self._call("delete task", "DELETE", self._paths.v2("/task/{}", task_id))

    async def search(self, team_id: str, params: FilteredTeamTasksParams) -> TasksListResponse:
        """GET /v2/team/{id}/task: filtered tasks across the whole workspace."""
        require_ids(team_id)
        path = self._paths.v2("/team/{}/task", team_id)
        query = encode_query(params.model_dump())
        return await self._call("search tasks", "GET", path, query=query, into=TasksListResponse)

    async def time_in_status(self, task_id: str) -> TimeInStatusResponse:
        require_ids(task_id)
        return await self._call(
            "get time in status", "GET",
            self._paths.v2("/task/{}/time_in_status", task_id),
            into=TimeInStatusResponse,
        )

    async def bulk_time_in_status(self, task_ids: list[str]) -> BulkTimeInStatusResponse:
        """GET /v2/task/bulk_time_in_status/task_ids, keyed by task ID.

        This endpoint repeats ``task_ids`` without the ``[]`` suffix.
        """
        ids = clean_ids(task_ids)
        if not ids:
            raise TaskIDsRequiredError()
        path = self._paths.v2("/task/bulk_time_in_status/task_ids")
        query = encode_query({"task_ids": ids}, list_suffix="")
        return await self._call(
            "get bulk time in status", "GET", path, query=query,
            into=BulkTimeInStatusResponse,
        )

    async def merge(self, target_task_id: str, source_task_ids: list[str]) -> MergeTasksResponse:
        require_ids(target_task_id)
        sources = clean_ids(source_task_ids)
        if not sources:
            raise SourceTasksRequiredError()
        return await self._call(
            "merge tasks", "POST", self._paths.v2("/task/{}/merge", target_task_id),
            body=MergeTasksRequest(merged_task_ids=sources), into=MergeTasksResponse,
        )

    async def move(self, task_id: str, list_id: str) -> MoveTaskResponse:
        """Change a task's home list (v3; needs a workspace ID)."""
        require_ids(task_id, list_id)
        path = self._paths.v3("/tasks/{}/home_list/{}", task_id, list_id)
        return await self._call("move task", "PUT", path, into=MoveTaskResponse)

    async def create_from_template(
        self,
        list_id: str,
        template_id: str,
        req: CreateTaskFromTemplateRequest,
    ) -> Task:
        require_ids(list_id, template_id)
        return await self._call(
            "create task from template", "POST",
            self._paths.v2("/list/{}/taskTemplate/{}", list_id, template_id),
            body=req, into=Task,
        )


class TemplatesService(Service):

    async def list(self, team_id: str, page: int = 0) -> TaskTemplatesResponse:
        """GET /v2/team/{id}/taskTemplate. ``page`` is always sent, even 0."""
        require_ids(team_id)
        path = self._paths.v2("/team/{}/taskTemplate", team_id)
        query = encode_query({"page": str(page)})
        return await self._call("list templates", "GET", path, query=query, into=TaskTemplatesResponse)


class TaskTypesService(Service):

    async def list(self, team_id: str) -> CustomTaskTypesResponse:
        require_ids(team_id)
        return await self._call(
            "list custom task types", "GET", self._paths.v2("/team/{}/custom_item", team_id),
            into=CustomTaskTypesResponse,
        )
