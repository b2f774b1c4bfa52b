"""Views at every hierarchy level, and the tasks a view shows."""

from __future__ import annotations

from clickup_cli.models import (
    CreateViewRequest,
    TasksListResponse,
    UpdateViewRequest,
    View,
    ViewResponse,
    ViewsResponse,
)
from clickup_cli.query import encode_query
from clickup_cli.services.base import Service, require_ids, require_text

_LIST_OPS = {
    "team": "list team views",
    "space": "list space views",
    "folder": "list folder views",
    "list": "list views for list",
}


class ViewsService(Service):

    async def _list(self, kind: str, owner_id: str) -> ViewsResponse:
        require_ids(owner_id)
        return await self._call(
            _LIST_OPS[kind], "GET", self._paths.v2("/" + kind + "/{}/view", owner_id),
            into=ViewsResponse,
        )

    async def _create(self, kind: str, owner_id: str, req: CreateViewRequest) -> View:
        require_ids(owner_id)
        require_text(req.name)
        require_text(req.type)
        result = await self._call(
            f"create {kind} view", "POST", self._paths.v2("/" + kind + "/{}/view", owner_id),
            body=req, into=ViewResponse,
        )
        return result.view

    async def list_by_team(self, team_id: str) -> ViewsResponse:
        return await self._list("team", team_id)

    async def list_by_space(self, space_id: str) -> ViewsResponse:
        return await self._list("space", space_id)

    async def list_by_folder(self, folder_id: str) -> ViewsResponse:
        return await self._list("folder", folder_id)

    async def list_by_list(self, list_id: str) -> ViewsResponse:
        return await self._list("list", list_id)

    async def get(self, view_id: str) -> View:
        require_ids(view_id)
        result = await self._call(
            "get view", "GET", self._paths.v2("/view/{}", view_id), into=ViewResponse
        )
        return result.view

    async def tasks(self, view_id: str, page: int = 0) -> TasksListResponse:
        require_ids(view_id)
        return await self._call(
            "get view tasks", "GET", self._paths.v2("/view/{}/task", view_id),
            query=encode_query({"page": page}), into=TasksListResponse,
        )

    async def create_in_team(self, team_id: str, req: CreateViewRequest) -> View:
        return await self._create("team", team_id, req)

    async def create_in_space(self, space_id: str, req: CreateViewRequest) -> View:
        return await self._create("space", space_id, req)

    async def create_in_folder(self, folder_id: str, req: CreateViewRequest) -> View:
        return await self._create("folder", folder_id, req)

    async def create_in_list(self, list_id: str, req: CreateViewRequest) -> View:
        return await self._create("list", list_id, req)

    async def update(self, view_id: str, req: UpdateViewRequest) -> View:
        require_ids(view_id)
        result = await self._call(
            "update view", "PUT", self._paths.v2("/view/{}", view_id),
            body=req, into=ViewResponse,
        )
        return result.view

    async def delete(self, view_id: str) -> None:
        require_ids(view_id)
        await self._call("delete view", "DELETE", self._paths.v2("/view/{}", view_id))
