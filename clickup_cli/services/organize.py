"""Tags, checklists, task relationships and custom fields."""

from __future__ import annotations

from typing import Any

from clickup_cli.errors import IDRequiredError
from clickup_cli.models import (
    Checklist,
    ChecklistResponse,
    CreateChecklistItemRequest,
    CreateChecklistRequest,
    CreateSpaceTagRequest,
    CustomFieldsResponse,
    DependencyRequest,
    EditChecklistItemRequest,
    EditChecklistRequest,
    EditSpaceTagRequest,
    SetCustomFieldRequest,
    SpaceTagsResponse,
)
from clickup_cli.query import encode_query
from clickup_cli.services.base import Service, require_ids, require_text


class TagsService(Service):
    """Space tags, and tagging tasks. Tag names are path-escaped."""

    async def list(self, space_id: str) -> SpaceTagsResponse:
        require_ids(space_id)
        return await self._call(
            "list space tags", "GET", self._paths.v2("/space/{}/tag", space_id),
            into=SpaceTagsResponse,
        )

    async def create(self, space_id: str, req: CreateSpaceTagRequest) -> None:
        require_ids(space_id)
        require_text(req.tag.name)
        await self._call(
            "create space tag", "POST", self._paths.v2("/space/{}/tag", space_id), body=req
        )

    async def update(self, space_id: str, tag_name: str, req: EditSpaceTagRequest) -> None:
        require_ids(space_id, tag_name)
        await self._call(
            "update space tag", "PUT", self._paths.v2("/space/{}/tag/{}", space_id, tag_name),
            body=req,
        )

    async def delete(self, space_id: str, tag_name: str) -> None:
        require_ids(space_id, tag_name)
        await self._call(
            "delete space tag", "DELETE", self._paths.v2("/space/{}/tag/{}", space_id, tag_name)
        )

    async def add_to_task(self, task_id: str, tag_name: str) -> None:
        require_ids(task_id, tag_name)
        await self._call(
            "add tag to task", "POST", self._paths.v2("/task/{}/tag/{}", task_id, tag_name)
        )

    async def remove_from_task(self, task_id: str, tag_name: str) -> None:
        require_ids(task_id, tag_name)
        await self._call(
            "remove tag from task", "DELETE", self._paths.v2("/task/{}/tag/{}", task_id, tag_name)
        )


class ChecklistsService(Service):
    """Checklist endpoints; every mutation returns ``{"checklist": {...}}``."""

    async def create(self, task_id: str, req: CreateChecklistRequest) -> Checklist:
        require_ids(task_id)
        require_text(req.name)
        result = await self._call(
            "create checklist", "POST", self._paths.v2("/task/{}/checklist", task_id),
            body=req, into=ChecklistResponse,
        )
        return result.checklist

    async def update(self, checklist_id: str, req: EditChecklistRequest) -> Checklist:
        require_ids(checklist_id)
        result = await self._call(
            "update checklist", "PUT", self._paths.v2("/checklist/{}", checklist_id),
            body=req, into=ChecklistResponse,
        )
        return result.checklist

    async def delete(self, checklist_id: str) -> None:
        require_ids(checklist_id)
        await self._call("delete checklist", "DELETE", self._paths.v2("/checklist/{}", checklist_id))

    async def add_item(self, checklist_id: str, req: CreateChecklistItemRequest) -> Checklist:
        require_ids(checklist_id)
        require_text(req.name)
        result = await self._call(
            "add checklist item", "POST",
            self._paths.v2("/checklist/{}/checklist_item", checklist_id),
            body=req, into=ChecklistResponse,
        )
        return result.checklist

    async def update_item(self, checklist_id: str, item_id: str, req: EditChecklistItemRequest) -> Checklist:
        require_ids(checklist_id, item_id)
        result = await self._call(
            "update checklist item", "PUT",
            self._paths.v2("/checklist/{}/checklist_item/{}", checklist_id, item_id),
            body=req, into=ChecklistResponse,
        )
        return result.checklist

    async def delete_item(self, checklist_id: str, item_id: str) -> None:
        require_ids(checklist_id, item_id)
        await self._call(
            "delete checklist item", "DELETE",
            self._paths.v2("/checklist/{}/checklist_item/{}", checklist_id, item_id),
        )


class RelationshipsService(Service):
    """Task dependencies ("waiting on" / "blocking") and plain task links."""

    async def add_dependency(self, task_id: str, req: DependencyRequest) -> None:
        require_ids(task_id)
        if not (req.depends_on or req.dependency_of):
            raise IDRequiredError()
        await self._call(
            "add dependency", "POST", self._paths.v2("/task/{}/dependency", task_id), body=req
        )

    async def delete_dependency(self, task_id: str, req: DependencyRequest) -> None:
        """DELETE takes the other task as a query parameter, not a body."""
        require_ids(task_id)
        if not (req.depends_on or req.dependency_of):
            raise IDRequiredError()
        query = encode_query({"depends_on": req.depends_on, "dependency_of": req.dependency_of})
        await self._call(
            "delete dependency", "DELETE", self._paths.v2("/task/{}/dependency", task_id),
            query=query,
        )

    async def add_link(self, task_id: str, linked_task_id: str) -> None:
        require_ids(task_id, linked_task_id)
        await self._call(
            "add task link", "POST", self._paths.v2("/task/{}/link/{}", task_id, linked_task_id)
        )

    async def delete_link(self, task_id: str, linked_task_id: str) -> None:
        require_ids(task_id, linked_task_id)
        await self._call(
            "delete task link", "DELETE", self._paths.v2("/task/{}/link/{}", task_id, linked_task_id)
        )


class CustomFieldsService(Service):

    async def _list(self, kind: str, owner_id: str) -> CustomFieldsResponse:
        require_ids(owner_id)
        return await self._call(
            "list custom fields", "GET", self._paths.v2("/" + kind + "/{}/field", owner_id),
            into=CustomFieldsResponse,
        )

    async def list_by_list(self, list_id: str) -> CustomFieldsResponse:
        return await self._list("list", list_id)

    async def list_by_folder(self, folder_id: str) -> CustomFieldsResponse:
        return await self._list("folder", folder_id)

    async def list_by_space(self, space_id: str) -> CustomFieldsResponse:
        return await self._list("space", space_id)

    async def list_by_team(self, team_id: str) -> CustomFieldsResponse:
        return await self._list("team", team_id)

    async def set(self, task_id: str, field_id: str, value: Any) -> None:
        """POST ``{"value": ...}``; the value's shape depends on the field type."""
        require_ids(task_id, field_id)
        await self._call(
            "set custom field", "POST", self._paths.v2("/task/{}/field/{}", task_id, field_id),
            body=SetCustomFieldRequest(value=value),
        )

    async def remove(self, task_id: str, field_id: str) -> None:
        require_ids(task_id, field_id)
        await self._call(
            "remove custom field", "DELETE", self._paths.v2("/task/{}/field/{}", task_id, field_id)
        )
