"""Members, users, user groups, custom roles and guests."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from clickup_cli.errors import EmailRequiredError
from clickup_cli.models import (
    AddGuestToResourceRequest,
    CreateUserGroupRequest,
    CustomRolesResponse,
    EditGuestRequest,
    EditUserRequest,
    Guest,
    GuestResponse,
    InviteGuestRequest,
    InviteUserRequest,
    Member,
    UpdateUserGroupRequest,
    UserGroup,
    UserGroupsResponse,
    UserResponse,
)
from clickup_cli.query import encode_query
from clickup_cli.services.base import Service, require_ids, require_text


class _TeamMembers(BaseModel):
    members: list[Member] = Field(default_factory=list)


class _TeamEnvelope(BaseModel):
    team: _TeamMembers = Field(default_factory=_TeamMembers)


class MembersService(Service):

    async def list(self, team_id: str) -> list[Member]:
        """Members come embedded in GET /v2/team/{id} as team.members."""
        require_ids(team_id)
        result = await self._call(
            "list members", "GET", self._paths.v2("/team/{}", team_id), into=_TeamEnvelope
        )
        return result.team.members


class UsersService(Service):

    async def get(self, team_id: str, user_id: int | str) -> UserResponse:
        require_ids(team_id, user_id)
        return await self._call(
            "get user", "GET", self._paths.v2("/team/{}/user/{}", team_id, user_id),
            into=UserResponse,
        )

    async def invite(self, team_id: str, req: InviteUserRequest) -> UserResponse:
        require_ids(team_id)
        require_text(req.email, EmailRequiredError)
        return await self._call(
            "invite user", "POST", self._paths.v2("/team/{}/user", team_id),
            body=req, into=UserResponse,
        )

    async def update(self, team_id: str, user_id: int | str, req: EditUserRequest) -> UserResponse:
        require_ids(team_id, user_id)
        return await self._call(
            "update user", "PUT", self._paths.v2("/team/{}/user/{}", team_id, user_id),
            body=req, into=UserResponse,
        )

    async def remove(self, team_id: str, user_id: int | str) -> None:
        require_ids(team_id, user_id)
        await self._call(
            "remove user", "DELETE", self._paths.v2("/team/{}/user/{}", team_id, user_id)
        )


class UserGroupsService(Service):

    async def list(self, team_id: Optional[str] = None) -> UserGroupsResponse:
        """GET /v2/group, narrowed to one workspace when ``team_id`` is given."""
        query = encode_query({"team_id": team_id})
        return await self._call(
            "list user groups", "GET", self._paths.v2("/group"), query=query,
            into=UserGroupsResponse,
        )

    async def create(self, team_id: str, req: CreateUserGroupRequest) -> UserGroup:
        require_ids(team_id)
        require_text(req.name)
        return await self._call(
            "create user group", "POST", self._paths.v2("/team/{}/group", team_id),
            body=req, into=UserGroup,
        )

    async def update(self, group_id: str, req: UpdateUserGroupRequest) -> UserGroup:
        """PUT /v2/group/{id}; membership changes use ``{"add": [...], "rem": [...]}``."""
        require_ids(group_id)
        return await self._call(
            "update user group", "PUT", self._paths.v2("/group/{}", group_id),
            body=req, into=UserGroup,
        )

    async def delete(self, group_id: str) -> None:
        require_ids(group_id)
        await self._call("delete user group", "DELETE", self._paths.v2("/group/{}", group_id))


class RolesService(Service):

    async def list(self, team_id: str) -> CustomRolesResponse:
        require_ids(team_id)
        return await self._call(
            "list custom roles", "GET", self._paths.v2("/team/{}/customroles", team_id),
            into=CustomRolesResponse,
        )


class GuestsService(Service):
    """Workspace guests and their access to individual tasks, lists and folders."""

    async def get(self, team_id: str, guest_id: int | str) -> Guest:
        require_ids(team_id, guest_id)
        result = await self._call(
            "get guest", "GET", self._paths.v2("/team/{}/guest/{}", team_id, guest_id),
            into=GuestResponse,
        )
        return result.guest

    async def invite(self, team_id: str, req: InviteGuestRequest) -> Guest:
        require_ids(team_id)
        require_text(req.email, EmailRequiredError)
        result = await self._call(
            "invite guest", "POST", self._paths.v2("/team/{}/guest", team_id),
            body=req, into=GuestResponse,
        )
        return result.guest

    async def update(self, team_id: str, guest_id: int | str, req: EditGuestRequest) -> Guest:
        require_ids(team_id, guest_id)
        result = await self._call(
            "update guest", "PUT", self._paths.v2("/team/{}/guest/{}", team_id, guest_id),
            body=req, into=GuestResponse,
        )
        return result.guest

    async def remove(self, team_id: str, guest_id: int | str) -> None:
        require_ids(team_id, guest_id)
        await self._call(
            "remove guest", "DELETE", self._paths.v2("/team/{}/guest/{}", team_id, guest_id)
        )

    async def _add_to(self, kind: str, resource_id: str, guest_id: int | str, permission_level: str) -> Guest:
        require_ids(resource_id, guest_id)
        result = await self._call(
            f"add guest to {kind}", "POST",
            self._paths.v2("/" + kind + "/{}/guest/{}", resource_id, guest_id),
            body=AddGuestToResourceRequest(permission_level=permission_level),
            into=GuestResponse,
        )
        return result.guest

    async def _remove_from(self, kind: str, resource_id: str, guest_id: int | str) -> None:
        require_ids(resource_id, guest_id)
        await self._call(
            f"remove guest from {kind}", "DELETE",
            self._paths.v2("/" + kind + "/{}/guest/{}", resource_id, guest_id),
        )

    async def add_to_task(self, task_id: str, guest_id: int | str, permission_level: str = "read") -> Guest:
        return await self._add_to("task", task_id, guest_id, permission_level)

    async def add_to_list(self, list_id: str, guest_id: int | str, permission_level: str = "read") -> Guest:
        return await self._add_to("list", list_id, guest_id, permission_level)

    async def add_to_folder(self, folder_id: str, guest_id: int | str, permission_level: str = "read") -> Guest:
        return await self._add_to("folder", folder_id, guest_id, permission_level)

    async def remove_from_task(self, task_id: str, guest_id: int | str) -> None:
        await self._remove_from("task", task_id, guest_id)

    async def remove_from_list(self, list_id: str, guest_id: int | str) -> None:
        await self._remove_from("list", list_id, guest_id)

    async def remove_from_folder(self, folder_id: str, guest_id: int | str) -> None:
        await self._remove_from("folder", folder_id, guest_id)
