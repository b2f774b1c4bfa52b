"""Spaces, folders and lists, plus the shared-with-me hierarchy."""

from __future__ import annotations

from clickup_cli.models import (
    CreateFolderFromTemplateRequest,
    CreateFolderRequest,
    CreateListFromTemplateRequest,
    CreateListRequest,
    CreateSpaceRequest,
    Folder,
    FoldersListResponse,
    ListsListResponse,
    SharedHierarchyResponse,
    Space,
    SpacesListResponse,
    TaskList,
    UpdateFolderRequest,
    UpdateListRequest,
    UpdateSpaceRequest,
)
from clickup_cli.services.base import Service, require_ids, require_text


class SpacesService(Service):

    async def list(self, team_id: str) -> SpacesListResponse:
        require_ids(team_id)
        return await self._call(
            "list spaces", "GET", self._paths.v2("/team/{}/space", team_id),
            into=SpacesListResponse,
        )

    async def get(self, space_id: str) -> Space:
        require_ids(space_id)
        return await self._call("get space", "GET", self._paths.v2("/space/{}", space_id), into=Space)

    async def create(self, team_id: str, req: CreateSpaceRequest) -> Space:
        require_ids(team_id)
        require_text(req.name)
        return await self._call(
            "create space", "POST", self._paths.v2("/team/{}/space", team_id),
            body=req, into=Space,
        )

    async def update(self, space_id: str, req: UpdateSpaceRequest) -> Space:
        require_ids(space_id)
        return await self._call(
            "update space", "PUT", self._paths.v2("/space/{}", space_id), body=req, into=Space
        )

    async def delete(self, space_id: str) -> None:
        require_ids(space_id)
        await self._call("delete space", "DELETE", self._paths.v2("/space/{}", space_id))


class FoldersService(Service):

    async def list(self, space_id: str) -> FoldersListResponse:
        require_ids(space_id)
        return await self._call(
            "list folders", "GET", self._paths.v2("/space/{}/folder", space_id),
            into=FoldersListResponse,
        )

    async def get(self, folder_id: str) -> Folder:
        require_ids(folder_id)
        return await self._call("get folder", "GET", self._paths.v2("/folder/{}", folder_id), into=Folder)

    async def create(self, space_id: str, req: CreateFolderRequest) -> Folder:
        require_ids(space_id)
        require_text(req.name)
        return await self._call(
            "create folder", "POST", self._paths.v2("/space/{}/folder", space_id),
            body=req, into=Folder,
        )

    async def update(self, folder_id: str, req: UpdateFolderRequest) -> Folder:
        require_ids(folder_id)
        return await self._call(
            "update folder", "PUT", self._paths.v2("/folder/{}", folder_id), body=req, into=Folder
        )

    async def delete(self, folder_id: str) -> None:
        require_ids(folder_id)
        await self._call("delete folder", "DELETE", self._paths.v2("/folder/{}", folder_id))

    async def create_from_template(
        self,
        space_id: str,
        template_id: str,
        req: CreateFolderFromTemplateRequest,
    ) -> Folder:
        require_ids(space_id, template_id)
        return await self._call(
            "create folder from template", "POST",
            self._paths.v2("/space/{}/folder_template/{}", space_id, template_id),
            body=req, into=Folder,
        )


class ListsService(Service):
    """Lists live either in a folder or directly in a space ("folderless")."""

    async def list_by_folder(self, folder_id: str) -> ListsListResponse:
        require_ids(folder_id)
        return await self._call(
            "list lists by folder", "GET", self._paths.v2("/folder/{}/list", folder_id),
            into=ListsListResponse,
        )

    async def list_folderless(self, space_id: str) -> ListsListResponse:
        require_ids(space_id)
        return await self._call(
            "list folderless lists", "GET", self._paths.v2("/space/{}/list", space_id),
            into=ListsListResponse,
        )

    async def get(self, list_id: str) -> TaskList:
        require_ids(list_id)
        return await self._call("get list", "GET", self._paths.v2("/list/{}", list_id), into=TaskList)

    async def create_in_folder(self, folder_id: str, req: CreateListRequest) -> TaskList:
        require_ids(folder_id)
        require_text(req.name)
        return await self._call(
            "create list in folder", "POST", self._paths.v2("/folder/{}/list", folder_id),
            body=req, into=TaskList,
        )

    async def create_folderless(self, space_id: str, req: CreateListRequest) -> TaskList:
        require_ids(space_id)
        require_text(req.name)
        return await self._call(
            "create folderless list", "POST", self._paths.v2("/space/{}/list", space_id),
            body=req, into=TaskList,
        )

    async def update(self, list_id: str, req: UpdateListRequest) -> TaskList:
        require_ids(list_id)
        return await self._call(
            "update list", "PUT", self._paths.v2("/list/{}", list_id), body=req, into=TaskList
        )

    async def delete(self, list_id: str) -> None:
        require_ids(list_id)
        await self._call("delete list", "DELETE", self._paths.v2("/list/{}", list_id))

    async def create_from_template_in_folder(
        self,
        folder_id: str,
        template_id: str,
        req: CreateListFromTemplateRequest,
    ) -> TaskList:
        require_ids(folder_id, template_id)
        require_text(req.name)
        return await self._call(
            "create list from template in folder", "POST",
            self._paths.v2("/folder/{}/list_template/{}", folder_id, template_id),
            body=req, into=TaskList,
        )

    async def create_from_template_in_space(
        self,
        space_id: str,
        template_id: str,
        req: CreateListFromTemplateRequest,
    ) -> TaskList:
        require_ids(space_id, template_id)
        require_text(req.name)
        return await self._call(
            "create list from template in space", "POST",
            self._paths.v2("/space/{}/list_template/{}", space_id, template_id),
            body=req, into=TaskList,
        )

    async def add_task(self, list_id: str, task_id: str) -> None:
        """Add a task to an additional list (tasks in multiple lists)."""
        require_ids(list_id, task_id)
        await self._call(
            "add task to list", "POST", self._paths.v2("/list/{}/task/{}", list_id, task_id)
        )

    async def remove_task(self, list_id: str, task_id: str) -> None:
        require_ids(list_id, task_id)
        await self._call(
            "remove task from list", "DELETE", self._paths.v2("/list/{}/task/{}", list_id, task_id)
        )


class SharedService(Service):

    async def list(self, team_id: str) -> SharedHierarchyResponse:
        require_ids(team_id)
        return await self._call(
            "list shared hierarchy", "GET", self._paths.v2("/team/{}/shared", team_id),
            into=SharedHierarchyResponse,
        )
