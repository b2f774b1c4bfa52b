"""Audit logs, ACLs and attachments.

Audit logs and ACLs exist only under the workspace-scoped v3 API. Task
attachments can be uploaded through v2 as well.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from clickup_cli.errors import AttachmentFileError
from clickup_cli.models import (
    Attachment,
    AttachmentsResponse,
    AuditLogQuery,
    AuditLogsResponse,
    ParentType,
    UpdateACLRequest,
)
from clickup_cli.services.base import Service, require_ids

FileArg = Union[str, os.PathLike, tuple[str, bytes]]


def _file_payload(file: FileArg) -> dict[str, tuple[str, bytes]]:
    """Multipart ``attachment`` field from a path or a ``(filename, content)`` pair."""
    if isinstance(file, tuple):
        name, content = file
    else:
        path = Path(file)
        try:
            name, content = path.name, path.read_bytes()
        except OSError as e:
            raise AttachmentFileError(f"read attachment {path}: {e}") from e
    return {"attachment": (name, content)}


class AuditLogsService(Service):

    async def query(self, req: AuditLogQuery) -> AuditLogsResponse:
        path = self._paths.v3("/auditlogs")
        return await self._call("query audit logs", "POST", path, body=req, into=AuditLogsResponse)


class ACLsService(Service):

    async def update(self, object_type: ParentType | str, object_id: str, req: UpdateACLRequest) -> None:
        require_ids(object_type, object_id)
        path = self._paths.v3("/{}/{}/acls", object_type, object_id)
        await self._call("update ACLs", "PATCH", path, body=req)


class AttachmentsService(Service):

    async def upload(self, task_id: str, file: FileArg) -> Attachment:
        """POST /v2/task/{id}/attachment as multipart/form-data."""
        require_ids(task_id)
        path = self._paths.v2("/task/{}/attachment", task_id)
        return await self._call(
            "upload attachment", "POST", path, files=_file_payload(file), into=Attachment
        )

    async def list(self, parent_type: ParentType | str, parent_id: str) -> AttachmentsResponse:
        require_ids(parent_type, parent_id)
        path = self._paths.v3("/{}/{}/attachments", parent_type, parent_id)
        return await self._call("list attachments", "GET", path, into=AttachmentsResponse)

    async def create(self, parent_type: ParentType | str, parent_id: str, file: FileArg) -> Attachment:
        require_ids(parent_type, parent_id)
        path = self._paths.v3("/{}/{}/attachments", parent_type, parent_id)
        return await self._call(
            "create attachment", "POST", path, files=_file_payload(file), into=Attachment
        )
