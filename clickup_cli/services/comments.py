"""Comments on tasks, lists and views, and threaded replies.

Creating a comment returns only ``{"id": <number>}``; the service builds the
Comment from that ID and the text it sent.
"""

from __future__ import annotations

from typing import Optional

from clickup_cli.errors import TextRequiredError
from clickup_cli.models import (
    Comment,
    CommentIDResponse,
    CommentsListResponse,
    CreateCommentRequest,
    PostSubtypesResponse,
    UpdateCommentRequest,
)
from clickup_cli.query import encode_query
from clickup_cli.services.base import Service, require_ids, require_text


class CommentsService(Service):

    async def list(self, task_id: str) -> CommentsListResponse:
        require_ids(task_id)
        return await self._call(
            "list comments", "GET", self._paths.v2("/task/{}/comment", task_id),
            into=CommentsListResponse,
        )

    async def add(self, task_id: str, text: str) -> Comment:
        require_ids(task_id)
        require_text(text, TextRequiredError)
        result = await self._call(
            "add comment", "POST", self._paths.v2("/task/{}/comment", task_id),
            body=CreateCommentRequest(comment_text=text), into=CommentIDResponse,
        )
        return Comment(id=result.id, comment_text=text)

    async def update(self, comment_id: str, req: UpdateCommentRequest) -> None:
        require_ids(comment_id)
        await self._call(
            "update comment", "PUT", self._paths.v2("/comment/{}", comment_id), body=req
        )

    async def delete(self, comment_id: str) -> None:
        require_ids(comment_id)
        await self._call("delete comment", "DELETE", self._paths.v2("/comment/{}", comment_id))

    async def replies(self, comment_id: str) -> CommentsListResponse:
        require_ids(comment_id)
        return await self._call(
            "get comment replies", "GET", self._paths.v2("/comment/{}/reply", comment_id),
            into=CommentsListResponse,
        )

    async def reply(self, comment_id: str, text: str, assignee: Optional[int] = None) -> Comment:
        """POST /v2/comment/{id}/reply. ``assignee`` is sent only when given."""
        require_ids(comment_id)
        require_text(text, TextRequiredError)
        req = CreateCommentRequest(comment_text=text, assignee=assignee)
        result = await self._call(
            "create comment reply", "POST", self._paths.v2("/comment/{}/reply", comment_id),
            body=req, into=Comment,
        )
        if not result.comment_text:
            result.comment_text = text
        return result

    async def list_comments(self, list_id: str) -> CommentsListResponse:
        require_ids(list_id)
        return await self._call(
            "get list comments", "GET", self._paths.v2("/list/{}/comment", list_id),
            into=CommentsListResponse,
        )

    async def add_list(self, list_id: str, req: CreateCommentRequest) -> Comment:
        require_ids(list_id)
        require_text(req.comment_text, TextRequiredError)
        result = await self._call(
            "add list comment", "POST", self._paths.v2("/list/{}/comment", list_id),
            body=req, into=CommentIDResponse,
        )
        return Comment(id=result.id, comment_text=req.comment_text)

    async def view_comments(self, view_id: str, start: int = 0, start_id: str = "") -> CommentsListResponse:
        """Chat-view comments, newest first; page with ``start``/``start_id``."""
        require_ids(view_id)
        path = self._paths.v2("/view/{}/comment", view_id)
        query = encode_query({"start": start, "start_id": start_id})
        return await self._call(
            "list view comments", "GET", path, query=query, into=CommentsListResponse
        )

    async def add_view(self, view_id: str, req: CreateCommentRequest) -> Comment:
        require_ids(view_id)
        require_text(req.comment_text, TextRequiredError)
        result = await self._call(
            "add view comment", "POST", self._paths.v2("/view/{}/comment", view_id),
            body=req, into=CommentIDResponse,
        )
        return Comment(id=result.id, comment_text=req.comment_text)

    async def subtypes(self, type_id: str) -> PostSubtypesResponse:
        require_ids(type_id)
        path = self._paths.v3("/comments/types/{}/subtypes", type_id)
        return await self._call("get post subtypes", "GET", path, into=PostSubtypesResponse)
