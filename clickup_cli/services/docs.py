"""Docs and doc pages (v3, workspace-scoped)."""

from __future__ import annotations

from clickup_cli.models import (
    CreateDocRequest,
    CreatePageRequest,
    Doc,
    DocPage,
    DocPagesResponse,
    DocsResponse,
    EditPageRequest,
)
from clickup_cli.query import encode_query
from clickup_cli.services.base import Service, require_ids, require_text


class DocsService(Service):

    async def search(self, query: str = "") -> DocsResponse:
        path = self._paths.v3("/docs")
        return await self._call(
            "search docs", "GET", path, query=encode_query({"search": query}), into=DocsResponse
        )

    async def get(self, doc_id: str) -> Doc:
        require_ids(doc_id)
        return await self._call("get doc", "GET", self._paths.v3("/docs/{}", doc_id), into=Doc)

    async def page_listing(self, doc_id: str) -> DocPagesResponse:
        """Page tree without content."""
        require_ids(doc_id)
        path = self._paths.v3("/docs/{}/page_listing", doc_id)
        return await self._call("get doc page listing", "GET", path, into=DocPagesResponse)

    async def pages(self, doc_id: str) -> DocPagesResponse:
        require_ids(doc_id)
        path = self._paths.v3("/docs/{}/pages", doc_id)
        return await self._call("get doc pages", "GET", path, into=DocPagesResponse)

    async def page(self, doc_id: str, page_id: str) -> DocPage:
        require_ids(doc_id, page_id)
        path = self._paths.v3("/docs/{}/pages/{}", doc_id, page_id)
        return await self._call("get doc page", "GET", path, into=DocPage)

    async def create(self, req: CreateDocRequest) -> Doc:
        require_text(req.name)
        path = self._paths.v3("/docs")
        return await self._call("create doc", "POST", path, body=req, into=Doc)

    async def create_page(self, doc_id: str, req: CreatePageRequest) -> DocPage:
        require_ids(doc_id)
        require_text(req.name)
        path = self._paths.v3("/docs/{}/pages", doc_id)
        return await self._call("create doc page", "POST", path, body=req, into=DocPage)

    async def edit_page(self, doc_id: str, page_id: str, req: EditPageRequest) -> DocPage:
        require_ids(doc_id, page_id)
        path = self._paths.v3("/docs/{}/pages/{}", doc_id, page_id)
        return await self._call("edit doc page", "PUT", path, body=req, into=DocPage)
