"""Time tracking: workspace time entries and the legacy per-task intervals."""

from __future__ import annotations

from typing import Optional

from clickup_cli.errors import IDRequiredError, NameRequiredError
from clickup_cli.models import (
    EditTimeRequest,
    LegacyTimeResponse,
    LogTimeRequest,
    RenameTimeEntryTagRequest,
    StartTimeEntryRequest,
    TimeEntriesListResponse,
    TimeEntry,
    TimeEntryHistoryResponse,
    TimeEntryResponse,
    TimeEntryTagsRequest,
    TimeEntryTagsResponse,
    TrackTimeRequest,
    TrackTimeResponse,
    UpdateTimeEntryRequest,
)
from clickup_cli.query import encode_query
from clickup_cli.services.base import Service, require_ids


class TimeService(Service):
    """Endpoints under /v2/team/{team_id}/time_entries.

    Single-entry responses come wrapped as ``{"data": {...}}``; the wrapper
    is removed here. ``current`` returns None when no timer is running.
    """

    def _entries(self, team_id: str, *rest: str) -> str:
        template = "/team/{}/time_entries" + "".join("/{}" for _ in rest)
        return self._paths.v2(template, team_id, *rest)

    async def list(self, team_id: str, task_id: str) -> TimeEntriesListResponse:
        require_ids(team_id, task_id)
        return await self._call(
            "list time entries", "GET", self._entries(team_id),
            query=encode_query({"task_id": task_id}), into=TimeEntriesListResponse,
        )

    async def log(self, team_id: str, task_id: str, duration_ms: int, start_ms: int) -> Optional[TimeEntry]:
        require_ids(team_id, task_id)
        req = LogTimeRequest(duration=duration_ms, tid=task_id, start=start_ms)
        result = await self._call(
            "log time", "POST", self._entries(team_id), body=req, into=TimeEntryResponse
        )
        return result.data

    async def get(self, team_id: str, entry_id: str) -> Optional[TimeEntry]:
        require_ids(team_id, entry_id)
        result = await self._call(
            "get time entry", "GET", self._entries(team_id, entry_id), into=TimeEntryResponse
        )
        return result.data

    async def current(self, team_id: str) -> Optional[TimeEntry]:
        require_ids(team_id)
        path = self._paths.v2("/team/{}/time_entries/current", team_id)
        result = await self._call("get current timer", "GET", path, into=TimeEntryResponse)
        return result.data

    async def start(self, team_id: str, req: StartTimeEntryRequest) -> Optional[TimeEntry]:
        require_ids(team_id)
        path = self._paths.v2("/team/{}/time_entries/start", team_id)
        result = await self._call("start timer", "POST", path, body=req, into=TimeEntryResponse)
        return result.data

    async def stop(self, team_id: str) -> Optional[TimeEntry]:
        require_ids(team_id)
        path = self._paths.v2("/team/{}/time_entries/stop", team_id)
        result = await self._call("stop timer", "POST", path, into=TimeEntryResponse)
        return result.data

    async def update(self, team_id: str, entry_id: str, req: UpdateTimeEntryRequest) -> Optional[TimeEntry]:
        require_ids(team_id, entry_id)
        result = await self._call(
            "update time entry", "PUT", self._entries(team_id, entry_id),
            body=req, into=TimeEntryResponse,
        )
        return result.data

    async def delete(self, team_id: str, entry_id: str) -> None:
        require_ids(team_id, entry_id)
        await self._call("delete time entry", "DELETE", self._entries(team_id, entry_id))

    async def history(self, team_id: str, entry_id: str) -> TimeEntryHistoryResponse:
        require_ids(team_id, entry_id)
        path = self._paths.v2("/team/{}/time_entries/{}/history", team_id, entry_id)
        return await self._call("get time entry history", "GET", path, into=TimeEntryHistoryResponse)

    async def list_tags(self, team_id: str) -> TimeEntryTagsResponse:
        require_ids(team_id)
        path = self._paths.v2("/team/{}/time_entries/tags", team_id)
        return await self._call("list time entry tags", "GET", path, into=TimeEntryTagsResponse)

    async def add_tags(self, team_id: str, req: TimeEntryTagsRequest) -> None:
        require_ids(team_id)
        if not req.time_entry_ids or not req.tags:
            raise IDRequiredError()
        path = self._paths.v2("/team/{}/time_entries/tags", team_id)
        await self._call("add time entry tags", "POST", path, body=req)

    async def remove_tags(self, team_id: str, req: TimeEntryTagsRequest) -> None:
        """DELETE with a JSON body naming the entries and tags."""
        require_ids(team_id)
        if not req.time_entry_ids or not req.tags:
            raise IDRequiredError()
        path = self._paths.v2("/team/{}/time_entries/tags", team_id)
        await self._call("remove time entry tags", "DELETE", path, body=req)

    async def rename_tag(self, team_id: str, req: RenameTimeEntryTagRequest) -> None:
        require_ids(team_id)
        if not req.name or not req.new_name:
            raise NameRequiredError()
        path = self._paths.v2("/team/{}/time_entries/tags", team_id)
        await self._call("rename time entry tag", "PUT", path, body=req)


class LegacyTimeService(Service):
    """Per-task time intervals (GET/POST /v2/task/{id}/time)."""

    async def list(self, task_id: str, custom_task_ids: bool = False, team_id: str = "") -> LegacyTimeResponse:
        require_ids(task_id)
        query = encode_query({"custom_task_ids": custom_task_ids, "team_id": team_id})
        return await self._call(
            "list legacy time", "GET", self._paths.v2("/task/{}/time", task_id),
            query=query, into=LegacyTimeResponse,
        )

    async def track(self, task_id: str, req: TrackTimeRequest) -> TrackTimeResponse:
        require_ids(task_id)
        return await self._call(
            "track legacy time", "POST", self._paths.v2("/task/{}/time", task_id),
            body=req, into=TrackTimeResponse,
        )

    async def edit(self, task_id: str, interval_id: str, req: EditTimeRequest) -> None:
        require_ids(task_id, interval_id)
        await self._call(
            "edit legacy time", "PUT", self._paths.v2("/task/{}/time/{}", task_id, interval_id),
            body=req,
        )

    async def delete(self, task_id: str, interval_id: str) -> None:
        require_ids(task_id, interval_id)
        await self._call(
            "delete legacy time", "DELETE", self._paths.v2("/task/{}/time/{}", task_id, interval_id)
        )
