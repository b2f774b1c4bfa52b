"""Goals and their key results (targets)."""

from __future__ import annotations

from clickup_cli.errors import KeyResultTypeRequiredError
from clickup_cli.models import (
    CreateGoalRequest,
    CreateKeyResultRequest,
    EditKeyResultRequest,
    Goal,
    GoalResponse,
    GoalsResponse,
    KeyResult,
    KeyResultResponse,
    UpdateGoalRequest,
)
from clickup_cli.query import encode_query
from clickup_cli.services.base import Service, require_ids, require_text


class GoalsService(Service):

    async def list(self, team_id: str, include_completed: bool = False) -> GoalsResponse:
        require_ids(team_id)
        return await self._call(
            "list goals", "GET", self._paths.v2("/team/{}/goal", team_id),
            query=encode_query({"include_closed": include_completed}), into=GoalsResponse,
        )

    async def get(self, goal_id: str) -> Goal:
        require_ids(goal_id)
        result = await self._call(
            "get goal", "GET", self._paths.v2("/goal/{}", goal_id), into=GoalResponse
        )
        return result.goal

    async def create(self, team_id: str, req: CreateGoalRequest) -> Goal:
        require_ids(team_id)
        require_text(req.name)
        result = await self._call(
            "create goal", "POST", self._paths.v2("/team/{}/goal", team_id),
            body=req, into=GoalResponse,
        )
        return result.goal

    async def update(self, goal_id: str, req: UpdateGoalRequest) -> Goal:
        require_ids(goal_id)
        result = await self._call(
            "update goal", "PUT", self._paths.v2("/goal/{}", goal_id),
            body=req, into=GoalResponse,
        )
        return result.goal

    async def delete(self, goal_id: str) -> None:
        require_ids(goal_id)
        await self._call("delete goal", "DELETE", self._paths.v2("/goal/{}", goal_id))

    async def create_key_result(self, goal_id: str, req: CreateKeyResultRequest) -> KeyResult:
        require_ids(goal_id)
        require_text(req.name)
        require_text(req.type, KeyResultTypeRequiredError)
        result = await self._call(
            "create key result", "POST", self._paths.v2("/goal/{}/key_result", goal_id),
            body=req, into=KeyResultResponse,
        )
        return result.key_result

    async def update_key_result(self, key_result_id: str, req: EditKeyResultRequest) -> KeyResult:
        require_ids(key_result_id)
        result = await self._call(
            "update key result", "PUT", self._paths.v2("/key_result/{}", key_result_id),
            body=req, into=KeyResultResponse,
        )
        return result.key_result

    async def delete_key_result(self, key_result_id: str) -> None:
        require_ids(key_result_id)
        await self._call(
            "delete key result", "DELETE", self._paths.v2("/key_result/{}", key_result_id)
        )
