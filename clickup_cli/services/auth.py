"""Authorization and workspace (team) endpoints."""

from __future__ import annotations

from clickup_cli.errors import OAuthFieldsRequiredError
from clickup_cli.models import (
    AuthorizedUserResponse,
    OAuthTokenRequest,
    OAuthTokenResponse,
    WorkspacePlanResponse,
    WorkspaceSeatsResponse,
    WorkspacesResponse,
)
from clickup_cli.services.base import Service, require_ids


class AuthService(Service):

    async def whoami(self) -> AuthorizedUserResponse:
        """GET /v2/user: the user the credential belongs to."""
        return await self._call(
            "get authorized user", "GET", self._paths.v2("/user"),
            into=AuthorizedUserResponse,
        )

    async def token(self, req: OAuthTokenRequest) -> OAuthTokenResponse:
        """POST /v2/oauth/token: exchange an authorization code.

        The transport leaves the Authorization header off this one path.
        """
        if not (req.client_id and req.client_secret and req.code):
            raise OAuthFieldsRequiredError()
        return await self._call(
            "exchange oauth token", "POST", self._paths.v2("/oauth/token"),
            body=req, into=OAuthTokenResponse,
        )


class WorkspacesService(Service):

    async def list(self) -> WorkspacesResponse:
        return await self._call(
            "list workspaces", "GET", self._paths.v2("/team"), into=WorkspacesResponse
        )

    async def plan(self, team_id: str) -> WorkspacePlanResponse:
        require_ids(team_id)
        return await self._call(
            "get workspace plan", "GET", self._paths.v2("/team/{}/plan", team_id),
            into=WorkspacePlanResponse,
        )

    async def seats(self, team_id: str) -> WorkspaceSeatsResponse:
        require_ids(team_id)
        return await self._call(
            "get workspace seats", "GET", self._paths.v2("/team/{}/seats", team_id),
            into=WorkspaceSeatsResponse,
        )
