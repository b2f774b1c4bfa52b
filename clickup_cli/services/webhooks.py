"""Webhook subscriptions for a workspace."""

from __future__ import annotations

from clickup_cli.errors import EndpointRequiredError, EventsRequiredError
from clickup_cli.models import (
    CreateWebhookRequest,
    UpdateWebhookRequest,
    Webhook,
    WebhooksResponse,
)
from clickup_cli.services.base import Service, require_ids, require_text


class WebhooksService(Service):

    async def list(self, team_id: str) -> WebhooksResponse:
        require_ids(team_id)
        return await self._call(
            "list webhooks", "GET", self._paths.v2("/team/{}/webhook", team_id),
            into=WebhooksResponse,
        )

    async def create(self, team_id: str, req: CreateWebhookRequest) -> Webhook:
        require_ids(team_id)
        require_text(req.endpoint, EndpointRequiredError)
        if not req.events:
            raise EventsRequiredError()
        return await self._call(
            "create webhook", "POST", self._paths.v2("/team/{}/webhook", team_id),
            body=req, into=Webhook,
        )

    async def update(self, webhook_id: str, req: UpdateWebhookRequest) -> Webhook:
        require_ids(webhook_id)
        return await self._call(
            "update webhook", "PUT", self._paths.v2("/webhook/{}", webhook_id),
            body=req, into=Webhook,
        )

    async def delete(self, webhook_id: str) -> None:
        require_ids(webhook_id)
        await self._call("delete webhook", "DELETE", self._paths.v2("/webhook/{}", webhook_id))
