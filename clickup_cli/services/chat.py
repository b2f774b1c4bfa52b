"""Chat channels, messages, reactions and replies (v3, workspace-scoped)."""

from __future__ import annotations

from clickup_cli.errors import IDRequiredError, NameRequiredError, TextRequiredError
from clickup_cli.models import (
    ChatChannel,
    ChatChannelsResponse,
    ChatMessage,
    ChatMessagesResponse,
    ChatReaction,
    ChatReactionsResponse,
    ChatUsersResponse,
    CreateChatChannelRequest,
    CreateDMRequest,
    CreateLocationChannelRequest,
    CreateReactionRequest,
    SendMessageRequest,
    UpdateChannelRequest,
    UpdateMessageRequest,
)
from clickup_cli.query import encode_query
from clickup_cli.services.base import Service, clean_ids, require_ids, require_text


class ChatService(Service):

    # -- channels -------------------------------------------------------

    async def list_channels(self) -> ChatChannelsResponse:
        path = self._paths.v3("/chat/channels")
        return await self._call("list chat channels", "GET", path, into=ChatChannelsResponse)

    async def get_channel(self, channel_id: str) -> ChatChannel:
        require_ids(channel_id)
        path = self._paths.v3("/chat/channels/{}", channel_id)
        return await self._call("get chat channel", "GET", path, into=ChatChannel)

    async def followers(self, channel_id: str) -> ChatUsersResponse:
        require_ids(channel_id)
        path = self._paths.v3("/chat/channels/{}/followers", channel_id)
        return await self._call("get channel followers", "GET", path, into=ChatUsersResponse)

    async def members(self, channel_id: str) -> ChatUsersResponse:
        require_ids(channel_id)
        path = self._paths.v3("/chat/channels/{}/members", channel_id)
        return await self._call("get channel members", "GET", path, into=ChatUsersResponse)

    async def create_channel(self, req: CreateChatChannelRequest) -> ChatChannel:
        require_text(req.name)
        path = self._paths.v3("/chat/channels")
        return await self._call("create chat channel", "POST", path, body=req, into=ChatChannel)

    async def create_dm(self, req: CreateDMRequest) -> ChatChannel:
        if not clean_ids(req.members):
            raise IDRequiredError()
        path = self._paths.v3("/chat/channels/direct_message")
        return await self._call("create direct message", "POST", path, body=req, into=ChatChannel)

    async def create_location(self, req: CreateLocationChannelRequest) -> ChatChannel:
        """Channel attached to a space, folder or list."""
        require_ids(req.parent_type, req.parent_id)
        path = self._paths.v3("/chat/channels/location")
        return await self._call("create location channel", "POST", path, body=req, into=ChatChannel)

    async def update_channel(self, channel_id: str, req: UpdateChannelRequest) -> ChatChannel:
        require_ids(channel_id)
        path = self._paths.v3("/chat/channels/{}", channel_id)
        return await self._call("update chat channel", "PATCH", path, body=req, into=ChatChannel)

    async def delete_channel(self, channel_id: str) -> None:
        require_ids(channel_id)
        path = self._paths.v3("/chat/channels/{}", channel_id)
        await self._call("delete chat channel", "DELETE", path)

    # -- messages -------------------------------------------------------

    async def list_messages(self, channel_id: str, limit: int = 0, cursor: str = "") -> ChatMessagesResponse:
        """Cursor-paginated; pass ``pagination.next_page_token`` back as ``cursor``."""
        require_ids(channel_id)
        path = self._paths.v3("/chat/channels/{}/messages", channel_id)
        query = encode_query({"limit": limit, "cursor": cursor})
        return await self._call(
            "list chat messages", "GET", path, query=query, into=ChatMessagesResponse
        )

    async def send_message(self, channel_id: str, req: SendMessageRequest) -> ChatMessage:
        require_ids(channel_id)
        require_text(req.content, TextRequiredError)
        path = self._paths.v3("/chat/channels/{}/messages", channel_id)
        return await self._call("send chat message", "POST", path, body=req, into=ChatMessage)

    async def update_message(self, message_id: str, req: UpdateMessageRequest) -> ChatMessage:
        require_ids(message_id)
        path = self._paths.v3("/chat/messages/{}", message_id)
        return await self._call("update chat message", "PATCH", path, body=req, into=ChatMessage)

    async def delete_message(self, message_id: str) -> None:
        require_ids(message_id)
        path = self._paths.v3("/chat/messages/{}", message_id)
        await self._call("delete chat message", "DELETE", path)

    # -- reactions, replies, mentions ------------------------------------

    async def reactions(self, message_id: str) -> ChatReactionsResponse:
        require_ids(message_id)
        path = self._paths.v3("/chat/messages/{}/reactions", message_id)
        return await self._call("list reactions", "GET", path, into=ChatReactionsResponse)

    async def create_reaction(self, message_id: str, req: CreateReactionRequest) -> ChatReaction:
        require_ids(message_id)
        if not req.reaction:
            raise NameRequiredError("reaction is required")
        path = self._paths.v3("/chat/messages/{}/reactions", message_id)
        return await self._call("create reaction", "POST", path, body=req, into=ChatReaction)

    async def delete_reaction(self, message_id: str, reaction_id: str) -> None:
        require_ids(message_id, reaction_id)
        path = self._paths.v3("/chat/messages/{}/reactions/{}", message_id, reaction_id)
        await self._call("delete reaction", "DELETE", path)

    async def replies(self, message_id: str) -> ChatMessagesResponse:
        require_ids(message_id)
        path = self._paths.v3("/chat/messages/{}/replies", message_id)
        return await self._call("list replies", "GET", path, into=ChatMessagesResponse)

    async def create_reply(self, message_id: str, req: SendMessageRequest) -> ChatMessage:
        require_ids(message_id)
        require_text(req.content, TextRequiredError)
        path = self._paths.v3("/chat/messages/{}/replies", message_id)
        return await self._call("create reply", "POST", path, body=req, into=ChatMessage)

    async def tagged_users(self, message_id: str) -> ChatUsersResponse:
        require_ids(message_id)
        path = self._paths.v3("/chat/messages/{}/tagged_users", message_id)
        return await self._call("get tagged users", "GET", path, into=ChatUsersResponse)
