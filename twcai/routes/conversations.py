"""Conversation and conversation item endpoints."""

from typing import Optional
from urllib.parse import quote

from ..config import Settings
from ..models import (
    Conversation,
    ConversationDeleted,
    ConversationItem,
    ConversationItemList,
    CreateConversationRequest,
    CreateItemsQuery,
    CreateItemsRequest,
    GetItemQuery,
    ListItemsQuery,
    UpdateConversationRequest,
)
from ..services.dispatcher import Dispatcher


def _conversation_path(agent_access_id: str, conversation_id: Optional[str] = None) -> str:
    suffix = "/v1/conversations"
    if conversation_id is not None:
        suffix += f"/{quote(conversation_id, safe='')}"
    return Settings.agent_path(agent_access_id, suffix)


def _items_path(agent_access_id: str, conversation_id: str, item_id: Optional[str] = None) -> str:
    path = f"{_conversation_path(agent_access_id, conversation_id)}/items"
    if item_id is not None:
        path += f"/{quote(item_id, safe='')}"
    return path


class ConversationsAPI:
    """
    Persisted conversations and their items.

    List operations return one page; callers paginate themselves by passing
    ``after=page.last_id`` while ``page.has_more`` is true.
    """

    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher

    async def create(
        self, agent_access_id: str, request: Optional[CreateConversationRequest] = None
    ) -> Conversation:
        """POST /api/v1/cloud-ai/agents/{agent_access_id}/v1/conversations"""
        return await self._dispatcher.send(
            "POST",
            _conversation_path(agent_access_id),
            Conversation,
            body=request or CreateConversationRequest(),
        )

    async def get(self, agent_access_id: str, conversation_id: str) -> Conversation:
        """GET /api/v1/cloud-ai/agents/{agent_access_id}/v1/conversations/{conversation_id}"""
        return await self._dispatcher.send(
            "GET",
            _conversation_path(agent_access_id, conversation_id),
            Conversation,
        )

    async def update(
        self,
        agent_access_id: str,
        conversation_id: str,
        request: UpdateConversationRequest,
    ) -> Conversation:
        """
        Replace the conversation metadata.

        POST /api/v1/cloud-ai/agents/{agent_access_id}/v1/conversations/{conversation_id}
        """
        return await self._dispatcher.send(
            "POST",
            _conversation_path(agent_access_id, conversation_id),
            Conversation,
            body=request,
        )

    async def delete(self, agent_access_id: str, conversation_id: str) -> ConversationDeleted:
        """DELETE /api/v1/cloud-ai/agents/{agent_access_id}/v1/conversations/{conversation_id}"""
        return await self._dispatcher.send(
            "DELETE",
            _conversation_path(agent_access_id, conversation_id),
            ConversationDeleted,
        )

    async def list_items(
        self,
        agent_access_id: str,
        conversation_id: str,
        query: Optional[ListItemsQuery] = None,
    ) -> ConversationItemList:
        """GET .../v1/conversations/{conversation_id}/items"""
        return await self._dispatcher.send(
            "GET",
            _items_path(agent_access_id, conversation_id),
            ConversationItemList,
            query=query,
        )

    async def create_items(
        self,
        agent_access_id: str,
        conversation_id: str,
        request: CreateItemsRequest,
        query: Optional[CreateItemsQuery] = None,
    ) -> ConversationItemList:
        """POST .../v1/conversations/{conversation_id}/items"""
        return await self._dispatcher.send(
            "POST",
            _items_path(agent_access_id, conversation_id),
            ConversationItemList,
            body=request,
            query=query,
        )

    async def get_item(
        self,
        agent_access_id: str,
        conversation_id: str,
        item_id: str,
        query: Optional[GetItemQuery] = None,
    ) -> ConversationItem:
        """GET .../v1/conversations/{conversation_id}/items/{item_id}"""
        return await self._dispatcher.send(
            "GET",
            _items_path(agent_access_id, conversation_id, item_id),
            ConversationItem,
            query=query,
        )

    async def delete_item(
        self, agent_access_id: str, conversation_id: str, item_id: str
    ) -> Conversation:
        """
        Delete one item; the server answers with the owning conversation.

        DELETE .../v1/conversations/{conversation_id}/items/{item_id}
        """
        return await self._dispatcher.send(
            "DELETE",
            _items_path(agent_access_id, conversation_id, item_id),
            Conversation,
        )
