"""Responses endpoints."""

from typing import Optional
from urllib.parse import quote

from ..config import Settings
from ..models import CreateResponseRequest, GetResponseQuery, Response
from ..services.dispatcher import Dispatcher


def _response_path(agent_access_id: str, response_id: Optional[str] = None, suffix: str = "") -> str:
    path = "/v1/responses"
    if response_id is not None:
        path += f"/{quote(response_id, safe='')}"
    return Settings.agent_path(agent_access_id, path + suffix)


class ResponsesAPI:
    """
    Stateful responses.

    Lifecycle legality (cancel only while in progress, ...) is decided by the
    server; the client only reports whether a call was accepted.
    """

    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher

    async def create(self, agent_access_id: str, request: CreateResponseRequest) -> Response:
        """POST /api/v1/cloud-ai/agents/{agent_access_id}/v1/responses"""
        return await self._dispatcher.send(
            "POST",
            _response_path(agent_access_id),
            Response,
            body=request,
        )

    async def get(
        self,
        agent_access_id: str,
        response_id: str,
        query: Optional[GetResponseQuery] = None,
    ) -> Response:
        """GET /api/v1/cloud-ai/agents/{agent_access_id}/v1/responses/{response_id}"""
        return await self._dispatcher.send(
            "GET",
            _response_path(agent_access_id, response_id),
            Response,
            query=query,
        )

    async def delete(self, agent_access_id: str, response_id: str) -> None:
        """
        Delete a response. Success is any 2xx, usually 204 with no body.

        DELETE /api/v1/cloud-ai/agents/{agent_access_id}/v1/responses/{response_id}
        """
        await self._dispatcher.send_empty(
            "DELETE",
            _response_path(agent_access_id, response_id),
        )

    async def cancel(self, agent_access_id: str, response_id: str) -> Response:
        """POST /api/v1/cloud-ai/agents/{agent_access_id}/v1/responses/{response_id}/cancel"""
        return await self._dispatcher.send(
            "POST",
            _response_path(agent_access_id, response_id, "/cancel"),
            Response,
        )
