"""Agent endpoints: simple call, chat/text completions, models and embed code."""

import logging
import warnings
from typing import Optional

from ..config import Settings
from ..models import (
    AgentCallRequest,
    AgentCallResponse,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ModelsResponse,
    TextCompletionRequest,
    TextCompletionResponse,
)
from ..services.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class AgentsAPI:
    """Endpoints addressed by an agent access id."""

    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher

    async def call_agent(
        self, agent_access_id: str, request: AgentCallRequest
    ) -> AgentCallResponse:
        """
        Call an agent with a single message.

        POST /api/v1/cloud-ai/agents/{agent_access_id}/call
        """
        return await self._dispatcher.send(
            "POST",
            Settings.agent_path(agent_access_id, "/call"),
            AgentCallResponse,
            body=request,
        )

    async def chat_completions(
        self, agent_access_id: str, request: ChatCompletionRequest
    ) -> ChatCompletionResponse:
        """
        OpenAI-compatible chat completions.

        POST /api/v1/cloud-ai/agents/{agent_access_id}/v1/chat/completions
        """
        if request.stream:
            logger.debug("stream=True is forwarded as-is; the body is decoded as one response")
        return await self._dispatcher.send(
            "POST",
            Settings.agent_path(agent_access_id, "/v1/chat/completions"),
            ChatCompletionResponse,
            body=request,
        )

    async def text_completions(
        self, agent_access_id: str, request: TextCompletionRequest
    ) -> TextCompletionResponse:
        """
        Legacy text completions. Deprecated: use ``chat_completions``.

        POST /api/v1/cloud-ai/agents/{agent_access_id}/v1/completions
        """
        warnings.warn(
            "text_completions is deprecated, use chat_completions instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return await self._dispatcher.send(
            "POST",
            Settings.agent_path(agent_access_id, "/v1/completions"),
            TextCompletionResponse,
            body=request,
        )

    async def list_models(self, agent_access_id: str) -> ModelsResponse:
        """
        List models available to the agent.

        GET /api/v1/cloud-ai/agents/{agent_access_id}/v1/models
        """
        return await self._dispatcher.send(
            "GET",
            Settings.agent_path(agent_access_id, "/v1/models"),
            ModelsResponse,
        )

    async def get_embed_code(
        self,
        agent_access_id: str,
        referer: str,
        origin: str,
        collapsed: Optional[bool] = None,
    ) -> str:
        """
        Get the widget embed JavaScript.

        GET /api/v1/cloud-ai/agents/{agent_access_id}/embed.js

        Sent without a bearer token: the server authorizes by the
        ``referer``/``origin`` of the embedding site.
        """
        return await self._dispatcher.send_text(
            "GET",
            Settings.agent_path(agent_access_id, "/embed.js"),
            auth=False,
            query={"collapsed": collapsed},
            headers={"referer": referer, "origin": origin},
        )
