"""Cloud AI client and its builder."""

import logging
from typing import Optional

import httpx

from .config import DEFAULT_BASE_URL, DEFAULT_CLIENT_ID, DEFAULT_TIMEOUT, Settings
from .errors import ConfigurationError
from .middleware.auth import ClientConfig
from .routes import AgentsAPI, ConversationsAPI, ResponsesAPI
from .services.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class CloudAIClient:
    """
    Client for the Timeweb Cloud AI agents API.

    Endpoint groups:
    - ``agents``: call, chat/text completions, models, embed code
    - ``conversations``: conversations and their items
    - ``responses``: stateful responses

    Usage:
        async with CloudAIClient.builder().token("...").build() as client:
            reply = await client.agents.chat_completions(agent_id, request)
    """

    def __init__(self, config: ClientConfig, owns_http_client: bool = False):
        self.config = config
        self._owns_http_client = owns_http_client
        dispatcher = Dispatcher(config)
        self.agents = AgentsAPI(dispatcher)
        self.conversations = ConversationsAPI(dispatcher)
        self.responses = ResponsesAPI(dispatcher)

    @staticmethod
    def builder() -> "ClientBuilder":
        return ClientBuilder()

    @classmethod
    def from_env(cls) -> "CloudAIClient":
        """
        Create a client from environment variables.

        Uses TWCAI_BASE_URL (optional, defaults to https://agent.timeweb.cloud),
        TWCAI_API_TOKEN (required) and TWCAI_TIMEOUT (optional, seconds).
        Raises ``ConfigurationError`` for a missing token or a malformed timeout.
        """
        env = Settings()
        if not env.API_TOKEN:
            raise ConfigurationError("TWCAI_API_TOKEN environment variable not set")
        return (
            cls.builder()
            .base_url(env.BASE_URL)
            .token(env.API_TOKEN)
            .timeout(env.TIMEOUT)
            .client_id(env.CLIENT_ID)
            .build()
        )

    async def aclose(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._owns_http_client:
            await self.config.http_client.aclose()

    async def __aenter__(self) -> "CloudAIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


class ClientBuilder:
    """Builder for ``CloudAIClient``.

    ``build()`` validates the configuration before any network activity and
    raises ``ConfigurationError`` if the token or base URL is missing.
    """

    def __init__(self) -> None:
        self._base_url: Optional[str] = DEFAULT_BASE_URL
        self._token: Optional[str] = None
        self._timeout: float = DEFAULT_TIMEOUT
        self._client_id: str = DEFAULT_CLIENT_ID
        self._transport: Optional[httpx.AsyncBaseTransport] = None
        self._http_client: Optional[httpx.AsyncClient] = None

    def base_url(self, url: Optional[str]) -> "ClientBuilder":
        self._base_url = url
        return self

    def token(self, token: Optional[str]) -> "ClientBuilder":
        self._token = token
        return self

    def timeout(self, seconds: float) -> "ClientBuilder":
        """Total seconds one call may take, from connect to the last body byte."""
        self._timeout = seconds
        return self

    def client_id(self, client_id: str) -> "ClientBuilder":
        """Value of the ``x-proxy-source`` header."""
        self._client_id = client_id
        return self

    def transport(self, transport: httpx.AsyncBaseTransport) -> "ClientBuilder":
        """Use a custom transport (e.g. ``httpx.MockTransport``) for the built HTTP client."""
        self._transport = transport
        return self

    def http_client(self, client: httpx.AsyncClient) -> "ClientBuilder":
        """Share an existing HTTP client; it is not closed by ``aclose()``."""
        self._http_client = client
        return self

    def build(self) -> CloudAIClient:
        """Build the client."""
        if not self._base_url or not self._base_url.strip():
            raise ConfigurationError("Base URL is required")
        if not self._token or not self._token.strip():
            raise ConfigurationError("Token is required")
        if self._timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self._timeout}")

        owns_http_client = self._http_client is None
        http_client = self._http_client
        if http_client is None:
            http_client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )

        config = ClientConfig(
            base_url=self._base_url.strip().rstrip("/"),
            token=self._token,
            http_client=http_client,
            client_id=self._client_id,
            timeout=self._timeout,
        )
        logger.debug(f"Built Cloud AI client for {config.base_url}")
        return CloudAIClient(config, owns_http_client=owns_http_client)
