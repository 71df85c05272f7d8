"""Request header construction: bearer authentication and client identification."""

import uuid
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from ..config import DEFAULT_TIMEOUT
from ..errors import ConfigurationError

CLIENT_ID_HEADER = "x-proxy-source"
REQUEST_ID_HEADER = "x-request-id"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable connection context shared by every endpoint group.

    The ``http_client`` is safe for concurrent use by in-flight requests;
    nothing here is mutated after construction. ``timeout`` is the total
    number of seconds one call may take, response body included.
    """

    base_url: str
    token: str
    http_client: httpx.AsyncClient
    client_id: str
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.base_url or not self.base_url.strip():
            raise ConfigurationError("Base URL is required")
        if not self.token or not self.token.strip():
            raise ConfigurationError("Token is required")
        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self.timeout}")

    def auth_header(self) -> str:
        """Authorization header value."""
        return f"Bearer {self.token}"


def new_request_id() -> str:
    """Generate a request id for tracing."""
    return f"req-{uuid.uuid4().hex[:12]}"


def build_headers(
    config: ClientConfig,
    auth: bool = True,
    request_id: Optional[str] = None,
    extra: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    """
    Build request headers.

    The client identification and request id headers are sent on every
    request; ``Authorization: Bearer <token>`` only when ``auth`` is true.
    """
    headers = {
        CLIENT_ID_HEADER: config.client_id,
        REQUEST_ID_HEADER: request_id or new_request_id(),
    }
    if auth:
        headers["Authorization"] = config.auth_header()
    if extra:
        headers.update(extra)
    return headers
