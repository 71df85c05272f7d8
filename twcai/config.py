"""Configuration management for the Timeweb Cloud AI client."""

import logging
import os
from typing import Optional
from urllib.parse import quote

from dotenv import load_dotenv

from .errors import ConfigurationError

load_dotenv()

logger = logging.getLogger(__name__)


DEFAULT_BASE_URL = "https://agent.timeweb.cloud"
DEFAULT_TIMEOUT = 120.0
DEFAULT_CLIENT_ID = "twcai-python"


class Settings:
    """Client settings read from the environment.

    Values are read when the instance is created, so a fresh ``Settings()``
    always reflects the current process environment. A malformed number
    raises ``ConfigurationError``.
    """

    def __init__(self) -> None:
        # Connection
        self.BASE_URL: str = os.getenv("TWCAI_BASE_URL", DEFAULT_BASE_URL)
        self.TIMEOUT: float = _parse_number("TWCAI_TIMEOUT", float, DEFAULT_TIMEOUT)

        # Authentication
        self.API_TOKEN: Optional[str] = os.getenv("TWCAI_API_TOKEN")

        # Sent as x-proxy-source on every request
        self.CLIENT_ID: str = os.getenv("TWCAI_CLIENT_ID", DEFAULT_CLIENT_ID)

    # API path layout
    AGENTS_PREFIX: str = "/api/v1/cloud-ai/agents"

    @classmethod
    def agent_path(cls, agent_access_id: str, suffix: str = "") -> str:
        """Build an agent-scoped path, e.g. ``/api/v1/cloud-ai/agents/{id}/call``."""
        return f"{cls.AGENTS_PREFIX}/{quote(agent_access_id, safe='')}{suffix}"


def _parse_number(name: str, cast, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


# Debug payload logging. Read on every call so it can be toggled at runtime.

def payload_logging_enabled() -> bool:
    return os.getenv("DEBUG_LOG_PAYLOADS", "false").lower() == "true"


def payload_log_max_length() -> int:
    """Truncation limit for logged payloads; 0 means no limit.

    A malformed value is ignored with a warning, since logging must never
    break a request.
    """
    try:
        return _parse_number("DEBUG_LOG_MAX_LENGTH", int, 0)
    except ConfigurationError as e:
        logger.warning(f"{e}; payloads are logged untruncated")
        return 0
