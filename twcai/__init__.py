"""Python client for the Timeweb Cloud AI agents API.

OpenAI-compatible interfaces for AI agent interactions:
- chat completions with multimodal content (text, image, audio, file)
- stateful responses
- persisted conversations and their items
"""

from . import models
from .client import ClientBuilder, CloudAIClient
from .errors import (
    ConfigurationError,
    DecodeError,
    ErrorKind,
    ForbiddenError,
    InvalidRequestError,
    NotFoundError,
    ResponseCancelledError,
    ServerError,
    TransportError,
    TwcError,
    UnauthorizedError,
    classify,
)
from .middleware.auth import ClientConfig

__version__ = "0.1.0"

__all__ = [
    "models",
    # Client
    "ClientBuilder",
    "ClientConfig",
    "CloudAIClient",
    # Errors
    "ConfigurationError",
    "DecodeError",
    "ErrorKind",
    "ForbiddenError",
    "InvalidRequestError",
    "NotFoundError",
    "ResponseCancelledError",
    "ServerError",
    "TransportError",
    "TwcError",
    "UnauthorizedError",
    "classify",
]
