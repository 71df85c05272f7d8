"""Error types for the Timeweb Cloud AI client.

Every failure surfaced by the client is a subclass of ``TwcError``:

    TwcError (base)
    ├── TransportError        - no HTTP status received (connect, timeout, ...)
    ├── DecodeError           - success body could not be parsed
    ├── UnauthorizedError     - HTTP 401
    ├── ForbiddenError        - HTTP 403 (domain not whitelisted / agent suspended)
    ├── NotFoundError         - HTTP 404
    ├── InvalidRequestError   - HTTP 400 and any other unmapped status
    ├── ServerError           - HTTP 5xx
    ├── ConfigurationError    - client built with invalid settings
    └── ResponseCancelledError - a response was cancelled

Usage:
    try:
        await client.conversations.get(agent_id, conversation_id)
    except NotFoundError:
        ...
    except TwcError as e:
        print(e.kind, e.message)
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of error kinds callers may branch on."""

    TRANSPORT = "transport"
    DECODE = "decode"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INVALID_REQUEST = "invalid_request"
    SERVER_ERROR = "server_error"
    CONFIGURATION = "configuration"
    CANCELLED = "cancelled"


class TwcError(Exception):
    """Base exception for all client errors."""

    kind: ErrorKind
    default_message: str = "Unknown error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def status(self) -> Optional[int]:
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TwcError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.status == other.status
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((type(self), self.status, self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class TransportError(TwcError):
    """The request never produced an HTTP status."""

    kind = ErrorKind.TRANSPORT
    default_message = "HTTP request failed"


class DecodeError(TwcError):
    """A payload could not be parsed into the expected type."""

    kind = ErrorKind.DECODE
    default_message = "Failed to decode response body"


class UnauthorizedError(TwcError):
    kind = ErrorKind.UNAUTHORIZED
    default_message = "Authentication failed - invalid or expired token"

    @property
    def status(self) -> Optional[int]:
        return 401


class ForbiddenError(TwcError):
    kind = ErrorKind.FORBIDDEN
    default_message = "Access forbidden - domain not whitelisted or agent suspended"

    @property
    def status(self) -> Optional[int]:
        return 403


class NotFoundError(TwcError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found"

    @property
    def status(self) -> Optional[int]:
        return 404


class InvalidRequestError(TwcError):
    """HTTP 400 and every non-success status without a dedicated kind."""

    kind = ErrorKind.INVALID_REQUEST
    default_message = "Bad request"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        # Informational only; not part of equality
        self.status_code = status_code


class ServerError(TwcError):
    kind = ErrorKind.SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, status_code: int, message: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def status(self) -> Optional[int]:
        return self.status_code

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.message}"

    def __repr__(self) -> str:
        return f"ServerError({self.status_code}, {self.message!r})"


class ConfigurationError(TwcError):
    kind = ErrorKind.CONFIGURATION
    default_message = "Client configuration error"


class ResponseCancelledError(TwcError):
    kind = ErrorKind.CANCELLED
    default_message = "Response was cancelled"

    def __init__(self, message: Optional[str] = None, response_id: Optional[str] = None):
        super().__init__(message)
        self.response_id = response_id


def classify(status_code: int, message: Optional[str] = None) -> TwcError:
    """Map a non-success HTTP status and optional body text to an error.

    Precedence: 401, 403, 404, 500-599, then everything else. A blank
    message is treated as absent and the kind's default message is used.
    """
    if message is not None and not message.strip():
        message = None

    if status_code == 401:
        return UnauthorizedError(message)
    if status_code == 403:
        return ForbiddenError(message)
    if status_code == 404:
        return NotFoundError(message)
    if 500 <= status_code <= 599:
        return ServerError(status_code, message)
    return InvalidRequestError(message, status_code=status_code)
