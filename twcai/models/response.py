"""Models for the stateful responses API."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from ..errors import ResponseCancelledError
from .common import Usage


# Plain text, or an array of raw input message objects
ResponseInput = Union[str, List[Dict[str, Any]]]


class CreateResponseRequest(BaseModel):
    """Request to create a response.

    ``model`` is accepted for compatibility; the agent uses its own model.
    """

    model: Optional[str] = None
    instructions: Optional[str] = None
    input: Optional[ResponseInput] = None
    max_output_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    top_logprobs: Optional[int] = None
    metadata: Optional[Dict[str, Any]] = None
    tools: Optional[List[Dict[str, Any]]] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None
    parallel_tool_calls: Optional[bool] = None
    max_tool_calls: Optional[int] = None
    stream: Optional[bool] = None
    stream_options: Optional[Dict[str, Any]] = None
    background: Optional[bool] = None
    text: Optional[Dict[str, Any]] = None
    previous_response_id: Optional[str] = None
    conversation: Optional[Union[str, Dict[str, Any]]] = None
    include: Optional[List[str]] = None
    store: Optional[bool] = None
    truncation: Optional[str] = None
    service_tier: Optional[str] = None
    safety_identifier: Optional[str] = None
    prompt_cache_key: Optional[str] = None
    prompt: Optional[Dict[str, Any]] = None
    reasoning: Optional[Dict[str, Any]] = None
    user: Optional[str] = None  # deprecated: use safety_identifier or prompt_cache_key


class Response(BaseModel):
    """Response object.

    Fields not modelled here (``output``, ``error``, ``instructions``, ...)
    are kept verbatim in the extension bag and available through ``extra``.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    object: str = "response"
    created_at: int
    model: str
    status: str
    usage: Optional[Usage] = None

    @property
    def extra(self) -> Dict[str, Any]:
        """Unmodelled fields as received from the server."""
        return dict(self.model_extra or {})

    @property
    def is_cancelled(self) -> bool:
        return self.status == "cancelled"

    def raise_if_cancelled(self) -> "Response":
        """Return self, or raise ``ResponseCancelledError`` if cancelled."""
        if self.is_cancelled:
            raise ResponseCancelledError(
                f"Response {self.id} was cancelled", response_id=self.id
            )
        return self

    @property
    def output_text(self) -> str:
        """Concatenated ``output_text`` parts of all output messages."""
        parts = []
        for item in self.extra.get("output") or []:
            if not isinstance(item, dict):
                continue
            for part in item.get("content") or []:
                if isinstance(part, dict) and part.get("type") == "output_text":
                    parts.append(part.get("text", ""))
        return "".join(parts)


class GetResponseQuery(BaseModel):
    """Query parameters for retrieving a response."""

    include: Optional[List[str]] = None
    include_obfuscation: Optional[bool] = None
    starting_after: Optional[int] = None
    stream: Optional[bool] = None
