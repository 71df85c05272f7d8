"""Shared types for the agent, conversation and response APIs."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel


# =============================================================================
# Token Usage
# =============================================================================


class Usage(BaseModel):
    """Token usage statistics.

    The server guarantees ``total_tokens == prompt_tokens + completion_tokens``;
    the client does not recompute it.
    """

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


# =============================================================================
# Models listing
# =============================================================================


class Model(BaseModel):
    """Model information."""

    id: str
    object: str = "model"
    created: int
    owned_by: str


class ModelsResponse(BaseModel):
    """Model list response."""

    object: str = "list"
    data: List[Model]


FinishReason = Literal["stop", "length", "content_filter", "tool_calls", "function_call"]


# =============================================================================
# Response formats
# =============================================================================


class ResponseFormatText(BaseModel):
    type: Literal["text"] = "text"


class ResponseFormatJsonObject(BaseModel):
    type: Literal["json_object"] = "json_object"


class ResponseFormatJsonSchema(BaseModel):
    """Structured output constrained by a JSON schema."""

    type: Literal["json_schema"] = "json_schema"
    json_schema: Dict[str, Any]


# =============================================================================
# Tools
# =============================================================================


class FunctionTool(BaseModel):
    """Function tool definition."""

    type: Literal["function"] = "function"
    function: Dict[str, Any]


class CustomTool(BaseModel):
    """Custom tool definition."""

    type: Literal["custom"] = "custom"
    custom: Dict[str, Any]


class StreamOptions(BaseModel):
    """Stream options for chat completion."""

    include_usage: Optional[bool] = None
