"""Agent call, chat completion and text completion models."""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .common import (
    CustomTool,
    FinishReason,
    FunctionTool,
    ResponseFormatJsonObject,
    ResponseFormatJsonSchema,
    ResponseFormatText,
    StreamOptions,
    Usage,
)
from .content import ChatContent, ContentItem, TextContent


Role = Literal["system", "user", "assistant", "tool", "developer"]


# =============================================================================
# Messages
# =============================================================================


class ChatMessage(BaseModel):
    """Chat message model.

    ``content`` is either a plain string or a list of content items; both
    shapes are sent to the server exactly as given.
    """

    role: Role
    content: ChatContent
    name: Optional[str] = None
    tool_call_id: Optional[str] = None
    tool_calls: Optional[List[Dict[str, Any]]] = None

    @classmethod
    def system(cls, text: str) -> "ChatMessage":
        return cls(role="system", content=text)

    @classmethod
    def developer(cls, text: str) -> "ChatMessage":
        return cls(role="developer", content=text)

    @classmethod
    def user(cls, text: str) -> "ChatMessage":
        return cls(role="user", content=text)

    @classmethod
    def assistant(cls, text: str) -> "ChatMessage":
        return cls(role="assistant", content=text)

    @classmethod
    def tool(cls, text: str, tool_call_id: str) -> "ChatMessage":
        """Tool result message answering the call ``tool_call_id``."""
        return cls(role="tool", content=text, tool_call_id=tool_call_id)

    @classmethod
    def user_multimodal(cls, items: List[ContentItem]) -> "ChatMessage":
        """User message with array content.

        Item count and order are not checked; limits are enforced server-side.
        """
        return cls(role="user", content=list(items))


# =============================================================================
# Simple agent call
# =============================================================================


class AgentCallRequest(BaseModel):
    """Request for the simple single-turn agent call."""

    message: Optional[str] = None
    parent_message_id: Optional[str] = None
    file_ids: Optional[List[str]] = None


class AgentCallResponse(BaseModel):
    """Agent call response."""

    message: str
    id: Optional[str] = None
    finish_reason: Optional[str] = None


# =============================================================================
# Chat completions
# =============================================================================


ResponseFormat = Union[ResponseFormatText, ResponseFormatJsonObject, ResponseFormatJsonSchema]
Tool = Union[FunctionTool, CustomTool]


class ChatCompletionRequest(BaseModel):
    """OpenAI-compatible chat completion request.

    ``model`` is optional: the agent carries its own model configuration.
    """

    model: Optional[str] = None
    messages: List[ChatMessage] = Field(default_factory=list)
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: Optional[bool] = None
    stream_options: Optional[StreamOptions] = None
    stop: Optional[Union[str, List[str]]] = None
    max_tokens: Optional[int] = None
    max_completion_tokens: Optional[int] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, float]] = None
    logprobs: Optional[bool] = None
    top_logprobs: Optional[int] = None
    response_format: Optional[ResponseFormat] = None
    seed: Optional[int] = None
    tools: Optional[List[Tool]] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None
    parallel_tool_calls: Optional[bool] = None
    user: Optional[str] = None


class ResponseMessage(BaseModel):
    """Message returned in a completion choice."""

    role: Role = "assistant"
    content: Optional[ChatContent] = None
    refusal: Optional[str] = None
    tool_calls: Optional[List[Dict[str, Any]]] = None


class Choice(BaseModel):
    """Chat completion choice."""

    index: int = 0
    message: ResponseMessage
    finish_reason: Optional[FinishReason] = None
    logprobs: Optional[Any] = None


class ChatCompletionResponse(BaseModel):
    """OpenAI-compatible chat completion response."""

    id: str
    object: str = "chat.completion"
    created: int
    model: str
    choices: List[Choice]
    usage: Usage
    system_fingerprint: Optional[str] = None

    @property
    def text(self) -> Optional[str]:
        """Text of the first choice, joining text parts of array content."""
        if not self.choices:
            return None
        content = self.choices[0].message.content
        if content is None or isinstance(content, str):
            return content
        return "".join(part.text for part in content if isinstance(part, TextContent))


# =============================================================================
# Text completions (legacy)
# =============================================================================


class TextCompletionRequest(BaseModel):
    """Legacy text completion request."""

    prompt: str
    model: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: Optional[bool] = None
    logprobs: Optional[int] = None
    echo: Optional[bool] = None
    stop: Optional[List[str]] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    best_of: Optional[int] = None
    user: Optional[str] = None


class TextCompletionLogprobs(BaseModel):
    tokens: List[str]
    token_logprobs: List[float]
    top_logprobs: Any = None
    text_offset: List[int]


class TextCompletionChoice(BaseModel):
    text: str
    index: int
    logprobs: Optional[TextCompletionLogprobs] = None
    finish_reason: str


class TextCompletionResponse(BaseModel):
    """Legacy text completion response."""

    id: str
    object: str = "text_completion"
    created: int
    model: str
    choices: List[TextCompletionChoice]
    usage: Usage
