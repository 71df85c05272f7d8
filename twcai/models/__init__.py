"""Data models for the Timeweb Cloud AI API."""

from .chat import (
    AgentCallRequest,
    AgentCallResponse,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    Choice,
    ResponseFormat,
    ResponseMessage,
    Role,
    TextCompletionChoice,
    TextCompletionLogprobs,
    TextCompletionRequest,
    TextCompletionResponse,
    Tool,
)
from .common import (
    CustomTool,
    FinishReason,
    FunctionTool,
    Model,
    ModelsResponse,
    ResponseFormatJsonObject,
    ResponseFormatJsonSchema,
    ResponseFormatText,
    StreamOptions,
    Usage,
)
from .content import (
    AudioFormat,
    ChatContent,
    ContentItem,
    FileContent,
    ImageUrl,
    ImageUrlContent,
    InputAudio,
    InputAudioContent,
    RefusalContent,
    TextContent,
    decode_chat_content,
    decode_content_item,
    encode_chat_content,
    encode_content_item,
)
from .conversation import (
    Conversation,
    ConversationDeleted,
    ConversationItem,
    ConversationItemContent,
    ConversationItemList,
    ConversationItemMessage,
    CreateConversationRequest,
    CreateItemsQuery,
    CreateItemsRequest,
    GetItemQuery,
    ItemContentInput,
    ListItemsQuery,
    UpdateConversationRequest,
)
from .response import (
    CreateResponseRequest,
    GetResponseQuery,
    Response,
    ResponseInput,
)

__all__ = [
    # Content
    "AudioFormat",
    "ChatContent",
    "ContentItem",
    "FileContent",
    "ImageUrl",
    "ImageUrlContent",
    "InputAudio",
    "InputAudioContent",
    "RefusalContent",
    "TextContent",
    "decode_chat_content",
    "decode_content_item",
    "encode_chat_content",
    "encode_content_item",
    # Common
    "CustomTool",
    "FinishReason",
    "FunctionTool",
    "Model",
    "ModelsResponse",
    "ResponseFormatJsonObject",
    "ResponseFormatJsonSchema",
    "ResponseFormatText",
    "StreamOptions",
    "Usage",
    # Chat
    "AgentCallRequest",
    "AgentCallResponse",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatMessage",
    "Choice",
    "ResponseFormat",
    "ResponseMessage",
    "Role",
    "TextCompletionChoice",
    "TextCompletionLogprobs",
    "TextCompletionRequest",
    "TextCompletionResponse",
    "Tool",
    # Conversations
    "Conversation",
    "ConversationDeleted",
    "ConversationItem",
    "ConversationItemContent",
    "ConversationItemList",
    "ConversationItemMessage",
    "CreateConversationRequest",
    "CreateItemsQuery",
    "CreateItemsRequest",
    "GetItemQuery",
    "ItemContentInput",
    "ListItemsQuery",
    "UpdateConversationRequest",
    # Responses
    "CreateResponseRequest",
    "GetResponseQuery",
    "Response",
    "ResponseInput",
]
