"""Conversation and conversation item models.

Conversation items use a narrower content shape than chat messages: a list
of ``{type, text}`` parts with no multimodal variants.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel


class ConversationItemContent(BaseModel):
    """Stored item content, e.g. ``input_text`` or ``output_text``."""

    type: str
    text: str


class ConversationItem(BaseModel):
    """Conversation item (message)."""

    type: str = "message"
    id: str
    status: str
    role: str
    content: List[ConversationItemContent]


class ItemContentInput(BaseModel):
    """Content part for creating an item."""

    type: str = "input_text"
    text: str


class ConversationItemMessage(BaseModel):
    """Message item sent when creating a conversation or adding items."""

    type: Literal["message"] = "message"
    role: str
    content: List[ItemContentInput]

    @classmethod
    def text(cls, role: str, text: str) -> "ConversationItemMessage":
        """Single ``input_text`` message for ``role``."""
        return cls(role=role, content=[ItemContentInput(text=text)])


class CreateConversationRequest(BaseModel):
    """Request to create a conversation.

    The server accepts up to 20 initial items and 16 metadata pairs; neither
    limit is checked here.
    """

    items: Optional[List[ConversationItemMessage]] = None
    metadata: Optional[Dict[str, Any]] = None


class UpdateConversationRequest(BaseModel):
    """Replace the conversation metadata."""

    metadata: Dict[str, Any]


class Conversation(BaseModel):
    """Conversation object."""

    id: str
    object: str = "conversation"
    created_at: int
    metadata: Optional[Dict[str, Any]] = None


class ConversationDeleted(BaseModel):
    """Conversation deletion confirmation."""

    id: str
    object: str
    deleted: bool


class ConversationItemList(BaseModel):
    """A page of conversation items.

    When ``has_more`` is true, request the next page with ``after=last_id``.
    """

    object: str = "list"
    data: List[ConversationItem]
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool


class CreateItemsRequest(BaseModel):
    """Items to add to a conversation (server limit: 20)."""

    items: List[ConversationItemMessage]


# =============================================================================
# Query parameters
# =============================================================================


class ListItemsQuery(BaseModel):
    """Query parameters for listing conversation items."""

    after: Optional[str] = None
    include: Optional[List[str]] = None
    limit: Optional[int] = None  # 1-100, server default 20
    order: Optional[Literal["asc", "desc"]] = None


class CreateItemsQuery(BaseModel):
    include: Optional[List[str]] = None


class GetItemQuery(BaseModel):
    include: Optional[List[str]] = None
