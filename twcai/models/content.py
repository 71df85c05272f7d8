"""Multimodal content types for chat messages.

``ChatContent`` is an untagged union on the wire: a bare string, or an array
of content items each tagged by its ``type`` field. A one-element array is
still an array.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from ..errors import DecodeError


class TextContent(BaseModel):
    """Text content block."""

    type: Literal["text"] = "text"
    text: str


class ImageUrl(BaseModel):
    """Image URL specification."""

    url: str  # https://... or data:image/png;base64,...
    detail: Optional[Literal["auto", "low", "high"]] = None


class ImageUrlContent(BaseModel):
    """Image URL content block."""

    type: Literal["image_url"] = "image_url"
    image_url: ImageUrl


AudioFormat = Literal["wav", "mp3", "m4a", "ogg", "flac", "webm"]


class InputAudio(BaseModel):
    """Base64 encoded audio input."""

    data: str
    format: AudioFormat


class InputAudioContent(BaseModel):
    """Input audio content block."""

    type: Literal["input_audio"] = "input_audio"
    input_audio: InputAudio


class FileContent(BaseModel):
    """File content block.

    ``file`` is an opaque file reference (``file_id``, or ``filename`` plus
    base64 ``file_data``) passed through unchanged.
    """

    type: Literal["file"] = "file"
    file: Dict[str, Any]


class RefusalContent(BaseModel):
    """Refusal content block."""

    type: Literal["refusal"] = "refusal"
    refusal: str


ContentItem = Annotated[
    Union[TextContent, ImageUrlContent, InputAudioContent, FileContent, RefusalContent],
    Field(discriminator="type"),
]

ChatContent = Union[str, List[ContentItem]]


_content_item_adapter: TypeAdapter = TypeAdapter(ContentItem)


def encode_content_item(item: BaseModel) -> Dict[str, Any]:
    """Encode one content item to its wire value. ``type`` is always present."""
    return _content_item_adapter.dump_python(item, mode="json", exclude_none=True)


def decode_content_item(value: Any) -> BaseModel:
    """Decode a wire value into a content item, dispatching on ``type``.

    Raises:
        DecodeError: unknown or missing ``type``, or missing payload fields.
    """
    try:
        return _content_item_adapter.validate_python(value)
    except ValidationError as e:
        raise DecodeError(f"Invalid content item: {e}") from e


def encode_chat_content(content: ChatContent) -> Union[str, List[Dict[str, Any]]]:
    """Encode message content: a string stays a bare string, a list stays a list."""
    if isinstance(content, str):
        return content
    return [encode_content_item(item) for item in content]


def decode_chat_content(value: Any) -> ChatContent:
    """Decode message content by peeking at the JSON shape (string vs array)."""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return [decode_content_item(item) for item in value]
    raise DecodeError(
        f"Message content must be a string or an array, got {type(value).__name__}"
    )
