"""Tests for the multimodal content model and its wire shape."""

import pytest

from twcai import DecodeError
from twcai.models import (
    ChatMessage,
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


class TestContentItemEncoding:
    """Each variant encodes with its discriminant."""

    def test_text(self):
        assert encode_content_item(TextContent(text="hi")) == {"type": "text", "text": "hi"}

    def test_image_url_without_detail(self):
        item = ImageUrlContent(image_url=ImageUrl(url="https://example.com/a.jpg"))
        assert encode_content_item(item) == {
            "type": "image_url",
            "image_url": {"url": "https://example.com/a.jpg"},
        }

    def test_image_url_with_detail(self):
        item = ImageUrlContent(image_url=ImageUrl(url="https://example.com/a.jpg", detail="high"))
        assert encode_content_item(item)["image_url"]["detail"] == "high"

    def test_input_audio(self):
        item = InputAudioContent(input_audio=InputAudio(data="AAAA", format="mp3"))
        assert encode_content_item(item) == {
            "type": "input_audio",
            "input_audio": {"data": "AAAA", "format": "mp3"},
        }

    def test_file_reference_passed_through(self):
        item = FileContent(file={"filename": "a.pdf", "file_data": "JVBERi0="})
        assert encode_content_item(item) == {
            "type": "file",
            "file": {"filename": "a.pdf", "file_data": "JVBERi0="},
        }

    def test_refusal(self):
        assert encode_content_item(RefusalContent(refusal="no")) == {
            "type": "refusal",
            "refusal": "no",
        }


class TestContentItemDecoding:
    """Decoding dispatches on ``type`` and rejects incomplete payloads."""

    def test_decodes_every_variant(self, multimodal_items: list):
        decoded = [decode_content_item(item) for item in multimodal_items]
        assert [type(item) for item in decoded] == [
            TextContent,
            ImageUrlContent,
            InputAudioContent,
            FileContent,
            RefusalContent,
        ]
        assert decoded[1].image_url.detail == "low"
        assert decoded[2].input_audio.format == "wav"
        assert decoded[3].file == {"file_id": "file-abc123"}

    def test_unknown_discriminant_rejected(self):
        with pytest.raises(DecodeError):
            decode_content_item({"type": "video_url", "video_url": {"url": "x"}})

    def test_missing_discriminant_rejected(self):
        with pytest.raises(DecodeError):
            decode_content_item({"text": "no type"})

    @pytest.mark.parametrize("payload", [
        {"type": "text"},
        {"type": "image_url"},
        {"type": "image_url", "image_url": {"detail": "low"}},
        {"type": "input_audio", "input_audio": {"data": "AAAA"}},
        {"type": "file"},
        {"type": "refusal", "text": "wrong field"},
    ])
    def test_missing_payload_fields_rejected(self, payload: dict):
        with pytest.raises(DecodeError):
            decode_content_item(payload)

    def test_invalid_audio_format_rejected(self):
        with pytest.raises(DecodeError):
            decode_content_item({"type": "input_audio", "input_audio": {"data": "A", "format": "aiff"}})


class TestChatContentShape:
    """String content stays a bare string; array content stays an array."""

    def test_string_encodes_bare(self):
        assert encode_chat_content("hello") == "hello"

    def test_single_element_array_not_collapsed(self):
        encoded = encode_chat_content([TextContent(text="hello")])
        assert encoded == [{"type": "text", "text": "hello"}]

    def test_message_dump_keeps_string(self):
        data = ChatMessage.user("hello").model_dump(mode="json", exclude_none=True)
        assert data == {"role": "user", "content": "hello"}

    def test_message_dump_keeps_single_element_array(self):
        message = ChatMessage.user_multimodal([TextContent(text="hello")])
        data = message.model_dump(mode="json", exclude_none=True)
        assert data["content"] == [{"type": "text", "text": "hello"}]

    def test_string_round_trip_stable(self):
        once = encode_chat_content("What is the capital of France?")
        assert encode_chat_content(decode_chat_content(once)) == once

    def test_array_round_trip_stable(self, multimodal_items: list):
        once = encode_chat_content(decode_chat_content(multimodal_items))
        assert encode_chat_content(decode_chat_content(once)) == once
        assert once == multimodal_items

    def test_message_validation_picks_variant_by_shape(self, multimodal_items: list):
        as_text = ChatMessage.model_validate({"role": "user", "content": "plain"})
        as_array = ChatMessage.model_validate({"role": "user", "content": multimodal_items[:1]})
        assert as_text.content == "plain"
        assert isinstance(as_array.content, list)
        assert isinstance(as_array.content[0], TextContent)

    def test_non_string_non_array_rejected(self):
        with pytest.raises(DecodeError):
            decode_chat_content({"type": "text", "text": "object, not array"})
