"""Tests for the responses endpoints against the fake agent service."""

import pytest
from fastapi import FastAPI

from twcai import CloudAIClient, ErrorKind, InvalidRequestError, NotFoundError, ResponseCancelledError
from twcai.models import CreateResponseRequest, GetResponseQuery, Response


@pytest.mark.integration
@pytest.mark.asyncio
class TestResponseLifecycle:
    async def test_create(self, client: CloudAIClient, agent_id: str, fake_app: FastAPI):
        request = CreateResponseRequest(
            input="What is Rust?",
            instructions="Answer in one sentence.",
            metadata={"session": "s1"},
            max_output_tokens=64,
        )
        response = await client.responses.create(agent_id, request)

        assert response.object == "response"
        assert response.status == "completed"
        assert response.output_text == "Answer: What is Rust?"
        assert fake_app.state.bodies[-1] == {
            "input": "What is Rust?",
            "instructions": "Answer in one sentence.",
            "metadata": {"session": "s1"},
            "max_output_tokens": 64,
        }

    async def test_usage_totals(self, client: CloudAIClient, agent_id: str):
        response = await client.responses.create(agent_id, CreateResponseRequest(input="hi"))
        usage = response.usage
        assert usage.total_tokens == usage.prompt_tokens + usage.completion_tokens

    async def test_message_array_input(self, client: CloudAIClient, agent_id: str):
        request = CreateResponseRequest(input=[{"role": "user", "content": "Hello there"}])
        response = await client.responses.create(agent_id, request)
        assert response.output_text == "Answer: Hello there"

    async def test_unmodelled_fields_preserved(self, client: CloudAIClient, agent_id: str):
        response = await client.responses.create(agent_id, CreateResponseRequest(input="hi"))

        assert response.extra["x_trace"] == {"region": "ru-1", "shards": [1, 2]}
        assert response.extra["output"][0]["type"] == "message"
        dumped = response.model_dump()
        assert dumped["x_trace"] == {"region": "ru-1", "shards": [1, 2]}
        assert dumped["output"] == response.extra["output"]

    async def test_get_with_query(self, client: CloudAIClient, agent_id: str, fake_app: FastAPI):
        created = await client.responses.create(agent_id, CreateResponseRequest(input="hi"))
        fetched = await client.responses.get(
            agent_id,
            created.id,
            GetResponseQuery(include=["reasoning.encrypted_content"], include_obfuscation=False),
        )
        assert fetched.id == created.id
        assert fake_app.state.requests[-1]["query"] == (
            "include=reasoning.encrypted_content&include_obfuscation=false"
        )

    async def test_delete_then_get_is_not_found(self, client: CloudAIClient, agent_id: str):
        created = await client.responses.create(agent_id, CreateResponseRequest(input="hi"))
        assert await client.responses.delete(agent_id, created.id) is None

        with pytest.raises(NotFoundError):
            await client.responses.get(agent_id, created.id)

    async def test_delete_unknown(self, client: CloudAIClient, agent_id: str):
        with pytest.raises(NotFoundError) as exc_info:
            await client.responses.delete(agent_id, "resp_missing")
        assert exc_info.value.message == "Response resp_missing not found"


@pytest.mark.asyncio
class TestCancel:
    async def test_cancel_background_response(self, client: CloudAIClient, agent_id: str):
        created = await client.responses.create(
            agent_id, CreateResponseRequest(input="long task", background=True)
        )
        assert created.status == "in_progress"
        assert created.usage is None
        assert created.raise_if_cancelled() is created

        cancelled = await client.responses.cancel(agent_id, created.id)
        assert cancelled.is_cancelled
        with pytest.raises(ResponseCancelledError) as exc_info:
            cancelled.raise_if_cancelled()
        assert exc_info.value.response_id == created.id
        assert exc_info.value.kind is ErrorKind.CANCELLED

    async def test_cancel_path(self, client: CloudAIClient, agent_id: str, fake_app: FastAPI):
        created = await client.responses.create(
            agent_id, CreateResponseRequest(input="long task", background=True)
        )
        await client.responses.cancel(agent_id, created.id)
        assert fake_app.state.requests[-1]["path"].endswith(f"/v1/responses/{created.id}/cancel")

    async def test_cancel_completed_response_rejected(self, client: CloudAIClient, agent_id: str):
        created = await client.responses.create(agent_id, CreateResponseRequest(input="hi"))
        with pytest.raises(InvalidRequestError) as exc_info:
            await client.responses.cancel(agent_id, created.id)
        assert exc_info.value.message == "Only in-progress responses can be cancelled"


class TestResponseModel:
    def test_minimal_response(self):
        response = Response.model_validate(
            {"id": "resp_1", "created_at": 1, "model": "m", "status": "queued"}
        )
        assert response.object == "response"
        assert response.usage is None
        assert response.extra == {}
        assert response.output_text == ""
        assert not response.is_cancelled
