"""Pytest configuration and fixtures for client tests."""

import os
import sys
from typing import AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fake_service import AGENT_ID, VALID_TOKEN, create_app
from twcai import CloudAIClient


# Base URL for tests
BASE_URL = "http://test"


@pytest.fixture
def fake_app() -> FastAPI:
    """Fresh fake agent service per test."""
    return create_app()


@pytest_asyncio.fixture
async def client(fake_app: FastAPI) -> AsyncGenerator[CloudAIClient, None]:
    """Client wired to the fake service through an ASGI transport."""
    transport = httpx.ASGITransport(app=fake_app)
    client = (
        CloudAIClient.builder()
        .base_url(BASE_URL)
        .token(VALID_TOKEN)
        .transport(transport)
        .build()
    )
    async with client:
        yield client


@pytest_asyncio.fixture
async def bad_token_client(fake_app: FastAPI) -> AsyncGenerator[CloudAIClient, None]:
    """Client with a credential the fake service rejects."""
    transport = httpx.ASGITransport(app=fake_app)
    client = (
        CloudAIClient.builder()
        .base_url(BASE_URL)
        .token("expired-token")
        .transport(transport)
        .build()
    )
    async with client:
        yield client


@pytest.fixture
def mock_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], CloudAIClient]:
    """Factory for clients backed by ``httpx.MockTransport``."""

    def make(handler: Callable[[httpx.Request], httpx.Response]) -> CloudAIClient:
        return (
            CloudAIClient.builder()
            .base_url(BASE_URL)
            .token(VALID_TOKEN)
            .transport(httpx.MockTransport(handler))
            .build()
        )

    return make


@pytest.fixture
def agent_id() -> str:
    return AGENT_ID


# Small 1x1 PNG for multimodal payloads
RED_PIXEL_PNG = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8DwHwAFBQIAX8jx0gAAAABJRU5ErkJggg=="


@pytest.fixture
def multimodal_items() -> list:
    """Wire-format multimodal content with every item variant."""
    return [
        {"type": "text", "text": "Describe this image briefly"},
        {
            "type": "image_url",
            "image_url": {"url": f"data:image/png;base64,{RED_PIXEL_PNG}", "detail": "low"},
        },
        {"type": "input_audio", "input_audio": {"data": "UklGRiQAAABXQVZF", "format": "wav"}},
        {"type": "file", "file": {"file_id": "file-abc123"}},
        {"type": "refusal", "refusal": "I can't help with that."},
    ]
