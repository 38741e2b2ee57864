"""Tests for dreamworld.ui.client - the async HTTP client.

Uses anyio for async test support and ``httpx.MockTransport`` in place of a
running server.
"""

from __future__ import annotations

import json

import httpx
import pytest

from dreamworld.core.errors import (
    FAILED_TO_GENERATE,
    MISSING_PROMPT_OR_STYLE,
    NETWORK_ERROR,
    InvalidInput,
    NetworkFailure,
    UpstreamFailure,
)
from dreamworld.core.models import GenerationResult
from dreamworld.ui.client import DreamworldClient

BASE_URL = "https://dreamworld.test"


def _client(handler) -> DreamworldClient:
    return DreamworldClient(BASE_URL, transport=httpx.MockTransport(handler))


@pytest.mark.anyio
async def test_generate_image_success() -> None:
    """A 200 response is parsed into a GenerationResult."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200, json={"imageUrl": "https://x/img.png", "generatedPrompt": "A penguin."}
        )

    async with _client(handler) as client:
        result = await client.generate_image("a picnic", "Cute")

    assert result == GenerationResult(image_url="https://x/img.png", generated_prompt="A penguin.")
    assert seen["method"] == "POST"
    assert seen["path"] == "/api/generate-image"
    assert seen["body"] == {"prompt": "a picnic", "style": "Cute"}


@pytest.mark.anyio
async def test_generate_image_sends_options_in_camel_case() -> None:
    """Options that are set are sent with their wire names."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"imageUrl": "u", "generatedPrompt": "p"})

    async with _client(handler) as client:
        await client.generate_image("a picnic", "Fun", output_quality=90, aspect_ratio="1:1")

    assert seen["body"] == {
        "prompt": "a picnic",
        "style": "Fun",
        "outputQuality": 90,
        "aspectRatio": "1:1",
    }


@pytest.mark.anyio
async def test_400_raises_invalid_input_with_server_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": "Invalid request body"})

    async with _client(handler) as client:
        with pytest.raises(InvalidInput) as exc_info:
            await client.generate_image("a picnic", "Unknown")

    assert exc_info.value.message == "Invalid request body"


@pytest.mark.anyio
async def test_400_without_body_uses_default_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, text="bad")

    async with _client(handler) as client:
        with pytest.raises(InvalidInput) as exc_info:
            await client.generate_image("a picnic", "Unknown")

    assert exc_info.value.message == MISSING_PROMPT_OR_STYLE


@pytest.mark.anyio
@pytest.mark.parametrize("status_code", [500, 502, 404])
async def test_other_errors_raise_upstream_failure(status_code) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"error": "Failed to generate image"})

    async with _client(handler) as client:
        with pytest.raises(UpstreamFailure) as exc_info:
            await client.generate_image("a picnic", "Cute")

    assert exc_info.value.message == FAILED_TO_GENERATE


@pytest.mark.anyio
async def test_transport_error_raises_network_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(NetworkFailure) as exc_info:
            await client.generate_image("a picnic", "Cute")

    assert exc_info.value.message == NETWORK_ERROR


@pytest.mark.anyio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="not json"),
        httpx.Response(200, json={"imageUrl": "u"}),
        httpx.Response(200, json=["u", "p"]),
    ],
)
async def test_unreadable_success_body_raises_network_failure(response) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return response

    async with _client(handler) as client:
        with pytest.raises(NetworkFailure):
            await client.generate_image("a picnic", "Cute")


@pytest.mark.anyio
async def test_get_config() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/config"
        return httpx.Response(200, json={"styles": [{"name": "Cute"}]})

    async with _client(handler) as client:
        data = await client.get_config()

    assert data["styles"][0]["name"] == "Cute"


@pytest.mark.anyio
async def test_get_config_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    async with _client(handler) as client:
        with pytest.raises(UpstreamFailure):
            await client.get_config()
