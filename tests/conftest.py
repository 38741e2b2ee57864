"""Shared pytest fixtures for Dreamworld tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from dreamworld.core.composer import PromptComposer
from dreamworld.core.config import DreamworldConfig
from dreamworld.core.models import GenerationOptions
from dreamworld.core.providers import ImageProvider, TextProvider

SAMPLE_DESCRIPTION = "A pudgy penguin enjoys a picnic on a sunny ice floe."
SAMPLE_IMAGE_URL = "https://replicate.delivery/pbxt/penguin-picnic.png"


class RecordingTextProvider(TextProvider):
    """Text provider that records calls and returns a canned reply."""

    name = "recording-text"
    description = "In-memory text provider for tests"

    def __init__(self, config: DreamworldConfig) -> None:
        super().__init__(config)
        self.reply: str | None = SAMPLE_DESCRIPTION
        self.error: Exception | None = None
        self.calls: list[tuple[str, str]] = []

    def _create_client(self) -> None:
        return None

    def complete(self, instruction: str, *, system_instruction: str) -> str | None:
        self.calls.append((instruction, system_instruction))
        if self.error is not None:
            raise self.error
        return self.reply


class RecordingImageProvider(ImageProvider):
    """Image provider that records calls and returns canned URLs."""

    name = "recording-image"
    description = "In-memory image provider for tests"

    def __init__(self, config: DreamworldConfig) -> None:
        super().__init__(config)
        self.urls: list[str] = [SAMPLE_IMAGE_URL]
        self.error: Exception | None = None
        self.calls: list[tuple[str, GenerationOptions]] = []

    def _create_client(self) -> None:
        return None

    def render(self, prompt: str, options: GenerationOptions) -> list[str]:
        self.calls.append((prompt, options))
        if self.error is not None:
            raise self.error
        return list(self.urls)


@pytest.fixture
def anyio_backend() -> str:
    """Run ``@pytest.mark.anyio`` tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def test_config() -> DreamworldConfig:
    """Create a test configuration isolated from any local ``.env`` file.

    Returns:
        DreamworldConfig instance for testing
    """
    return DreamworldConfig(
        _env_file=None,
        openai_api_key="sk-test",  # Never used for a real request
        replicate_api_token="r8-test",
        text_model="gpt-4",
        max_tokens=150,
        default_output_quality=50,
        default_num_inference_steps=20,
        default_aspect_ratio="16:9",
    )


@pytest.fixture
def text_provider(test_config: DreamworldConfig) -> RecordingTextProvider:
    """Recording text provider returning :data:`SAMPLE_DESCRIPTION`."""
    return RecordingTextProvider(test_config)


@pytest.fixture
def image_provider(test_config: DreamworldConfig) -> RecordingImageProvider:
    """Recording image provider returning :data:`SAMPLE_IMAGE_URL`."""
    return RecordingImageProvider(test_config)


@pytest.fixture
def composer(
    text_provider: RecordingTextProvider,
    image_provider: RecordingImageProvider,
    test_config: DreamworldConfig,
) -> PromptComposer:
    """PromptComposer wired to the recording providers."""
    return PromptComposer(text_provider, image_provider, test_config)


@pytest.fixture
def test_client(composer: PromptComposer) -> Generator[TestClient, None, None]:
    """FastAPI TestClient whose composer uses the recording providers.

    The application lifespan still runs (building the real composer from the
    global config, which contacts no provider); the fixture then swaps in the
    test composer.
    """
    from dreamworld.api.main import app

    with TestClient(app) as client:
        app.state.composer = composer
        yield client
