"""Async HTTP client for the Dreamworld API.

Wraps an :class:`httpx.AsyncClient` and translates HTTP outcomes into the
package's error taxonomy:

========================  =====================================
Outcome                   Raised
========================  =====================================
200 with a valid body     (returns :class:`GenerationResult`)
400                       :class:`InvalidInput` (server message)
any other non-2xx         :class:`UpstreamFailure`
transport error           :class:`NetworkFailure`
unreadable 2xx body       :class:`NetworkFailure`
========================  =====================================

No timeout is applied by default: a generation takes as long as the two
provider calls take, just like the browser's ``fetch``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from dreamworld.core.errors import InvalidInput, NetworkFailure, UpstreamFailure
from dreamworld.core.models import GenerationResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:7860"
GENERATE_PATH = "/api/generate-image"
CONFIG_PATH = "/api/config"


def _error_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None


class DreamworldClient:
    """Client for ``POST /api/generate-image`` and ``GET /api/config``.

    Use as an async context manager, or call :meth:`aclose` when done::

        async with DreamworldClient("http://localhost:7860") as client:
            result = await client.generate_image("a picnic", "Cute")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> DreamworldClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_config(self) -> dict[str, Any]:
        """Fetch the style catalog and client defaults.

        Raises:
            NetworkFailure: If the server is unreachable or the body is not JSON.
            UpstreamFailure: On a non-2xx status.
        """
        try:
            response = await self._client.get(CONFIG_PATH)
        except httpx.HTTPError as e:
            logger.error(f"Could not reach {self.base_url}: {e}")
            raise NetworkFailure() from e

        if response.is_error:
            raise UpstreamFailure()
        try:
            return response.json()
        except ValueError as e:
            raise NetworkFailure() from e

    async def generate_image(
        self,
        prompt: str,
        style: str,
        *,
        output_quality: int | None = None,
        num_inference_steps: int | None = None,
        aspect_ratio: str | None = None,
    ) -> GenerationResult:
        """Request one generation.

        Optional parameters are omitted from the body when ``None`` so the
        server applies its configured defaults.

        Raises:
            InvalidInput: On a 400 response.
            UpstreamFailure: On any other error status.
            NetworkFailure: On transport errors or an unreadable success body.
        """
        payload: dict[str, Any] = {"prompt": prompt, "style": style}
        optional = {
            "outputQuality": output_quality,
            "numInferenceSteps": num_inference_steps,
            "aspectRatio": aspect_ratio,
        }
        payload.update({key: value for key, value in optional.items() if value is not None})

        try:
            response = await self._client.post(GENERATE_PATH, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Generation request failed: {e}")
            raise NetworkFailure() from e

        if response.status_code == httpx.codes.BAD_REQUEST:
            raise InvalidInput(_error_message(response))
        if response.is_error:
            logger.error(f"Generation failed with status {response.status_code}")
            raise UpstreamFailure()

        try:
            body = response.json()
            return GenerationResult(
                image_url=body["imageUrl"],
                generated_prompt=body["generatedPrompt"],
            )
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Unreadable generation response: {e}")
            raise NetworkFailure() from e
