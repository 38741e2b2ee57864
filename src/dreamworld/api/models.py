"""Pydantic request and response models for the Dreamworld API.

These models define the JSON schema for the generation endpoint.  FastAPI uses
them for request parsing, serialisation, and OpenAPI documentation.

The wire format uses camelCase keys (``outputQuality``, ``imageUrl``) while the
Python attributes are snake_case; the alias generator maps between the two and
``populate_by_name`` lets tests and Python callers use either.

Models
------
GenerateImageRequest
    Payload for ``POST /api/generate-image``.
GenerateImageResponse
    Successful result of ``POST /api/generate-image``.
ErrorResponse
    Body of every 400 and 500 response.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dreamworld.core.config import AspectRatio
from dreamworld.core.models import GenerationResult


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GenerateImageRequest(_CamelModel):
    """Request body for the ``POST /api/generate-image`` endpoint.

    ``prompt`` and ``style`` are optional at the schema level so that a missing
    value reaches the composer and produces the documented
    ``{"error": "Missing prompt or style"}`` body rather than a schema error.

    Attributes:
        prompt: Free-text scene description.
        style: Style display name (``Cute``, ``Fun``, ``Scary`` or ``Serene``).
        output_quality: Image quality 0-100.  ``None`` uses the configured default.
        num_inference_steps: Diffusion steps 1-50.  ``None`` uses the configured default.
        aspect_ratio: Output aspect ratio.  ``None`` uses the configured default.
    """

    prompt: str | None = Field(
        default=None,
        description="Free-text scene description.",
    )
    style: str | None = Field(
        default=None,
        description="Style name from GET /api/config.",
    )
    output_quality: int | None = Field(
        default=None,
        ge=0,
        le=100,
        description="Output image quality (default 50).",
    )
    num_inference_steps: int | None = Field(
        default=None,
        ge=1,
        le=50,
        description="Number of diffusion inference steps (default 20).",
    )
    aspect_ratio: AspectRatio | None = Field(
        default=None,
        description="Output aspect ratio (default '16:9').",
    )


class GenerateImageResponse(_CamelModel):
    """Successful response for ``POST /api/generate-image``.

    Attributes:
        image_url: URL of the rendered image.
        generated_prompt: The description produced by the text provider.
    """

    image_url: str
    generated_prompt: str

    @classmethod
    def from_result(cls, result: GenerationResult) -> GenerateImageResponse:
        return cls(image_url=result.image_url, generated_prompt=result.generated_prompt)


class ErrorResponse(BaseModel):
    """Error body shared by all failure responses."""

    error: str
