"""Dreamworld Image Generator: FastAPI application.

This module is the single entry point for the web application.  It defines
the FastAPI ``app`` instance, all REST API routes, the error-to-response
mapping, and the ``main()`` CLI function that launches the uvicorn server.

Architecture
------------
The application is stateless per request:

- **Configuration** comes from :data:`~dreamworld.core.config.config`
  (``DREAMWORLD_*`` environment variables and ``.env``).
- **Generation** is delegated to a single
  :class:`~dreamworld.core.composer.PromptComposer` created at startup and
  stored on ``app.state``.  Its provider SDK clients are created lazily on
  the first generation, so the server starts without network access.
- **The style catalog** is served to the frontend via ``GET /api/config``
  so the browser never keeps its own copy.
- **Static assets** (JS) are served by FastAPI's ``StaticFiles``; the HTML page
  is served as a raw ``HTMLResponse``.

Endpoints
---------
========  ========================  ======================================
Method    Path                      Purpose
========  ========================  ======================================
GET       ``/``                     Serve the main HTML page
GET       ``/api/config``           Styles, surprise prompts, defaults
GET       ``/api/health``           Liveness and provider summary
POST      ``/api/generate-image``   Compose, describe, and render an image
========  ========================  ======================================

Error Responses
---------------
Every failure body has the shape ``{"error": "<message>"}``:

- ``400`` ``Missing prompt or style``: blank prompt, missing or unknown style
- ``400`` ``Invalid request body``: the body failed schema validation
- ``500`` ``Failed to generate image``: any provider or unexpected failure

Usage
-----
CLI (installed entry point)::

    dreamworld

Direct invocation::

    python -m dreamworld.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.staticfiles import StaticFiles

from dreamworld import __version__
from dreamworld.api.models import ErrorResponse, GenerateImageRequest, GenerateImageResponse
from dreamworld.core.composer import PromptComposer
from dreamworld.core.config import config
from dreamworld.core.errors import (
    INVALID_REQUEST_BODY,
    DreamworldError,
    InvalidInput,
    UpstreamFailure,
)
from dreamworld.core.models import GenerationOptions
from dreamworld.core.styles import SURPRISE_PROMPTS, list_styles
from dreamworld.ui.loading import LOADING_TEXTS

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Application lifecycle and composer setup.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application startup and shutdown lifecycle.

    On startup:
        Builds a :class:`PromptComposer` from the configured provider names
        and stores it on ``app.state``.  No provider is contacted yet.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    app.state.composer = PromptComposer.from_config(config)
    logger.info(
        "PromptComposer initialised "
        f"(text={config.text_provider}, image={config.image_provider})."
    )

    yield

    logger.info("Dreamworld shutting down.")


# ---------------------------------------------------------------------------
# FastAPI application instance.
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Dreamworld Image Generator",
    description="Style-driven image generation: OpenAI prompt expansion plus Replicate rendering.",
    version=__version__,
    lifespan=lifespan,
)

# Allow cross-origin requests so the frontend can be served from a different
# port during development.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(config.static_dir)), name="static")


# ---------------------------------------------------------------------------
# Error mapping.
# ---------------------------------------------------------------------------


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(InvalidInput)
async def handle_invalid_input(request: Request, exc: InvalidInput) -> JSONResponse:
    """Surface validation failures verbatim as 400."""
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)


@app.exception_handler(UpstreamFailure)
async def handle_upstream_failure(request: Request, exc: UpstreamFailure) -> JSONResponse:
    """Hide provider detail behind the generic 500 message."""
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed bodies as 400 with the shared error shape."""
    logger.info(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return _error_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_BODY)


# ---------------------------------------------------------------------------
# Dependencies.
# ---------------------------------------------------------------------------


def get_composer(request: Request) -> PromptComposer:
    """Return the composer created during startup."""
    return request.app.state.composer


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/", response_class=HTMLResponse)
async def index() -> Response:
    """Serve the main application HTML page.

    All dynamic data (styles, surprise prompts, defaults) is fetched by the
    frontend via ``GET /api/config`` on page load.

    Returns:
        The page, or a 404 ``{"error": ...}`` body if ``index.html`` is missing.
    """
    index_path = config.templates_dir / "index.html"
    if index_path.exists():
        return HTMLResponse(content=index_path.read_text(encoding="utf-8"))
    return _error_response(status.HTTP_404_NOT_FOUND, "index.html not found")


@app.get("/api/config")
async def get_config() -> dict:
    """Return the client configuration.

    Returns:
        Dictionary with keys ``version``, ``styles`` (name, scene prefix and
        rendering directive for every style), ``surprisePrompts``,
        ``loadingTexts``, and ``defaults`` (generation option defaults).
    """
    return {
        "version": __version__,
        "styles": [style.to_dict() for style in list_styles()],
        "surprisePrompts": list(SURPRISE_PROMPTS),
        "loadingTexts": list(LOADING_TEXTS),
        "defaults": {
            "outputQuality": config.default_output_quality,
            "numInferenceSteps": config.default_num_inference_steps,
            "aspectRatio": config.default_aspect_ratio,
        },
    }


@app.get("/api/health")
async def health(composer: PromptComposer = Depends(get_composer)) -> dict:
    """Report liveness without contacting any provider."""
    return {
        "status": "ok",
        "version": __version__,
        "textProvider": composer.text_provider.get_provider_info(),
        "imageProvider": composer.image_provider.get_provider_info(),
    }


@app.post(
    "/api/generate-image",
    response_model=GenerateImageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def generate_image(
    req: GenerateImageRequest,
    composer: PromptComposer = Depends(get_composer),
) -> GenerateImageResponse:
    """Generate one image for a prompt in a style.

    This endpoint is a plain ``def`` so FastAPI runs the two blocking
    provider calls in its threadpool instead of on the event loop.

    1. Validates the prompt and style (400 on failure, no provider calls).
    2. Expands the prompt with the text provider.
    3. Renders the expanded prompt plus the style directive.

    Args:
        req: Parsed :class:`GenerateImageRequest` payload.
        composer: The application's :class:`PromptComposer`.

    Returns:
        The image URL and the generated description.

    Raises:
        InvalidInput: Mapped to 400.
        UpstreamFailure: Mapped to 500.
    """
    options = GenerationOptions.from_config(
        composer.config,
        output_quality=req.output_quality,
        num_inference_steps=req.num_inference_steps,
        aspect_ratio=req.aspect_ratio,
    )

    try:
        result = composer.compose(req.prompt, req.style, options)
    except DreamworldError:
        raise
    except Exception as e:
        logger.error(f"Error in generate-image API: {e}", exc_info=True)
        raise UpstreamFailure() from e

    return GenerateImageResponse.from_result(result)


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port, and log level from :data:`~dreamworld.core.config.config`
    (``DREAMWORLD_SERVER_HOST``, ``DREAMWORLD_SERVER_PORT``,
    ``DREAMWORLD_LOG_LEVEL``).  Defaults to ``0.0.0.0:7860``.

    This function is registered as the ``dreamworld`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "dreamworld.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
