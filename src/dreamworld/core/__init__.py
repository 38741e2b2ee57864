"""Core functionality for prompt composition and image generation.

This module provides the server-side components of the Dreamworld Image
Generator:

- **DreamworldConfig / config**: Configuration management using Pydantic Settings
- **Style catalog**: The closed set of visual presets (``styles.py``)
- **Prompt builder**: Pure template functions for both provider prompts
- **Providers**: Abstract text/image providers, a registry, and the bundled
  OpenAI and Replicate implementations (``adapters/``)
- **PromptComposer**: The sequential text-then-image pipeline

Usage Example
-------------
    from dreamworld.core import PromptComposer, config

    composer = PromptComposer.from_config(config)
    result = composer.compose("a picnic", "Cute")
    print(result.image_url)
"""

from dreamworld.core.composer import PromptComposer
from dreamworld.core.config import DreamworldConfig, config
from dreamworld.core.errors import DreamworldError, InvalidInput, NetworkFailure, UpstreamFailure
from dreamworld.core.models import GenerationOptions, GenerationResult
from dreamworld.core.providers import provider_registry
from dreamworld.core.styles import STYLE_CATALOG, Style, StyleName, resolve_style

__all__ = [
    "DreamworldConfig",
    "DreamworldError",
    "GenerationOptions",
    "GenerationResult",
    "InvalidInput",
    "NetworkFailure",
    "PromptComposer",
    "STYLE_CATALOG",
    "Style",
    "StyleName",
    "UpstreamFailure",
    "config",
    "provider_registry",
    "resolve_style",
]
