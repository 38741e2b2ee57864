"""Concrete provider implementations.

Importing this package registers every bundled provider with
:data:`~dreamworld.core.providers.provider_registry`.
"""

from dreamworld.core.adapters.openai_text import OpenAITextProvider
from dreamworld.core.adapters.replicate_image import ReplicateImageProvider

__all__ = [
    "OpenAITextProvider",
    "ReplicateImageProvider",
]
