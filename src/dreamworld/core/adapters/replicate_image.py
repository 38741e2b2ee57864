"""Replicate image provider.

Renders the final image prompt with a FLUX LoRA model hosted on Replicate.

Request Shape
-------------
``client.run(config.image_model, input=...)`` with:

- **prompt**: generated description + rendering directive
- **hf_lora**: ``config.hf_lora`` (the Pudgy Penguins LoRA by default)
- **output_quality**, **num_inference_steps**, **aspect_ratio**: from
  :class:`~dreamworld.core.models.GenerationOptions`

Output Normalisation
--------------------
Depending on the model and SDK version, ``run`` returns a single URL string,
a list of URL strings, or a list of ``FileOutput`` objects that expose a
``url`` attribute.  :func:`normalise_output` maps all of these to a plain list
of URL strings so callers only ever deal with one shape.
"""

import logging
from typing import Any

import replicate
from replicate.exceptions import ReplicateError

from dreamworld.core.config import DreamworldConfig
from dreamworld.core.models import GenerationOptions
from dreamworld.core.providers import ImageProvider, ProviderError, provider_registry

logger = logging.getLogger(__name__)


def normalise_output(output: Any) -> list[str]:
    """Convert a ``replicate.run`` result into a list of URL strings.

    Args:
        output: Whatever the SDK returned.

    Returns:
        URL strings in output order, with empty entries dropped.
    """
    if output is None:
        return []

    if isinstance(output, (str, bytes)) or hasattr(output, "url"):
        items = [output]
    else:
        items = list(output)

    urls: list[str] = []
    for item in items:
        if item is None:
            continue
        url = getattr(item, "url", item)
        if isinstance(url, bytes):
            url = url.decode("utf-8")
        url = str(url)
        if url:
            urls.append(url)
    return urls


class ReplicateImageProvider(ImageProvider):
    """Image provider backed by ``replicate.Client().run``."""

    name = "replicate"
    description = "FLUX LoRA image rendering on Replicate"
    version = "1.0.0"

    @property
    def model(self) -> str:
        return self.config.image_model

    def _create_client(self) -> replicate.Client:
        # api_token=None lets the SDK read REPLICATE_API_TOKEN itself.
        return replicate.Client(api_token=self.config.replicate_api_token)

    def build_input(self, prompt: str, options: GenerationOptions) -> dict[str, Any]:
        """Build the model input payload for one render."""
        return {
            "prompt": prompt,
            "hf_lora": self.config.hf_lora,
            "output_quality": options.output_quality,
            "num_inference_steps": options.num_inference_steps,
            "aspect_ratio": options.aspect_ratio,
        }

    def render(self, prompt: str, options: GenerationOptions) -> list[str]:
        """Run the image model and return the produced image URLs.

        Args:
            prompt: Final image prompt
            options: Rendering parameters

        Returns:
            Image URLs; empty when the model produced nothing

        Raises:
            ProviderError: If the Replicate call fails
        """
        input_params = self.build_input(prompt, options)
        logger.info(
            f"Rendering with {self.model} "
            f"(steps={options.num_inference_steps}, aspect_ratio={options.aspect_ratio}): "
            f"{prompt[:50]}..."
        )

        try:
            output = self.client.run(self.model, input=input_params)
        except ReplicateError as e:
            logger.error(f"Replicate API error: {e}")
            raise ProviderError(self.name, str(e)) from e
        except Exception as e:
            logger.error(f"Unexpected error during image rendering: {e}")
            raise ProviderError(self.name, f"unexpected error: {e}") from e

        urls = normalise_output(output)
        logger.info(f"Replicate returned {len(urls)} image(s)")
        return urls


provider_registry.register(ReplicateImageProvider)
