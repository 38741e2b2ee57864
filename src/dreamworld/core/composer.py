"""Prompt Composer: the two-step generation pipeline.

:class:`PromptComposer` turns ``(prompt, style, options)`` into a
:class:`~dreamworld.core.models.GenerationResult` by calling two providers in
strict sequence:

1. Validate the prompt and resolve the style.  Failure raises
   :class:`~dreamworld.core.errors.InvalidInput` before any provider is called.
2. Ask the text provider to expand ``scene prefix + prompt`` into a visual
   description (``generated_prompt``).  An empty answer raises
   :class:`~dreamworld.core.errors.UpstreamFailure` and the image provider is
   never called.
3. Append the style's rendering directive to the description.
4. Ask the image provider to render it and keep the first image URL.  No URL
   raises :class:`~dreamworld.core.errors.UpstreamFailure`.
5. Return ``image_url`` and ``generated_prompt``.

There are no retries and no partial results.  Provider errors are logged here
with their detail and collapse into a single opaque ``UpstreamFailure``.
"""

from __future__ import annotations

import logging

from dreamworld.core.config import DreamworldConfig
from dreamworld.core.errors import InvalidInput, UpstreamFailure
from dreamworld.core.models import GenerationOptions, GenerationResult
from dreamworld.core.prompt_builder import (
    SYSTEM_INSTRUCTION,
    build_image_prompt,
    build_instruction,
)
from dreamworld.core.providers import (
    ImageProvider,
    ProviderError,
    TextProvider,
    provider_registry,
)
from dreamworld.core.styles import Style, resolve_style

logger = logging.getLogger(__name__)


class PromptComposer:
    """Orchestrates one text provider and one image provider.

    Attributes:
        text_provider: Expands instructions into descriptions.
        image_provider: Renders descriptions into image URLs.
        config: Supplies the default generation options.
    """

    def __init__(
        self,
        text_provider: TextProvider,
        image_provider: ImageProvider,
        config: DreamworldConfig,
    ) -> None:
        self.text_provider = text_provider
        self.image_provider = image_provider
        self.config = config

    @classmethod
    def from_config(cls, config: DreamworldConfig) -> PromptComposer:
        """Build a composer with the providers named in ``config``.

        Raises:
            KeyError: If a configured provider name is not registered.
        """
        # Registers the bundled providers.
        import dreamworld.core.adapters  # noqa: F401

        text_provider = provider_registry.instantiate(config.text_provider, config, kind="text")
        image_provider = provider_registry.instantiate(config.image_provider, config, kind="image")
        return cls(text_provider, image_provider, config)

    def validate(self, prompt: str | None, style: str | None) -> tuple[str, Style]:
        """Check the request and resolve the style.

        Args:
            prompt: User prompt; surrounding whitespace is ignored.
            style: Style display name.

        Returns:
            Tuple of ``(trimmed_prompt, style)``.

        Raises:
            InvalidInput: If the prompt is blank or the style is missing or unknown.
        """
        cleaned_prompt = (prompt or "").strip()
        resolved = resolve_style(style)

        if not cleaned_prompt or resolved is None:
            logger.info(
                f"Rejecting request: prompt_present={bool(cleaned_prompt)}, style={style!r}"
            )
            raise InvalidInput()

        return cleaned_prompt, resolved

    def generate_description(self, prompt: str, style: Style) -> str:
        """Run the text step and return the generated description.

        Raises:
            UpstreamFailure: If the provider fails or returns nothing.
        """
        instruction = build_instruction(style, prompt)

        try:
            generated = self.text_provider.complete(
                instruction, system_instruction=SYSTEM_INSTRUCTION
            )
        except ProviderError as e:
            logger.error(f"Text provider failed: {e}")
            raise UpstreamFailure() from e

        if not generated or not generated.strip():
            logger.error("Text provider returned no description")
            raise UpstreamFailure()

        return generated

    def render_image(self, generated_prompt: str, style: Style, options: GenerationOptions) -> str:
        """Run the image step and return the first image URL.

        Raises:
            UpstreamFailure: If the provider fails or produces no image.
        """
        final_prompt = build_image_prompt(generated_prompt, style)

        try:
            urls = self.image_provider.render(final_prompt, options)
        except ProviderError as e:
            logger.error(f"Image provider failed: {e}")
            raise UpstreamFailure() from e

        if not urls or not urls[0]:
            logger.error("Image provider returned no image")
            raise UpstreamFailure()

        return urls[0]

    def compose(
        self,
        prompt: str | None,
        style: str | None,
        options: GenerationOptions | None = None,
    ) -> GenerationResult:
        """Generate one image for ``prompt`` in ``style``.

        Args:
            prompt: User's scene description.
            style: Style display name, e.g. ``"Cute"``.
            options: Rendering parameters; configured defaults when ``None``.

        Returns:
            The image URL and the generated description.

        Raises:
            InvalidInput: For a blank prompt or a missing/unknown style.
            UpstreamFailure: If either provider fails or returns nothing.
        """
        cleaned_prompt, resolved = self.validate(prompt, style)
        options = options or GenerationOptions.from_config(self.config)

        logger.info(f"Composing {resolved.name.value} image: {cleaned_prompt[:50]}")

        generated_prompt = self.generate_description(cleaned_prompt, resolved)
        image_url = self.render_image(generated_prompt, resolved, options)

        logger.info(f"Generated {resolved.name.value} image: {image_url}")
        return GenerationResult(image_url=image_url, generated_prompt=generated_prompt)
