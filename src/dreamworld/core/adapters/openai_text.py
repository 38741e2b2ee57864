"""OpenAI chat-completion text provider.

Expands a short, style-annotated scene into a richer visual description using
the OpenAI Chat Completions API.

Request Shape
-------------
- **model**: ``config.text_model`` (``gpt-4`` by default)
- **messages**: one system message (the visual-only directive) followed by one
  user message (the instruction)
- **max_tokens**: ``config.max_tokens`` (150 by default) keeps descriptions
  short enough to leave room for the rendering directive in the image prompt

Only the first choice is used.  No retries are attempted; any SDK error is
re-raised as :class:`~dreamworld.core.providers.ProviderError`.
"""

import logging

from openai import OpenAI, OpenAIError

from dreamworld.core.config import DreamworldConfig
from dreamworld.core.providers import ProviderError, TextProvider, provider_registry

logger = logging.getLogger(__name__)


class OpenAITextProvider(TextProvider):
    """Text provider backed by ``openai.OpenAI().chat.completions``."""

    name = "openai"
    description = "OpenAI chat completions for prompt expansion"
    version = "1.0.0"

    def __init__(self, config: DreamworldConfig) -> None:
        super().__init__(config)
        self.max_tokens = config.max_tokens

    @property
    def model(self) -> str:
        return self.config.text_model

    def _create_client(self) -> OpenAI:
        # api_key=None lets the SDK read OPENAI_API_KEY itself.
        return OpenAI(api_key=self.config.openai_api_key)

    def complete(self, instruction: str, *, system_instruction: str) -> str | None:
        """Request one chat completion and return its text.

        Args:
            instruction: User message, e.g. "Create a detailed image description for: ..."
            system_instruction: System message constraining the output

        Returns:
            The first choice's content, or None when the response has no
            choices or the content is empty

        Raises:
            ProviderError: If the client cannot be created or the request fails
        """
        logger.info(f"Requesting description from {self.model}: {instruction[:50]}...")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_instruction},
                    {"role": "user", "content": instruction},
                ],
                max_tokens=self.max_tokens,
            )
        except OpenAIError as e:
            logger.error(f"OpenAI API error: {e}")
            raise ProviderError(self.name, str(e)) from e

        choices = getattr(response, "choices", None) or []
        if not choices:
            logger.warning("OpenAI response contained no choices")
            return None

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not content:
            logger.warning("OpenAI response contained an empty completion")
            return None

        logger.debug(f"Received description ({len(content)} chars)")
        return content


provider_registry.register(OpenAITextProvider)
