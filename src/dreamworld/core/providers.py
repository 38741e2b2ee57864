"""Base classes and registry for AI providers.

The composer talks to two external services: a text-generation provider that
expands a short prompt into a visual description, and an image-generation
provider that renders that description.  Each service sits behind an abstract
base class so the composer never imports a vendor SDK directly.

Provider Pattern
----------------
Each provider encapsulates:
- Lazy construction of its SDK client (no network or credential checks at
  import or startup time)
- Translation from the composer's arguments to the vendor's request shape
- Translation of vendor errors into :class:`ProviderError`

Provider Kinds
--------------
- **text**: ``complete(instruction, system_instruction)`` returns one
  completion string (or ``None`` when the vendor returned nothing)
- **image**: ``render(prompt, options)`` returns a list of image references
  (URLs); the composer uses the first one

Usage Example
-------------
    >>> from dreamworld.core.providers import provider_registry
    >>> from dreamworld.core.config import config
    >>>
    >>> provider_registry.list_available("text")
    ['openai']
    >>> text = provider_registry.instantiate("openai", config)
    >>> text.complete("Describe a penguin", system_instruction="Be visual.")

See Also
--------
- PromptComposer: The orchestration that drives both providers
- DreamworldConfig: Provider selection and credentials
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Literal

from .config import DreamworldConfig
from .models import GenerationOptions

logger = logging.getLogger(__name__)

ProviderKind = Literal["text", "image"]


class ProviderError(Exception):
    """Raised by a provider when its vendor call fails."""

    def __init__(self, provider: str, message: str) -> None:
        self.provider = provider
        super().__init__(f"{provider}: {message}")


class ProviderBase(ABC):
    """Abstract base class for all providers.

    Attributes
    ----------
    name : str
        Registry key (e.g. "openai")
    description : str
        Brief description of the service
    kind : ProviderKind
        "text" or "image"
    config : DreamworldConfig
        Configuration object containing credentials and model names

    Notes
    -----
    - Subclasses implement :meth:`_create_client`; the SDK client is built on
      first access of :attr:`client` and then reused
    - A provider instance is shared by concurrent requests, so it must not
      keep per-request state
    """

    name: str = "Base Provider"
    description: str = "Base class for providers"
    kind: ProviderKind = "text"
    version: str = "0.1.0"

    def __init__(self, config: DreamworldConfig) -> None:
        """Initialize the provider.

        Args:
            config: Configuration object containing provider settings
        """
        self.config = config
        self._client: Any = None
        self._client_lock = threading.Lock()

        logger.info(f"Initialized {self.name} provider")

    @abstractmethod
    def _create_client(self) -> Any:
        """Build the vendor SDK client."""

    @property
    def client(self) -> Any:
        """Vendor SDK client, created lazily on first use."""
        if self._client is None:
            with self._client_lock:
                if self._client is None:
                    logger.info(f"Creating {self.name} client")
                    self._client = self._create_client()
        return self._client

    @property
    def model(self) -> str:
        """Model identifier used by this provider."""
        return ""

    def get_provider_info(self) -> dict[str, Any]:
        """Get information about this provider.

        Returns
        -------
        dict[str, Any]
            Dictionary containing provider metadata
        """
        return {
            "name": self.name,
            "description": self.description,
            "kind": self.kind,
            "version": self.version,
            "model": self.model,
        }


class TextProvider(ProviderBase):
    """A service that turns an instruction into one completion."""

    kind: ProviderKind = "text"

    @abstractmethod
    def complete(self, instruction: str, *, system_instruction: str) -> str | None:
        """Return the first completion for ``instruction``.

        Args:
            instruction: The user-role message
            system_instruction: The system-role message constraining output

        Returns
        -------
        str | None
            The completion text, or None when the service returned no choices
            or empty content

        Raises
        ------
        ProviderError
            If the vendor call fails
        """


class ImageProvider(ProviderBase):
    """A service that renders a prompt into one or more image references."""

    kind: ProviderKind = "image"

    @abstractmethod
    def render(self, prompt: str, options: GenerationOptions) -> list[str]:
        """Render ``prompt`` and return the produced image references.

        Args:
            prompt: The final image prompt
            options: Quality, step count and aspect ratio

        Returns
        -------
        list[str]
            Image URLs in vendor order; empty when nothing was produced

        Raises
        ------
        ProviderError
            If the vendor call fails
        """


class ProviderRegistry:
    """Registry for discovering and instantiating providers.

    Usage
    -----
    Registering a new provider:

        >>> provider_registry.register(MyTextProvider)

    Instantiating a provider:

        >>> provider = provider_registry.instantiate("openai", config)
    """

    def __init__(self) -> None:
        """Initialize the provider registry."""
        self._providers: dict[str, type[ProviderBase]] = {}

    def register(self, provider_class: type[ProviderBase]) -> None:
        """Register a provider class under its ``name``.

        Re-registering a name overwrites the previous class with a warning.
        """
        provider_name = provider_class.name

        if provider_name in self._providers:
            logger.warning(f"Provider '{provider_name}' is already registered, overwriting")

        self._providers[provider_name] = provider_class
        logger.info(f"Registered {provider_class.kind} provider: {provider_name}")

    def instantiate(
        self,
        provider_name: str,
        config: DreamworldConfig,
        kind: ProviderKind | None = None,
    ) -> ProviderBase:
        """Create an instance of a registered provider.

        Args:
            provider_name: Name of the provider to instantiate
            config: Configuration object
            kind: When given, the provider must be of this kind

        Returns
        -------
        ProviderBase
            New instance of the specified provider

        Raises
        ------
        KeyError
            If provider_name is not registered or is of the wrong kind
        """
        provider_class = self._providers.get(provider_name)
        if provider_class is None or (kind is not None and provider_class.kind != kind):
            available = ", ".join(self.list_available(kind))
            raise KeyError(
                f"Provider '{provider_name}' not found. Available providers: {available}"
            )

        instance = provider_class(config=config)
        logger.info(f"Instantiated provider: {provider_name}")
        return instance

    def get_provider_class(self, provider_name: str) -> type[ProviderBase] | None:
        """Get the provider class for a given name, or None."""
        return self._providers.get(provider_name)

    def list_available(self, kind: ProviderKind | None = None) -> list[str]:
        """List registered provider names, optionally filtered by kind."""
        return [
            name
            for name, provider_class in self._providers.items()
            if kind is None or provider_class.kind == kind
        ]

    def get_provider_info(self, provider_name: str) -> dict[str, Any] | None:
        """Get class-level metadata about a registered provider."""
        provider_class = self._providers.get(provider_name)
        if provider_class is None:
            return None

        return {
            "name": provider_class.name,
            "description": provider_class.description,
            "kind": provider_class.kind,
            "version": provider_class.version,
        }


# Global provider registry instance
provider_registry = ProviderRegistry()
