"""Data models shared by the composer, the providers, and the API layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationOptions:
    """Rendering parameters forwarded to the image provider.

    These values are passed through untouched; range checking happens at the
    API boundary so the composer can also be driven directly from Python.
    """

    output_quality: int = 50
    num_inference_steps: int = 20
    aspect_ratio: str = "16:9"

    @classmethod
    def from_config(cls, config, **overrides) -> GenerationOptions:
        """Build options from configured defaults, applying non-None overrides.

        Args:
            config: A :class:`~dreamworld.core.config.DreamworldConfig`.
            **overrides: ``output_quality``, ``num_inference_steps`` and/or
                ``aspect_ratio``.  ``None`` values keep the configured default.

        Returns:
            A fully populated :class:`GenerationOptions`.
        """
        values = {
            "output_quality": config.default_output_quality,
            "num_inference_steps": config.default_num_inference_steps,
            "aspect_ratio": config.default_aspect_ratio,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one successful generation.  Never cached or stored."""

    image_url: str
    generated_prompt: str

    def to_dict(self) -> dict[str, str]:
        """Serialise using the camelCase keys of the HTTP contract."""
        return {"imageUrl": self.image_url, "generatedPrompt": self.generated_prompt}
