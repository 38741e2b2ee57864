"""Prompt template compilation for the two provider calls.

A generation passes through two prompts:

1. The **instruction** sent to the text provider.  It combines the style's
   scene prefix with the user's free-text prompt::

       Create a detailed image description for: [Scene Prefix] [User Prompt]

   It is always sent together with :data:`SYSTEM_INSTRUCTION`, which keeps the
   model focused on visual content and away from lettering, since rendered
   text comes out garbled in generated images.

2. The **image prompt** sent to the image provider.  It is the generated
   description followed by the style's rendering directive::

       [Generated Description] [Rendering Directive]

Both builders are pure functions so the composition rules can be tested
without any provider in the loop.

Usage
-----
::

    style = resolve_style("Cute")
    instruction = build_instruction(style, "a picnic")
    final_prompt = build_image_prompt("A pudgy penguin enjoys a picnic.", style)
"""

from __future__ import annotations

from dreamworld.core.styles import Style

SYSTEM_INSTRUCTION = (
    "You are an AI that generates detailed image descriptions based on prompts. "
    "Focus on visual elements and avoid mentioning text or writing."
)

_INSTRUCTION_LEAD = "Create a detailed image description for:"


def build_scene(style: Style, prompt: str) -> str:
    """Join the style's scene prefix and the user's prompt with one space."""
    return f"{style.scene_prefix} {prompt}"


def build_instruction(style: Style, prompt: str) -> str:
    """Build the user message for the text provider.

    Args:
        style: Resolved style supplying the scene prefix.
        prompt: The user's scene description, already validated as non-empty.

    Returns:
        The instruction string, e.g. ``"Create a detailed image description
        for: a cute and adorable penguin scene, a picnic"``.
    """
    return f"{_INSTRUCTION_LEAD} {build_scene(style, prompt)}"


def build_image_prompt(generated_prompt: str, style: Style) -> str:
    """Append the style's rendering directive to a generated description.

    Args:
        generated_prompt: The text provider's description of the scene.
        style: Resolved style supplying the rendering directive.

    Returns:
        ``generated_prompt + " " + style.rendering_directive``.
    """
    return f"{generated_prompt} {style.rendering_directive}"
