"""The style catalog: the one place where visual presets are defined.

Every generation runs in exactly one style.  A style carries two pieces of
template text:

- a **scene prefix**, a short penguin-flavoured phrase placed in front of the
  user's prompt before it is sent to the text provider, and
- a **rendering directive**, a paragraph of visual instructions appended to
  the generated description before it is sent to the image provider.

The server resolves styles from :data:`STYLE_CATALOG` and the frontend fetches
the same catalog from ``GET /api/config``, so the list of valid style names
cannot drift between tiers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StyleName(str, Enum):
    """Closed set of style names accepted by the API."""

    CUTE = "Cute"
    FUN = "Fun"
    SCARY = "Scary"
    SERENE = "Serene"


@dataclass(frozen=True)
class Style:
    """Template data attached to a :class:`StyleName`."""

    name: StyleName
    scene_prefix: str
    rendering_directive: str

    def to_dict(self) -> dict[str, str]:
        """Serialise for the frontend config payload."""
        return {
            "name": self.name.value,
            "scenePrefix": self.scene_prefix,
            "renderingDirective": self.rendering_directive,
        }


STYLE_CATALOG: dict[StyleName, Style] = {
    StyleName.CUTE: Style(
        name=StyleName.CUTE,
        scene_prefix="a cute and adorable penguin scene,",
        rendering_directive=(
            "Render in a soft, pastel palette with rounded shapes and exaggerated proportions. "
            "Emphasize large, sparkling eyes and gentle, cuddly textures. Add small, endearing "
            "details like rosy cheeks or tiny accessories. Use warm, diffused lighting to create "
            "a cozy atmosphere. Incorporate subtle, kawaii-inspired elements for extra charm. "
            "Style: cheerful cartoon with a touch of realism."
        ),
    ),
    StyleName.FUN: Style(
        name=StyleName.FUN,
        scene_prefix="a fun and playful penguin scene,",
        rendering_directive=(
            "Utilize a vibrant, saturated color palette with bold contrasts. Emphasize dynamic "
            "poses, exaggerated expressions, and comical proportions. Incorporate visual puns and "
            "amusing background details. Use energetic linework and playful textures. Add "
            "whimsical, physically impossible elements for extra amusement. Style: stylized "
            "cartoon with exaggerated realism for humor."
        ),
    ),
    StyleName.SCARY: Style(
        name=StyleName.SCARY,
        scene_prefix="a slightly spooky penguin scene,",
        rendering_directive=(
            "Utilize high contrast lighting with deep shadows and eerie highlights. Employ a "
            "desaturated color palette dominated by cold, unsettling tones. Emphasize jagged "
            "shapes, unsettling textures, and distorted proportions. Add subtle, creepy details "
            "in the background. Incorporate elements of body horror or cosmic dread where "
            "appropriate. Style: dark surrealism with photorealistic textures."
        ),
    ),
    StyleName.SERENE: Style(
        name=StyleName.SERENE,
        scene_prefix="a calm and peaceful penguin scene,",
        rendering_directive=(
            "Use a soft, muted color palette with gentle gradients. Emphasize smooth, flowing "
            "lines and harmonious compositions. Incorporate subtle, atmospheric effects like mist "
            "or gentle bokeh. Employ soft, diffused lighting reminiscent of golden hour. Add "
            "delicate details that invite contemplation. Style: impressionistic realism with "
            "minimalist influences."
        ),
    ),
}

# Ideas offered by the "Surprise Me" button.
SURPRISE_PROMPTS: tuple[str, ...] = (
    "A pudgy penguin surfing on a glacier",
    "Penguins having a dance party under the Northern Lights",
    "A penguin explorer discovering an ancient ice cave",
    "Penguins building a high-tech igloo laboratory",
    "A penguin superhero saving the Antarctic",
)


def resolve_style(name: str | None) -> Style | None:
    """Look up a style by its exact display name.

    Args:
        name: Style name as sent by a client (e.g. ``"Cute"``).

    Returns:
        The matching :class:`Style`, or ``None`` for an empty or unknown name.
    """
    if not name:
        return None
    try:
        return STYLE_CATALOG[StyleName(name)]
    except ValueError:
        return None


def list_styles() -> list[Style]:
    """Return all styles in catalog order."""
    return list(STYLE_CATALOG.values())
