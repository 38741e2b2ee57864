"""Tests for dreamworld.core.styles - the style catalog."""

from __future__ import annotations

import pytest

from dreamworld.core.styles import (
    STYLE_CATALOG,
    SURPRISE_PROMPTS,
    Style,
    StyleName,
    list_styles,
    resolve_style,
)


class TestCatalog:
    """Verify the closed set of styles."""

    def test_exactly_four_styles(self):
        """The catalog holds Cute, Fun, Scary and Serene, in that order."""
        assert [style.name.value for style in list_styles()] == ["Cute", "Fun", "Scary", "Serene"]

    def test_every_style_has_both_templates(self):
        """Each style carries a scene prefix and a rendering directive."""
        for style in STYLE_CATALOG.values():
            assert style.scene_prefix
            assert style.rendering_directive

    def test_catalog_keys_match_names(self):
        """Catalog keys and style names agree."""
        for name, style in STYLE_CATALOG.items():
            assert style.name is name

    def test_cute_scene_prefix(self):
        """Cute scenes are framed as adorable penguin scenes."""
        assert STYLE_CATALOG[StyleName.CUTE].scene_prefix == "a cute and adorable penguin scene,"

    def test_styles_are_immutable(self):
        """Style entries are frozen dataclasses."""
        style = STYLE_CATALOG[StyleName.FUN]
        with pytest.raises(AttributeError):
            style.scene_prefix = "changed"

    def test_to_dict_uses_camel_case(self):
        """Serialised styles use the JSON key names the frontend expects."""
        data = STYLE_CATALOG[StyleName.SERENE].to_dict()
        assert data["name"] == "Serene"
        assert data["scenePrefix"] == "a calm and peaceful penguin scene,"
        assert data["renderingDirective"].startswith("Use a soft, muted color palette")

    def test_surprise_prompts(self):
        """Five surprise prompts are available."""
        assert len(SURPRISE_PROMPTS) == 5
        assert "A pudgy penguin surfing on a glacier" in SURPRISE_PROMPTS


class TestResolveStyle:
    """Verify style lookup by display name."""

    @pytest.mark.parametrize("name", ["Cute", "Fun", "Scary", "Serene"])
    def test_known_names_resolve(self, name):
        """Every catalog name resolves to its Style."""
        style = resolve_style(name)
        assert isinstance(style, Style)
        assert style.name.value == name

    @pytest.mark.parametrize("name", ["Unknown", "cute", "CUTE", " Cute", ""])
    def test_other_names_do_not_resolve(self, name):
        """Lookup is exact: unknown, differently cased or padded names fail."""
        assert resolve_style(name) is None

    def test_none_does_not_resolve(self):
        """A missing style resolves to None."""
        assert resolve_style(None) is None
