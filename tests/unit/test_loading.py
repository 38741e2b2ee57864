"""Tests for dreamworld.ui.loading - rotating loading label."""

from __future__ import annotations

import pytest

from dreamworld.ui.loading import LOADING_TEXT_INTERVAL, LOADING_TEXTS, LoadingTextCycle


def test_default_texts():
    """Five labels, starting with Dreaming, rotate once per second."""
    assert LOADING_TEXTS == ("Dreaming", "Imagining", "Conjuring", "Visualizing", "Manifesting")
    assert LOADING_TEXT_INTERVAL == 1.0


def test_starts_at_first_text():
    assert LoadingTextCycle().current == "Dreaming"


def test_advance_wraps_around():
    """After the last label the cycle returns to the first."""
    cycle = LoadingTextCycle(("one", "two"))
    assert cycle.advance() == "two"
    assert cycle.advance() == "one"


def test_reset():
    cycle = LoadingTextCycle()
    cycle.advance()
    cycle.advance()
    cycle.reset()
    assert cycle.current == "Dreaming"


def test_empty_texts_rejected():
    with pytest.raises(ValueError):
        LoadingTextCycle(())
