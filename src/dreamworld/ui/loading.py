"""Rotating "loading" label shown while generations are in flight."""

from __future__ import annotations

LOADING_TEXTS: tuple[str, ...] = (
    "Dreaming",
    "Imagining",
    "Conjuring",
    "Visualizing",
    "Manifesting",
)

# Seconds between label changes.
LOADING_TEXT_INTERVAL = 1.0


class LoadingTextCycle:
    """Cycles through :data:`LOADING_TEXTS`.

    The label starts at the first text; each :meth:`advance` moves to the next
    one and wraps around.  :meth:`reset` returns to the first text.
    """

    def __init__(self, texts: tuple[str, ...] = LOADING_TEXTS) -> None:
        if not texts:
            raise ValueError("LoadingTextCycle needs at least one text")
        self.texts = texts
        self._index = 0

    @property
    def current(self) -> str:
        return self.texts[self._index]

    def advance(self) -> str:
        self._index = (self._index + 1) % len(self.texts)
        return self.current

    def reset(self) -> None:
        self._index = 0
