"""Client-side gallery for the Dreamworld API.

Modules
-------
models
    Gallery entry and state dataclasses.
state
    Pure gallery transitions (insert, complete, remove).
loading
    Rotating loading label.
client
    Async ``httpx`` client for the HTTP API.
controller
    :class:`GalleryController`, which ties the client to the state machine.
"""

from dreamworld.ui.client import DreamworldClient
from dreamworld.ui.controller import GalleryController
from dreamworld.ui.models import GalleryEntry, GalleryState, GalleryStatus

__all__ = [
    "DreamworldClient",
    "GalleryController",
    "GalleryEntry",
    "GalleryState",
    "GalleryStatus",
]
