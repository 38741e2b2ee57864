"""Dreamworld Image Generator - style-driven AI image generation."""

__version__ = "0.1.0"

from dreamworld.core.config import DreamworldConfig, config

__all__ = [
    "DreamworldConfig",
    "config",
]
