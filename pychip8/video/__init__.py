"""Display buffer and rendering helpers for the CHIP-8 interpreter."""

from __future__ import annotations

from .display import DEFAULT_HEIGHT, DEFAULT_WIDTH, DisplayBuffer
from .palette import MONOCHROME, parse_rgba, validate_palette
from .renderer import RenderResult, Renderer

__all__ = [
    "DisplayBuffer",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "Renderer",
    "RenderResult",
    "MONOCHROME",
    "parse_rgba",
    "validate_palette",
]
