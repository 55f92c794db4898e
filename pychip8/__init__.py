"""Python CHIP-8 interpreter.

The package is split into the interpreter core (``bus``, ``cpu``, ``video.display``,
``system``) and the thin pygame shell that feeds and presents it (``ui``, ``audio``,
``video.renderer``, ``io``, ``loader``). The core never imports pygame.
"""

from __future__ import annotations

from . import audio, bus, cpu, io, loader, system, ui, utils, video

__all__: list[str] = [
    "cpu",
    "bus",
    "video",
    "audio",
    "io",
    "loader",
    "system",
    "ui",
    "utils",
]
