"""Rasterise the CHIP-8 display buffer into scaled RGB output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .display import DisplayBuffer
from .palette import MONOCHROME, RGBColor, validate_palette


@dataclass(frozen=True)
class RenderResult:
    """A rendered frame: one square cell of ``scale`` pixels per display pixel."""

    cells: Tuple[Tuple[bool, ...], ...]
    scale: int
    palette: Tuple[RGBColor, RGBColor]
    pixel_outlines: bool

    @property
    def columns(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def width(self) -> int:
        return self.columns * self.scale

    @property
    def height(self) -> int:
        return len(self.cells) * self.scale

    def get_pixel(self, x: int, y: int) -> RGBColor:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} frame")
        background, foreground = self.palette
        if not self.cells[y // self.scale][x // self.scale]:
            return background
        if self.pixel_outlines:
            edge = self.scale - 1
            if x % self.scale in (0, edge) or y % self.scale in (0, edge):
                return background
        return foreground

    def to_surface(self):
        try:
            import pygame  # type: ignore
        except Exception as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("pygame is required to build surfaces") from exc

        background, foreground = self.palette
        surface = pygame.Surface((self.width, self.height))
        surface.fill(background)
        scale = self.scale
        for row, cells in enumerate(self.cells):
            for column, lit in enumerate(cells):
                if not lit:
                    continue
                rect = pygame.Rect(column * scale, row * scale, scale, scale)
                pygame.draw.rect(surface, foreground, rect)
                if self.pixel_outlines:
                    pygame.draw.rect(surface, background, rect, 1)
        return surface


class Renderer:
    """Turns a ``DisplayBuffer`` into a ``RenderResult``."""

    def __init__(
        self,
        palette: Sequence[RGBColor] = MONOCHROME,
        *,
        pixel_outlines: bool = True,
    ) -> None:
        self._palette = validate_palette(palette)
        self._pixel_outlines = pixel_outlines

    @property
    def pixel_outlines(self) -> bool:
        return self._pixel_outlines

    def render(self, display: DisplayBuffer, *, scale: int = 1) -> RenderResult:
        if scale <= 0:
            raise ValueError("scale must be positive")
        return RenderResult(
            cells=display.rows(),
            scale=scale,
            palette=self._palette,
            pixel_outlines=self._pixel_outlines,
        )


__all__ = ["RenderResult", "Renderer"]
