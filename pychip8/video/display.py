"""Monochrome frame buffer mutated by the CHIP-8 clear and draw instructions."""

from __future__ import annotations

from typing import Iterable

DEFAULT_WIDTH = 64
DEFAULT_HEIGHT = 32


class DisplayBuffer:
    """Row-major grid of on/off pixels plus a pending-redraw flag."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("display dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = [False] * (width * height)
        self.dirty = False

    def clear(self) -> None:
        self._pixels = [False] * (self.width * self.height)
        self.dirty = True

    def get_pixel(self, x: int, y: int) -> bool:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} display")
        return self._pixels[y * self.width + x]

    def draw_sprite(self, x: int, y: int, sprite: Iterable[int]) -> bool:
        """XOR ``sprite`` onto the display with its top-left corner at ``(x, y)``.

        The origin wraps around the screen once; the sprite body is clipped at
        the right and bottom edges rather than wrapped. Returns ``True`` when any
        lit pixel was switched off (a collision).
        """

        origin_x = x % self.width
        row = y % self.height
        collision = False

        for data in sprite:
            column = origin_x
            for bit in range(7, -1, -1):
                sprite_bit = (data >> bit) & 0x01 == 1
                index = row * self.width + column
                if sprite_bit and self._pixels[index]:
                    collision = True
                self._pixels[index] ^= sprite_bit
                column += 1
                if column >= self.width:
                    break
            row += 1
            if row >= self.height:
                break

        self.dirty = True
        return collision

    def consume_dirty(self) -> bool:
        """Return whether a redraw is owed and clear the flag."""

        dirty = self.dirty
        self.dirty = False
        return dirty

    def rows(self) -> tuple[tuple[bool, ...], ...]:
        width = self.width
        return tuple(
            tuple(self._pixels[start : start + width])
            for start in range(0, width * self.height, width)
        )

    def lit_count(self) -> int:
        return sum(self._pixels)

    def snapshot(self) -> tuple[bool, ...]:
        return tuple(self._pixels)

    def to_text(self, on: str = "#", off: str = ".") -> str:
        return "\n".join("".join(on if pixel else off for pixel in row) for row in self.rows())


__all__ = ["DEFAULT_WIDTH", "DEFAULT_HEIGHT", "DisplayBuffer"]
