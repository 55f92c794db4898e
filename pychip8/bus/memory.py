"""Flat 4 KiB memory for the CHIP-8 interpreter.

The low 80 bytes hold the built-in hexadecimal font (16 glyphs, 5 bytes each).
Programs are copied verbatim to ``PROGRAM_START``. All addresses are folded into
the 12-bit address space, so index arithmetic that runs past the last byte wraps
back to the start of memory.
"""

from __future__ import annotations

from typing import Sequence

MEMORY_SIZE = 0x1000
ADDRESS_MASK = MEMORY_SIZE - 1
FONT_START = 0x000
GLYPH_BYTES = 5
PROGRAM_START = 0x200
MAX_PROGRAM_SIZE = MEMORY_SIZE - PROGRAM_START

FONT_SET: bytes = bytes(
    (
        0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
        0x20, 0x60, 0x20, 0x20, 0x70,  # 1
        0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
        0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
        0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
        0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
        0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
        0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
        0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
        0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
        0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
        0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
        0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
        0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
        0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
        0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
    )
)
FONT_END = FONT_START + len(FONT_SET)


def _mask12(address: int) -> int:
    """Clamp ``address`` to the 12-bit space addressed by CHIP-8 programs."""

    return address & ADDRESS_MASK


class MemoryError(Exception):
    """Raised when memory is used incorrectly."""


class ProgramTooLargeError(MemoryError):
    """Raised when a program does not fit between ``PROGRAM_START`` and the end of memory."""


class Memory:
    """Byte-addressable 4 KiB RAM with the font table pre-loaded."""

    def __init__(self) -> None:
        self._data = bytearray(MEMORY_SIZE)
        self._data[FONT_START:FONT_END] = FONT_SET
        self.program_length = 0

    def __len__(self) -> int:
        return MEMORY_SIZE

    def load8(self, address: int) -> int:
        return self._data[_mask12(address)]

    def store8(self, address: int, value: int) -> None:
        self._data[_mask12(address)] = value & 0xFF

    def load16(self, address: int) -> int:
        high = self.load8(address)
        low = self.load8(address + 1)
        return (high << 8) | low

    def load_block(self, address: int, length: int) -> bytes:
        return bytes(self.load8(address + offset) for offset in range(length))

    def store_block(self, address: int, values: Sequence[int]) -> None:
        for offset, value in enumerate(values):
            self.store8(address + offset, value)

    def load_program(self, data: bytes) -> None:
        """Copy ``data`` to ``PROGRAM_START``; memory is untouched when it does not fit."""

        if len(data) > MAX_PROGRAM_SIZE:
            raise ProgramTooLargeError(
                f"program is {len(data)} bytes, maximum allowed is {MAX_PROGRAM_SIZE}"
            )
        end = PROGRAM_START + len(data)
        self._data[PROGRAM_START:end] = data
        self._data[end:] = bytes(MEMORY_SIZE - end)
        self.program_length = len(data)

    def snapshot(self, start: int = 0, length: int = MEMORY_SIZE) -> bytes:
        if start < 0 or length < 0 or start + length > MEMORY_SIZE:
            raise MemoryError(f"region {start:#05x}+{length} outside memory")
        return bytes(self._data[start : start + length])


def glyph_address(digit: int) -> int:
    """Return the address of the font glyph for hexadecimal ``digit``."""

    return FONT_START + GLYPH_BYTES * (digit & 0x0F)
