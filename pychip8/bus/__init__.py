"""Memory bus for the CHIP-8 interpreter."""

from .memory import (
    FONT_SET,
    MAX_PROGRAM_SIZE,
    MEMORY_SIZE,
    PROGRAM_START,
    Memory,
    MemoryError,
    ProgramTooLargeError,
    glyph_address,
)

__all__ = [
    "FONT_SET",
    "MAX_PROGRAM_SIZE",
    "MEMORY_SIZE",
    "PROGRAM_START",
    "Memory",
    "MemoryError",
    "ProgramTooLargeError",
    "glyph_address",
]
