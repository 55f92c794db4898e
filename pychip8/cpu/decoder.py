"""Opcode decoder for the CHIP-8 instruction set."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DecodedInstruction:
    """Operand fields extracted from a 16-bit opcode word."""

    opcode: int
    nnn: int
    nn: int
    n: int
    x: int
    y: int

    @property
    def family(self) -> int:
        return (self.opcode >> 12) & 0x0F


def decode(word: int) -> DecodedInstruction:
    """Split ``word`` into its operand fields. Every 16-bit value decodes."""

    opcode = word & 0xFFFF
    return DecodedInstruction(
        opcode=opcode,
        nnn=opcode & 0x0FFF,
        nn=opcode & 0x00FF,
        n=opcode & 0x000F,
        x=(opcode & 0x0F00) >> 8,
        y=(opcode & 0x00F0) >> 4,
    )


__all__ = ["DecodedInstruction", "decode"]
