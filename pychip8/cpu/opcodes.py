"""Opcode metadata and dispatch tables for the CHIP-8 instruction set.

Dispatch is keyed on the top nibble of the opcode. Four families carry a second
level keyed on a sub-field: ``0x0`` and ``0xE``/``0xF`` on ``NN`` and ``0x8`` on
``N``. Anything without an entry resolves to ``None`` and executes as a no-op.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Final, Mapping, Sequence

from .decoder import DecodedInstruction


@dataclass(frozen=True)
class Instruction:
    """Metadata describing a single CHIP-8 operation."""

    pattern: str
    mnemonic: str
    handler: str

    def format(self, decoded: DecodedInstruction) -> str:
        return self.mnemonic.format(
            x=decoded.x,
            y=decoded.y,
            n=decoded.n,
            nn=decoded.nn,
            nnn=decoded.nnn,
        )


SYSTEM_INSTRUCTIONS: Final[Mapping[int, Instruction]] = {
    0xE0: Instruction("00E0", "CLS", "op_cls"),
    0xEE: Instruction("00EE", "RET", "op_ret"),
}

ALU_INSTRUCTIONS: Final[Mapping[int, Instruction]] = {
    0x0: Instruction("8XY0", "LD V{x:X}, V{y:X}", "op_ld_reg"),
    0x1: Instruction("8XY1", "OR V{x:X}, V{y:X}", "op_or"),
    0x2: Instruction("8XY2", "AND V{x:X}, V{y:X}", "op_and"),
    0x3: Instruction("8XY3", "XOR V{x:X}, V{y:X}", "op_xor"),
    0x4: Instruction("8XY4", "ADD V{x:X}, V{y:X}", "op_add_reg"),
    0x5: Instruction("8XY5", "SUB V{x:X}, V{y:X}", "op_sub"),
    0x6: Instruction("8XY6", "SHR V{x:X}", "op_shr"),
    0x7: Instruction("8XY7", "SUBN V{x:X}, V{y:X}", "op_subn"),
    0xE: Instruction("8XYE", "SHL V{x:X}", "op_shl"),
}

KEY_INSTRUCTIONS: Final[Mapping[int, Instruction]] = {
    0x9E: Instruction("EX9E", "SKP V{x:X}", "op_skp"),
    0xA1: Instruction("EXA1", "SKNP V{x:X}", "op_sknp"),
}

MISC_INSTRUCTIONS: Final[Mapping[int, Instruction]] = {
    0x07: Instruction("FX07", "LD V{x:X}, DT", "op_ld_vx_dt"),
    0x0A: Instruction("FX0A", "LD V{x:X}, K", "op_wait_key"),
    0x15: Instruction("FX15", "LD DT, V{x:X}", "op_ld_dt_vx"),
    0x18: Instruction("FX18", "LD ST, V{x:X}", "op_ld_st_vx"),
    0x1E: Instruction("FX1E", "ADD I, V{x:X}", "op_add_i"),
    0x29: Instruction("FX29", "LD F, V{x:X}", "op_ld_font"),
    0x33: Instruction("FX33", "LD B, V{x:X}", "op_bcd"),
    0x55: Instruction("FX55", "LD [I], V{x:X}", "op_store_registers"),
    0x65: Instruction("FX65", "LD V{x:X}, [I]", "op_load_registers"),
}


def _by_nn(table: Mapping[int, Instruction]) -> Callable[[DecodedInstruction], Instruction | None]:
    return lambda decoded: table.get(decoded.nn)


def _by_n(table: Mapping[int, Instruction]) -> Callable[[DecodedInstruction], Instruction | None]:
    return lambda decoded: table.get(decoded.n)


def _single(instruction: Instruction) -> Callable[[DecodedInstruction], Instruction | None]:
    return lambda _: instruction


FAMILY_TABLE: Final[Sequence[Callable[[DecodedInstruction], Instruction | None]]] = (
    _by_nn(SYSTEM_INSTRUCTIONS),
    _single(Instruction("1NNN", "JP 0x{nnn:03X}", "op_jp")),
    _single(Instruction("2NNN", "CALL 0x{nnn:03X}", "op_call")),
    _single(Instruction("3XNN", "SE V{x:X}, 0x{nn:02X}", "op_se_imm")),
    _single(Instruction("4XNN", "SNE V{x:X}, 0x{nn:02X}", "op_sne_imm")),
    _single(Instruction("5XY0", "SE V{x:X}, V{y:X}", "op_se_reg")),
    _single(Instruction("6XNN", "LD V{x:X}, 0x{nn:02X}", "op_ld_imm")),
    _single(Instruction("7XNN", "ADD V{x:X}, 0x{nn:02X}", "op_add_imm")),
    _by_n(ALU_INSTRUCTIONS),
    _single(Instruction("9XY0", "SNE V{x:X}, V{y:X}", "op_sne_reg")),
    _single(Instruction("ANNN", "LD I, 0x{nnn:03X}", "op_ld_i")),
    _single(Instruction("BNNN", "JP V0, 0x{nnn:03X}", "op_jp_v0")),
    _single(Instruction("CXNN", "RND V{x:X}, 0x{nn:02X}", "op_rnd")),
    _single(Instruction("DXYN", "DRW V{x:X}, V{y:X}, {n}", "op_drw")),
    _by_nn(KEY_INSTRUCTIONS),
    _by_nn(MISC_INSTRUCTIONS),
)


def lookup(decoded: DecodedInstruction) -> Instruction | None:
    """Return the instruction metadata for ``decoded`` or ``None`` when unassigned."""

    return FAMILY_TABLE[decoded.family](decoded)


def describe(decoded: DecodedInstruction) -> str:
    """Render ``decoded`` as an assembler-style mnemonic."""

    instruction = lookup(decoded)
    if instruction is None:
        return "???"
    return instruction.format(decoded)


__all__ = [
    "Instruction",
    "FAMILY_TABLE",
    "SYSTEM_INSTRUCTIONS",
    "ALU_INSTRUCTIONS",
    "KEY_INSTRUCTIONS",
    "MISC_INSTRUCTIONS",
    "lookup",
    "describe",
]
