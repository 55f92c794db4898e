import pytest

from pychip8.cpu import CHIP8CPU, decode, describe, lookup
from pychip8.cpu.opcodes import FAMILY_TABLE


@pytest.mark.parametrize(
    ("word", "text"),
    [
        (0x00E0, "CLS"),
        (0x00EE, "RET"),
        (0x1ABC, "JP 0xABC"),
        (0x2208, "CALL 0x208"),
        (0x3A42, "SE VA, 0x42"),
        (0x5120, "SE V1, V2"),
        (0x8124, "ADD V1, V2"),
        (0x830E, "SHL V3"),
        (0xB300, "JP V0, 0x300"),
        (0xD125, "DRW V1, V2, 5"),
        (0xE59E, "SKP V5"),
        (0xF20A, "LD V2, K"),
        (0xFF65, "LD VF, [I]"),
    ],
)
def test_describe_renders_mnemonics(word: int, text: str) -> None:
    assert describe(decode(word)) == text


@pytest.mark.parametrize("word", [0x0000, 0x0ABC, 0x8008, 0xE0FF, 0xF0FF])
def test_unassigned_opcodes_have_no_entry(word: int) -> None:
    decoded = decode(word)

    assert lookup(decoded) is None
    assert describe(decoded) == "???"


def test_family_table_covers_every_top_nibble() -> None:
    assert len(FAMILY_TABLE) == 16


def test_every_handler_exists_on_cpu() -> None:
    for word in range(0x10000):
        instruction = lookup(decode(word))
        if instruction is not None:
            assert callable(getattr(CHIP8CPU, instruction.handler, None)), instruction.handler
