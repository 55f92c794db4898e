import pytest

from pychip8.cpu import decode


def test_decode_extracts_all_fields() -> None:
    decoded = decode(0xD12F)

    assert decoded.opcode == 0xD12F
    assert decoded.family == 0xD
    assert decoded.nnn == 0x12F
    assert decoded.nn == 0x2F
    assert decoded.n == 0xF
    assert decoded.x == 0x1
    assert decoded.y == 0x2


@pytest.mark.parametrize("word", [0x0000, 0xFFFF, 0x8AB4, 0x1234])
def test_fields_recombine_into_opcode(word: int) -> None:
    decoded = decode(word)

    assert (decoded.family << 12) | decoded.nnn == word
    assert (decoded.x << 8) | decoded.nn == word & 0x0FFF
    assert (decoded.y << 4) | decoded.n == decoded.nn


def test_decode_masks_to_sixteen_bits() -> None:
    assert decode(0x1_6A42).opcode == 0x6A42
