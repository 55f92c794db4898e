import pytest

from pychip8.bus import (
    FONT_SET,
    MAX_PROGRAM_SIZE,
    MEMORY_SIZE,
    PROGRAM_START,
    Memory,
    ProgramTooLargeError,
    glyph_address,
)


def test_font_is_preloaded() -> None:
    memory = Memory()

    assert len(memory) == MEMORY_SIZE
    assert len(FONT_SET) == 80
    assert memory.snapshot(0, 80) == FONT_SET
    assert memory.load_block(glyph_address(0xA), 5) == bytes((0xF0, 0x90, 0xF0, 0x90, 0x90))


def test_load_program_places_bytes_at_program_start() -> None:
    memory = Memory()
    memory.load_program(b"\x12\x34\xAB")

    assert memory.load16(PROGRAM_START) == 0x1234
    assert memory.load8(PROGRAM_START + 2) == 0xAB
    assert memory.load8(PROGRAM_START + 3) == 0x00
    assert memory.program_length == 3


def test_load_program_accepts_maximum_size() -> None:
    memory = Memory()
    memory.load_program(bytes([0x5A]) * MAX_PROGRAM_SIZE)

    assert MAX_PROGRAM_SIZE == 3584
    assert memory.load8(MEMORY_SIZE - 1) == 0x5A


def test_oversized_program_is_rejected_without_mutation() -> None:
    memory = Memory()
    memory.load_program(b"\x60\x01")

    with pytest.raises(ProgramTooLargeError):
        memory.load_program(bytes(MAX_PROGRAM_SIZE + 1))

    assert memory.load16(PROGRAM_START) == 0x6001
    assert memory.program_length == 2


def test_reloading_shorter_program_clears_tail() -> None:
    memory = Memory()
    memory.load_program(b"\xAA" * 8)
    memory.load_program(b"\xBB")

    assert memory.load_block(PROGRAM_START, 3) == b"\xBB\x00\x00"


def test_addresses_wrap_within_twelve_bits() -> None:
    memory = Memory()
    memory.store8(0x1005, 0x42)

    assert memory.load8(0x005) == 0x42
    memory.store_block(0xFFE, [1, 2, 3])
    assert memory.load_block(0xFFE, 3) == bytes((1, 2, 3))
    assert memory.load8(0x000) == 3


def test_store8_keeps_low_byte() -> None:
    memory = Memory()
    memory.store8(0x300, 0x1FF)

    assert memory.load8(0x300) == 0xFF


@pytest.mark.parametrize(("digit", "address"), [(0, 0), (1, 5), (0xF, 75), (0x1F, 75)])
def test_glyph_address(digit: int, address: int) -> None:
    assert glyph_address(digit) == address
