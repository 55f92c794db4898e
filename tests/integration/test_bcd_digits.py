"""End-to-end check: print a register as three decimal font digits."""

from pychip8.bus import FONT_SET, glyph_address
from pychip8.system import MachineConfig, create_machine

PROGRAM = bytes.fromhex(
    "6A9D"  # LD VA, 0x9D (157)
    "A300"  # LD I, 0x300
    "FA33"  # LD B, VA
    "F265"  # LD V2, [I]
    "6300"  # LD V3, 0
    "6400"  # LD V4, 0
    "F029"  # LD F, V0
    "D345"  # DRW V3, V4, 5
    "7305"  # ADD V3, 5
    "F129"  # LD F, V1
    "D345"  # DRW V3, V4, 5
    "7305"  # ADD V3, 5
    "F229"  # LD F, V2
    "D345"  # DRW V3, V4, 5
    "121C"  # JP 0x21C
)


def glyph_rows(digit: int) -> list[str]:
    start = glyph_address(digit)
    return [
        "".join("#" if byte & (0x80 >> bit) else "." for bit in range(5))
        for byte in FONT_SET[start : start + 5]
    ]


def test_bcd_digits_are_drawn_side_by_side() -> None:
    machine = create_machine(MachineConfig(program=PROGRAM))

    for _ in range(3):
        machine.run_frame()

    assert machine.cpu.state.pc == 0x21C
    assert tuple(machine.cpu.v[:3]) == (1, 5, 7)
    assert machine.cpu.v[0xF] == 0

    rows = machine.display.to_text().splitlines()
    expected = ["".join(parts) for parts in zip(glyph_rows(1), glyph_rows(5), glyph_rows(7))]
    assert [row[:15] for row in rows[:5]] == expected
    assert machine.display.lit_count() == sum(row.count("#") for row in expected)
