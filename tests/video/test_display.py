import pytest

from pychip8.video import DisplayBuffer


def lit_pixels(display: DisplayBuffer) -> set[tuple[int, int]]:
    return {
        (x, y)
        for y, row in enumerate(display.rows())
        for x, lit in enumerate(row)
        if lit
    }


def test_new_display_is_blank() -> None:
    display = DisplayBuffer()

    assert (display.width, display.height) == (64, 32)
    assert display.lit_count() == 0
    assert not display.dirty


def test_clear_marks_dirty_even_when_blank() -> None:
    display = DisplayBuffer()

    display.clear()

    assert display.dirty
    assert display.lit_count() == 0


def test_blank_sprite_changes_nothing() -> None:
    display = DisplayBuffer()
    display.draw_sprite(3, 4, [0x81])
    before = display.snapshot()

    assert display.draw_sprite(3, 4, [0x00, 0x00]) is False
    assert display.snapshot() == before


def test_drawing_twice_restores_and_reports_collision() -> None:
    display = DisplayBuffer()
    sprite = [0xF0, 0x90, 0xF0]

    assert display.draw_sprite(10, 5, sprite) is False
    assert display.lit_count() == 10
    assert display.draw_sprite(10, 5, sprite) is True
    assert display.lit_count() == 0


def test_overlap_toggles_only_shared_pixels() -> None:
    display = DisplayBuffer()
    display.draw_sprite(0, 0, [0b1100_0000])

    assert display.draw_sprite(0, 0, [0b0110_0000]) is True
    assert lit_pixels(display) == {(0, 0), (2, 0)}


def test_sprite_is_clipped_at_right_and_bottom_edges() -> None:
    display = DisplayBuffer()

    display.draw_sprite(60, 30, [0xFF, 0xFF, 0xFF])

    assert lit_pixels(display) == {(x, y) for x in range(60, 64) for y in (30, 31)}


def test_origin_wraps_once() -> None:
    display = DisplayBuffer()

    display.draw_sprite(64 + 2, 32 + 1, [0x80])
    display.draw_sprite(130, 0, [0x80])

    assert lit_pixels(display) == {(2, 1), (2, 0)}


def test_consume_dirty_resets_flag() -> None:
    display = DisplayBuffer()
    display.draw_sprite(0, 0, [0x80])

    assert display.consume_dirty() is True
    assert display.consume_dirty() is False


def test_custom_dimensions_and_text_dump() -> None:
    display = DisplayBuffer(8, 2)
    display.draw_sprite(6, 1, [0xFF])

    assert display.to_text() == "........\n......##"


def test_get_pixel_rejects_out_of_range() -> None:
    display = DisplayBuffer()

    with pytest.raises(IndexError):
        display.get_pixel(64, 0)


def test_dimensions_must_be_positive() -> None:
    with pytest.raises(ValueError):
        DisplayBuffer(0, 32)
