from pychip8.io import KEY_MAP, Keypad


def test_press_and_release() -> None:
    keypad = Keypad()

    keypad.press(0xB)
    assert keypad.is_pressed(0xB)
    assert keypad.first_pressed() == 0xB

    keypad.release(0xB)
    assert not keypad.is_pressed(0xB)
    assert keypad.first_pressed() is None


def test_first_pressed_reports_lowest_index() -> None:
    keypad = Keypad()
    keypad.press(0xF)
    keypad.press(0x3)

    assert keypad.first_pressed() == 0x3


def test_keys_are_masked_to_low_nibble() -> None:
    keypad = Keypad()
    keypad.press(0x12)

    assert keypad.is_pressed(0x2)
    assert keypad.is_pressed(0xF2)


def test_qwerty_layout() -> None:
    assert len(KEY_MAP) == 16
    assert sorted(KEY_MAP.values()) == list(range(16))
    assert KEY_MAP["1"] == 0x1
    assert KEY_MAP["4"] == 0xC
    assert KEY_MAP["x"] == 0x0
    assert KEY_MAP["v"] == 0xF


def test_press_name_maps_host_keys() -> None:
    keypad = Keypad()

    assert keypad.press_name("W") is True
    assert keypad.is_pressed(0x5)
    assert keypad.release_name("w") is True
    assert not keypad.is_pressed(0x5)


def test_unmapped_names_are_ignored() -> None:
    keypad = Keypad()

    assert keypad.press_name("space") is False
    assert keypad.release_name("p") is False
    assert keypad.snapshot() == (False,) * 16


def test_reset_releases_everything() -> None:
    keypad = Keypad()
    for key in range(16):
        keypad.press(key)

    keypad.reset()

    assert keypad.first_pressed() is None
