"""CHIP-8 hexadecimal keypad state and its QWERTY mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from pychip8.utils import debug_enabled, debug_log

KEY_COUNT = 16

# CHIP-8 keypad     QWERTY
#   1 2 3 C         1 2 3 4
#   4 5 6 D         q w e r
#   7 8 9 E         a s d f
#   A 0 B F         z x c v
KEY_MAP: Mapping[str, int] = {
    "1": 0x1,
    "2": 0x2,
    "3": 0x3,
    "4": 0xC,
    "q": 0x4,
    "w": 0x5,
    "e": 0x6,
    "r": 0xD,
    "a": 0x7,
    "s": 0x8,
    "d": 0x9,
    "f": 0xE,
    "z": 0xA,
    "x": 0x0,
    "c": 0xB,
    "v": 0xF,
}


@dataclass
class Keypad:
    """Sixteen key flags written by the input layer and read by the CPU."""

    _keys: list[bool] = field(default_factory=lambda: [False] * KEY_COUNT)

    def set(self, key: int, pressed: bool) -> None:
        index = key & 0x0F
        self._keys[index] = pressed
        if debug_enabled("input"):
            debug_log("input", "key=%X pressed=%s", index, pressed)

    def press(self, key: int) -> None:
        self.set(key, True)

    def release(self, key: int) -> None:
        self.set(key, False)

    def is_pressed(self, key: int) -> bool:
        return self._keys[key & 0x0F]

    def first_pressed(self) -> int | None:
        """Return the lowest pressed key index, or ``None`` when nothing is held."""

        for index, pressed in enumerate(self._keys):
            if pressed:
                return index
        return None

    def press_name(self, key_name: str) -> bool:
        key = self._lookup(key_name)
        if key is None:
            if debug_enabled("input"):
                debug_log("input", "unmapped_press=%s", key_name)
            return False
        self.press(key)
        return True

    def release_name(self, key_name: str) -> bool:
        key = self._lookup(key_name)
        if key is None:
            if debug_enabled("input"):
                debug_log("input", "unmapped_release=%s", key_name)
            return False
        self.release(key)
        return True

    def reset(self) -> None:
        self._keys[:] = [False] * KEY_COUNT

    def snapshot(self) -> tuple[bool, ...]:
        return tuple(self._keys)

    def _lookup(self, key_name: str) -> int | None:
        return KEY_MAP.get(key_name.lower())


__all__ = ["KEY_COUNT", "KEY_MAP", "Keypad"]
