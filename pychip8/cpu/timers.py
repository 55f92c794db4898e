"""Delay and sound timers."""

from __future__ import annotations

from dataclasses import dataclass

TIMER_HZ = 60


@dataclass
class Timers:
    """Two 8-bit down-counters decremented once per host frame."""

    delay: int = 0
    sound: int = 0

    def tick(self) -> None:
        """Advance both timers by one 60 Hz tick, stopping at zero."""

        if self.delay > 0:
            self.delay -= 1
        if self.sound > 0:
            self.sound -= 1

    def set_delay(self, value: int) -> None:
        self.delay = value & 0xFF

    def set_sound(self, value: int) -> None:
        self.sound = value & 0xFF

    @property
    def sound_active(self) -> bool:
        return self.sound > 0

    def reset(self) -> None:
        self.delay = 0
        self.sound = 0


__all__ = ["TIMER_HZ", "Timers"]
