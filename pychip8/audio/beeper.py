"""Simple square-wave beeper driven by the CHIP-8 sound timer."""

from __future__ import annotations

from array import array
import math
from typing import Optional

DEFAULT_TONE_HZ = 440.0


class SquareWaveBeeper:
    """Manage a looping square-wave tone using pygame's mixer."""

    def __init__(
        self,
        *,
        frequency: float = DEFAULT_TONE_HZ,
        sample_rate: int = 44_100,
        volume: float = 0.25,
    ) -> None:
        try:
            import pygame  # type: ignore
        except Exception as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("pygame is required for audio output") from exc

        if pygame.mixer.get_init() is None:
            raise RuntimeError("pygame mixer must be initialised before creating SquareWaveBeeper")
        if frequency <= 0.0:
            raise ValueError("tone frequency must be positive")

        self._pygame = pygame
        self._sample_rate = max(1, sample_rate)
        self._volume = max(0.0, min(1.0, volume))
        self._frequency = frequency
        self._channel: Optional[pygame.mixer.Channel] = None
        self._sound = self._build_sound(frequency)
        self._playing = False

    # ------------------------------------------------------------------
    # Public API

    @property
    def playing(self) -> bool:
        return self._playing

    def set_state(self, enabled: bool) -> None:
        """Start the tone when ``enabled`` and stop it otherwise."""

        if not enabled:
            self._stop()
            return
        if self._playing:
            return

        channel = self._channel
        if channel is None:
            channel = self._pygame.mixer.find_channel(True)
            if channel is None:
                return
            self._channel = channel

        channel.play(self._sound, loops=-1)
        channel.set_volume(self._volume)
        self._playing = True

    def shutdown(self) -> None:
        """Stop any active tone and release resources."""

        self._stop()
        self._channel = None

    # ------------------------------------------------------------------
    # Internals

    def _stop(self) -> None:
        if self._channel is not None and self._playing:
            self._channel.stop()
        self._playing = False

    def _build_sound(self, frequency: float) -> "pygame.mixer.Sound":
        period_samples = max(2, int(round(self._sample_rate / frequency)))
        half = period_samples // 2
        amplitude = 12_000

        buffer = array("h")
        for index in range(period_samples):
            buffer.append(amplitude if index < half else -amplitude)

        # A single period is too short for some mixers to loop cleanly.
        repeats = max(1, int(math.ceil(self._sample_rate / 10 / period_samples)))
        return self._pygame.mixer.Sound(buffer=(buffer * repeats).tobytes())


__all__ = ["DEFAULT_TONE_HZ", "SquareWaveBeeper"]
