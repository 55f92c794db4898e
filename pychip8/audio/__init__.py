"""Audio output for the CHIP-8 interpreter."""

from .beeper import DEFAULT_TONE_HZ, SquareWaveBeeper

__all__ = ["DEFAULT_TONE_HZ", "SquareWaveBeeper"]
