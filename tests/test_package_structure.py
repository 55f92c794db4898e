"""Baseline tests ensuring the package skeleton loads correctly."""

import pychip8


def test_package_exports() -> None:
    for name in ("cpu", "bus", "video", "audio", "io", "system", "loader", "ui", "utils"):
        assert hasattr(pychip8, name), f"missing submodule: {name}"


def test_bus_exports() -> None:
    from pychip8 import bus

    for name in ("Memory", "ProgramTooLargeError", "PROGRAM_START", "FONT_SET"):
        assert hasattr(bus, name), f"bus missing symbol: {name}"


def test_cpu_exports() -> None:
    from pychip8 import cpu

    for name in ("CHIP8CPU", "CallStack", "CPUError", "Timers", "decode", "describe"):
        assert hasattr(cpu, name), f"cpu missing symbol: {name}"
