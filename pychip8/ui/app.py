"""Pygame host loop for the CHIP-8 interpreter."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pychip8.audio import SquareWaveBeeper
from pychip8.bus import ProgramTooLargeError
from pychip8.cpu import CPUError, TIMER_HZ
from pychip8.loader import RomFormatError, RomImage, load_rom_from_path
from pychip8.system import Machine, MachineConfig, RunState, create_machine
from pychip8.utils import TraceRecorder, debug_enabled, debug_log
from pychip8.video import Renderer, parse_rgba


@dataclass
class AppConfig:
    """Configuration for the CHIP-8 frontend."""

    rom_path: Optional[Path] = None
    scale: int = 20
    instructions_per_second: int = 500
    pixel_outlines: bool = True
    screen_width: int = 64
    screen_height: int = 32
    fg_color: int = 0xFFFFFFFF
    bg_color: int = 0x000000FF
    enable_audio: bool = True


class Chip8App:
    """Thin wrapper around the Pygame event loop."""

    def __init__(self, config: AppConfig) -> None:
        self._config = config
        self._machine: Machine | None = None
        self._beeper: SquareWaveBeeper | None = None
        self._pygame = None
        self._perf_enabled = debug_enabled("perf")
        self._perf_frame = 0
        self._trace_recorder: TraceRecorder | None = None
        if debug_enabled("trace"):
            self._trace_recorder = TraceRecorder(512)
        self._renderer = Renderer(
            (parse_rgba(config.bg_color), parse_rgba(config.fg_color)),
            pixel_outlines=config.pixel_outlines,
        )

    @property
    def machine(self) -> Machine | None:
        return self._machine

    def run(self) -> None:
        if not self._config.rom_path:
            raise RuntimeError("ROM image is required; pass --rom <path>")
        rom = self._load_rom(self._config.rom_path)
        machine = self._create_machine(rom)
        self._machine = machine

        try:
            import pygame  # type: ignore
        except Exception as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("pygame is required to run the UI") from exc

        pygame.mixer.pre_init(44_100, -16, 1, 512)
        pygame.init()
        pygame.display.set_caption(f"CHIP-8 Emulator - {rom.name}")
        self._pygame = pygame
        self._initialise_audio(pygame)

        scale = self._config.scale
        screen = pygame.display.set_mode(
            (machine.display.width * scale, machine.display.height * scale)
        )
        screen.fill(parse_rgba(self._config.bg_color))
        pygame.display.flip()

        clock = pygame.time.Clock()
        try:
            while not machine.run_control.is_stopped:
                for event in pygame.event.get():
                    self._handle_event(pygame, event)

                if not machine.run_control.is_running:
                    clock.tick(TIMER_HZ)
                    continue

                frame_start = time.perf_counter()
                self._run_frame(machine)

                if machine.display.consume_dirty():
                    frame = self._renderer.render(machine.display, scale=scale)
                    screen.blit(frame.to_surface(), (0, 0))
                    pygame.display.flip()

                if self._beeper is not None:
                    self._beeper.set_state(machine.sound_active)

                if self._perf_enabled:
                    self._perf_frame += 1
                    debug_log(
                        "perf",
                        "frame=%d frame_ms=%.3f",
                        self._perf_frame,
                        (time.perf_counter() - frame_start) * 1000.0,
                    )

                clock.tick(TIMER_HZ)
        finally:
            if self._beeper is not None:
                self._beeper.shutdown()
            pygame.quit()

    def _handle_event(self, pygame, event) -> None:
        machine = self._machine
        if machine is None:
            return
        if event.type == pygame.QUIT:
            machine.run_control.stop()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self._toggle_pause(machine)
        elif event.type == pygame.KEYDOWN:
            self._handle_key_event(pygame.key.name(event.key), pressed=True)
        elif event.type == pygame.KEYUP:
            self._handle_key_event(pygame.key.name(event.key), pressed=False)

    def _toggle_pause(self, machine: Machine) -> None:
        state = machine.run_control.toggle_pause()
        if state is RunState.PAUSED:
            print("===PAUSED===")
            if self._beeper is not None:
                self._beeper.set_state(False)
        elif state is RunState.RUNNING:
            print("===RUNNING===")

    def _handle_key_event(self, name: str, *, pressed: bool) -> None:
        machine = self._machine
        if machine is None:
            return
        if debug_enabled("input"):
            debug_log("input", "event=%s pressed=%s", name, pressed)
        if pressed:
            machine.keypad.press_name(name)
        else:
            machine.keypad.release_name(name)

    def _run_frame(self, machine: Machine) -> int:
        try:
            return machine.run_frame()
        except CPUError as exc:
            if self._trace_recorder is not None:
                self._trace_recorder.dump("trace", limit=32)
            raise RuntimeError(f"CPU fault at {machine.cpu.state.pc:#06x}: {exc}") from exc

    def _initialise_audio(self, pygame) -> None:
        if not self._config.enable_audio:
            return
        if pygame.mixer.get_init() is None:
            try:
                pygame.mixer.init(44_100, -16, 1)
            except pygame.error as exc:  # pragma: no cover - best-effort path
                if debug_enabled("audio"):
                    debug_log("audio", "mixer_init_failed=%s", exc)
                return

        mixer_state = pygame.mixer.get_init()
        if mixer_state is None:
            if debug_enabled("audio"):
                debug_log("audio", "mixer_unavailable")
            return
        try:
            self._beeper = SquareWaveBeeper(sample_rate=mixer_state[0])
        except RuntimeError as exc:
            self._beeper = None
            if debug_enabled("audio"):
                debug_log("audio", "beeper_init_failed=%s", exc)

    def _load_rom(self, rom_path: Path) -> RomImage:
        try:
            return load_rom_from_path(rom_path)
        except FileNotFoundError as exc:
            raise RuntimeError(f"ROM file not found: {rom_path}") from exc
        except RomFormatError as exc:
            raise RuntimeError(f"Failed to load ROM {rom_path}: {exc}") from exc

    def _create_machine(self, rom: RomImage) -> Machine:
        config = MachineConfig(
            screen_width=self._config.screen_width,
            screen_height=self._config.screen_height,
            instructions_per_second=self._config.instructions_per_second,
            pixel_outline_mode=self._config.pixel_outlines,
        )
        machine = create_machine(config, trace=self._trace_recorder)
        try:
            machine.load_program(rom.data)
        except ProgramTooLargeError as exc:
            raise RuntimeError(f"Failed to load ROM {rom.name}: {exc}") from exc
        return machine
