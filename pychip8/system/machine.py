"""CHIP-8 machine assembly, run-state control and frame scheduling."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from pychip8.bus import Memory
from pychip8.cpu import CHIP8CPU, CPUError, TIMER_HZ, Timers, describe
from pychip8.io import Keypad
from pychip8.utils import TraceRecorder, debug_enabled, debug_log
from pychip8.video import DEFAULT_HEIGHT, DEFAULT_WIDTH, DisplayBuffer


class RunState(Enum):
    RUNNING = auto()
    PAUSED = auto()
    STOPPED = auto()


@dataclass
class RunController:
    """Tri-state run flag written by the input layer and read by the host loop.

    ``STOPPED`` is terminal: once reached, pause toggles are ignored.
    """

    state: RunState = RunState.RUNNING

    @property
    def is_running(self) -> bool:
        return self.state is RunState.RUNNING

    @property
    def is_paused(self) -> bool:
        return self.state is RunState.PAUSED

    @property
    def is_stopped(self) -> bool:
        return self.state is RunState.STOPPED

    def toggle_pause(self) -> RunState:
        if self.state is RunState.RUNNING:
            self.state = RunState.PAUSED
        elif self.state is RunState.PAUSED:
            self.state = RunState.RUNNING
        return self.state

    def stop(self) -> None:
        self.state = RunState.STOPPED


@dataclass
class MachineConfig:
    """Construction parameters for a CHIP-8 machine."""

    screen_width: int = DEFAULT_WIDTH
    screen_height: int = DEFAULT_HEIGHT
    instructions_per_second: int = 500
    # Consumed by the renderer only; the machine keeps it for the host's benefit.
    pixel_outline_mode: bool = True
    program: Optional[bytes] = None
    rng: Optional[random.Random] = None

    def __post_init__(self) -> None:
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError("screen dimensions must be positive")
        if self.instructions_per_second <= 0:
            raise ValueError("instructions_per_second must be positive")


@dataclass
class Machine:
    """Aggregates the core components of a CHIP-8 system."""

    config: MachineConfig
    memory: Memory
    cpu: CHIP8CPU
    display: DisplayBuffer
    keypad: Keypad
    timers: Timers
    run_control: RunController = field(default_factory=RunController)
    trace: TraceRecorder | None = None
    frame_count: int = 0

    @property
    def instructions_per_frame(self) -> int:
        return max(1, self.config.instructions_per_second // TIMER_HZ)

    @property
    def sound_active(self) -> bool:
        return self.timers.sound_active

    def load_program(self, data: bytes) -> None:
        self.memory.load_program(data)

    def step(self) -> bool:
        """Execute one instruction; returns ``False`` when the CPU is halted."""

        cpu = self.cpu
        trace = self.trace
        pc_before = cpu.state.pc
        try:
            decoded = cpu.step()
        except CPUError:
            self.run_control.stop()
            if trace is not None:
                self._record_trace(pc_before, None, "", note="fault")
            raise
        if decoded is None:
            return False
        if trace is not None:
            note = "wait-key" if cpu.waiting_for_key else ""
            self._record_trace(pc_before, decoded.opcode, describe(decoded), note=note)
        return True

    def run_frame(self) -> int:
        """Run one 60 Hz frame: a batch of instructions, then one timer tick.

        Does nothing unless the machine is running. Returns the number of
        instructions executed.
        """

        if not self.run_control.is_running:
            return 0

        executed = 0
        for _ in range(self.instructions_per_frame):
            if not self.step():
                break
            executed += 1

        self.timers.tick()
        self.frame_count += 1
        if debug_enabled("frame"):
            debug_log(
                "frame",
                "frame=%d executed=%d pc=%04x dt=%d st=%d",
                self.frame_count,
                executed,
                self.cpu.state.pc,
                self.timers.delay,
                self.timers.sound,
            )
        return executed

    def reset(self) -> None:
        self.cpu.reset()
        self.keypad.reset()
        self.run_control = RunController()
        self.frame_count = 0

    def _record_trace(self, pc: int, opcode: int | None, mnemonic: str, *, note: str = "") -> None:
        assert self.trace is not None
        state = self.cpu.state.clone()
        state.pc = pc
        self.trace.record_step(
            state,
            opcode,
            stack_depth=self.cpu.stack.depth,
            delay_timer=self.timers.delay,
            sound_timer=self.timers.sound,
            halted=self.cpu.halted,
            mnemonic=mnemonic,
            note=note,
        )


def create_machine(config: MachineConfig | None = None, *, trace: TraceRecorder | None = None) -> Machine:
    """Instantiate a CHIP-8 machine with the requested configuration."""

    config = config or MachineConfig()

    memory = Memory()
    display = DisplayBuffer(config.screen_width, config.screen_height)
    keypad = Keypad()
    timers = Timers()
    cpu = CHIP8CPU(
        memory,
        display=display,
        keypad=keypad,
        timers=timers,
        rng=config.rng or random.Random(),
    )

    if config.program is not None:
        memory.load_program(config.program)

    return Machine(
        config=config,
        memory=memory,
        cpu=cpu,
        display=display,
        keypad=keypad,
        timers=timers,
        trace=trace,
    )
