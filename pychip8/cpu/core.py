"""CHIP-8 execution engine."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from pychip8.bus import PROGRAM_START, Memory, glyph_address
from pychip8.io import Keypad
from pychip8.utils import debug_enabled, debug_log
from pychip8.video import DisplayBuffer

from .decoder import DecodedInstruction, decode
from .opcodes import describe, lookup
from .timers import Timers


class CPUError(Exception):
    """Base error for CPU-related failures."""


class StackError(CPUError):
    """Raised when a call or return cannot be honoured by the call stack."""


class StackOverflowError(StackError):
    """Raised when a call would push past the call stack capacity."""


class StackUnderflowError(StackError):
    """Raised when a return is executed with an empty call stack."""


REGISTER_COUNT = 16
FLAG_REGISTER = 0xF
STACK_CAPACITY = 12


@dataclass
class CPUState:
    """Snapshot of the CHIP-8 register file."""

    v: bytearray = field(default_factory=lambda: bytearray(REGISTER_COUNT))
    pc: int = PROGRAM_START
    i: int = 0x0000

    def clone(self) -> "CPUState":
        return CPUState(bytearray(self.v), self.pc, self.i)


class CallStack:
    """Fixed-capacity stack of return addresses."""

    def __init__(self, capacity: int = STACK_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("stack capacity must be positive")
        self._capacity = capacity
        self._slots = [0] * capacity
        self._depth = 0

    def __len__(self) -> int:
        return self._depth

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def depth(self) -> int:
        return self._depth

    def push(self, address: int) -> None:
        if self._depth >= self._capacity:
            raise StackOverflowError(
                f"call stack overflow: capacity of {self._capacity} return addresses exceeded"
            )
        self._slots[self._depth] = address & 0xFFFF
        self._depth += 1

    def pop(self) -> int:
        if self._depth == 0:
            raise StackUnderflowError("return executed with an empty call stack")
        self._depth -= 1
        return self._slots[self._depth]

    def peek(self) -> int | None:
        if self._depth == 0:
            return None
        return self._slots[self._depth - 1]

    def entries(self) -> tuple[int, ...]:
        return tuple(self._slots[: self._depth])

    def clear(self) -> None:
        self._slots = [0] * self._capacity
        self._depth = 0


@dataclass
class CHIP8CPU:
    """Fetch/decode/execute core for the CHIP-8 instruction set.

    ``step`` executes exactly one instruction. Timers are not advanced here;
    the host calls ``timers.tick()`` once per 60 Hz frame.
    """

    memory: Memory
    display: DisplayBuffer = field(default_factory=DisplayBuffer)
    keypad: Keypad = field(default_factory=Keypad)
    timers: Timers = field(default_factory=Timers)
    rng: random.Random = field(default_factory=random.Random)

    state: CPUState = field(default_factory=CPUState)
    stack: CallStack = field(default_factory=CallStack)
    instruction_count: int = 0
    waiting_for_key: bool = False
    halted: bool = False
    fault: CPUError | None = None

    def reset(self) -> None:
        """Clear registers, stack, timers and display; memory is left intact."""

        self.state = CPUState()
        self.stack.clear()
        self.timers.reset()
        self.display.clear()
        self.instruction_count = 0
        self.waiting_for_key = False
        self.halted = False
        self.fault = None

    def step(self) -> DecodedInstruction | None:
        """Execute a single instruction and return it, or ``None`` when halted."""

        if self.halted:
            return None

        pc_before = self.state.pc
        decoded = decode(self.memory.load16(pc_before))
        self.state.pc = (pc_before + 2) & 0xFFFF

        if debug_enabled("cpu"):
            debug_log("cpu", "pc=%04x opcode=%04x %s", pc_before, decoded.opcode, describe(decoded))

        instruction = lookup(decoded)
        if instruction is None:
            handler = self.op_nop
        else:
            handler = getattr(self, instruction.handler, None)
            if handler is None:
                raise CPUError(f"handler '{instruction.handler}' not implemented")

        try:
            handler(decoded)
        except CPUError as exc:
            self.state.pc = pc_before
            self.halted = True
            self.fault = exc
            if debug_enabled("cpu"):
                debug_log("cpu", "fault pc=%04x opcode=%04x error=%s", pc_before, decoded.opcode, exc)
            raise

        self.instruction_count += 1
        return decoded

    @property
    def v(self) -> bytearray:
        return self.state.v

    # ------------------------------------------------------------------
    # Instruction handlers

    def op_nop(self, _: DecodedInstruction) -> None:
        """Unassigned opcodes execute as no-ops."""

    def op_cls(self, _: DecodedInstruction) -> None:
        self.display.clear()

    def op_ret(self, _: DecodedInstruction) -> None:
        self.state.pc = self.stack.pop()

    def op_jp(self, instruction: DecodedInstruction) -> None:
        self.state.pc = instruction.nnn

    def op_call(self, instruction: DecodedInstruction) -> None:
        self.stack.push(self.state.pc)
        self.state.pc = instruction.nnn

    def op_se_imm(self, instruction: DecodedInstruction) -> None:
        self._skip_if(self.v[instruction.x] == instruction.nn)

    def op_sne_imm(self, instruction: DecodedInstruction) -> None:
        self._skip_if(self.v[instruction.x] != instruction.nn)

    def op_se_reg(self, instruction: DecodedInstruction) -> None:
        self._skip_if(self.v[instruction.x] == self.v[instruction.y])

    def op_sne_reg(self, instruction: DecodedInstruction) -> None:
        self._skip_if(self.v[instruction.x] != self.v[instruction.y])

    def op_ld_imm(self, instruction: DecodedInstruction) -> None:
        self.v[instruction.x] = instruction.nn

    def op_add_imm(self, instruction: DecodedInstruction) -> None:
        self.v[instruction.x] = (self.v[instruction.x] + instruction.nn) & 0xFF

    def op_ld_reg(self, instruction: DecodedInstruction) -> None:
        self.v[instruction.x] = self.v[instruction.y]

    def op_or(self, instruction: DecodedInstruction) -> None:
        self.v[instruction.x] |= self.v[instruction.y]

    def op_and(self, instruction: DecodedInstruction) -> None:
        self.v[instruction.x] &= self.v[instruction.y]

    def op_xor(self, instruction: DecodedInstruction) -> None:
        self.v[instruction.x] ^= self.v[instruction.y]

    # The flag-producing ALU operations read both operands up front, write VF,
    # then write VX. With X == F the result therefore wins over the flag.

    def op_add_reg(self, instruction: DecodedInstruction) -> None:
        vx, vy = self.v[instruction.x], self.v[instruction.y]
        total = vx + vy
        self._set_flag(total > 0xFF)
        self.v[instruction.x] = total & 0xFF

    def op_sub(self, instruction: DecodedInstruction) -> None:
        vx, vy = self.v[instruction.x], self.v[instruction.y]
        self._set_flag(vy <= vx)
        self.v[instruction.x] = (vx - vy) & 0xFF

    def op_shr(self, instruction: DecodedInstruction) -> None:
        vx = self.v[instruction.x]
        self._set_flag(vx & 0x01)
        self.v[instruction.x] = vx >> 1

    def op_subn(self, instruction: DecodedInstruction) -> None:
        vx, vy = self.v[instruction.x], self.v[instruction.y]
        self._set_flag(vx <= vy)
        self.v[instruction.x] = (vy - vx) & 0xFF

    def op_shl(self, instruction: DecodedInstruction) -> None:
        vx = self.v[instruction.x]
        self._set_flag((vx & 0x80) >> 7)
        self.v[instruction.x] = (vx << 1) & 0xFF

    def op_ld_i(self, instruction: DecodedInstruction) -> None:
        self.state.i = instruction.nnn

    def op_jp_v0(self, instruction: DecodedInstruction) -> None:
        self.state.pc = (self.v[0] + instruction.nnn) & 0xFFFF

    def op_rnd(self, instruction: DecodedInstruction) -> None:
        self.v[instruction.x] = self.rng.randrange(0x100) & instruction.nn

    def op_drw(self, instruction: DecodedInstruction) -> None:
        x = self.v[instruction.x]
        y = self.v[instruction.y]
        self.v[FLAG_REGISTER] = 0
        sprite = self.memory.load_block(self.state.i, instruction.n)
        if self.display.draw_sprite(x, y, sprite):
            self.v[FLAG_REGISTER] = 1

    def op_skp(self, instruction: DecodedInstruction) -> None:
        self._skip_if(self.keypad.is_pressed(self.v[instruction.x] & 0x0F))

    def op_sknp(self, instruction: DecodedInstruction) -> None:
        self._skip_if(not self.keypad.is_pressed(self.v[instruction.x] & 0x0F))

    def op_ld_vx_dt(self, instruction: DecodedInstruction) -> None:
        self.v[instruction.x] = self.timers.delay

    def op_wait_key(self, instruction: DecodedInstruction) -> None:
        # Re-executed every step until a key is held: rewinding PC makes the
        # next fetch land on this instruction again.
        key = self.keypad.first_pressed()
        if key is None:
            self.state.pc = (self.state.pc - 2) & 0xFFFF
            self.waiting_for_key = True
            return
        self.v[instruction.x] = key
        self.waiting_for_key = False

    def op_ld_dt_vx(self, instruction: DecodedInstruction) -> None:
        self.timers.set_delay(self.v[instruction.x])

    def op_ld_st_vx(self, instruction: DecodedInstruction) -> None:
        self.timers.set_sound(self.v[instruction.x])

    def op_add_i(self, instruction: DecodedInstruction) -> None:
        # VF is deliberately left untouched.
        self.state.i = (self.state.i + self.v[instruction.x]) & 0xFFFF

    def op_ld_font(self, instruction: DecodedInstruction) -> None:
        self.state.i = glyph_address(self.v[instruction.x])

    def op_bcd(self, instruction: DecodedInstruction) -> None:
        value = self.v[instruction.x]
        address = self.state.i
        self.memory.store8(address, value // 100)
        self.memory.store8(address + 1, (value // 10) % 10)
        self.memory.store8(address + 2, value % 10)

    def op_store_registers(self, instruction: DecodedInstruction) -> None:
        self.memory.store_block(self.state.i, self.v[: instruction.x + 1])

    def op_load_registers(self, instruction: DecodedInstruction) -> None:
        block = self.memory.load_block(self.state.i, instruction.x + 1)
        self.v[: instruction.x + 1] = block

    # ------------------------------------------------------------------
    # Helpers

    def _skip_if(self, condition: bool) -> None:
        if condition:
            self.state.pc = (self.state.pc + 2) & 0xFFFF

    def _set_flag(self, value: int | bool) -> None:
        self.v[FLAG_REGISTER] = 1 if value else 0
