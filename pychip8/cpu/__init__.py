"""CPU package for the CHIP-8 interpreter."""

from .core import (
    CHIP8CPU,
    FLAG_REGISTER,
    STACK_CAPACITY,
    CallStack,
    CPUError,
    CPUState,
    StackError,
    StackOverflowError,
    StackUnderflowError,
)
from .decoder import DecodedInstruction, decode
from .opcodes import describe, lookup
from .timers import TIMER_HZ, Timers
from . import opcodes

__all__ = [
    "CHIP8CPU",
    "CPUState",
    "CallStack",
    "CPUError",
    "StackError",
    "StackOverflowError",
    "StackUnderflowError",
    "FLAG_REGISTER",
    "STACK_CAPACITY",
    "DecodedInstruction",
    "decode",
    "describe",
    "lookup",
    "TIMER_HZ",
    "Timers",
    "opcodes",
]
