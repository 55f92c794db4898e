"""CHIP-8 system assembly helpers."""

from __future__ import annotations

from .machine import Machine, MachineConfig, RunController, RunState, create_machine

__all__ = [
    "MachineConfig",
    "Machine",
    "RunController",
    "RunState",
    "create_machine",
]
