"""Raw CHIP-8 ROM image loader."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from pychip8.bus import MAX_PROGRAM_SIZE


class RomFormatError(RuntimeError):
    """Raised when a ROM image cannot be loaded into CHIP-8 memory."""


@dataclass(frozen=True)
class RomImage:
    """Program bytes destined for ``PROGRAM_START`` plus a display name."""

    name: str
    data: bytes

    def __len__(self) -> int:
        return len(self.data)


def load_rom(data: bytes, name: str = "") -> RomImage:
    """Validate ``data`` as a CHIP-8 program image."""

    if not data:
        raise RomFormatError(f"ROM {name or '<memory>'} is empty")
    if len(data) > MAX_PROGRAM_SIZE:
        raise RomFormatError(
            f"ROM {name or '<memory>'} is too big: {len(data)} bytes, maximum allowed is {MAX_PROGRAM_SIZE}"
        )
    return RomImage(name=name, data=bytes(data))


def load_rom_from_stream(stream: BinaryIO, name: str = "") -> RomImage:
    # Read one byte past the limit so oversized streams are reported as such.
    return load_rom(stream.read(MAX_PROGRAM_SIZE + 1), name)


def load_rom_from_path(path: Path) -> RomImage:
    """Load a ROM image from the filesystem."""

    with path.open("rb") as handle:
        return load_rom_from_stream(handle, path.name)
