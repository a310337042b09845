"""Firmware version packed into one 32-bit word (major, minor, build)."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from functools import total_ordering

_LAYOUT = struct.Struct("<BBH")


@total_ordering
@dataclass(frozen=True)
class Version:
    """A version number laid out as little-endian major, minor and 16-bit build.

    Versions are ordered by their packed 32-bit value.
    """

    major: int
    minor: int
    build: int

    def __post_init__(self) -> None:
        if not 0 <= self.major <= 0xFF:
            raise ValueError(f"major {self.major} does not fit in 8 bits")
        if not 0 <= self.minor <= 0xFF:
            raise ValueError(f"minor {self.minor} does not fit in 8 bits")
        if not 0 <= self.build <= 0xFFFF:
            raise ValueError(f"build {self.build} does not fit in 16 bits")

    def pack(self) -> int:
        """Return the version as one 32-bit word."""
        data = _LAYOUT.pack(self.major, self.minor, self.build)
        return int.from_bytes(data, "little")

    @classmethod
    def unpack(cls, value: int) -> Version:
        """Build a version from a 32-bit word."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"{value} is not a 32-bit unsigned value")
        major, minor, build = _LAYOUT.unpack(value.to_bytes(4, "little"))
        return cls(major=major, minor=minor, build=build)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.pack() < other.pack()

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}"