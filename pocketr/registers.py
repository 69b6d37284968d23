"""CPU registers and register selectors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from .flags import Flags


class Register8Bit(Enum):
    """An 8-bit operand; HL_INDIRECT means the byte at the address in HL."""

    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    H = auto()
    L = auto()
    HL_INDIRECT = auto()


class Register16Bit(Enum):
    """A 16-bit register pair."""

    AF = auto()
    BC = auto()
    DE = auto()
    HL = auto()


def _split(value: int) -> tuple[int, int]:
    return (value >> 8) & 0xFF, value & 0xFF


@dataclass
class Registers:
    """The 8-bit registers, readable and writable as 16-bit pairs."""

    a: int = 0
    f: Flags = field(default_factory=Flags)
    b: int = 0
    c: int = 0
    d: int = 0
    e: int = 0
    h: int = 0
    l: int = 0  # noqa: E741
    sp: int = 0

    @property
    def af(self) -> int:
        return (self.a << 8) | self.f.value

    @af.setter
    def af(self, value: int) -> None:
        self.a, low = _split(value)
        self.f = Flags(low)
        self.f.sanitize()

    @property
    def bc(self) -> int:
        return (self.b << 8) | self.c

    @bc.setter
    def bc(self, value: int) -> None:
        self.b, self.c = _split(value)

    @property
    def de(self) -> int:
        return (self.d << 8) | self.e

    @de.setter
    def de(self, value: int) -> None:
        self.d, self.e = _split(value)

    @property
    def hl(self) -> int:
        return (self.h << 8) | self.l

    @hl.setter
    def hl(self, value: int) -> None:
        self.h, self.l = _split(value)