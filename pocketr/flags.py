"""The LR35902 flag register (F)."""

from __future__ import annotations

from dataclasses import dataclass

# Set if and only if the result of an operation is zero.
ZERO_FLAG_BIT_MASK = 0b1000_0000
# Set when the previous instruction was a subtraction (used by DAA).
SUBTRACTION_FLAG_BIT_MASK = 0b0100_0000
# Carry out of the lower four bits of a result (used by DAA).
HALF_CARRY_FLAG_BIT_MASK = 0b0010_0000
# Carry out of bit 7, borrow on subtraction, or a 1 shifted out by a rotate/shift.
CARRY_FLAG_BIT_MASK = 0b0001_0000

# Only the upper nibble of F is backed by real flag bits.
_UPPER_NIBBLE_MASK = 0xF0


@dataclass
class Flags:
    """The flag register, stored as a single byte."""

    value: int = 0

    def _get(self, mask: int) -> bool:
        return self.value & mask != 0

    def _set(self, mask: int, on: bool) -> None:
        self.value = (self.value & ~mask & 0xFF) | (mask if on else 0)

    @property
    def zero(self) -> bool:
        return self._get(ZERO_FLAG_BIT_MASK)

    @zero.setter
    def zero(self, on: bool) -> None:
        self._set(ZERO_FLAG_BIT_MASK, on)

    @property
    def subtract(self) -> bool:
        return self._get(SUBTRACTION_FLAG_BIT_MASK)

    @subtract.setter
    def subtract(self, on: bool) -> None:
        self._set(SUBTRACTION_FLAG_BIT_MASK, on)

    @property
    def half_carry(self) -> bool:
        return self._get(HALF_CARRY_FLAG_BIT_MASK)

    @half_carry.setter
    def half_carry(self, on: bool) -> None:
        self._set(HALF_CARRY_FLAG_BIT_MASK, on)

    @property
    def carry(self) -> bool:
        return self._get(CARRY_FLAG_BIT_MASK)

    @carry.setter
    def carry(self, on: bool) -> None:
        self._set(CARRY_FLAG_BIT_MASK, on)

    def sanitize(self) -> None:
        """Clear the lower nibble, which is always zero on the real chip."""
        self.value &= _UPPER_NIBBLE_MASK