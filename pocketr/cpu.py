"""The LR35902 CPU core and its memory bus."""

from __future__ import annotations

from typing import Callable

from .registers import Register8Bit, Register16Bit, Registers

# Prefix for the extended (two-byte) opcode table.
PREFIX_BYTE = 0xCB
MEMORY_SIZE = 0x10000


class UnimplementedOpcodeError(Exception):
    """Raised when the CPU meets an opcode it cannot execute."""

    def __init__(self, opcode: int, prefixed: bool = False) -> None:
        self.opcode = opcode
        self.prefixed = prefixed
        label = f"0x{PREFIX_BYTE:02x}{opcode:02x}" if prefixed else f"0x{opcode:02x}"
        kind = "prefixed opcode" if prefixed else "opcode"
        super().__init__(f"Unimplemented {kind}: {label}")


class MemoryBus:
    """A flat 64 KiB address space."""

    def __init__(self) -> None:
        self.memory = bytearray(MEMORY_SIZE)

    def read_byte(self, address: int) -> int:
        return self.memory[address & 0xFFFF]

    def write_byte(self, address: int, value: int) -> None:
        self.memory[address & 0xFFFF] = value


Instruction = Callable[["CPU"], None]


class CPU:
    """Fetches, decodes and executes instructions from its memory bus."""

    def __init__(self) -> None:
        self.registers = Registers()
        self.pc = 0
        self.bus = MemoryBus()

    def step(self) -> None:
        """Execute a single instruction."""
        opcode = self._fetch()
        if opcode == PREFIX_BYTE:
            opcode = self._fetch()
            handler = _PREFIXED_INSTRUCTIONS.get(opcode)
            if handler is None:
                raise UnimplementedOpcodeError(opcode, prefixed=True)
        else:
            handler = _INSTRUCTIONS.get(opcode)
            if handler is None:
                raise UnimplementedOpcodeError(opcode)
        handler(self)

    def _fetch(self) -> int:
        byte = self.bus.read_byte(self.pc)
        self.pc = (self.pc + 1) & 0xFFFF
        return byte

    def read_register_8bit(self, register: Register8Bit) -> int:
        if register is Register8Bit.HL_INDIRECT:
            return self.bus.read_byte(self.registers.hl)
        return getattr(self.registers, register.name.lower())

    def read_register_16bit(self, register: Register16Bit) -> int:
        return getattr(self.registers, register.name.lower())

    def nop(self) -> None:
        """NOP (0x00): only the program counter advances, kept within 16 bits."""
        self.pc &= 0xFFFF

    def add_a(self, source: Register8Bit) -> None:
        """ADD A, r (0x80-0x87): add a register to A."""
        self._add_to_a(self.read_register_8bit(source), 0)

    def adc_a(self, source: Register8Bit) -> None:
        """ADC A, r (0x88-0x8F): add a register and the carry flag to A."""
        self._add_to_a(self.read_register_8bit(source), int(self.registers.f.carry))

    def _add_to_a(self, value: int, carry_in: int) -> None:
        a = self.registers.a
        total = a + value + carry_in
        result = total & 0xFF
        flags = self.registers.f
        flags.zero = result == 0
        flags.subtract = False
        flags.carry = total > 0xFF
        flags.half_carry = (a & 0xF) + (value & 0xF) + carry_in > 0xF
        self.registers.a = result


_OPERAND_ORDER = (
    Register8Bit.B,
    Register8Bit.C,
    Register8Bit.D,
    Register8Bit.E,
    Register8Bit.H,
    Register8Bit.L,
    Register8Bit.HL_INDIRECT,
    Register8Bit.A,
)


def _bind(method: Callable[[CPU, Register8Bit], None], register: Register8Bit) -> Instruction:
    return lambda cpu: method(cpu, register)


def _build_instructions() -> dict[int, Instruction]:
    table: dict[int, Instruction] = {0x00: CPU.nop}
    for offset, register in enumerate(_OPERAND_ORDER):
        table[0x80 + offset] = _bind(CPU.add_a, register)
        table[0x88 + offset] = _bind(CPU.adc_a, register)
    return table


_INSTRUCTIONS: dict[int, Instruction] = _build_instructions()
_PREFIXED_INSTRUCTIONS: dict[int, Instruction] = {}