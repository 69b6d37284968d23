# pocketr

pocketr is the CPU core of a Game Boy emulator. It models the following parts of
the LR35902:

- the register file
- the flag register
- a flat 64 KiB memory bus
- the fetch–decode–execute step

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What it provides

- `pocketr.flags.Flags` is the F register. It holds one byte in `value`.
  - The properties `zero`, `subtract`, `half_carry` and `carry` read and write
    bits 7, 6, 5 and 4.
  - `sanitize()` clears the lower nibble. The hardware always keeps that nibble
    at zero.
- `pocketr.registers.Registers` holds the 8-bit registers `a`, `b`, `c`, `d`, `e`,
  `h` and `l`. It also holds the flag register `f` and the stack pointer `sp`.
  - The properties `af`, `bc`, `de` and `hl` read and write these registers as
    16-bit pairs.
  - Writing `af` replaces `f` and sanitizes it.
- `pocketr.registers.Register8Bit` and `pocketr.registers.Register16Bit` are
  operand selectors.
  - `Register8Bit.HL_INDIRECT` stands for the byte in memory at the address
    held in HL.
- `pocketr.cpu.MemoryBus` is 65,536 bytes of memory.
  - Use `read_byte(address)` and `write_byte(address, value)` to access it.
  - Addresses wrap to 16 bits.
- `pocketr.cpu.CPU` is the processor. It has the attributes `registers`, `pc` and
  `bus`.
  - `step()` fetches one opcode at the program counter, advances the counter
    (wrapping at 0xFFFF) and executes the opcode.
  - Opcodes behind the `0xCB` prefix are looked up in a second table.
  - `read_register_8bit(register)` reads any 8-bit operand.
  - `read_register_16bit(register)` reads any register pair.
  - `nop()`, `add_a(source)` and `adc_a(source)` run the instructions below
    directly.
- `pocketr.cpu.UnimplementedOpcodeError` is raised by `step()` for any opcode
  that has no handler.
  - Its `opcode` attribute holds the opcode.
  - Its `prefixed` attribute tells whether the opcode came after `0xCB`.

## Instructions implemented

| Opcode      | Instruction   | Flags affected |
|-------------|---------------|----------------|
| `0x00`      | `NOP`         | none           |
| `0x80–0x87` | `ADD A, r`    | Z 0 H C        |
| `0x88–0x8F` | `ADC A, r`    | Z 0 H C        |

For both arithmetic rows, the operand order is B, C, D, E, H, L, (HL), A.

Any other opcode raises `UnimplementedOpcodeError`. So does every prefixed opcode.

## Example

```python
from pocketr.cpu import CPU
from pocketr.registers import Register8Bit

cpu = CPU()
cpu.registers.a = 0x3A
cpu.registers.b = 0xC6
cpu.bus.write_byte(0x0000, 0x80)   # ADD A, B
cpu.step()

assert cpu.read_register_8bit(Register8Bit.A) == 0x00
assert cpu.registers.f.zero and cpu.registers.f.carry
assert cpu.pc == 1
```

## What it does not do

This is a CPU core only. It does not provide any of the following:

- ROM loading or cartridge handling
- a memory map with I/O registers
- cycle timing or interrupts
- graphics, sound or input
- a command to run a game

Only the instructions listed above can be executed.