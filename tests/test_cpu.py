import pytest

from pocketr.cpu import CPU, MemoryBus, UnimplementedOpcodeError
from pocketr.registers import Register8Bit, Register16Bit


def _cpu_with_program(*program):
    cpu = CPU()
    for address, byte in enumerate(program):
        cpu.bus.write_byte(address, byte)
    return cpu


def test_memory_bus_round_trip():
    bus = MemoryBus()
    bus.write_byte(0xFFFF, 0xAB)
    assert bus.read_byte(0xFFFF) == 0xAB
    assert bus.read_byte(0x0000) == 0


def test_memory_bus_rejects_values_beyond_a_byte():
    bus = MemoryBus()
    with pytest.raises(ValueError):
        bus.write_byte(0x10, 0x100)


def test_nop_advances_pc_only():
    cpu = _cpu_with_program(0x00)
    cpu.registers.a = 0x42
    cpu.step()
    assert cpu.pc == 1
    assert cpu.registers.a == 0x42
    assert cpu.registers.f.value == 0


def test_pc_wraps_around():
    cpu = CPU()
    cpu.pc = 0xFFFF
    cpu.step()
    assert cpu.pc == 0


def test_unimplemented_opcode_raises():
    cpu = _cpu_with_program(0x01)
    with pytest.raises(UnimplementedOpcodeError) as info:
        cpu.step()
    assert info.value.opcode == 0x01
    assert info.value.prefixed is False


def test_unimplemented_prefixed_opcode_raises():
    cpu = _cpu_with_program(0xCB, 0x37)
    with pytest.raises(UnimplementedOpcodeError) as info:
        cpu.step()
    assert info.value.opcode == 0x37
    assert info.value.prefixed is True
    assert cpu.pc == 2


def test_add_a_b_sets_all_carry_flags():
    cpu = CPU()
    cpu.registers.a = 0x3A
    cpu.registers.b = 0xC6
    cpu.add_a(Register8Bit.B)
    assert cpu.registers.a == 0
    assert cpu.registers.f.zero
    assert cpu.registers.f.half_carry
    assert cpu.registers.f.carry
    assert not cpu.registers.f.subtract


def test_add_via_step_uses_opcode_table():
    cpu = _cpu_with_program(0x80)
    cpu.registers.a = 0x3A
    cpu.registers.b = 0xC6
    cpu.step()
    assert cpu.registers.a == 0
    assert cpu.registers.f.carry
    assert cpu.pc == 1


def test_add_clears_subtract_flag():
    cpu = CPU()
    cpu.registers.f.subtract = True
    cpu.registers.a = 0x01
    cpu.registers.c = 0x01
    cpu.add_a(Register8Bit.C)
    assert not cpu.registers.f.subtract
    assert not cpu.registers.f.zero
    assert not cpu.registers.f.carry


def test_add_hl_indirect_reads_memory():
    cpu = _cpu_with_program(0x86)
    cpu.registers.hl = 0xC000
    cpu.bus.write_byte(0xC000, 0xC6)
    cpu.registers.a = 0x3A
    cpu.step()
    assert cpu.registers.a == 0
    assert cpu.registers.f.zero


def test_adc_a_e_with_carry():
    cpu = CPU()
    cpu.registers.a = 0xE1
    cpu.registers.e = 0x0F
    cpu.registers.f.carry = True
    cpu.adc_a(Register8Bit.E)
    assert cpu.registers.a == 0xF1
    assert not cpu.registers.f.zero
    assert cpu.registers.f.half_carry
    assert not cpu.registers.f.carry


def test_adc_a_hl_indirect_via_step():
    cpu = _cpu_with_program(0x8E)
    cpu.registers.a = 0xE1
    cpu.registers.hl = 0xD000
    cpu.bus.write_byte(0xD000, 0x1E)
    cpu.registers.f.carry = True
    cpu.step()
    assert cpu.registers.a == 0
    assert cpu.registers.f.zero
    assert cpu.registers.f.half_carry
    assert cpu.registers.f.carry


def test_adc_without_carry_matches_add():
    first = CPU()
    second = CPU()
    for cpu in (first, second):
        cpu.registers.a = 0x3A
        cpu.registers.d = 0xC6
    first.add_a(Register8Bit.D)
    second.adc_a(Register8Bit.D)
    assert first.registers.a == second.registers.a
    assert first.registers.f.value == second.registers.f.value


def test_read_register_8bit():
    cpu = CPU()
    cpu.registers.h = 0x12
    cpu.registers.l = 0x34
    cpu.bus.write_byte(0x1234, 0x99)
    assert cpu.read_register_8bit(Register8Bit.H) == 0x12
    assert cpu.read_register_8bit(Register8Bit.L) == 0x34
    assert cpu.read_register_8bit(Register8Bit.HL_INDIRECT) == 0x99


def test_read_register_16bit():
    cpu = CPU()
    cpu.registers.bc = 0x1234
    cpu.registers.de = 0x5678
    cpu.registers.hl = 0x9ABC
    cpu.registers.af = 0xDEF0
    assert cpu.read_register_16bit(Register16Bit.BC) == 0x1234
    assert cpu.read_register_16bit(Register16Bit.DE) == 0x5678
    assert cpu.read_register_16bit(Register16Bit.HL) == 0x9ABC
    assert cpu.read_register_16bit(Register16Bit.AF) == 0xDEF0


@pytest.mark.parametrize("opcode, register", [(0x80 + i, r) for i, r in enumerate(
    [Register8Bit.B, Register8Bit.C, Register8Bit.D, Register8Bit.E, Register8Bit.H, Register8Bit.L]
)])
def test_add_opcodes_select_register(opcode, register):
    cpu = _cpu_with_program(opcode)
    cpu.registers.hl = 0x8000
    setattr(cpu.registers, register.name.lower(), 0x3A)
    cpu.registers.a = 0xC6
    cpu.step()
    assert cpu.registers.a == 0
    assert cpu.registers.f.carry