# tests/instructions/test_instructions_alu.py
"""
算術・論理演算命令の単体テスト。
"""
import pytest

from chip8_core.config.models import QuirkConfig
from chip8_core.instructions import InstructionSet

class TestArithmetic:
    def test_add_vx_byte_wraps_without_flag(self, machine):
        machine.registers.set_v(1, 0xFF)
        machine.registers.set_vf(0x55)
        machine.run(0x7102)
        assert machine.registers.get_v(1) == 0x01
        assert machine.registers.get_vf() == 0x55
        assert machine.registers.pc == 0x202

    @pytest.mark.parametrize("opcode, expected", [
        (0x8011, 0b1110),  # OR
        (0x8012, 0b1000),  # AND
        (0x8013, 0b0110),  # XOR
    ])
    def test_logic(self, machine, opcode, expected):
        machine.registers.set_v(0, 0b1100)
        machine.registers.set_v(1, 0b1010)
        machine.run(opcode)
        assert machine.registers.get_v(0) == expected

    # @intent:test_case_carry V0=0xFF, V1=0x01 の加算でV0=0、VF=1となることを検証します。
    def test_add_vx_vy_overflow(self, machine):
        machine.registers.set_v(0, 0xFF)
        machine.registers.set_v(1, 0x01)
        machine.run(0x8014)
        assert machine.registers.get_v(0) == 0x00
        assert machine.registers.get_vf() == 1

    def test_add_vx_vy_no_overflow(self, machine):
        machine.registers.set_v(0, 0x10)
        machine.registers.set_v(1, 0x20)
        machine.registers.set_vf(1)
        machine.run(0x8014)
        assert machine.registers.get_v(0) == 0x30
        assert machine.registers.get_vf() == 0

    @pytest.mark.parametrize("vx, vy, result, flag", [
        (0x30, 0x10, 0x20, 1),
        (0x10, 0x30, 0xE0, 0),
        (0x10, 0x10, 0x00, 0),
    ])
    def test_sub(self, machine, vx, vy, result, flag):
        machine.registers.set_v(0, vx)
        machine.registers.set_v(1, vy)
        machine.run(0x8015)
        assert machine.registers.get_v(0) == result
        assert machine.registers.get_vf() == flag

    @pytest.mark.parametrize("vx, vy, result, flag", [
        (0x10, 0x30, 0x20, 1),
        (0x30, 0x10, 0xE0, 0),
    ])
    def test_subn(self, machine, vx, vy, result, flag):
        machine.registers.set_v(0, vx)
        machine.registers.set_v(1, vy)
        machine.run(0x8017)
        assert machine.registers.get_v(0) == result
        assert machine.registers.get_vf() == flag

    # @intent:test_case_order 結果レジスタがVFのとき、フラグが最後に書き込まれて残ることを検証します。
    def test_flag_written_after_result_when_vx_is_vf(self, machine):
        machine.registers.set_vf(0x10)
        machine.registers.set_v(1, 0x02)
        machine.run(0x8F14)
        assert machine.registers.get_vf() == 0

class TestShift:
    def test_shr(self, machine):
        machine.registers.set_v(3, 0b0000_0101)
        machine.run(0x8306)
        assert machine.registers.get_v(3) == 0b0000_0010
        assert machine.registers.get_vf() == 1

    def test_shl(self, machine):
        machine.registers.set_v(3, 0b1000_0001)
        machine.run(0x830E)
        assert machine.registers.get_v(3) == 0b0000_0010
        assert machine.registers.get_vf() == 1

    def test_shl_no_carry(self, machine):
        machine.registers.set_v(3, 0b0100_0000)
        machine.run(0x830E)
        assert machine.registers.get_v(3) == 0b1000_0000
        assert machine.registers.get_vf() == 0

    # @intent:test_case_quirk shift_uses_vy 有効時はVyをシフトしてVxに格納することを検証します。
    def test_shift_uses_vy_quirk(self, machine):
        machine.instructions = InstructionSet(QuirkConfig(shift_uses_vy=True))
        machine.registers.set_v(3, 0x00)
        machine.registers.set_v(4, 0b0000_0011)
        machine.run(0x8346)
        assert machine.registers.get_v(3) == 0b0000_0001
        assert machine.registers.get_v(4) == 0b0000_0011
        assert machine.registers.get_vf() == 1

class TestIndex:
    def test_add_i_vx(self, machine):
        machine.registers.i = 0x300
        machine.registers.set_v(5, 0x22)
        machine.run(0xF51E)
        assert machine.registers.i == 0x322

    def test_add_i_vx_wraps_16_bits(self, machine):
        machine.registers.i = 0xFFFF
        machine.registers.set_v(5, 0x02)
        machine.run(0xF51E)
        assert machine.registers.i == 0x0001
