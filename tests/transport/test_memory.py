# tests/transport/test_memory.py
"""
chip8_core.transport.memoryモジュールの単体テスト。
"""
import pytest

from chip8_core.core.errors import InvalidAddressError
from chip8_core.transport.memory import (
    Memory, MEMORY_SIZE, PROGRAM_OFFSET, FONT_OFFSET, FONT_GLYPHS, MAX_PROGRAM_SIZE,
)

# @intent:test_suite 境界チェック付きメモリとフォントテーブルの検証。

class TestMemory:
    @pytest.fixture
    def memory(self):
        return Memory()

    # @intent:test_case_init 生成時にフォントテーブルが0x50-0x9Fに配置されることを検証します。
    def test_font_seeded_on_init(self, memory):
        assert memory.read(FONT_OFFSET, 80) == FONT_GLYPHS
        assert memory.read_byte(FONT_OFFSET - 1) == 0x00
        assert memory.read_byte(FONT_OFFSET + 80) == 0x00
        assert memory.get_size() == MEMORY_SIZE

    # @intent:test_case_rw 全アドレスで書き込んだ値がそのまま読み出せることを検証します。
    @pytest.mark.parametrize("address", [0x000, 0x1FF, 0x200, 0x800, MEMORY_SIZE - 1])
    def test_write_then_read_byte(self, memory, address):
        memory.write_byte(address, 0xA5)
        assert memory.read_byte(address) == 0xA5

    # @intent:test_case_oob 範囲外アドレスへのアクセスでInvalidAddressErrorが発生することを検証します。
    @pytest.mark.parametrize("address", [MEMORY_SIZE, MEMORY_SIZE + 1, 0xFFFF, -1])
    def test_byte_access_out_of_bounds(self, memory, address):
        with pytest.raises(InvalidAddressError):
            memory.read_byte(address)
        with pytest.raises(InvalidAddressError):
            memory.write_byte(address, 0x00)

    def test_range_read_write(self, memory):
        memory.write(0xF00, [1, 2, 3])
        assert memory.read(0xF00, 3) == bytes([1, 2, 3])

    # @intent:test_case_boundary 末尾ちょうどまでの範囲アクセスは成功し、1バイトでもはみ出すと失敗することを検証します。
    def test_range_boundary(self, memory):
        memory.write(MEMORY_SIZE - 2, [0xAB, 0xCD])
        assert memory.read(MEMORY_SIZE - 2, 2) == bytes([0xAB, 0xCD])
        with pytest.raises(InvalidAddressError, match="Invalid address 0x0fff"):
            memory.read(MEMORY_SIZE - 1, 2)
        with pytest.raises(InvalidAddressError):
            memory.write(0xFFF + 2, [1, 2, 3])

    # @intent:test_case_atomic 範囲外の書き込みは一部だけ書かれることがないことを検証します。
    def test_overflowing_write_leaves_memory_untouched(self, memory):
        with pytest.raises(InvalidAddressError):
            memory.write(MEMORY_SIZE - 1, [0x11, 0x22])
        assert memory.read_byte(MEMORY_SIZE - 1) == 0x00

    def test_write_byte_rejects_non_8bit_value(self, memory):
        with pytest.raises(ValueError, match="Data 256 is not an 8-bit value."):
            memory.write_byte(0x300, 0x100)

    def test_load_program_at_offset(self, memory):
        program = bytes([0x00, 0xE0, 0x12, 0x00])
        memory.load_program(program)
        assert memory.read(PROGRAM_OFFSET, len(program)) == program

    def test_load_program_max_size(self, memory):
        memory.load_program(bytes([0x42]) * MAX_PROGRAM_SIZE)
        assert memory.read_byte(MEMORY_SIZE - 1) == 0x42

    def test_load_program_too_large(self, memory):
        with pytest.raises(InvalidAddressError):
            memory.load_program(bytes(MAX_PROGRAM_SIZE + 1))

    # @intent:test_case_reset リセットで全領域が0になり、フォントが再配置されることを検証します。
    def test_reset(self, memory):
        memory.write_byte(0x300, 0x77)
        memory.write_byte(FONT_OFFSET, 0x00)
        memory.reset()
        assert memory.read_byte(0x300) == 0x00
        assert memory.read(FONT_OFFSET, 80) == FONT_GLYPHS
