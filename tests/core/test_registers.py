# tests/core/test_registers.py
"""
chip8_core.core.registersモジュールの単体テスト。
"""
import random

import pytest

from chip8_core.core.errors import (
    InvalidRegisterError, InvalidKeyError, StackOverflowError, StackUnderflowError,
)
from chip8_core.core.registers import Registers, MAX_STACK_DEPTH

# @intent:test_suite レジスタファイルの初期状態、範囲チェック、スタック、キー入力の検証。

class TestRegisters:
    @pytest.fixture
    def registers(self):
        return Registers(rng=random.Random(1234))

    def test_initial_state(self, registers):
        assert registers.pc == 0x200
        assert registers.i == 0
        assert registers.v == [0] * 16
        assert registers.stack == []
        assert registers.keys == [False] * 16
        assert registers.delay_timer == 0
        assert registers.sound_timer == 0

    def test_get_set_v(self, registers):
        registers.set_v(3, 0x42)
        assert registers.get_v(3) == 0x42
        registers.set_v(0xF, 0x01)
        assert registers.get_vf() == 0x01

    # @intent:test_case_oob V16以降の指定でInvalidRegisterErrorが発生することを検証します。
    def test_invalid_register(self, registers):
        with pytest.raises(InvalidRegisterError, match="Invalid register address 16"):
            registers.get_v(16)
        with pytest.raises(InvalidRegisterError):
            registers.set_v(16, 0)

    def test_set_vf(self, registers):
        registers.set_vf(1)
        assert registers.v[15] == 1

    # @intent:test_case_stack 16回のpushは成功し、17回目でStackOverflowErrorとなることを検証します。
    def test_stack_push_pop_order(self, registers):
        for n in range(MAX_STACK_DEPTH):
            registers.push(0x200 + n * 2)
        with pytest.raises(StackOverflowError, match="Stack overflow"):
            registers.push(0x300)

        popped = [registers.pop() for _ in range(MAX_STACK_DEPTH)]
        assert popped == [0x200 + n * 2 for n in reversed(range(MAX_STACK_DEPTH))]
        with pytest.raises(StackUnderflowError, match="Stack underflow"):
            registers.pop()

    def test_pop_empty(self, registers):
        with pytest.raises(StackUnderflowError):
            registers.pop()

    def test_keys(self, registers):
        assert registers.first_key_down() is None
        registers.set_key(9, True)
        registers.set_key(4, True)
        assert registers.key_is_down(4)
        assert not registers.key_is_down(5)
        assert registers.first_key_down() == 4
        registers.set_key(4, False)
        assert registers.first_key_down() == 9

    def test_invalid_key(self, registers):
        with pytest.raises(InvalidKeyError, match="Invalid key 16"):
            registers.key_is_down(16)
        with pytest.raises(InvalidKeyError):
            registers.set_key(16, True)

    # @intent:test_case_rng 同じシードの乱数源からは同じバイト列が得られることを検証します。
    def test_random_byte_is_reproducible(self):
        a = Registers(rng=random.Random(7))
        b = Registers(rng=random.Random(7))
        values = [a.random_byte() for _ in range(32)]
        assert values == [b.random_byte() for _ in range(32)]
        assert all(0 <= value <= 0xFF for value in values)

    # @intent:test_case_copy copy()が独立したリストを持つことを検証します。
    def test_copy_is_independent(self, registers):
        registers.set_v(1, 0x10)
        registers.push(0x204)
        clone = registers.copy()
        registers.set_v(1, 0x20)
        registers.pop()
        assert clone.get_v(1) == 0x10
        assert clone.stack == [0x204]
        assert clone.rng is registers.rng
