# tests/debugger/test_debugger.py
"""
chip8_core.debugger.debuggerモジュールの単体テスト。
Debuggerの実行制御、ブレークポイント管理、および条件チェック機能を検証します。
"""
import random

import pytest

from chip8_core.core.errors import InvalidInstructionError
from chip8_core.core.interpreter import Chip8Interpreter
from chip8_core.core.registers import Registers
from chip8_core.debugger.debugger import (
    Debugger, BreakpointCondition, BreakpointConditionType, read_register,
)

# @intent:test_suite デバッガのブレークポイントと実行制御機能の検証。

# 0x200: LD V1, #00
# 0x202: ADD V1, #01
# 0x204: JP $202
COUNTER_ROM = bytes([0x61, 0x00, 0x71, 0x01, 0x12, 0x02])

class TestDebugger:
    """
    Debuggerの単体テスト。
    """
    @pytest.fixture
    def setup_debugger(self):
        interpreter = Chip8Interpreter(rng=random.Random(0))
        interpreter.load_rom(COUNTER_ROM)
        return Debugger(interpreter), interpreter

    # @intent:test_case_add_remove_breakpoint ブレークポイントの追加と削除が正しく行われることを検証します。
    def test_add_remove_breakpoint(self, setup_debugger):
        debugger, _ = setup_debugger
        bp1 = BreakpointCondition(BreakpointConditionType.PC_MATCH, value=0x204)
        bp2 = BreakpointCondition(BreakpointConditionType.REGISTER_VALUE, value=3, register_name="V1")

        debugger.add_breakpoint(bp1)
        debugger.add_breakpoint(bp2)
        debugger.add_breakpoint(bp1)  # 重複追加は無視される
        assert debugger.get_breakpoints() == [bp1, bp2]

        debugger.remove_breakpoint(bp1)
        debugger.remove_breakpoint(bp1)  # 存在しないブレークポイントの削除はエラーにならない
        assert debugger.get_breakpoints() == [bp2]

    def test_step_instruction_records_history(self, setup_debugger):
        debugger, _ = setup_debugger
        first = debugger.step_instruction()
        second = debugger.step_instruction()
        assert first.operation.address == 0x200
        assert second.operation.text == "ADD V1, #01"
        assert debugger.get_history() == [first, second]
        assert debugger.get_last_snapshot() is second

    def test_history_limit(self):
        interpreter = Chip8Interpreter()
        interpreter.load_rom(COUNTER_ROM)
        debugger = Debugger(interpreter, history_limit=2)
        for _ in range(5):
            debugger.step_instruction()
        history = debugger.get_history()
        assert len(history) == 2
        assert history[-1].metadata.instruction_count == 5

    # @intent:test_case_pc_breakpoint PCブレークポイントで、その命令を実行する前に停止することを検証します。
    def test_run_stops_at_pc_breakpoint(self, setup_debugger):
        debugger, interpreter = setup_debugger
        debugger.add_breakpoint(BreakpointCondition(BreakpointConditionType.PC_MATCH, value=0x204))
        assert debugger.run(100) is True
        assert interpreter.registers.pc == 0x204
        assert interpreter.registers.get_v(1) == 1

        # 停止位置のブレークポイントは再開直後には無視される
        assert debugger.run(100) is True
        assert interpreter.registers.pc == 0x204
        assert interpreter.registers.get_v(1) == 2

    def test_run_stops_at_register_value(self, setup_debugger):
        debugger, interpreter = setup_debugger
        debugger.add_breakpoint(
            BreakpointCondition(BreakpointConditionType.REGISTER_VALUE, value=3, register_name="v1")
        )
        assert debugger.run(100) is True
        assert interpreter.registers.get_v(1) == 3
        assert interpreter.registers.pc == 0x204

    def test_disabled_breakpoint_is_ignored(self, setup_debugger):
        debugger, interpreter = setup_debugger
        debugger.add_breakpoint(
            BreakpointCondition(BreakpointConditionType.PC_MATCH, value=0x204, enabled=False)
        )
        assert debugger.run(10) is False
        assert interpreter.instruction_count == 10

    def test_run_propagates_errors(self):
        interpreter = Chip8Interpreter()
        interpreter.load_rom(bytes([0xFF, 0xFF]))
        debugger = Debugger(interpreter)
        with pytest.raises(InvalidInstructionError):
            debugger.run(10)
        assert debugger.get_history() == []

class TestReadRegister:
    def test_known_registers(self):
        state = Registers(pc=0x234, i=0x456, delay_timer=7, sound_timer=9)
        state.set_v(0xA, 0x42)
        assert read_register(state, "PC") == 0x234
        assert read_register(state, "i") == 0x456
        assert read_register(state, "DT") == 7
        assert read_register(state, "ST") == 9
        assert read_register(state, "VA") == 0x42

    @pytest.mark.parametrize("name", ["VG", "SP", "V10", "A"])
    def test_unknown_registers(self, name):
        assert read_register(Registers(), name) is None
