# chip8_core/debugger/debugger.py
"""
デバッガモジュール。

インタプリタを1命令ずつ実行し、ユーザーが指定した条件（ブレークポイント）で
実行を中断させる責務を負います。
"""
import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, List, Optional

from chip8_core.core.interpreter import Chip8Interpreter
from chip8_core.core.registers import Registers
from chip8_core.core.snapshot import Snapshot

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 1024

# @intent:responsibility ブレークポイントの条件タイプを定義します。
class BreakpointConditionType(Enum):
    PC_MATCH = "PC_MATCH"               # プログラムカウンタが特定のアドレスに一致
    REGISTER_VALUE = "REGISTER_VALUE"   # 特定のレジスタが特定の値になった

# @intent:responsibility ブレークポイントをトリガーする条件を定義します。
@dataclass(frozen=True)
class BreakpointCondition:
    """
    register_name には "PC", "I", "DT", "ST", "V0"-"VF" を指定します。
    """
    condition_type: BreakpointConditionType
    value: Optional[int] = None
    register_name: Optional[str] = None
    enabled: bool = True

# @intent:utility_function レジスタ名に対応する値を返します。未知の名前はNone。
def read_register(state: Registers, name: str) -> Optional[int]:
    name = name.upper()
    if len(name) == 2 and name[0] == "V":
        try:
            return state.v[int(name[1], 16)]
        except ValueError:
            return None
    return {
        "PC": state.pc,
        "I": state.i,
        "DT": state.delay_timer,
        "ST": state.sound_timer,
    }.get(name)

# @intent:responsibility インタプリタの実行制御とブレークポイント管理を行います。
class Debugger:
    def __init__(self, interpreter: Chip8Interpreter, history_limit: int = DEFAULT_HISTORY_LIMIT):
        self._interpreter = interpreter
        self._breakpoints: List[BreakpointCondition] = []
        self._history: Deque[Snapshot] = deque(maxlen=history_limit)
        self._last_snapshot: Optional[Snapshot] = None

    def add_breakpoint(self, condition: BreakpointCondition) -> None:
        if condition not in self._breakpoints:
            self._breakpoints.append(condition)

    def remove_breakpoint(self, condition: BreakpointCondition) -> None:
        if condition in self._breakpoints:
            self._breakpoints.remove(condition)

    def get_breakpoints(self) -> List[BreakpointCondition]:
        return list(self._breakpoints)

    def get_history(self) -> List[Snapshot]:
        """
        実行履歴を古い順に返します。history_limit を超えた分は古いものから捨てられます。
        """
        return list(self._history)

    def get_last_snapshot(self) -> Optional[Snapshot]:
        return self._last_snapshot

    def _pc_breakpoint_hit(self, pc: int) -> bool:
        return any(
            bp.enabled and bp.condition_type == BreakpointConditionType.PC_MATCH and bp.value == pc
            for bp in self._breakpoints
        )

    def _register_breakpoint_hit(self, state: Registers) -> bool:
        for bp in self._breakpoints:
            if not bp.enabled or bp.condition_type != BreakpointConditionType.REGISTER_VALUE:
                continue
            if bp.register_name and read_register(state, bp.register_name) == bp.value:
                return True
        return False

    def step_instruction(self) -> Snapshot:
        """
        インタプリタを1命令分実行し、その結果のSnapshotを返します。
        """
        snapshot = self._interpreter.step()
        self._last_snapshot = snapshot
        self._history.append(snapshot)
        return snapshot

    # @intent:responsibility ブレークポイントに到達するか、max_instructions 命令を実行するまで実行を続けます。
    # @intent:return 停止理由となったブレークポイントにヒットした場合はTrue。
    def run(self, max_instructions: int) -> bool:
        """
        現在のPCにあるPCブレークポイントは、実行開始直後の1命令に限り無視します。
        実行中の例外はそのまま伝播します。
        """
        for executed in range(max_instructions):
            if executed > 0 and self._pc_breakpoint_hit(self._interpreter.registers.pc):
                logger.info("Breakpoint hit at PC: %#06x", self._interpreter.registers.pc)
                return True
            snapshot = self.step_instruction()
            if self._register_breakpoint_hit(snapshot.state):
                logger.info("Breakpoint hit at PC: %#06x", snapshot.state.pc)
                return True
        return False
