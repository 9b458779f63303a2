# src/chip8_core/instructions/__init__.py
"""
CHIP-8命令セット実装パッケージ。
"""
from typing import Optional, Tuple

from chip8_core.config.models import QuirkConfig
from chip8_core.core.errors import InvalidInstructionError
from chip8_core.core.frame_buffer import FrameBuffer
from chip8_core.core.registers import Registers
from chip8_core.transport.memory import Memory
from .base import Instruction
from .maps import build_instruction_table

# @intent:responsibility 命令テーブルを保持し、フェッチ・デコード・実行の1サイクルを提供します。
class InstructionSet:
    """
    順序付きの命令テーブルに対する線形走査でオペコードをデコードします。
    テーブルは生成時に一度だけ構築され、以後変更されません。
    """
    def __init__(self, quirks: Optional[QuirkConfig] = None):
        self._table: Tuple[Instruction, ...] = build_instruction_table(quirks)

    @property
    def table(self) -> Tuple[Instruction, ...]:
        return self._table

    # @intent:responsibility テーブル順で最初に一致したエントリを返します。一致しなければNone。
    def decode(self, opcode: int) -> Optional[Instruction]:
        for instruction in self._table:
            if instruction.matches(opcode):
                return instruction
        return None

    # @intent:responsibility PCから2バイトを読み、ビッグエンディアンで16ビットのオペコードを組み立てます。
    def fetch(self, memory: Memory, pc: int) -> int:
        high, low = memory.read(pc, 2)
        return (high << 8) | low

    # @intent:responsibility 1命令をフェッチ・デコード・実行し、実行した命令とそのオペコードを返します。
    # @intent:post-condition ハンドラが送出した例外はそのまま呼び出し元に伝播します。
    def execute(self, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> Tuple[Instruction, int]:
        pc = registers.pc
        opcode = self.fetch(memory, pc)
        instruction = self.decode(opcode)
        if instruction is None:
            raise InvalidInstructionError(pc, opcode)
        instruction.execute(opcode, memory, registers, frame_buffer)
        return instruction, opcode
