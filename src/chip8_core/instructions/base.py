# src/chip8_core/instructions/base.py
"""
命令実装用の共通ユーティリティ。
命令記述子と、オペコードのニブル/バイトを取り出す関数を定義します。
"""
from dataclasses import dataclass

from chip8_core.common.types import Handler
from chip8_core.core.registers import Registers

# @intent:responsibility 表示名・識別子・マスク・ハンドラの組からなる不変の命令記述子です。
@dataclass(frozen=True)
class Instruction:
    name: str
    id: int
    mask: int
    execute: Handler

    # @intent:responsibility opcode & mask == id のときにこの命令に一致します。
    def matches(self, opcode: int) -> bool:
        return (opcode & self.mask) == self.id

# @intent:utility_function オペコードの各フィールドを取り出します。
def reg_x(opcode: int) -> int:
    return (opcode & 0x0F00) >> 8

def reg_y(opcode: int) -> int:
    return (opcode & 0x00F0) >> 4

def nibble(opcode: int) -> int:
    return opcode & 0x000F

def byte(opcode: int) -> int:
    return opcode & 0x00FF

def addr(opcode: int) -> int:
    return opcode & 0x0FFF

ADDRESS_MASK = 0xFFFF

# @intent:utility_function PCを進めます。PCは16ビットで折り返し、範囲外のフェッチはMemoryが検出します。
def advance_pc(registers: Registers, step: int = 2) -> None:
    registers.pc = (registers.pc + step) & ADDRESS_MASK
