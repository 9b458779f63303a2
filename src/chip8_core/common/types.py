"""
共通の型定義を提供するモジュール。
命令ハンドラの型や、UIがレジスタ表示を組み立てるための定義を置きます。
"""
from typing import TYPE_CHECKING, Callable, List, NamedTuple

if TYPE_CHECKING:
    from chip8_core.core.frame_buffer import FrameBuffer
    from chip8_core.core.registers import Registers
    from chip8_core.transport.memory import Memory

# @intent:data_structure 命令ハンドラの型。(opcode, memory, registers, frame_buffer) を受け取り、失敗時は例外を送出します。
Handler = Callable[[int, "Memory", "Registers", "FrameBuffer"], None]

# @intent:data_structure 単一のレジスタの表示定義。
class RegisterInfo(NamedTuple):
    name: str
    width: int  # ビット幅 (8 or 16)

# @intent:data_structure レジスタグループの表示定義。
class RegisterLayoutInfo(NamedTuple):
    group_name: str
    registers: List[RegisterInfo]
