# src/chip8_core/instructions/display.py
"""
画面命令（CLS、DRW）の実装。
"""
from chip8_core.core.frame_buffer import FrameBuffer, SCREEN_WIDTH, SCREEN_HEIGHT
from chip8_core.core.registers import Registers
from chip8_core.transport.memory import Memory
from .base import reg_x, reg_y, nibble, advance_pc

SPRITE_WIDTH = 8

# --- CLS (00E0) ---
def execute_cls(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    frame_buffer.clear()
    advance_pc(registers)

# --- DRW Vx, Vy, nibble (Dxyn) ---
# @intent:responsibility Iから読んだnバイトのスプライトを (Vx mod 64, Vy mod 32) にXOR描画します。
# @intent:post-condition 点灯していた画素を消した場合はVF=1、そうでなければVF=0。
def execute_drw_vx_vy_nibble(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    """
    原点のみ画面内に折り返し、はみ出した行・列は描画せずに切り捨てます（ラップしません）。
    """
    origin_x = registers.get_v(reg_x(opcode)) % SCREEN_WIDTH
    origin_y = registers.get_v(reg_y(opcode)) % SCREEN_HEIGHT

    registers.set_vf(0)
    for row in range(nibble(opcode)):
        y = origin_y + row
        if y >= SCREEN_HEIGHT:
            break
        bits = memory.read_byte(registers.i + row)
        for column in range(SPRITE_WIDTH):
            x = origin_x + column
            if x >= SCREEN_WIDTH:
                break
            if not bits & (0x80 >> column):
                continue
            if frame_buffer.get(x, y):
                frame_buffer.set(x, y, False)
                registers.set_vf(1)
            else:
                frame_buffer.set(x, y, True)

    advance_pc(registers)
