# src/chip8_core/instructions/control.py
"""
制御命令（ジャンプ、サブルーチン、条件スキップ、キー入力スキップ）の実装。
ジャンプ系はPCを直接設定し、スキップ系は条件成立時にPCを4、不成立時に2進めます。
"""
from chip8_core.core.frame_buffer import FrameBuffer
from chip8_core.core.registers import Registers
from chip8_core.transport.memory import Memory
from .base import reg_x, reg_y, byte, addr, advance_pc, ADDRESS_MASK

def _skip_if(registers: Registers, condition: bool) -> None:
    advance_pc(registers, 4 if condition else 2)

# --- SYS addr (0nnn) ---
# @intent:responsibility マシン語ルーチン呼び出し。このインタプリタでは無視して次へ進みます。
def execute_sys_addr(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    advance_pc(registers)

# --- RET (00EE) ---
# @intent:responsibility スタックからCALL命令のアドレスを取り出し、その次の命令から再開します。
def execute_ret(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    registers.pc = registers.pop()
    advance_pc(registers)

# --- JP addr (1nnn) ---
def execute_jp_addr(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    registers.pc = addr(opcode)

# --- CALL addr (2nnn) ---
# @intent:responsibility 現在のPC（CALL命令自身のアドレス）をプッシュしてからジャンプします。
def execute_call_addr(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    registers.push(registers.pc)
    registers.pc = addr(opcode)

# --- SE Vx, byte (3xkk) ---
def execute_se_vx_byte(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    _skip_if(registers, registers.get_v(reg_x(opcode)) == byte(opcode))

# --- SNE Vx, byte (4xkk) ---
def execute_sne_vx_byte(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    _skip_if(registers, registers.get_v(reg_x(opcode)) != byte(opcode))

# --- SE Vx, Vy (5xy0) ---
def execute_se_vx_vy(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    vx = registers.get_v(reg_x(opcode))
    vy = registers.get_v(reg_y(opcode))
    _skip_if(registers, vx == vy)

# --- SNE Vx, Vy (9xy0) ---
def execute_sne_vx_vy(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    vx = registers.get_v(reg_x(opcode))
    vy = registers.get_v(reg_y(opcode))
    _skip_if(registers, vx != vy)

# --- JP V0, addr (Bnnn) ---
def execute_jp_v0_addr(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    registers.pc = (addr(opcode) + registers.get_v(0)) & ADDRESS_MASK

# --- SKP Vx (Ex9E) ---
# @intent:responsibility Vxの値をキー番号とみなし、そのキーが押下中なら次の命令をスキップします。
def execute_skp_vx(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    key = registers.get_v(reg_x(opcode))
    _skip_if(registers, registers.key_is_down(key))

# --- SKNP Vx (ExA1) ---
def execute_sknp_vx(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    key = registers.get_v(reg_x(opcode))
    _skip_if(registers, not registers.key_is_down(key))
