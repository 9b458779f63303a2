# src/chip8_core/instructions/alu.py
"""
算術・論理演算命令の実装。

桁上がり/桁借りのある命令は、結果をVxに書き込んだ後で最後にVFを設定します。
Vx自身がVFの場合、フラグの値が結果を上書きして残ります。
"""
from chip8_core.config.models import QuirkConfig
from chip8_core.core.frame_buffer import FrameBuffer
from chip8_core.core.registers import Registers
from chip8_core.transport.memory import Memory
from .base import reg_x, reg_y, byte, advance_pc, ADDRESS_MASK

# --- ADD Vx, byte (7xkk) ---
# @intent:responsibility 即値を加算します。256で折り返し、VFは変更しません。
def execute_add_vx_byte(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    x = reg_x(opcode)
    registers.set_v(x, (registers.get_v(x) + byte(opcode)) & 0xFF)
    advance_pc(registers)

# --- OR / AND / XOR (8xy1, 8xy2, 8xy3) ---
def execute_or_vx_vy(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    x = reg_x(opcode)
    registers.set_v(x, registers.get_v(x) | registers.get_v(reg_y(opcode)))
    advance_pc(registers)

def execute_and_vx_vy(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    x = reg_x(opcode)
    registers.set_v(x, registers.get_v(x) & registers.get_v(reg_y(opcode)))
    advance_pc(registers)

def execute_xor_vx_vy(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    x = reg_x(opcode)
    registers.set_v(x, registers.get_v(x) ^ registers.get_v(reg_y(opcode)))
    advance_pc(registers)

# --- ADD Vx, Vy (8xy4) ---
# @intent:responsibility Vx = Vx + Vy。和が255を超えたらVF=1（桁上がり）、それ以外はVF=0。
def execute_add_vx_vy(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    x = reg_x(opcode)
    total = registers.get_v(x) + registers.get_v(reg_y(opcode))
    registers.set_v(x, total & 0xFF)
    registers.set_vf(1 if total > 0xFF else 0)
    advance_pc(registers)

# --- SUB Vx, Vy (8xy5) ---
# @intent:responsibility Vx = Vx - Vy。Vx > Vy ならVF=1（桁借りなし）、それ以外はVF=0。
def execute_sub_vx_vy(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    x = reg_x(opcode)
    vx = registers.get_v(x)
    vy = registers.get_v(reg_y(opcode))
    registers.set_v(x, (vx - vy) & 0xFF)
    registers.set_vf(1 if vx > vy else 0)
    advance_pc(registers)

# --- SUBN Vx, Vy (8xy7) ---
# @intent:responsibility Vx = Vy - Vx。Vy > Vx ならVF=1、それ以外はVF=0。
def execute_subn_vx_vy(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    x = reg_x(opcode)
    vx = registers.get_v(x)
    vy = registers.get_v(reg_y(opcode))
    registers.set_v(x, (vy - vx) & 0xFF)
    registers.set_vf(1 if vy > vx else 0)
    advance_pc(registers)

# @intent:responsibility シフト対象の値を返します。quirks.shift_uses_vy が有効ならVy、そうでなければVxです。
def _shift_source(opcode: int, registers: Registers, quirks: QuirkConfig) -> int:
    if quirks.shift_uses_vy:
        return registers.get_v(reg_y(opcode))
    return registers.get_v(reg_x(opcode))

# --- SHR Vx {, Vy} (8xy6) ---
# @intent:responsibility 1ビット右シフトし、押し出された最下位ビットをVFに設定します。
def execute_shr_vx(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer,
                   quirks: QuirkConfig = QuirkConfig()) -> None:
    value = _shift_source(opcode, registers, quirks)
    registers.set_v(reg_x(opcode), value >> 1)
    registers.set_vf(value & 0x01)
    advance_pc(registers)

# --- SHL Vx {, Vy} (8xyE) ---
# @intent:responsibility 1ビット左シフトし、押し出された最上位ビットをVFに設定します。
def execute_shl_vx(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer,
                   quirks: QuirkConfig = QuirkConfig()) -> None:
    value = _shift_source(opcode, registers, quirks)
    registers.set_v(reg_x(opcode), (value << 1) & 0xFF)
    registers.set_vf(value >> 7)
    advance_pc(registers)

# --- ADD I, Vx (Fx1E) ---
# @intent:rationale Iの範囲は設定時には制限せず、メモリアクセス時にMemoryが検査します。
def execute_add_i_vx(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    registers.i = (registers.i + registers.get_v(reg_x(opcode))) & ADDRESS_MASK
    advance_pc(registers)
