# src/chip8_core/instructions/load.py
"""
ロード/ストア命令（レジスタ転送、インデックス、タイマー、キー待ち、フォント、BCD、一括転送、乱数）の実装。
"""
import logging

from chip8_core.config.models import QuirkConfig
from chip8_core.core.errors import InvalidDigitError
from chip8_core.core.frame_buffer import FrameBuffer
from chip8_core.core.registers import Registers
from chip8_core.transport.memory import Memory, FONT_OFFSET, FONT_GLYPH_SIZE
from .base import reg_x, reg_y, byte, addr, advance_pc, ADDRESS_MASK

logger = logging.getLogger(__name__)

# --- LD Vx, byte (6xkk) ---
def execute_ld_vx_byte(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    registers.set_v(reg_x(opcode), byte(opcode))
    advance_pc(registers)

# --- LD Vx, Vy (8xy0) ---
def execute_ld_vx_vy(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    registers.set_v(reg_x(opcode), registers.get_v(reg_y(opcode)))
    advance_pc(registers)

# --- LD I, addr (Annn) ---
def execute_ld_i_addr(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    registers.i = addr(opcode)
    advance_pc(registers)

# --- RND Vx, byte (Cxkk) ---
# @intent:responsibility 一様乱数バイトと即値のANDをVxに格納します。
def execute_rnd_vx_byte(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    registers.set_v(reg_x(opcode), registers.random_byte() & byte(opcode))
    advance_pc(registers)

# --- LD Vx, DT (Fx07) ---
def execute_ld_vx_dt(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    registers.set_v(reg_x(opcode), registers.delay_timer)
    advance_pc(registers)

# --- LD Vx, K (Fx0A) ---
# @intent:responsibility キーが押されるまでPCを進めず、同じ命令が次のサイクルで再実行されます。
# @intent:rationale 実行ループを中断せず、PCを動かさないことでビジーウェイトを表現します。
def execute_ld_vx_k(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    key = registers.first_key_down()
    if key is None:
        return
    registers.set_v(reg_x(opcode), key)
    advance_pc(registers)
    logger.debug("Key %X stored in V%X", key, reg_x(opcode))

# --- LD DT, Vx (Fx15) ---
def execute_ld_dt_vx(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    registers.delay_timer = registers.get_v(reg_x(opcode))
    advance_pc(registers)

# --- LD ST, Vx (Fx18) ---
def execute_ld_st_vx(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    registers.sound_timer = registers.get_v(reg_x(opcode))
    advance_pc(registers)

# --- LD F, Vx (Fx29) ---
# @intent:responsibility Vxの16進数字に対応するフォントグリフのアドレスをIに設定します。
# @intent:pre-condition Vx <= 0xF である必要があります。
def execute_ld_f_vx(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    digit = registers.get_v(reg_x(opcode))
    if digit > 0xF:
        raise InvalidDigitError(digit)
    registers.i = FONT_OFFSET + digit * FONT_GLYPH_SIZE
    advance_pc(registers)

# --- LD B, Vx (Fx33) ---
# @intent:responsibility Vxの百の位・十の位・一の位を I, I+1, I+2 に書き込みます。
def execute_ld_b_vx(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer) -> None:
    value = registers.get_v(reg_x(opcode))
    memory.write(registers.i, [value // 100, (value // 10) % 10, value % 10])
    advance_pc(registers)

# @intent:responsibility 一括転送の対象レジスタ数を返します。
def _transfer_count(opcode: int, quirks: QuirkConfig) -> int:
    x = reg_x(opcode)
    return x + 1 if quirks.bulk_transfer_inclusive else x

# --- LD [I], Vx (Fx55) ---
# @intent:responsibility V0からVxまでを I から始まる連続アドレスに書き込みます。
def execute_ld_arr_i_vx(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer,
                        quirks: QuirkConfig = QuirkConfig()) -> None:
    count = _transfer_count(opcode, quirks)
    memory.write(registers.i, registers.v[:count])
    if quirks.load_store_increments_i:
        registers.i = (registers.i + count) & ADDRESS_MASK
    advance_pc(registers)

# --- LD Vx, [I] (Fx65) ---
# @intent:responsibility I から始まる連続アドレスの値をV0からVxまでに読み込みます。
def execute_ld_arr_vx_i(opcode: int, memory: Memory, registers: Registers, frame_buffer: FrameBuffer,
                        quirks: QuirkConfig = QuirkConfig()) -> None:
    count = _transfer_count(opcode, quirks)
    for index, value in enumerate(memory.read(registers.i, count)):
        registers.set_v(index, value)
    if quirks.load_store_increments_i:
        registers.i = (registers.i + count) & ADDRESS_MASK
    advance_pc(registers)
