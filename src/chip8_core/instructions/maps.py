"""
オペコードのビットパターンと命令実装の対応表。

テーブルは先頭から順に走査され、最初に一致したエントリが採用されます。
完全一致のエントリ（CLS、RET）は、それらを覆い隠す上位ニブル一致のエントリ（SYS）より前に置く必要があります。
"""
from functools import partial
from typing import Optional, Tuple

from chip8_core.config.models import QuirkConfig
from . import alu
from . import control
from . import display
from . import load
from .base import Instruction

# @intent:responsibility 動作差異の設定を反映した、不変の命令テーブルを構築します。
def build_instruction_table(quirks: Optional[QuirkConfig] = None) -> Tuple[Instruction, ...]:
    quirks = quirks or QuirkConfig()
    return (
        # System / Flow
        Instruction("CLS", 0x00E0, 0xFFFF, display.execute_cls),
        Instruction("RET", 0x00EE, 0xFFFF, control.execute_ret),
        Instruction("SYS addr", 0x0000, 0xF000, control.execute_sys_addr),
        Instruction("JP addr", 0x1000, 0xF000, control.execute_jp_addr),
        Instruction("CALL addr", 0x2000, 0xF000, control.execute_call_addr),
        Instruction("SE Vx, byte", 0x3000, 0xF000, control.execute_se_vx_byte),
        Instruction("SNE Vx, byte", 0x4000, 0xF000, control.execute_sne_vx_byte),
        Instruction("SE Vx, Vy", 0x5000, 0xF00F, control.execute_se_vx_vy),

        # Load / Arithmetic
        Instruction("LD Vx, byte", 0x6000, 0xF000, load.execute_ld_vx_byte),
        Instruction("ADD Vx, byte", 0x7000, 0xF000, alu.execute_add_vx_byte),
        Instruction("LD Vx, Vy", 0x8000, 0xF00F, load.execute_ld_vx_vy),
        Instruction("OR Vx, Vy", 0x8001, 0xF00F, alu.execute_or_vx_vy),
        Instruction("AND Vx, Vy", 0x8002, 0xF00F, alu.execute_and_vx_vy),
        Instruction("XOR Vx, Vy", 0x8003, 0xF00F, alu.execute_xor_vx_vy),
        Instruction("ADD Vx, Vy", 0x8004, 0xF00F, alu.execute_add_vx_vy),
        Instruction("SUB Vx, Vy", 0x8005, 0xF00F, alu.execute_sub_vx_vy),
        Instruction("SHR Vx", 0x8006, 0xF00F, partial(alu.execute_shr_vx, quirks=quirks)),
        Instruction("SUBN Vx, Vy", 0x8007, 0xF00F, alu.execute_subn_vx_vy),
        Instruction("SHL Vx", 0x800E, 0xF00F, partial(alu.execute_shl_vx, quirks=quirks)),
        Instruction("SNE Vx, Vy", 0x9000, 0xF00F, control.execute_sne_vx_vy),

        # Indirect / Random / Draw
        Instruction("LD I, addr", 0xA000, 0xF000, load.execute_ld_i_addr),
        Instruction("JP V0, addr", 0xB000, 0xF000, control.execute_jp_v0_addr),
        Instruction("RND Vx, byte", 0xC000, 0xF000, load.execute_rnd_vx_byte),
        Instruction("DRW Vx, Vy, nibble", 0xD000, 0xF000, display.execute_drw_vx_vy_nibble),

        # Input
        Instruction("SKP Vx", 0xE09E, 0xF0FF, control.execute_skp_vx),
        Instruction("SKNP Vx", 0xE0A1, 0xF0FF, control.execute_sknp_vx),

        # Timers / Memory
        Instruction("LD Vx, DT", 0xF007, 0xF0FF, load.execute_ld_vx_dt),
        Instruction("LD Vx, K", 0xF00A, 0xF0FF, load.execute_ld_vx_k),
        Instruction("LD DT, Vx", 0xF015, 0xF0FF, load.execute_ld_dt_vx),
        Instruction("LD ST, Vx", 0xF018, 0xF0FF, load.execute_ld_st_vx),
        Instruction("ADD I, Vx", 0xF01E, 0xF0FF, alu.execute_add_i_vx),
        Instruction("LD F, Vx", 0xF029, 0xF0FF, load.execute_ld_f_vx),
        Instruction("LD B, Vx", 0xF033, 0xF0FF, load.execute_ld_b_vx),
        Instruction("LD [I], Vx", 0xF055, 0xF0FF, partial(load.execute_ld_arr_i_vx, quirks=quirks)),
        Instruction("LD Vx, [I]", 0xF065, 0xF0FF, partial(load.execute_ld_arr_vx_i, quirks=quirks)),
    )

# @intent:map 既定の動作設定で構築した命令テーブル。
INSTRUCTION_TABLE = build_instruction_table()
