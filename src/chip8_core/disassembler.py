# src/chip8_core/disassembler.py
"""
CHIP-8の逆アセンブラ。
命令テーブルの表示名にオペランドの実値を埋め込んで表記を作ります。
"""
import re
from typing import List, Optional, Tuple

from chip8_core.instructions import InstructionSet
from chip8_core.instructions.base import Instruction, reg_x, reg_y, nibble, byte, addr
from chip8_core.transport.memory import Memory, MEMORY_SIZE

_DEFAULT_SET = InstructionSet()

_TOKEN_PATTERN = re.compile(r"\b(Vx|Vy|byte|addr|nibble)\b")

# @intent:utility_function 表示名の各トークンをオペコードの値に置き換えます。
def format_instruction(instruction: Instruction, opcode: int) -> str:
    values = {
        "Vx": f"V{reg_x(opcode):X}",
        "Vy": f"V{reg_y(opcode):X}",
        "byte": f"#{byte(opcode):02X}",
        "addr": f"${addr(opcode):03X}",
        "nibble": f"{nibble(opcode)}",
    }
    return _TOKEN_PATTERN.sub(lambda m: values[m.group(1)], instruction.name)

# @intent:responsibility オペコードを表記文字列に変換します。不明な語は DW として表します。
def format_operation(opcode: int, instruction_set: Optional[InstructionSet] = None) -> str:
    instruction = (instruction_set or _DEFAULT_SET).decode(opcode)
    if instruction is None:
        return f"DW 0x{opcode:04X}"
    return format_instruction(instruction, opcode)

# @intent:responsibility 指定範囲のメモリを2バイト単位で逆アセンブルし、(address, hex, text) のリストを返します。
def disassemble(memory: Memory, start_addr: int, length: int,
                instruction_set: Optional[InstructionSet] = None) -> List[Tuple[int, str, str]]:
    result = []
    address = start_addr
    end = min(start_addr + length, MEMORY_SIZE)
    while address + 1 < end:
        high, low = memory.read(address, 2)
        opcode = (high << 8) | low
        result.append((address, f"{opcode:04X}", format_operation(opcode, instruction_set)))
        address += 2
    return result
