# tests/instructions/conftest.py
"""
命令テスト用の共通フィクスチャ。
"""
import random
from dataclasses import dataclass

import pytest

from chip8_core.core.frame_buffer import FrameBuffer
from chip8_core.core.registers import Registers
from chip8_core.instructions import InstructionSet
from chip8_core.transport.memory import Memory

@dataclass
class Machine:
    memory: Memory
    registers: Registers
    frame_buffer: FrameBuffer
    instructions: InstructionSet

    # @intent:utility_function オペコードをデコードし、対応するハンドラを直接実行します。
    def run(self, opcode: int) -> None:
        instruction = self.instructions.decode(opcode)
        assert instruction is not None, f"{opcode:04X} did not decode"
        instruction.execute(opcode, self.memory, self.registers, self.frame_buffer)

@pytest.fixture
def machine():
    return Machine(
        memory=Memory(),
        registers=Registers(rng=random.Random(42)),
        frame_buffer=FrameBuffer(),
        instructions=InstructionSet(),
    )
