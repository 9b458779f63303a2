# chip8_core/core/interpreter.py
"""
Core Layer (インタプリタ)

メモリ、レジスタ、フレームバッファ、命令セットを所有し、外部の協調者（UIなど）に
ROMのロード、時間経過による実行、フレームの取得、キー入力の窓口を提供します。

実行は単一スレッドかつ同期的です。内部にクロックやスレッドは持たず、
経過時間は呼び出し側が tick() に渡します。
"""
import logging
import math
import random
from typing import Dict, List, Optional

from chip8_core.common.types import RegisterInfo, RegisterLayoutInfo
from chip8_core.config.models import EmulatorConfig
from chip8_core.core.errors import Chip8Error
from chip8_core.core.frame_buffer import FrameBuffer
from chip8_core.core.registers import Registers, REGISTER_COUNT
from chip8_core.core.snapshot import Operation, Metadata, Snapshot
from chip8_core.disassembler import format_instruction
from chip8_core.instructions import InstructionSet
from chip8_core.transport.memory import Memory

logger = logging.getLogger(__name__)

# @intent:responsibility CHIP-8マシン全体を所有し、フェッチ・デコード・実行サイクルを駆動します。
class Chip8Interpreter:
    """
    CHIP-8インタプリタ本体。

    - load_rom(): メモリ・レジスタ・フレームバッファを初期化してからROMを配置します。
    - tick(): 経過時間から実行すべき命令数を求め、その数だけ命令を実行します。
    - decrement_timers(): 描画フレームごとに一度だけ呼び出し、タイマーを1減らします。
    """
    # @intent:responsibility 各コンポーネントを生成します。乱数源は注入可能です。
    def __init__(self, config: Optional[EmulatorConfig] = None, rng: Optional[random.Random] = None):
        self._config = config or EmulatorConfig()
        self._rng = rng or random.Random()
        self._memory = Memory()
        self._registers = Registers(rng=self._rng)
        self._frame_buffer = FrameBuffer()
        self._instructions = InstructionSet(self._config.quirks)
        self._rom: Optional[bytes] = None
        self._instruction_count: int = 0

    @property
    def config(self) -> EmulatorConfig:
        return self._config

    @property
    def memory(self) -> Memory:
        return self._memory

    @property
    def registers(self) -> Registers:
        return self._registers

    @property
    def instruction_set(self) -> InstructionSet:
        return self._instructions

    @property
    def instruction_count(self) -> int:
        return self._instruction_count

    @property
    def rom_loaded(self) -> bool:
        return self._rom is not None

    # @intent:responsibility ROMをロードします。以前の実行状態は全て破棄されます。
    # @intent:post-condition PCは0x200、ROMは [0x200, 0x200 + len) に逐語的に配置されます。
    def load_rom(self, rom: bytes) -> None:
        rom = bytes(rom)
        self._reset_machine()
        # 配置に失敗した場合はROM未ロードの状態で残る
        self._rom = None
        self._memory.load_program(rom)
        self._rom = rom

    # @intent:responsibility マシンを初期状態に戻し、直前にロードしたROMがあれば再配置します。
    def reset(self) -> None:
        self._reset_machine()
        if self._rom is not None:
            self._memory.load_program(self._rom)
        logger.info("Interpreter reset")

    # @intent:rationale キーの押下状態はホスト側の入力を映すものなので、リセットを跨いで保持します。
    def _reset_machine(self) -> None:
        keys = list(self._registers.keys)
        self._memory.reset()
        self._registers = Registers(keys=keys, rng=self._rng)
        self._frame_buffer.clear()
        self._instruction_count = 0

    # @intent:responsibility 経過時間（秒）に応じた数の命令を実行し、実行した命令数を返します。
    # @intent:rationale 命令数は floor(instructions_per_second * elapsed) で、端数は持ち越しません。
    def tick(self, elapsed_seconds: float) -> int:
        """
        例外が発生した時点で残りの命令予算は破棄され、例外は呼び出し元へ伝播します。
        それまでに実行された命令による状態変化はロールバックされません。
        経過時間が有限の数でない場合はValueErrorを送出します。
        """
        if not math.isfinite(elapsed_seconds):
            raise ValueError(f"Elapsed time must be a finite number of seconds: {elapsed_seconds}")
        due = max(0, math.floor(self._config.instructions_per_second * elapsed_seconds))
        executed = 0
        try:
            for _ in range(due):
                self._instructions.execute(self._memory, self._registers, self._frame_buffer)
                executed += 1
        except Chip8Error as e:
            logger.error("Execution aborted after %d of %d instructions: %s", executed, due, e)
            raise
        finally:
            self._instruction_count += executed
        return executed

    # @intent:responsibility 1命令を実行し、その結果のスナップショットを返します。
    def step(self) -> Snapshot:
        initial_pc = self._registers.pc
        instruction, opcode = self._instructions.execute(self._memory, self._registers, self._frame_buffer)
        self._instruction_count += 1
        operation = Operation(
            address=initial_pc,
            opcode=opcode,
            name=instruction.name,
            text=format_instruction(instruction, opcode),
        )
        logger.debug("%#06x: %04X %s", initial_pc, opcode, operation.text)
        return Snapshot(
            state=self._registers.copy(),
            operation=operation,
            metadata=Metadata(instruction_count=self._instruction_count),
        )

    # @intent:responsibility 描画フレームごとに一度、遅延タイマーとサウンドタイマーを1ずつ減らします。
    # @intent:rationale タイマーの減衰は命令実行速度から切り離し、フレーム周期にのみ従います。
    def decrement_timers(self) -> None:
        if self._registers.delay_timer > 0:
            self._registers.delay_timer -= 1
        if self._registers.sound_timer > 0:
            self._registers.sound_timer -= 1

    # @intent:responsibility サウンドタイマーが動作中（音を鳴らすべき）かどうかを返します。
    @property
    def sound_active(self) -> bool:
        return self._registers.sound_timer > 0

    # @intent:responsibility 現在のフレームバッファ（64x32、1画素1バイト）を返します。
    def frame(self) -> bytes:
        return self._frame_buffer.snapshot()

    def key_down(self, key: int) -> None:
        self._registers.set_key(key, True)
        logger.debug("Key %X down", key)

    def key_up(self, key: int) -> None:
        self._registers.set_key(key, False)
        logger.debug("Key %X up", key)

    # --- UI向けAPI ---
    def get_register_map(self) -> Dict[str, int]:
        """
        現在のレジスタ値を辞書形式で返します。
        """
        r = self._registers
        reg_map = {f"V{index:X}": value for index, value in enumerate(r.v)}
        reg_map.update({"PC": r.pc, "I": r.i, "SP": len(r.stack), "DT": r.delay_timer, "ST": r.sound_timer})
        return reg_map

    def get_register_layout(self) -> List[RegisterLayoutInfo]:
        return [
            RegisterLayoutInfo("General", [RegisterInfo(f"V{index:X}", 8) for index in range(REGISTER_COUNT)]),
            RegisterLayoutInfo("Index/Pointers", [
                RegisterInfo("PC", 16), RegisterInfo("I", 16), RegisterInfo("SP", 8)
            ]),
            RegisterLayoutInfo("Timers", [RegisterInfo("DT", 8), RegisterInfo("ST", 8)]),
        ]
