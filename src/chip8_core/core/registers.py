# chip8_core/core/registers.py
"""
Core Layer (レジスタファイル)

このモジュールは、メモリとフレームバッファを除くマシン状態の全体を保持します。
PC、インデックスレジスタI、V0-VF、コールスタック、キー押下状態、2つのタイマー、乱数源を含みます。
"""
import random
from dataclasses import dataclass, field
from typing import List, Optional

from chip8_core.core.errors import (
    InvalidRegisterError, InvalidKeyError, StackOverflowError, StackUnderflowError,
)
from chip8_core.transport.memory import PROGRAM_OFFSET

REGISTER_COUNT = 16
KEY_COUNT = 16
MAX_STACK_DEPTH = 16
VF = 0xF

# @intent:responsibility CHIP-8の全てのレジスタ状態を保持し、範囲チェック付きのアクセサを提供します。
@dataclass
class Registers:
    """
    CHIP-8のレジスタ状態を保持するデータクラス。
    命令ハンドラは実行中にこのオブジェクトのみを介して状態を変更します。
    """
    pc: int = PROGRAM_OFFSET
    i: int = 0x000
    v: List[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)
    stack: List[int] = field(default_factory=list)
    keys: List[bool] = field(default_factory=lambda: [False] * KEY_COUNT)
    delay_timer: int = 0
    sound_timer: int = 0
    # @intent:rationale 乱数源はコンストラクタで注入し、シード固定で再現可能なテストを可能にします。
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    # --- 汎用レジスタ ---
    def get_v(self, index: int) -> int:
        if not 0 <= index < REGISTER_COUNT:
            raise InvalidRegisterError(index)
        return self.v[index]

    def set_v(self, index: int, value: int) -> None:
        if not 0 <= index < REGISTER_COUNT:
            raise InvalidRegisterError(index)
        self.v[index] = value & 0xFF

    def get_vf(self) -> int:
        return self.v[VF]

    # @intent:responsibility フラグレジスタVFへの無検査の書き込みです。
    def set_vf(self, value: int) -> None:
        self.v[VF] = value & 0xFF

    # --- コールスタック ---
    # @intent:pre-condition スタックの深さはMAX_STACK_DEPTH未満である必要があります。
    def push(self, address: int) -> None:
        if len(self.stack) >= MAX_STACK_DEPTH:
            raise StackOverflowError()
        self.stack.append(address)

    def pop(self) -> int:
        if not self.stack:
            raise StackUnderflowError()
        return self.stack.pop()

    # --- キー入力 ---
    def key_is_down(self, index: int) -> bool:
        if not 0 <= index < KEY_COUNT:
            raise InvalidKeyError(index)
        return self.keys[index]

    def set_key(self, index: int, pressed: bool) -> None:
        if not 0 <= index < KEY_COUNT:
            raise InvalidKeyError(index)
        self.keys[index] = pressed

    # @intent:responsibility 押下中のキーのうち最も小さい番号を返します。押下がなければNone。
    def first_key_down(self) -> Optional[int]:
        for index, pressed in enumerate(self.keys):
            if pressed:
                return index
        return None

    # --- 乱数 ---
    def random_byte(self) -> int:
        return self.rng.randrange(256)

    # @intent:responsibility スナップショット用に、乱数源を共有したままリスト類を複製したコピーを返します。
    def copy(self) -> "Registers":
        return Registers(
            pc=self.pc,
            i=self.i,
            v=list(self.v),
            stack=list(self.stack),
            keys=list(self.keys),
            delay_timer=self.delay_timer,
            sound_timer=self.sound_timer,
            rng=self.rng,
        )
