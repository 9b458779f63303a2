from dataclasses import dataclass, field
from typing import Dict, Optional

# @intent:constant 物理キーのラベルから論理キー番号(0-15)への既定の対応。
#                  キーボード左上の4x4ブロック (1234/QWER/ASDF/ZXCV) をCOSMAC VIPの16進キーパッドに割り当てます。
DEFAULT_KEYMAP: Dict[str, int] = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "Q": 0x4, "W": 0x5, "E": 0x6, "R": 0xD,
    "A": 0x7, "S": 0x8, "D": 0x9, "F": 0xE,
    "Z": 0xA, "X": 0x0, "C": 0xB, "V": 0xF,
}

# @intent:responsibility 歴史的に実装ごとに異なる命令の振る舞いを選択します。
@dataclass(frozen=True)
class QuirkConfig:
    shift_uses_vy: bool = False            # SHR/SHL が Vy をシフトして Vx に格納する
    load_store_increments_i: bool = False  # Fx55/Fx65 の後に I を転送数だけ進める
    bulk_transfer_inclusive: bool = True   # Fx55/Fx65 が Vx を含めて転送する

@dataclass
class DisplayConfig:
    scale: int = 10

@dataclass
class EmulatorConfig:
    instructions_per_second: int = 700
    timer_hz: int = 60
    quirks: QuirkConfig = field(default_factory=QuirkConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    keymap: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_KEYMAP))

    # @intent:responsibility 物理キーのラベル（大文字小文字を区別しない）に対応する論理キー番号を返します。
    def key_for(self, label: str) -> Optional[int]:
        return self.keymap.get(label.upper()) if label else None
