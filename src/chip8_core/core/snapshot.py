# chip8_core/core/snapshot.py
"""
実行状態の不変スナップショット

1命令の実行結果を記録する不変のデータ構造を定義します。
デバッガの履歴とUIへの情報提供に用います。
"""
from dataclasses import dataclass
from typing import Optional

from chip8_core.core.registers import Registers

# @intent:responsibility 実行された命令の詳細を記録します。
@dataclass(frozen=True)
class Operation:
    """
    実行された命令のアドレス、オペコード、テーブル上の名前と、オペランドを埋めた表記。
    """
    address: int
    opcode: int
    name: str
    text: str

    @property
    def opcode_hex(self) -> str:
        return f"{self.opcode:04X}"

@dataclass(frozen=True)
class Metadata:
    instruction_count: int
    symbol_info: Optional[str] = None

# @intent:responsibility ある一時点のレジスタ状態と、直前に実行した命令を不変に記録します。
@dataclass(frozen=True)
class Snapshot:
    """
    stateは実行後のレジスタのコピーであり、以後の実行で変化しません。
    """
    state: Registers
    operation: Operation
    metadata: Metadata
