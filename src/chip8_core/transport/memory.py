# chip8_core/transport/memory.py
"""
Transport Layer (メモリ)

このモジュールは、4096バイトのフラットなアドレス空間を提供します。
組み込みのフォントテーブルを保持し、全ての読み書きに対して境界チェックを行う責務を負います。
"""
import logging
from typing import Iterable

from chip8_core.core.errors import InvalidAddressError

logger = logging.getLogger(__name__)

MEMORY_SIZE = 4096
PROGRAM_OFFSET = 0x200
FONT_OFFSET = 0x50
FONT_GLYPH_SIZE = 5

# @intent:constant 16進数字0-Fのグリフ（各5バイト、上位4ビットが画素）。
FONT_GLYPHS = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])

MAX_PROGRAM_SIZE = MEMORY_SIZE - PROGRAM_OFFSET

# @intent:responsibility 境界チェック付きのバイト単位メモリを提供します。
class Memory:
    """
    CHIP-8のメインメモリ。
    生成時およびリセット時に、0x50からフォントテーブルが書き込まれます。
    範囲外アクセスは黙って切り詰めず、InvalidAddressErrorを送出します。
    """
    def __init__(self):
        self._memory = bytearray(MEMORY_SIZE)
        self._seed_font()

    def _seed_font(self) -> None:
        self._memory[FONT_OFFSET:FONT_OFFSET + len(FONT_GLYPHS)] = FONT_GLYPHS

    # @intent:pre-condition addrは非負、かつ addr + length <= MEMORY_SIZE である必要があります。
    def _check_range(self, address: int, length: int) -> None:
        if address < 0 or length < 0 or address + length > MEMORY_SIZE:
            raise InvalidAddressError(address)

    # @intent:responsibility 指定アドレスから length バイトを読み出します。
    def read(self, address: int, length: int) -> bytes:
        self._check_range(address, length)
        return bytes(self._memory[address:address + length])

    def read_byte(self, address: int) -> int:
        self._check_range(address, 1)
        return self._memory[address]

    # @intent:responsibility 指定アドレスからバイト列を書き込みます。範囲外なら一切書き込みません。
    def write(self, address: int, data: Iterable[int]) -> None:
        data = bytes(data)
        self._check_range(address, len(data))
        self._memory[address:address + len(data)] = data

    def write_byte(self, address: int, value: int) -> None:
        self._check_range(address, 1)
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Data {value} is not an 8-bit value.")
        self._memory[address] = value

    # @intent:responsibility プログラムイメージを0x200から書き込みます。
    def load_program(self, program: bytes) -> None:
        """
        プログラムをPROGRAM_OFFSETから逐語的に配置します。
        残りのメモリに収まらない場合はInvalidAddressErrorを送出します。
        """
        self.write(PROGRAM_OFFSET, program)
        logger.info("Loaded %d byte program at %#06x", len(program), PROGRAM_OFFSET)

    # @intent:responsibility メモリを0で埋め、フォントテーブルを再配置します。
    def reset(self) -> None:
        self._memory = bytearray(MEMORY_SIZE)
        self._seed_font()

    def get_size(self) -> int:
        return MEMORY_SIZE
