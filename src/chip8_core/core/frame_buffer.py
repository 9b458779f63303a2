# chip8_core/core/frame_buffer.py
"""
Core Layer (フレームバッファ)

64x32のモノクロ画素グリッドを、1画素1バイト（0または1）の行優先配列として保持します。
"""
from chip8_core.core.errors import InvalidFrameBufferIndexError

SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32
BUFFER_SIZE = SCREEN_WIDTH * SCREEN_HEIGHT

# @intent:responsibility 画素の取得・設定・クリアと、描画用の読み取り専用スナップショットを提供します。
class FrameBuffer:
    def __init__(self):
        self._buffer = bytearray(BUFFER_SIZE)

    def clear(self) -> None:
        self._buffer[:] = bytes(BUFFER_SIZE)

    def get_index(self, index: int) -> bool:
        if not 0 <= index < BUFFER_SIZE:
            raise InvalidFrameBufferIndexError(index)
        return self._buffer[index] == 1

    def set_index(self, index: int, value: bool) -> None:
        if not 0 <= index < BUFFER_SIZE:
            raise InvalidFrameBufferIndexError(index)
        self._buffer[index] = 1 if value else 0

    # @intent:pre-condition xは0-63、yは0-31の範囲である必要があります。
    # @intent:rationale 線形インデックスだけを検査すると x>=64 が次の行に回り込むため、座標ごとに検査します。
    def _index_of(self, x: int, y: int) -> int:
        index = y * SCREEN_WIDTH + x
        if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
            raise InvalidFrameBufferIndexError(index)
        return index

    def get(self, x: int, y: int) -> bool:
        return self.get_index(self._index_of(x, y))

    def set(self, x: int, y: int, value: bool) -> None:
        self.set_index(self._index_of(x, y), value)

    # @intent:responsibility 現在の画素配列の不変コピー（2048バイト）を返します。
    def snapshot(self) -> bytes:
        return bytes(self._buffer)
