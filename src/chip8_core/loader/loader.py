# chip8_core/loader/loader.py
"""
ROMローダーモジュール。
ヘッダやマジックバイトを持たない生のCHIP-8プログラムイメージを読み込みます。
"""
import logging

from chip8_core.core.interpreter import Chip8Interpreter
from chip8_core.transport.memory import MAX_PROGRAM_SIZE

logger = logging.getLogger(__name__)

class RomLoader:
    """
    ROMファイルを読み込み、インタプリタにロードするローダー。
    """
    def read_rom(self, file_path: str) -> bytes:
        with open(file_path, 'rb') as f:
            data = f.read()
        if not data:
            raise ValueError(f"ROM file is empty: {file_path}")
        if len(data) > MAX_PROGRAM_SIZE:
            logger.warning("ROM %s is %d bytes, larger than the %d bytes available", file_path, len(data), MAX_PROGRAM_SIZE)
        return data

    # @intent:post-condition 大きすぎるROMはメモリ側でInvalidAddressErrorとなり、インタプリタは初期化された状態で残ります。
    def load_rom(self, file_path: str, interpreter: Chip8Interpreter) -> int:
        data = self.read_rom(file_path)
        interpreter.load_rom(data)
        logger.info("Loaded ROM %s (%d bytes)", file_path, len(data))
        return len(data)
