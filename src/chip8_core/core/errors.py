# chip8_core/core/errors.py
"""
インタプリタ例外の定義

このモジュールは、不正なプログラムや範囲外アクセスを表す例外の体系を定義します。
全ての例外はChip8Errorを基底とし、呼び出し元が一括で捕捉できるようにします。
"""

# @intent:responsibility インタプリタが送出する全ての例外の基底クラスです。
class Chip8Error(Exception):
    pass

# @intent:responsibility 4096バイトのメモリ範囲外へのアクセスを表します。
class InvalidAddressError(Chip8Error, IndexError):
    def __init__(self, address: int):
        self.address = address
        super().__init__(f"Invalid address {address:#06x}")

# @intent:responsibility 命令テーブルのどのエントリにも一致しないオペコードを表します。
class InvalidInstructionError(Chip8Error, ValueError):
    def __init__(self, pc: int, opcode: int):
        self.pc = pc
        self.opcode = opcode
        super().__init__(f"Invalid instruction {opcode:#06x} at address {pc:#06x}")

# @intent:responsibility V0-VFの範囲外のレジスタ指定を表します。
class InvalidRegisterError(Chip8Error, IndexError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Invalid register address {index}")

# @intent:responsibility 0-15の範囲外のキー番号を表します。
class InvalidKeyError(Chip8Error, IndexError):
    def __init__(self, key: int):
        self.key = key
        super().__init__(f"Invalid key {key}")

# @intent:responsibility フォントテーブルに存在しない桁（0xFを超える値）を表します。
# @intent:rationale フォント桁の範囲エラーはキー範囲エラーと同じ扱いで捕捉できるよう、InvalidKeyErrorのサブクラスとします。
class InvalidDigitError(InvalidKeyError):
    def __init__(self, digit: int):
        super().__init__(digit)
        self.digit = digit
        self.args = (f"Invalid font digit {digit}",)

# @intent:responsibility フレームバッファの範囲外の画素アクセスを表します。
class InvalidFrameBufferIndexError(Chip8Error, IndexError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Invalid frame buffer index {index}")

class StackOverflowError(Chip8Error):
    def __init__(self):
        super().__init__("Stack overflow")

class StackUnderflowError(Chip8Error):
    def __init__(self):
        super().__init__("Stack underflow")
