# src/chip8_core/ui/screen_view.py
"""
フレームバッファを描画するウィジェット。
"""
from typing import Optional

from PySide6.QtWidgets import QWidget
from PySide6.QtGui import QPainter, QColor
from PySide6.QtCore import QSize

from chip8_core.core.frame_buffer import SCREEN_WIDTH, SCREEN_HEIGHT

# @intent:responsibility 64x32の画素配列を、指定倍率の矩形として描画します。
class ScreenView(QWidget):
    def __init__(self, scale: int = 10, parent=None):
        super().__init__(parent)
        self._scale = scale
        self._frame: Optional[bytes] = None
        self._on_color = QColor("#FFFFFF")
        self._off_color = QColor("#000000")
        self.setFixedSize(self.sizeHint())

    def sizeHint(self) -> QSize:
        return QSize(SCREEN_WIDTH * self._scale, SCREEN_HEIGHT * self._scale)

    # @intent:responsibility 表示する画素配列を更新し、再描画を要求します。
    def set_frame(self, frame: bytes) -> None:
        self._frame = frame
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._off_color)
        if self._frame:
            scale = self._scale
            for index, pixel in enumerate(self._frame):
                if pixel:
                    y, x = divmod(index, SCREEN_WIDTH)
                    painter.fillRect(x * scale, y * scale, scale, scale, self._on_color)
        painter.end()
