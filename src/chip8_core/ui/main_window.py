# src/chip8_core/ui/main_window.py
"""
メインウィンドウの実装。

インタプリタの外部協調者として、画面描画、キー入力の中継、QTimerによる実行の駆動、
ROMファイルのロードを担当します。
"""
import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QDockWidget, QFileDialog, QMessageBox
from PySide6.QtGui import QAction, QKeyEvent
from PySide6.QtCore import Qt, QTimer, QElapsedTimer, Slot

from chip8_core.config.builder import SystemBuilder
from chip8_core.config.models import EmulatorConfig
from chip8_core.core.errors import Chip8Error
from chip8_core.loader.loader import RomLoader
from .register_view import RegisterView
from .screen_view import ScreenView

logger = logging.getLogger(__name__)

# @intent:responsibility アプリケーションのメインウィンドウを定義し、UIの主要なコンポーネントを組み立てます。
class MainWindow(QMainWindow):
    def __init__(self, config: Optional[EmulatorConfig] = None, parent=None):
        super(MainWindow, self).__init__(parent)
        self.setWindowTitle("CHIP-8")

        self._config = config or EmulatorConfig()
        self.interpreter = SystemBuilder().build_system(self._config)
        self._rom_loader = RomLoader()

        self.screen_view = ScreenView(self._config.display.scale)
        self.setCentralWidget(self.screen_view)
        self._create_register_dock()
        self._create_menus()

        # @intent:rationale タイマーの減衰はフレーム周期に合わせ、1フレームにつき一度だけ行います。
        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(max(1, round(1000 / self._config.timer_hz)))
        self._frame_timer.timeout.connect(self._on_frame)
        self._elapsed = QElapsedTimer()

    def _create_menus(self):
        file_menu = self.menuBar().addMenu("File")

        self.load_rom_action = QAction("Load ROM...", self)
        self.load_rom_action.setShortcut("Ctrl+O")
        self.load_rom_action.triggered.connect(self._open_rom_dialog)
        file_menu.addAction(self.load_rom_action)

        self.reset_action = QAction("Reset", self)
        self.reset_action.setShortcut("Ctrl+R")
        self.reset_action.triggered.connect(self._reset)
        file_menu.addAction(self.reset_action)

    def _create_register_dock(self):
        self.register_view = RegisterView()
        self.register_view.set_interpreter(self.interpreter)
        dock = QDockWidget("Registers", self)
        dock.setWidget(self.register_view)
        self.addDockWidget(Qt.RightDockWidgetArea, dock)

    @Slot()
    def _open_rom_dialog(self):
        file_path, _ = QFileDialog.getOpenFileName(self, "Load ROM", "", "CHIP-8 ROM (*.ch8 *.c8);;All Files (*)")
        if file_path:
            self.load_rom(file_path)

    # @intent:responsibility ROMをロードして実行を開始します。失敗した場合はメッセージを表示して停止します。
    def load_rom(self, file_path: str) -> None:
        self._frame_timer.stop()
        try:
            self._rom_loader.load_rom(file_path, self.interpreter)
        except (OSError, ValueError, Chip8Error) as e:
            logger.warning("Failed to load ROM %s: %s", file_path, e)
            QMessageBox.critical(self, "Load Error", f"Failed to load ROM:\n{e}")
            return
        self.setWindowTitle(f"CHIP-8 - {file_path}")
        self._start()

    @Slot()
    def _reset(self):
        self.interpreter.reset()
        self._refresh()
        if self.interpreter.rom_loaded:
            self._start()

    def _start(self):
        self._refresh()
        self._elapsed.start()
        self._frame_timer.start()

    # @intent:responsibility 1フレーム分の処理（命令実行、タイマー減算、再描画）を行います。
    @Slot()
    def _on_frame(self):
        elapsed_seconds = self._elapsed.restart() / 1000.0
        try:
            self.interpreter.tick(elapsed_seconds)
        except Chip8Error as e:
            self._frame_timer.stop()
            self._refresh()
            QMessageBox.critical(self, "Execution Error", str(e))
            return
        self.interpreter.decrement_timers()
        self._refresh()

    def _refresh(self):
        self.screen_view.set_frame(self.interpreter.frame())
        self.register_view.update_registers()
        self.statusBar().showMessage("Sound" if self.interpreter.sound_active else "")

    def keyPressEvent(self, event: QKeyEvent):
        key = self._config.key_for(event.text())
        if key is None or event.isAutoRepeat():
            super().keyPressEvent(event)
            return
        self.interpreter.key_down(key)

    def keyReleaseEvent(self, event: QKeyEvent):
        key = self._config.key_for(event.text())
        if key is None or event.isAutoRepeat():
            super().keyReleaseEvent(event)
            return
        self.interpreter.key_up(key)
