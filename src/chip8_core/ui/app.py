# src/chip8_core/ui/app.py
"""
Qtアプリケーションのエントリポイント。
アプリケーションを初期化し、メインウィンドウを起動します。
"""
import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication

from chip8_core.config.loader import ConfigLoader
from .main_window import MainWindow

def main():
    parser = argparse.ArgumentParser(description="CHIP-8 interpreter")
    parser.add_argument("rom", nargs="?", help="ROM file to load on startup")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args, qt_args = parser.parse_known_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    config = ConfigLoader().load_from_file(args.config) if args.config else None

    app = QApplication([sys.argv[0]] + qt_args)
    main_win = MainWindow(config)
    main_win.show()
    if args.rom:
        main_win.load_rom(args.rom)
    sys.exit(app.exec())

if __name__ == '__main__':
    main()
