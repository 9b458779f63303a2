import logging
import yaml
from typing import Dict, Any

from chip8_core.core.registers import KEY_COUNT
from .models import EmulatorConfig, QuirkConfig, DisplayConfig, DEFAULT_KEYMAP

logger = logging.getLogger(__name__)

class ConfigLoader:
    def load_from_file(self, path: str) -> EmulatorConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        logger.info("Loaded configuration from %s", path)
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration root must be a mapping: {path}")
        return self._parse_config(data)

    def _parse_config(self, data: Dict[str, Any]) -> EmulatorConfig:
        instructions_per_second = self._parse_int(data.get("instructions_per_second", 700))
        timer_hz = self._parse_int(data.get("timer_hz", 60))
        if instructions_per_second <= 0 or timer_hz <= 0:
            raise ValueError("instructions_per_second and timer_hz must be positive integers.")

        quirk_data = self._parse_section(data, "quirks")
        quirks = QuirkConfig(
            shift_uses_vy=self._parse_bool(quirk_data.get("shift_uses_vy", False)),
            load_store_increments_i=self._parse_bool(quirk_data.get("load_store_increments_i", False)),
            bulk_transfer_inclusive=self._parse_bool(quirk_data.get("bulk_transfer_inclusive", True)),
        )

        display_data = self._parse_section(data, "display")
        display = DisplayConfig(scale=self._parse_int(display_data.get("scale", 10)))

        # Keymap: 物理キーラベル -> 論理キー番号
        keymap = dict(DEFAULT_KEYMAP)
        keymap_data = data.get("keymap")
        if keymap_data is not None:
            keymap = {}
            if not isinstance(keymap_data, dict):
                raise ValueError("Section 'keymap' must be a mapping.")
            for label, key_value in keymap_data.items():
                key = self._parse_int(key_value)
                if not 0 <= key < KEY_COUNT:
                    raise ValueError(f"Keymap entry '{label}' targets invalid key {key}")
                keymap[str(label).upper()] = key

        return EmulatorConfig(
            instructions_per_second=instructions_per_second,
            timer_hz=timer_hz,
            quirks=quirks,
            display=display,
            keymap=keymap,
        )

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")

    def _parse_bool(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        raise ValueError(f"Invalid boolean format: {value}")

    # @intent:utility_function 省略または空のセクションは空の辞書として扱います。
    def _parse_section(self, data: Dict[str, Any], name: str) -> Dict[str, Any]:
        section = data.get(name) or {}
        if not isinstance(section, dict):
            raise ValueError(f"Section '{name}' must be a mapping.")
        return section
