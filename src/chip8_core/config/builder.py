import random
from typing import Optional

from chip8_core.core.interpreter import Chip8Interpreter
from .models import EmulatorConfig

# @intent:responsibility 構成（Config）に基づいてインタプリタを生成します。
class SystemBuilder:
    def build_system(self, config: Optional[EmulatorConfig] = None,
                     rng: Optional[random.Random] = None) -> Chip8Interpreter:
        return Chip8Interpreter(config or EmulatorConfig(), rng=rng)
