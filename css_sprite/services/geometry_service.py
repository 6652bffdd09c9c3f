"""Масштабирование координат и размеров."""
from __future__ import annotations

import math
from typing import Optional

from css_sprite.models.errors import ConfigError


class Scaler:
    """Переводит немасштабированную величину в масштабированную.

    Округление всегда вверх; `scale(0) == 0` при любом коэффициенте.
    """
    def __init__(self, factor: Optional[float] = None) -> None:
        if factor is not None and not factor > 0:
            raise ConfigError(f"scale должен быть положительным: {factor!r}", parameter="scale")
        self.factor = factor

    @property
    def is_identity(self) -> bool:
        return self.factor is None or self.factor == 1

    def __call__(self, n: int) -> int:
        if self.is_identity or n == 0:
            return n
        # round() убирает шум float: 1.1 * 10 == 11.000000000000002
        return int(math.ceil(round(self.factor * n, 9)))
