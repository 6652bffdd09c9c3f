"""Параметры упаковщика и цвет фона.

Принципы:
- SRP: хранение и проверка параметров, без логики раскладки.
- Неизменяемость: изменения делаются через `dataclasses.replace`, что
  повторно запускает проверку в `__post_init__`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from css_sprite.models.errors import ConfigError

# alpha в шкале GD: 0 = непрозрачный, 127 = полностью прозрачный
ALPHA_TRANSPARENT = 127


class Rgba(NamedTuple):
    red: int
    green: int
    blue: int
    alpha: int = ALPHA_TRANSPARENT


TRANSPARENT_WHITE = Rgba(0xFF, 0xFF, 0xFF, ALPHA_TRANSPARENT)


@dataclass(frozen=True)
class PackerConfig:
    """Параметры раскладки и вывода.

    Fields:
        padding: Отступ между ячейками, px (в немасштабированном пространстве).
        min_width: Минимальная ширина ячейки, 0 = не задана.
        min_height: Минимальная высота ячейки, 0 = не задана.
        horizontal: Раскладка по строке (True) или по столбцу (False).
        wrap: Число элементов в полосе до переноса, 0 = без переноса.
        scale: Коэффициент масштабирования вывода, > 0.
        relative: Выводить позиции в процентах вместо пикселей.
        background: Цвет заливки холста.

    Raises:
        ConfigError: при недопустимом значении или комбинации параметров.
    """
    padding: int = 1
    min_width: int = 0
    min_height: int = 0
    horizontal: bool = False
    wrap: int = 0
    scale: float = 1.0
    relative: bool = False
    background: Rgba = field(default=TRANSPARENT_WHITE)

    def __post_init__(self) -> None:
        for name in ("padding", "min_width", "min_height", "wrap"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} должен быть целым числом: {value!r}", parameter=name)
            if value < 0:
                raise ConfigError(f"{name} не может быть отрицательным: {value}", parameter=name)
        if not self.scale > 0:
            raise ConfigError(f"scale должен быть положительным: {self.scale!r}", parameter="scale")
        if self.relative:
            self._check_relative()

    def _check_relative(self) -> None:
        # относительные смещения требуют известного шага по оси переноса
        wraps = self.wrap > 0
        if (self.horizontal or wraps) and not self.min_width:
            raise ConfigError(
                "Для относительных позиций нужна минимальная ширина ячейки (min_width)",
                parameter="min_width",
            )
        if (not self.horizontal or wraps) and not self.min_height:
            raise ConfigError(
                "Для относительных позиций нужна минимальная высота ячейки (min_height)",
                parameter="min_height",
            )
