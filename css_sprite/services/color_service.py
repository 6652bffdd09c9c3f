"""Разбор цвета фона.

Поддерживаются массив из 1–4 компонент (R, G, B, A) и строка `#RRGGBB`.
Alpha хранится в шкале GD (0..127, 127 = прозрачный); для Pillow её
переводит `to_pillow_rgba`.
"""
from __future__ import annotations

from typing import Optional, Sequence, Tuple, Union

from css_sprite.models.config import ALPHA_TRANSPARENT, TRANSPARENT_WHITE, Rgba
from css_sprite.models.errors import ConfigError

ColorSpec = Union[str, Sequence[int], None]

_LIMITS = (255, 255, 255, ALPHA_TRANSPARENT)


def resolve_color(spec: ColorSpec) -> Rgba:
    """Приводит описание цвета к `Rgba`; без описания — прозрачный белый."""
    if spec is None:
        return TRANSPARENT_WHITE
    if isinstance(spec, str):
        return _parse_hex(spec)
    return _parse_components(spec)


def _parse_hex(text: str) -> Rgba:
    digits = text.strip().lstrip("#").strip()
    if not digits:
        return TRANSPARENT_WHITE
    if len(digits) > 6:
        # TODO: форма RRGGBBAA
        raise ConfigError(f"Цвет с альфа-каналом в HEX не поддерживается: {text!r}", parameter="background")
    try:
        value = int(digits, 16)
    except ValueError as exc:
        raise ConfigError(f"Некорректный HEX-цвет: {text!r}", parameter="background") from exc
    blue = value & 0xFF
    value >>= 8
    green = value & 0xFF
    value >>= 8
    red = value & 0xFF
    return Rgba(red, green, blue, ALPHA_TRANSPARENT)


def _parse_components(components: Sequence[int]) -> Rgba:
    values = list(components)
    if not values:
        return TRANSPARENT_WHITE
    if len(values) > 4:
        raise ConfigError(f"Ожидается от 1 до 4 компонент цвета: {values!r}", parameter="background")
    parsed = []
    for value, limit in zip(values, _LIMITS):
        try:
            number = int(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Компонента цвета не число: {value!r}", parameter="background") from exc
        if not 0 <= number <= limit:
            raise ConfigError(f"Компонента цвета вне диапазона 0..{limit}: {number}", parameter="background")
        parsed.append(number)
    # недостающие компоненты по умолчанию 127
    parsed.extend([ALPHA_TRANSPARENT] * (4 - len(parsed)))
    return Rgba(*parsed)


def parse_color_option(text: Optional[str]) -> Rgba:
    """Цвет из командной строки: `#RRGGBB` или `r,g,b[,a]`."""
    if text is None:
        return TRANSPARENT_WHITE
    if "," in text:
        return resolve_color([part.strip() for part in text.split(",")])
    return resolve_color(text)


def to_pillow_rgba(color: Rgba) -> Tuple[int, int, int, int]:
    """Переводит alpha из шкалы GD (0..127) в 8-битную непрозрачность Pillow."""
    opacity = round(255 * (ALPHA_TRANSPARENT - color.alpha) / ALPHA_TRANSPARENT)
    return (color.red, color.green, color.blue, opacity)
