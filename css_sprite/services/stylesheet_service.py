"""Генерация CSS-правил для спрайта.

Принципы:
- SRP: только формирование строк; раскладку получает готовой.
- Чистый код: абсолютный и относительный режимы — отдельные функции позиций.
"""
from __future__ import annotations

from typing import Iterable, List, Tuple

from css_sprite.models.cell import Cell
from css_sprite.models.config import PackerConfig
from css_sprite.services.geometry_service import Scaler

BASE_RULE = (
    ".{prefix} {{ background: url({prefix}.png) no-repeat; display: inline-block; "
    "min-width: {width}px; min-height: {height}px; }}"
)
CELL_RULE = ".{prefix}-{name} {{ background-position: {x} {y}; }}"


def _absolute(offset: int) -> str:
    return "0" if offset == 0 else f"-{offset}px"


def _relative(offset: int, span: int, edge: str) -> str:
    if offset == 0 or span == 0:
        return "0"
    if offset == span:
        return edge
    return f"{100 * offset / span:g}%"


def build_stylesheet(
    prefix: str,
    cells: Iterable[Cell],
    canvas_size: Tuple[int, int],
    config: PackerConfig,
) -> List[str]:
    """Возвращает базовое правило и по одному правилу на ячейку.

    Args:
        prefix: Имя CSS-класса и файла спрайта.
        cells: Ячейки в порядке сетки.
        canvas_size: Немасштабированный размер холста (ширина, высота).
        config: Параметры упаковщика (масштаб, минимумы, режим позиций).
    """
    scale = Scaler(config.scale)
    min_w = scale(config.min_width) if config.min_width else 0
    min_h = scale(config.min_height) if config.min_height else 0
    lines = [BASE_RULE.format(prefix=prefix, width=min_w, height=min_h)]

    canvas_w, canvas_h = canvas_size
    span_w = scale(canvas_w - min_w)
    span_h = scale(canvas_h - min_h)
    for cell in cells:
        x, y = scale(cell.x), scale(cell.y)
        if config.relative:
            pos_x = _relative(x, span_w, "right")
            pos_y = _relative(y, span_h, "bottom")
        else:
            pos_x, pos_y = _absolute(x), _absolute(y)
        lines.append(CELL_RULE.format(prefix=prefix, name=cell.name, x=pos_x, y=pos_y))
    return lines
