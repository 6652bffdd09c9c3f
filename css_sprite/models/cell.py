"""Ячейка спрайта и её положение в сетке.

Принципы:
- SRP: только структура данных; координаты считает упаковщик.
- Явный доступ к полям вместо словарей с однобуквенными ключами.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

IMAGE_EXTENSION_RE = re.compile(r"\.(png|jpe?g|gif)$", re.IGNORECASE)


def cell_name(path: Path | str) -> str:
    """Имя файла без расширения изображения: суффикс CSS-класса."""
    return IMAGE_EXTENSION_RE.sub("", Path(path).name)


@dataclass(frozen=True)
class Cell:
    """Одно размещённое изображение.

    Fields:
        width: Естественная ширина, px (без масштаба).
        height: Естественная высота, px (без масштаба).
        x: Смещение левого края на немасштабированном холсте.
        y: Смещение верхнего края на немасштабированном холсте.
        source_path: Ссылка на исходный файл (ячейка им не владеет).
        name: Имя для CSS; уникальность не проверяется.
        format: Формат, определённый по заголовку файла.
    """
    width: int
    height: int
    x: int
    y: int
    source_path: Path
    name: str
    format: Optional[str] = None

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class PlacedCell:
    """Ячейка вместе с индексами строки и столбца сетки."""
    cell: Cell
    row: int
    column: int
