"""Модели данных для исходных изображений.

Принципы:
- SRP: только структура данных, без логики декодирования.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, Optional

from PIL import Image


class ImageHeader(NamedTuple):
    """Результат чтения заголовка: размеры и формат без декодирования пикселей."""
    width: int
    height: int
    format: Optional[str]


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель декодированного изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Декодированное изображение PIL (всегда RGBA).
        width: Ширина, px.
        height: Высота, px.
        format: Формат PIL, например "PNG".
        size_bytes: Размер прочитанных данных.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    format: Optional[str]
    size_bytes: int
