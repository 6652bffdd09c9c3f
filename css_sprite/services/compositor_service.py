"""Сборка итогового холста спрайта.

Принципы:
- SRP: только рисование; координаты и порядок задаёт упаковщик.
- DIP: декодирование делегируется `ImageService`.
"""
from __future__ import annotations

from typing import Iterable, Optional, Tuple

from PIL import Image

from css_sprite.models.cell import Cell
from css_sprite.models.config import PackerConfig
from css_sprite.models.errors import CompositeError
from css_sprite.services.color_service import to_pillow_rgba
from css_sprite.services.geometry_service import Scaler
from css_sprite.services.image_service import ImageService


class Compositor:
    def __init__(self, image_service: Optional[ImageService] = None) -> None:
        self._image_service = image_service or ImageService()

    def compose(self, cells: Iterable[Cell], canvas_size: Tuple[int, int], config: PackerConfig) -> Image.Image:
        """Создаёт RGBA-холст, заливает фоном и рисует ячейки в порядке сетки.

        Каждое изображение масштабируется усреднением по площади (BOX).
        Холст не сохраняется на диск.

        Raises:
            InvalidImageError: если исходный файл не декодируется.
            CompositeError: если изображение не удалось нарисовать.
        """
        scale = Scaler(config.scale)
        canvas_w, canvas_h = canvas_size
        size = (scale(canvas_w), scale(canvas_h))
        canvas = Image.new("RGBA", size, to_pillow_rgba(config.background))

        for cell in cells:
            self._draw(canvas, cell, scale)
        return canvas

    def _draw(self, canvas: Image.Image, cell: Cell, scale: Scaler) -> None:
        target = (scale(cell.width), scale(cell.height))
        if target[0] <= 0 or target[1] <= 0:
            raise CompositeError(f"Пустой размер для {cell.source_path}: {target}", cell.source_path)

        dest = (scale(cell.x), scale(cell.y))
        # ceil по отдельности может выйти за холст на 1 px
        visible = (min(target[0], canvas.width - dest[0]), min(target[1], canvas.height - dest[1]))
        if visible[0] <= 0 or visible[1] <= 0:
            raise CompositeError(f"Изображение {cell.source_path} не попадает на холст {canvas.size}", cell.source_path)

        source = self._image_service.load_image(cell.source_path).pil_image
        try:
            if source.size != target:
                source = source.resize(target, Image.Resampling.BOX)
            if visible != target:
                source = source.crop((0, 0) + visible)
            canvas.alpha_composite(source, dest=dest)
        except (ValueError, OSError) as exc:
            raise CompositeError(f"Не удалось нарисовать {cell.source_path}", cell.source_path) from exc
