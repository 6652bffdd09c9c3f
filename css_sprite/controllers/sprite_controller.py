"""Контроллер: оркестрация одного запуска генератора спрайтов.

SOLID:
- SRP: класс связывает поиск файлов, упаковщик и сохранение результата
  (без логики раскладки и рисования).
- DIP: зависит от сервисов как от ролей; конкретные реализации подставляются.
Clean Code:
- Вся диагностика пишется здесь; сервисы ядра не логируют.
"""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from css_sprite.models.cell import Cell
from css_sprite.models.config import PackerConfig
from css_sprite.models.errors import NoImagesError
from css_sprite.services.file_service import FileService
from css_sprite.services.image_service import ImageService
from css_sprite.services.packer_service import SpritePacker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpriteResult:
    """Итог запуска: путь к PNG, CSS-строки и размеры."""
    target: Path
    css: List[str]
    cells: List[Cell]
    canvas_size: Tuple[int, int]
    image_size: Tuple[int, int]


@dataclass
class SpriteController:
    """Выполняет полный цикл: поиск -> раскладка -> масштаб -> сборка -> сохранение.

    Ответственности:
    - Перечисление изображений каталога через `FileService`.
    - Раскладка через `SpritePacker` в порядке перечисления.
    - Сохранение PNG через `ImageService` и генерация CSS.
    """
    directory: Path
    prefix: str = "sprite"
    config: PackerConfig = field(default_factory=PackerConfig)
    scale: Optional[float] = None

    _file_service: FileService = FileService()
    _image_service: ImageService = ImageService()

    @property
    def target(self) -> Path:
        return Path(self.directory) / f"{self.prefix}.png"

    def run(self) -> SpriteResult:
        """Собирает спрайт и возвращает результат.

        Raises:
            NotADirectoryError: если каталог недоступен.
            NoImagesError: если в каталоге нет изображений.
            SpriteError: любая ошибка упаковщика (фатальна для запуска).
        """
        target = self.target
        files = self._file_service.find_images(self.directory, exclude=target)
        if not files:
            raise NoImagesError(f"no image files found in {self.directory}", self.directory)
        logger.info("Found %d image(s) in %s", len(files), self.directory)

        packer = SpritePacker(self.config, image_service=self._image_service)
        for path in files:
            cell = packer.add_file(path)
            logger.debug("Placed %s (%dx%d) at %d,%d", cell.name, cell.width, cell.height, cell.x, cell.y)
        self._warn_duplicates(packer.cells)

        # scale is applied after layout, as a read-time projection
        packer.set_scale(self.scale)

        canvas = packer.compile()
        self._image_service.save_png(canvas, target)
        logger.info("Sprite %dx%d saved to %s", canvas.width, canvas.height, target)

        return SpriteResult(
            target=target,
            css=packer.get_stylesheet(self.prefix),
            cells=packer.cells,
            canvas_size=packer.canvas_size,
            image_size=canvas.size,
        )

    # ---- Helpers ----
    def _warn_duplicates(self, cells: List[Cell]) -> None:
        counts = Counter(cell.name for cell in cells)
        for name, count in counts.items():
            if count > 1:
                logger.warning("Name %r is used by %d images; later CSS rules override earlier ones", name, count)
