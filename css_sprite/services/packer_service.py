"""Упаковщик спрайта: раскладка ячеек по сетке и учёт границ холста.

Принципы:
- SRP: упаковщик хранит курсор, сетку и границы; CSS и рисование
  делегируются `stylesheet_service` и `Compositor`.
- Двухфазный жизненный цикл: открыт (add_file, сеттеры) -> скомпилирован.
- Вся раскладка ведётся в немасштабированном пространстве.
"""
from __future__ import annotations

import dataclasses
import math
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from PIL import Image

from css_sprite.models.cell import Cell, PlacedCell, cell_name
from css_sprite.models.config import PackerConfig
from css_sprite.models.errors import PackerStateError
from css_sprite.services.color_service import ColorSpec, resolve_color
from css_sprite.services.compositor_service import Compositor
from css_sprite.services.image_service import ImageService
from css_sprite.services.stylesheet_service import build_stylesheet


class SpritePacker:
    """Последовательно размещает изображения и собирает из них спрайт.

    Курсор движется по основной оси (вправо при горизонтальной раскладке,
    вниз при вертикальной). При `wrap > 0` после `wrap` элементов полоса
    закрывается: курсор основной оси сбрасывается в 0, а вторичная ось
    сдвигается на наибольший шаг, встреченный в закрытой полосе.
    """
    def __init__(
        self,
        config: Optional[PackerConfig] = None,
        image_service: Optional[ImageService] = None,
        compositor: Optional[Compositor] = None,
    ) -> None:
        self._config = config or PackerConfig()
        self._image_service = image_service or ImageService()
        self._compositor = compositor or Compositor(self._image_service)
        self._padding = self._config.padding
        self._scale_set = False
        self._compiled = False

        # cursor
        self._x = 0
        self._y = 0
        self._band = 0
        self._band_count = 0
        self._band_pitch = 0

        # canvas bounds
        self._width = 0
        self._height = 0
        self._grid: List[PlacedCell] = []

    # ---- Properties ----
    @property
    def config(self) -> PackerConfig:
        return self._config

    @property
    def padding(self) -> int:
        """Отступ, применяемый к следующим ячейкам."""
        return self._padding

    @property
    def compiled(self) -> bool:
        return self._compiled

    @property
    def grid(self) -> Sequence[PlacedCell]:
        return tuple(self._grid)

    @property
    def cells(self) -> List[Cell]:
        return [placed.cell for placed in self._grid]

    @property
    def canvas_size(self) -> Tuple[int, int]:
        """Немасштабированный размер холста (ширина, высота)."""
        return self._width, self._height

    # ---- Setters (до compile) ----
    def set_scale(self, factor: Optional[float]) -> float:
        """Задаёт масштаб вывода.

        При первом коэффициенте, отличном от 1, отступ для последующих ячеек
        делится на него с округлением вверх, чтобы отступ после масштабирования
        был близок к заданному. Уже размещённые ячейки не сдвигаются.
        """
        self._ensure_open()
        if factor is None or factor == 1:
            return self._config.scale
        self._config = dataclasses.replace(self._config, scale=float(factor))
        if not self._scale_set:
            self._padding = int(math.ceil(self._padding / self._config.scale))
            self._scale_set = True
        return self._config.scale

    def set_relative(self, relative: bool) -> None:
        """Включает относительные позиции; проверка параметров выполняется сразу."""
        self._ensure_open()
        self._config = dataclasses.replace(self._config, relative=bool(relative))

    def set_background(self, color: ColorSpec) -> None:
        self._ensure_open()
        self._config = dataclasses.replace(self._config, background=resolve_color(color))

    # ---- Operations ----
    def add_file(self, file_path: str | Path) -> Cell:
        """Размещает изображение в текущей точке сетки и сдвигает курсор.

        Raises:
            InvalidImageError: если файл не распознан как изображение.
            PackerStateError: если спрайт уже скомпилирован.
        """
        self._ensure_open()
        path = Path(file_path)
        header = self._image_service.probe(path)
        cell = Cell(
            width=header.width,
            height=header.height,
            x=self._x,
            y=self._y,
            source_path=path,
            name=cell_name(path),
            format=header.format,
        )
        if self._config.horizontal:
            row, column = self._band, self._band_count
        else:
            row, column = self._band_count, self._band
        self._grid.append(PlacedCell(cell=cell, row=row, column=column))

        # bounds grow by the image itself, not by its pitch
        self._width = max(self._width, cell.right)
        self._height = max(self._height, cell.bottom)

        pitch_w, pitch_h = self._pitch(cell)
        self._advance(pitch_w, pitch_h)
        return cell

    def add_files(self, paths: Iterable[str | Path]) -> List[Cell]:
        """Добавляет файлы в переданном порядке (без сортировки)."""
        return [self.add_file(path) for path in paths]

    def get_stylesheet(self, prefix: str = "sprite") -> List[str]:
        return build_stylesheet(prefix, self.cells, self.canvas_size, self._config)

    def compile(self) -> Image.Image:
        """Собирает итоговый холст; после вызова упаковщик закрыт.

        Raises:
            PackerStateError: при повторном вызове.
            InvalidImageError, CompositeError: при ошибке рисования ячейки.
        """
        self._ensure_open()
        self._compiled = True
        return self._compositor.compose(self.cells, self.canvas_size, self._config)

    # ---- Helpers ----
    def _ensure_open(self) -> None:
        if self._compiled:
            raise PackerStateError("Спрайт уже скомпилирован")

    def _pitch(self, cell: Cell) -> Tuple[int, int]:
        # padding is added before the minimum comparison
        width = cell.width + self._padding
        height = cell.height + self._padding
        if self._config.min_width:
            width = max(self._config.min_width, width)
        if self._config.min_height:
            height = max(self._config.min_height, height)
        return width, height

    def _advance(self, pitch_w: int, pitch_h: int) -> None:
        if self._config.horizontal:
            primary, secondary = pitch_w, pitch_h
        else:
            primary, secondary = pitch_h, pitch_w

        self._band_count += 1
        self._band_pitch = max(self._band_pitch, secondary)
        wrap = self._config.wrap
        if wrap and self._band_count >= wrap:
            self._move(primary=None, secondary=self._band_pitch)
            self._band += 1
            self._band_count = 0
            self._band_pitch = 0
        else:
            self._move(primary=primary, secondary=0)

    def _move(self, primary: Optional[int], secondary: int) -> None:
        # primary=None resets the primary axis to 0
        if self._config.horizontal:
            self._x = 0 if primary is None else self._x + primary
            self._y += secondary
        else:
            self._y = 0 if primary is None else self._y + primary
            self._x += secondary


def configure(
    padding: int = 1,
    min_width: int = 0,
    min_height: int = 0,
    horizontal: bool = False,
    wrap: int = 0,
    scale: float = 1.0,
    relative: bool = False,
    color: ColorSpec = None,
    image_service: Optional[ImageService] = None,
) -> SpritePacker:
    """Проверяет параметры и создаёт упаковщик.

    Raises:
        ConfigError: при недопустимой комбинации параметров.
    """
    config = PackerConfig(
        padding=padding,
        min_width=min_width,
        min_height=min_height,
        horizontal=horizontal,
        wrap=wrap,
        scale=scale,
        relative=relative,
        background=resolve_color(color),
    )
    return SpritePacker(config, image_service=image_service)
