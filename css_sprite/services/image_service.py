"""Чтение заголовков, декодирование и сохранение изображений.

Принципы:
- SRP: класс отвечает только за обмен изображениями с диском.
- OCP: новые источники (стрим, URL) можно добавить отдельными методами.
- LSP/ISP: возвращает `ImageHeader` / `ImageData` с предсказуемыми полями.
"""
from __future__ import annotations

from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from css_sprite.models.errors import InvalidImageError
from css_sprite.models.image_model import ImageData, ImageHeader


class ImageService:
    def probe(self, file_path: str | Path) -> ImageHeader:
        """Читает размеры и формат из заголовка, не декодируя пиксели.

        Raises:
            InvalidImageError: если файл не читается или не распознан как изображение.
        """
        path = Path(file_path)
        try:
            with Image.open(path) as pil_image:
                width, height = pil_image.size
                fmt = pil_image.format
        except UnidentifiedImageError as exc:
            raise InvalidImageError(f"Файл не является изображением: {path}", path) from exc
        except OSError as exc:
            raise InvalidImageError(f"Не удалось прочитать файл: {path}", path) from exc
        return ImageHeader(width=width, height=height, format=fmt)

    def load_image(self, file_path: str | Path) -> ImageData:
        """Читает файл целиком и декодирует его из байтов.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA), размерами и форматом.

        Raises:
            InvalidImageError: если файл не читается или не распознан как изображение.
        """
        path = Path(file_path)
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise InvalidImageError(f"Не удалось прочитать файл: {path}", path) from exc

        try:
            with Image.open(BytesIO(raw)) as decoded:
                fmt = decoded.format
                pil_image = decoded.convert("RGBA")
        except (UnidentifiedImageError, OSError) as exc:
            raise InvalidImageError(f"Файл не является изображением: {path}", path) from exc

        width, height = pil_image.size
        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            format=fmt,
            size_bytes=len(raw),
        )

    def save_png(self, image: Image.Image, file_path: str | Path) -> Path:
        """Сохраняет холст в PNG с альфа-каналом."""
        path = Path(file_path)
        image.save(path, "PNG")
        return path
