"""Поиск исходных изображений в каталоге."""
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from css_sprite.models.cell import IMAGE_EXTENSION_RE


class FileService:
    def find_images(self, directory: str | Path, exclude: Optional[str | Path] = None) -> List[Path]:
        """Возвращает файлы изображений в порядке перечисления каталога.

        Порядок не сортируется: он определяет раскладку спрайта.
        `exclude` — ранее экспортированный спрайт, который не должен
        попасть в новый.

        Raises:
            NotADirectoryError: если путь не является читаемым каталогом.
        """
        root = Path(directory)
        if not root.is_dir() or not os.access(root, os.R_OK):
            raise NotADirectoryError(f"Каталог недоступен: {root}")

        skip = Path(exclude).resolve() if exclude is not None else None
        found: List[Path] = []
        with os.scandir(root) as entries:
            for entry in entries:
                if not IMAGE_EXTENSION_RE.search(entry.name):
                    continue
                path = root / entry.name
                if skip is not None and path.resolve() == skip:
                    continue
                if not entry.is_file():
                    continue
                found.append(path)
        return found
