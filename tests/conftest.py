from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Tuple

import pytest
from PIL import Image

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    """Пишет однотонное изображение; формат определяется по расширению."""
    def _make(
        name: str,
        size: Tuple[int, int] = (10, 10),
        color: Tuple[int, int, int, int] = RED,
        directory: Optional[Path] = None,
    ) -> Path:
        folder = directory or tmp_path
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / name
        image = Image.new("RGBA", size, color)
        if path.suffix.lower() in (".jpg", ".jpeg", ".gif"):
            image = image.convert("RGB")
        image.save(path)
        return path
    return _make
