"""Иерархия исключений генератора спрайтов.

Все ошибки фатальны для текущего запуска: раскладка зависит от порядка файлов,
поэтому частичный спрайт был бы молча неверным.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class SpriteError(Exception):
    """Базовое исключение пакета."""


class ConfigError(SpriteError, ValueError):
    """Недопустимая комбинация параметров упаковщика."""

    def __init__(self, message: str, parameter: Optional[str] = None) -> None:
        super().__init__(message)
        self.parameter = parameter


class InvalidImageError(SpriteError, ValueError):
    """Файл не читается или не распознан как растровое изображение."""

    def __init__(self, message: str, path: Path | str) -> None:
        super().__init__(message)
        self.path = Path(path)


class CompositeError(SpriteError, RuntimeError):
    """Не удалось нарисовать исходное изображение на холсте."""

    def __init__(self, message: str, path: Path | str) -> None:
        super().__init__(message)
        self.path = Path(path)


class PackerStateError(SpriteError, RuntimeError):
    """Операция недоступна в текущем состоянии упаковщика (после compile)."""


class NoImagesError(SpriteError):
    """В каталоге не найдено ни одного изображения."""

    def __init__(self, message: str, path: Path | str) -> None:
        super().__init__(message)
        self.path = Path(path)
