"""Точка входа в приложение."""
from typing import List, Optional

from css_sprite.app import SpriteApp


def main(argv: Optional[List[str]] = None) -> int:
    """Разбирает аргументы, собирает спрайт и возвращает код выхода."""
    app = SpriteApp(argv)
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
