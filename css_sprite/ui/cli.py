"""Командная строка: разбор флагов, настройка логирования и вывод результата.

Принципы:
- SRP: управляет только вводом/выводом, не содержит алгоритмов.
- ISP: отдаёт параметры через `build_config`, результат печатает `print_result`.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from css_sprite.controllers.sprite_controller import SpriteResult
from css_sprite.models.config import PackerConfig
from css_sprite.services.color_service import parse_color_option


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="css-sprite",
        description="Pack a directory of images into a PNG sprite and print matching CSS.",
    )
    p.add_argument("-d", "--dir", default=".", help="Directory containing images, defaults to cwd")
    p.add_argument(
        "-w", "--width", type=int, default=0,
        help="Minimum width of each cell, defaults to width of image + padding",
    )
    p.add_argument(
        "--height", type=int, default=0,
        help="Minimum height of each cell, defaults to height of image + padding",
    )
    p.add_argument("-p", "--padding", type=int, default=1, help="Minimum distance between items, defaults to 1")
    p.add_argument("-z", "--horiz", action="store_true", help="Lay out horizontally, defaults to vertical")
    p.add_argument("-n", "--name", default="sprite", help='CSS class prefix and file name, defaults to "sprite"')
    p.add_argument("--wrap", type=int, default=0, help="Maximum no. of items per row or column, 0 = no wrapping")
    p.add_argument("-s", "--scale", type=float, default=None, help="Scaling of final images, defaults to 1")
    p.add_argument(
        "-r", "--relative", action="store_true",
        help="Emit percentage positions (requires --width and/or --height)",
    )
    p.add_argument(
        "-b", "--background", default=None,
        help='Background color, "#RRGGBB" or "r,g,b[,a]" (alpha 0..127), defaults to transparent',
    )
    p.add_argument("-v", "--verbose", action="count", default=0, help="Log progress (-vv for every placement)")
    return p


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def build_config(args: argparse.Namespace) -> PackerConfig:
    """Собирает `PackerConfig` из флагов; масштаб применяется позже, после раскладки.

    Raises:
        ConfigError: при недопустимой комбинации флагов.
    """
    return PackerConfig(
        padding=args.padding,
        min_width=args.width,
        min_height=args.height,
        horizontal=args.horiz,
        wrap=args.wrap,
        relative=args.relative,
        background=parse_color_option(args.background),
    )


def print_result(result: SpriteResult, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    print(f"/* sprite saved to {result.target} */", file=out)
    for line in result.css:
        print(line, file=out)


def print_error(message: str, err: Optional[TextIO] = None) -> None:
    err = err or sys.stderr
    print(f"error: {message}", file=err)
