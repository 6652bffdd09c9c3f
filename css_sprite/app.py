from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from css_sprite.controllers.sprite_controller import SpriteController
from css_sprite.models.errors import SpriteError
from css_sprite.ui import cli


class SpriteApp:
    def __init__(self, argv: Optional[List[str]] = None) -> None:
        self._args = cli.parse_args(argv)
        cli.configure_logging(self._args.verbose)

    def run(self) -> int:
        args = self._args
        directory = Path(args.dir.rstrip("\n/") or ".")
        try:
            config = cli.build_config(args)
            controller = SpriteController(directory=directory, prefix=args.name, config=config, scale=args.scale)
            result = controller.run()
        except NotADirectoryError as exc:
            cli.print_error(str(exc))
            return 2
        except SpriteError as exc:
            cli.print_error(str(exc))
            return 1

        cli.print_result(result)
        return 0
