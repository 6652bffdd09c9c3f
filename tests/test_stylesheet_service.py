from pathlib import Path

from css_sprite.models.cell import Cell
from css_sprite.models.config import PackerConfig
from css_sprite.services.stylesheet_service import build_stylesheet


def _cell(name, x=0, y=0, width=10, height=10):
    return Cell(width=width, height=height, x=x, y=y, source_path=Path(f"{name}.png"), name=name)


VERTICAL = [_cell("a", y=0), _cell("b", y=12), _cell("c", y=24)]


def test_base_rule_defaults():
    lines = build_stylesheet("sprite", [], (0, 0), PackerConfig())
    assert lines == [
        ".sprite { background: url(sprite.png) no-repeat; display: inline-block; "
        "min-width: 0px; min-height: 0px; }"
    ]


def test_absolute_positions():
    lines = build_stylesheet("icons", VERTICAL, (10, 34), PackerConfig(padding=2))
    assert lines[0].endswith("min-width: 0px; min-height: 0px; }")
    assert lines[0].startswith(".icons { background: url(icons.png) no-repeat;")
    assert lines[1:] == [
        ".icons-a { background-position: 0 0; }",
        ".icons-b { background-position: 0 -12px; }",
        ".icons-c { background-position: 0 -24px; }",
    ]


def test_scaled_minimums_and_positions():
    config = PackerConfig(min_width=15, min_height=7, scale=1.5)
    cells = [_cell("a"), _cell("b", x=15, y=3)]
    lines = build_stylesheet("s", cells, (25, 13), config)

    assert "min-width: 23px; min-height: 11px;" in lines[0]
    assert lines[2] == ".s-b { background-position: -23px -5px; }"


def test_relative_vertical():
    config = PackerConfig(padding=2, min_height=10, relative=True)
    lines = build_stylesheet("sprite", VERTICAL, (10, 34), config)

    assert "min-height: 10px;" in lines[0]
    assert lines[1:] == [
        ".sprite-a { background-position: 0 0; }",
        ".sprite-b { background-position: 0 50%; }",
        ".sprite-c { background-position: 0 bottom; }",
    ]


def test_relative_horizontal_snaps_to_right():
    config = PackerConfig(horizontal=True, min_width=20, relative=True)
    cells = [_cell("a", x=0, width=20), _cell("b", x=20, width=20), _cell("c", x=40, width=20)]
    lines = build_stylesheet("sprite", cells, (60, 10), config)

    assert [line.split(": ")[1] for line in lines[1:]] == ["0 0; }", "50% 0; }", "right 0; }"]
    assert "100%" not in "".join(lines)


def test_relative_fraction_formatting():
    config = PackerConfig(horizontal=True, min_width=10, relative=True)
    cells = [_cell("a", x=0), _cell("b", x=10), _cell("c", x=30)]
    lines = build_stylesheet("sprite", cells, (40, 10), config)

    # span is 40 - 10 = 30
    assert lines[2] == ".sprite-b { background-position: 33.3333% 0; }"
    assert lines[3] == ".sprite-c { background-position: right 0; }"


def test_duplicate_names_are_emitted_as_is():
    cells = [_cell("a"), _cell("a", y=11)]
    lines = build_stylesheet("sprite", cells, (10, 21), PackerConfig())
    assert lines[1].startswith(".sprite-a ")
    assert lines[2] == ".sprite-a { background-position: 0 -11px; }"
