import logging

import pytest
from PIL import Image

from css_sprite.controllers.sprite_controller import SpriteController
from css_sprite.main import main
from css_sprite.models.config import PackerConfig
from css_sprite.models.errors import NoImagesError

from conftest import BLUE


@pytest.fixture
def icons(tmp_path, make_image):
    folder = tmp_path / "icons"
    for name in ("a.png", "b.png", "c.png"):
        make_image(name, directory=folder)
    return folder


def test_main_writes_sprite_and_prints_css(icons, capsys):
    assert main(["-d", str(icons), "-p", "2"]) == 0

    out = capsys.readouterr().out.splitlines()
    target = icons / "sprite.png"
    assert out[0] == f"/* sprite saved to {target} */"
    assert out[1].startswith(".sprite { background: url(sprite.png) no-repeat;")
    assert sorted(line.split()[0] for line in out[2:]) == [".sprite-a", ".sprite-b", ".sprite-c"]
    with Image.open(target) as sprite:
        assert sprite.size == (10, 34)


def test_main_scale_and_name(icons, capsys):
    assert main(["--dir", str(icons), "--padding", "2", "--scale", "2", "--name", "icons"]) == 0

    out = capsys.readouterr().out
    offsets = sorted(line.split("position: ")[1] for line in out.splitlines()[2:])
    assert offsets == ["0 -24px; }", "0 -48px; }", "0 0; }"]
    with Image.open(icons / "icons.png") as sprite:
        assert sprite.size == (20, 68)


def test_main_skips_previous_sprite(icons, capsys):
    assert main(["-d", str(icons), "-z"]) == 0
    assert main(["-d", str(icons), "-z"]) == 0

    out = capsys.readouterr().out
    assert ".sprite-sprite" not in out
    with Image.open(icons / "sprite.png") as sprite:
        assert sprite.size == (32, 10)


def test_main_no_images(tmp_path, capsys):
    assert main(["-d", str(tmp_path)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error: no image files found in")
    assert str(tmp_path) in err


def test_main_missing_directory(tmp_path, capsys):
    assert main(["-d", str(tmp_path / "missing")]) == 2
    assert capsys.readouterr().err.startswith("error:")


def test_main_relative_requires_width(icons, capsys):
    assert main(["-d", str(icons), "-z", "-r"]) == 1
    assert "min_width" in capsys.readouterr().err
    assert not (icons / "sprite.png").exists()


def test_main_bad_background(icons, capsys):
    assert main(["-d", str(icons), "-b", "#12345678"]) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_controller_result(icons):
    result = SpriteController(directory=icons, prefix="ui", config=PackerConfig(padding=2)).run()

    assert result.target == icons / "ui.png"
    assert result.canvas_size == (10, 34)
    assert result.image_size == (10, 34)
    assert len(result.css) == 4
    assert sorted(cell.y for cell in result.cells) == [0, 12, 24]


def test_controller_warns_on_duplicate_names(tmp_path, make_image, caplog):
    make_image("arrow.png", directory=tmp_path)
    make_image("arrow.gif", color=BLUE, directory=tmp_path)

    with caplog.at_level(logging.WARNING, logger="css_sprite.controllers.sprite_controller"):
        result = SpriteController(directory=tmp_path).run()

    assert [cell.name for cell in result.cells] == ["arrow", "arrow"]
    assert "'arrow' is used by 2 images" in caplog.text


def test_controller_without_images(tmp_path):
    with pytest.raises(NoImagesError):
        SpriteController(directory=tmp_path).run()


def test_main_zero_scale_is_rejected(icons, capsys):
    assert main(["-d", str(icons), "-s", "0"]) == 1
    assert "scale" in capsys.readouterr().err
    assert not (icons / "sprite.png").exists()
