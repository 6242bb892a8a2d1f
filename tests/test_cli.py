"""Tests for the badger-cli entry point."""

import json

import cv2
import numpy as np
import pytest

from badger_cli.cli import main, parse_size


BADGE_YAML = """
shape: "rect"
scale: 0.5
aspect_ratio: 2
gravity: "end|top"
border_size: 2
layout_direction: "{direction}"
badge_style:
  color: "#ff0000"
border_style:
  color: "#ffffff"
"""


@pytest.fixture
def config_path(tmp_path):
    def write(direction="ltr"):
        path = tmp_path / f"badge_{direction}.yaml"
        path.write_text(BADGE_YAML.format(direction=direction))
        return str(path)
    return write


def test_parse_size():
    assert parse_size("64x32") == (64, 32)
    assert parse_size("128X128") == (128, 128)


@pytest.mark.parametrize("value", ["64", "0x10", "ax10", "1x2x3"])
def test_parse_size_invalid(value):
    import argparse

    with pytest.raises(argparse.ArgumentTypeError):
        parse_size(value)


def test_layout(config_path, capsys):
    assert main(["layout", "--config", config_path(), "--size", "64x64"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"left": 32, "top": 0, "right": 64, "bottom": 16}


def test_layout_rtl(config_path, capsys):
    assert main(["layout", "--config", config_path("rtl"), "--size", "64x64"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"left": 0, "top": 0, "right": 32, "bottom": 16}


def test_render_blank_canvas(config_path, tmp_path, capsys):
    output = tmp_path / "badge.png"
    assert main(["render", "--config", config_path(), "--size", "64x64", "--output", str(output)]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["badge_rect"] == {"left": 32, "top": 0, "right": 64, "bottom": 16}
    assert out["output"] == str(output)

    image = cv2.imread(str(output))
    assert image.shape == (64, 64, 3)
    assert image[8, 48].tolist() == [0, 0, 255]
    # border ring left of the badge
    assert image[8, 31].tolist() == [255, 255, 255]
    assert image[40, 8].tolist() == [0, 0, 0]


def test_render_on_input_image(config_path, tmp_path):
    source = tmp_path / "source.png"
    cv2.imwrite(str(source), np.full((64, 64, 3), 128, dtype=np.uint8))
    output = tmp_path / "out.png"

    assert main(["render", "--config", config_path(), "--input", str(source), "--output", str(output)]) == 0

    image = cv2.imread(str(output))
    assert image[8, 48].tolist() == [0, 0, 255]
    assert image[40, 8].tolist() == [128, 128, 128]


def test_render_unreadable_input(config_path, tmp_path, capsys):
    missing = tmp_path / "missing.png"
    output = tmp_path / "out.png"
    assert main(["render", "--config", config_path(), "--input", str(missing), "--output", str(output)]) == 1
    assert "Could not read image" in capsys.readouterr().err


def test_render_output_without_extension(config_path, tmp_path, capsys):
    output = tmp_path / "out"
    assert main(["render", "--config", config_path(), "--size", "64x64", "--output", str(output)]) == 1
    assert "Could not write image" in capsys.readouterr().err


def test_null_scale_config(tmp_path, capsys):
    path = tmp_path / "null_scale.yaml"
    path.write_text("shape: circle\nscale:\n")
    assert main(["layout", "--config", str(path), "--size", "64x64"]) == 1
    assert "scale" in capsys.readouterr().err


def test_missing_config(tmp_path, capsys):
    assert main(["layout", "--config", str(tmp_path / "nope.yaml"), "--size", "64x64"]) == 1
    assert "Config file not found" in capsys.readouterr().err


def test_invalid_config(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("shape: star\nscale: 0.5\n")
    assert main(["layout", "--config", str(path), "--size", "64x64"]) == 1
    assert "Invalid shape" in capsys.readouterr().err


def test_no_command(capsys):
    assert main([]) == 1


def test_render_requires_source(config_path):
    with pytest.raises(SystemExit):
        main(["render", "--config", config_path()])
