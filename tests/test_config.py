"""Tests for YAML badge configuration."""

import pytest
import supervision as sv

from badger_shape.config import BadgeConfig, StyleConfig
from badger_shape.geometry.gravity import Gravity, LayoutDirection
from badger_shape.rendering.shapes import BadgeShape, ShapeKind


BADGE_YAML = """
shape: "rect"
scale: 0.5
aspect_ratio: 2
gravity: ["end", "top"]
radius_factor: 0.5
border_size: 2
layout_direction: "rtl"

badge_style:
  color: "#e53935"

border_style:
  color: "#ffffff"
  thickness: 3
"""


@pytest.fixture
def badge_yaml(tmp_path):
    path = tmp_path / "badge.yaml"
    path.write_text(BADGE_YAML)
    return path


def test_from_yaml(badge_yaml):
    config = BadgeConfig.from_yaml(badge_yaml)
    assert config.shape == "rect"
    assert config.scale == 0.5
    assert config.border_size == 2
    assert config.direction is LayoutDirection.RTL
    assert config.border_style == StyleConfig(color="#ffffff", thickness=3)


def test_build_shape(badge_yaml):
    shape = BadgeConfig.from_yaml(badge_yaml).build_shape()
    assert shape == BadgeShape.rect(0.5, 2, Gravity.END | Gravity.TOP, 0.5)
    assert shape.kind is ShapeKind.ROUND_RECT


def test_styles(badge_yaml):
    badge_style, border_style = BadgeConfig.from_yaml(badge_yaml).styles()
    assert badge_style.color == sv.Color.from_hex("#e53935")
    assert badge_style.is_filled
    assert border_style.thickness == 3


def test_no_border_style_without_border():
    config = BadgeConfig(shape="circle", scale=0.5)
    _, border_style = config.styles()
    assert border_style is None


def test_defaults():
    config = BadgeConfig.from_dict({"shape": "circle", "scale": 0.25})
    assert config.build_shape() == BadgeShape.circle(0.25, Gravity.CENTER)
    assert config.direction is LayoutDirection.LTR


@pytest.mark.parametrize("data, message", [
    ({"scale": 0.5}, "shape"),
    ({"shape": "circle"}, "scale"),
    ({"shape": "star", "scale": 0.5}, "Invalid shape"),
    ({"shape": "circle", "scale": 1.5}, "scale"),
    ({"shape": "oval", "scale": 0.5, "aspect_ratio": 0}, "aspect_ratio"),
    ({"shape": "circle", "scale": 0.5, "aspect_ratio": 2}, "fixed aspect_ratio"),
    ({"shape": "oval", "scale": 0.5, "radius_factor": 0.5}, "radius_factor"),
    ({"shape": "rect", "scale": 0.5, "radius_factor": 2}, "radius_factor"),
    ({"shape": "rect", "scale": 0.5, "border_size": -1}, "border_size"),
    ({"shape": "rect", "scale": 0.5, "gravity": "middle"}, "Unknown gravity"),
    ({"shape": "rect", "scale": 0.5, "layout_direction": "up"}, "layout_direction"),
    ({"shape": "rect", "scale": None}, "scale"),
    ({"shape": "rect", "scale": "half"}, "scale"),
    ({"shape": "rect", "scale": 0.5, "border_size": [2]}, "border_size"),
    ({"shape": "rect", "scale": 0.5, "layout_direction": 1}, "layout_direction"),
    ({"shape": "rect", "scale": 0.5, "gravity": 1.5}, "Invalid gravity"),
    ({"shape": ["rect"], "scale": 0.5}, "Invalid shape"),
    ({"shape": "rect", "scale": 0.5, "badge_style": {"colour": "#fff"}}, "style"),
    ({"shape": "rect", "scale": 0.5, "badge_style": {"color": "red"}}, "color"),
])
def test_invalid_config(data, message):
    with pytest.raises(ValueError, match=message):
        BadgeConfig.from_dict(data)


def test_non_mapping_rejected():
    with pytest.raises(ValueError, match="mapping"):
        BadgeConfig.from_dict(["shape", "circle"])


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        BadgeConfig.from_yaml(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("shape: [circle\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        BadgeConfig.from_yaml(path)


def test_style_config_validation():
    with pytest.raises(ValueError):
        StyleConfig(thickness=0)
    with pytest.raises(ValueError):
        StyleConfig(opacity=1.5)


def test_null_scale_in_yaml(tmp_path):
    path = tmp_path / "null_scale.yaml"
    path.write_text("shape: circle\nscale:\n")
    with pytest.raises(ValueError, match="scale"):
        BadgeConfig.from_yaml(path)
