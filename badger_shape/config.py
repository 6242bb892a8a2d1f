"""
Configuration schema for badge rendering.

Defines the badge configuration (shape, layout, border and styles) loaded
from YAML and turned into an immutable BadgeShape plus its paint styles.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union
import yaml

from badger_shape.geometry.gravity import Gravity, LayoutDirection
from badger_shape.rendering.shapes import BadgeShape
from badger_shape.rendering.style import BadgeStyle, FILLED


SHAPE_NAMES = {"circle", "oval", "rect", "square"}


def _coerce(data: Dict[str, Any], key: str, kind: type, default: Any = None) -> Any:
    """Convert data[key] to kind, reporting bad YAML values as ValueError."""
    value = data.get(key, default)
    try:
        return kind(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid {key}: {value!r} is not a {kind.__name__}") from e


@dataclass(frozen=True)
class StyleConfig:
    """Paint configuration (hex color, stroke thickness, opacity)."""

    color: str = "#ff0000"
    thickness: int = FILLED
    opacity: float = 1.0

    def __post_init__(self):
        """Validate style configuration."""
        if not isinstance(self.color, str) or not self.color.startswith("#"):
            raise ValueError(f"color must be a hex string like '#ff0000', got {self.color!r}")

        if self.thickness != FILLED and self.thickness <= 0:
            raise ValueError(
                f"thickness must be > 0 or {FILLED} (filled), got {self.thickness}"
            )

        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError(f"opacity must be in [0.0, 1.0], got {self.opacity}")

    def to_style(self) -> BadgeStyle:
        """Build the BadgeStyle described by this config."""
        try:
            return BadgeStyle.from_hex(self.color, thickness=self.thickness, opacity=self.opacity)
        except ValueError as e:
            raise ValueError(f"Invalid color {self.color!r}: {e}") from e


@dataclass(frozen=True)
class BadgeConfig:
    """
    Badge configuration.

    Loaded from YAML and validated at construction.
    Immutable after construction (frozen dataclass).
    """

    shape: str
    scale: float
    aspect_ratio: float = 1.0
    gravity: Union[str, List[str], int] = "center"
    radius_factor: float = 0.0
    border_size: int = 0
    layout_direction: str = "ltr"

    badge_style: StyleConfig = field(default_factory=StyleConfig)
    border_style: StyleConfig = field(default_factory=lambda: StyleConfig(color="#ffffff"))

    def __post_init__(self):
        """Validate badge configuration."""
        if not isinstance(self.shape, str) or self.shape not in SHAPE_NAMES:
            raise ValueError(
                f"Invalid shape: {self.shape}. "
                f"Must be one of {sorted(SHAPE_NAMES)}"
            )

        if self.shape in {"circle", "square"} and self.aspect_ratio != 1.0:
            raise ValueError(
                f"Shape '{self.shape}' has a fixed aspect_ratio of 1, got {self.aspect_ratio}"
            )

        if self.shape in {"circle", "oval"} and self.radius_factor != 0.0:
            raise ValueError(
                f"radius_factor is only supported by 'rect' and 'square', got shape '{self.shape}'"
            )

        if self.border_size < 0:
            raise ValueError(f"border_size must be >= 0, got {self.border_size}")

        if (
            not isinstance(self.layout_direction, str)
            or self.layout_direction.lower() not in {"ltr", "rtl"}
        ):
            raise ValueError(
                f"Invalid layout_direction: {self.layout_direction}. "
                f"Must be 'ltr' or 'rtl'"
            )

        # Fail fast on layout/gravity errors
        Gravity.parse(self.gravity)
        self.build_shape()

    @property
    def direction(self) -> LayoutDirection:
        return LayoutDirection[self.layout_direction.upper()]

    def build_shape(self) -> BadgeShape:
        """
        Build the immutable BadgeShape for this configuration.

        Raises:
            ValueError: If scale, aspect_ratio or radius_factor are out of range
        """
        gravity = Gravity.parse(self.gravity)

        if self.shape == "circle":
            return BadgeShape.circle(self.scale, gravity)
        if self.shape == "oval":
            return BadgeShape.oval(self.scale, self.aspect_ratio, gravity)
        if self.shape == "square":
            return BadgeShape.square(self.scale, gravity, self.radius_factor)
        return BadgeShape.rect(self.scale, self.aspect_ratio, gravity, self.radius_factor)

    def styles(self) -> Tuple[BadgeStyle, Optional[BadgeStyle]]:
        """Badge style, and border style if a border is configured."""
        border = self.border_style.to_style() if self.border_size > 0 else None
        return self.badge_style.to_style(), border

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BadgeConfig":
        """
        Build configuration from a parsed YAML mapping.

        Raises:
            ValueError: If required keys are missing or values are invalid
        """
        if not isinstance(data, dict):
            raise ValueError(f"Badge config must be a mapping, got {type(data).__name__}")

        for key in ("shape", "scale"):
            if key not in data:
                raise ValueError(f"Missing required key: {key}")

        try:
            badge_style = StyleConfig(**data.get("badge_style", {}))
            border_style = StyleConfig(**data.get("border_style", {"color": "#ffffff"}))
        except TypeError as e:
            raise ValueError(f"Invalid style config: {e}") from e

        return cls(
            shape=data["shape"],
            scale=_coerce(data, "scale", float),
            aspect_ratio=_coerce(data, "aspect_ratio", float, 1.0),
            gravity=data.get("gravity", "center"),
            radius_factor=_coerce(data, "radius_factor", float, 0.0),
            border_size=_coerce(data, "border_size", int, 0),
            layout_direction=data.get("layout_direction", "ltr"),
            badge_style=badge_style,
            border_style=border_style,
        )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "BadgeConfig":
        """
        Load configuration from YAML file.

        Example YAML:
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
              thickness: -1
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

        return cls.from_dict(data)
