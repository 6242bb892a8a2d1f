"""
Badge Style Module
==================

Paint description passed through to drawing surfaces unmodified.
"""

from dataclasses import dataclass

import supervision as sv


FILLED = -1


@dataclass(frozen=True)
class BadgeStyle:
    """
    Immutable paint style.

    Attributes:
        color: Fill or stroke color
        thickness: Stroke thickness in pixels, FILLED (-1) to fill the shape
        opacity: Opacity for filled shapes (0-1)
    """

    color: sv.Color
    thickness: int = FILLED
    opacity: float = 1.0

    def __post_init__(self):
        """Validate style."""
        if self.thickness != FILLED and self.thickness <= 0:
            raise ValueError(
                f"thickness must be > 0 or FILLED ({FILLED}), got {self.thickness}"
            )
        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError(f"opacity must be in [0.0, 1.0], got {self.opacity}")

    @property
    def is_filled(self) -> bool:
        return self.thickness == FILLED

    @classmethod
    def from_hex(cls, color_hex: str, thickness: int = FILLED, opacity: float = 1.0) -> "BadgeStyle":
        """Build a style from a hex color string such as "#ff0000"."""
        return cls(color=sv.Color.from_hex(color_hex), thickness=thickness, opacity=opacity)
