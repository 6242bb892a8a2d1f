"""
Rectangle Module
================

Pure rectangle value type - NO state, NO side effects.

Design:
- Immutable (frozen dataclass pattern)
- Edge-based (left, top, right, bottom), origin at top-left
- Conversions to supervision.Rect for the drawing layer
"""

from dataclasses import dataclass, asdict
from typing import Dict, Tuple

import supervision as sv


@dataclass(frozen=True)
class Rect:
    """
    Immutable rectangle described by its four edges.

    Attributes:
        left: Left edge x-coordinate
        top: Top edge y-coordinate
        right: Right edge x-coordinate
        bottom: Bottom edge y-coordinate

    Invariants:
        - left <= right
        - top <= bottom

    Example:
        >>> rect = Rect(16, 24, 48, 40)
        >>> rect.width, rect.height
        (32, 16)
    """

    left: float
    top: float
    right: float
    bottom: float

    def __post_init__(self):
        """Validate invariants."""
        if self.left > self.right:
            raise ValueError(
                f"Rect left must be <= right, got left={self.left}, right={self.right}"
            )
        if self.top > self.bottom:
            raise ValueError(
                f"Rect top must be <= bottom, got top={self.top}, bottom={self.bottom}"
            )

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def area(self) -> float:
        return self.width * self.height

    def is_empty(self) -> bool:
        """True if the rect covers no area."""
        return self.width == 0 or self.height == 0

    def contains(self, other: "Rect") -> bool:
        """
        Check if another rect lies fully inside this one (edges inclusive).

        Args:
            other: Rect to test

        Returns:
            True if every edge of other is within this rect
        """
        return (
            self.left <= other.left
            and self.top <= other.top
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def outset(self, size: float) -> "Rect":
        """
        Expand the rect symmetrically on all four edges.

        Args:
            size: Distance to move every edge outward (must be >= 0)

        Returns:
            New expanded Rect
        """
        if size < 0:
            raise ValueError(f"outset size must be >= 0, got {size}")

        return Rect(
            left=self.left - size,
            top=self.top - size,
            right=self.right + size,
            bottom=self.bottom + size,
        )

    def to_sv_rect(self) -> sv.Rect:
        """Convert to supervision.Rect (x, y, width, height)."""
        return sv.Rect(x=self.left, y=self.top, width=self.width, height=self.height)

    def as_xyxy(self) -> Tuple[float, float, float, float]:
        return self.left, self.top, self.right, self.bottom

    def to_dict(self) -> Dict[str, float]:
        """Serialize to JSON-compatible dict."""
        return asdict(self)

