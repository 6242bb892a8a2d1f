"""
Badge Layout Module
===================

Pure layout computation - sizes and places the badge inside its bounds.

Design:
- LayoutSpec is immutable and validated once (fail-fast)
- compute_* functions are pure (no state, no drawing)
- Integer truncation of the badge size before placement
"""

import math
from dataclasses import dataclass
from typing import Optional

from badger_shape.geometry.gravity import Gravity, LayoutDirection, apply_gravity
from badger_shape.geometry.rect import Rect


@dataclass(frozen=True)
class LayoutSpec:
    """
    Immutable badge layout configuration.

    Attributes:
        scale: Badge size relative to the bounds, in [0, 1]
        aspect_ratio: Width to height of the badge, > 0
        gravity: Placement of the badge inside the bounds
    """

    scale: float
    aspect_ratio: float = 1.0
    gravity: int = Gravity.CENTER

    def __post_init__(self):
        """Validate layout configuration."""
        if not 0.0 <= self.scale <= 1.0:
            raise ValueError(f"scale must be in [0.0, 1.0], got {self.scale}")

        if not self.aspect_ratio > 0 or math.isinf(self.aspect_ratio):
            raise ValueError(
                f"aspect_ratio must be a finite value > 0, got {self.aspect_ratio}"
            )


def compute_badge_rect(
    bounds: Rect,
    spec: LayoutSpec,
    layout_direction: Optional[LayoutDirection] = None,
) -> Rect:
    """
    Compute where the badge is placed inside bounds.

    The scaled box is shrunk along one axis to honor the aspect ratio, so
    the badge never exceeds bounds * scale in either dimension.

    Args:
        bounds: Container rect
        spec: Scale, aspect ratio and gravity
        layout_direction: Resolves START/END gravity (None -> start=left)

    Returns:
        Badge rect, contained in bounds
    """
    width = bounds.width * spec.scale
    height = bounds.height * spec.scale
    if width < height * spec.aspect_ratio:
        height = width / spec.aspect_ratio
    else:
        width = height * spec.aspect_ratio

    return apply_gravity(spec.gravity, int(width), int(height), bounds, layout_direction)


def compute_border_rect(badge_rect: Rect, border_size: int) -> Rect:
    """
    Compute the border ring rect around a badge.

    Args:
        badge_rect: Badge placement
        border_size: Border thickness (> 0)

    Returns:
        badge_rect expanded by border_size on every edge
    """
    return badge_rect.outset(border_size)
