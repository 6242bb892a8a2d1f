"""
Geometry Layer
==============

Bounded Context: Badge layout (sizes and positions).

Responsibilities:
- Rectangle representation (immutable)
- Gravity resolution with LTR/RTL mirroring
- Badge and border rect computation
- NO drawing, NO styles

Design Philosophy:
- Pure functions
- Immutable data structures
- Fail-fast validation
"""

from badger_shape.geometry.rect import Rect
from badger_shape.geometry.gravity import (
    Gravity,
    LayoutDirection,
    apply_gravity,
    get_absolute_gravity,
)
from badger_shape.geometry.layout import LayoutSpec, compute_badge_rect, compute_border_rect

__all__ = [
    "Rect",
    "Gravity",
    "LayoutDirection",
    "apply_gravity",
    "get_absolute_gravity",
    "LayoutSpec",
    "compute_badge_rect",
    "compute_border_rect",
]
