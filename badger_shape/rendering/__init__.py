"""
Rendering Layer
===============

Bounded Context: Badge painting.

Responsibilities:
- Shape variants (oval, rect, round-rect)
- Paint ordering (border first, badge on top)
- Drawing onto surfaces (protocol + numpy frame implementation)

Non-responsibilities:
- Sizes and placement (handled by geometry)

Design:
- Immutable shapes, built once
- Uses supervision.draw.utils and OpenCV
"""

from badger_shape.rendering.style import BadgeStyle, FILLED
from badger_shape.rendering.surface import DrawingSurface, FrameSurface
from badger_shape.rendering.shapes import BadgeShape, ShapeKind

__all__ = [
    "BadgeStyle",
    "FILLED",
    "DrawingSurface",
    "FrameSurface",
    "BadgeShape",
    "ShapeKind",
]
