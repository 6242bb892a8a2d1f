"""
Badger Shape v1.0
=================

Bounded Context: Badge overlays placed inside a canvas area.

Architecture:

    badger_shape/
    ├── geometry/          # Pure layout (immutable, stateless)
    │   ├── rect.py        # Rect
    │   ├── gravity.py     # Gravity, LayoutDirection, apply_gravity
    │   └── layout.py      # LayoutSpec, compute_badge_rect, compute_border_rect
    │
    ├── rendering/         # Painting
    │   ├── style.py       # BadgeStyle
    │   ├── surface.py     # DrawingSurface, FrameSurface
    │   └── shapes.py      # BadgeShape, ShapeKind
    │
    ├── logging/           # Structured JSON logs
    └── config.py          # YAML badge configuration

Usage:

    import supervision as sv
    from badger_shape import BadgeShape, BadgeStyle, FrameSurface, Gravity, LayoutDirection

    # 1. Build the shape once
    shape = BadgeShape.rect(0.5, 2, Gravity.END | Gravity.TOP, radius_factor=0.5)

    # 2. Draw it as often as needed
    surface = FrameSurface.blank(64, 64)
    badge_rect = shape.draw(
        surface,
        surface.bounds,
        badge_style=BadgeStyle(color=sv.Color.RED),
        border_style=BadgeStyle(color=sv.Color.WHITE),
        border_size=2,
        layout_direction=LayoutDirection.RTL,
    )
"""

# Geometry Layer
from badger_shape.geometry.rect import Rect
from badger_shape.geometry.gravity import Gravity, LayoutDirection, apply_gravity
from badger_shape.geometry.layout import LayoutSpec, compute_badge_rect, compute_border_rect

# Rendering Layer
from badger_shape.rendering.style import BadgeStyle, FILLED
from badger_shape.rendering.surface import DrawingSurface, FrameSurface
from badger_shape.rendering.shapes import BadgeShape, ShapeKind

# Configuration
from badger_shape.config import BadgeConfig, StyleConfig

__all__ = [
    # Geometry
    "Rect",
    "Gravity",
    "LayoutDirection",
    "apply_gravity",
    "LayoutSpec",
    "compute_badge_rect",
    "compute_border_rect",
    # Rendering
    "BadgeStyle",
    "FILLED",
    "DrawingSurface",
    "FrameSurface",
    "BadgeShape",
    "ShapeKind",
    # Configuration
    "BadgeConfig",
    "StyleConfig",
]

__version__ = "1.0.0"
