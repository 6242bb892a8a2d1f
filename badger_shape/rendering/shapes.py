"""
Badge Shape Module
==================

Immutable badge shapes: layout parameters + the kind of geometry to paint.

Design:
- One frozen value object tagged with ShapeKind (no subclass per variant)
- Painters dispatched from a kind -> function table
- Built once, reused for every draw call
- Border always painted before the badge
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from badger_shape.geometry.gravity import LayoutDirection
from badger_shape.geometry.layout import LayoutSpec, compute_badge_rect, compute_border_rect
from badger_shape.geometry.rect import Rect
from badger_shape.logging import LogEvent, StructuredLogger
from badger_shape.rendering.style import BadgeStyle
from badger_shape.rendering.surface import DrawingSurface


logger = StructuredLogger(component="renderer", level=logging.WARNING)


class ShapeKind(str, Enum):
    """Geometry painted for a badge."""

    OVAL = "oval"
    RECT = "rect"
    ROUND_RECT = "round_rect"


@dataclass(frozen=True)
class BadgeShape:
    """
    Immutable badge shape.

    Use the constructors instead of instantiating directly:

        shape = BadgeShape.rect(0.5, 2, Gravity.END | Gravity.TOP, radius_factor=0.5)
        badge_rect = shape.draw(surface, bounds, badge_style, border_style, border_size=2)

    Attributes:
        kind: Geometry to paint
        layout: Scale, aspect ratio and gravity
        radius_factor: Corner rounding for ROUND_RECT, in (0, 1]
    """

    kind: ShapeKind
    layout: LayoutSpec
    radius_factor: float = 0.0

    def __post_init__(self):
        """Validate shape parameters."""
        if not 0.0 <= self.radius_factor <= 1.0:
            raise ValueError(f"radius_factor must be in [0.0, 1.0], got {self.radius_factor}")

        if self.kind is ShapeKind.ROUND_RECT and self.radius_factor == 0:
            raise ValueError("ROUND_RECT needs radius_factor > 0, use BadgeShape.rect()")
        if self.kind is not ShapeKind.ROUND_RECT and self.radius_factor != 0:
            raise ValueError(f"radius_factor is only supported by ROUND_RECT, got {self.kind.value}")

    # ========== Constructors ==========

    @classmethod
    def circle(cls, scale: float, gravity: int) -> "BadgeShape":
        """Circle badge (oval with aspect ratio 1)."""
        return cls.oval(scale, 1, gravity)

    @classmethod
    def oval(cls, scale: float, aspect_ratio: float, gravity: int) -> "BadgeShape":
        """Oval badge inscribed in the badge rect."""
        return cls(ShapeKind.OVAL, LayoutSpec(scale, aspect_ratio, gravity))

    @classmethod
    def rect(
        cls,
        scale: float,
        aspect_ratio: float,
        gravity: int,
        radius_factor: float = 0.0,
    ) -> "BadgeShape":
        """
        Rectangle badge, with rounded corners if radius_factor > 0.

        Args:
            scale: Badge size relative to the bounds, in [0, 1]
            aspect_ratio: Width to height of the badge
            gravity: Placement inside the bounds
            radius_factor: Corner radius as a fraction of half the shorter side

        Returns:
            RECT shape when radius_factor is 0, ROUND_RECT otherwise
        """
        layout = LayoutSpec(scale, aspect_ratio, gravity)
        if radius_factor == 0:
            return cls(ShapeKind.RECT, layout)
        return cls(ShapeKind.ROUND_RECT, layout, radius_factor)

    @classmethod
    def square(cls, scale: float, gravity: int, radius_factor: float = 0.0) -> "BadgeShape":
        """Square badge (rect with aspect ratio 1)."""
        return cls.rect(scale, 1, gravity, radius_factor)

    # ========== Drawing ==========

    def draw(
        self,
        surface: DrawingSurface,
        bounds: Rect,
        badge_style: BadgeStyle,
        border_style: Optional[BadgeStyle] = None,
        border_size: int = 0,
        layout_direction: Optional[LayoutDirection] = None,
    ) -> Rect:
        """
        Lay out the badge inside bounds and paint it.

        Args:
            surface: Surface receiving the paint commands
            bounds: Canvas area the badge is placed in
            badge_style: Paint for the badge
            border_style: Paint for the border ring
            border_size: Border thickness; <= 0 draws no border
            layout_direction: Resolves START/END gravity

        Returns:
            The rect the badge was drawn in
        """
        badge_rect = compute_badge_rect(bounds, self.layout, layout_direction)

        if border_size < 0:
            logger.warning(
                event=LogEvent.BADGE_BORDER_CLAMPED,
                message="Negative border size treated as no border",
                metadata={'border_size': border_size},
            )

        if border_size > 0:
            border_rect = compute_border_rect(badge_rect, border_size)
            self.on_draw(surface, badge_rect, border_rect, badge_style, border_style)
        else:
            border_rect = None
            self.on_draw(surface, badge_rect, None, badge_style, None)

        if logger.is_enabled_for(logging.DEBUG):
            logger.debug(
                event=LogEvent.BADGE_DRAWN,
                message=f"Drew {self.kind.value} badge",
                metadata={
                    'badge_rect': badge_rect.as_xyxy(),
                    'border_rect': border_rect.as_xyxy() if border_rect else None,
                },
            )

        return badge_rect

    def on_draw(
        self,
        surface: DrawingSurface,
        badge_region: Rect,
        border_region: Optional[Rect],
        badge_style: BadgeStyle,
        border_style: Optional[BadgeStyle],
    ) -> None:
        """
        Paint already laid-out regions.

        The border is painted only when both border_region and border_style
        are given, and always before the badge.
        """
        painter = _PAINTERS[self.kind]
        if border_region is not None and border_style is not None:
            painter(self, surface, border_region, border_style)
        painter(self, surface, badge_region, badge_style)

    def corner_radius(self, region: Rect) -> float:
        """Corner radius used for region (0 for non-rounded shapes)."""
        return 0.5 * min(region.width, region.height) * self.radius_factor


def _paint_oval(shape: BadgeShape, surface: DrawingSurface, region: Rect, style: BadgeStyle) -> None:
    surface.draw_oval(region, style)


def _paint_rect(shape: BadgeShape, surface: DrawingSurface, region: Rect, style: BadgeStyle) -> None:
    surface.draw_rect(region, style)


def _paint_round_rect(shape: BadgeShape, surface: DrawingSurface, region: Rect, style: BadgeStyle) -> None:
    radius = shape.corner_radius(region)
    surface.draw_round_rect(region, radius, radius, style)


_PAINTERS: Dict[ShapeKind, Callable[[BadgeShape, DrawingSurface, Rect, BadgeStyle], None]] = {
    ShapeKind.OVAL: _paint_oval,
    ShapeKind.RECT: _paint_rect,
    ShapeKind.ROUND_RECT: _paint_round_rect,
}
