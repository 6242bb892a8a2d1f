"""
Drawing Surface Module
======================

Surface abstraction the shape renderer paints onto.

Design:
- DrawingSurface is a Protocol (host toolkits provide their own)
- FrameSurface draws onto a BGR numpy frame
- Uses supervision draw utilities where they exist, OpenCV otherwise

Dependencies:
- supervision (draw utilities, Rect, Color)
- opencv (ellipses, blending)
- numpy (frames)
"""

from typing import Protocol

import cv2
import numpy as np
import supervision.draw.utils as sv_draw

from badger_shape.geometry.rect import Rect
from badger_shape.rendering.style import BadgeStyle


class DrawingSurface(Protocol):
    """Paint commands consumed by BadgeShape."""

    def draw_oval(self, rect: Rect, style: BadgeStyle) -> None:
        ...

    def draw_rect(self, rect: Rect, style: BadgeStyle) -> None:
        ...

    def draw_round_rect(self, rect: Rect, rx: float, ry: float, style: BadgeStyle) -> None:
        ...


class FrameSurface:
    """
    DrawingSurface backed by a BGR image.

    Usage:
        surface = FrameSurface(frame)
        shape.draw(surface, Rect(0, 0, w, h), badge_style, border_style, 2)
        cv2.imwrite("badge.png", surface.frame)

    Attributes:
        frame: HxWx3 uint8 image, drawn on in place
    """

    def __init__(self, frame: np.ndarray):
        if not isinstance(frame, np.ndarray):
            raise TypeError(f"frame must be np.ndarray, got {type(frame)}")
        if frame.ndim != 3 or frame.shape[2] != 3:
            raise ValueError(f"frame must be HxWx3, got shape {frame.shape}")

        self.frame = frame

    @classmethod
    def blank(cls, width: int, height: int) -> "FrameSurface":
        """Create a surface over a black width x height frame."""
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        return cls(np.zeros((height, width, 3), dtype=np.uint8))

    @property
    def bounds(self) -> Rect:
        """Full-frame rect."""
        height, width = self.frame.shape[:2]
        return Rect(0, 0, width, height)

    def draw_oval(self, rect: Rect, style: BadgeStyle) -> None:
        center = (int(rect.left + rect.width / 2), int(rect.top + rect.height / 2))
        axes = (int(rect.width / 2), int(rect.height / 2))

        def paint(target: np.ndarray) -> None:
            cv2.ellipse(
                target, center, axes, 0, 0, 360,
                style.color.as_bgr(), style.thickness, cv2.LINE_AA,
            )

        self._paint(paint, style)

    def draw_rect(self, rect: Rect, style: BadgeStyle) -> None:
        if style.is_filled and style.opacity < 1.0:
            def paint(target: np.ndarray) -> None:
                target[:] = sv_draw.draw_filled_rectangle(scene=target, rect=rect.to_sv_rect(), color=style.color)

            self._paint(paint, style)
        elif style.is_filled:
            self.frame = sv_draw.draw_filled_rectangle(
                scene=self.frame,
                rect=rect.to_sv_rect(),
                color=style.color,
            )
        else:
            self.frame = sv_draw.draw_rectangle(
                scene=self.frame,
                rect=rect.to_sv_rect(),
                color=style.color,
                thickness=style.thickness,
            )

    def draw_round_rect(self, rect: Rect, rx: float, ry: float, style: BadgeStyle) -> None:
        rx = int(min(rx, rect.width / 2))
        ry = int(min(ry, rect.height / 2))

        if rx <= 0 or ry <= 0:
            self.draw_rect(rect, style)
            return

        if style.is_filled and rx == ry and style.opacity == 1.0:
            self.frame = sv_draw.draw_rounded_rectangle(
                scene=self.frame,
                rect=rect.to_sv_rect(),
                color=style.color,
                border_radius=rx,
            )
            return

        def paint(target: np.ndarray) -> None:
            _paint_round_rect(target, rect, rx, ry, style)

        self._paint(paint, style)

    def _paint(self, paint, style: BadgeStyle) -> None:
        """Run an OpenCV paint function, blending by style opacity."""
        if style.opacity >= 1.0:
            paint(self.frame)
            return

        overlay = self.frame.copy()
        paint(overlay)
        cv2.addWeighted(overlay, style.opacity, self.frame, 1 - style.opacity, 0, dst=self.frame)


def _paint_round_rect(target: np.ndarray, rect: Rect, rx: int, ry: int, style: BadgeStyle) -> None:
    left, top = int(rect.left), int(rect.top)
    right, bottom = int(rect.right), int(rect.bottom)
    color = style.color.as_bgr()

    # corner centers, clockwise from top-left, with the arc start angle
    corners = [
        ((left + rx, top + ry), 180),
        ((right - rx, top + ry), 270),
        ((right - rx, bottom - ry), 0),
        ((left + rx, bottom - ry), 90),
    ]
    for center, start_angle in corners:
        cv2.ellipse(
            target, center, (rx, ry), 0, start_angle, start_angle + 90,
            color, style.thickness, cv2.LINE_AA,
        )

    if style.is_filled:
        cv2.rectangle(target, (left + rx, top), (right - rx, bottom), color, thickness=-1)
        cv2.rectangle(target, (left, top + ry), (right, bottom - ry), color, thickness=-1)
    else:
        thickness = style.thickness
        cv2.line(target, (left + rx, top), (right - rx, top), color, thickness)
        cv2.line(target, (right, top + ry), (right, bottom - ry), color, thickness)
        cv2.line(target, (left + rx, bottom), (right - rx, bottom), color, thickness)
        cv2.line(target, (left, top + ry), (left, bottom - ry), color, thickness)
