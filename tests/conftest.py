"""Shared test fixtures."""

from __future__ import annotations

import pytest
import supervision as sv

from badger_shape.geometry.rect import Rect
from badger_shape.rendering.style import BadgeStyle


class RecordingSurface:
    """DrawingSurface that records every paint command as a tuple."""

    def __init__(self):
        self.calls = []

    def draw_oval(self, rect, style):
        self.calls.append(("oval", rect, style))

    def draw_rect(self, rect, style):
        self.calls.append(("rect", rect, style))

    def draw_round_rect(self, rect, rx, ry, style):
        self.calls.append(("round_rect", rect, rx, ry, style))

    def styles(self):
        return [call[-1] for call in self.calls]


BADGE_COLOR = sv.Color(r=229, g=57, b=53)
BORDER_COLOR = sv.Color(r=255, g=255, b=255)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def bounds() -> Rect:
    return Rect(0, 0, 64, 64)


@pytest.fixture
def badge_style() -> BadgeStyle:
    return BadgeStyle(color=BADGE_COLOR)


@pytest.fixture
def border_style() -> BadgeStyle:
    return BadgeStyle(color=BORDER_COLOR)


@pytest.fixture
def make_surface():
    return RecordingSurface
