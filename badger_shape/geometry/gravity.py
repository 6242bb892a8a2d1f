"""
Gravity Module
==============

Stateless gravity resolution - places a box of known size inside a container.

Design:
- Bit layout compatible with android.view.Gravity
  (horizontal axis in bits 0-3, vertical axis in bits 4-7)
- START/END are relative flags resolved with a LayoutDirection
- Pure functions (same inputs -> same Rect)

Axis semantics:
    no pull bits      -> centered on the axis
    PULL_BEFORE       -> aligned to left/top
    PULL_AFTER        -> aligned to right/bottom
    both pulls (FILL) -> spans the whole container on the axis
    CLIP              -> clamps the box to the container edges
"""

from enum import IntEnum, IntFlag
from typing import Iterable, Optional

from badger_shape.geometry.rect import Rect


AXIS_SPECIFIED = 0x0001
AXIS_PULL_BEFORE = 0x0002
AXIS_PULL_AFTER = 0x0004
AXIS_CLIP = 0x0008

AXIS_X_SHIFT = 0
AXIS_Y_SHIFT = 4


class LayoutDirection(IntEnum):
    """Text/layout direction used to resolve START and END."""

    LTR = 0
    RTL = 1


class Gravity(IntFlag):
    """
    Alignment flags for placing a box inside a container.

    Combine members with ``|``:
        >>> Gravity.END | Gravity.CENTER_VERTICAL
    """

    NO_GRAVITY = 0x0000

    TOP = (AXIS_PULL_BEFORE | AXIS_SPECIFIED) << AXIS_Y_SHIFT
    BOTTOM = (AXIS_PULL_AFTER | AXIS_SPECIFIED) << AXIS_Y_SHIFT
    LEFT = (AXIS_PULL_BEFORE | AXIS_SPECIFIED) << AXIS_X_SHIFT
    RIGHT = (AXIS_PULL_AFTER | AXIS_SPECIFIED) << AXIS_X_SHIFT

    CENTER_VERTICAL = AXIS_SPECIFIED << AXIS_Y_SHIFT
    CENTER_HORIZONTAL = AXIS_SPECIFIED << AXIS_X_SHIFT
    CENTER = CENTER_VERTICAL | CENTER_HORIZONTAL

    FILL_VERTICAL = TOP | BOTTOM
    FILL_HORIZONTAL = LEFT | RIGHT
    FILL = FILL_VERTICAL | FILL_HORIZONTAL

    CLIP_VERTICAL = AXIS_CLIP << AXIS_Y_SHIFT
    CLIP_HORIZONTAL = AXIS_CLIP << AXIS_X_SHIFT

    RELATIVE_LAYOUT_DIRECTION = 0x00800000
    START = RELATIVE_LAYOUT_DIRECTION | LEFT
    END = RELATIVE_LAYOUT_DIRECTION | RIGHT

    @classmethod
    def parse(cls, value) -> "Gravity":
        """
        Parse gravity from a name, a "|"-joined string, a list of names or an int.

        Args:
            value: e.g. "center", "end|top", ["right", "top"], 0x11

        Returns:
            Combined Gravity flags

        Raises:
            ValueError: If a name is unknown or value has an unsupported type
        """
        if isinstance(value, int):
            return cls(value)

        if isinstance(value, str):
            names: Iterable[str] = value.split("|")
        elif isinstance(value, (list, tuple)):
            names = value
        else:
            raise ValueError(
                f"Invalid gravity: {value!r}. Must be a name, a list of names or an int"
            )

        result = cls.NO_GRAVITY
        for name in names:
            key = str(name).strip().upper()
            if key not in cls.__members__:
                raise ValueError(
                    f"Unknown gravity: {name!r}. "
                    f"Must be one of {sorted(n.lower() for n in cls.__members__)}"
                )
            result |= cls.__members__[key]
        return result



def get_absolute_gravity(gravity: int, layout_direction: Optional[LayoutDirection] = None) -> int:
    """
    Rewrite relative START/END flags into absolute LEFT/RIGHT.

    Args:
        gravity: Gravity flags, possibly relative
        layout_direction: Direction to resolve with; None falls back to
            start=left, end=right

    Returns:
        Gravity flags without RELATIVE_LAYOUT_DIRECTION
    """
    result = int(gravity)
    if not result & Gravity.RELATIVE_LAYOUT_DIRECTION:
        return result

    is_rtl = layout_direction == LayoutDirection.RTL
    if result & Gravity.START == Gravity.START:
        result &= ~int(Gravity.START)
        result |= Gravity.RIGHT if is_rtl else Gravity.LEFT
    elif result & Gravity.END == Gravity.END:
        result &= ~int(Gravity.END)
        result |= Gravity.LEFT if is_rtl else Gravity.RIGHT

    return int(result & ~int(Gravity.RELATIVE_LAYOUT_DIRECTION))


def _half(value: int) -> int:
    # integer halving truncated toward zero
    return int(value / 2)


def _place_axis(axis_gravity: int, size: int, start: int, end: int, adj: int):
    pull = axis_gravity & (AXIS_PULL_BEFORE | AXIS_PULL_AFTER)
    clip = axis_gravity & AXIS_CLIP == AXIS_CLIP

    if pull == 0:
        low = start + _half(end - start - size) + adj
        high = low + size
        if clip:
            low = max(low, start)
            high = min(high, end)
    elif pull == AXIS_PULL_BEFORE:
        low = start + adj
        high = low + size
        if clip:
            high = min(high, end)
    elif pull == AXIS_PULL_AFTER:
        high = end - adj
        low = high - size
        if clip:
            low = max(low, start)
    else:
        low = start + adj
        high = end + adj

    return low, high


def apply_gravity(
    gravity: int,
    width: int,
    height: int,
    container: Rect,
    layout_direction: Optional[LayoutDirection] = None,
    x_adj: int = 0,
    y_adj: int = 0,
) -> Rect:
    """
    Place a width x height box inside container according to gravity.

    Args:
        gravity: Gravity flags (relative flags allowed)
        width: Box width (>= 0)
        height: Box height (>= 0)
        container: Rect to place the box in
        layout_direction: Resolves START/END; None means start=left, end=right
        x_adj: Horizontal offset applied away from the anchored edge
        y_adj: Vertical offset applied away from the anchored edge

    Returns:
        Placed Rect
    """
    if width < 0 or height < 0:
        raise ValueError(f"Box size must be >= 0, got {width}x{height}")

    absolute = get_absolute_gravity(gravity, layout_direction)

    left, right = _place_axis(
        (absolute >> AXIS_X_SHIFT) & 0x0F,
        width,
        container.left,
        container.right,
        x_adj,
    )
    top, bottom = _place_axis(
        (absolute >> AXIS_Y_SHIFT) & 0x0F,
        height,
        container.top,
        container.bottom,
        y_adj,
    )

    return Rect(left=left, top=top, right=right, bottom=bottom)
