"""Pure geometry helpers for the compose canvas.

Provides:
- AABB intersection (marquee selection)
- Corner-pair rectangle normalization
- Edge/center snapping with ordered, last-match-wins rules
- Pixel rounding for export

Rectangles are anything with x, y, width and height attributes
(Rect, PlacedSprite).
"""

import math
from typing import List, NamedTuple, Sequence, Tuple

from models.canvas import GuideDirection, GuideType, SnapGuide
from models.transform import Rect, Vec2


def aabb_intersect(a, b) -> bool:
    """Check whether two axis-aligned rectangles overlap with positive area.

    Rectangles that only share an edge or a corner do not intersect.
    """
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def normalize_rect(a: Vec2, b: Vec2) -> Rect:
    """Rectangle spanned by two corner points given in any order"""
    return Rect(
        min(a.x, b.x),
        min(a.y, b.y),
        abs(b.x - a.x),
        abs(b.y - a.y),
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity (2.5 -> 3, -2.5 -> -2)"""
    return int(math.floor(value + 0.5))


# ========================================
# Snapping
# ========================================

class SnapRule(NamedTuple):
    """One alignment check along a single axis.

    moving: anchor on the dragged rectangle ('leading', 'trailing', 'center')
    target: anchor on the other rectangle
    guide_type: guide published when the rule fires
    """
    name: str
    moving: str
    target: str
    guide_type: GuideType


# Evaluated in this order for every other sprite; a later match overwrites
# an earlier one. Distance ties and closer candidates do not change this.
SNAP_RULES: Tuple[SnapRule, ...] = (
    SnapRule('leading-leading', 'leading', 'leading', GuideType.EDGE),
    SnapRule('trailing-trailing', 'trailing', 'trailing', GuideType.EDGE),
    SnapRule('leading-trailing', 'leading', 'trailing', GuideType.EDGE),
    SnapRule('trailing-leading', 'trailing', 'leading', GuideType.EDGE),
    SnapRule('center', 'center', 'center', GuideType.CENTER),
)

# Offset from an anchor back to the leading edge, as a fraction of the size
_ANCHOR_FRACTION = {'leading': 0.0, 'trailing': 1.0, 'center': 0.5}


class SnapResult(NamedTuple):
    x: float
    y: float
    guides: List[SnapGuide]


def _snap_axis(current: float, origin: float, size: float,
               other_start: float, other_size: float, threshold: float,
               direction: GuideDirection, guides: List[SnapGuide]) -> float:
    """Run every rule for one axis against one other rectangle.

    The leading anchor reads the running coordinate, so an earlier snap on
    this axis feeds later leading-edge checks. Trailing and center anchors
    always read the unsnapped rectangle.
    """
    for rule in SNAP_RULES:
        if rule.moving == 'leading':
            moving_value = current
        else:
            moving_value = origin + size * _ANCHOR_FRACTION[rule.moving]
        target_value = other_start + other_size * _ANCHOR_FRACTION[rule.target]

        if abs(moving_value - target_value) < threshold:
            current = target_value - size * _ANCHOR_FRACTION[rule.moving]
            guides.append(SnapGuide(direction, target_value, rule.guide_type))
    return current


def compute_snap(position: Vec2, size: Tuple[float, float],
                 others: Sequence, threshold: float) -> SnapResult:
    """Snap a moving rectangle to the edges and centers of other rectangles.

    For each other rectangle, in the given order, the vertical rules (x axis)
    run first, then the horizontal rules (y axis). A rule fires when the
    anchor distance is strictly below `threshold`; every firing overwrites
    the coordinate and appends a guide.

    Args:
        position: Unsnapped top-left of the moving rectangle (world units)
        size: (width, height) of the moving rectangle
        others: Candidate rectangles, in store order
        threshold: Snap distance in world units

    Returns:
        SnapResult with the possibly adjusted x/y and the ordered guide list.
        Unchanged position and no guides when nothing is within range.
    """
    width, height = size
    x, y = position
    guides: List[SnapGuide] = []

    for other in others:
        x = _snap_axis(x, position.x, width, other.x, other.width,
                       threshold, GuideDirection.VERTICAL, guides)
        y = _snap_axis(y, position.y, height, other.y, other.height,
                       threshold, GuideDirection.HORIZONTAL, guides)

    return SnapResult(x, y, guides)
