"""Canvas-level value types: viewport, snap guides, bounds and option enums."""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple

from constants import (
    DEFAULT_SCALE, MIN_SCALE, MAX_SCALE,
    WORKING_AREA_MIN, WORKING_AREA_MARGIN,
    BACKGROUND_CHECKER, BACKGROUND_WHITE, BACKGROUND_BLACK, BACKGROUND_TRANSPARENT,
)
from models.transform import Vec2


def clamp_scale(scale: float) -> float:
    """Clamp a zoom factor into [MIN_SCALE, MAX_SCALE]"""
    return max(MIN_SCALE, min(MAX_SCALE, scale))


@dataclass(frozen=True)
class ViewportTransform:
    """Maps world units to screen pixels.

    screen = world * scale + offset
    world = (screen - offset) / scale
    """
    scale: float = DEFAULT_SCALE
    offset_x: float = 0.0
    offset_y: float = 0.0

    @property
    def offset(self) -> Vec2:
        return Vec2(self.offset_x, self.offset_y)


class GuideDirection(str, Enum):
    # A horizontal guide is a line of constant y
    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'


class GuideType(str, Enum):
    EDGE = 'edge'
    CENTER = 'center'


@dataclass(frozen=True)
class SnapGuide:
    """Transient alignment line shown while dragging"""
    direction: GuideDirection
    position: float
    type: GuideType


class AlignMode(str, Enum):
    LEFT = 'left'
    RIGHT = 'right'
    TOP = 'top'
    BOTTOM = 'bottom'
    # center-h aligns vertical centers (a shared horizontal line)
    CENTER_H = 'center-h'
    # center-v aligns horizontal centers (a shared vertical line)
    CENTER_V = 'center-v'


class DistributeDirection(str, Enum):
    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'


class BackgroundType(str, Enum):
    CHECKER = BACKGROUND_CHECKER
    WHITE = BACKGROUND_WHITE
    BLACK = BACKGROUND_BLACK
    TRANSPARENT = BACKGROUND_TRANSPARENT


@dataclass(frozen=True)
class CanvasBounds:
    """Bounding box of every placed sprite, all zeros for an empty canvas"""
    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_sprites(cls, sprites: Sequence) -> 'CanvasBounds':
        """AABB over placed sprites, zero-sized when there are none"""
        if not sprites:
            return cls()
        min_x = min(p.x for p in sprites)
        min_y = min(p.y for p in sprites)
        max_x = max(p.x + p.width for p in sprites)
        max_y = max(p.y + p.height for p in sprites)
        return cls(min_x, min_y, max_x, max_y, max_x - min_x, max_y - min_y)

    def working_area(self) -> Tuple[float, float]:
        """Scrollable extent the canvas UI should offer"""
        return (
            max(WORKING_AREA_MIN, self.max_x + WORKING_AREA_MARGIN),
            max(WORKING_AREA_MIN, self.max_y + WORKING_AREA_MARGIN),
        )
