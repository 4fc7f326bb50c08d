"""Interaction session state for the compose canvas.

Exactly one session is active at a time: idle, panning, marqueeing or
dragging. The session is a single field of the placement snapshot, so two
gestures can never be recorded as active together.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from models.transform import Vec2, Rect
from utils.geometry import normalize_rect


@dataclass(frozen=True)
class Idle:
    """No gesture in progress."""
    kind = 'idle'


IDLE = Idle()


@dataclass(frozen=True)
class Panning:
    """Viewport pan in progress.

    start_pointer: screen position of the press
    start_offset: viewport offset at the press
    """
    start_pointer: Vec2
    start_offset: Vec2
    kind = 'panning'

    def offset_for(self, pointer: Vec2) -> Vec2:
        """Offset for the current pointer (screen space, unscaled)"""
        return self.start_offset + (pointer - self.start_pointer)


@dataclass(frozen=True)
class Marqueeing:
    """Rubber-band selection in progress (world coordinates)."""
    start_world: Vec2
    current_world: Vec2
    kind = 'marqueeing'

    @property
    def rect(self) -> Rect:
        return normalize_rect(self.start_world, self.current_world)

    def moved_to(self, world: Vec2) -> 'Marqueeing':
        return replace(self, current_world=world)


@dataclass(frozen=True)
class Dragging:
    """Sprite drag in progress.

    start_positions is captured at press time in store order; its first entry
    is the sprite that snapping is computed for.
    """
    start_pointer: Vec2
    start_positions: Tuple[Tuple[str, Vec2], ...]
    kind = 'dragging'

    @property
    def moving_ids(self) -> frozenset:
        return frozenset(sprite_id for sprite_id, _ in self.start_positions)

    @property
    def first(self) -> Optional[Tuple[str, Vec2]]:
        return self.start_positions[0] if self.start_positions else None


InteractionSession = Union[Idle, Panning, Marqueeing, Dragging]

