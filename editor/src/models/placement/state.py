"""Immutable snapshot of the compose canvas."""

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from constants import (
    DEFAULT_SNAP_ENABLED, DEFAULT_SNAP_THRESHOLD, DEFAULT_SHOW_SNAP_GUIDES,
)
from models.canvas import BackgroundType, SnapGuide, ViewportTransform
from models.session import IDLE, InteractionSession
from models.sprite import PlacedSprite


@dataclass(frozen=True)
class PlacementState:
    """Everything the placement store owns, replaced whole on every change.

    Attributes:
        sprites: Placed sprites in store (insertion) order
        selected_ids: Ids of selected sprites, always a subset of sprite ids
        z_counter: Highest z-index handed out so far
        viewport: Current scale and pan offset
        snap_enabled: Whether dragging consults snapping
        snap_threshold: Snap distance in world units
        show_snap_guides: Whether guides are drawn (does not affect snapping)
        active_guides: Guides published by the current drag tick
        session: Current gesture (idle, panning, marqueeing, dragging)
        background: Canvas backdrop style
    """
    sprites: Tuple[PlacedSprite, ...] = ()
    selected_ids: FrozenSet[str] = frozenset()
    z_counter: int = 0
    viewport: ViewportTransform = ViewportTransform()
    snap_enabled: bool = DEFAULT_SNAP_ENABLED
    snap_threshold: float = DEFAULT_SNAP_THRESHOLD
    show_snap_guides: bool = DEFAULT_SHOW_SNAP_GUIDES
    active_guides: Tuple[SnapGuide, ...] = ()
    session: InteractionSession = IDLE
    background: BackgroundType = BackgroundType.CHECKER

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(placed.id for placed in self.sprites)

    def get(self, sprite_id: str) -> Optional[PlacedSprite]:
        for placed in self.sprites:
            if placed.id == sprite_id:
                return placed
        return None

    def has(self, sprite_id: str) -> bool:
        return self.get(sprite_id) is not None

    def selected_sprites(self) -> Tuple[PlacedSprite, ...]:
        """Selected sprites in store order"""
        return tuple(p for p in self.sprites if p.id in self.selected_ids)
