"""Read-only drawing data derived from a placement snapshot.

The canvas widget rebuilds a RenderProjection whenever the store publishes
a new state and paints from it. Nothing here mutates the store.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from models.canvas import BackgroundType, CanvasBounds, GuideDirection, SnapGuide, ViewportTransform
from models.placement import PlacementState
from models.session import Marqueeing
from models.sprite import PlacedSprite
from models.transform import Rect, Vec2


@dataclass(frozen=True)
class RenderProjection:
    """Everything needed to paint one frame of the compose canvas

    Attributes:
        draw_list: Sprites in paint order (z ascending, ties in store order)
        selected_ids: Sprites to outline
        guides: Snap guides to draw (empty when guide display is off)
        marquee: Marquee rectangle in world units, if one is being drawn
        bounds: AABB over all sprites
        working_area: (width, height) of the drawable surface in world units
        viewport: Zoom and pan used to map world to screen
        background: Backdrop style
    """
    draw_list: Tuple[PlacedSprite, ...]
    selected_ids: FrozenSet[str]
    guides: Tuple[SnapGuide, ...]
    marquee: Optional[Rect]
    bounds: CanvasBounds
    working_area: Tuple[float, float]
    viewport: ViewportTransform
    background: BackgroundType

    @classmethod
    def from_state(cls, state: PlacementState) -> 'RenderProjection':
        sprites = state.sprites
        bounds = CanvasBounds.from_sprites(sprites)
        marquee = state.session.rect if isinstance(state.session, Marqueeing) else None

        return cls(
            draw_list=tuple(sorted(sprites, key=lambda p: p.z_index)),
            selected_ids=state.selected_ids,
            guides=state.active_guides if state.show_snap_guides else (),
            marquee=marquee,
            bounds=bounds,
            working_area=bounds.working_area(),
            viewport=state.viewport,
            background=state.background,
        )

    def is_selected(self, sprite_id: str) -> bool:
        return sprite_id in self.selected_ids


def guide_line(guide: SnapGuide, working_area: Tuple[float, float]) -> Tuple[Vec2, Vec2]:
    """End points of a guide across the working area, in world units"""
    width, height = working_area
    if guide.direction == GuideDirection.VERTICAL:
        return Vec2(guide.position, 0.0), Vec2(guide.position, height)
    return Vec2(0.0, guide.position), Vec2(width, guide.position)
