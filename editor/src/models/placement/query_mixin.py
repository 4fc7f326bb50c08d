"""
Query Mixin for PlacementStore

Read-only queries for the UI and the export step. Nothing here changes
state. Unknown ids return None rather than raising.
"""

from typing import List, Optional, Tuple

from models.canvas import CanvasBounds
from models.sprite import PlacedSprite
from models.transform import Vec2


class PlacementQueryMixin:
    """Mixin providing query API for PlacementStore

    This mixin expects the parent class to have:
    - self._state: PlacementState
    """

    # ========================================
    # Sprite Queries
    # ========================================

    @property
    def sprite_count(self) -> int:
        return len(self._state.sprites)

    @property
    def selection_count(self) -> int:
        return len(self._state.selected_ids)

    def get_sprite(self, sprite_id: str) -> Optional[PlacedSprite]:
        return self._state.get(sprite_id)

    def is_selected(self, sprite_id: str) -> bool:
        return sprite_id in self._state.selected_ids

    def get_selected_sprites(self) -> Tuple[PlacedSprite, ...]:
        """Selected sprites in store order"""
        return self._state.selected_sprites()

    def sprites_by_z(self) -> List[PlacedSprite]:
        """Sprites in paint order: z ascending, ties in store order"""
        return sorted(self._state.sprites, key=lambda p: p.z_index)

    def hit_test(self, point: Vec2) -> Optional[PlacedSprite]:
        """Topmost sprite under a world point, or None over empty canvas

        Args:
            point: World coordinates

        Returns:
            The sprite painted last among those containing the point
        """
        for placed in reversed(self.sprites_by_z()):
            if placed.rect.contains(point):
                return placed
        return None

    # ========================================
    # Bounds Queries
    # ========================================

    def get_canvas_bounds(self) -> CanvasBounds:
        """AABB over every placed sprite

        Returns:
            CanvasBounds with min/max corners and width/height; all zeros
            when the canvas is empty
        """
        return CanvasBounds.from_sprites(self._state.sprites)

    def get_working_area(self) -> Tuple[float, float]:
        """(width, height) the canvas surface should offer for panning"""
        return self.get_canvas_bounds().working_area()
