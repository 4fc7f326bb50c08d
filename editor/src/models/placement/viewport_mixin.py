"""
Viewport Mixin for PlacementStore

View settings that do not move sprites: zoom, pan offset, snapping
switches and the canvas background.
"""

from dataclasses import replace
from typing import Union

from constants import BACKGROUND_CYCLE
from models.canvas import BackgroundType, ViewportTransform, clamp_scale


class PlacementViewportMixin:
    """Mixin providing viewport and display option operations

    This mixin expects the parent class to have:
    - self._state: PlacementState
    - self._commit(new_state, description)
    """

    # ========================================
    # Zoom / Pan
    # ========================================

    def set_scale(self, scale: float):
        """Set zoom, clamped to [MIN_SCALE, MAX_SCALE]"""
        state = self._state
        viewport = replace(state.viewport, scale=clamp_scale(scale))
        self._commit(replace(state, viewport=viewport), f"Scale {viewport.scale:.2f}")

    def set_offset(self, x: float, y: float):
        """Set the screen-space pan offset"""
        state = self._state
        viewport = replace(state.viewport, offset_x=x, offset_y=y)
        self._commit(replace(state, viewport=viewport), "Offset")

    def reset_view(self):
        """Back to scale 1 and no pan"""
        self._commit(replace(self._state, viewport=ViewportTransform()), "Reset view")

    # ========================================
    # Snapping
    # ========================================

    def toggle_snap(self):
        self.set_snap_enabled(not self._state.snap_enabled)

    def set_snap_enabled(self, enabled: bool):
        """Gate snap correction while dragging (sprites still move when off)"""
        self._commit(replace(self._state, snap_enabled=bool(enabled)),
                     f"Snap {'on' if enabled else 'off'}")

    def set_show_snap_guides(self, show: bool):
        """Toggle guide drawing; snapping itself is unaffected"""
        self._commit(replace(self._state, show_snap_guides=bool(show)), "Snap guides visibility")

    # ========================================
    # Background
    # ========================================

    def set_background(self, background: Union[BackgroundType, str]):
        """Set the canvas backdrop

        Raises:
            ValueError: If background is not a known type
        """
        background = BackgroundType(background)
        self._commit(replace(self._state, background=background), f"Background {background.value}")

    def cycle_background(self) -> BackgroundType:
        """Step to the next background in toolbar order and return it"""
        index = BACKGROUND_CYCLE.index(self._state.background.value)
        background = BackgroundType(BACKGROUND_CYCLE[(index + 1) % len(BACKGROUND_CYCLE)])
        self.set_background(background)
        return background
