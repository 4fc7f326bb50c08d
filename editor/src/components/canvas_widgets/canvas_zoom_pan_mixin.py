"""Mixin for handling zoom and pan in the compose canvas.

Provides viewport navigation including:
- Zoom in/out/reset (toolbar and Ctrl+wheel)
- Pan cursor feedback while a pan gesture is active
"""

from PyQt5.QtCore import Qt

from services.canvas_interaction import WheelEvent


class CanvasZoomPanMixin:
    """Mixin providing zoom and pan functionality for canvas."""

    # Expected state variables (initialized in main class):
    # - store: PlacementStore
    # - interaction: CanvasInteraction

    def zoom_in(self):
        """Zoom in by one toolbar step."""
        self.interaction.zoom_in()

    def zoom_out(self):
        """Zoom out by one toolbar step."""
        self.interaction.zoom_out()

    def zoom_reset(self):
        """Reset zoom to 100% and remove pan."""
        self.store.reset_view()

    def set_zoom_percent(self, zoom_percent):
        """Set zoom to a specific percentage (clamped by the store)."""
        self.store.set_scale(zoom_percent / 100.0)

    def get_zoom_percent(self):
        """Get current zoom percentage."""
        return int(round(self.store.state.viewport.scale * 100))

    # ========================================
    # Mouse Event Handlers
    # ========================================

    def wheelEvent(self, event):
        """Handle Ctrl/Cmd + wheel for zoom."""
        modifiers = event.modifiers()
        # Qt reports wheel-up as positive; the controller expects scroll-down positive
        wheel = WheelEvent(
            delta_y=-event.angleDelta().y(),
            ctrl=bool(modifiers & Qt.ControlModifier),
            meta=bool(modifiers & Qt.MetaModifier),
        )
        if event.angleDelta().y() != 0 and self.interaction.wheel(wheel):
            event.accept()
        else:
            event.ignore()

    def _update_pan_cursor(self, panning):
        """Closed hand while panning, arrow otherwise."""
        self.setCursor(Qt.ClosedHandCursor if panning else Qt.ArrowCursor)
