"""Mixin translating Qt input events for the compose canvas.

Mouse, key and leave events become the controller's plain event records
(services.canvas_interaction), so all gesture logic stays Qt-free.
"""

from PyQt5.QtCore import Qt

from models.session import Panning
from models.transform import Vec2
from services.canvas_interaction import KeyEvent, PointerButton, PointerEvent
from utils.coordinate_transforms import viewport_screen_to_world


_QT_BUTTONS = {
    Qt.LeftButton: PointerButton.LEFT,
    Qt.MiddleButton: PointerButton.MIDDLE,
    Qt.RightButton: PointerButton.RIGHT,
}

_QT_KEYS = {
    Qt.Key_Delete: 'Delete',
    Qt.Key_Escape: 'Escape',
    Qt.Key_A: 'a',
    Qt.Key_Up: 'ArrowUp',
    Qt.Key_Down: 'ArrowDown',
    Qt.Key_Left: 'ArrowLeft',
    Qt.Key_Right: 'ArrowRight',
}


class CanvasInputMixin:
    """Mixin providing mouse and keyboard handling for canvas."""

    # Expected state variables (initialized in main class):
    # - store: PlacementStore
    # - interaction: CanvasInteraction

    def _pointer_event(self, event, button=PointerButton.LEFT, hit_test=False):
        """Build a PointerEvent; hit_test resolves the sprite under the cursor."""
        pos = Vec2(event.pos().x(), event.pos().y())
        modifiers = event.modifiers()
        target_id = None
        if hit_test:
            world = viewport_screen_to_world(pos, self.store.state.viewport)
            hit = self.store.hit_test(world)
            target_id = hit.id if hit else None
        return PointerEvent(
            x=pos.x,
            y=pos.y,
            button=button,
            shift=bool(modifiers & Qt.ShiftModifier),
            ctrl=bool(modifiers & Qt.ControlModifier),
            alt=bool(modifiers & Qt.AltModifier),
            meta=bool(modifiers & Qt.MetaModifier),
            target_id=target_id,
        )

    # ========================================
    # Mouse
    # ========================================

    def mousePressEvent(self, event):
        button = _QT_BUTTONS.get(event.button())
        if button is None:
            super().mousePressEvent(event)
            return
        self.setFocus(Qt.MouseFocusReason)
        if self.interaction.pointer_down(self._pointer_event(event, button, hit_test=True)):
            self._update_pan_cursor(isinstance(self.store.state.session, Panning))
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self.interaction.pointer_move(self._pointer_event(event)):
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if self.interaction.pointer_up(self._pointer_event(event)):
            self._update_pan_cursor(False)
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    def leaveEvent(self, event):
        """Pointer left the widget: end any gesture so none gets stuck."""
        if self.interaction.pointer_leave():
            self._update_pan_cursor(False)
        super().leaveEvent(event)

    # ========================================
    # Keyboard
    # ========================================

    def keyPressEvent(self, event):
        key = _QT_KEYS.get(event.key())
        if key is None:
            super().keyPressEvent(event)
            return
        modifiers = event.modifiers()
        handled = self.interaction.key_down(KeyEvent(
            key=key,
            shift=bool(modifiers & Qt.ShiftModifier),
            ctrl=bool(modifiers & Qt.ControlModifier),
            meta=bool(modifiers & Qt.MetaModifier),
        ))
        if handled:
            event.accept()
        else:
            super().keyPressEvent(event)
