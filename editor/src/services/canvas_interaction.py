"""
Canvas interaction controller.

Turns pointer, wheel and keyboard input into PlacementStore transitions.
Qt-free: the canvas widget translates its QEvents into the small event
records below, so the gesture logic can be driven directly from tests.

Gestures (at most one at a time, held in the store's session):
- Pan: middle button, or Alt + left button (also over a sprite)
- Marquee: left button on empty canvas
- Drag: left button on a sprite

Pointer coordinates are container-local screen pixels.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional

from constants import (
    MARQUEE_MIN_SIZE, NUDGE_STEP, NUDGE_STEP_FAST,
    WHEEL_ZOOM_STEP, BUTTON_ZOOM_STEP,
)
from models.placement import PlacementStore
from models.session import Idle, Dragging, Marqueeing, Panning
from models.sprite import PositionUpdate
from models.transform import Vec2
from utils.coordinate_transforms import viewport_screen_to_world, screen_delta_to_world
from utils.geometry import compute_snap


class PointerButton(IntEnum):
    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


@dataclass(frozen=True)
class PointerEvent:
    """Pointer press/move/release in container-local screen pixels

    target_id is the sprite under the pointer, None over empty canvas.
    """
    x: float
    y: float
    button: PointerButton = PointerButton.LEFT
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False
    target_id: Optional[str] = None

    @property
    def position(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def multi_select(self) -> bool:
        return self.shift or self.ctrl


@dataclass(frozen=True)
class WheelEvent:
    """Wheel notch; positive delta_y scrolls down (away from the user)"""
    delta_y: float
    ctrl: bool = False
    meta: bool = False


@dataclass(frozen=True)
class KeyEvent:
    """Key press using DOM-style key names ('Delete', 'Escape', 'a', 'ArrowUp', ...)"""
    key: str
    shift: bool = False
    ctrl: bool = False
    meta: bool = False


KEY_DELETE = 'Delete'
KEY_ESCAPE = 'Escape'
KEY_SELECT_ALL = 'a'

# Arrow key -> unit direction in world space (y-down)
ARROW_DIRECTIONS = {
    'ArrowUp': (0, -1),
    'ArrowDown': (0, 1),
    'ArrowLeft': (-1, 0),
    'ArrowRight': (1, 0),
}


class CanvasInteraction:
    """Maps input events to placement store transitions

    Every handler returns True when it consumed the event.
    """

    def __init__(self, store: PlacementStore):
        self.store = store
        self._logger = logging.getLogger('CanvasInteraction')

    # ========================================
    # Pointer
    # ========================================

    def pointer_down(self, event: PointerEvent) -> bool:
        state = self.store.state
        if not isinstance(state.session, Idle):
            # A gesture is already running (e.g. second button pressed mid-drag)
            return False

        if event.button == PointerButton.MIDDLE or (event.button == PointerButton.LEFT and event.alt):
            self._logger.debug(f"Pan start at ({event.x}, {event.y})")
            return self.store.set_panning(event.position, state.viewport.offset)

        if event.button != PointerButton.LEFT:
            return False

        if event.target_id is None:
            return self._begin_marquee(event)
        return self._begin_drag(event)

    def pointer_move(self, event: PointerEvent) -> bool:
        state = self.store.state
        session = state.session

        if isinstance(session, Panning):
            offset = session.offset_for(event.position)
            self.store.set_offset(offset.x, offset.y)
            return True

        if isinstance(session, Marqueeing):
            self.store.update_selection_rect(viewport_screen_to_world(event.position, state.viewport))
            return True

        if isinstance(session, Dragging):
            self._drag_to(session, event.position)
            return True

        return False

    def pointer_up(self, event: Optional[PointerEvent] = None) -> bool:
        """End the active gesture; a marquee commits its selection here"""
        session = self.store.state.session

        if isinstance(session, Marqueeing):
            rect = session.rect
            # Tiny marquees are treated as clicks on empty canvas
            if rect.width > MARQUEE_MIN_SIZE and rect.height > MARQUEE_MIN_SIZE:
                self.store.select_in_rect(rect)
            self.store.set_selecting(None)
            return True

        if isinstance(session, (Panning, Dragging)):
            self._logger.debug(f"{session.kind} end")
            self.store.end_session()
            return True

        return False

    def pointer_leave(self) -> bool:
        """Pointer left the canvas: same as release, so no gesture gets stuck"""
        return self.pointer_up()

    # ========================================
    # Gestures
    # ========================================

    def _begin_marquee(self, event: PointerEvent) -> bool:
        state = self.store.state
        world = viewport_screen_to_world(event.position, state.viewport)
        if not event.shift:
            self.store.deselect_all()
        self._logger.debug(f"Marquee start at world ({world.x:.1f}, {world.y:.1f})")
        return self.store.set_selecting(world)

    def _begin_drag(self, event: PointerEvent) -> bool:
        sprite_id = event.target_id
        before = self.store.state
        if not before.has(sprite_id):
            return False

        was_selected = sprite_id in before.selected_ids
        multi = event.multi_select

        # A press on an already-selected sprite keeps the selection so the
        # whole group can be dragged
        if not was_selected:
            self.store.select_sprite(sprite_id, additive=multi)
        self.store.bring_to_front(sprite_id)

        if was_selected or multi:
            moving = before.selected_ids | {sprite_id}
        else:
            moving = {sprite_id}

        start_positions = tuple(
            (placed.id, Vec2(placed.x, placed.y))
            for placed in self.store.state.sprites
            if placed.id in moving
        )
        self._logger.debug(f"Drag start: {len(start_positions)} sprites, first={start_positions[0][0]}")
        return self.store.set_dragging(Dragging(event.position, start_positions))

    def _drag_to(self, session: Dragging, pointer: Vec2):
        """Move the dragged group; the first sprite snaps and the rest follow

        The snap correction of the first sprite is applied unchanged to every
        other moving sprite, so the group keeps its shape.
        """
        state = self.store.state
        first_id, first_start = session.first
        delta = screen_delta_to_world(pointer.x - session.start_pointer.x,
                                      pointer.y - session.start_pointer.y,
                                      state.viewport.scale)
        naive = first_start + delta

        first_position = naive
        guides = []
        placed = state.get(first_id)
        if state.snap_enabled and placed is not None:
            candidates = [p for p in state.sprites if p.id not in session.moving_ids]
            result = compute_snap(naive, (placed.width, placed.height), candidates, state.snap_threshold)
            first_position = Vec2(result.x, result.y)
            guides = result.guides
        snap = first_position - naive

        updates: List[PositionUpdate] = [PositionUpdate(first_id, first_position.x, first_position.y)]
        for sprite_id, start in session.start_positions[1:]:
            updates.append(PositionUpdate(sprite_id,
                                          start.x + delta.x + snap.x,
                                          start.y + delta.y + snap.y))

        self.store.update_positions(updates)
        self.store.set_active_guides(guides)

    # ========================================
    # Zoom
    # ========================================

    def wheel(self, event: WheelEvent) -> bool:
        """Ctrl/Cmd + wheel zooms; plain wheel is left to the caller"""
        if not (event.ctrl or event.meta):
            return False
        step = -WHEEL_ZOOM_STEP if event.delta_y > 0 else WHEEL_ZOOM_STEP
        self.store.set_scale(self.store.state.viewport.scale + step)
        return True

    def zoom_in(self):
        self.store.set_scale(self.store.state.viewport.scale + BUTTON_ZOOM_STEP)

    def zoom_out(self):
        self.store.set_scale(self.store.state.viewport.scale - BUTTON_ZOOM_STEP)

    # ========================================
    # Keyboard
    # ========================================

    def key_down(self, event: KeyEvent) -> bool:
        state = self.store.state
        selected = state.selected_ids

        if event.key == KEY_DELETE:
            if not selected:
                return False
            self.store.remove_sprites(selected)
            return True

        if (event.ctrl or event.meta) and event.key.lower() == KEY_SELECT_ALL:
            self.store.select_all()
            return True

        if event.key == KEY_ESCAPE:
            self.store.deselect_all()
            return True

        if event.key in ARROW_DIRECTIONS and selected:
            step = NUDGE_STEP_FAST if event.shift else NUDGE_STEP
            dx, dy = ARROW_DIRECTIONS[event.key]
            # Nudges bypass snapping
            self.store.update_positions(
                PositionUpdate(p.id, p.x + dx * step, p.y + dy * step)
                for p in state.selected_sprites()
            )
            return True

        return False
