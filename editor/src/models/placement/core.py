"""
Sprite Compose Editor - Placement Store

THE MODEL for the compose canvas. Owns sprite placement, selection,
z-order, viewport and the transient interaction session.

The store is INDEPENDENT of UI:
- No Qt imports
- No rendering logic
- No pixel data (sprites carry asset paths only)

Every public operation is a synchronous transition: it builds a new
PlacementState and replaces the old one in a single assignment, then
notifies listeners. Readers never see a half-applied change.

Failure policy: operations on unknown ids, under-sized selections or empty
canvases leave the state unchanged and return quietly. This is part of the
contract with the UI; these cases must stay no-ops and must not be turned
into exceptions.

Usage:
    store = PlacementStore()
    PlacementStore.set_active(store)

    store.add_listener(on_state_changed)
    store.add_sprites([Sprite('a', 'a', 'a.png', 100, 100)])
    store.select_all()
    store.align_selected('left')
"""

import logging
from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from constants import (
    STAIRCASE_START_X, STAIRCASE_START_Y, STAIRCASE_PADDING,
    STAIRCASE_WRAP_X, STAIRCASE_ROW_STEP,
)
from models.session import IDLE, Dragging
from models.sprite import PlacedSprite, PositionUpdate, Sprite
from .state import PlacementState
from .selection_mixin import PlacementSelectionMixin
from .arrange_mixin import PlacementArrangeMixin
from .viewport_mixin import PlacementViewportMixin
from .session_mixin import PlacementSessionMixin
from .query_mixin import PlacementQueryMixin


StateListener = Callable[[PlacementState], None]


class PlacementStore(PlacementSelectionMixin, PlacementArrangeMixin, PlacementViewportMixin,
                     PlacementSessionMixin, PlacementQueryMixin):
    """Canonical compose canvas state with its full operation API

    Active Instance Pattern:
        PlacementStore.set_active(store) - Set the active store
        PlacementStore.get_active() - Get the active store
        PlacementStore.has_active() - Check if active store exists

    Properties:
        state: Current immutable PlacementState snapshot
    """

    _active_instance = None  # Class variable for active store

    @classmethod
    def set_active(cls, instance: 'PlacementStore'):
        """Set the active store instance

        Args:
            instance: PlacementStore to set as active
        """
        cls._active_instance = instance

    @classmethod
    def get_active(cls) -> 'PlacementStore':
        """Get the active store instance

        Returns:
            Active PlacementStore

        Raises:
            RuntimeError: If no active instance set
        """
        if cls._active_instance is None:
            raise RuntimeError("No active PlacementStore set. Call PlacementStore.set_active() first.")
        return cls._active_instance

    @classmethod
    def has_active(cls) -> bool:
        """Check if an active store exists"""
        return cls._active_instance is not None

    def __init__(self, snap_threshold: Optional[float] = None):
        """Create an empty store

        Args:
            snap_threshold: Override for the default snap distance (world units)
        """
        self._logger = logging.getLogger('PlacementStore')
        self._listeners: List[StateListener] = []

        state = PlacementState()
        if snap_threshold is not None:
            state = replace(state, snap_threshold=float(snap_threshold))
        self._state = state

    @property
    def state(self) -> PlacementState:
        return self._state

    # ========================================
    # Listeners
    # ========================================

    def add_listener(self, callback: StateListener):
        """Register a callback receiving every new snapshot"""
        self._listeners.append(callback)

    def remove_listener(self, callback: StateListener):
        """Remove a listener"""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify_listeners(self):
        for callback in list(self._listeners):
            try:
                callback(self._state)
            except Exception:
                self._logger.exception("Error notifying state listener")

    def _commit(self, new_state: PlacementState, description: str = "") -> bool:
        """Replace the snapshot and notify listeners.

        Returns:
            True if the state changed, False for a no-op transition
        """
        if new_state == self._state:
            return False
        self._state = new_state
        self._logger.debug(f"{description} (sprites={len(new_state.sprites)}, "
                           f"selected={len(new_state.selected_ids)})")
        self._notify_listeners()
        return True

    # ========================================
    # Sprite Lifecycle
    # ========================================

    def add_sprites(self, sprites: Iterable[Union[Sprite, dict]]) -> List[str]:
        """Place a batch of new sprites on a staircase

        Sprites whose id is already on the canvas are skipped, as are repeats
        of an id within the batch (first one wins). The staircase starts at
        (20, 20) on an empty canvas, or just right of the rightmost sprite
        otherwise; each sprite advances the cursor by its width plus padding
        and the cursor wraps to a new row once it passes x = 2000.

        Args:
            sprites: Sprite objects or import records ({id, name, path, width, height})

        Returns:
            Ids actually added, in placement order (empty for a no-op)

        Raises:
            ValueError: If an import record is malformed
        """
        state = self._state
        present = set(state.ids)
        fresh: List[Sprite] = []
        for sprite in sprites:
            if not isinstance(sprite, Sprite):
                sprite = Sprite.from_dict(sprite)
            if sprite.id in present:
                continue
            present.add(sprite.id)
            fresh.append(sprite)

        if not fresh:
            # Everything already present: unchanged state, no error
            return []

        if state.sprites:
            next_x = max(placed.right for placed in state.sprites) + STAIRCASE_PADDING
        else:
            next_x = STAIRCASE_START_X
        next_y = STAIRCASE_START_Y

        counter = state.z_counter
        added = []
        for sprite in fresh:
            counter += 1
            added.append(PlacedSprite(sprite, next_x, next_y, counter))
            next_x += sprite.width + STAIRCASE_PADDING
            if next_x > STAIRCASE_WRAP_X:
                next_x = STAIRCASE_START_X
                next_y += STAIRCASE_ROW_STEP

        self._commit(replace(state, sprites=state.sprites + tuple(added), z_counter=counter),
                     f"Added {len(added)} sprites")
        return [placed.id for placed in added]

    def remove_sprites(self, ids: Iterable[str]):
        """Remove sprites and drop them from the selection in the same step

        Unknown ids are ignored.
        """
        doomed = set(ids)
        state = self._state
        kept = tuple(p for p in state.sprites if p.id not in doomed)
        if len(kept) == len(state.sprites):
            return
        self._commit(replace(state, sprites=kept, selected_ids=state.selected_ids - doomed),
                     f"Removed {len(state.sprites) - len(kept)} sprites")

    def clear_canvas(self):
        """Remove every sprite, clear selection and guides, reset the z counter"""
        state = self._state
        session = IDLE if isinstance(state.session, Dragging) else state.session
        self._commit(replace(state, sprites=(), selected_ids=frozenset(), active_guides=(),
                             z_counter=0, session=session),
                     "Cleared canvas")

    # ========================================
    # Positions
    # ========================================

    def update_positions(self, updates: Iterable[Union[PositionUpdate, Tuple[str, float, float]]]):
        """Set absolute positions for a batch of sprites

        The single path through which dragging, nudging, alignment,
        distribution and auto-arrange move sprites. Ids not on the canvas are
        ignored; if an id repeats, the last position wins.
        """
        targets: Dict[str, Tuple[float, float]] = {}
        for sprite_id, x, y in updates:
            targets[sprite_id] = (x, y)
        if not targets:
            return

        state = self._state
        moved = tuple(
            placed.moved_to(*targets[placed.id]) if placed.id in targets else placed
            for placed in state.sprites
        )
        self._commit(replace(state, sprites=moved), f"Moved {len(targets)} sprites")

    def update_sprite_position(self, sprite_id: str, x: float, y: float):
        """Set the absolute position of one sprite (unknown id is a no-op)"""
        self.update_positions([PositionUpdate(sprite_id, x, y)])

    # ========================================
    # Z-Order
    # ========================================

    def bring_to_front(self, sprite_id: str):
        """Give a sprite z = counter + 1 and advance the counter

        Unknown ids are a no-op and do not advance the counter.
        """
        state = self._state
        if not state.has(sprite_id):
            return
        counter = state.z_counter + 1
        sprites = tuple(p.with_z(counter) if p.id == sprite_id else p for p in state.sprites)
        self._commit(replace(state, sprites=sprites, z_counter=counter),
                     f"Brought {sprite_id} to front (z={counter})")

    def send_to_back(self, sprite_id: str):
        """Give a sprite z = 0 without touching the counter

        Several sprites may end up sharing z = 0; draw order among them then
        falls back to store order. Unknown ids are a no-op.
        """
        state = self._state
        if not state.has(sprite_id):
            return
        sprites = tuple(p.with_z(0) if p.id == sprite_id else p for p in state.sprites)
        self._commit(replace(state, sprites=sprites), f"Sent {sprite_id} to back")
