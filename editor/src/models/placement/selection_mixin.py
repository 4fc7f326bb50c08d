"""
Selection Mixin for PlacementStore

Selection is a set of sprite ids held in the snapshot. Every transition
keeps it a subset of the ids on the canvas.
"""

from dataclasses import replace

from utils.geometry import aabb_intersect


class PlacementSelectionMixin:
    """Mixin providing selection operations

    This mixin expects the parent class to have:
    - self._state: PlacementState
    - self._commit(new_state, description)
    """

    def select_sprite(self, sprite_id: str, additive: bool = False):
        """Click-style selection

        Non-additive: selection becomes {sprite_id}, or empty if sprite_id was
        already the only selected sprite. Additive: toggles sprite_id.
        Unknown ids leave the selection untouched.
        """
        state = self._state
        if not state.has(sprite_id):
            return

        current = state.selected_ids
        if additive:
            selected = current - {sprite_id} if sprite_id in current else current | {sprite_id}
        elif current == {sprite_id}:
            selected = frozenset()
        else:
            selected = frozenset([sprite_id])
        self._commit(replace(state, selected_ids=frozenset(selected)), f"Selected {sprite_id}")

    def select_in_rect(self, rect):
        """Replace the selection with every sprite overlapping rect

        Sprites that only touch the rectangle's boundary are not selected.
        """
        state = self._state
        selected = frozenset(p.id for p in state.sprites if aabb_intersect(p, rect))
        self._commit(replace(state, selected_ids=selected),
                     f"Marquee selected {len(selected)} sprites")

    def select_all(self):
        state = self._state
        self._commit(replace(state, selected_ids=frozenset(state.ids)), "Selected all")

    def deselect_all(self):
        self._commit(replace(self._state, selected_ids=frozenset()), "Deselected all")
