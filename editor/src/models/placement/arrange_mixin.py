"""
Arrange Mixin for PlacementStore

Layout operations over many sprites at once:
- Align the selection to a shared edge or center line
- Distribute the selection with equal gaps
- Shelf-pack the whole canvas (auto arrange)

All of them compute target positions and hand them to update_positions,
so they move sprites through the same path as dragging and nudging.
z-order is never touched here.
"""

from typing import List, Union

from constants import ARRANGE_ROW_WIDTH, ARRANGE_PADDING
from models.canvas import AlignMode, DistributeDirection
from models.sprite import PositionUpdate


class PlacementArrangeMixin:
    """Mixin providing alignment, distribution and auto-arrange

    This mixin expects the parent class to have:
    - self._state: PlacementState
    - self._logger: logging.Logger
    - self.update_positions(updates)
    """

    # ========================================
    # Alignment
    # ========================================

    def align_selected(self, mode: Union[AlignMode, str]):
        """Align every selected sprite to the selection's extreme edge or center

        Modes:
            left / right: shared left edge (min x) / right edge (max right)
            top / bottom: shared top edge (min y) / bottom edge (max bottom)
            center-h: vertical centers on the middle of the selection's y span
            center-v: horizontal centers on the middle of the selection's x span

        Fewer than 2 selected sprites is a silent no-op.

        Args:
            mode: AlignMode or its string value

        Raises:
            ValueError: If mode is not a known alignment
        """
        mode = AlignMode(mode)
        selected = self._state.selected_sprites()
        if len(selected) < 2:
            # Nothing to align against
            return

        min_x = min(p.x for p in selected)
        min_y = min(p.y for p in selected)
        max_right = max(p.right for p in selected)
        max_bottom = max(p.bottom for p in selected)

        updates = []
        for placed in selected:
            x, y = placed.x, placed.y
            if mode == AlignMode.LEFT:
                x = min_x
            elif mode == AlignMode.RIGHT:
                x = max_right - placed.width
            elif mode == AlignMode.TOP:
                y = min_y
            elif mode == AlignMode.BOTTOM:
                y = max_bottom - placed.height
            elif mode == AlignMode.CENTER_H:
                y = (min_y + max_bottom) / 2 - placed.height / 2
            elif mode == AlignMode.CENTER_V:
                x = (min_x + max_right) / 2 - placed.width / 2
            updates.append(PositionUpdate(placed.id, x, y))

        self._logger.debug(f"Align {mode.value}: {len(updates)} sprites")
        self.update_positions(updates)

    # ========================================
    # Distribution
    # ========================================

    def distribute_selected(self, direction: Union[DistributeDirection, str]):
        """Space the selection so consecutive gaps are equal

        Sprites are ordered by position along the axis (stable for ties).
        The first and last keep their positions; the ones in between are
        placed one after another using
        gap = (last trailing edge - first leading edge - sum of sizes) / (n - 1).
        The gap is negative when the sprites are wider than the span; that
        is accepted as-is.

        Fewer than 3 selected sprites is a silent no-op.

        Raises:
            ValueError: If direction is not horizontal or vertical
        """
        direction = DistributeDirection(direction)
        selected = list(self._state.selected_sprites())
        if len(selected) < 3:
            # Two sprites already have a single, trivially equal gap
            return

        horizontal = direction == DistributeDirection.HORIZONTAL
        if horizontal:
            selected.sort(key=lambda p: p.x)
            start = selected[0].x
            span_end = selected[-1].right
            sizes = [p.width for p in selected]
        else:
            selected.sort(key=lambda p: p.y)
            start = selected[0].y
            span_end = selected[-1].bottom
            sizes = [p.height for p in selected]

        gap = (span_end - start - sum(sizes)) / (len(selected) - 1)

        updates: List[PositionUpdate] = []
        cursor = start + sizes[0] + gap
        for placed, size in zip(selected[1:-1], sizes[1:-1]):
            if horizontal:
                updates.append(PositionUpdate(placed.id, cursor, placed.y))
            else:
                updates.append(PositionUpdate(placed.id, placed.x, cursor))
            cursor += size + gap

        self._logger.debug(f"Distribute {direction.value}: gap={gap:.3f}")
        self.update_positions(updates)

    # ========================================
    # Auto Arrange
    # ========================================

    def auto_arrange(self):
        """Shelf-pack every sprite into rows starting at (0, 0)

        Sprites are taken largest area first (ties keep store order). Each
        row is filled left to right with padding; a sprite that would push
        the row past the row width starts a new row below the tallest sprite
        of the current one, unless the row is still empty.

        An empty canvas is a no-op.
        """
        sprites = sorted(self._state.sprites, key=lambda p: p.area, reverse=True)
        if not sprites:
            return

        cursor_x = 0.0
        cursor_y = 0.0
        row_height = 0.0
        updates = []
        for placed in sprites:
            if cursor_x + placed.width > ARRANGE_ROW_WIDTH and cursor_x > 0:
                cursor_x = 0.0
                cursor_y += row_height + ARRANGE_PADDING
                row_height = 0.0
            updates.append(PositionUpdate(placed.id, cursor_x, cursor_y))
            cursor_x += placed.width + ARRANGE_PADDING
            row_height = max(row_height, placed.height)

        self._logger.debug(f"Auto arranged {len(updates)} sprites")
        self.update_positions(updates)
