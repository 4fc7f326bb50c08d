"""
Session Mixin for PlacementStore

Bookkeeping for the transient gesture session. Only the interaction
controller calls these; layout operations never do.

At most one gesture is active. Beginning a gesture while a different one is
running is refused (the state is left as is and False is returned). Ending
a gesture only clears the session if that gesture is the one running.
"""

from dataclasses import replace
from typing import Iterable, Optional

from models.canvas import SnapGuide
from models.session import IDLE, Idle, Dragging, Marqueeing, Panning
from models.transform import Vec2


class PlacementSessionMixin:
    """Mixin providing interaction session transitions

    This mixin expects the parent class to have:
    - self._state: PlacementState
    - self._logger: logging.Logger
    - self._commit(new_state, description)
    """

    def _begin_session(self, session, description: str) -> bool:
        state = self._state
        if not isinstance(state.session, (Idle, type(session))):
            self._logger.debug(f"Refused {session.kind}: {state.session.kind} already active")
            return False
        self._commit(replace(state, session=session), description)
        return True

    def _end_session(self, kind, **changes) -> bool:
        state = self._state
        if not isinstance(state.session, kind):
            return False
        self._commit(replace(state, session=IDLE, **changes), f"Ended {state.session.kind}")
        return True

    # ========================================
    # Dragging
    # ========================================

    def set_dragging(self, session: Optional[Dragging]) -> bool:
        """Begin a drag with `session`, or end the current drag with None

        Ending a drag also clears the active guides.
        """
        if session is None:
            return self._end_session(Dragging, active_guides=())
        return self._begin_session(session, f"Drag {len(session.start_positions)} sprites")

    def set_active_guides(self, guides: Iterable[SnapGuide]):
        self._commit(replace(self._state, active_guides=tuple(guides)), "Guides")

    # ========================================
    # Marquee
    # ========================================

    def set_selecting(self, start: Optional[Vec2]) -> bool:
        """Begin a marquee at `start` (world units), or end it with None"""
        if start is None:
            return self._end_session(Marqueeing)
        return self._begin_session(Marqueeing(start, start), "Marquee")

    def update_selection_rect(self, end: Vec2):
        """Move the marquee's free corner (ignored when no marquee is active)"""
        state = self._state
        if not isinstance(state.session, Marqueeing):
            return
        self._commit(replace(state, session=state.session.moved_to(end)), "Marquee")

    # ========================================
    # Panning
    # ========================================

    def set_panning(self, start_pointer: Vec2, start_offset: Vec2) -> bool:
        return self._begin_session(Panning(start_pointer, start_offset), "Pan")

    def end_panning(self) -> bool:
        return self._end_session(Panning)

    def end_session(self):
        """End whichever gesture is active (pointer released or left the canvas)"""
        state = self._state
        if isinstance(state.session, Dragging):
            self.set_dragging(None)
        elif not isinstance(state.session, Idle):
            self._end_session(type(state.session))
