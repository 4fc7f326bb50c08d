"""Placement store package (compose canvas model)"""

from .state import PlacementState
from .selection_mixin import PlacementSelectionMixin
from .arrange_mixin import PlacementArrangeMixin
from .viewport_mixin import PlacementViewportMixin
from .session_mixin import PlacementSessionMixin
from .query_mixin import PlacementQueryMixin
from .core import PlacementStore

__all__ = [
    'PlacementStore',
    'PlacementState',
    'PlacementSelectionMixin',
    'PlacementArrangeMixin',
    'PlacementViewportMixin',
    'PlacementSessionMixin',
    'PlacementQueryMixin',
]
