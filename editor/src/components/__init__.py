"""UI components for the Sprite Compose Editor

This package contains the Qt widgets:
- compose_canvas: interactive canvas (built from canvas_widgets mixins)
- compose_toolbar: zoom, arrange and selection controls
"""

from .compose_canvas import ComposeCanvas
from .compose_toolbar import ComposeToolbar

__all__ = [
    'ComposeCanvas',
    'ComposeToolbar',
]
