"""
Sprite Compose Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Staircase placement for newly added sprites
- Snapping and zoom limits
- Auto-arrange shelf packing
- Keyboard nudge distances
- Canvas background and overlay colors
"""

# ======================================================================
# SPRITE PLACEMENT (ADD SPRITES)
# ======================================================================
# New sprites are laid out left to right on a staircase starting here
STAIRCASE_START_X = 20
STAIRCASE_START_Y = 20
STAIRCASE_PADDING = 10      # Gap between consecutive sprites in a batch
STAIRCASE_WRAP_X = 2000     # Cursor beyond this wraps to a new row
STAIRCASE_ROW_STEP = 200    # Fixed row advance on wrap

# ======================================================================
# SNAPPING
# ======================================================================
DEFAULT_SNAP_THRESHOLD = 8  # World units; a rule fires when distance < threshold
DEFAULT_SNAP_ENABLED = True
DEFAULT_SHOW_SNAP_GUIDES = True

# ======================================================================
# VIEWPORT
# ======================================================================
MIN_SCALE = 0.1
MAX_SCALE = 5.0
DEFAULT_SCALE = 1.0
WHEEL_ZOOM_STEP = 0.1       # Ctrl/Cmd + wheel, per notch
BUTTON_ZOOM_STEP = 0.2      # Toolbar zoom in/out buttons

# Working area reported to the UI (scroll extent, grid)
WORKING_AREA_MIN = 2000
WORKING_AREA_MARGIN = 500

# ======================================================================
# AUTO ARRANGE (SHELF PACKING)
# ======================================================================
ARRANGE_ROW_WIDTH = 1500
ARRANGE_PADDING = 10

# ======================================================================
# POINTER AND KEYBOARD
# ======================================================================
MARQUEE_MIN_SIZE = 5        # Marquee must exceed this on both axes to select
NUDGE_STEP = 1              # Arrow keys
NUDGE_STEP_FAST = 10        # Arrow keys with Shift

# ======================================================================
# BACKGROUND
# ======================================================================
BACKGROUND_CHECKER = 'checker'
BACKGROUND_WHITE = 'white'
BACKGROUND_BLACK = 'black'
BACKGROUND_TRANSPARENT = 'transparent'

# Order used by the toolbar's background button
BACKGROUND_CYCLE = [
    BACKGROUND_CHECKER,
    BACKGROUND_WHITE,
    BACKGROUND_BLACK,
    BACKGROUND_TRANSPARENT,
]
DEFAULT_BACKGROUND = BACKGROUND_CHECKER

CHECKER_TILE_SIZE = 16
CHECKER_LIGHT = '#3A3A3A'
CHECKER_DARK = '#2E2E2E'
CANVAS_CLEAR_COLOR = '#1E1E1E'

# ======================================================================
# OVERLAY COLORS
# ======================================================================
SELECTION_COLOR = '#3B82F6'
MARQUEE_FILL_COLOR = '#333B82F6'  # Qt reads 8-digit hex as #AARRGGBB
EDGE_GUIDE_COLOR = '#F43F5E'
CENTER_GUIDE_COLOR = '#22D3EE'
WORKING_AREA_BORDER_COLOR = '#555555'

# ======================================================================
# EXPORT
# ======================================================================
DEFAULT_OUTPUT_NAME = 'spritesheet'
DEFAULT_EXPORT_PADDING = 0
DEFAULT_TRIM_TO_BOUNDS = True
