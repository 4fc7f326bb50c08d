import sys
import os
import argparse
import logging

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QStatusBar
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor

# Component imports
from components.compose_canvas import ComposeCanvas
from components.compose_toolbar import ComposeToolbar

# Model imports
from models.placement import PlacementStore

# Utility imports
from utils.logger import set_main_window, set_debug_mode

# Mixin imports
from window.menu_mixin import MenuMixin
from window.asset_mixin import AssetMixin


class ComposeEditor(MenuMixin, AssetMixin, QMainWindow):
    def __init__(self, store=None):
        super().__init__()
        self.setWindowTitle("Sprite Compose Editor")
        self.resize(1280, 720)

        # Placement store (single source of truth for the canvas)
        self.store = store if store is not None else PlacementStore()
        PlacementStore.set_active(self.store)

        # Initialize global logger with main window reference
        set_main_window(self)

        self.setup_ui()
        self.store.add_listener(self._on_state_changed)
        self._on_state_changed(self.store.state)

    # ============= UI Setup =============

    def setup_ui(self):
        central_widget = QWidget()
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.toolbar = ComposeToolbar(self)
        self.canvas = ComposeCanvas(self.store, self)
        layout.addWidget(self.toolbar)
        layout.addWidget(self.canvas, 1)
        self.setCentralWidget(central_widget)

        self.setStatusBar(QStatusBar(self))

        # Create menu bar (needs canvas for zoom actions)
        self._create_menu_bar()

        # Toolbar -> store
        self.toolbar.zoom_in_requested.connect(self.canvas.zoom_in)
        self.toolbar.zoom_out_requested.connect(self.canvas.zoom_out)
        self.toolbar.reset_view_requested.connect(self.canvas.zoom_reset)
        self.toolbar.snap_toggled.connect(self.store.set_snap_enabled)
        self.toolbar.background_cycle_requested.connect(self.store.cycle_background)
        self.toolbar.auto_arrange_requested.connect(self.store.auto_arrange)
        self.toolbar.align_requested.connect(self.store.align_selected)
        self.toolbar.distribute_requested.connect(self.store.distribute_selected)
        self.toolbar.delete_requested.connect(self._delete_selected)
        self.toolbar.clear_requested.connect(self.store.clear_canvas)

        # Canvas -> toolbar
        self.canvas.zoom_changed.connect(self.toolbar.set_zoom_percent)
        self.toolbar.set_zoom_percent(self.canvas.get_zoom_percent())

        self.canvas.setFocus()

    def _on_state_changed(self, state):
        """Refresh window chrome that mirrors store state"""
        self.toolbar.set_counts(len(state.sprites), len(state.selected_ids))
        self.toolbar.set_snap_checked(state.snap_enabled)
        self._sync_view_actions(state)

    def closeEvent(self, event):
        self.store.remove_listener(self._on_state_changed)
        self.canvas.detach()
        super().closeEvent(event)


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Arrange sprites on a canvas for atlas composition")
    parser.add_argument('sprites', nargs='*', help="JSON files of sprite import records")
    parser.add_argument('-v', '--verbose', action='store_true', help="Debug logging")
    parser.add_argument('--debug', action='store_true',
                        help="Raise errors with full tracebacks instead of popups")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the Sprite Compose Editor application"""
    args = _parse_args(sys.argv[1:] if argv is None else argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)  # Output to console
        ]
    )
    if args.debug:
        set_debug_mode(True)

    app = QtWidgets.QApplication(sys.argv[:1])

    # Use Fusion style with dark palette
    app.setStyle("Fusion")

    dark_palette = QPalette()
    dark_palette.setColor(QPalette.Window, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.WindowText, Qt.white)
    dark_palette.setColor(QPalette.Base, QColor(25, 25, 25))
    dark_palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ToolTipBase, Qt.white)
    dark_palette.setColor(QPalette.ToolTipText, Qt.white)
    dark_palette.setColor(QPalette.Text, Qt.white)
    dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ButtonText, Qt.white)
    dark_palette.setColor(QPalette.BrightText, Qt.red)
    dark_palette.setColor(QPalette.Link, QColor(42, 130, 218))
    dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    dark_palette.setColor(QPalette.HighlightedText, Qt.black)

    app.setPalette(dark_palette)

    window = ComposeEditor()
    for filename in args.sprites:
        window.import_sprites(filename)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
