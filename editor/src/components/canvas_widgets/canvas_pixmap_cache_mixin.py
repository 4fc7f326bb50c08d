"""Mixin for loading sprite images in the compose canvas.

Sprites only carry asset paths; the canvas loads each path once into a
QPixmap and reuses it for every repaint.
"""

import logging
import os

from PyQt5.QtGui import QPixmap


class CanvasPixmapCacheMixin:
    """Mixin providing a per-path pixmap cache for canvas."""

    # Expected state variables (initialized in main class):
    # - _pixmap_cache: dict path -> QPixmap (null pixmap for unreadable files)

    def _get_pixmap(self, path):
        """Pixmap for an asset path; a null pixmap if it cannot be loaded."""
        pixmap = self._pixmap_cache.get(path)
        if pixmap is None:
            pixmap = QPixmap(path) if path and os.path.exists(path) else QPixmap()
            if pixmap.isNull():
                logging.getLogger('ComposeCanvas').debug(f"No image for sprite path: {path!r}")
            self._pixmap_cache[path] = pixmap
        return pixmap

    def _prune_pixmap_cache(self, paths):
        """Drop cached pixmaps for paths no longer on the canvas."""
        for path in list(self._pixmap_cache):
            if path not in paths:
                del self._pixmap_cache[path]

    def clear_pixmap_cache(self):
        self._pixmap_cache.clear()
