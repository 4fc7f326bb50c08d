"""Canvas rendering mixin for the compose canvas.

Paints a RenderProjection with QPainter in world space: the painter is
translated by the pan offset and scaled by the zoom, so every draw call
below uses world units. Overlay pens are cosmetic (constant screen width).
"""

from PyQt5.QtCore import Qt, QRectF, QPointF
from PyQt5.QtGui import QBrush, QColor, QPainter, QPen, QPixmap

from constants import (
    CANVAS_CLEAR_COLOR, CHECKER_TILE_SIZE, CHECKER_LIGHT, CHECKER_DARK,
    SELECTION_COLOR, MARQUEE_FILL_COLOR, EDGE_GUIDE_COLOR, CENTER_GUIDE_COLOR,
    WORKING_AREA_BORDER_COLOR,
)
from models.canvas import BackgroundType, GuideType
from services.render_projection import guide_line


def _cosmetic_pen(color, width=1, style=Qt.SolidLine):
    pen = QPen(QColor(color), width, style)
    pen.setCosmetic(True)
    return pen


def _checker_brush():
    tile = QPixmap(CHECKER_TILE_SIZE * 2, CHECKER_TILE_SIZE * 2)
    tile.fill(QColor(CHECKER_LIGHT))
    painter = QPainter(tile)
    dark = QColor(CHECKER_DARK)
    painter.fillRect(0, 0, CHECKER_TILE_SIZE, CHECKER_TILE_SIZE, dark)
    painter.fillRect(CHECKER_TILE_SIZE, CHECKER_TILE_SIZE, CHECKER_TILE_SIZE, CHECKER_TILE_SIZE, dark)
    painter.end()
    return QBrush(tile)


class CanvasRenderingMixin:
    """Mixin providing QPainter rendering for canvas."""

    # Expected state variables (initialized in main class):
    # - projection: RenderProjection for the latest store snapshot
    # - _get_pixmap(path) from CanvasPixmapCacheMixin

    def paintEvent(self, event):
        projection = self.projection
        painter = QPainter(self)
        painter.setRenderHint(QPainter.SmoothPixmapTransform)
        painter.fillRect(self.rect(), QColor(CANVAS_CLEAR_COLOR))

        viewport = projection.viewport
        painter.translate(viewport.offset_x, viewport.offset_y)
        painter.scale(viewport.scale, viewport.scale)

        self._paint_background(painter, projection)
        for placed in projection.draw_list:
            self._paint_sprite(painter, placed, projection.is_selected(placed.id))
        self._paint_guides(painter, projection)
        self._paint_marquee(painter, projection)
        painter.end()

    # ========================================
    # Layers
    # ========================================

    def _paint_background(self, painter, projection):
        width, height = projection.working_area
        area = QRectF(0, 0, width, height)
        if projection.background == BackgroundType.CHECKER:
            painter.fillRect(area, _checker_brush())
        elif projection.background == BackgroundType.WHITE:
            painter.fillRect(area, QColor(Qt.white))
        elif projection.background == BackgroundType.BLACK:
            painter.fillRect(area, QColor(Qt.black))
        painter.setPen(_cosmetic_pen(WORKING_AREA_BORDER_COLOR))
        painter.setBrush(Qt.NoBrush)
        painter.drawRect(area)

    def _paint_sprite(self, painter, placed, selected):
        target = QRectF(placed.x, placed.y, placed.width, placed.height)
        pixmap = self._get_pixmap(placed.path)
        if pixmap.isNull():
            # Missing asset: outline with the sprite name
            painter.setPen(_cosmetic_pen(WORKING_AREA_BORDER_COLOR, 1, Qt.DashLine))
            painter.setBrush(Qt.NoBrush)
            painter.drawRect(target)
            painter.drawText(target, Qt.AlignCenter, placed.name)
        else:
            painter.drawPixmap(target, pixmap, QRectF(pixmap.rect()))

        if selected:
            painter.setPen(_cosmetic_pen(SELECTION_COLOR, 2))
            painter.setBrush(Qt.NoBrush)
            painter.drawRect(target)

    def _paint_guides(self, painter, projection):
        for guide in projection.guides:
            color = CENTER_GUIDE_COLOR if guide.type == GuideType.CENTER else EDGE_GUIDE_COLOR
            painter.setPen(_cosmetic_pen(color))
            start, end = guide_line(guide, projection.working_area)
            painter.drawLine(QPointF(start.x, start.y), QPointF(end.x, end.y))

    def _paint_marquee(self, painter, projection):
        rect = projection.marquee
        if rect is None:
            return
        painter.setPen(_cosmetic_pen(SELECTION_COLOR, 1, Qt.DashLine))
        painter.setBrush(QColor(MARQUEE_FILL_COLOR))
        painter.drawRect(QRectF(rect.x, rect.y, rect.width, rect.height))
