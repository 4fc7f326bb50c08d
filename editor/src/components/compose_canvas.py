"""Compose canvas widget.

Hosts the placement store on screen: subscribes to snapshots, paints the
render projection and forwards input to the interaction controller.
"""

import logging

from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, pyqtSignal

from components.canvas_widgets.canvas_zoom_pan_mixin import CanvasZoomPanMixin
from components.canvas_widgets.canvas_input_mixin import CanvasInputMixin
from components.canvas_widgets.canvas_rendering_mixin import CanvasRenderingMixin
from components.canvas_widgets.canvas_pixmap_cache_mixin import CanvasPixmapCacheMixin
from models.placement import PlacementStore
from services.canvas_interaction import CanvasInteraction
from services.render_projection import RenderProjection


class ComposeCanvas(CanvasZoomPanMixin, CanvasInputMixin, CanvasRenderingMixin, CanvasPixmapCacheMixin, QWidget):
	"""Interactive canvas for arranging sprites"""
	
	zoom_changed = pyqtSignal(int)  # Zoom percentage
	selection_changed = pyqtSignal(int)  # Number of selected sprites
	
	def __init__(self, store: PlacementStore, parent=None):
		super().__init__(parent)
		self._logger = logging.getLogger('ComposeCanvas')
		
		self.store = store
		self.interaction = CanvasInteraction(store)
		self.projection = RenderProjection.from_state(store.state)
		self._pixmap_cache = {}
		self._last_zoom = self.get_zoom_percent()
		self._last_selection = len(store.state.selected_ids)
		
		self.setFocusPolicy(Qt.StrongFocus)
		self.setMouseTracking(True)
		self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		self.setMinimumSize(400, 300)
		
		store.add_listener(self._on_state_changed)
	
	def _on_state_changed(self, state):
		"""Rebuild the projection and repaint after every transition"""
		self.projection = RenderProjection.from_state(state)
		self._prune_pixmap_cache({placed.path for placed in state.sprites})
		
		zoom = self.get_zoom_percent()
		if zoom != self._last_zoom:
			self._last_zoom = zoom
			self.zoom_changed.emit(zoom)
		
		selection = len(state.selected_ids)
		if selection != self._last_selection:
			self._last_selection = selection
			self.selection_changed.emit(selection)
		
		self.update()
	
	def detach(self):
		"""Stop listening to the store (widget about to be destroyed)"""
		self.store.remove_listener(self._on_state_changed)
	
	def closeEvent(self, event):
		self.detach()
		super().closeEvent(event)
