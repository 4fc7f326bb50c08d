"""Sprite import and layout export for ComposeEditor"""

import os

from PyQt5.QtWidgets import QFileDialog

from services.export_layout import ComposeConfig, export_canvas, preview_compose_bounds, build_export_layout
from services.file_operations import load_sprite_records, save_export_request
from utils.logger import loggerRaise


class AssetMixin:
	"""Import/export handlers between the store and the file system"""
	
	def import_sprites(self, filename=None):
		"""Add sprites from a JSON list of import records"""
		if not filename:
			filename, _ = QFileDialog.getOpenFileName(
				self, "Import Sprites", "", "Sprite Records (*.json);;All Files (*)"
			)
		if not filename:
			return []
		try:
			sprites = load_sprite_records(filename)
		except Exception as e:
			loggerRaise(e, f"Could not import sprites from {os.path.basename(filename)}", "Import Failed")
		added = self.store.add_sprites(sprites)
		self.statusBar().showMessage(f"Added {len(added)} of {len(sprites)} sprites", 4000)
		return added
	
	def export_layout(self, filename=None):
		"""Write the composer request (sprite positions and options) to JSON"""
		if not self.store.state.sprites:
			self.statusBar().showMessage("Nothing to export: the canvas is empty", 4000)
			return None
		if not filename:
			filename, _ = QFileDialog.getSaveFileName(
				self, "Export Layout", "spritesheet.json", "Compose Request (*.json)"
			)
		if not filename:
			return None
		
		output_dir = os.path.dirname(os.path.abspath(filename))
		output_name = os.path.splitext(os.path.basename(filename))[0]
		config = ComposeConfig(output_dir=output_dir, output_name=output_name)
		try:
			result = export_canvas(self.store, lambda request: save_export_request(request, filename), config)
		except Exception as e:
			loggerRaise(e, f"Could not write {os.path.basename(filename)}", "Export Failed")
		
		bounds = preview_compose_bounds(build_export_layout(self.store.state))
		self.statusBar().showMessage(
			f"Exported {bounds.sprite_count} sprites ({bounds.width}x{bounds.height}) to {filename}", 4000
		)
		return result
