"""Compose toolbar widget with view, arrange and selection controls."""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QToolButton, QLabel, QFrame
from PyQt5.QtCore import pyqtSignal

from models.canvas import AlignMode, DistributeDirection


class ComposeToolbar(QWidget):
	"""Toolbar above the compose canvas
	
	Buttons emit signals only; the main window wires them to the store.
	Align buttons need 2+ selected sprites, distribute buttons need 3+.
	"""
	
	zoom_in_requested = pyqtSignal()
	zoom_out_requested = pyqtSignal()
	reset_view_requested = pyqtSignal()
	snap_toggled = pyqtSignal(bool)
	background_cycle_requested = pyqtSignal()
	auto_arrange_requested = pyqtSignal()
	align_requested = pyqtSignal(str)  # AlignMode value
	distribute_requested = pyqtSignal(str)  # DistributeDirection value
	delete_requested = pyqtSignal()
	clear_requested = pyqtSignal()
	
	ALIGN_BUTTONS = [
		(AlignMode.LEFT, "⇤", "Align Left"),
		(AlignMode.CENTER_V, "↔", "Align Horizontal Centers"),
		(AlignMode.RIGHT, "⇥", "Align Right"),
		(AlignMode.TOP, "⤒", "Align Top"),
		(AlignMode.CENTER_H, "↕", "Align Vertical Centers"),
		(AlignMode.BOTTOM, "⤓", "Align Bottom"),
	]
	
	DISTRIBUTE_BUTTONS = [
		(DistributeDirection.HORIZONTAL, "⋯", "Distribute Horizontally"),
		(DistributeDirection.VERTICAL, "⋮", "Distribute Vertically"),
	]
	
	def __init__(self, parent=None):
		super().__init__(parent)
		
		layout = QHBoxLayout()
		layout.setContentsMargins(4, 2, 4, 2)
		layout.setSpacing(4)
		
		# Zoom
		self.zoom_out_btn = self._make_button("−", "Zoom Out", self.zoom_out_requested.emit)
		layout.addWidget(self.zoom_out_btn)
		self.zoom_label = QLabel("100%")
		self.zoom_label.setMinimumWidth(48)
		layout.addWidget(self.zoom_label)
		self.zoom_in_btn = self._make_button("+", "Zoom In", self.zoom_in_requested.emit)
		layout.addWidget(self.zoom_in_btn)
		self.reset_view_btn = self._make_button("1:1", "Reset View", self.reset_view_requested.emit)
		layout.addWidget(self.reset_view_btn)
		layout.addWidget(self._separator())
		
		# View options
		self.snap_btn = self._make_button("Snap", "Toggle Snapping")
		self.snap_btn.setCheckable(True)
		self.snap_btn.setChecked(True)
		self.snap_btn.toggled.connect(self.snap_toggled.emit)
		layout.addWidget(self.snap_btn)
		self.background_btn = self._make_button("BG", "Cycle Background", self.background_cycle_requested.emit)
		layout.addWidget(self.background_btn)
		self.arrange_btn = self._make_button("Arrange", "Auto Arrange", self.auto_arrange_requested.emit)
		layout.addWidget(self.arrange_btn)
		layout.addWidget(self._separator())
		
		# Alignment / distribution
		self.align_buttons = {}
		for mode, text, tip in self.ALIGN_BUTTONS:
			btn = self._make_button(text, tip, lambda checked=False, m=mode: self.align_requested.emit(m.value))
			self.align_buttons[mode] = btn
			layout.addWidget(btn)
		self.distribute_buttons = {}
		for direction, text, tip in self.DISTRIBUTE_BUTTONS:
			btn = self._make_button(text, tip, lambda checked=False, d=direction: self.distribute_requested.emit(d.value))
			self.distribute_buttons[direction] = btn
			layout.addWidget(btn)
		layout.addWidget(self._separator())
		
		self.delete_btn = self._make_button("Delete", "Delete Selected (Del)", self.delete_requested.emit)
		layout.addWidget(self.delete_btn)
		self.clear_btn = self._make_button("Clear", "Clear Canvas", self.clear_requested.emit)
		layout.addWidget(self.clear_btn)
		
		layout.addStretch()
		self.count_label = QLabel("")
		layout.addWidget(self.count_label)
		
		self.setLayout(layout)
		self.set_counts(0, 0)
	
	def _make_button(self, text, tooltip, slot=None):
		btn = QToolButton()
		btn.setText(text)
		btn.setToolTip(tooltip)
		if slot is not None:
			btn.clicked.connect(slot)
		return btn
	
	def _separator(self):
		line = QFrame()
		line.setFrameShape(QFrame.VLine)
		line.setFrameShadow(QFrame.Sunken)
		return line
	
	def set_zoom_percent(self, percent):
		"""Update the zoom readout"""
		self.zoom_label.setText(f"{percent}%")
	
	def set_snap_checked(self, enabled):
		"""Sync the snap button without re-emitting snap_toggled"""
		self.snap_btn.blockSignals(True)
		self.snap_btn.setChecked(enabled)
		self.snap_btn.blockSignals(False)
	
	def set_counts(self, sprite_count, selection_count):
		"""Update the sprite/selection readout and button availability"""
		for btn in self.align_buttons.values():
			btn.setEnabled(selection_count >= 2)
		for btn in self.distribute_buttons.values():
			btn.setEnabled(selection_count >= 3)
		self.delete_btn.setEnabled(selection_count > 0)
		self.clear_btn.setEnabled(sprite_count > 0)
		self.arrange_btn.setEnabled(sprite_count > 0)
		if sprite_count:
			self.count_label.setText(f"{sprite_count} sprites, {selection_count} selected")
		else:
			self.count_label.setText("")
