"""Menu bar creation and menu action handlers for ComposeEditor"""

from models.canvas import AlignMode, DistributeDirection


class MenuMixin:
	"""Menu bar and menu action handlers"""
	
	def _create_menu_bar(self):
		"""Create the menu bar with File, Edit, View, Arrange menus"""
		menubar = self.menuBar()
		
		# File Menu
		file_menu = menubar.addMenu("&File")
		
		import_action = file_menu.addAction("&Import Sprites...")
		import_action.setShortcut("Ctrl+O")
		import_action.triggered.connect(self.import_sprites)
		
		export_action = file_menu.addAction("&Export Layout...")
		export_action.setShortcut("Ctrl+E")
		export_action.triggered.connect(self.export_layout)
		
		file_menu.addSeparator()
		
		exit_action = file_menu.addAction("E&xit")
		exit_action.setShortcut("Ctrl+Q")
		exit_action.triggered.connect(self.close)
		
		# Edit Menu
		# Ctrl+A / Esc / Del are handled by the canvas itself when it has focus
		edit_menu = menubar.addMenu("&Edit")
		edit_menu.addAction("Select &All").triggered.connect(self.store.select_all)
		edit_menu.addAction("&Deselect All").triggered.connect(self.store.deselect_all)
		edit_menu.addSeparator()
		self.delete_action = edit_menu.addAction("&Delete Selected")
		self.delete_action.triggered.connect(self._delete_selected)
		edit_menu.addAction("&Clear Canvas").triggered.connect(self.store.clear_canvas)
		
		# View Menu
		view_menu = menubar.addMenu("&View")
		zoom_in_action = view_menu.addAction("Zoom &In")
		zoom_in_action.setShortcut("Ctrl+=")
		zoom_in_action.triggered.connect(self.canvas.zoom_in)
		zoom_out_action = view_menu.addAction("Zoom &Out")
		zoom_out_action.setShortcut("Ctrl+-")
		zoom_out_action.triggered.connect(self.canvas.zoom_out)
		reset_action = view_menu.addAction("&Reset View")
		reset_action.setShortcut("Ctrl+0")
		reset_action.triggered.connect(self.canvas.zoom_reset)
		view_menu.addSeparator()
		
		self.snap_action = view_menu.addAction("&Snap to Sprites")
		self.snap_action.setCheckable(True)
		self.snap_action.setChecked(self.store.state.snap_enabled)
		self.snap_action.toggled.connect(self.store.set_snap_enabled)
		
		self.guides_action = view_menu.addAction("Show Snap &Guides")
		self.guides_action.setCheckable(True)
		self.guides_action.setChecked(self.store.state.show_snap_guides)
		self.guides_action.toggled.connect(self.store.set_show_snap_guides)
		
		view_menu.addAction("Cycle &Background").triggered.connect(self.store.cycle_background)
		
		# Arrange Menu
		arrange_menu = menubar.addMenu("&Arrange")
		arrange_menu.addAction("&Auto Arrange").triggered.connect(self.store.auto_arrange)
		arrange_menu.addSeparator()
		
		align_menu = arrange_menu.addMenu("A&lign")
		for mode in AlignMode:
			action = align_menu.addAction(mode.value)
			action.triggered.connect(lambda checked=False, m=mode: self.store.align_selected(m))
		
		distribute_menu = arrange_menu.addMenu("&Distribute")
		for direction in DistributeDirection:
			action = distribute_menu.addAction(direction.value)
			action.triggered.connect(lambda checked=False, d=direction: self.store.distribute_selected(d))
		
		arrange_menu.addSeparator()
		front_action = arrange_menu.addAction("Bring to &Front")
		front_action.setShortcut("Ctrl+]")
		front_action.triggered.connect(self._bring_selected_to_front)
		back_action = arrange_menu.addAction("Send to &Back")
		back_action.setShortcut("Ctrl+[")
		back_action.triggered.connect(self._send_selected_to_back)
	
	def _delete_selected(self):
		"""Remove all selected sprites"""
		self.store.remove_sprites(self.store.state.selected_ids)
	
	def _bring_selected_to_front(self):
		"""Raise selected sprites, keeping their relative order"""
		for placed in sorted(self.store.get_selected_sprites(), key=lambda p: p.z_index):
			self.store.bring_to_front(placed.id)
	
	def _send_selected_to_back(self):
		for placed in self.store.get_selected_sprites():
			self.store.send_to_back(placed.id)
	
	def _sync_view_actions(self, state):
		"""Keep checkable actions in step with the store"""
		for action, value in ((self.snap_action, state.snap_enabled),
				(self.guides_action, state.show_snap_guides)):
			if action.isChecked() != value:
				action.blockSignals(True)
				action.setChecked(value)
				action.blockSignals(False)
		self.delete_action.setEnabled(bool(state.selected_ids))
