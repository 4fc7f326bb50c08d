"""Coordinate transformation utilities for the compose canvas.

Provides conversion between the two coordinate systems:
- Screen pixels (container-local, Y-down, top-left origin)
- World units (canvas space, Y-down, unbounded)

The viewport maps world to screen as screen = world * scale + offset.
"""

from models.transform import Vec2


def screen_to_world(screen_x, screen_y, scale=1.0, offset_x=0.0, offset_y=0.0):
	"""Convert container-local screen pixels to world coordinates.
	
	Args:
		screen_x: Pointer X relative to the canvas container
		screen_y: Pointer Y relative to the canvas container
		scale: Viewport zoom factor
		offset_x: Horizontal pan offset in screen pixels
		offset_y: Vertical pan offset in screen pixels
		
	Returns:
		Vec2 in world units
	"""
	return Vec2((screen_x - offset_x) / scale, (screen_y - offset_y) / scale)


def world_to_screen(world_x, world_y, scale=1.0, offset_x=0.0, offset_y=0.0):
	"""Convert world coordinates to container-local screen pixels.
	
	Args:
		world_x, world_y: Position in world units
		scale: Viewport zoom factor
		offset_x, offset_y: Pan offset in screen pixels
		
	Returns:
		Vec2 in screen pixels
	"""
	return Vec2(world_x * scale + offset_x, world_y * scale + offset_y)


def viewport_screen_to_world(point, viewport):
	"""screen_to_world for a Vec2 and a ViewportTransform"""
	return screen_to_world(point.x, point.y, viewport.scale, viewport.offset_x, viewport.offset_y)


def viewport_world_to_screen(point, viewport):
	"""world_to_screen for a Vec2 and a ViewportTransform"""
	return world_to_screen(point.x, point.y, viewport.scale, viewport.offset_x, viewport.offset_y)


def screen_delta_to_world(dx, dy, scale=1.0):
	"""Convert a pointer movement in screen pixels to world units.
	
	Pan offset cancels out of a difference, only zoom applies.
	"""
	return Vec2(dx / scale, dy / scale)
