"""
Sprite Compose Editor - Data Models

This module contains the data model classes for the compose canvas.
This is the MODEL in MVC architecture.

Public API: Import PlacementStore from models.placement, value types from
models.sprite, models.canvas, models.session and models.transform.
"""
