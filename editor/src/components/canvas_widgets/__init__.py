"""Compose canvas mixins (zoom/pan, input, rendering, pixmap cache)"""
