"""Widgets. Nothing here owns canonical state."""
