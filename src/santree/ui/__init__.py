"""Presentation layer (PyQt6)."""
