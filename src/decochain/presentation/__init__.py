"""Presentation layer: pytest plugin."""
