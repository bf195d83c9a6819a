"""Presentation layer: decorator front-end and pytest plugin."""
