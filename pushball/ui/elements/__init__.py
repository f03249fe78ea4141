"""Concrete HUD element types."""
