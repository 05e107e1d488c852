"""Utility helpers - auth and display formatting."""
