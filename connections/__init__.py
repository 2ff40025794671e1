# connections/__init__.py
"""Connections to external systems."""
