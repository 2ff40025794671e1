# projects/__init__.py
"""Runnable automation projects."""
