"""Glade: a small interactive-fiction engine."""
