"""Partially ordered sets with sort strategies, and discovery and picking of project hack scripts."""

__version__ = "0.1.0"

__all__ = ["fake", "order", "mergesort", "hacks", "picker"]