"""Core business logic layer.

Subpackages:
- planning: filling the weekly grid and rendering it
- shopping: building the shopping list from a plan
"""
__all__ = ["planning", "shopping"]
