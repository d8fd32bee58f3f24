"""
Game session that owns the factory grid.
"""

from .controller import GridSession

__all__ = ["GridSession"]
