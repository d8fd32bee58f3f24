"""
Pigment factory grid.

Mix pigment colors by wiring factories, adders, gradientors and storage
containers together. ``create_session`` is the entry point for a view layer.
"""

from .session import GridSession


def create_session(*args, **kwargs) -> GridSession:
    """
    Create a ``GridSession`` with an empty, already evaluated grid.
    """

    session = GridSession(*args, **kwargs)
    session.recompute()
    return session


__all__ = ["GridSession", "create_session"]
