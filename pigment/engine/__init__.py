"""
Color propagation over the component graph.
"""

from .propagation import ColorSnapshot, PropagationEngine
from .settings import EngineSettings

__all__ = ["ColorSnapshot", "EngineSettings", "PropagationEngine"]
