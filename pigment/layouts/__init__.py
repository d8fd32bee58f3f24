""
"Starter layouts and layout import/export helpers."
""

from .loader import LayoutLoader
from .presets import LayoutPreset, get_presets

__all__ = ["LayoutLoader", "LayoutPreset", "get_presets"]
