""
"Color values and pigment mixing helpers."
""

from .color import Color
from .mixing import GradientMode, adjust_color, mix_colors, rgb_to_ryb, ryb_to_rgb

__all__ = [
    "Color",
    "GradientMode",
    "adjust_color",
    "mix_colors",
    "rgb_to_ryb",
    "ryb_to_rgb",
]
