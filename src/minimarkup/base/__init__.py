from .color import Color, Palette
from .colormath import gradient_colors, lerp, rainbow_colors
from .span import Keybind, StyledSpan, Translatable
from .style import ClickEvent, HoverEvent, Style, TextDecoration

__all__ = [
    "ClickEvent",
    "Color",
    "HoverEvent",
    "Keybind",
    "Palette",
    "Style",
    "StyledSpan",
    "TextDecoration",
    "Translatable",
    "gradient_colors",
    "lerp",
    "rainbow_colors",
]
