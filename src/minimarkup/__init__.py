from .base import (ClickEvent, Color, HoverEvent, Keybind, Palette, Style,
                   StyledSpan, TextDecoration, Translatable)
from .config import MarkupConfig
from .dump import dump, dumps
from .markup import (ComponentTemplate, Context, MarkupParseError,
                     StringTemplate, Template)
from .minimarkup import MiniMarkup
from .serializer import MarkupSerializer
from .transform import TransformationRegistry

_default: MiniMarkup | None = None


def default() -> MiniMarkup:
    global _default
    if _default is None:
        _default = MiniMarkup()
    return _default


def parse(message: str, *placeholders: str) -> StyledSpan:
    return default().parse(message, *placeholders)


def escape(text: str) -> str:
    return default().escape(text)


def strip(text: str) -> str:
    return default().strip(text)


def serialize(span: StyledSpan) -> str:
    return default().serialize(span)


__all__ = [
    "ClickEvent",
    "Color",
    "ComponentTemplate",
    "Context",
    "HoverEvent",
    "Keybind",
    "MarkupConfig",
    "MarkupParseError",
    "MarkupSerializer",
    "MiniMarkup",
    "Palette",
    "StringTemplate",
    "Style",
    "StyledSpan",
    "Template",
    "TextDecoration",
    "TransformationRegistry",
    "Translatable",
    "default",
    "dump",
    "dumps",
    "escape",
    "parse",
    "serialize",
    "strip",
]
