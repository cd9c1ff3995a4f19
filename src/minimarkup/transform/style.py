from ..base import Color, Palette, StyledSpan, Style, TextDecoration
from ..markup.parser import TagPart
from .base import (Transformation, TransformationError, TransformationType,
                   require)

COLOR_NAMES = ("color", "colour", "c")

DECORATION_ALIASES = {
    "bold": TextDecoration.BOLD,
    "b": TextDecoration.BOLD,
    "italic": TextDecoration.ITALIC,
    "i": TextDecoration.ITALIC,
    "em": TextDecoration.ITALIC,
    "underlined": TextDecoration.UNDERLINED,
    "u": TextDecoration.UNDERLINED,
    "strikethrough": TextDecoration.STRIKETHROUGH,
    "st": TextDecoration.STRIKETHROUGH,
    "obfuscated": TextDecoration.OBFUSCATED,
    "obf": TextDecoration.OBFUSCATED,
}


class ColorTransformation(Transformation):
    """``<color:red>``, ``<c:#ff00ff>``, ``<red>`` or ``<#ff00ff>``."""

    color: Color

    @staticmethod
    def can_parse(name: str) -> bool:
        return (name in COLOR_NAMES or name.startswith("#")
                or Palette.lookup(name) is not None)

    def load(self, name: str, parts: list[TagPart]) -> None:
        if name.lower() in COLOR_NAMES:
            require(len(parts) == 1, f"<{name}> takes exactly one color")
            value = parts[0].value
        else:
            require(not parts, f"<{name}> takes no arguments")
            value = name
        try:
            self.color = Color.parse(value.lower())
        except ValueError as e:
            raise TransformationError(str(e)) from e

    def apply(self) -> StyledSpan:
        return StyledSpan(style=Style(color=self.color))


class DecorationTransformation(Transformation):
    """``<bold>``, ``<b:false>`` and the other decorations."""

    decoration: TextDecoration
    state: bool

    @staticmethod
    def can_parse(name: str) -> bool:
        return name in DECORATION_ALIASES

    def load(self, name: str, parts: list[TagPart]) -> None:
        self.decoration = DECORATION_ALIASES[name.lower()]
        require(len(parts) <= 1, f"<{name}> takes at most one argument")
        if not parts:
            self.state = True
            return
        value = parts[0].value.lower()
        require(value in ("true", "false"),
                f"<{name}> expects true or false, got {value!r}")
        self.state = value == "true"

    def apply(self) -> StyledSpan:
        return StyledSpan(
            style=Style().with_decoration(self.decoration, self.state))


class InsertionTransformation(Transformation):

    insertion: str

    def load(self, name: str, parts: list[TagPart]) -> None:
        require(bool(parts), f"<{name}> requires the text to insert")
        self.insertion = ":".join(part.value for part in parts)

    def apply(self) -> StyledSpan:
        return StyledSpan(style=Style(insertion=self.insertion))


class FontTransformation(Transformation):

    font: str

    def load(self, name: str, parts: list[TagPart]) -> None:
        require(bool(parts), f"<{name}> requires a font key")
        # namespaced keys such as minecraft:uniform are split by the tokenizer
        self.font = ":".join(part.value for part in parts)

    def apply(self) -> StyledSpan:
        return StyledSpan(style=Style(font=self.font))


class ResetTransformation(Transformation):

    def load(self, name: str, parts: list[TagPart]) -> None:
        require(not parts, f"<{name}> takes no arguments")

    def apply(self) -> StyledSpan:
        return StyledSpan(style=Style.reset())


class PreTransformation(Transformation):
    """Container for a raw region; its content is plain text already."""

    def load(self, name: str, parts: list[TagPart]) -> None:
        require(not parts, f"<{name}> takes no arguments")

    def apply(self) -> StyledSpan:
        return StyledSpan()


TYPES = [
    TransformationType("color", ColorTransformation.can_parse,
                       ColorTransformation),
    TransformationType("decoration", DecorationTransformation.can_parse,
                       DecorationTransformation),
    TransformationType.of(InsertionTransformation, "insert", "insertion"),
    TransformationType.of(FontTransformation, "font"),
    TransformationType.of(ResetTransformation, "reset"),
    TransformationType.of(PreTransformation, "pre"),
]
