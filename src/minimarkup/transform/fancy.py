import re
from typing import Iterator

from ..base import (Color, Palette, Style, StyledSpan, gradient_colors,
                    rainbow_colors)
from ..markup.parser import TagPart
from ..utils import undefined
from .base import (Modifying, Transformation, TransformationError,
                   TransformationType, require)

PHASE_PATTERN = re.compile(r"-?\d+")


def _recolorable(span: StyledSpan) -> bool:
    # a descendant with its own color (reset included) keeps it
    return span.style.color is undefined


def count_characters(span: StyledSpan) -> int:
    """Code points of the text that a color effect would paint."""
    total = 0
    stack = [span]
    while stack:
        node = stack.pop()
        if isinstance(node.content, str):
            total += len(node.content)
        stack.extend(child for child in node.children if _recolorable(child))
    return total


def recolor(span: StyledSpan, colors: Iterator[Color]) -> StyledSpan:
    """Split text into one span per code point, painted from ``colors``."""

    def enter(node: StyledSpan):
        painted = []
        if isinstance(node.content, str):
            painted = [
                StyledSpan.text(char, Style(color=next(colors)))
                for char in node.content
            ]
        return node, painted, iter(node.children)

    stack = [enter(span)]
    while True:
        node, built, pending = stack[-1]
        child = next(pending, None)
        if child is not None:
            if _recolorable(child):
                stack.append(enter(child))
            else:
                built.append(child)
            continue
        stack.pop()
        content = "" if isinstance(node.content, str) else node.content
        result = StyledSpan(content, node.style, tuple(built))
        if not stack:
            return result
        stack[-1][1].append(result)


class GradientTransformation(Transformation, Modifying):
    """``<gradient:#5e4fa2:#f79459:phase>``, white to black by default."""

    stops: list[Color]
    phase: int

    def load(self, name: str, parts: list[TagPart]) -> None:
        values = [part.value for part in parts]
        self.phase = 0
        if values and PHASE_PATTERN.fullmatch(values[-1]):
            self.phase = int(values.pop())
        if not values:
            self.stops = [Palette.WHITE.value, Palette.BLACK.value]
            return
        require(len(values) >= 2, f"<{name}> requires at least two colors")
        try:
            self.stops = [Color.parse(value.lower()) for value in values]
        except ValueError as e:
            raise TransformationError(str(e)) from e

    def apply(self) -> StyledSpan:
        return StyledSpan()

    def modify(self, span: StyledSpan) -> StyledSpan:
        colors = gradient_colors(self.stops, count_characters(span),
                                 self.phase)
        return recolor(span, iter(colors))


class RainbowTransformation(Transformation, Modifying):

    phase: int

    def load(self, name: str, parts: list[TagPart]) -> None:
        require(len(parts) <= 1, f"<{name}> takes at most a phase")
        self.phase = 0
        if parts:
            value = parts[0].value
            require(PHASE_PATTERN.fullmatch(value) is not None,
                    f"Invalid phase {value!r}")
            self.phase = int(value)

    def apply(self) -> StyledSpan:
        return StyledSpan()

    def modify(self, span: StyledSpan) -> StyledSpan:
        colors = rainbow_colors(count_characters(span), self.phase)
        return recolor(span, iter(colors))


TYPES = [
    TransformationType.of(GradientTransformation, "gradient"),
    TransformationType.of(RainbowTransformation, "rainbow"),
]
