from __future__ import annotations

from .base import (ClickEvent, Color, HoverEvent, Keybind, StyledSpan, Style,
                   TextDecoration, Translatable)
from .markup import escape
from .markup.tokenizer import backslashes
from .utils import Undefined

# order in which decorations are opened and closed
DECORATIONS = (
    TextDecoration.BOLD,
    TextDecoration.ITALIC,
    TextDecoration.OBFUSCATED,
    TextDecoration.STRIKETHROUGH,
    TextDecoration.UNDERLINED,
)

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'


def _set(value) -> bool:
    return not isinstance(value, Undefined) and value is not None


def _quote(value: str, prefer: str = DOUBLE_QUOTE) -> str:
    other = SINGLE_QUOTE if prefer == DOUBLE_QUOTE else DOUBLE_QUOTE
    quote = other if prefer in value and other not in value else prefer
    return f"{quote}{value}{quote}"


def _changed(attr: str, style: Style, other: Style | None) -> bool:
    value = getattr(style, attr)
    return _set(value) and (other is None or getattr(other, attr) != value)


def _append(out: list[str], piece: str, tag: bool = True) -> None:
    if not piece:
        return
    if tag and out:
        # text ending in backslashes would escape the tag
        run = backslashes(out[-1], len(out[-1]))
        out[-1] += "\\" * run
    out.append(piece)


class MarkupSerializer:
    """Writes a span tree back as markup.

    Spans are visited depth-first and each span's own style is compared
    with its neighbours: a tag is opened where the previous span does not
    carry the same value yet, and closed where the next span drops it.
    Nothing is closed after the last span.
    """

    def serialize(self, span: StyledSpan) -> str:
        spans = self._flatten(span)
        out: list[str] = []
        for index, current in enumerate(spans):
            previous = spans[index - 1].style if index > 0 else None
            _append(out, self._open(current.style, previous))
            if isinstance(current.content, str):
                _append(out, escape(current.content), tag=False)
            else:
                _append(out, self._content(current))
            if index + 1 < len(spans):
                _append(out, self._close(current.style,
                                         spans[index + 1].style))
        return "".join(out)

    @staticmethod
    def _flatten(span: StyledSpan) -> list[StyledSpan]:
        spans = []
        stack = [span]
        while stack:
            node = stack.pop()
            spans.append(node)
            stack.extend(reversed(node.children))
        return spans

    def _open(self, style: Style, previous: Style | None) -> str:
        out = []
        if _changed("color", style, previous):
            out.append(f"<color:{self._color(style.color)}>")
        for decoration in DECORATIONS:
            if style.decoration(decoration) is True and (
                    previous is None
                    or previous.decoration(decoration) is not True):
                out.append(f"<{decoration.value}>")
        if _changed("hover_event", style, previous):
            out.append(self._hover(style.hover_event))
        if _changed("click_event", style, previous):
            out.append(self._click(style.click_event))
        if _changed("insertion", style, previous):
            out.append(f"<insert:{_quote(style.insertion)}>")
        if _changed("font", style, previous):
            out.append(f"<font:{_quote(style.font)}>")
        return "".join(out)

    def _close(self, style: Style, following: Style) -> str:
        out = []
        # a color is only closed when the next span has none at all
        if _set(style.color) and not _set(following.color):
            out.append(f"</color:{self._color(style.color)}>")
        for decoration in DECORATIONS:
            if (style.decoration(decoration) is True
                    and following.decoration(decoration) is not True):
                out.append(f"</{decoration.value}>")
        if _changed("hover_event", style, following):
            out.append("</hover>")
        if _changed("click_event", style, following):
            out.append("</click>")
        if _changed("insertion", style, following):
            out.append("</insert>")
        if _changed("font", style, following):
            out.append("</font>")
        return "".join(out)

    def _content(self, span: StyledSpan) -> str:
        match span.content:
            case Keybind(key):
                return f"<key:{key}>"
            case Translatable(key, args):
                values = "".join(
                    ":" + _quote(self.serialize(arg), SINGLE_QUOTE)
                    for arg in args)
                return f"<lang:{key}{values}>"
            case _:
                raise TypeError(f"Unexpected content: {span.content!r}")

    @staticmethod
    def _color(color: Color) -> str:
        return color.name or color.to_hex()

    def _hover(self, event: HoverEvent) -> str:
        if isinstance(event.value, StyledSpan):
            value = self.serialize(event.value)
        else:
            value = event.value
        return f"<hover:{event.action}:{_quote(value)}>"

    @staticmethod
    def _click(event: ClickEvent) -> str:
        return f"<click:{event.action}:{_quote(event.value)}>"
