from typing import Any

import orjson

from .base import Keybind, StyledSpan, Style, TextDecoration, Translatable
from .utils import undefined


def _style(style: Style) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if style.color is not undefined and style.color is not None:
        data["color"] = str(style.color)
    for decoration in TextDecoration:
        value = style.decoration(decoration)
        if value is not undefined:
            data[decoration.value] = value
    if style.insertion is not undefined and style.insertion is not None:
        data["insertion"] = style.insertion
    if style.font is not undefined and style.font is not None:
        data["font"] = style.font
    if style.click_event is not undefined and style.click_event is not None:
        data["clickEvent"] = {
            "action": style.click_event.action,
            "value": style.click_event.value,
        }
    if style.hover_event is not undefined and style.hover_event is not None:
        value = style.hover_event.value
        if isinstance(value, StyledSpan):
            value = dump(value)
        data["hoverEvent"] = {
            "action": style.hover_event.action,
            "contents": value,
        }
    return data


def dump(span: StyledSpan) -> dict[str, Any]:
    """Chat-component shaped dict of a span tree.

    Only defined attributes are written, so the output doubles as a
    readable structural fingerprint in logs and tests.
    """
    root: dict[str, Any] = {}
    stack = [(span, root)]
    while stack:
        node, data = stack.pop()
        match node.content:
            case str(text):
                data["text"] = text
            case Keybind(key):
                data["keybind"] = key
            case Translatable(key, args):
                data["translate"] = key
                if args:
                    data["with"] = [dump(arg) for arg in args]
        data.update(_style(node.style))
        if node.children:
            data["extra"] = [{} for _ in node.children]
            stack.extend(zip(node.children, data["extra"]))
    return root


def dumps(span: StyledSpan, indent: bool = False) -> str:
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(dump(span), option=option).decode()
