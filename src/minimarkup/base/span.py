from __future__ import annotations

from dataclasses import dataclass, replace

from typing_extensions import Self

from .style import Style


@dataclass(frozen=True, slots=True)
class Keybind:
    key: str


@dataclass(frozen=True, slots=True)
class Translatable:
    key: str
    args: tuple[StyledSpan, ...] = ()


@dataclass(frozen=True, slots=True)
class StyledSpan:
    """Immutable node of styled output.

    ``style`` holds only what this span sets itself; the effective style of
    a span is its ancestors' styles merged from the root down.

    Attributes:
        content: text, a keybind or a translatable key, rendered before
            the children.
        style: own style of this span.
        children: spans rendered after ``content``, inheriting ``style``.
    """

    content: str | Keybind | Translatable = ""
    style: Style = Style()
    children: tuple[StyledSpan, ...] = ()

    @classmethod
    def text(cls, content: str, style: Style | None = None) -> Self:
        return cls(content, style or Style())

    @classmethod
    def keybind(cls, key: str, style: Style | None = None) -> Self:
        return cls(Keybind(key), style or Style())

    @classmethod
    def translatable(cls,
                     key: str,
                     *args: StyledSpan,
                     style: Style | None = None) -> Self:
        return cls(Translatable(key, args), style or Style())

    @classmethod
    def empty(cls) -> Self:
        return cls()

    def append(self, *children: StyledSpan) -> StyledSpan:
        if not children:
            return self
        return replace(self, children=self.children + children)

    def has_content(self) -> bool:
        return not isinstance(self.content, str) or bool(self.content)

    def has_styling(self) -> bool:
        return not self.style.is_empty()

    def is_empty(self) -> bool:
        return not self.has_content() and not self.children

    def plain_text(self) -> str:
        """Concatenated text of this span and its descendants."""
        parts = []
        stack: list[StyledSpan] = [self]
        while stack:
            span = stack.pop()
            match span.content:
                case str(text):
                    parts.append(text)
                case Keybind(key):
                    parts.append(f"[{key}]")
                case Translatable(key):
                    parts.append(key)
            stack.extend(reversed(span.children))
        return "".join(parts)

    def lift(self) -> StyledSpan:
        """Collapse an unstyled empty wrapper around a single child."""
        span = self
        while (span.content == "" and not span.has_styling()
               and len(span.children) == 1):
            span = span.children[0]
        return span
