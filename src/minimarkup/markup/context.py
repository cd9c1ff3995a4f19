from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ..base import StyledSpan

if TYPE_CHECKING:
    from .parser import ElementNode, RootNode


class Context:
    """State of a single parse call.

    Records the message as given, the message after string placeholders
    were substituted, its element tree and the resulting span.
    Transformations use it to parse their own arguments with the same
    templates and registry.
    """

    def __init__(self, message: str = "") -> None:
        self.message = message
        self.replaced_message: str | None = None
        self.tree: RootNode | None = None
        self.root: StyledSpan | None = None
        self._parse: Callable[[str], StyledSpan] | None = None
        self._render: Callable[[list[ElementNode]], StyledSpan] | None = None

    def bind(self, parse: Callable[[str], StyledSpan],
             render: Callable[[list[ElementNode]], StyledSpan]) -> None:
        self._parse = parse
        self._render = render

    def parse(self, text: str) -> StyledSpan:
        """Parse a nested markup string (e.g. a hover text)."""
        if self._parse is None:
            raise RuntimeError("Context is not bound to a parser")
        return self._parse(text)

    def render(self, nodes: list[ElementNode]) -> StyledSpan:
        """Resolve already parsed nodes (e.g. a tag argument)."""
        if self._render is None:
            raise RuntimeError("Context is not bound to a parser")
        return self._render(nodes)

    def __repr__(self) -> str:
        return (f"Context(message={self.message!r}, "
                f"replaced_message={self.replaced_message!r})")
