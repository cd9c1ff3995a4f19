from typing import Iterable, Iterator, Mapping

from ..base import StyledSpan, Style
from ..log import logger_wrapper
from ..transform import Modifying, TransformationRegistry
from ..transform.registry import PlaceholderResolver
from .context import Context
from .parser import ElementNode, ElementParser, RawText, RootNode, TagNode

logger = logger_wrapper("Markup")


def compact(span: StyledSpan) -> StyledSpan:
    """Flatten a span tree into styled runs.

    Each run keeps the merged style of its ancestors with cleared values
    dropped. Empty text runs are removed, and a single run is returned as
    the root itself.
    """
    runs = []
    stack: list[tuple[StyledSpan, Style]] = [(span, Style())]
    while stack:
        node, inherited = stack.pop()
        style = inherited.merge(node.style)
        if node.has_content():
            runs.append(StyledSpan(node.content, style.normalized()))
        stack.extend((child, style) for child in reversed(node.children))
    return StyledSpan(children=tuple(runs)).lift()


class SpanGenerator:
    """Resolves an element tree into a styled span tree.

    Tags are looked up in the registry; a tag nothing claims is rendered as
    its literal source around its children.
    """

    def __init__(
        self,
        registry: TransformationRegistry,
        context: Context,
        *,
        templates: Mapping[str, StyledSpan] | None = None,
        resolver: PlaceholderResolver | None = None,
        raw_tags: Iterable[str] = ("pre",),
        max_depth: int = 64,
    ) -> None:
        self.registry = registry
        self.context = context
        self.templates = templates or {}
        self.resolver = resolver
        self.raw_tags = tuple(raw_tags)
        self.max_depth = max_depth
        self._nesting = 0
        context.bind(self.parse, self.render)

    def generate(self, root: RootNode) -> StyledSpan:
        return compact(self._resolve_all(root.children))

    def parse(self, markup: str) -> StyledSpan:
        """Parse nested markup found inside a tag argument."""
        if self._nesting >= self.max_depth:
            logger.debug(f"Argument nesting limit {self.max_depth} reached, "
                         f"keeping {markup} as text")
            return StyledSpan.text(markup)
        root = ElementParser(markup,
                             raw_tags=self.raw_tags,
                             max_depth=self.max_depth,
                             depth=self._nesting + 1).parse()
        return self.render(root.children)

    def render(self, nodes: list[ElementNode]) -> StyledSpan:
        self._nesting += 1
        try:
            return compact(self._resolve_all(nodes))
        finally:
            self._nesting -= 1

    def _resolve_all(self, nodes: Iterable[ElementNode]) -> StyledSpan:
        spans: list[StyledSpan] = []
        # open tags with their unvisited children and resolved spans
        stack: list[tuple[TagNode | None, Iterator[ElementNode],
                          list[StyledSpan]]] = [(None, iter(nodes), spans)]
        while stack:
            tag, pending, resolved = stack[-1]
            node = next(pending, None)
            if node is None:
                stack.pop()
                if tag is not None:
                    stack[-1][2].extend(self._resolve(tag, resolved))
                continue
            match node:
                case RawText(value):
                    if value:
                        resolved.append(StyledSpan.text(value))
                case TagNode(children=children):
                    stack.append((node, iter(children), []))
                case _:
                    raise TypeError(f"Unexpected node: {node!r}")
        return StyledSpan(children=tuple(spans))

    def _resolve(self, node: TagNode,
                 resolved: list[StyledSpan]) -> list[StyledSpan]:
        transformation = self.registry.get(node.name, node.parts,
                                           self.templates, self.resolver,
                                           self.context)
        if transformation is None:
            logger.debug(f"Unknown tag {node.source} kept as text")
            literal = [StyledSpan.text(node.source), *resolved]
            if node.close_source is not None:
                literal.append(StyledSpan.text(node.close_source))
            return literal
        span = transformation.apply()
        if transformation.inserting:
            return [span, *resolved]
        span = span.append(*resolved)
        if isinstance(transformation, Modifying):
            span = transformation.modify(span)
        return [span]
