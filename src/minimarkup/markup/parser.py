from dataclasses import dataclass, field
from typing import Iterable

from ..log import logger_wrapper
from .escape import unescape
from .tokenizer import TagTokenizer, backslashes, split_token

logger = logger_wrapper("Markup")


@dataclass(slots=True)
class ElementNode:
    pass


@dataclass(slots=True)
class RawText(ElementNode):
    value: str
    # inside a raw region: never unescaped
    raw: bool = False


@dataclass(slots=True)
class TagPart:
    value: str
    quoted: bool = False
    # parsed form of a value that starts with a tag
    nodes: list[ElementNode] | None = None


@dataclass(slots=True)
class TagNode(ElementNode):
    name: str
    parts: list[TagPart] = field(default_factory=list)
    children: list[ElementNode] = field(default_factory=list)
    source: str = ""
    # None if the tag was never closed explicitly
    close_source: str | None = None

    @property
    def key(self) -> str:
        return self.name.lower()

    def values(self) -> list[str]:
        return [part.value for part in self.parts]


@dataclass(slots=True)
class RootNode(ElementNode):
    children: list[ElementNode] = field(default_factory=list)


class MarkupParseError(ValueError):

    def __init__(self,
                 message: str,
                 markup: str | None = None,
                 pos: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.markup = markup
        self.pos = pos

    def __str__(self) -> str:
        info = f"{self.__class__.__name__}: {self.message}"
        if self.markup is None:
            return info
        if self.pos is None:
            return f"{info}\n{self.markup}"
        return f"{info}\n{self.markup}\n{' ' * self.pos}^"


class ElementParser:
    """Builds the element tree of a markup string.

    Nesting does not have to be strict: a closing tag closes the nearest
    open tag with the same name (case-insensitive) together with everything
    opened after it, and a closing tag that matches nothing is dropped.
    Tags left open are closed at the end of the input.

    Once ``max_depth`` tags are open, further opening tags are kept as
    plain text. Arguments that start with a tag are parsed into
    :attr:`TagPart.nodes`, up to ``max_depth`` levels deep.
    """

    def __init__(self,
                 markup: str,
                 *,
                 raw_tags: Iterable[str] = ("pre",),
                 max_depth: int = 64,
                 depth: int = 0) -> None:
        self.markup = markup
        self.raw_tags = tuple(tag.lower() for tag in raw_tags)
        self.max_depth = max_depth
        self.depth = depth
        self.tokenizer = TagTokenizer(self.raw_tags)

    def parse(self) -> RootNode:
        root = RootNode()
        stack: list[RootNode | TagNode] = [root]
        raw: str | None = None
        cursor = 0
        for match in self.tokenizer.tokenize(self.markup):
            self._append_text(stack[-1], self.markup[cursor:match.start], raw,
                              before_tag=True)
            cursor = match.end
            raw = None

            name, parts = split_token(match.token)
            if name.startswith("/"):
                self._close(stack, name[1:], match.text)
                continue
            if name.lower() in self.raw_tags:
                raw = name.lower()
            if len(stack) > self.max_depth:
                logger.debug(f"Nesting limit {self.max_depth} reached, "
                             f"keeping {match.text} as text")
                stack[-1].children.append(RawText(match.text, raw=True))
                continue
            node = TagNode(name, [self._part(*part) for part in parts], [],
                           match.text)
            stack[-1].children.append(node)
            stack.append(node)
        self._append_text(stack[-1], self.markup[cursor:], raw)
        return root

    def _append_text(self,
                     parent: RootNode | TagNode,
                     text: str,
                     raw: str | None,
                     before_tag: bool = False) -> None:
        if raw is not None:
            text = text.replace(f"\\</{raw}>", f"</{raw}>")
            if text:
                parent.children.append(RawText(text, raw=True))
            return
        if before_tag:
            # backslashes in front of a tag are doubled
            run = backslashes(text, len(text))
            text = text[:len(text) - run // 2]
        if text:
            parent.children.append(RawText(unescape(text)))

    def _close(self, stack: list[RootNode | TagNode], name: str,
               source: str) -> None:
        key = name.lower()
        for index in range(len(stack) - 1, 0, -1):
            node = stack[index]
            assert isinstance(node, TagNode)
            if node.key == key:
                node.close_source = source
                del stack[index:]
                return
        logger.debug(f"Dropped unmatched closing tag {source}")

    def _part(self, value: str, quoted: bool) -> TagPart:
        if not value.startswith("<"):
            return TagPart(value, quoted)
        if self.depth >= self.max_depth:
            logger.debug(f"Argument nesting limit {self.max_depth} reached, "
                         f"keeping {value} as text")
            return TagPart(value, quoted)
        nested = ElementParser(value,
                               raw_tags=self.raw_tags,
                               max_depth=self.max_depth,
                               depth=self.depth + 1)
        return TagPart(value, quoted, nested.parse().children)
