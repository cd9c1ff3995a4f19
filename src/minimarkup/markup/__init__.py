from .context import Context
from .escape import escape, strip, unescape
from .parser import (ElementNode, ElementParser, MarkupParseError, RawText,
                     RootNode, TagNode, TagPart)
from .template import ComponentTemplate, StringTemplate, Template
from .tokenizer import TagMatch, TagTokenizer, split_token

__all__ = [
    "ComponentTemplate",
    "Context",
    "ElementNode",
    "ElementParser",
    "MarkupParseError",
    "RawText",
    "RootNode",
    "StringTemplate",
    "TagMatch",
    "TagNode",
    "TagPart",
    "TagTokenizer",
    "Template",
    "escape",
    "split_token",
    "strip",
    "unescape",
]
