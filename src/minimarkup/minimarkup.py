from typing import Iterable, Mapping

from .base import StyledSpan
from .config import MarkupConfig
from .dump import dumps
from .log import logger_wrapper
from .markup import (Context, ElementParser, MarkupParseError, RootNode,
                     StringTemplate, Template)
from .markup import escape as _escape
from .markup import strip as _strip
from .markup.generator import SpanGenerator
from .markup.template import split_templates, substitute
from .serializer import MarkupSerializer
from .transform import PlaceholderResolver, TransformationRegistry

logger = logger_wrapper("Markup")

RAW_TAGS = ("pre",)


class MiniMarkup:
    """Entry point for parsing and writing markup.

    Instances are immutable once created and may be shared freely; every
    call works on its own context.

    Args:
        registry: tag handlers, :meth:`TransformationRegistry.default` if
            omitted.
        placeholder_resolver: fallback for tags that are neither built in
            nor provided as component templates.
        config: limits and diagnostics, read from the environment if
            omitted.
    """

    def __init__(
        self,
        registry: TransformationRegistry | None = None,
        placeholder_resolver: PlaceholderResolver | None = None,
        config: MarkupConfig | None = None,
    ) -> None:
        self.registry = registry or TransformationRegistry.default()
        self.placeholder_resolver = placeholder_resolver
        self.config = config or MarkupConfig.from_env()
        self.serializer = MarkupSerializer()

    def parse(self,
              message: str,
              *placeholders: str,
              context: Context | None = None) -> StyledSpan:
        """Parse markup, replacing ``<key>`` by ``value`` for each pair.

        Raises:
            MarkupParseError: if ``placeholders`` is not a sequence of
                key/value pairs.
        """
        if len(placeholders) % 2 != 0:
            raise MarkupParseError(
                "Placeholders must be given as key/value pairs, "
                f"got {len(placeholders)} strings")
        templates = [
            StringTemplate(key, value)
            for key, value in zip(placeholders[::2], placeholders[1::2])
        ]
        return self.parse_templates(message, templates, context=context)

    def parse_map(self,
                  message: str,
                  placeholders: Mapping[str, str],
                  context: Context | None = None) -> StyledSpan:
        templates = [StringTemplate(k, v) for k, v in placeholders.items()]
        return self.parse_templates(message, templates, context=context)

    def parse_templates(self,
                        message: str,
                        templates: Iterable[Template],
                        context: Context | None = None) -> StyledSpan:
        """Parse markup with string and component templates.

        String templates are substituted into the text before parsing,
        component templates are inserted where their tag appears.
        """
        strings, components = split_templates(templates)
        if context is None:
            context = Context()
        context.message = message
        replaced = substitute(message, strings, RAW_TAGS)
        context.replaced_message = replaced
        try:
            root = self._build(replaced)
            context.tree = root
            generator = SpanGenerator(self.registry,
                                      context,
                                      templates=components,
                                      resolver=self.placeholder_resolver,
                                      raw_tags=RAW_TAGS,
                                      max_depth=self.config.max_depth)
            span = generator.generate(root)
        except MarkupParseError:
            raise
        except Exception as e:
            raise MarkupParseError(f"Failed to parse: {e}", replaced) from e
        context.root = span
        if self.config.log_trees:
            logger.trace(f"{replaced} -> {dumps(span)}")
        return span

    def parse_tree(self, message: str) -> RootNode:
        """Element tree of ``message`` without resolving any tag."""
        return self._build(message)

    def _build(self, message: str) -> RootNode:
        return ElementParser(message,
                             raw_tags=RAW_TAGS,
                             max_depth=self.config.max_depth).parse()

    def escape(self, text: str) -> str:
        return _escape(text)

    def strip(self, text: str) -> str:
        return _strip(text)

    def serialize(self, span: StyledSpan) -> str:
        return self.serializer.serialize(span)

