from __future__ import annotations

from typing import Callable, Iterable, Mapping

from ..base import StyledSpan
from ..log import logger_wrapper
from ..markup.context import Context
from ..markup.parser import TagPart
from . import content, event, fancy, style
from .base import Transformation, TransformationError, TransformationType
from .content import ComponentTransformation

logger = logger_wrapper("Markup")

PlaceholderResolver = Callable[[str], StyledSpan | None]


class TransformationRegistry:
    """Immutable, ordered catalogue of tag handlers.

    Lookup goes through the built-in types first, then component templates
    keyed by tag name, then the placeholder resolver.
    """

    def __init__(self, types: Iterable[TransformationType]) -> None:
        self._types = tuple(types)

    @classmethod
    def default(cls) -> TransformationRegistry:
        return _DEFAULT

    @property
    def types(self) -> tuple[TransformationType, ...]:
        return self._types

    def with_types(self,
                   *types: TransformationType) -> TransformationRegistry:
        """New registry whose extra types take precedence."""
        return TransformationRegistry(types + self._types)

    def exists(self, name: str) -> bool:
        key = name.lower()
        return any(type.can_parse(key) for type in self._types)

    def get(
        self,
        name: str,
        parts: list[TagPart],
        templates: Mapping[str, StyledSpan],
        resolver: PlaceholderResolver | None,
        context: Context,
    ) -> Transformation | None:
        key = name.lower()
        transformation: Transformation | None = None
        for type in self._types:
            if type.can_parse(key):
                transformation = type.factory(context)
                break
        else:
            if name in templates:
                transformation = ComponentTransformation(
                    context, templates[name])
            elif resolver is not None:
                span = resolver(name)
                if span is not None:
                    transformation = ComponentTransformation(context, span)
        if transformation is None:
            return None
        try:
            transformation.load(name, parts)
        except TransformationError as e:
            logger.debug(f"<{name}> rejected its arguments: {e}")
            return None
        return transformation

    def __repr__(self) -> str:
        names = ", ".join(type.name for type in self._types)
        return f"TransformationRegistry({names})"


_DEFAULT = TransformationRegistry([
    *style.TYPES,
    *event.TYPES,
    *content.TYPES,
    *fancy.TYPES,
])
