from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

from ..base import StyledSpan
from ..markup.context import Context
from ..markup.parser import TagPart


class TransformationError(ValueError):
    """Raised by :meth:`Transformation.load` for unusable arguments."""


class Transformation(ABC):
    """Turns one tag into a span.

    A transformation is created per tag occurrence, loaded with the tag's
    name and arguments, then applied once. The children of the tag are
    appended to the applied span unless the transformation is
    ``inserting``, in which case they follow it as siblings.
    """

    inserting: bool = False

    def __init__(self, context: Context) -> None:
        self.context = context

    @abstractmethod
    def load(self, name: str, parts: list[TagPart]) -> None:
        ...

    @abstractmethod
    def apply(self) -> StyledSpan:
        ...

    def argument(self, part: TagPart) -> StyledSpan:
        """Parse one argument as markup."""
        if part.nodes is not None:
            return self.context.render(part.nodes)
        return self.context.parse(part.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Modifying(ABC):
    """Mixin for transformations that rewrite the finished subtree."""

    @abstractmethod
    def modify(self, span: StyledSpan) -> StyledSpan:
        ...


@dataclass(frozen=True, slots=True)
class TransformationType:
    name: str
    can_parse: Callable[[str], bool]
    factory: Callable[[Context], Transformation]

    @classmethod
    def of(cls, factory: Callable[[Context], Transformation],
           *names: str) -> "TransformationType":
        keys = frozenset(name.lower() for name in names)
        return cls(names[0], lambda name: name in keys, factory)


def require(condition: bool, message: str) -> None:
    if not condition:
        raise TransformationError(message)
