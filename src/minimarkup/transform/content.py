from ..base import StyledSpan
from ..markup.context import Context
from ..markup.parser import TagPart
from .base import Transformation, TransformationType, require


class KeybindTransformation(Transformation):

    inserting = True

    key: str

    def load(self, name: str, parts: list[TagPart]) -> None:
        require(len(parts) == 1, f"<{name}> requires exactly one key")
        self.key = parts[0].value

    def apply(self) -> StyledSpan:
        return StyledSpan.keybind(self.key)


class TranslatableTransformation(Transformation):
    """``<lang:key:'<red>arg'...>``; each argument is parsed on its own."""

    inserting = True

    key: str
    args: list[StyledSpan]

    def load(self, name: str, parts: list[TagPart]) -> None:
        require(bool(parts), f"<{name}> requires a translation key")
        self.key = parts[0].value
        self.args = [self.argument(part) for part in parts[1:]]

    def apply(self) -> StyledSpan:
        return StyledSpan.translatable(self.key, *self.args)


class ComponentTransformation(Transformation):
    """Inserts a prepared span (component template or resolved placeholder)."""

    inserting = True

    def __init__(self, context: Context, span: StyledSpan) -> None:
        super().__init__(context)
        self.span = span

    def load(self, name: str, parts: list[TagPart]) -> None:
        require(not parts, f"<{name}> takes no arguments")

    def apply(self) -> StyledSpan:
        return self.span


TYPES = [
    TransformationType.of(KeybindTransformation, "key"),
    TransformationType.of(TranslatableTransformation, "lang", "tr",
                          "translate"),
]
