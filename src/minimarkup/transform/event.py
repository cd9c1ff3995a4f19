from ..base import ClickEvent, HoverEvent, StyledSpan, Style
from ..markup.parser import TagPart
from .base import (Transformation, TransformationError, TransformationType,
                   require)


class HoverTransformation(Transformation):
    """``<hover:show_text:"<red>text">``.

    Only ``show_text`` payloads are markup; other actions keep their
    argument text as is.
    """

    event: HoverEvent

    def load(self, name: str, parts: list[TagPart]) -> None:
        require(len(parts) >= 2, f"<{name}> requires an action and a value")
        action = parts[0].value.lower()
        require(action in HoverEvent.ACTIONS, f"Unknown hover action {action}")
        values = parts[1:]
        if action != "show_text":
            self.event = HoverEvent(action, ":".join(p.value for p in values))
        elif len(values) == 1:
            self.event = HoverEvent(action, self.argument(values[0]))
        else:
            text = ":".join(p.value for p in values)
            self.event = HoverEvent(action, self.context.parse(text))

    def apply(self) -> StyledSpan:
        return StyledSpan(style=Style(hover_event=self.event))


class ClickTransformation(Transformation):
    """``<click:open_url:https://example.com>``.

    The value is everything after the action, so URLs may contain ``:``.
    """

    event: ClickEvent

    def load(self, name: str, parts: list[TagPart]) -> None:
        require(len(parts) >= 2, f"<{name}> requires an action and a value")
        action = parts[0].value.lower()
        try:
            self.event = ClickEvent(action,
                                    ":".join(p.value for p in parts[1:]))
        except ValueError as e:
            raise TransformationError(str(e)) from e

    def apply(self) -> StyledSpan:
        return StyledSpan(style=Style(click_event=self.event))


TYPES = [
    TransformationType.of(HoverTransformation, "hover"),
    TransformationType.of(ClickTransformation, "click"),
]
