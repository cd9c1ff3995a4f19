from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Iterable

from typing_extensions import Self

from ..utils import Undefined, undefined
from .color import Color

if TYPE_CHECKING:
    from .span import StyledSpan


class TextDecoration(Enum):
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINED = "underlined"
    STRIKETHROUGH = "strikethrough"
    OBFUSCATED = "obfuscated"


@dataclass(frozen=True, slots=True)
class HoverEvent:
    """Hover payload.

    ``show_text`` carries a styled span; ``show_item`` and ``show_entity``
    carry their raw string payload untouched.
    """

    ACTIONS: ClassVar[tuple[str, ...]] = ("show_text", "show_item",
                                          "show_entity")

    action: str
    value: StyledSpan | str

    def __post_init__(self) -> None:
        if self.action not in self.ACTIONS:
            raise ValueError(f"Unknown hover action: {self.action}")

    @classmethod
    def show_text(cls, value: StyledSpan) -> Self:
        return cls("show_text", value)


@dataclass(frozen=True, slots=True)
class ClickEvent:

    ACTIONS: ClassVar[tuple[str, ...]] = (
        "open_url",
        "open_file",
        "run_command",
        "suggest_command",
        "change_page",
        "copy_to_clipboard",
    )

    action: str
    value: str

    def __post_init__(self) -> None:
        if self.action not in self.ACTIONS:
            raise ValueError(f"Unknown click action: {self.action}")

    @classmethod
    def run_command(cls, command: str) -> Self:
        return cls("run_command", command)


@dataclass(frozen=True, slots=True)
class Style:
    """Style of a span.

    Every attribute is tri-state. ``undefined`` inherits the value of the
    enclosing span; ``None`` (or ``False`` for decorations) explicitly
    clears it; anything else sets it.
    """

    color: Color | None | Undefined = undefined
    bold: bool | Undefined = undefined
    italic: bool | Undefined = undefined
    underlined: bool | Undefined = undefined
    strikethrough: bool | Undefined = undefined
    obfuscated: bool | Undefined = undefined
    hover_event: HoverEvent | None | Undefined = undefined
    click_event: ClickEvent | None | Undefined = undefined
    insertion: str | None | Undefined = undefined
    font: str | None | Undefined = undefined

    @classmethod
    def of(
        cls,
        color: Color | str | None | Undefined = undefined,
        *decorations: TextDecoration,
        hover_event: HoverEvent | None | Undefined = undefined,
        click_event: ClickEvent | None | Undefined = undefined,
        insertion: str | None | Undefined = undefined,
        font: str | None | Undefined = undefined,
    ) -> Self:
        if isinstance(color, str):
            color = Color.parse(color)
        flags = {d.value: True for d in decorations}
        return cls(color=color,
                   hover_event=hover_event,
                   click_event=click_event,
                   insertion=insertion,
                   font=font,
                   **flags)

    @classmethod
    def reset(cls) -> Self:
        """A style that clears everything it would otherwise inherit."""
        return cls(None, False, False, False, False, False, None, None, None,
                   None)

    def decoration(self, decoration: TextDecoration) -> bool | Undefined:
        return getattr(self, decoration.value)

    def with_decoration(self, decoration: TextDecoration,
                        state: bool = True) -> Style:
        return replace(self, **{decoration.value: state})

    def merge(self, other: Style) -> Style:
        """Return this style overridden by the defined values of ``other``."""
        return replace(self, **dict(other.items()))

    def items(self) -> Iterable[tuple[str, object]]:
        for field in fields(self):
            value = getattr(self, field.name)
            if value is not undefined:
                yield field.name, value

    def normalized(self) -> Style:
        """Drop explicitly cleared values, leaving only set ones."""
        return Style(**{
            k: v
            for k, v in self.items() if v is not None and v is not False
        })

    def is_empty(self) -> bool:
        return next(iter(self.items()), None) is None

    def __str__(self) -> str:
        var_str = ", ".join(f"{k}={v}" for k, v in self.items())
        return f"Style({var_str})"
