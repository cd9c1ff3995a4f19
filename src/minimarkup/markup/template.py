from dataclasses import dataclass
from typing import Iterable

from ..base import StyledSpan


@dataclass(frozen=True, slots=True)
class Template:
    key: str


@dataclass(frozen=True, slots=True)
class StringTemplate(Template):
    """Replaces ``<key>`` with markup before the message is parsed."""

    value: str


@dataclass(frozen=True, slots=True)
class ComponentTemplate(Template):
    """Inserts a ready-made span wherever the ``<key>`` tag appears."""

    value: StyledSpan


def sanitize(value: str, raw_tags: Iterable[str] = ("pre",)) -> str:
    """Keep a substituted value from closing a raw region early."""
    for tag in raw_tags:
        value = value.replace(f"</{tag}>", f"\\</{tag}>")
    return value


def split_templates(
    templates: Iterable[Template]
) -> tuple[dict[str, str], dict[str, StyledSpan]]:
    """Group templates by kind; the last template for a key wins."""
    strings: dict[str, str] = {}
    components: dict[str, StyledSpan] = {}
    for template in templates:
        match template:
            case StringTemplate(key, value):
                strings[key] = value
                components.pop(key, None)
            case ComponentTemplate(key, value):
                components[key] = value
                strings.pop(key, None)
            case _:
                raise TypeError(f"Unsupported template: {template!r}")
    return strings, components


def substitute(message: str,
               strings: dict[str, str],
               raw_tags: Iterable[str] = ("pre",)) -> str:
    raw_tags = tuple(raw_tags)
    for key, value in strings.items():
        message = message.replace(f"<{key}>", sanitize(value, raw_tags))
    return message
