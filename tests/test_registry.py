import pytest

from minimarkup import (Context, MarkupConfig, MarkupParseError, MiniMarkup,
                        Style, StyledSpan, TransformationRegistry, dump)
from minimarkup.markup import TagPart
from minimarkup.transform import Transformation, TransformationType
from minimarkup.transform.content import ComponentTransformation
from minimarkup.transform.event import ClickTransformation
from minimarkup.transform.fancy import GradientTransformation
from minimarkup.transform.style import (ColorTransformation,
                                        DecorationTransformation)


def parts(*values: str) -> list[TagPart]:
    return [TagPart(value) for value in values]


def get(name: str, *values: str, templates=None, resolver=None):
    registry = TransformationRegistry.default()
    return registry.get(name, parts(*values), templates or {}, resolver,
                        Context())


def test_default_lookup():
    testcases = [
        ("red", (), ColorTransformation),
        ("Color", ("red",), ColorTransformation),
        ("#abcdef", (), ColorTransformation),
        ("B", (), DecorationTransformation),
        ("obf", ("false",), DecorationTransformation),
        ("click", ("open_url", "https", "//example.com"), ClickTransformation),
        ("gradient", ("red", "blue", "-3"), GradientTransformation),
    ]
    for name, values, expected in testcases:
        assert isinstance(get(name, *values), expected), name


def test_rejected_arguments():
    testcases = [
        ("color", ()),
        ("color", ("nope",)),
        ("red", ("extra",)),
        ("bold", ("yes",)),
        ("click", ("open_url",)),
        ("click", ("launch_rocket", "now")),
        ("hover", ("show_nothing", "x")),
        ("key", ()),
        ("gradient", ("red",)),
        ("rainbow", ("1", "2")),
        ("reset", ("x",)),
        ("unknown", ()),
    ]
    for name, values in testcases:
        assert get(name, *values) is None, name


def test_lookup_order():
    span = StyledSpan.text("template")
    # built-ins win over templates with the same name
    assert isinstance(get("red", templates={"red": span}),
                      ColorTransformation)
    found = get("who", templates={"who": span}, resolver=lambda key: None)
    assert isinstance(found, ComponentTransformation)
    assert found.apply() == span
    # templates are matched by exact name
    assert get("WHO", templates={"who": span}) is None

    resolved = get("who", resolver=lambda key: StyledSpan.text(key))
    assert resolved.apply() == StyledSpan.text("who")
    # a resolved placeholder takes no arguments
    assert get("who", "x", resolver=lambda key: StyledSpan.text(key)) is None


def test_gradient_arguments():
    gradient = get("gradient")
    assert [str(c) for c in gradient.stops] == ["white", "black"]
    assert gradient.phase == 0
    gradient = get("gradient", "7")
    assert gradient.phase == 7
    gradient = get("gradient", "red", "blue", "-3")
    assert [str(c) for c in gradient.stops] == ["red", "blue"]
    assert gradient.phase == -3


class ShoutTransformation(Transformation):

    def load(self, name: str, parts: list[TagPart]) -> None:
        self.text = " ".join(part.value for part in parts).upper()

    def apply(self) -> StyledSpan:
        return StyledSpan.text(self.text, Style(bold=True))


class BrokenTransformation(Transformation):

    def load(self, name: str, parts: list[TagPart]) -> None:
        raise RuntimeError("broken")

    def apply(self) -> StyledSpan:
        return StyledSpan()


def test_custom_types():
    default = TransformationRegistry.default()
    registry = default.with_types(
        TransformationType.of(ShoutTransformation, "shout"))
    assert registry.exists("SHOUT")
    assert not default.exists("shout")
    assert registry.types[len(registry.types) - len(default.types):] == \
        default.types

    mm = MiniMarkup(registry=registry, config=MarkupConfig())
    assert dump(mm.parse("<shout:hi:there>!")) == {
        "text": "",
        "extra": [{"text": "HI THERE", "bold": True}, {"text": "!",
                                                        "bold": True}],
    }


def test_internal_errors_are_wrapped():
    registry = TransformationRegistry.default().with_types(
        TransformationType.of(BrokenTransformation, "broken"))
    mm = MiniMarkup(registry=registry, config=MarkupConfig())
    with pytest.raises(MarkupParseError) as info:
        mm.parse("<broken>x")
    assert isinstance(info.value.__cause__, RuntimeError)
    assert info.value.markup == "<broken>x"
