import re
from dataclasses import dataclass
from typing import Iterable, Iterator

QUOTES = "'\""


@dataclass(frozen=True, slots=True)
class TagMatch:
    """A tag found in the source text.

    Attributes:
        start: offset of ``<`` in the source.
        end: offset just past ``>``.
        text: the whole tag, delimiters included.
        quoted: ``(start, end)`` of each quoted argument body, relative to
            ``text`` and without the quote characters.
    """

    start: int
    end: int
    text: str
    quoted: tuple[tuple[int, int], ...] = ()

    @property
    def token(self) -> str:
        return self.text[1:-1]

    @property
    def inner(self) -> str | None:
        if not self.quoted:
            return None
        start, end = self.quoted[0]
        return self.text[start:end]


def backslashes(text: str, pos: int) -> int:
    """Number of backslashes right before ``pos``."""
    start = pos
    while start > 0 and text[start - 1] == "\\":
        start -= 1
    return pos - start


def is_escaped(text: str, pos: int) -> bool:
    # a doubled backslash is a literal one
    return backslashes(text, pos) % 2 == 1


def find_quote(text: str, quote: str, start: int) -> int:
    """Index of the next unescaped ``quote``, or -1."""
    pos = text.find(quote, start)
    while pos != -1 and is_escaped(text, pos):
        pos = text.find(quote, pos + 1)
    return pos


class TagTokenizer:
    """Lazy scanner for ``<...>`` tags.

    Tag names listed in ``raw_tags`` open a raw region: nothing inside is
    recognized until the matching ``</name>`` sequence.
    """

    def __init__(self, raw_tags: Iterable[str] = ("pre",)) -> None:
        self.raw_tags = frozenset(tag.lower() for tag in raw_tags)
        self._raw_end = {
            tag: re.compile(r"(?<!\\)</" + re.escape(tag) + ">", re.I)
            for tag in self.raw_tags
        }

    def tokenize(self, text: str) -> Iterator[TagMatch]:
        pos = 0
        while True:
            start = text.find("<", pos)
            while start != -1 and is_escaped(text, start):
                start = text.find("<", start + 1)
            if start == -1:
                return
            match, pos = self._scan(text, start)
            if match is None:
                continue
            yield match

            name = split_token(match.token)[0].lower()
            if name in self.raw_tags:
                close = self._raw_end[name].search(text, match.end)
                if close is None:
                    return
                yield TagMatch(close.start(), close.end(), close.group())
                pos = close.end()

    def _scan(self, text: str, start: int) -> tuple[TagMatch | None, int]:
        """Try to read a tag at ``start``.

        Returns the match (or None) and the offset to resume scanning from.
        """
        quoted = []
        i = start + 1
        while i < len(text):
            char = text[i]
            if char in QUOTES and text[i - 1] == ":":
                close = find_quote(text, char, i + 1)
                if close == -1:
                    return None, start + 1
                quoted.append((i + 1 - start, close - start))
                i = close + 1
                continue
            if char == "<":
                # unquoted text never holds a bracket, escaped or not
                return None, i
            if char == ">":
                if is_escaped(text, i):
                    return None, i + 1
                if i == start + 1:
                    return None, i + 1
                return TagMatch(start, i + 1, text[start:i + 1],
                                tuple(quoted)), i + 1
            i += 1
        return None, start + 1


def split_token(token: str) -> tuple[str, list[tuple[str, bool]]]:
    """Split a tag token into its name and ``(value, quoted)`` arguments.

    Arguments are separated by ``:``. An argument that starts with a quote
    runs to the same unescaped quote; the quotes are dropped and anything
    else inside is kept as written.
    """
    name_end = token.find(":")
    if name_end == -1:
        return token, []
    name = token[:name_end]
    parts = []
    i = name_end + 1
    while True:
        if i < len(token) and token[i] in QUOTES:
            close = find_quote(token, token[i], i + 1)
            if close != -1:
                value = token[i + 1:close]
                next_sep = token.find(":", close + 1)
                if next_sep == -1:
                    next_sep = len(token)
                # text between the closing quote and the separator is kept
                parts.append((value + token[close + 1:next_sep], True))
                if next_sep == len(token):
                    break
                i = next_sep + 1
                continue
        next_sep = token.find(":", i)
        if next_sep == -1:
            parts.append((token[i:], False))
            break
        parts.append((token[i:next_sep], False))
        i = next_sep + 1
    return name, parts
