from .tokenizer import QUOTES, TagMatch, TagTokenizer, find_quote, is_escaped

# escaping treats every tag the same, including raw ones
_tokenizer = TagTokenizer(raw_tags=())


def _escape_tag(match: TagMatch) -> str:
    text = match.text
    out = ["\\<"]
    cursor = 1
    for start, end in match.quoted:
        out.append(text[cursor:start])
        out.append(escape(text[start:end]))
        cursor = end
    out.append(text[cursor:-1])
    out.append("\\>")
    return "".join(out)


def escape(text: str) -> str:
    """Escape every tag so it is shown literally.

    Tags nested inside quoted arguments are escaped as well.

    Examples:
        >>> escape('<red>hi</red>')
        '\\\\<red\\\\>hi\\\\</red\\\\>'
    """
    # escaping a tag exposes its quoted arguments to the top level, so
    # repeat until nothing reads as a tag
    while True:
        escaped = _escape_once(text)
        if escaped == text:
            return text
        text = escaped


def _escape_once(text: str) -> str:
    out = []
    cursor = 0
    for match in _tokenizer.tokenize(text):
        out.append(text[cursor:match.start])
        out.append(_escape_tag(match))
        cursor = match.end
    out.append(text[cursor:])
    return "".join(out)


def strip(text: str) -> str:
    """Remove every tag, keeping the text around them."""
    out = []
    cursor = 0
    for match in _tokenizer.tokenize(text):
        out.append(text[cursor:match.start])
        cursor = match.end
    out.append(text[cursor:])
    return "".join(out)


def _scan_escaped(text: str, start: int) -> tuple[str | None, int]:
    """Try to read an escaped tag ``\\<...\\>`` whose ``<`` is at ``start``.

    Returns the unescaped tag (or None) and the offset to resume from.
    """
    out = ["<"]
    cursor = start + 1
    i = start + 1
    while i < len(text):
        char = text[i]
        if char in QUOTES and text[i - 1] == ":":
            close = find_quote(text, char, i + 1)
            if close == -1:
                return None, start + 1
            out.append(text[cursor:i + 1])
            out.append(unescape(text[i + 1:close]))
            cursor = close
            i = close + 1
            continue
        if char == "<":
            return None, i
        if char == ">":
            if not is_escaped(text, i) or i == start + 2:
                return None, i
            out.append(text[cursor:i - 1])
            out.append(">")
            return "".join(out), i + 1
        i += 1
    return None, start + 1


def unescape(text: str) -> str:
    """Undo :func:`escape`.

    Only complete escaped tags are restored; a lone ``\\<`` or ``\\>`` is
    left as written.
    """
    out = []
    cursor = 0
    pos = text.find("\\<")
    while pos != -1:
        tag, resume = _scan_escaped(text, pos + 1)
        if tag is not None:
            out.append(text[cursor:pos])
            out.append(tag)
            cursor = resume
        pos = text.find("\\<", max(resume - 1, pos + 1))
    out.append(text[cursor:])
    return "".join(out)
