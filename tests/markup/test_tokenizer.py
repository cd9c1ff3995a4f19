from minimarkup.markup import TagTokenizer, split_token


def tokens(text: str, raw_tags=("pre",)) -> list[str]:
    return [m.text for m in TagTokenizer(raw_tags).tokenize(text)]


def test_tokenize_basic():
    testcases = [
        ("plain text", []),
        ("<red>", ["<red>"]),
        ("<yellow>TEST<green> nested</green>Test",
         ["<yellow>", "<green>", "</green>"]),
        ("<>", []),
        ("a < b > c", ["< b >"]),
        ("unterminated <red", []),
        ("\\<red> escaped", []),
        # unquoted text holds no bracket, escaped or not
        ("<red\\>>", []),
        ("<x \\<red\\>", []),
        ("a <x \\<red\\>hi", []),
        # a doubled backslash does not escape the bracket
        ("a\\\\<red>", ["<red>"]),
        ("<red\\\\>", ["<red\\\\>"]),
        ("a\\\\\\<red>", []),
    ]
    for text, expected in testcases:
        assert tokens(text) == expected, text


def test_tokenize_restart_on_open_bracket():
    # the first candidate is abandoned at the second unquoted '<'
    assert tokens("<click:open_url:<pack_url>>") == ["<pack_url>"]
    assert tokens("<<red>") == ["<red>"]


def test_tokenize_quotes():
    text = '<hover:show_text:"<red>test:TEST">TEST'
    matches = list(TagTokenizer().tokenize(text))
    assert len(matches) == 1
    match = matches[0]
    assert match.text == '<hover:show_text:"<red>test:TEST">'
    assert match.inner == "<red>test:TEST"
    assert match.start == 0 and match.end == len(match.text)

    # quotes only open right after a separator
    assert tokens("<a'b>") == ["<a'b>"]
    # an escaped quote does not close the argument
    assert tokens("<hover:show_text:'it\\'s <b>'>x") == [
        "<hover:show_text:'it\\'s <b>'>"
    ]
    # unterminated quote is not a tag
    assert tokens("<hover:show_text:'oops>") == []


def test_tokenize_offsets():
    text = "ab<red>cd</red>"
    matches = list(TagTokenizer().tokenize(text))
    assert [(m.start, m.end) for m in matches] == [(2, 7), (9, 15)]
    assert [m.token for m in matches] == ["red", "/red"]
    assert matches[0].inner is None


def test_tokenize_raw_region():
    testcases = [
        ("<pre><red>x</pre><blue>", ["<pre>", "</pre>", "<blue>"]),
        ("<PRE><red>x</Pre>y", ["<PRE>", "</Pre>"]),
        ("<pre><red>never closed", ["<pre>"]),
        ("<pre>a\\</pre><red>b</pre>", ["<pre>", "</pre>"]),
    ]
    for text, expected in testcases:
        assert tokens(text) == expected, text
    # without raw tags everything is a tag
    assert tokens("<pre><red>x</pre>", raw_tags=()) == [
        "<pre>", "<red>", "</pre>"
    ]


def test_split_token():
    testcases = [
        ("red", ("red", [])),
        ("color:red", ("color", [("red", False)])),
        ("/color:red", ("/color", [("red", False)])),
        ("click:open_url:https://example.com",
         ("click", [("open_url", False), ("https", False),
                    ("//example.com", False)])),
        ('hover:show_text:"<red>a:b"',
         ("hover", [("show_text", False), ("<red>a:b", True)])),
        ("lang:key:'<red>1':'<blue>Stone'",
         ("lang", [("key", False), ("<red>1", True), ("<blue>Stone", True)])),
        ("hover:show_text:'it\\'s'",
         ("hover", [("show_text", False), ("it\\'s", True)])),
        ("font:", ("font", [("", False)])),
    ]
    for token, expected in testcases:
        assert split_token(token) == expected, token
