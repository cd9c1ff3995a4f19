import random

from minimarkup.markup import TagTokenizer, escape, strip, unescape


def test_escape():
    testcases = [
        ("no tags here", "no tags here"),
        ("<red>hi</red>", "\\<red\\>hi\\</red\\>"),
        ('<hover:show_text:"<red>test:TEST">TEST',
         '\\<hover:show_text:"\\<red\\>test:TEST"\\>TEST'),
        ("<pre><red>x</pre>", "\\<pre\\>\\<red\\>x\\</pre\\>"),
        ("already \\<red\\> escaped", "already \\<red\\> escaped"),
    ]
    for text, expected in testcases:
        assert escape(text) == expected, text


def test_escaped_text_has_no_tags():
    testcases = [
        "<yellow>TEST<green> nested</green>Test",
        '<hover:show_text:"<red>test:TEST">TEST',
        "<pre><insert:test>this</pre>",
        "<lang:key:'<red>1':'<blue>Stone'>",
    ]
    tokenizer = TagTokenizer()
    for text in testcases:
        assert list(tokenizer.tokenize(escape(text))) == [], text
        # escaped tags survive stripping
        assert strip(escape(text)) == escape(text)


def test_strip():
    testcases = [
        ("no tags here", "no tags here"),
        ("<yellow>TEST<green> nested</green>Test", "TEST nestedTest"),
        ('<hover:show_text:"<red>test:TEST">TEST', "TEST"),
        ("<red>1 < 2", "1 < 2"),
        ("<click:open_url:<pack_url>>", "<click:open_url:>"),
    ]
    for text, expected in testcases:
        assert strip(text) == expected, text


def test_unescape():
    testcases = [
        ("TEST\\<green\\>\\> \\< nested\\</green\\>Test",
         "TEST<green>\\> \\< nested</green>Test"),
        ('\\<hover:show_text:"\\<red\\>test:TEST"\\>TEST',
         '<hover:show_text:"<red>test:TEST">TEST'),
        ("lone \\< bracket", "lone \\< bracket"),
        ("\\<\\> empty", "\\<\\> empty"),
        ("other \\n escapes", "other \\n escapes"),
    ]
    for text, expected in testcases:
        assert unescape(text) == expected, text


def test_unescape_inverts_escape():
    testcases = [
        "<yellow>TEST<green> nested</green>Test",
        '<hover:show_text:"<red>test:TEST">TEST',
        "<lang:key:'<red>1':'<blue>Stone'>",
        "plain",
        "a\\\\<red>",
    ]
    for text in testcases:
        assert unescape(escape(text)) == text


def test_escape_exposed_arguments():
    testcases = [
        # the quoted argument of an escaped tag is a tag of its own
        ("<a:'<b:'>c'>", "\\<a:'\\<b:'\\>c'\\>"),
        ("a <x <red>hi", "a <x \\<red\\>hi"),
        ("a\\\\<red>", "a\\\\\\<red\\>"),
    ]
    tokenizer = TagTokenizer()
    for text, expected in testcases:
        assert escape(text) == expected, text
        assert list(tokenizer.tokenize(expected)) == [], text


def test_escaped_random_text_has_no_tags():
    rng = random.Random(0)
    alphabet = "<>:'\"\\/ab"
    tokenizer = TagTokenizer()
    for _ in range(2000):
        text = "".join(
            rng.choice(alphabet) for _ in range(rng.randint(1, 12)))
        assert list(tokenizer.tokenize(escape(text))) == [], text
