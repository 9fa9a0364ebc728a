import re

import pytest

from lexer_next import EOF, Source, Token, match_to_token, regexp_tokenizer


@pytest.mark.parametrize(
    "group,value,expected",
    [
        ("ident", None, True),
        ("ident", "foo", True),
        ("ident", "bar", False),
        ("number", None, False),
        ("number", "foo", False),
    ],
)
def test_token_matches(group, value, expected):
    assert Token("ident", "foo", 0).matches(group, value) is expected


def test_token_equality_ignores_source():
    a = Token("ident", "foo", 0, Source("foo"))
    b = Token("ident", "foo", 0)

    assert a == b
    assert repr(a) == "Token(group='ident', value='foo', index=0)"


def test_token_is_immutable():
    token = Token("ident", "foo", 0)

    with pytest.raises(AttributeError):
        token.value = "bar"


def test_token_rejects_negative_index():
    with pytest.raises(ValueError):
        Token("ident", "foo", -1)


def test_token_end():
    assert Token("ident", "foo", 4).end == 7


def test_eof_token():
    source = Source("foo bar")
    eof = Token.eof(source)

    assert eof == Token(EOF, "", 7)
    assert eof.is_eof
    assert eof.source is source
    assert not Token("ident", "foo", 0).is_eof


def test_match_to_token_uses_named_group():
    source = Source("foo 12")
    matches = list(re.finditer(r"(?P<ident>[a-z]+)|(?P<number>[0-9]+)", source.input))

    tokens = [match_to_token(m, source) for m in matches]

    assert tokens == [Token("ident", "foo", 0), Token("number", "12", 4)]
    assert all(t.source is source for t in tokens)


def test_match_to_token_inside_unnamed_group():
    """lastgroup is None when the outermost group has no name"""
    match = re.search(r"((?P<ident>[a-z]+)|(?P<number>[0-9]+))", "  42")

    assert match.lastgroup is None
    assert match_to_token(match) == Token("number", "42", 2)


def test_match_to_token_index_is_group_start():
    """Text matched outside the named group is not part of the token"""
    match = re.search(r"\s*(?P<ident>[a-z]+)", "   foo")

    assert match.start() == 0
    token = match_to_token(match)
    assert token == Token("ident", "foo", 3)
    assert token.end == match.end()


def test_match_to_token_passthrough():
    token = Token("ident", "foo", 0)

    assert match_to_token(None) is None
    assert match_to_token(token) is token


def test_match_to_token_attaches_source_to_token():
    source = Source("foo")
    other = Source("bar")

    attached = match_to_token(Token("ident", "foo", 0), source)
    kept = match_to_token(Token("ident", "bar", 0, other), source)

    assert attached == Token("ident", "foo", 0)
    assert attached.source is source
    assert kept.source is other


def test_match_to_token_without_named_group():
    match = re.search(r"[a-z]+", "foo")

    with pytest.raises(ValueError, match="no named group"):
        match_to_token(match)


def test_match_to_token_rejects_other_types():
    with pytest.raises(TypeError):
        match_to_token(("ident", "foo", 0))


def test_regexp_tokenizer_accepts_compiled_pattern():
    pattern = re.compile(r"(?P<word>[a-z]+)", re.IGNORECASE)
    tokenize = regexp_tokenizer(pattern)

    assert [m.group() for m in tokenize("Foo BAR")] == ["Foo", "BAR"]


def test_regexp_tokenizer_flags():
    tokenize = regexp_tokenizer(r"(?P<word>[a-z]+)", re.IGNORECASE)

    assert [m.lastgroup for m in tokenize("Foo 1 bar")] == ["word", "word"]


def test_regexp_tokenizer_requires_named_groups():
    with pytest.raises(ValueError, match="named groups"):
        regexp_tokenizer(r"[a-z]+")
