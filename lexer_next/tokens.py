import re
from dataclasses import dataclass, field, replace
from typing import Callable, Iterator

EOF = "eof"


@dataclass(frozen=True)
class Source:
    """Input text shared by every token lexed from it"""

    input: str

    def __repr__(self) -> str:
        return f"Source(<{len(self.input)} chars>)"


@dataclass(frozen=True)
class Token:
    """A classified slice of the input: group, matched text and start offset"""

    group: str
    value: str
    index: int
    source: Source | None = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.index < 0:
            raise ValueError(f"Token index must be >= 0, got {self.index}")

    @classmethod
    def eof(cls, source: Source) -> "Token":
        """End-of-input token positioned just past the last character"""
        return cls(EOF, "", len(source.input), source)

    @property
    def is_eof(self) -> bool:
        return self.group == EOF

    @property
    def end(self) -> int:
        return self.index + len(self.value)

    def matches(self, group: str, value: str | None = None) -> bool:
        """True if group matches and, when given, value matches too"""
        return self.group == group and (value is None or self.value == value)


def match_to_token(match, source: Source | None = None) -> Token | None:
    """
    Convert a raw match into a Token.

    Args:
        match: an ``re.Match`` from a pattern with named groups, a ready
            Token, or None when there is nothing left
        source: shared source handle attached to the resulting token; a
            ready Token only gets it if it has no source of its own

    Returns:
        Token, or None for a missing match. The token index is where the
        named group starts, so text matched outside the group is not part
        of the token.

    Raises:
        ValueError: no named group took part in the match
        TypeError: match is of an unsupported type
    """
    if match is None:
        return None
    if isinstance(match, Token):
        if source is not None and match.source is None:
            return replace(match, source=source)
        return match
    if not isinstance(match, re.Match):
        raise TypeError(f"Cannot convert {type(match).__name__} to a token")

    group = match.lastgroup
    if group is None:
        # lastgroup is unset when the outermost group is unnamed
        group = next(
            (name for name, text in match.groupdict().items() if text is not None),
            None,
        )
    if group is None:
        raise ValueError(
            f"Match {match.group(0)!r} at {match.start()} has no named group"
        )

    return Token(group, match.group(group), match.start(group), source)


def regexp_tokenizer(
    pattern: "str | re.Pattern[str]", flags: int = 0
) -> Callable[[str], Iterator["re.Match[str]"]]:
    """
    Build a tokenizer from a regular expression with named groups.

    Each named group is a token group, e.g.
    ``r"(?P<ident>[a-z]+)|(?P<number>[0-9]+)"``. Text between matches is
    skipped, like ``String.prototype.matchAll`` does.

    Examples:
        >>> tokenize = regexp_tokenizer(r"(?P<ident>[a-z]+)")
        >>> [m.group() for m in tokenize("foo bar")]
        ['foo', 'bar']
    """
    compiled = re.compile(pattern, flags) if isinstance(pattern, str) else pattern
    if not compiled.groupindex:
        raise ValueError(f"Pattern {compiled.pattern!r} defines no named groups")

    def tokenize(input: str) -> Iterator["re.Match[str]"]:
        return compiled.finditer(input)

    return tokenize
