import logging
from typing import Any, Callable, Iterable

from .errors import LexerError, UnexpectedToken
from .tokens import Source, Token, match_to_token

logger = logging.getLogger(__name__)

Tokenizer = Callable[[str], Iterable[Any]]
FilterFunction = Callable[[Token], bool]
ErrorHandler = Callable[[LexerError], None]


def _accept_all(token: Token) -> bool:
    return True


def _raise(error: LexerError) -> None:
    raise error


class Lexer:
    """Token reader with one-token lookahead for recursive descent parsers"""

    def __init__(
        self,
        tokenize: Tokenizer,
        input: str,
        filter: FilterFunction | None = None,
        onerror: ErrorHandler | None = None,
    ):
        self.source = Source(input)
        self._matches = iter(tokenize(input))
        self._filter = filter or _accept_all
        self._error_handler = onerror or _raise
        self._eof = Token.eof(self.source)
        self._exhausted = False
        self._previous: Token | None = None
        self._current: Token | None = None

        logger.debug("Created lexer over %d chars", len(input))
        # the implicit first advance positions the lexer on the first token
        self.advance()

    @property
    def input(self) -> str:
        return self.source.input

    @property
    def current(self) -> Token:
        """Token under the current position (the lookahead)"""
        return self._current

    @property
    def previous(self) -> Token | None:
        """Token most recently returned by advance()"""
        return self._previous

    @property
    def at_end(self) -> bool:
        return self._current.is_eof

    def _next(self) -> Token:
        """Pull raw matches until one passes the filter or input runs out"""
        while not self._exhausted:
            token = match_to_token(next(self._matches, None), self.source)
            if token is None:
                self._exhausted = True
                logger.debug("Reached end of input at %d", self._eof.index)
                break
            if self._filter(token):
                return token
        return self._eof

    def advance(self) -> Token:
        """Return token under current position and move to the next one"""
        self._previous, self._current = self._current, self._next()
        return self._previous

    def peek(self, group: str | None = None, value: str | None = None) -> Token | None:
        """Look at current token without consuming; with group, only if it matches"""
        if group is None:
            if value is not None:
                raise TypeError("peek() got a value without a group")
            return self._current
        return self._current if self._current.matches(group, value) else None

    def accept(self, group: str, value: str | None = None) -> Token | None:
        """Consume and return current token if it matches group (and value)"""
        if self._current.matches(group, value):
            return self.advance()
        return None

    def expect(self, group: str, value: str | None = None) -> Token | None:
        """
        Same as accept() but reports a mismatch to the error handler.

        The default handler raises UnexpectedToken. When a handler that
        returns normally is installed, a mismatch returns None, just like
        accept().
        """
        token = self.accept(group, value)
        if token is None:
            error = UnexpectedToken(self._current, group, value)
            logger.debug(
                "Expected %s, got %s %r at %d",
                group,
                self._current.group,
                self._current.value,
                self._current.index,
            )
            self._error_handler(error)
        return token

    def onerror(self, handler: ErrorHandler | None) -> None:
        """Set the function called with the error when expect() fails"""
        self._error_handler = handler or _raise
        logger.debug("Error handler set to %r", self._error_handler)

    def filter(self, predicate: FilterFunction | None) -> None:
        """Set the token filter; skips ahead if current token no longer passes"""
        self._filter = predicate or _accept_all
        logger.debug("Filter set to %r", self._filter)
        if not self._current.is_eof and not self._filter(self._current):
            self._current = self._next()

    def __repr__(self) -> str:
        return f"Lexer(current={self._current!r})"


def create_lexer(
    tokenize: Tokenizer,
    *,
    filter: FilterFunction | None = None,
    onerror: ErrorHandler | None = None,
) -> Callable[[str], Lexer]:
    """
    Create a lexer factory around a tokenizer.

    Args:
        tokenize: callable taking the input string and returning an iterable
            of raw matches, e.g. ``re.compile(...).finditer`` or the result
            of ``regexp_tokenizer``
        filter: default token filter for every lexer the factory creates
        onerror: default error handler for every lexer the factory creates

    Returns:
        Callable taking an input string and returning a fresh Lexer

    Examples:
        >>> from lexer_next import regexp_tokenizer
        >>> lexer = create_lexer(regexp_tokenizer(r"(?P<ident>[a-z]+)|(?P<number>[0-9]+)"))
        >>> l = lexer("hello 1337 world")
        >>> l.advance()
        Token(group='ident', value='hello', index=0)
        >>> l.accept("ident") is None
        True
        >>> l.accept("number")
        Token(group='number', value='1337', index=6)
    """

    def lexer(input: str) -> Lexer:
        return Lexer(tokenize, input, filter=filter, onerror=onerror)

    return lexer
