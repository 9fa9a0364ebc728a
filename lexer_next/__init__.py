"""Lexer for recursive descent parsers"""

from .errors import LexerError, UnexpectedToken
from .lexer import ErrorHandler, FilterFunction, Lexer, Tokenizer, create_lexer
from .tokens import EOF, Source, Token, match_to_token, regexp_tokenizer

__all__ = [
    "EOF",
    "ErrorHandler",
    "FilterFunction",
    "Lexer",
    "LexerError",
    "Source",
    "Token",
    "Tokenizer",
    "UnexpectedToken",
    "create_lexer",
    "match_to_token",
    "regexp_tokenizer",
]
