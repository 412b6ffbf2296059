"""
  Lexer for pairlisp source.

- Operates on a single line (or any string) at once, eager
- Tokens carry character-offset spans for diagnostics
- Accepted alphabet:
    - digit runs -> NUMBER (unsigned, reduced into the i32 range)
    - identifiers [A-Za-z_][A-Za-z0-9_]* -> SYMBOL
    - single-character operators + - * / < = > & | ! ^
    - ' . ( )
    - whitespace: space, tab, newline, carriage return
  Anything else is an InvalidCharError.
"""

from __future__ import annotations

import re

from pairlisp.errors import InvalidCharError
from pairlisp.reader.tokens import Token, TokenKind
from pairlisp.types.span import Span
from pairlisp.types.values import wrap_i32

# 10**32 is a multiple of 2**32, so only the last 32 digits of a literal
# affect its i32 value.
LITERAL_DIGITS = 32

TOKEN_RE = re.compile(
    r"(?P<space>[ \t\n\r]+)"
    r"|(?P<number>[0-9]+)"
    r"|(?P<symbol>[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?P<punct>[-+*/<=>&|!^'.()])"
)


def literal_value(text: str) -> int:
    """Value of an unsigned digit run, reduced into the i32 range."""
    return wrap_i32(int(text[-LITERAL_DIGITS:]))


def lex(source: str) -> list[Token]:
    """Split `source` into located tokens."""
    tokens: list[Token] = []
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise InvalidCharError(source[pos], Span(pos, pos + 1))
        span = Span(m.start(), m.end())
        text = m.group()
        if m.lastgroup == "number":
            tokens.append(Token(TokenKind.NUMBER, text, span, literal_value(text)))
        elif m.lastgroup == "symbol":
            tokens.append(Token(TokenKind.SYMBOL, text, span))
        elif m.lastgroup == "punct":
            tokens.append(Token(TokenKind(text), text, span))
        pos = m.end()
    return tokens
