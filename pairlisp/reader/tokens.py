from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pairlisp.types.span import Span


class TokenKind(Enum):
    NUMBER = "number"
    SYMBOL = "symbol"
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"
    LESS = "<"
    EQUAL = "="
    GREATER = ">"
    AND = "&"
    OR = "|"
    NOT = "!"
    XOR = "^"
    QUOTE = "'"
    DOT = "."
    LPAREN = "("
    RPAREN = ")"


OPERATOR_KINDS = frozenset({
    TokenKind.PLUS,
    TokenKind.MINUS,
    TokenKind.ASTERISK,
    TokenKind.SLASH,
    TokenKind.LESS,
    TokenKind.EQUAL,
    TokenKind.GREATER,
    TokenKind.AND,
    TokenKind.OR,
    TokenKind.NOT,
    TokenKind.XOR,
})


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    span: Span
    value: Optional[int] = None  # NUMBER tokens only

    def __str__(self) -> str:
        return self.text
