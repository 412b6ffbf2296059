"""
  Recursive-descent parser for pairlisp.

Grammar:

    list : "(" pair
         | "'" list
         | ATOM
         ;
    pair : ")"
         | list cdr
         ;
    cdr  : ")"
         | "." list ")"
         | list cdr
         ;

A whole input must be exactly one `list`; anything after it is a
RedundantExpressionError.
"""

from __future__ import annotations

from typing import Optional

from pairlisp.errors import (
    EofError,
    NotExpressionError,
    NotOperatorError,
    RedundantExpressionError,
    UnclosedOpenParenError,
    UnexpectedTokenError,
)
from pairlisp.reader.lexer import lex
from pairlisp.reader.surface import (
    NilNode,
    Num,
    Op,
    PairNode,
    QuoteNode,
    Sym,
    SurfaceTree,
)
from pairlisp.reader.tokens import OPERATOR_KINDS, Token, TokenKind
from pairlisp.types.span import Span


class TokenStream:
    def __init__(self, tokens: list[Token], source_len: int):
        self.tokens = tokens
        self.pos = 0
        self.source_len = source_len

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def expect(self) -> Token:
        tok = self.peek()
        if tok is None:
            raise EofError(Span(self.source_len, self.source_len + 1))
        return tok

    def advance(self) -> Token:
        tok = self.expect()
        self.pos += 1
        return tok

    def parse_atom(self) -> SurfaceTree:
        tok = self.advance()
        if tok.kind is TokenKind.NUMBER:
            return Num(tok.value, tok.span)
        if tok.kind is TokenKind.SYMBOL:
            return Sym(tok.text, tok.span)
        if tok.kind in OPERATOR_KINDS:
            return Op(tok.kind, tok.span)
        if tok.kind is TokenKind.RPAREN:
            raise UnexpectedTokenError(tok)
        raise NotExpressionError(tok)

    def parse_list(self) -> SurfaceTree:
        tok = self.expect()
        if tok.kind is TokenKind.LPAREN:
            self.advance()
            return self.parse_pair(tok.span)
        if tok.kind is TokenKind.QUOTE:
            self.advance()
            quoted = self.parse_list()
            return QuoteNode(quoted, tok.span.merge(quoted.span))
        return self.parse_atom()

    def parse_pair(self, open_span: Span) -> SurfaceTree:
        tok = self.expect()
        if tok.kind is TokenKind.RPAREN:
            self.advance()
            return NilNode(open_span.merge(tok.span))
        if tok.kind is TokenKind.DOT:
            raise NotOperatorError(tok)
        car = self.parse_list()
        cdr = self.parse_cdr()
        return PairNode(car, cdr, open_span.merge(cdr.span))

    def parse_cdr(self) -> SurfaceTree:
        tok = self.expect()
        if tok.kind is TokenKind.RPAREN:
            self.advance()
            return NilNode(tok.span)
        if tok.kind is TokenKind.DOT:
            self.advance()
            tail = self.parse_list()
            close = self.expect()
            if close.kind is not TokenKind.RPAREN:
                raise UnclosedOpenParenError(close)
            self.advance()
            return tail
        car = self.parse_list()
        cdr = self.parse_cdr()
        return PairNode(car, cdr, car.span.merge(cdr.span))

    def parse_expr(self) -> SurfaceTree:
        tree = self.parse_list()
        tok = self.peek()
        if tok is not None:
            raise RedundantExpressionError(tok, Span(tok.span.start, self.source_len))
        return tree


def parse(source: str) -> SurfaceTree:
    """Lex and parse exactly one expression from `source`."""
    return TokenStream(lex(source), len(source)).parse_expr()
