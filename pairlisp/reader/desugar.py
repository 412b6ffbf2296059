"""Conversion of the surface syntax tree into runtime values.

After desugaring, code is plain data: operators become symbols named after
their primitive, and quote marks become ordinary (quote X) applications that
the evaluator handles as a special form.
"""

from __future__ import annotations

from pairlisp import SExpression
from pairlisp.reader.surface import NilNode, Num, Op, PairNode, QuoteNode, Sym, SurfaceTree
from pairlisp.reader.tokens import TokenKind
from pairlisp.types.values import Nil, Number, Pair, Symbol, from_list

OPERATOR_NAMES: dict[TokenKind, str] = {
    TokenKind.PLUS: "add",
    TokenKind.MINUS: "sub",
    TokenKind.ASTERISK: "mul",
    TokenKind.SLASH: "div",
    TokenKind.LESS: "lt",
    TokenKind.EQUAL: "eq",
    TokenKind.GREATER: "gt",
    TokenKind.AND: "and",
    TokenKind.OR: "or",
    TokenKind.NOT: "not",
    TokenKind.XOR: "xor",
}


def desugar(tree: SurfaceTree) -> SExpression:
    match tree:
        case Num(value, span):
            return Number(value, span)
        case Op(kind, span):
            return Symbol(OPERATOR_NAMES[kind], span)
        case Sym(name, span):
            return Symbol(name, span)
        case NilNode(span):
            return Nil(span)
        case PairNode(car, cdr, span):
            return Pair(desugar(car), desugar(cdr), span)
        case QuoteNode(quoted, span):
            return from_list([Symbol("quote", span), desugar(quoted)], Nil(span), span)
    raise TypeError(f"not a surface tree node: {tree!r}")
