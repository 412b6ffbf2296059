"""Surface syntax tree produced by the parser.

These nodes mirror the concrete syntax exactly: operator tokens are kept
as Op nodes and quote marks as QuoteNode. The desugarer turns them into
runtime values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from pairlisp.reader.tokens import TokenKind
from pairlisp.types.span import Span, NO_SPAN


@dataclass(frozen=True)
class Num:
    value: int
    span: Span = field(default=NO_SPAN, compare=False)


@dataclass(frozen=True)
class Op:
    kind: TokenKind
    span: Span = field(default=NO_SPAN, compare=False)


@dataclass(frozen=True)
class Sym:
    name: str
    span: Span = field(default=NO_SPAN, compare=False)


@dataclass(frozen=True)
class NilNode:
    span: Span = field(default=NO_SPAN, compare=False)


@dataclass(frozen=True)
class PairNode:
    car: "SurfaceTree"
    cdr: "SurfaceTree"
    span: Span = field(default=NO_SPAN, compare=False)


@dataclass(frozen=True)
class QuoteNode:
    quoted: "SurfaceTree"
    span: Span = field(default=NO_SPAN, compare=False)


SurfaceTree = Union[Num, Op, Sym, NilNode, PairNode, QuoteNode]
