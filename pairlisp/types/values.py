"""Runtime values for pairlisp.

Parsed programs and evaluated results share these types: a desugared
program is an ordinary tree of Pairs and atoms, just like any quoted list.
Every value carries a Span for diagnostics; spans never take part in
equality or hashing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import Iterable

from pairlisp.errors import InvalidArgumentsError
from pairlisp.types.span import Span, NO_SPAN

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


def wrap_i32(n: int) -> int:
    """Reduce an arbitrary Python int to two's-complement 32-bit range."""
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n > I32_MAX else n


@dataclass(frozen=True)
class Number:
    value: int
    span: Span = field(default=NO_SPAN, compare=False, repr=False)

    def __post_init__(self):
        if not I32_MIN <= self.value <= I32_MAX:
            object.__setattr__(self, "value", wrap_i32(self.value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Boolean:
    value: bool
    span: Span = field(default=NO_SPAN, compare=False, repr=False)

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Nil:
    span: Span = field(default=NO_SPAN, compare=False, repr=False)

    def __str__(self) -> str:
        return "()"


NIL = Nil()


@dataclass(frozen=True)
class Symbol:
    name: str
    span: Span = field(default=NO_SPAN, compare=False, repr=False)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Pair:
    car: object
    cdr: object
    span: Span = field(default=NO_SPAN, compare=False, repr=False)

    def __str__(self) -> str:
        # 'X for the canonical (quote X) form
        if (
            isinstance(self.car, Symbol)
            and self.car.name == "quote"
            and isinstance(self.cdr, Pair)
            and isinstance(self.cdr.cdr, Nil)
        ):
            return f"'{self.cdr.car}"
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(str(self.car))
            rest = self.cdr
            while isinstance(rest, Pair):
                buffer.write(" ")
                buffer.write(str(rest.car))
                rest = rest.cdr
            if not isinstance(rest, Nil):
                buffer.write(" . ")
                buffer.write(str(rest))
            buffer.write(")")
            return buffer.getvalue()


def from_list(items: Iterable, tail=NIL, span: Span = NO_SPAN) -> Pair | Nil:
    """Build a cons chain from `items`, terminated by `tail`."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result, span)
    return result


def to_list(value, span: Span | None = None) -> list:
    """Flatten a cons chain into a Python list.

    Nil terminates the chain. Any other non-Pair tail means the chain is
    improper and raises InvalidArgumentsError.
    """
    items = []
    while isinstance(value, Pair):
        items.append(value.car)
        value = value.cdr
    if not isinstance(value, Nil):
        raise InvalidArgumentsError(
            f"improper list ending in {value}",
            span if span is not None else value.span,
        )
    return items


def is_atom(value) -> bool:
    return isinstance(value, (Number, Boolean, Nil, Symbol))
