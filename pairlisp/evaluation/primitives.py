"""Primitive operations.

Each primitive receives its already-evaluated arguments and the span of the
application. Arity is checked by Primitive.__call__ before dispatch, so the
functions here only check argument kinds.

Integer results wrap with two's-complement 32-bit semantics; see wrap_i32.
"""

from __future__ import annotations

from typing import Callable, NamedTuple

from pairlisp import LispValue
from pairlisp.errors import DivisionByZeroError, InvalidArgumentsError
from pairlisp.types.span import Span
from pairlisp.types.values import (
    Boolean,
    Nil,
    Number,
    Pair,
    Symbol,
    is_atom,
    wrap_i32,
)


def _numbers(name: str, args: list[LispValue]) -> list[int]:
    for arg in args:
        if not isinstance(arg, Number):
            raise InvalidArgumentsError(f"{name} expects numbers, got {arg}", arg.span)
    return [arg.value for arg in args]


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue], span: Span) -> LispValue:
    a, b = _numbers("add", args)
    return Number(wrap_i32(a + b), span)


def sub(args: list[LispValue], span: Span) -> LispValue:
    a, b = _numbers("sub", args)
    return Number(wrap_i32(a - b), span)


def mul(args: list[LispValue], span: Span) -> LispValue:
    a, b = _numbers("mul", args)
    return Number(wrap_i32(a * b), span)


def div(args: list[LispValue], span: Span) -> LispValue:
    a, b = _numbers("div", args)
    if b == 0:
        raise DivisionByZeroError(args[1].span)
    return Number(wrap_i32(_trunc_div(a, b)), span)


def rem(args: list[LispValue], span: Span) -> LispValue:
    a, b = _numbers("rem", args)
    if b == 0:
        raise DivisionByZeroError(args[1].span)
    return Number(wrap_i32(a - b * _trunc_div(a, b)), span)


# -------------------------------
# Bitwise / boolean
# -------------------------------
def _logical(name: str, num_op: Callable[[int, int], int], bool_op: Callable[[bool, bool], bool]):
    def primitive(args: list[LispValue], span: Span) -> LispValue:
        a, b = args
        if isinstance(a, Number) and isinstance(b, Number):
            return Number(wrap_i32(num_op(a.value, b.value)), span)
        if isinstance(a, Boolean) and isinstance(b, Boolean):
            return Boolean(bool_op(a.value, b.value), span)
        raise InvalidArgumentsError(
            f"{name} expects two numbers or two booleans, got {a} and {b}", span
        )

    primitive.__name__ = name
    return primitive


and_ = _logical("and", lambda a, b: a & b, lambda a, b: a and b)
or_ = _logical("or", lambda a, b: a | b, lambda a, b: a or b)
xor = _logical("xor", lambda a, b: a ^ b, lambda a, b: a != b)


def not_(args: list[LispValue], span: Span) -> LispValue:
    (a,) = args
    if isinstance(a, Number):
        return Number(wrap_i32(~a.value), span)
    if isinstance(a, Boolean):
        return Boolean(not a.value, span)
    raise InvalidArgumentsError(f"not expects a number or a boolean, got {a}", a.span)


def shl(args: list[LispValue], span: Span) -> LispValue:
    a, b = _numbers("shl", args)
    return Number(wrap_i32(a << (b & 31)), span)


def shr(args: list[LispValue], span: Span) -> LispValue:
    # Arithmetic shift; Python's >> keeps the sign
    a, b = _numbers("shr", args)
    return Number(a >> (b & 31), span)


# -------------------------------
# Comparison and equality
# -------------------------------
def _comparison(name: str, op: Callable[[int, int], bool]):
    def primitive(args: list[LispValue], span: Span) -> LispValue:
        a, b = _numbers(name, args)
        return Boolean(op(a, b), span)

    primitive.__name__ = name
    return primitive


gt = _comparison("gt", lambda a, b: a > b)
ge = _comparison("ge", lambda a, b: a >= b)
lt = _comparison("lt", lambda a, b: a < b)
le = _comparison("le", lambda a, b: a <= b)


def is_equal(a: LispValue, b: LispValue, span: Span) -> bool:
    if isinstance(a, Nil) or isinstance(b, Nil):
        return isinstance(a, Nil) and isinstance(b, Nil)
    for kind in (Number, Boolean, Symbol):
        if isinstance(a, kind) and isinstance(b, kind):
            return a == b
    raise InvalidArgumentsError(f"can not compare {a} with {b}", span)


def eq(args: list[LispValue], span: Span) -> LispValue:
    a, b = args
    return Boolean(is_equal(a, b, span), span)


def ne(args: list[LispValue], span: Span) -> LispValue:
    a, b = args
    return Boolean(not is_equal(a, b, span), span)


# -------------------------------
# Lists
# -------------------------------
def atom(args: list[LispValue], span: Span) -> LispValue:
    (a,) = args
    return Boolean(is_atom(a), span)


def car(args: list[LispValue], span: Span) -> LispValue:
    (a,) = args
    if not isinstance(a, Pair):
        raise InvalidArgumentsError(f"car expects a pair, got {a}", a.span)
    return a.car


def cdr(args: list[LispValue], span: Span) -> LispValue:
    (a,) = args
    if not isinstance(a, Pair):
        raise InvalidArgumentsError(f"cdr expects a pair, got {a}", a.span)
    return a.cdr


def cons(args: list[LispValue], span: Span) -> LispValue:
    a, b = args
    return Pair(a, b, span)


class Primitive(NamedTuple):
    name: str
    arity: int
    fn: Callable[[list[LispValue], Span], LispValue]

    def __call__(self, args: list[LispValue], span: Span) -> LispValue:
        if len(args) != self.arity:
            raise InvalidArgumentsError(
                f"{self.name} expects {self.arity} argument(s), got {len(args)}", span
            )
        return self.fn(args, span)


PRIMITIVES: dict[str, Primitive] = {
    p.name: p
    for p in (
        Primitive("add", 2, add),
        Primitive("sub", 2, sub),
        Primitive("mul", 2, mul),
        Primitive("div", 2, div),
        Primitive("rem", 2, rem),
        Primitive("and", 2, and_),
        Primitive("or", 2, or_),
        Primitive("xor", 2, xor),
        Primitive("not", 1, not_),
        Primitive("shl", 2, shl),
        Primitive("shr", 2, shr),
        Primitive("gt", 2, gt),
        Primitive("ge", 2, ge),
        Primitive("lt", 2, lt),
        Primitive("le", 2, le),
        Primitive("eq", 2, eq),
        Primitive("ne", 2, ne),
        Primitive("atom", 1, atom),
        Primitive("car", 1, car),
        Primitive("cdr", 1, cdr),
        Primitive("cons", 2, cons),
    )
}
