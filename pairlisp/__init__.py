# Core type aliases for the pairlisp data model.
# Code and data share one representation: the frozen dataclasses in
# pairlisp.types.values. The desugarer produces them from parsed source and
# the evaluator consumes and returns them.
#
# Naming guidance:
# - SExpression: use in reader/desugar code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to the same union and are interchangeable.

from typing import Callable, Union

from pairlisp.types.span import Span
from pairlisp.types.values import Number, Boolean, Nil, Symbol, Pair, NIL
from pairlisp.types.closure import Closure

LispValue = Union[Number, Boolean, Nil, Symbol, Pair, Closure]
SExpression = LispValue

# Evaluator function type: the evaluator as passed into special forms
EvaluatorFn = Callable[..., LispValue]

__all__ = [
    "Span",
    "Number",
    "Boolean",
    "Nil",
    "Symbol",
    "Pair",
    "Closure",
    "NIL",
    "LispValue",
    "SExpression",
    "EvaluatorFn",
]
