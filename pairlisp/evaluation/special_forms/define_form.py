from pairlisp import EvaluatorFn
from pairlisp import SExpression, LispValue
from pairlisp.config import Scoping
from pairlisp.errors import InvalidArgumentsError
from pairlisp.types.environment import Environment
from pairlisp.types.span import Span
from pairlisp.types.values import Nil, Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    span: Span,
    scoping: Scoping,
) -> LispValue:
    """
    (define name value)
    Binds in the innermost frame; re-defining silently replaces.
    """
    if len(tail) != 2:
        raise InvalidArgumentsError("define requires exactly 2 arguments", span)

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise InvalidArgumentsError(f"cannot define {name}: not a symbol", name.span)
    value = evaluate_fn(val_expr, env, scoping)  # normal evaluation
    env.define(name.name, value)
    return Nil(span)
