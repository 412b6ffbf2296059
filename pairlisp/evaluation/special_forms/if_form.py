from pairlisp import EvaluatorFn
from pairlisp import SExpression, LispValue
from pairlisp.config import Scoping
from pairlisp.errors import InvalidArgumentsError
from pairlisp.types.environment import Environment
from pairlisp.types.span import Span
from pairlisp.types.values import Boolean


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    span: Span,
    scoping: Scoping,
) -> LispValue:
    """
    (if condition then-expr else-expr)
    Only the selected branch is evaluated.
    """
    if len(tail) != 3:
        raise InvalidArgumentsError("if requires a condition, a then-expression and an else-expression", span)

    cond = evaluate_fn(tail[0], env, scoping)
    if not isinstance(cond, Boolean):
        raise InvalidArgumentsError(f"if condition must be a boolean, got {cond}", tail[0].span)

    if cond.value:
        return evaluate_fn(tail[1], env, scoping)
    return evaluate_fn(tail[2], env, scoping)
