from pairlisp import SExpression, LispValue, EvaluatorFn
from pairlisp.config import Scoping
from pairlisp.errors import InvalidArgumentsError
from pairlisp.types.environment import Environment
from pairlisp.types.span import Span


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    span: Span,
    _: Scoping,
) -> LispValue:
    if len(tail) != 1:
        raise InvalidArgumentsError("quote expects exactly 1 argument", span)
    return tail[0]
