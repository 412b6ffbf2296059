from pairlisp import EvaluatorFn
from pairlisp import SExpression, LispValue
from pairlisp.config import Scoping
from pairlisp.errors import InvalidArgumentsError
from pairlisp.types.closure import Closure
from pairlisp.types.environment import Environment
from pairlisp.types.span import Span
from pairlisp.types.values import Symbol, to_list


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    span: Span,
    scoping: Scoping,
) -> LispValue:
    # (lambda (params...) body): exactly one body expression.
    if len(tail) != 2:
        raise InvalidArgumentsError("lambda requires a parameter list and a body", span)

    params, body = tail
    formals = to_list(params)
    for p in formals:
        if not isinstance(p, Symbol):
            raise InvalidArgumentsError(f"lambda parameter {p} is not a symbol", p.span)

    scope = env.snapshot() if scoping is Scoping.LEXICAL else None
    return Closure(tuple(p.name for p in formals), body, scope, span)
