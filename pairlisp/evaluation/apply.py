"""Application of user-defined closures.

Binding happens in a freshly enclosed frame. Under lexical scoping the frame
sits on the chain the closure captured; under dynamic scoping it sits on the
caller's chain. The frame is released on every exit path, so a failing body
never leaves the environment deeper than it found it.
"""

import logging

from pairlisp import LispValue, EvaluatorFn
from pairlisp.config import Scoping
from pairlisp.errors import InvalidArgumentsError
from pairlisp.types.closure import Closure
from pairlisp.types.environment import Environment
from pairlisp.types.span import Span

logger = logging.getLogger(__name__)


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    scoping: Scoping,
    span: Span,
) -> LispValue:
    """Apply a Closure to already-evaluated arguments."""
    if len(args) != fn.arity:
        raise InvalidArgumentsError(
            f"{fn} expects {fn.arity} argument(s), got {len(args)}", span
        )

    captured = fn.scope if scoping is Scoping.LEXICAL else None
    env.enclose(captured)
    try:
        for name, value in zip(fn.params, args):
            env.define(name, value)
        logger.debug("apply %s at depth %d", fn, env.depth)
        return evaluate_fn(fn.body, env, scoping)
    finally:
        env.disclose()
