"""Core evaluator for pairlisp.

Strict, single-threaded tree walking. Applications dispatch in a fixed
order: special forms (arguments unevaluated), then primitives (arguments
evaluated left to right), then user-defined closures looked up in the
environment. There is no tail-call elimination; every nested call consumes a
Python stack frame.
"""

from __future__ import annotations

from pairlisp import SExpression, LispValue
from pairlisp.config import Scoping
from pairlisp.errors import CarNotApplicableError
from pairlisp.evaluation.apply import apply_closure
from pairlisp.evaluation.primitives import PRIMITIVES
from pairlisp.evaluation.special_forms import SPECIAL_FORMS
from pairlisp.types.closure import Closure
from pairlisp.types.environment import Environment
from pairlisp.types.span import Span
from pairlisp.types.values import Boolean, Nil, Pair, Symbol, to_list

# Literal keywords; these shadow any environment binding of the same name.
KEYWORDS = {
    "true": lambda span: Boolean(True, span),
    "false": lambda span: Boolean(False, span),
    "nil": lambda span: Nil(span),
}


def evaluate(
    expr: SExpression, env: Environment, scoping: Scoping = Scoping.LEXICAL
) -> LispValue:
    """Evaluate `expr` in `env`, returning its value or raising an EvalError."""
    match expr:
        case Symbol(name, span):
            keyword = KEYWORDS.get(name)
            if keyword is not None:
                return keyword(span)
            return env.lookup(name, span)
        case Pair(head, rest, span):
            tail_args = to_list(rest, span)
            if isinstance(head, Symbol):
                return apply_named(head, tail_args, env, scoping, span)
            if isinstance(head, Pair):
                fn = evaluate(head, env, scoping)
                if isinstance(fn, Closure):
                    args = [evaluate(arg, env, scoping) for arg in tail_args]
                    return apply_closure(fn, args, env, evaluate, scoping, span)
                if isinstance(fn, Symbol):
                    return apply_named(fn, tail_args, env, scoping, span)
            raise CarNotApplicableError(f"{head} is not applicable", head.span)

    # --- Numbers, booleans, nil and closures evaluate to themselves ---
    return expr


def apply_named(
    head: Symbol,
    tail_args: list[SExpression],
    env: Environment,
    scoping: Scoping,
    span: Span,
) -> LispValue:
    """Dispatch an application whose head is the symbol `head`."""
    name = head.name

    # --- Special forms handling ---
    special = SPECIAL_FORMS.get(name)
    if special is not None:
        return special(tail_args, env, evaluate, span, scoping)

    # --- Primitives ---
    primitive = PRIMITIVES.get(name)
    if primitive is not None:
        args = [evaluate(arg, env, scoping) for arg in tail_args]
        return primitive(args, span)

    # --- User-defined closures ---
    frame = env.find(name)
    if frame is None:
        raise CarNotApplicableError(f"{name} is not defined", head.span)
    fn = frame[name]
    if not isinstance(fn, Closure):
        raise CarNotApplicableError(f"{name} is not a procedure: {fn}", head.span)
    args = [evaluate(arg, env, scoping) for arg in tail_args]
    return apply_closure(fn, args, env, evaluate, scoping, span)
