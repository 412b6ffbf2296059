from __future__ import annotations

from pairlisp.errors import PairLispError
from pairlisp.types.closure import Closure
from pairlisp.types.span import Span
from pairlisp.types.values import Boolean, Nil, Number, Pair, Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_LAMBDA = "\033[92m"
COLOR_NUMBER = "\033[96m"
COLOR_BOOLEAN = "\033[95m"
COLOR_NIL = "\033[90m"
COLOR_SPECIAL_FORM = "\033[90m"
COLOR_ERROR = "\033[91m"

SPECIAL_FORMS = {"define", "lambda", "if", "quote"}


# ----------------- Colorize utility -----------------
def colorize(obj) -> str:
    """Render a value in its textual form with ANSI colours."""
    if isinstance(obj, Symbol):
        color = COLOR_SPECIAL_FORM if obj.name in SPECIAL_FORMS else COLOR_SYMBOL
        return f"{color}{obj}{RESET}"
    if isinstance(obj, Number):
        return f"{COLOR_NUMBER}{obj}{RESET}"
    if isinstance(obj, Boolean):
        return f"{COLOR_BOOLEAN}{obj}{RESET}"
    if isinstance(obj, Nil):
        return f"{COLOR_NIL}{obj}{RESET}"
    if isinstance(obj, Closure):
        return f"{COLOR_LAMBDA}{obj}{RESET}"
    if isinstance(obj, Pair):
        parts = [colorize(obj.car)]
        rest = obj.cdr
        while isinstance(rest, Pair):
            parts.append(colorize(rest.car))
            rest = rest.cdr
        if not isinstance(rest, Nil):
            parts.extend([".", colorize(rest)])
        return "(" + " ".join(parts) + ")"
    return str(obj)


# ----------------- Diagnostics -----------------
def caret_line(source: str, span: Span) -> str:
    """Spaces up to the span's start, then one caret per spanned character."""
    start = min(span.start, len(source))
    width = max(span.end - span.start, 1)
    return " " * start + "^" * width


def format_diagnostic(source: str, error: PairLispError, color: bool = False) -> str:
    """The error message, the offending source line, and a caret annotation."""
    message = str(error)
    carets = caret_line(source, error.span)
    if color:
        message = f"{COLOR_ERROR}{message}{RESET}"
        carets = f"{COLOR_ERROR}{carets}{RESET}"
    return "\n".join([message, source, carets])
