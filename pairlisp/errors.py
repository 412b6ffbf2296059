from __future__ import annotations

from pairlisp.types.span import Span, NO_SPAN


class PairLispError(Exception):
    """ Base class for all pairlisp errors"""

    def __init__(self, message: str, span: Span = NO_SPAN):
        super().__init__(message)
        self.message = message
        self.span = span

    def __str__(self) -> str:
        return f"{self.span}: {self.message}"


# -------------------------------
# Lexer
# -------------------------------
class LexError(PairLispError):
    """ Raised when the source cannot be split into tokens"""


class InvalidCharError(LexError):
    """ Raised when a character outside the accepted alphabet is read"""

    def __init__(self, char: str, span: Span):
        super().__init__(f"invalid char {char!r}", span)
        self.char = char


# -------------------------------
# Parser
# -------------------------------
class ParseError(PairLispError):
    """ Raised when the token stream is not a well-formed expression"""


class _TokenParseError(ParseError):
    template = "{token}"

    def __init__(self, token, span: Span | None = None):
        super().__init__(
            self.template.format(token=token.text),
            span if span is not None else token.span,
        )
        self.token = token


class UnexpectedTokenError(_TokenParseError):
    """ Raised when a token appears where it can not be used"""
    template = "'{token}' is not expected"


class NotExpressionError(_TokenParseError):
    """ Raised when a token can not start an expression"""
    template = "'{token}' is not a start of expression"


class NotOperatorError(_TokenParseError):
    """ Raised when a list has no head expression"""
    template = "'{token}' is not an operator"


class UnclosedOpenParenError(_TokenParseError):
    """ Raised when a dotted tail is not followed by ')'"""
    template = "'{token}' is not closed"


class RedundantExpressionError(_TokenParseError):
    """ Raised when tokens remain after a complete expression"""
    template = "expression after '{token}' is redundant"


class EofError(ParseError):
    """ Raised when input ends in the middle of an expression"""

    def __init__(self, span: Span):
        super().__init__("end of input", span)


# -------------------------------
# Evaluator
# -------------------------------
class EvalError(PairLispError):
    """ Raised when a well-formed expression can not be evaluated"""


class InvalidArgumentsError(EvalError):
    """ Raised when the number or kind of arguments is wrong"""

    def __init__(self, message: str = "invalid arguments", span: Span = NO_SPAN):
        super().__init__(message, span)


class DivisionByZeroError(EvalError):
    """ Raised by div and rem with a zero divisor"""

    def __init__(self, span: Span = NO_SPAN):
        super().__init__("division by zero", span)


class CarNotApplicableError(EvalError):
    """ Raised when the head of an application can not be applied"""

    def __init__(self, message: str = "car not applicable", span: Span = NO_SPAN):
        super().__init__(message, span)


class SymbolNotFoundError(EvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str, span: Span = NO_SPAN):
        super().__init__(f"symbol not found: {name}", span)
        self.name = name
