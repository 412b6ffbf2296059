"""Closure representation for pairlisp."""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import Optional

from pairlisp.types.span import Span, NO_SPAN


@dataclass(frozen=True)
class Closure:
    """A user-defined procedure: parameter names, one body expression, and
    the frame chain captured at creation time.

    `scope` is None under dynamic scoping, in which case the body runs on
    top of whatever chain the caller has installed.
    """

    params: tuple[str, ...]
    body: object
    scope: Optional[tuple[dict, ...]] = field(default=None, compare=False, repr=False)
    span: Span = field(default=NO_SPAN, compare=False, repr=False)

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(self.params))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()
