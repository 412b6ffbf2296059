import logging
import sys
from typing import Optional, TextIO

from pairlisp import LispValue
from pairlisp import config
from pairlisp.config import Scoping
from pairlisp.debug_utils.pprint import colorize, format_diagnostic
from pairlisp.errors import PairLispError
from pairlisp.evaluation.evaluator import evaluate
from pairlisp.reader.desugar import desugar
from pairlisp.reader.parser import parse
from pairlisp.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A pairlisp session.
    Owns the top-level environment, which persists across eval() calls and
    accumulates define'd globals.
    """
    def __init__(self, scoping: Optional[Scoping] = None):
        self.scoping = scoping if scoping is not None else config.get_scoping()
        self.env = Environment()
        logger.debug("session started with %s scoping", self.scoping.value)

    def eval(self, code: str) -> LispValue:
        """Parse, desugar and evaluate one expression."""
        expr = desugar(parse(code))
        try:
            return evaluate(expr, self.env, self.scoping)
        except RecursionError:
            # disclose() can itself fail at the recursion limit
            self.env.reset()
            raise


def repl(
    interp: Optional[Interpreter] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    prompt: Optional[str] = None,
    color: Optional[bool] = None,
) -> Interpreter:
    """Read one line at a time, evaluate it, print the result.

    Stops on the line "exit" or at end of input. Errors are reported with a
    caret diagnostic and the session continues.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    interp = interp if interp is not None else Interpreter()
    prompt = prompt if prompt is not None else config.get_prompt()
    color = color if color is not None else config.use_color()

    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.rstrip("\r\n")
        if line == "exit":
            break
        if not line.strip():
            continue
        try:
            result = interp.eval(line)
        except PairLispError as e:
            logger.debug("failed: %r: %s", line, e)
            stderr.write(format_diagnostic(line, e, color) + "\n")
            continue
        except RecursionError:
            logger.debug("recursion limit hit: %r", line)
            stderr.write("recursion depth exceeded\n")
            continue
        stdout.write((colorize(result) if color else str(result)) + "\n")
    return interp


def main() -> int:
    logging.basicConfig(level=config.get_log_level())
    repl()
    return 0
