import pytest

from pairlisp.config import Scoping
from pairlisp.evaluation.evaluator import evaluate
from pairlisp.interpreter import Interpreter
from pairlisp.reader.desugar import desugar
from pairlisp.reader.parser import parse
from pairlisp.types.environment import Environment

# Most evaluation tests run under both scoping disciplines. Tests whose
# outcome depends on the discipline build their own Interpreter.


@pytest.fixture(params=[Scoping.LEXICAL, Scoping.DYNAMIC], ids=["lexical", "dynamic"])
def scoping(request):
    return request.param


@pytest.fixture
def interp(scoping):
    """Fresh session for each test."""
    return Interpreter(scoping)


@pytest.fixture
def env():
    return Environment()


def run(source: str, env: Environment, scoping: Scoping = Scoping.LEXICAL):
    """Parse, desugar and evaluate a single line against `env`."""
    return evaluate(desugar(parse(source)), env, scoping)
