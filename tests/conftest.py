import pytest

from rlisp.builtin.env_builtin import default_env
from rlisp.evaluation.evaluator import evaluate
from rlisp.interpreter import Interpreter
from rlisp.reader.parser import parse


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    return default_env()


@pytest.fixture
def interp():
    """Fresh interpreter; definitions persist across eval calls within a test."""
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate each source line in turn against one env and return the last result."""
    def _run(*sources):
        result = None
        for source in sources:
            result = evaluate(parse(source), env)
        return result
    return _run
