import pytest

from lispy.types.environment import Environment
from lispy.builtin.env_builtin import register
from lispy.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Fresh interpreter; definitions persist across eval calls within a test."""
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate source text and return the rendering of the last result."""
    def _run(source: str) -> str:
        return interp.run(source)[-1]
    return _run
