import io

import pytest

from lispoo.builtin.env_builtin import register
from lispoo.interpreter import Interpreter
from lispoo.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def out():
    """Output sink for the message builtin."""
    return io.StringIO()


@pytest.fixture
def interp(out):
    return Interpreter(out=out, strict_unbound=False)


def same(a, b):
    """Structural equality that also tells Integer 1 apart from Float 1.0."""
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(same(x, y) for x, y in zip(a, b))
    return a == b
