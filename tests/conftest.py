import pytest

from chao.interpreter import Interpreter
from chao.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with the built-in catalog loaded."""
    return Environment(max_depth=128)


@pytest.fixture
def interp():
    """Fresh interpreter; definitions persist across `eval` calls within a test."""
    return Interpreter(max_depth=128)
