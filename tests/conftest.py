import pytest

from astlisp.builtin.env_builtin import make_global_env
from astlisp.interpreter import Interpreter


@pytest.fixture
def env():
    """Global environment with constants and builtins loaded."""
    return make_global_env()


@pytest.fixture
def interp():
    return Interpreter()
