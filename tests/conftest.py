import pytest

from l1.types.environment import make_empty_env, make_env


@pytest.fixture
def empty_env():
    """Fresh empty environment."""
    return make_empty_env()


@pytest.fixture
def env():
    """Environment with a few bindings, x shadowed."""
    e = make_empty_env()
    e = make_env("x", 1, e)
    e = make_env("y", 10, e)
    e = make_env("x", 2, e)
    e = make_env("t", True, e)
    return e
