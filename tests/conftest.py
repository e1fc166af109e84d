import pytest

from sigma.types.environment import Environment
from sigma.types.symbol import Symbol


# Small host table used across the evaluator tests. Arithmetic is variadic
# except "-", which mirrors the calculator builtins.
ARITHMETIC = {
    "+": lambda *args: sum(args),
    "-": lambda a, b=None: -a if b is None else a - b,
    "*": lambda *args: _product(args),
    "/": lambda a, b: a / b,
}


def _product(args):
    result = 1
    for a in args:
        result *= a
    return result


@pytest.fixture
def builtins():
    """Fresh copy of the arithmetic host table."""
    return dict(ARITHMETIC)


@pytest.fixture
def env(builtins):
    """Root environment seeded with arithmetic plus a couple of constants."""
    e = Environment.from_builtins(builtins)
    e.define(Symbol("x"), 42)
    e.define(Symbol("y"), 100)
    return e
