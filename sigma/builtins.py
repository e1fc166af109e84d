"""Default host functions for embedding Sigma as a calculator.

The interpreter itself never imports this module; it is one possible builtin
table a host can pass to `sigma.evaluate`. Functions take their operands
positionally and raise Sigma errors on bad input.
"""
from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping

import numpy as np

from sigma import HostFunction
from sigma.errors import SigmaArityError, SigmaTypeError


def _is_integer(n) -> bool:
    return isinstance(n, (int, float)) and float(n).is_integer()


def _require_numbers(name: str, args) -> None:
    for a in args:
        if isinstance(a, bool) or not isinstance(a, (int, float)):
            raise SigmaTypeError(f"all arguments to {name} must be numbers")


# -------------------------------
# Arithmetic
# -------------------------------
def add(*args):
    _require_numbers("+", args)
    return sum(args)


def sub(*args):
    _require_numbers("-", args)
    if len(args) == 1:
        return -args[0]
    if len(args) != 2:
        raise SigmaArityError("- requires 1 or 2 arguments")
    return args[0] - args[1]


def mul(*args):
    _require_numbers("*", args)
    result = 1
    for x in args:
        result *= x
    return result


def div(*args):
    if len(args) != 2:
        raise SigmaArityError("/ requires exactly 2 arguments")
    _require_numbers("/", args)
    a, b = args
    if b == 0:
        raise ZeroDivisionError("division by zero")
    return a / b


def floor(a):
    _require_numbers("floor", (a,))
    return math.floor(a)


def ceil(a):
    _require_numbers("ceil", (a,))
    return math.ceil(a)


def power(a, b):
    _require_numbers("pow", (a, b))
    if a < 0 and not float(b).is_integer():
        raise SigmaTypeError("pow of a negative number to a fractional power")
    return math.pow(a, b)


def sqrt(a):
    _require_numbers("sqrt", (a,))
    if a < 0:
        raise SigmaTypeError("sqrt of a negative number")
    return math.sqrt(a)


def sin(a):
    _require_numbers("sin", (a,))
    return math.sin(a)


def cos(a):
    _require_numbers("cos", (a,))
    return math.cos(a)


def tan(a):
    _require_numbers("tan", (a,))
    return math.tan(a)


# -------------------------------
# Combinatorics
# -------------------------------
def factorial(n):
    if not _is_integer(n):
        raise SigmaTypeError("n must be an integer")
    if n < 0:
        raise SigmaTypeError("n must be positive")
    return math.factorial(int(n))


def npr(n, r):
    if not _is_integer(n) or not _is_integer(r):
        raise SigmaTypeError("n and r must be integers")
    if n < 0 or r < 0:
        raise SigmaTypeError("n and r must be positive")
    if r > n:
        raise SigmaTypeError("r must be less than or equal to n")
    return math.perm(int(n), int(r))


def ncr(n, r):
    npr(n, r)
    return math.comb(int(n), int(r))


# -------------------------------
# Statistics
# -------------------------------
def _sample(name: str, args) -> np.ndarray:
    if not args:
        raise SigmaArityError(f"{name} requires at least 1 argument")
    _require_numbers(name, args)
    return np.asarray(args, dtype=float)


def mean(*args):
    return float(np.mean(_sample("mean", args)))


def variance(*args):
    """Population variance."""
    return float(np.var(_sample("variance", args)))


def stddev(*args):
    """Population standard deviation."""
    return float(np.std(_sample("stddev", args)))


# -------------------------------
# Registration
# -------------------------------
def default_builtins() -> Mapping[str, HostFunction]:
    """Read-only snapshot of the default calculator table."""
    return MappingProxyType({
        '+': add,
        '-': sub,
        '*': mul,
        '/': div,
        'floor': floor,
        'ceil': ceil,
        'pow': power,
        'sqrt': sqrt,
        'sin': sin,
        'cos': cos,
        'tan': tan,
        'factorial': factorial,
        'npr': npr,
        'ncr': ncr,
        'mean': mean,
        'variance': variance,
        'stddev': stddev,
    })
