"""Render parsed forms back to surface syntax."""

from __future__ import annotations

import numpy as np

from sigma import SExpression
from sigma.types.symbol import Symbol


def to_source(expr: SExpression) -> str:
    if isinstance(expr, tuple):
        return "(" + " ".join(to_source(e) for e in expr) + ")"
    if isinstance(expr, Symbol):
        return str(expr)
    if isinstance(expr, float):
        # The reader has no exponent syntax: shortest digits that read back exactly
        return np.format_float_positional(expr, unique=True, trim="0")
    return str(expr)
