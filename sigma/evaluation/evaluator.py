"""Core evaluator for the Sigma interpreter.

Dispatches on the shape of a parsed form: atoms, symbol references,
special forms and application. Recursion depth is bounded only by the
Python call stack.
"""

from __future__ import annotations

from sigma import SExpression, LispValue
from sigma.errors import SigmaNotCallable
from sigma.types.environment import Environment
from sigma.types.symbol import Symbol
from sigma.evaluation.apply import apply, check_callable
from sigma.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment, strict_arity: bool = True) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case Symbol():
            return env.lookup(expr)

        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate, strict_arity)

        case [operator, *operands]:
            fn = evaluate(operator, env, strict_arity)
            # Operator is checked before any operand is evaluated
            check_callable(fn)
            args = [evaluate(operand, env, strict_arity) for operand in operands]
            return apply(fn, args, evaluate, strict_arity)

        case []:
            raise SigmaNotCallable("not callable: empty combination")

    # --- Atoms return as-is ---
    return expr
