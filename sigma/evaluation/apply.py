"""Application engine for Sigma.

Closures get a fresh frame parented to their captured environment; host
functions are plain Python callables invoked with the evaluated operands.
Anything else in operator position is an error.
"""

from __future__ import annotations

from sigma import LispValue, HostFunction
from sigma.errors import SigmaNotCallable, SigmaTypeError
from sigma.types.closure import Closure


def check_callable(head: object) -> None:
    if not isinstance(head, Closure) and not callable(head):
        raise SigmaNotCallable(f"not callable: {head!r}")


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn, strict_arity: bool) -> LispValue:
    new_env = fn.extend_env(args, strict_arity)
    return evaluate_fn(fn.body, new_env, strict_arity)


def apply(
    head: Closure | HostFunction | object,
    args: list[LispValue],
    evaluate_fn,
    strict_arity: bool = True,
) -> LispValue:
    """Apply either a Closure or a host callable.

    Whatever a host callable raises is passed through untouched; a host
    callable that returns None has produced no value and is an error.
    """
    check_callable(head)
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn, strict_arity)
    result = head(*args)
    if result is None:
        name = getattr(head, "__name__", repr(head))
        raise SigmaTypeError(f"host function returned no value: {name}")
    return result
