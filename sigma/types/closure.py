"""Closure representation and argument binding for Sigma."""

from __future__ import annotations

from io import StringIO

from sigma import SExpression, LispValue
from sigma.errors import SigmaArityError
from sigma.types.environment import Environment
from sigma.types.symbol import Symbol


class Closure:
    """A user-defined function: parameters, a single body form, captured env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: tuple[Symbol, ...], body: SExpression, env: Environment):
        self.params: tuple[Symbol, ...] = tuple(params)
        self.body: SExpression = body
        # Held by reference: later defines in `env` are visible to the body
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Closure {self}>"

    def extend_env(self, args: list[LispValue], strict_arity: bool = True) -> Environment:
        """
        Allocate the call frame for one invocation of this closure.

        The new environment is parented to the captured environment, not the
        caller's. Parameters are bound positionally. With `strict_arity`, a
        count mismatch raises SigmaArityError; otherwise extra arguments are
        dropped and unmatched parameters stay unbound.
        """
        if strict_arity and len(args) != len(self.params):
            raise SigmaArityError(
                f"arity mismatch: expected {len(self.params)} arguments, got {len(args)}"
            )
        new_env = Environment(outer=self.env)
        for param, arg in zip(self.params, args):
            new_env.define(param, arg)
        return new_env
