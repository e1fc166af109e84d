"""Runtime environment for Sigma.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Lookups walk from the innermost frame
outward; definitions only ever touch the frame they are made in.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Mapping, Optional

from sigma import LispValue
from sigma.errors import SigmaInvalidIdentifier, SigmaUndefinedVariable
from sigma.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def from_builtins(cls, builtins: Mapping[str, LispValue]) -> Environment:
        """Create a root environment seeded with a copy of the host's table.

        Keys may be plain strings or Symbols. The mapping passed in is only
        read, so definitions made while evaluating never leak back into it.
        Keys that are not valid identifiers could never be referenced from
        source text; they are skipped with a warning.
        """
        root = cls()
        for k, v in dict(builtins).items():
            name = k if isinstance(k, Symbol) else Symbol(k) if isinstance(k, str) else None
            if name is None or not name.is_valid():
                logger.warning("Skipping builtin with invalid identifier %r", k)
                continue
            root.vars[name] = v
        return root

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Never searches or mutates an outer frame; an outer binding of the
        same name is shadowed. Raises SigmaInvalidIdentifier if `name` is not
        a Symbol or does not match the identifier grammar.
        """
        if not isinstance(name, Symbol) or not name.is_valid():
            raise SigmaInvalidIdentifier(f"invalid identifier: {name}")
        self.vars[name] = value

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises SigmaUndefinedVariable if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise SigmaUndefinedVariable(f"undefined variable: {name}")
        return env.vars[name]

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
