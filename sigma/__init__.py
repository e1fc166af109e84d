# Core type aliases for Sigma's data model.
# Forms and runtime values are plain Python objects:
# - numbers      -> int / float
# - symbols      -> sigma.types.symbol.Symbol
# - combinations -> tuple (immutable, produced once by the reader)
# - closures     -> sigma.types.closure.Closure
# - host callables supplied by the embedder are ordinary Python callables.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Parsed forms
SExpression = Any

# Host function: called with the evaluated operands, returns one value
HostFunction = Callable[..., LispValue]

# Evaluator function type: passed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

from sigma.interpreter import evaluate, EvaluationResult  # noqa: E402

__all__ = ["LispValue", "SExpression", "HostFunction", "EvaluatorFn", "evaluate", "EvaluationResult"]
