"""Entry point for embedding Sigma.

`evaluate` is the only call a host needs: it builds a fresh root environment
from the host's builtin table, parses one expression, evaluates it and turns
any failure into a message. Nothing is shared between calls except the
builtin table, which is copied and never written to.
"""

from __future__ import annotations

import logging
from typing import Mapping, NamedTuple, Optional

from sigma import LispValue
from sigma import config
from sigma.reader.parser import parse
from sigma.types.environment import Environment
from sigma.evaluation.evaluator import evaluate as evaluate_expr

logger = logging.getLogger(__name__)


class EvaluationResult(NamedTuple):
    """Outcome of one `evaluate` call; exactly one field is not None."""

    value: Optional[LispValue]
    error: Optional[str]

    @property
    def ok(self) -> bool:
        return self.error is None


def _error_message(exc: BaseException) -> str:
    message = str(exc)
    return message if message else type(exc).__name__


def evaluate(
    builtins: Mapping[str, LispValue],
    source: str,
    *,
    strict_arity: Optional[bool] = None,
) -> EvaluationResult:
    """Parse and evaluate one expression against a copy of `builtins`.

    Never raises: parse errors, evaluation errors and whatever a host
    function raises come back as ``EvaluationResult(None, message)``.
    """
    if strict_arity is None:
        strict_arity = config.get_strict_arity()
    try:
        env = Environment.from_builtins(builtins)
        expr = parse(source)
        logger.debug("Parsed %r -> %r", source, expr)
        value = evaluate_expr(expr, env, strict_arity)
    except Exception as e:
        # RecursionError lands here too: deep nesting is reported, not guarded
        logger.debug("Evaluation of %r failed with %s: %s", source, type(e).__name__, e)
        return EvaluationResult(None, _error_message(e))
    logger.debug("Evaluated %r -> %r", source, value)
    return EvaluationResult(value, None)
