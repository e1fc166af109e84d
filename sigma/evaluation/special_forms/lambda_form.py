from sigma import EvaluatorFn
from sigma import SExpression, LispValue
from sigma.errors import SigmaInvalidLambda
from sigma.types.closure import Closure
from sigma.types.environment import Environment
from sigma.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    strict_arity: bool,
) -> LispValue:
    """
    (lambda (params...) body)
    The body is a single form; use begin for more than one. The closure keeps
    a reference to `env`, not a copy.
    """
    if len(tail) != 2:
        raise SigmaInvalidLambda(
            f"lambda requires a parameter list and a single body, got {len(tail)} arguments"
        )

    params, body = tail
    if not isinstance(params, (tuple, list)):
        raise SigmaInvalidLambda(f"lambda parameters must be a list, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol) or not p.is_valid():
            raise SigmaInvalidLambda(f"lambda parameter must be a symbol, got {p!r}")
    if len(set(params)) != len(params):
        raise SigmaInvalidLambda("lambda parameters must be distinct")

    return Closure(params, body, env)
