from sigma import EvaluatorFn
from sigma import SExpression, LispValue
from sigma.errors import SigmaInvalidDefinition
from sigma.types.environment import Environment
from sigma.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    strict_arity: bool,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only and returns the bound value.
    """
    if len(tail) != 2:
        raise SigmaInvalidDefinition(
            f"define requires a name and a value, got {len(tail)} arguments"
        )

    name, val_expr = tail
    if not isinstance(name, Symbol) or not name.is_valid():
        raise SigmaInvalidDefinition(f"define target must be a symbol, got {name!r}")

    value = evaluate_fn(val_expr, env, strict_arity)
    env.define(name, value)
    return value
