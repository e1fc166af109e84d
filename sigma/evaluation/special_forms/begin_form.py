from sigma import EvaluatorFn
from sigma import SExpression, LispValue
from sigma.types.environment import Environment
from sigma.types.nil import Nil


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    strict_arity: bool,
) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, env, strict_arity)
    return result
