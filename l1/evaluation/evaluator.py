"""Core evaluator for L1.

Evaluates a single expression node against an environment and returns a
Result. There is no state beyond the environment passed in, so the same
node and an equal environment always give an equal Result.
"""

from __future__ import annotations

from l1.config import EvalOptions
from l1.errors import L1MalformedExpression
from l1.evaluation.apply import apply_procedure
from l1.syntax import NumExp, BoolExp, PrimOp, VarRef, AppExp
from l1.types.environment import Environment, apply_env
from l1.types.result import Result, bind, make_ok, make_failure, map_result


def evaluate(exp, env: Environment, options: EvalOptions | None = None) -> Result:
    """
    Applicative-order evaluation of one expression.

    Operands of an application are evaluated left to right in the same
    environment and the first failure stops evaluation. The operator position
    is not evaluated: it has to be a primitive operator literal.
    """
    match exp:
        case NumExp(val) | BoolExp(val):
            return make_ok(val)
        case PrimOp():
            return make_ok(exp)
        case VarRef(var):
            return apply_env(env, var)
        case AppExp(rator, rands):
            return bind(
                map_result(lambda rand: evaluate(rand, env, options), rands),
                lambda args: apply_procedure(rator, args, options),
            )
    # DefineExp only makes sense at the top level of a sequence
    return make_failure(L1MalformedExpression(exp))
