"""Sequence evaluation and the program-level entry points."""

from __future__ import annotations

import logging
from typing import Iterable

from l1.config import EvalOptions
from l1.errors import L1Error, L1EmptyProgram, L1MalformedExpression
from l1.evaluation.evaluator import evaluate
from l1.syntax import DefineExp, Program, VarDecl, is_define_exp
from l1.types.environment import Environment, make_empty_env, make_env
from l1.types.result import Ok, Failure, Result, bind, make_ok, make_failure

logger = logging.getLogger(__name__)


def evaluate_sequence(exps: Iterable, env: Environment, options: EvalOptions | None = None) -> Result:
    """
    Evaluate top-level expressions in order.

    A definition evaluates its right-hand side in the current environment and
    extends the environment for everything after it. Other expressions are
    evaluated in the current environment; their values are dropped unless
    they come last, but a failure anywhere stops the sequence.
    """
    exps = list(exps)
    if not exps:
        return make_failure(L1EmptyProgram())

    *body, final = exps
    for exp in body:
        if is_define_exp(exp):
            extended = _define(exp, env, options)
            if isinstance(extended, Failure):
                return extended
            env = extended.value
        else:
            result = evaluate(exp, env, options)
            if isinstance(result, Failure):
                return result

    if is_define_exp(final):
        # A trailing definition leaves nothing to give the program a value
        return bind(_define(final, env, options), lambda _: make_failure(L1EmptyProgram()))
    return evaluate(final, env, options)


def _define(exp: DefineExp, env: Environment, options: EvalOptions | None) -> Result:
    """Evaluate the right-hand side and return the extended environment."""
    match exp:
        case DefineExp(VarDecl(str(name)), val) if name:
            rhs = evaluate(val, env, options)
            if isinstance(rhs, Failure):
                return rhs
            logger.debug("define %s = %r", name, rhs.value)
            return make_ok(make_env(name, rhs.value, env))
    return make_failure(L1MalformedExpression(exp))


def _unwrap(result: Result):
    if isinstance(result, Ok):
        logger.debug("program value: %r", result.value)
        return result.value
    logger.debug("program failed: %s", result.message)
    return result.error


def evaluate_exps(exps: Iterable, env: Environment, options: EvalOptions | None = None):
    """Evaluate a sequence from `env`; return its value or the L1Error describing the failure."""
    return _unwrap(evaluate_sequence(exps, env, options))


def evaluate_program(program: Program, options: EvalOptions | None = None):
    """Evaluate a whole program from the empty environment.

    Returns the program's value, or an L1Error (returned, not raised).
    """
    return evaluate_exps(program.exps, make_empty_env(), options)


def run_program(program: Program, options: EvalOptions | None = None):
    """Like evaluate_program but raises the L1Error on failure."""
    value = evaluate_program(program, options)
    if isinstance(value, L1Error):
        raise value
    return value
