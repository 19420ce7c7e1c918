"""Procedure application for L1.

The only procedures in L1 are the primitive operators, so applying means
checking that the operator position holds a PrimOp and dispatching on its
tag to the implementation registered in l1.builtins.
"""

from __future__ import annotations

from typing import Any

from l1.builtins import PRIMITIVES
from l1.config import EvalOptions, DEFAULT_OPTIONS
from l1.errors import L1NotAProcedure, L1UnknownOperator
from l1.syntax import PRIMITIVE_OPS, PrimOp, is_prim_op
from l1.types.result import Result, make_failure


def apply_procedure(proc: Any, args: list[Any], options: EvalOptions | None = None) -> Result:
    """Apply the operator-position node `proc` to already-evaluated `args`."""
    if is_prim_op(proc):
        return apply_primitive(proc, args, options)
    return make_failure(L1NotAProcedure(repr(proc)))


def apply_primitive(proc: PrimOp, args: list[Any], options: EvalOptions | None = None) -> Result:
    """Run a primitive operator. `args` must already be values; nothing is re-evaluated here."""
    if proc.op not in PRIMITIVE_OPS:
        return make_failure(L1UnknownOperator(proc.op))
    fn = PRIMITIVES[proc.op]
    return fn(list(args), options if options is not None else DEFAULT_OPTIONS)
