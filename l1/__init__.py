# Core type aliases for L1's data model.
#
# Values are plain Python objects: int and float for numbers, bool for
# booleans, and l1.syntax.PrimOp for first-class primitive operators. bool is
# never treated as a number even though Python makes it a subclass of int.
#
# Naming guidance:
# - Exp / CExp: syntactic nodes produced by a parser (see l1.syntax).
# - Value:      what the evaluator produces.

from typing import Union

from l1.syntax import PrimOp, NumExp, BoolExp, VarRef, VarDecl, AppExp, DefineExp, Program
from l1.evaluation.program import evaluate_program, evaluate_exps, run_program

Value = Union[int, float, bool, PrimOp]
CExp = Union[NumExp, BoolExp, PrimOp, VarRef, AppExp]
Exp = Union[CExp, DefineExp]

__all__ = [
    "Value",
    "CExp",
    "Exp",
    "PrimOp",
    "NumExp",
    "BoolExp",
    "VarRef",
    "VarDecl",
    "AppExp",
    "DefineExp",
    "Program",
    "evaluate_program",
    "evaluate_exps",
    "run_program",
]
