"""AST node types for L1.

Nodes are produced by a parser that lives outside this package; the
evaluator only reads them. The set is closed: anything that is not one of
these classes is a malformed expression as far as the evaluator is
concerned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PRIMITIVE_OPS = ("+", "-", "*", "/", ">", "<", "=", "not")


@dataclass(frozen=True, slots=True)
class NumExp:
    val: int | float


@dataclass(frozen=True, slots=True)
class BoolExp:
    val: bool


@dataclass(frozen=True, slots=True)
class PrimOp:
    """A primitive operator; also a first-class value once evaluated."""
    op: str

    def __str__(self) -> str:
        return self.op


@dataclass(frozen=True, slots=True)
class VarRef:
    var: str


@dataclass(frozen=True, slots=True)
class VarDecl:
    var: str


@dataclass(frozen=True, slots=True)
class AppExp:
    rator: Any
    rands: tuple = ()

    def __post_init__(self):
        # Accept any iterable of operands but store an immutable tuple
        object.__setattr__(self, "rands", tuple(self.rands))


@dataclass(frozen=True, slots=True)
class DefineExp:
    var: VarDecl
    val: Any


@dataclass(frozen=True, slots=True)
class Program:
    exps: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "exps", tuple(self.exps))


def is_num_exp(x: Any) -> bool:
    return isinstance(x, NumExp)

def is_bool_exp(x: Any) -> bool:
    return isinstance(x, BoolExp)

def is_prim_op(x: Any) -> bool:
    return isinstance(x, PrimOp)

def is_var_ref(x: Any) -> bool:
    return isinstance(x, VarRef)

def is_var_decl(x: Any) -> bool:
    return isinstance(x, VarDecl)

def is_app_exp(x: Any) -> bool:
    return isinstance(x, AppExp)

def is_define_exp(x: Any) -> bool:
    return isinstance(x, DefineExp)

def is_program(x: Any) -> bool:
    return isinstance(x, Program)

def is_cexp(x: Any) -> bool:
    return isinstance(x, (NumExp, BoolExp, PrimOp, VarRef, AppExp))

def is_exp(x: Any) -> bool:
    return is_define_exp(x) or is_cexp(x)
