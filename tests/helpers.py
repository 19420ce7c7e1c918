
from l1.syntax import NumExp, BoolExp, PrimOp, VarRef, VarDecl, AppExp, DefineExp


# Small builders so test tables read close to L1 source:
#   app("+", num(1), var("x"))  ~  (+ 1 x)
#   define("x", num(3))         ~  (define x 3)


def num(n):
    return NumExp(n)


def boolean(b):
    return BoolExp(b)


def var(name):
    return VarRef(name)


def op(tag):
    return PrimOp(tag)


def app(rator, *rands):
    if isinstance(rator, str):
        rator = PrimOp(rator)
    return AppExp(rator, rands)


def define(name, rhs):
    return DefineExp(VarDecl(name), rhs)


