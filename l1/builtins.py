from __future__ import annotations
from functools import reduce
from typing import Any, Callable

from l1.config import EvalOptions, DEFAULT_OPTIONS
from l1.errors import L1TypeMismatch, L1DivisionByZero, L1ArithmeticOverflow
from l1.types.result import Result, make_ok, make_failure

PrimitiveFn = Callable[[list[Any], EvalOptions], Result]


def is_number(x: Any) -> bool:
    # bool is an int subclass in Python but a separate kind of value in L1
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _all_numbers(op: str, args: list[Any]) -> Result | None:
    for x in args:
        if not is_number(x):
            return make_failure(L1TypeMismatch(op, args))
    return None


# -------------------------------
# Arithmetic
#
# Every arithmetic operator is a left fold from a fixed seed, whatever the
# argument count: (- x) is 0 - x and (/ x) is 1 / x.
# -------------------------------
def _fold(op: str, fn: Callable[[Any, Any], Any], seed: Any, args: list[Any]) -> Result:
    try:
        return make_ok(reduce(fn, args, seed))
    except OverflowError:
        # int operands too large to convert to float
        return make_failure(L1ArithmeticOverflow(op, args))

def add(args: list[Any], options: EvalOptions = DEFAULT_OPTIONS) -> Result:
    return _all_numbers("+", args) or _fold("+", lambda x, y: x + y, 0, args)

def sub(args: list[Any], options: EvalOptions = DEFAULT_OPTIONS) -> Result:
    return _all_numbers("-", args) or _fold("-", lambda x, y: x - y, 0, args)

def mul(args: list[Any], options: EvalOptions = DEFAULT_OPTIONS) -> Result:
    return _all_numbers("*", args) or _fold("*", lambda x, y: x * y, 1, args)

def div(args: list[Any], options: EvalOptions = DEFAULT_OPTIONS) -> Result:
    bad = _all_numbers("/", args)
    if bad is not None:
        return bad
    if any(x == 0 for x in args):
        return make_failure(L1DivisionByZero())
    return _fold("/", lambda x, y: x / y, 1, args)


# -------------------------------
# Comparison
# -------------------------------
def _compare(op: str, test: Callable[[Any, Any], bool]) -> PrimitiveFn:
    def compare(args: list[Any], options: EvalOptions = DEFAULT_OPTIONS) -> Result:
        if len(args) != 2 or not (is_number(args[0]) and is_number(args[1])):
            return make_failure(L1TypeMismatch(op, args))
        return make_ok(test(args[0], args[1]))
    compare.__name__ = f"compare_{op}"
    return compare

greater_than = _compare(">", lambda a, b: a > b)
less_than = _compare("<", lambda a, b: a < b)
equals = _compare("=", lambda a, b: a == b)


# -------------------------------
# Logic
# -------------------------------
def not_(args: list[Any], options: EvalOptions = DEFAULT_OPTIONS) -> Result:
    if len(args) != 1:
        return make_failure(L1TypeMismatch("not", args))
    arg = args[0]
    if isinstance(arg, bool):
        return make_ok(not arg)
    if options.truthy_not:
        return make_ok(not arg)
    return make_failure(L1TypeMismatch("not", args))


PRIMITIVES: dict[str, PrimitiveFn] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    ">": greater_than,
    "<": less_than,
    "=": equals,
    "not": not_,
}
