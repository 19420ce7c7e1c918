"""Success/failure outcome threaded through every evaluator call.

A Result is either Ok(value) or Failure(error), where error is an L1Error
instance describing why evaluation stopped. Failures are values here, not
raised exceptions: `bind` and `map_result` short-circuit on the first one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, TypeVar, Union

from l1.errors import L1Error

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    error: L1Error

    @property
    def message(self) -> str:
        return self.error.message


Result = Union[Ok[T], Failure]


def make_ok(value: T) -> Ok[T]:
    return Ok(value)


def make_failure(error: L1Error) -> Failure:
    return Failure(error)


def is_ok(r: Any) -> bool:
    return isinstance(r, Ok)


def is_failure(r: Any) -> bool:
    return isinstance(r, Failure)


def bind(r: Result[T], fn: Callable[[T], Result[U]]) -> Result[U]:
    """Feed an Ok value to `fn`; pass a Failure through untouched."""
    if isinstance(r, Ok):
        return fn(r.value)
    return r


def map_result(fn: Callable[[T], Result[U]], items: Iterable[T]) -> Result[list[U]]:
    """Apply `fn` left to right, stopping at the first Failure.

    Items after a failing one are never visited.
    """
    values: list[U] = []
    for item in items:
        r = fn(item)
        if isinstance(r, Failure):
            return r
        values.append(r.value)
    return Ok(values)


def either(r: Result[T], on_ok: Callable[[T], U], on_failure: Callable[[L1Error], U]) -> U:
    if isinstance(r, Ok):
        return on_ok(r.value)
    return on_failure(r.error)
