"""Runtime environment for L1.

An environment is a persistent chain of single-binding frames ending in
EmptyEnv. Extending produces a new head frame that points at the existing
chain, so every holder of a prefix keeps seeing exactly the bindings it
had. Lookup is a linear scan from the innermost frame outward; the first
match wins, which is what makes shadowing work.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import Any, Iterator, Union

from l1.errors import L1InvalidVariable, L1UnboundVariable
from l1.types.result import Result, make_ok, make_failure


@dataclass(frozen=True, slots=True)
class EmptyEnv:
    def bindings(self) -> Iterator[tuple[str, Any]]:
        return iter(())

    def depth(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "<Environment chain: {}>"


@dataclass(frozen=True, slots=True)
class Env:
    var: str
    val: Any
    next_env: Union[Env, EmptyEnv]

    def bindings(self) -> Iterator[tuple[str, Any]]:
        """Yield (var, val) pairs innermost first, shadowed ones included."""
        env: Union[Env, EmptyEnv] = self
        while isinstance(env, Env):
            yield env.var, env.val
            env = env.next_env

    def depth(self) -> int:
        return sum(1 for _ in self.bindings())

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            buffer.write(" -> ".join(f"{{{k}: {v!r}}}" for k, v in self.bindings()))
            buffer.write(" -> {}>")
            return buffer.getvalue()


Environment = Union[Env, EmptyEnv]


def make_empty_env() -> EmptyEnv:
    return EmptyEnv()


def make_env(var: str, val: Any, env: Environment) -> Env:
    """Return a new chain with `var -> val` in front of `env`.

    Raises L1InvalidVariable if `var` is not a non-empty string.
    """
    if not isinstance(var, str) or not var:
        raise L1InvalidVariable(var)
    return Env(var, val, env)


def is_empty_env(x: Any) -> bool:
    return isinstance(x, EmptyEnv)


def is_non_empty_env(x: Any) -> bool:
    return isinstance(x, Env)


def is_env(x: Any) -> bool:
    return is_empty_env(x) or is_non_empty_env(x)


def apply_env(env: Environment, var: str) -> Result:
    """Look up `var`, innermost binding first."""
    while isinstance(env, Env):
        if env.var == var:
            return make_ok(env.val)
        env = env.next_env
    return make_failure(L1UnboundVariable(var))
