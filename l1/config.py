from __future__ import annotations
import os
from dataclasses import dataclass

_TRUE_WORDS = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class EvalOptions:
    """Knobs for the evaluator. The defaults give the strict semantics."""
    # When set, `not` uses Python truthiness instead of rejecting non-booleans
    truthy_not: bool = False


DEFAULT_OPTIONS = EvalOptions()


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_WORDS


def options_from_env() -> EvalOptions:
    return EvalOptions(truthy_not=flag_from_env('L1_TRUTHY_NOT'))
