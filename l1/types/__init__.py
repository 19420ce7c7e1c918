from l1.types.result import Ok, Failure, Result, make_ok, make_failure, is_ok, is_failure, bind, map_result, either
from l1.types.environment import (
    EmptyEnv,
    Env,
    Environment,
    make_empty_env,
    make_env,
    apply_env,
    is_env,
    is_empty_env,
    is_non_empty_env,
)
