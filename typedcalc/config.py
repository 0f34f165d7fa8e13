from __future__ import annotations
import os
import sys

# A nested call costs several Python frames (SymbolCall -> call -> invoke -> Code.execute),
# so the call depth has to stay well inside the interpreter's recursion limit.
_FRAMES_PER_CALL = 8


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_call_depth_ceiling() -> int:
    return max(1, sys.getrecursionlimit() // _FRAMES_PER_CALL)


def get_max_call_depth() -> int:
    ceiling = get_call_depth_ceiling()
    return min(int_from_env('TYPEDCALC_MAX_CALL_DEPTH', ceiling), ceiling)
