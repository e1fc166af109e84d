from __future__ import annotations
import os


_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

# Defaults
_DEFAULT_STRICT_ARITY = True


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_VALUES


def get_strict_arity() -> bool:
    """Whether closure calls reject a mismatched number of operands."""
    return flag_from_env('SIGMA_STRICT_ARITY', _DEFAULT_STRICT_ARITY)
