from __future__ import annotations
import os
from typing import Optional

from symtab.errors import InvalidOrdinalError
from symtab.types.symbol import MAX_ORDINAL

MAX_ORDINAL_ENV = 'SYMTAB_MAX_ORDINAL'


def check_max_ordinal(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOrdinalError(f"ordinal ceiling must be an int, got {type(value).__name__}")
    if not 0 <= value <= MAX_ORDINAL:
        raise InvalidOrdinalError(f"ordinal ceiling {value} is outside [0, {MAX_ORDINAL}]")
    return value


def max_ordinal_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        # accepts decimal and 0x-prefixed hex
        value = int(raw.strip(), 0)
    except ValueError:
        raise InvalidOrdinalError(f"{var}={raw!r} is not an integer") from None
    return check_max_ordinal(value)


def get_max_ordinal(override: Optional[int] = None) -> int:
    if override is not None:
        return check_max_ordinal(override)
    return max_ordinal_from_env(MAX_ORDINAL_ENV, MAX_ORDINAL)
