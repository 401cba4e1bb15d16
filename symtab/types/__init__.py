from .symbol import (
    Symbol,
    ZERO_SYMBOL,
    MAX_ORDINAL,
    make_symbol,
    flags_of,
    ordinal_of,
)

__all__ = ["Symbol", "ZERO_SYMBOL", "MAX_ORDINAL", "make_symbol", "flags_of", "ordinal_of"]
