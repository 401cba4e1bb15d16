# Symbol interning tables.
# Each distinct non-empty string is assigned one Symbol: a 64-bit int packing a
# 48-bit ordinal (low bits) and 16 bits of caller flags (high bits).
#
# Typical use:
# - hold a Writer where new names are minted (table.writer().add(name, flags))
# - hand out Readers where names only need resolving (to_string / to_symbol)

from typing import Tuple

from symtab.errors import (
    SymtabError,
    EmptyStringError,
    AlreadyAddedError,
    OrdinalLimitExceededError,
    InvalidFlagsError,
    InvalidOrdinalError,
)
from symtab.types.symbol import Symbol, ZERO_SYMBOL, MAX_ORDINAL, make_symbol, flags_of, ordinal_of
from symtab.capabilities import Reader, Writer
from symtab.table import SymbolTable

# Result of a lookup: the value found and whether it was present
StringLookup = Tuple[str, bool]
SymbolLookup = Tuple[Symbol, bool]

__all__ = [
    "Symbol",
    "ZERO_SYMBOL",
    "MAX_ORDINAL",
    "make_symbol",
    "flags_of",
    "ordinal_of",
    "SymbolTable",
    "Reader",
    "Writer",
    "StringLookup",
    "SymbolLookup",
    "SymtabError",
    "EmptyStringError",
    "AlreadyAddedError",
    "OrdinalLimitExceededError",
    "InvalidFlagsError",
    "InvalidOrdinalError",
]
