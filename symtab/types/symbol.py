"""Symbol value type.

A Symbol is a single 64-bit unsigned integer: the low 48 bits hold the ordinal
issued by a SymbolTable, the high 16 bits hold caller supplied flags.

    symbol = (flags << 48) | ordinal

Symbol subclasses int, so it copies cheaply and compares and hashes by value.
"""

from __future__ import annotations

from symtab.errors import InvalidFlagsError, InvalidOrdinalError, OrdinalLimitExceededError

FLAG_BITS = 16
ORDINAL_BITS = 64 - FLAG_BITS
ORDINAL_MASK = (1 << ORDINAL_BITS) - 1
FLAGS_MASK = (1 << FLAG_BITS) - 1

# Largest ordinal a Symbol can carry. Tables may be configured with a lower ceiling.
MAX_ORDINAL = ORDINAL_MASK


class Symbol(int):
    __slots__ = ()

    @property
    def flags(self) -> int:
        return (int(self) >> ORDINAL_BITS) & FLAGS_MASK

    @property
    def ordinal(self) -> int:
        return int(self) & ORDINAL_MASK

    def __repr__(self):
        return f"Symbol({self!s})"

    def __str__(self):
        flags = self.flags
        return f"#{self.ordinal} ({flags:x}, {flags:b})"


# Reserved "no symbol" value. Never issued by a table.
ZERO_SYMBOL = Symbol(0)


def check_flags(flags: int) -> int:
    if isinstance(flags, bool) or not isinstance(flags, int):
        raise InvalidFlagsError(f"flags must be an int, got {type(flags).__name__}")
    if not 0 <= flags <= FLAGS_MASK:
        raise InvalidFlagsError(f"flags {flags:#x} do not fit in {FLAG_BITS} bits")
    return flags


def make_symbol(ordinal: int, flags: int, *, max_ordinal: int = MAX_ORDINAL) -> Symbol:
    """Pack `ordinal` and `flags` into a Symbol.

    Raises OrdinalLimitExceededError if `ordinal` is above `max_ordinal`
    (a ceiling above MAX_ORDINAL is clamped to it),
    InvalidOrdinalError if it is negative and InvalidFlagsError if `flags`
    does not fit in 16 bits.
    """
    if ordinal < 0:
        raise InvalidOrdinalError(f"ordinal must be non-negative, got {ordinal}")
    max_ordinal = min(max_ordinal, MAX_ORDINAL)
    if ordinal > max_ordinal:
        raise OrdinalLimitExceededError(ordinal, max_ordinal)
    check_flags(flags)
    return Symbol((flags << ORDINAL_BITS) | ordinal)


def flags_of(sym: int) -> int:
    return (int(sym) >> ORDINAL_BITS) & FLAGS_MASK


def ordinal_of(sym: int) -> int:
    return int(sym) & ORDINAL_MASK
