"""Symbol table.

The SymbolTable owns a forward index (string -> Symbol), a reverse index
(Symbol -> string) and the counter that issues ordinals. It is the only owner
of that state; Readers and Writers obtained from it are views holding a
reference to the table.

Ordinals start at 1 and are issued once per successful insertion, without gaps
or reuse. Entries are never removed.

All operations take the table's lock, so a table may be shared between
threads: an insertion is visible through lookups only once both indices and
the counter have been updated.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional, Tuple

from symtab.capabilities import Reader, TableReader, TableWriter, Writer
from symtab.config import get_max_ordinal
from symtab.errors import AlreadyAddedError, EmptyStringError, OrdinalLimitExceededError
from symtab.types.symbol import Symbol, ZERO_SYMBOL, make_symbol

logger = logging.getLogger(__name__)

INITIAL_ORDINAL = 1


class SymbolTable:
    """Bidirectional mapping between non-empty strings and Symbols.

    `max_ordinal` caps the ordinals the table will issue. When omitted, the
    ceiling comes from the SYMTAB_MAX_ORDINAL environment variable if it is
    set, else MAX_ORDINAL; pass it explicitly to be independent of the
    environment.
    """

    __slots__ = (
        "_str_to_sym",
        "_sym_to_str",
        "_next_ordinal",
        "_max_ordinal",
        "_lock",
        "_exhausted",
    )

    def __init__(self, max_ordinal: Optional[int] = None):
        self._str_to_sym: dict[str, Symbol] = {}
        self._sym_to_str: dict[Symbol, str] = {}
        self._next_ordinal: int = INITIAL_ORDINAL
        self._max_ordinal: int = get_max_ordinal(max_ordinal)
        self._lock = threading.Lock()
        self._exhausted = False
        logger.debug("created symbol table with ordinal ceiling %d", self._max_ordinal)

    # --- capabilities ---
    def reader(self) -> Reader:
        return TableReader(self)

    def writer(self) -> Writer:
        return TableWriter(self)

    # --- state ---
    @property
    def max_ordinal(self) -> int:
        return self._max_ordinal

    @property
    def next_ordinal(self) -> int:
        with self._lock:
            return self._next_ordinal

    @property
    def is_empty(self) -> bool:
        with self._lock:
            return self._next_ordinal == INITIAL_ORDINAL

    def __len__(self) -> int:
        with self._lock:
            return len(self._str_to_sym)

    def __repr__(self):
        return f"SymbolTable(size={len(self)}, max_ordinal={self._max_ordinal})"

    # --- insertion ---
    def add(self, string: str, flags: int) -> Symbol:
        """Issue a new Symbol for `string`.

        Raises EmptyStringError for "", AlreadyAddedError if `string` already
        has a symbol and OrdinalLimitExceededError once the ceiling is reached.
        The table is unchanged when an error is raised.
        """
        with self._lock:
            return self._add_locked(string, flags)

    def intern(self, string: str, flags: int) -> Symbol:
        """Return the Symbol for `string`, adding it with `flags` if absent.

        An existing Symbol keeps the flags it was created with.
        """
        with self._lock:
            sym = self._str_to_sym.get(string)
            if sym is not None:
                return sym
            return self._add_locked(string, flags)

    def _add_locked(self, string: str, flags: int) -> Symbol:
        if not isinstance(string, str):
            raise TypeError(f"symbol table keys must be str, got {type(string).__name__}")
        if string == "":
            raise EmptyStringError()
        if string in self._str_to_sym:
            raise AlreadyAddedError(string)
        try:
            sym = make_symbol(self._next_ordinal, flags, max_ordinal=self._max_ordinal)
        except OrdinalLimitExceededError:
            if not self._exhausted:
                self._exhausted = True
                logger.warning(
                    "symbol table exhausted: %d ordinals issued, ceiling is %d",
                    self._next_ordinal - INITIAL_ORDINAL, self._max_ordinal,
                )
            raise
        self._next_ordinal += 1
        self._str_to_sym[string] = sym
        self._sym_to_str[sym] = string
        logger.debug("added %r as %s", string, sym)
        return sym

    # --- lookup ---
    def to_string(self, sym: Symbol) -> Tuple[str, bool]:
        with self._lock:
            string = self._sym_to_str.get(sym)
        if string is None:
            return "", False
        return string, True

    def to_symbol(self, string: str) -> Tuple[Symbol, bool]:
        with self._lock:
            sym = self._str_to_sym.get(string)
        if sym is None:
            return ZERO_SYMBOL, False
        return sym, True
