"""Read-only and write-only views over a SymbolTable.

A Reader can translate between strings and Symbols already issued but cannot
add entries. A Writer can add entries but cannot look anything up. Both hold a
reference to the table they were created from, so they always see its live
state; any number of them may exist for one table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Tuple, runtime_checkable

from symtab.types.symbol import Symbol

if TYPE_CHECKING:
    from symtab.table import SymbolTable


@runtime_checkable
class Reader(Protocol):
    def to_string(self, sym: Symbol) -> Tuple[str, bool]: ...

    def to_symbol(self, string: str) -> Tuple[Symbol, bool]: ...


@runtime_checkable
class Writer(Protocol):
    def add(self, string: str, flags: int) -> Symbol: ...


class TableReader:
    __slots__ = ("_tab",)

    def __init__(self, tab: SymbolTable):
        self._tab = tab

    def to_string(self, sym: Symbol) -> Tuple[str, bool]:
        """Return (string, True) for an issued symbol, ("", False) otherwise."""
        return self._tab.to_string(sym)

    def to_symbol(self, string: str) -> Tuple[Symbol, bool]:
        """Return (symbol, True) for a known string, (ZERO_SYMBOL, False) otherwise."""
        return self._tab.to_symbol(string)

    def __repr__(self):
        return f"<TableReader of {self._tab!r}>"


class TableWriter:
    __slots__ = ("_tab",)

    def __init__(self, tab: SymbolTable):
        self._tab = tab

    def add(self, string: str, flags: int) -> Symbol:
        return self._tab.add(string, flags)

    def __repr__(self):
        return f"<TableWriter of {self._tab!r}>"
