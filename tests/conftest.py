import pytest

from symtab import SymbolTable
from symtab.config import MAX_ORDINAL_ENV


@pytest.fixture
def clean_env(monkeypatch):
    # Tables read their default ceiling from the environment; keep a
    # developer's shell setting out of tests that rely on the default.
    monkeypatch.delenv(MAX_ORDINAL_ENV, raising=False)
    return monkeypatch


@pytest.fixture
def tab(clean_env):
    return SymbolTable()


@pytest.fixture
def reader(tab):
    return tab.reader()


@pytest.fixture
def writer(tab):
    return tab.writer()
