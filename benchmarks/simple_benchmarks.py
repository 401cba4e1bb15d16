from timeit import timeit

from symtab import SymbolTable, ZERO_SYMBOL


def _names(n: int) -> list[str]:
    return [f"name-{i}" for i in range(n)]


def time_add(n_names: int, rounds: int) -> float:
    """Time filling a fresh table with `n_names` distinct strings."""
    names = _names(n_names)

    def fill():
        w = SymbolTable().writer()
        for name in names:
            w.add(name, 0)

    # Warmup
    fill()
    return timeit(fill, number=rounds)


def time_lookups(n_names: int, n_lookups: int) -> tuple[float, float]:
    """Time string -> symbol and symbol -> string lookups on a populated table."""
    tab = SymbolTable()
    w = tab.writer()
    syms = [w.add(name, 0x0001) for name in _names(n_names)]
    r = tab.reader()
    name = f"name-{n_names // 2}"
    sym = syms[n_names // 2]
    # Warmup
    for _ in range(1000):
        r.to_symbol(name)
        r.to_string(sym)
    t_sym = timeit(lambda: r.to_symbol(name), number=n_lookups)
    t_str = timeit(lambda: r.to_string(sym), number=n_lookups)
    return t_sym, t_str


def time_miss(n_lookups: int) -> float:
    r = SymbolTable().reader()
    return timeit(lambda: r.to_string(ZERO_SYMBOL), number=n_lookups)


if __name__ == "__main__":
    print("Benchmark: add 10000 names to a fresh table")
    print(f"  time: {time_add(10000, rounds=20):.6f}s  [rounds=20]")

    t_sym, t_str = time_lookups(10000, n_lookups=100000)
    print("Benchmark: lookups on a 10000 entry table")
    print(f"  to_symbol: {t_sym:.6f}s  |  to_string: {t_str:.6f}s  [lookups=100000]")

    print("Benchmark: lookup miss (ZERO_SYMBOL)")
    print(f"  time: {time_miss(100000):.6f}s  [lookups=100000]")
