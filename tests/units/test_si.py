import pytest

from quantparse.core.dimensions import DIM_0, Dimensions
from quantparse.units.lexer import is_plain_symbol
from quantparse.units.si import (
    SI_MAX_PREFIX_LENGTH,
    SI_PREFIXES,
    SI_UNITS,
    si_prefixes,
    si_units,
)


def test_base_units_are_coherent():
    for sym, dim in [("m", "m"), ("kg", "kg"), ("s", "s"), ("A", "A"),
                     ("K", "K"), ("mol", "mol"), ("cd", "cd")]:
        q = SI_UNITS[sym]
        assert q.value == 1.0
        assert q.dims == {dim: 1}

@pytest.mark.parametrize("sym,dims", [
    ("N", {"kg": 1, "m": 1, "s": -2}),
    ("Pa", {"kg": 1, "m": -1, "s": -2}),
    ("J", {"kg": 1, "m": 2, "s": -2}),
    ("W", {"kg": 1, "m": 2, "s": -3}),
    ("C", {"A": 1, "s": 1}),
    ("V", {"kg": 1, "m": 2, "s": -3, "A": -1}),
    ("\u03a9", {"kg": 1, "m": 2, "s": -3, "A": -2}),
    ("Hz", {"s": -1}),
    ("kat", {"mol": 1, "s": -1}),
    ("rad", {}),
])
def test_derived_unit_dimensions(sym, dims):
    assert SI_UNITS[sym].dims == Dimensions(dims)

@pytest.mark.parametrize("sym,value", [
    ("g", 1e-3),
    ("min", 60.0),
    ("h", 3600.0),
    ("d", 86400.0),
    ("L", 1e-3),
    ("l", 1e-3),
    ("t", 1e3),
])
def test_accepted_units(sym, value):
    assert SI_UNITS[sym].value == value

def test_prefix_factors():
    assert SI_PREFIXES["k"] == 1e3
    assert SI_PREFIXES["da"] == 1e1
    assert SI_PREFIXES["y"] == 1e-24
    assert SI_PREFIXES["Yi"] == 2.0 ** 80
    assert SI_PREFIXES["\u00b5"] == SI_PREFIXES["\u03bc"] == 1e-6

def test_max_prefix_length():
    assert SI_MAX_PREFIX_LENGTH == max(len(p) for p in SI_PREFIXES) == 2

def test_all_symbols_lex_as_one_token():
    for sym in list(SI_UNITS) + list(SI_PREFIXES):
        assert is_plain_symbol(sym), sym

def test_factories_return_fresh_dicts():
    a = si_units()
    a["furlong"] = SI_UNITS["m"]
    assert "furlong" not in si_units()
    p = si_prefixes()
    p.clear()
    assert si_prefixes()

def test_dimensionless_units():
    assert SI_UNITS["sr"].dims == DIM_0
