import pytest

import quantparse.units.symbols as symmod
from quantparse.units.symbols import SymbolList


@pytest.fixture()
def custom_table():
    return SymbolList.si_list().with_unit("furlong", "201.168 m")


def test__get_default_symbols_returns_si_handle():
    import quantparse.units as units
    get_default = getattr(units, "_get_default_symbols")

    table = get_default()
    assert isinstance(table, SymbolList)
    assert table.shares_default_units
    assert table.shares_default_prefixes


def test_lazy_q_binds_to_default_symbols(monkeypatch, custom_table):
    # Patch the shared table and verify `quantparse.units.q` resolves against it
    _, prefixes_map, max_len = symmod._get_default_tables()
    monkeypatch.setattr(
        symmod,
        "_default_tables",
        (dict(custom_table.units), prefixes_map, max_len),
        raising=True,
    )

    from quantparse.units import q
    assert q.symbols.shares_default_units
    assert q("2 furlong").value_in("m") == pytest.approx(402.336)


def test_q_parses_with_si():
    from quantparse.units import q
    assert q("6.3 L/(mmol*cm)").value == pytest.approx(630.0)


def test_unknown_module_attribute_raises_attributeerror():
    import quantparse.units as units
    with pytest.raises(AttributeError):
        _ = getattr(units, "definitely_not_a_public_attr")


def test_dir_includes_q():
    import quantparse.units as units
    names = dir(units)
    assert "q" in names
    # Should be sorted for better discoverability
    assert names == sorted(names)
