# tests/conftest.py
import pytest

from quantparse.core.quantity import RTQuantity
from quantparse.units.parser import QuantityParser
from quantparse.units.symbols import SymbolList


@pytest.fixture(scope="session")
def si():
    return SymbolList.si_list()

@pytest.fixture
def parser(si):
    return QuantityParser(si)

@pytest.fixture
def toy_symbols():
    """A tiny standalone table: units m, d, cd and prefixes k, c, da."""
    return SymbolList(
        units={
            "m": RTQuantity(1.0, {"m": 1}),
            "d": RTQuantity(86400.0, {"s": 1}),
            "cd": RTQuantity(1.0, {"cd": 1}),
        },
        prefixes={"k": 1e3, "c": 1e-2, "da": 1e1},
    )
