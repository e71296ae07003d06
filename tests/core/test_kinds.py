import pytest

from quantparse.core.dimensions import Dimensions
from quantparse.core.errors import DimensionError
from quantparse.core.kinds import (
    AREA,
    CONCENTRATION,
    DIMENSIONLESS,
    ENERGY,
    FORCE,
    FREQUENCY,
    LENGTH,
    MASS,
    MOLAR_ABSORPTIVITY,
    POWER,
    PRESSURE,
    SPEED,
    TIME,
    VOLUME,
    QuantityKind,
    TypedQuantity,
)
from quantparse.core.quantity import RTQuantity


@pytest.mark.parametrize("kind,dims", [
    (DIMENSIONLESS, {}),
    (AREA, {"m": 2}),
    (VOLUME, {"m": 3}),
    (SPEED, {"m": 1, "s": -1}),
    (FORCE, {"kg": 1, "m": 1, "s": -2}),
    (PRESSURE, {"kg": 1, "m": -1, "s": -2}),
    (ENERGY, {"kg": 1, "m": 2, "s": -2}),
    (POWER, {"kg": 1, "m": 2, "s": -3}),
    (FREQUENCY, {"s": -1}),
    (CONCENTRATION, {"mol": 1, "m": -3}),
    (MOLAR_ABSORPTIVITY, {"m": 2, "mol": -1}),
])
def test_predefined_kinds(kind, dims):
    assert kind.dims == dims

def test_kind_algebra_names():
    assert (LENGTH / TIME).name == "Length/Time"
    assert (LENGTH * MASS).name == "Length*Mass"
    assert (LENGTH ** 2).name == "Length^2"
    assert SPEED.name == "Speed"

def test_kind_coerces_plain_mapping():
    k = QuantityKind("Jerk", {"m": 1, "s": -3})
    assert isinstance(k.dims, Dimensions)

def test_check_passes_and_fails():
    q = RTQuantity(3.0, {"m": 1})
    assert LENGTH.check(q) is q
    with pytest.raises(DimensionError, match=r"expected Time \[s\], got \[m\]"):
        TIME.check(q)

def test_parse_through_kind(si):
    t = TIME.parse("90 min", si)
    assert isinstance(t, TypedQuantity)
    assert t.kind is TIME
    assert t.value == pytest.approx(5400.0)
    assert t.value_in("h") == pytest.approx(1.5)

def test_parse_through_kind_rejects_wrong_dims():
    with pytest.raises(DimensionError, match="Dimension mismatch"):
        SPEED.parse("3 m")

def test_call_with_unit():
    assert LENGTH(2.54, "cm").value == pytest.approx(0.0254)
    assert LENGTH(3).value == 3.0
    with pytest.raises(DimensionError):
        LENGTH(1, "s")

def test_typed_addition_and_subtraction():
    a = LENGTH(1, "m")
    b = LENGTH(50, "cm")
    assert (a + b).value == pytest.approx(1.5)
    assert (a - b).value == pytest.approx(0.5)
    assert (-a).value == -1.0
    assert (a + b).kind is LENGTH

def test_typed_addition_requires_same_dims():
    with pytest.raises(DimensionError, match="Cannot add Length and Time"):
        LENGTH(1) + TIME(1)

def test_typed_product_derives_kind():
    d = LENGTH(10, "m")
    t = TIME(2, "s")
    v = d / t
    assert v.dims == SPEED.dims
    assert v.value == pytest.approx(5.0)
    assert (d * d).dims == AREA.dims
    assert (2 * d).kind is LENGTH
    assert (d / 2).value == pytest.approx(5.0)

def test_typed_root():
    side = AREA(9.0).root(2)
    assert side.dims == LENGTH.dims
    assert side.value == pytest.approx(3.0)

def test_typed_comparison():
    assert LENGTH(1, "m") == LENGTH(100, "cm")
    assert LENGTH(1, "cm") < LENGTH(1, "m")
    assert LENGTH(1, "m") <= LENGTH(100, "cm")
    assert not LENGTH(1, "m") < LENGTH(100, "cm")
    with pytest.raises(DimensionError):
        LENGTH(1) < TIME(1)

def test_typed_quantity_is_unhashable():
    with pytest.raises(TypeError):
        hash(LENGTH(1))

def test_typed_to_runtime_and_str():
    q = CONCENTRATION(2.0)
    assert q.to_runtime() == RTQuantity(2.0, {"mol": 1, "m": -3})
    assert str(q) == "2 m^-3 mol"
    assert repr(q) == "TypedQuantity(Concentration, 2.0)"
