"""
quantparse.core.kinds
=====================

A thin typed layer over `RTQuantity`.

A `QuantityKind` names a dimension vector known when the program is written
(``LENGTH``, ``SPEED``, ...). Parsing through a kind checks the dimensions of
the result once, up front, and yields a `TypedQuantity` whose kind is fixed:

>>> t = TIME.parse("90 min")
>>> t.value_in("h")
1.5
"""

from __future__ import annotations

from dataclasses import dataclass
from math import isclose
from typing import TYPE_CHECKING, Optional, Union

from quantparse.core.dimensions import (
    AMOUNT as _AMOUNT,
    CURRENT as _CURRENT,
    DIM_0,
    LENGTH as _LENGTH,
    LUMINOUS as _LUMINOUS,
    MASS as _MASS,
    TEMPERATURE as _TEMPERATURE,
    TIME as _TIME,
    Dimensions,
)
from quantparse.core.errors import DimensionError
from quantparse.core.quantity import Number, RTQuantity
from quantparse.core.utils import format_dims

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from quantparse.units.symbols import SymbolList


@dataclass(frozen=True)
class QuantityKind:
    """A named dimension vector, e.g. ``QuantityKind("Speed", {"m": 1, "s": -1})``."""

    name: str
    dims: Dimensions

    def __post_init__(self) -> None:
        if not isinstance(self.dims, Dimensions):
            object.__setattr__(self, "dims", Dimensions(self.dims))

    def check(self, quantity: RTQuantity) -> RTQuantity:
        """Return ``quantity`` unchanged if its dimensions match, else raise."""
        if quantity.dims != self.dims:
            raise DimensionError(
                f"Dimension mismatch: expected {self.name} "
                f"[{format_dims(self.dims, complete=True)}], "
                f"got [{format_dims(quantity.dims, complete=True)}]"
            )
        return quantity

    def from_runtime(self, quantity: RTQuantity) -> "TypedQuantity":
        return TypedQuantity(self, self.check(quantity).value)

    def parse(self, text: str, symbols: "Optional[SymbolList]" = None) -> "TypedQuantity":
        from quantparse.units.parser import parse_rt_quantity  # local import avoids a cycle

        return self.from_runtime(parse_rt_quantity(text, symbols))

    def __call__(
        self, value: Number, unit: "Union[str, RTQuantity, None]" = None,
        symbols: "Optional[SymbolList]" = None,
    ) -> "TypedQuantity":
        """``LENGTH(2.54, "cm")``: a value expressed in ``unit`` (base units when omitted)."""
        if unit is None:
            return TypedQuantity(self, float(value))
        if isinstance(unit, str):
            from quantparse.units.parser import parse_unit  # local import avoids a cycle

            unit = parse_unit(unit, symbols)
        return self.from_runtime(value * unit)

    # --- Deriving kinds ---
    def __mul__(self, other: "QuantityKind") -> "QuantityKind":
        if not isinstance(other, QuantityKind):
            return NotImplemented
        return QuantityKind(f"{self.name}*{other.name}", self.dims * other.dims)

    def __truediv__(self, other: "QuantityKind") -> "QuantityKind":
        if not isinstance(other, QuantityKind):
            return NotImplemented
        return QuantityKind(f"{self.name}/{other.name}", self.dims / other.dims)

    def __pow__(self, n: int) -> "QuantityKind":
        return QuantityKind(f"{self.name}^{n}", self.dims ** n)

    def renamed(self, name: str) -> "QuantityKind":
        return QuantityKind(name, self.dims)


def _kind_for(dims: Dimensions) -> QuantityKind:
    return QuantityKind(format_dims(dims, complete=True), dims)


@dataclass(frozen=True, eq=False)
class TypedQuantity:
    """
    A value in base units whose dimensions are those of ``kind``.

    Same-kind quantities add and compare; multiplication and division derive
    a new kind from the operands' dimensions.
    """

    kind: QuantityKind
    value: float

    @property
    def dims(self) -> Dimensions:
        return self.kind.dims

    def to_runtime(self) -> RTQuantity:
        return RTQuantity(self.value, self.kind.dims)

    def value_in(
        self, unit: "Union[str, RTQuantity, TypedQuantity]", symbols: "Optional[SymbolList]" = None
    ) -> float:
        """Express the quantity as a multiple of ``unit`` (``"L/mmol"``, another quantity...)."""
        if isinstance(unit, TypedQuantity):
            unit = unit.to_runtime()
        return self.to_runtime().value_in(unit, symbols)

    def root(self, n: int) -> "TypedQuantity":
        rt = self.to_runtime().root(n)
        return TypedQuantity(_kind_for(rt.dims), rt.value)

    # --- Arithmetic ---
    def _same_dims(self, other: "TypedQuantity", op: str) -> None:
        if self.dims != other.dims:
            raise DimensionError(
                f"Cannot {op} {self.kind.name} and {other.kind.name}: dimensions differ"
            )

    def __add__(self, other: "TypedQuantity") -> "TypedQuantity":
        if not isinstance(other, TypedQuantity):
            return NotImplemented
        self._same_dims(other, "add")
        return TypedQuantity(self.kind, self.value + other.value)

    def __sub__(self, other: "TypedQuantity") -> "TypedQuantity":
        if not isinstance(other, TypedQuantity):
            return NotImplemented
        self._same_dims(other, "subtract")
        return TypedQuantity(self.kind, self.value - other.value)

    def __neg__(self) -> "TypedQuantity":
        return TypedQuantity(self.kind, -self.value)

    def __mul__(self, other: "TypedQuantity | Number") -> "TypedQuantity":
        if isinstance(other, TypedQuantity):
            dims = self.dims * other.dims
            return TypedQuantity(_kind_for(dims), self.value * other.value)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return TypedQuantity(self.kind, self.value * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> "TypedQuantity":
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return TypedQuantity(self.kind, other * self.value)
        return NotImplemented

    def __truediv__(self, other: "TypedQuantity | Number") -> "TypedQuantity":
        if isinstance(other, TypedQuantity):
            dims = self.dims / other.dims
            return TypedQuantity(_kind_for(dims), self.value / other.value)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return TypedQuantity(self.kind, self.value / other)
        return NotImplemented

    # --- Comparison ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedQuantity):
            return NotImplemented
        return self.dims == other.dims and isclose(self.value, other.value, rel_tol=1e-12, abs_tol=0.0)

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: "TypedQuantity") -> bool:
        if not isinstance(other, TypedQuantity):
            return NotImplemented
        self._same_dims(other, "compare")
        return self.value < other.value and not self == other

    def __le__(self, other: "TypedQuantity") -> bool:
        if not isinstance(other, TypedQuantity):
            return NotImplemented
        self._same_dims(other, "compare")
        return self.value < other.value or self == other

    def __repr__(self) -> str:
        return f"TypedQuantity({self.kind.name}, {self.value!r})"

    def __str__(self) -> str:
        return str(self.to_runtime())


# --- Predefined kinds --------------------------------------------------------

DIMENSIONLESS = QuantityKind("Dimensionless", DIM_0)
LENGTH        = QuantityKind("Length", _LENGTH)
MASS          = QuantityKind("Mass", _MASS)
TIME          = QuantityKind("Time", _TIME)
CURRENT       = QuantityKind("Current", _CURRENT)
TEMPERATURE   = QuantityKind("Temperature", _TEMPERATURE)
AMOUNT        = QuantityKind("Amount", _AMOUNT)
LUMINOUS      = QuantityKind("LuminousIntensity", _LUMINOUS)

AREA          = (LENGTH ** 2).renamed("Area")
VOLUME        = (LENGTH ** 3).renamed("Volume")
SPEED         = (LENGTH / TIME).renamed("Speed")
ACCELERATION  = (SPEED / TIME).renamed("Acceleration")
FORCE         = (MASS * ACCELERATION).renamed("Force")
PRESSURE      = (FORCE / AREA).renamed("Pressure")
ENERGY        = (FORCE * LENGTH).renamed("Energy")
POWER         = (ENERGY / TIME).renamed("Power")
FREQUENCY     = (DIMENSIONLESS / TIME).renamed("Frequency")
CONCENTRATION = (AMOUNT / VOLUME).renamed("Concentration")
MOLAR_ABSORPTIVITY = (AREA / AMOUNT).renamed("MolarAbsorptivity")


__all__ = [
    "QuantityKind",
    "TypedQuantity",
    "DIMENSIONLESS",
    "LENGTH",
    "MASS",
    "TIME",
    "CURRENT",
    "TEMPERATURE",
    "AMOUNT",
    "LUMINOUS",
    "AREA",
    "VOLUME",
    "SPEED",
    "ACCELERATION",
    "FORCE",
    "PRESSURE",
    "ENERGY",
    "POWER",
    "FREQUENCY",
    "CONCENTRATION",
    "MOLAR_ABSORPTIVITY",
]
