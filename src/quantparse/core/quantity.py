"""
quantparse.core.quantity
========================

Defines `RTQuantity`, a numeric value paired with a dimension vector whose
dimensions are only known at run time (typically the result of parsing a
string such as ``"6.3 L/(mmol*cm)"``).

The value is always expressed in the coherent base units of the dimension
symbols it carries, so two quantities with equal dimensions can be compared
or converted by plain division.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import copysign, inf, isclose, isfinite
from typing import TYPE_CHECKING, Tuple, Union

from quantparse.core.dimensions import DIM_0, Dimensions, DimLike
from quantparse.core.errors import DimensionError
from quantparse.core.utils import format_dims

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from quantparse.units.symbols import SymbolList

Number = Union[int, float]

_REL_TOL = 1e-12


@dataclass(frozen=True, slots=True, eq=False)
class RTQuantity:
    """
    Runtime quantity: a value in base units plus its dimension vector.

    Equality requires identical dimensions and values equal within a relative
    tolerance of 1e-12, so instances are not hashable; use `as_key` to get a
    hashable, rounded key.
    """

    value: float
    dims: Dimensions = DIM_0

    def __post_init__(self) -> None:
        if not isinstance(self.dims, Dimensions):
            object.__setattr__(self, "dims", Dimensions(self.dims))
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def scalar(cls, value: Number) -> "RTQuantity":
        return cls(float(value), DIM_0)

    @classmethod
    def make(cls, value: Number, dims: DimLike) -> "RTQuantity":
        return cls(float(value), Dimensions(dims))

    @property
    def is_dimensionless(self) -> bool:
        return self.dims.is_dimensionless

    # --- Comparison ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RTQuantity):
            return NotImplemented
        return self.dims == other.dims and isclose(
            self.value, other.value, rel_tol=_REL_TOL, abs_tol=0.0
        )

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, RTQuantity):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def as_key(self, precision: int = 12) -> Tuple[Dimensions, float]:
        """
        Return a hashable ``(dims, rounded_value)`` key.

        ``__eq__`` is tolerant, so ``__hash__`` is disabled; round explicitly
        to the precision you need before using quantities as dict keys.
        """
        rounded = round(self.value, precision)
        # -0.0 and 0.0 round identically but are distinct keys otherwise
        if rounded == 0.0:
            rounded = 0.0
        return (self.dims, rounded)

    # --- Arithmetic ---
    def __mul__(self, other: "RTQuantity | Number") -> "RTQuantity":
        if isinstance(other, RTQuantity):
            return RTQuantity(self.value * other.value, self.dims * other.dims)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return RTQuantity(self.value * other, self.dims)
        return NotImplemented

    def __rmul__(self, other: Number) -> "RTQuantity":
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return RTQuantity(other * self.value, self.dims)
        return NotImplemented

    def __truediv__(self, other: "RTQuantity | Number") -> "RTQuantity":
        if isinstance(other, RTQuantity):
            return RTQuantity(self.value / other.value, self.dims / other.dims)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return RTQuantity(self.value / other, self.dims)
        return NotImplemented

    def __rtruediv__(self, other: Number) -> "RTQuantity":
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return RTQuantity(other / self.value, DIM_0 / self.dims)
        return NotImplemented

    def __pow__(self, n: int) -> "RTQuantity":
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Exponent must be int, got {type(n).__name__}")
        if n == 0:
            return RTQuantity(1.0, DIM_0)
        try:
            value = self.value ** n
        except OverflowError:
            # saturate like float multiplication does
            value = copysign(inf, self.value) if n % 2 else inf
        return RTQuantity(value, self.dims ** n)

    def root(self, n: int) -> "RTQuantity":
        """
        Take the n-th root of the quantity.

        Raises
        ------
        DimensionError
            If any exponent of ``dims`` is not divisible by ``n``.
        ValueError
            If ``n`` is not positive, or an even root of a negative value is asked for.
        """
        new_dims = self.dims.root(n)
        if self.value < 0:
            if n % 2 == 0:
                raise ValueError(f"Cannot take an even root ({n}) of a negative value")
            return RTQuantity(-((-self.value) ** (1.0 / n)), new_dims)
        return RTQuantity(self.value ** (1.0 / n), new_dims)

    # --- Conversion ---
    def value_in(self, target: "RTQuantity | str", symbols: "SymbolList | None" = None) -> float:
        """
        Express this quantity as a multiple of ``target``.

        ``target`` may be another quantity or a unit expression such as
        ``"L/mmol"`` (parsed with ``symbols``, or the SI table when omitted).
        """
        if isinstance(target, str):
            from quantparse.units.parser import parse_unit  # local import avoids a cycle

            target = parse_unit(target, symbols)

        if target.dims != self.dims:
            raise DimensionError(
                f"Dimension mismatch in conversion: "
                f"[{format_dims(self.dims, complete=True)}] vs [{format_dims(target.dims, complete=True)}]"
            )
        if target.value == 0.0 or not isfinite(target.value):
            raise ValueError(f"Cannot convert to a unit with value {target.value!r}")
        return self.value / target.value

    # --- Display ---
    def __repr__(self) -> str:
        return f"RTQuantity({self.value!r}, {self.dims.as_dict()!r})"

    def __str__(self) -> str:
        dims = format_dims(self.dims)
        return f"{self.value:.15g}" if not dims else f"{self.value:.15g} {dims}"

    def __format__(self, spec: str) -> str:
        """
        Format the quantity.

        Supported specifiers
        --------------------
        "" (empty)
            Same as ``str(q)``: ``'0.001 m^3'``.
        "pretty"
            Unicode superscript exponents: ``'0.001 m³'``.
        """
        spec = (spec or "").strip().lower()
        if spec == "":
            return str(self)
        if spec == "pretty":
            dims = format_dims(self.dims, pretty=True)
            return f"{self.value:.15g}" if not dims else f"{self.value:.15g} {dims}"
        raise ValueError("Unknown format spec; use '' or 'pretty'")


__all__ = ["RTQuantity", "Number"]
