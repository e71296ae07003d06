# quantparse.core.dimensions

from __future__ import annotations

import operator
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, Tuple, Union

from quantparse.core.errors import DimensionError

# --- Public typing -----------------------------------------------------------
DimLike = Union["Dimensions", Mapping[str, int], Iterable[Tuple[str, int]]]

# Base symbols come first when iterating; anything else follows alphabetically.
BASE_SYMBOLS: Tuple[str, ...] = ("m", "kg", "s", "A", "K", "mol", "cd")
_BASE_RANK = {sym: idx for idx, sym in enumerate(BASE_SYMBOLS)}


def _canonical_key(symbol: str) -> Tuple[int, str]:
    return (_BASE_RANK.get(symbol, len(BASE_SYMBOLS)), symbol)


# --- Core object -------------------------------------------------------------

class Dimensions(Mapping):
    """
    Immutable mapping from dimension symbol to a nonzero integer exponent.

    A zero exponent is never stored: the constructor drops it, and every
    operation goes through the constructor. The empty mapping is
    dimensionless. Instances hash and compare by content, and compare equal
    to plain dicts holding the same entries.
    """

    __slots__ = ("_exps", "_hash")

    def __init__(self, data: DimLike = ()) -> None:
        if isinstance(data, Dimensions):
            items: Iterable[Tuple[str, int]] = data._exps.items()
        elif isinstance(data, Mapping):
            items = data.items()
        else:
            items = data

        exps: Dict[str, int] = {}
        for symbol, power in items:
            if not isinstance(symbol, str) or not symbol:
                raise TypeError(f"Dimension symbols must be non-empty strings, got {symbol!r}")
            if isinstance(power, bool):
                raise TypeError(f"Exponent for {symbol!r} must be an int, got bool")
            try:
                power = operator.index(power)
            except TypeError:
                raise TypeError(
                    f"Exponent for {symbol!r} must be an int, got {type(power).__name__}"
                ) from None
            total = exps.get(symbol, 0) + power
            if total == 0:
                exps.pop(symbol, None)
            else:
                exps[symbol] = total

        self._exps: Dict[str, int] = {k: exps[k] for k in sorted(exps, key=_canonical_key)}
        self._hash: int | None = None

    # --- Mapping protocol ---
    def __getitem__(self, symbol: str) -> int:
        return self._exps[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._exps)

    def __len__(self) -> int:
        return len(self._exps)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._exps.items()))
        return self._hash

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Dimensions):
            return self._exps == other._exps
        if isinstance(other, Mapping):
            return self._exps == dict(other.items())
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # --- Algebra (operator overloads) ---
    def __mul__(self, other: DimLike) -> "Dimensions":
        o = other if isinstance(other, Dimensions) else Dimensions(other)
        return Dimensions(list(self._exps.items()) + list(o._exps.items()))

    def __truediv__(self, other: DimLike) -> "Dimensions":
        o = other if isinstance(other, Dimensions) else Dimensions(other)
        return Dimensions(list(self._exps.items()) + [(k, -v) for k, v in o._exps.items()])

    def __pow__(self, n: int, modulo: Any | None = None) -> "Dimensions":
        # three-argument pow() passes a modulo
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Dimensions.")
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Exponent must be int, got {type(n).__name__}")
        if n == 0:
            return DIM_0
        return Dimensions((k, v * n) for k, v in self._exps.items())

    def root(self, n: int) -> "Dimensions":
        """Take the n-th root; every exponent must be divisible by ``n``."""
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Root degree must be int, got {type(n).__name__}")
        if n <= 0:
            raise ValueError(f"Root degree must be positive, got {n}")

        result: Dict[str, int] = {}
        for symbol, power in self._exps.items():
            if power % n != 0:
                raise DimensionError(
                    f"Operation results in a non-integral dimension: {symbol}^{power} has no integral {n}-th root"
                )
            result[symbol] = power // n
        return Dimensions(result)

    # --- Helpers ---
    @property
    def is_dimensionless(self) -> bool:
        return not self._exps

    def as_dict(self) -> Dict[str, int]:
        return dict(self._exps)

    def __repr__(self) -> str:
        return f"Dimensions({self._exps!r})"


# --- Function forms ----------------------------------------------------------

def dim_mul(a: DimLike, b: DimLike) -> Dimensions:
    return Dimensions(a) * b

def dim_div(a: DimLike, b: DimLike) -> Dimensions:
    return Dimensions(a) / b

def dim_pow(a: DimLike, n: int) -> Dimensions:
    return Dimensions(a) ** n

def dim_root(a: DimLike, n: int) -> Dimensions:
    return Dimensions(a).root(n)

# --- Public constants --------------------------------------------------------

DIM_0: Dimensions       = Dimensions()
LENGTH: Dimensions      = Dimensions({"m": 1})
MASS: Dimensions        = Dimensions({"kg": 1})
TIME: Dimensions        = Dimensions({"s": 1})
CURRENT: Dimensions     = Dimensions({"A": 1})
TEMPERATURE: Dimensions = Dimensions({"K": 1})
AMOUNT: Dimensions      = Dimensions({"mol": 1})
LUMINOUS: Dimensions    = Dimensions({"cd": 1})


__all__ = [
    "BASE_SYMBOLS",
    "DimLike",
    "Dimensions",
    "dim_mul",
    "dim_div",
    "dim_pow",
    "dim_root",
    "DIM_0",
    "LENGTH",
    "MASS",
    "TIME",
    "CURRENT",
    "TEMPERATURE",
    "AMOUNT",
    "LUMINOUS",
]
