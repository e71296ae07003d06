"""
quantparse.units.symbols
========================

The symbol table consulted by the parser: unit symbols mapped to runtime
quantities, prefix symbols mapped to multiplicative factors, and the length
of the longest prefix (which bounds the longest-prefix-match search).

Copy-on-write
-------------
The default SI table is built once per process and shared by every
`SymbolList.si_list()` handle. Adding a unit or prefix to a handle first
clones the mapping being changed if it is still the shared one, so the
default table is never mutated. `with_unit` / `with_prefix` go one step
further and leave the receiver untouched, returning a derived table.
"""
from __future__ import annotations

import logging
import threading
import unicodedata
from math import isfinite
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Iterable, Mapping, NamedTuple, Optional, Tuple, Union

from quantparse.core.quantity import RTQuantity
from quantparse.units.lexer import is_plain_symbol
from quantparse.units.si import SI_MAX_PREFIX_LENGTH, si_prefixes, si_units

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from quantparse.core.kinds import TypedQuantity

logger = logging.getLogger(__name__)

UnitLike = Union[RTQuantity, "TypedQuantity", str]


# ---------------------------------------------------------------------------
# Shared default mappings
# ---------------------------------------------------------------------------
_default_lock = threading.Lock()
_default_tables: Optional[Tuple[Dict[str, RTQuantity], Dict[str, float], int]] = None


def _get_default_tables() -> Tuple[Dict[str, RTQuantity], Dict[str, float], int]:
    global _default_tables
    if _default_tables is None:
        with _default_lock:
            if _default_tables is None:
                units, prefixes = si_units(), si_prefixes()
                _default_tables = (units, prefixes, SI_MAX_PREFIX_LENGTH)
                logger.debug(
                    "Built default symbol table: %d units, %d prefixes",
                    len(units),
                    len(prefixes),
                )
    return _default_tables


def _check_symbol(symbol: str, what: str) -> None:
    if not isinstance(symbol, str) or not symbol:
        raise ValueError(f"{what} symbol must be a non-empty string, got {symbol!r}")
    if not is_plain_symbol(symbol):
        raise ValueError(
            f"{what} symbol {symbol!r} contains whitespace, operator, digit or sign characters"
        )


# ---------------------------------------------------------------------------
# Symbol list
# ---------------------------------------------------------------------------
class SymbolList:
    """Units and prefixes known to a parser."""

    __slots__ = ("_units", "_prefixes", "_max_prefix_length")

    def __init__(
        self,
        units: Optional[Mapping[str, RTQuantity]] = None,
        prefixes: Optional[Mapping[str, float]] = None,
        max_prefix_length: Optional[int] = None,
    ) -> None:
        """
        Build a standalone table. Omitted mappings start empty; use
        `SymbolList.si_list()` for the default SI table.
        """
        self._units: Dict[str, RTQuantity] = {}
        self._prefixes: Dict[str, float] = {}
        self._max_prefix_length = 0

        for symbol, unit in (units or {}).items():
            self.add_unit(symbol, unit)
        for symbol, factor in (prefixes or {}).items():
            self.add_prefix(symbol, factor)
        if max_prefix_length is not None:
            if max_prefix_length < self._max_prefix_length:
                raise ValueError(
                    f"max_prefix_length={max_prefix_length} is shorter than the "
                    f"longest prefix ({self._max_prefix_length})"
                )
            self._max_prefix_length = max_prefix_length

    @classmethod
    def si_list(cls) -> "SymbolList":
        """Return a handle on the shared default SI table."""
        units, prefixes, max_len = _get_default_tables()
        handle = cls.__new__(cls)
        handle._units = units
        handle._prefixes = prefixes
        handle._max_prefix_length = max_len
        return handle

    # -------------------------- lookups ------------------------------------
    @property
    def units(self) -> Mapping[str, RTQuantity]:
        return MappingProxyType(self._units)

    @property
    def prefixes(self) -> Mapping[str, float]:
        return MappingProxyType(self._prefixes)

    @property
    def max_prefix_length(self) -> int:
        return self._max_prefix_length

    def unit(self, symbol: str) -> Optional[RTQuantity]:
        return self._units.get(symbol)

    def prefix(self, symbol: str) -> Optional[float]:
        return self._prefixes.get(symbol)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._units or symbol in self._prefixes

    @property
    def shares_default_units(self) -> bool:
        return self._units is _get_default_tables()[0]

    @property
    def shares_default_prefixes(self) -> bool:
        return self._prefixes is _get_default_tables()[1]

    # -------------------------- mutation -----------------------------------
    def add_unit(self, symbol: str, unit: UnitLike) -> None:
        """
        Add (or redefine) a unit in this table.

        ``unit`` may be an `RTQuantity`, a `TypedQuantity`, or a quantity
        string parsed with this table, e.g. ``add_unit("in", "2.54 cm")``.
        """
        symbol = unicodedata.normalize("NFC", symbol) if isinstance(symbol, str) else symbol
        _check_symbol(symbol, "Unit")
        quantity = self._coerce_unit(unit)
        if not (quantity.value > 0 and isfinite(quantity.value)):
            raise ValueError(f"Unit {symbol!r} must have a positive, finite value, got {quantity.value!r}")

        if self.shares_default_units:
            self._units = dict(self._units)
            logger.debug("Cloned default unit table before adding %r", symbol)
        self._units[symbol] = quantity

    def add_prefix(self, symbol: str, factor: float) -> None:
        """Add (or redefine) a prefix; the max prefix length grows if needed."""
        symbol = unicodedata.normalize("NFC", symbol) if isinstance(symbol, str) else symbol
        _check_symbol(symbol, "Prefix")
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            raise TypeError(f"Prefix factor must be a number, got {type(factor).__name__}")
        factor = float(factor)
        if not (factor > 0 and isfinite(factor)):
            raise ValueError(f"Prefix {symbol!r} must have a positive, finite factor, got {factor!r}")

        if self.shares_default_prefixes:
            self._prefixes = dict(self._prefixes)
            logger.debug("Cloned default prefix table before adding %r", symbol)
        self._prefixes[symbol] = factor
        if len(symbol) > self._max_prefix_length:
            self._max_prefix_length = len(symbol)

    # -------------------------- derivation ---------------------------------
    def copy(self) -> "SymbolList":
        """
        Independent table with the same entries. Mappings still shared with
        the default table stay shared (they are copied on write anyway).
        """
        new = type(self).__new__(type(self))
        new._units = self._units if self.shares_default_units else dict(self._units)
        new._prefixes = self._prefixes if self.shares_default_prefixes else dict(self._prefixes)
        new._max_prefix_length = self._max_prefix_length
        return new

    def with_unit(self, symbol: str, unit: UnitLike) -> "SymbolList":
        new = self.copy()
        new.add_unit(symbol, unit)
        return new

    def with_prefix(self, symbol: str, factor: float) -> "SymbolList":
        new = self.copy()
        new.add_prefix(symbol, factor)
        return new

    def extended(self, *declarations: "Declaration") -> "SymbolList":
        """Derive a table with ``declarations`` applied in order."""
        new = self.copy()
        for decl in declarations:
            decl.apply(new)
        return new

    # ------------------------- internals -----------------------------------
    def _coerce_unit(self, unit: UnitLike) -> RTQuantity:
        if isinstance(unit, RTQuantity):
            return unit
        if isinstance(unit, str):
            from quantparse.units.parser import parse_rt_quantity  # local import avoids a cycle

            return parse_rt_quantity(unit, self)
        to_runtime = getattr(unit, "to_runtime", None)
        if callable(to_runtime):
            return to_runtime()
        raise TypeError(f"Cannot use {type(unit).__name__} as a unit definition")

    def __repr__(self) -> str:
        return (
            f"SymbolList(units={len(self._units)}, prefixes={len(self._prefixes)}, "
            f"max_prefix_length={self._max_prefix_length})"
        )


# ---------------------------------------------------------------------------
# Declarations (for building tables from a list of additions)
# ---------------------------------------------------------------------------
class UnitDeclaration(NamedTuple):
    symbol: str
    unit: UnitLike

    def apply(self, symbols: SymbolList) -> None:
        symbols.add_unit(self.symbol, self.unit)


class PrefixDeclaration(NamedTuple):
    symbol: str
    factor: float

    def apply(self, symbols: SymbolList) -> None:
        symbols.add_prefix(self.symbol, self.factor)


Declaration = Union[UnitDeclaration, PrefixDeclaration]


def declare_unit(symbol: str, unit: UnitLike) -> UnitDeclaration:
    return UnitDeclaration(symbol, unit)


def declare_prefix(symbol: str, factor: float) -> PrefixDeclaration:
    return PrefixDeclaration(symbol, factor)


def build_symbols(declarations: Iterable[Declaration], base: Optional[SymbolList] = None) -> SymbolList:
    """Apply ``declarations`` on top of ``base`` (the SI table by default)."""
    return (base if base is not None else SymbolList.si_list()).extended(*declarations)


__all__ = [
    "SymbolList",
    "UnitDeclaration",
    "PrefixDeclaration",
    "Declaration",
    "declare_unit",
    "declare_prefix",
    "build_symbols",
]
