"""
quantparse.core.utils
=====================

Small helpers shared by the lexer, the quantity type and the formatters:
superscript translation tables, signed-integer parsing and rendering of
dimension vectors as text (e.g. ``'m^2 mol^-1'`` or ``'m² mol⁻¹'``).
"""

from __future__ import annotations

import re
from typing import List, Mapping, Optional, Pattern

SUPERSCRIPT_CHARS = "⁰¹²³⁴⁵⁶⁷⁸⁹⁺⁻"

_SUPERSCRIPTS = str.maketrans("0123456789+-", SUPERSCRIPT_CHARS)
_FROM_SUPERSCRIPTS = str.maketrans(SUPERSCRIPT_CHARS, "0123456789+-")

# a single optional sign, then digits; nothing else
_INT_RE: Pattern[str] = re.compile(r"[+-]?[0-9]+")


def to_superscript(n: int) -> str:
    return str(n).translate(_SUPERSCRIPTS)


def from_superscript(text: str) -> str:
    """Map superscript digits and signs back to their ASCII equivalents."""
    return text.translate(_FROM_SUPERSCRIPTS)


def parse_int(text: str) -> Optional[int]:
    """
    Parse a signed integer written with ASCII or superscript characters.

    Returns ``None`` when ``text`` is not exactly one optional sign followed
    by digits (``'1-'``, ``'+'`` and ``'--2'`` are all rejected).
    """
    ascii_text = from_superscript(text)
    if not _INT_RE.fullmatch(ascii_text):
        return None
    return int(ascii_text)


def _stringize(symbol: str, power: int, pretty: bool) -> str:
    if power == 1:
        return symbol
    if pretty:
        return symbol + to_superscript(power)
    return f"{symbol}^{power}"


def format_dims(dims: Mapping[str, int], complete: bool = False, pretty: bool = False) -> str:
    """
    Render a dimension vector as space separated ``symbol^power`` terms.

    Parameters
    ----------
    dims : Mapping[str, int]
        The exponents to render. Zero entries are skipped.
    complete : bool
        When True an empty vector renders as ``'scalar'`` instead of ``''``.
    pretty : bool
        Use unicode superscripts (``m²``) instead of ``^`` notation.
    """
    parts: List[str] = [
        _stringize(symbol, power, pretty) for symbol, power in dims.items() if power != 0
    ]
    if not parts:
        return "scalar" if complete else ""
    return " ".join(parts)


__all__ = [
    "SUPERSCRIPT_CHARS",
    "to_superscript",
    "from_superscript",
    "parse_int",
    "format_dims",
]
