"""
quantparse.units.parser
=======================

Parse quantity strings such as ``"6.3 L/(mmol*cm)"`` or ``"1 kg m^-1 s^-2"``
into an `RTQuantity`.

Grammar (whitespace is not significant)::

    Quantity      := Number? CompoundUnit?
    CompoundUnit  := ExponentUnit ( (MulOp | DivOp)? ExponentUnit )*
    ExponentUnit  := Unit ( '^'? (Integer | SupInteger) )?
    Unit          := '(' CompoundUnit ')' | PrefixUnit
    PrefixUnit    := Symbol
    MulOp         := '*' | '.' | '⋅' | '×'
    DivOp         := '/' | '÷'

Examples::

    "1 mm"         1 millimeter (prefixes and symbols must be joined)
    "1 m m"        1 square meter
    "1 cd"         1 candela, not 1 centiday (standalone units win)
    "1 m^2", "1 m²"
    "1 N m", "1 N.m", "1 N⋅m", "1 N*m", "1 N×m"
    "1 mol/s", "1 mol÷s"
    "1 kg/(m.s^2)" = 1 kg m⁻¹ s⁻²

Multiplication and division are left associative: ``"L/mmol/cm"`` reads
``(L/mmol)/cm``.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from typing import TYPE_CHECKING, NamedTuple, Optional, Sequence, Tuple

from quantparse.core.errors import ParsingError
from quantparse.core.quantity import RTQuantity
from quantparse.units.lexer import Tok, Token, lex
from quantparse.units.symbols import Declaration, SymbolList, build_symbols

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from quantparse.core.kinds import QuantityKind, TypedQuantity

logger = logging.getLogger(__name__)

Tokens = Sequence[Token]

# Leading real number: optional sign, digits with optional fraction (or a bare
# fraction), optional exponent. ASCII digits only.
_NUMBER_RE = re.compile(
    r"\s*(?P<num>[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


class NumberSplit(NamedTuple):
    """Leading number of a quantity string; ``value`` is None when absent."""

    value: Optional[float]
    rest: str


def split_number(text: str) -> NumberSplit:
    m = _NUMBER_RE.match(text)
    if m is None:
        return NumberSplit(None, text)
    return NumberSplit(float(m.group("num")), text[m.end():])


# ---------------- token cursor helpers ----------------
def _describe(types: Sequence[Tok]) -> str:
    if len(types) == 1:
        return types[0].value
    return "one of [" + ", ".join(t.value for t in types) + "]"


def _check(tokens: Tokens, pos: int, *types: Tok) -> Token:
    """Return the token at ``pos``, failing if there is none or it has the wrong type."""
    if pos >= len(tokens):
        raise ParsingError("Unexpected end of input", expected=[t.value for t in types])
    token = tokens[pos]
    if types and token.type not in types:
        raise ParsingError(
            f"Found '{token.slice}' while expecting {_describe(types)}",
            slice=token.slice,
            expected=[t.value for t in types],
        )
    return token


def _advance(tokens: Tokens, pos: int, *types: Tok) -> int:
    """Step past the token at ``pos``; with ``types``, check the next one too."""
    if pos >= len(tokens):
        raise ParsingError("Unexpected end of input")
    pos += 1
    if types:
        _check(tokens, pos, *types)
    return pos


# ---------------- recursive descent ----------------
class QuantityParser:
    """
    Recursive-descent parser bound to a `SymbolList`.

    Every ``parse_*`` rule takes the token list and a cursor position and
    returns ``(result, new_position)``. There is no backtracking: the first
    unexpected token raises `ParsingError`.

    Instances are callable: ``parser("2.54 cm")`` is ``parser.parse("2.54 cm")``.
    """

    def __init__(self, symbols: Optional[SymbolList] = None) -> None:
        self.symbols = symbols if symbols is not None else SymbolList.si_list()

    # -------------------------- entry points -------------------------------
    def parse(self, text: str) -> RTQuantity:
        """Parse a quantity: an optional leading number and an optional unit expression."""
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")

        value, rest = split_number(text)
        if value is None:
            value = 1.0

        # only space and tab separate tokens
        if not rest.strip(" \t"):
            result = RTQuantity.scalar(value)
        else:
            result = value * self.parse_expression(rest)

        logger.debug("Parsed %r -> %r", text, result)
        return result

    __call__ = parse

    def parse_unit(self, text: str) -> RTQuantity:
        """Parse a unit expression with no leading number (``"km/h"``)."""
        return self.parse("1 " + text)

    def parse_quantity(self, kind: "QuantityKind", text: str) -> "TypedQuantity":
        return kind.parse(text, self.symbols)

    def parse_expression(self, text: str) -> RTQuantity:
        """NFC-normalise and lex ``text``, then parse all of it as a `CompoundUnit`."""
        tokens = lex(unicodedata.normalize("NFC", text))
        result, _ = self.parse_compound_unit(tokens, 0)
        return result

    # -------------------------- grammar rules ------------------------------
    # CompoundUnit := ExponentUnit ( (MulOp | DivOp)? ExponentUnit )*
    def parse_compound_unit(
        self, tokens: Tokens, pos: int, in_parens: bool = False
    ) -> Tuple[RTQuantity, int]:
        result, pos = self.parse_exponent_unit(tokens, pos)

        while pos < len(tokens):
            cur = tokens[pos]
            if in_parens and cur.type is Tok.rparen:
                break

            multiply = cur.type is not Tok.div
            if cur.type is Tok.mul or cur.type is Tok.div:
                pos = _advance(tokens, pos)
                _check(tokens, pos)

            rhs, pos = self.parse_exponent_unit(tokens, pos)
            result = result * rhs if multiply else result / rhs

        return result, pos

    # ExponentUnit := Unit ( '^'? (Integer | SupInteger) )?
    def parse_exponent_unit(self, tokens: Tokens, pos: int) -> Tuple[RTQuantity, int]:
        result, pos = self.parse_unit_rule(tokens, pos)
        if pos >= len(tokens):
            return result, pos

        nxt = tokens[pos]
        if nxt.type is not Tok.exp and nxt.type is not Tok.supinteger:
            return result, pos

        if nxt.type is Tok.exp:
            pos = _advance(tokens, pos, Tok.integer)

        n, pos = self.parse_integer(tokens, pos)
        return result ** n, pos

    def parse_integer(self, tokens: Tokens, pos: int) -> Tuple[int, int]:
        token = _check(tokens, pos, Tok.integer, Tok.supinteger)
        if token.integer is None:
            raise ParsingError(f"Unexpected integer format: {token.slice}", slice=token.slice)
        return token.integer, pos + 1

    # Unit := '(' CompoundUnit ')' | PrefixUnit
    def parse_unit_rule(self, tokens: Tokens, pos: int) -> Tuple[RTQuantity, int]:
        token = _check(tokens, pos)
        if token.type is Tok.lparen:
            result, pos = self.parse_compound_unit(tokens, pos + 1, in_parens=True)
            _check(tokens, pos, Tok.rparen)
            return result, pos + 1
        return self.parse_prefix_unit(tokens, pos)

    # PrefixUnit := Symbol
    def parse_prefix_unit(self, tokens: Tokens, pos: int) -> Tuple[RTQuantity, int]:
        token = _check(tokens, pos, Tok.symbol)
        return self.resolve_symbol(token.slice), pos + 1

    # -------------------------- symbol resolution --------------------------
    def resolve_symbol(self, symbol: str) -> RTQuantity:
        """
        Resolve a unit symbol, possibly prefixed.

        An exact unit match always wins (``"cd"`` is the candela, not a
        centi-day). Otherwise prefixes are tried longest first; a matching
        prefix must be followed by a known unit symbol, else the next shorter
        prefix is tried.
        """
        symbols = self.symbols
        unit = symbols.unit(symbol)
        if unit is not None:
            return unit

        for length in range(min(symbols.max_prefix_length, len(symbol)), 0, -1):
            prefix = symbol[:length]
            factor = symbols.prefix(prefix)
            if factor is None:
                continue
            rest = symbol[length:]
            if not rest:
                raise ParsingError(f"Expecting a unit after the prefix {prefix}", slice=symbol)
            unit = symbols.unit(rest)
            if unit is not None:
                logger.debug("Resolved %r as prefix %r + unit %r", symbol, prefix, rest)
                return RTQuantity(factor * unit.value, unit.dims)

        raise ParsingError(f"Unknown unit symbol: '{symbol}'", slice=symbol)


# ---------------- Public API ----------------
def parse_rt_quantity(text: str, symbols: Optional[SymbolList] = None) -> RTQuantity:
    """
    Parse a quantity string into an `RTQuantity`.

    The leading number defaults to 1 when absent; with no unit expression the
    result is dimensionless.
    """
    return QuantityParser(symbols).parse(text)


def parse_unit(text: str, symbols: Optional[SymbolList] = None) -> RTQuantity:
    """Parse a unit expression alone (``"µmol/L"``)."""
    return QuantityParser(symbols).parse_unit(text)


def parse_quantity(kind: "QuantityKind", text: str, symbols: Optional[SymbolList] = None) -> "TypedQuantity":
    """Parse ``text`` and check it against the dimensions of ``kind``."""
    return kind.parse(text, symbols)


def make_parser(*declarations: Declaration) -> QuantityParser:
    """
    Build a parser for the SI table extended with ``declarations``.

    Declarations are applied in order, so a unit may be defined in terms of
    units declared before it::

        sz = make_parser(
            declare_unit("bit", RTQuantity(1.0, {"bit": 1})),
            declare_unit("B", "8 bit"),
            declare_prefix("hob", 7),
        )
        sz("1 MiB").value_in("bit")  # 8388608.0
    """
    return QuantityParser(build_symbols(declarations))


__all__ = [
    "NumberSplit",
    "split_number",
    "QuantityParser",
    "parse_rt_quantity",
    "parse_unit",
    "parse_quantity",
    "make_parser",
]
