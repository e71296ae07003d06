# quantparse.units.lexer

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from quantparse.core.utils import SUPERSCRIPT_CHARS, parse_int


class Tok(Enum):
    symbol = "symbol"
    mul = "mul"
    div = "div"
    exp = "exp"
    integer = "integer"
    supinteger = "supinteger"
    lparen = "lparen"
    rparen = "rparen"


@dataclass(frozen=True, slots=True)
class Token:
    """
    A lexed piece of a unit expression.

    ``integer`` is only set for `Tok.integer` and `Tok.supinteger` tokens, and
    stays ``None`` there when the slice is not a well-formed signed integer.
    """

    type: Tok
    slice: str
    integer: Optional[int] = None


_WHITESPACE = frozenset(" \t")
_MUL_CHARS = frozenset("*.⋅×")
_DIV_CHARS = frozenset("/÷")
_INT_CHARS = frozenset("0123456789-+")
_SUPINT_CHARS = frozenset(SUPERSCRIPT_CHARS)

_SINGLE_CHAR_TOKENS = {"(": Tok.lparen, ")": Tok.rparen, "^": Tok.exp}
for _c in _MUL_CHARS:
    _SINGLE_CHAR_TOKENS[_c] = Tok.mul
for _c in _DIV_CHARS:
    _SINGLE_CHAR_TOKENS[_c] = Tok.div
del _c

_NON_SYMBOL_CHARS = _WHITESPACE | _INT_CHARS | _SUPINT_CHARS | frozenset(_SINGLE_CHAR_TOKENS)


def is_plain_symbol(text: str) -> bool:
    """True if `lex` would read ``text`` back as a single symbol token."""
    return bool(text) and not any(ch in _NON_SYMBOL_CHARS for ch in text)


def lex(text: str) -> List[Token]:
    """
    Split a unit expression into tokens.

    Never raises: whitespace only separates tokens, runs of ASCII digits and
    signs become `Tok.integer`, runs of superscript digits and signs become
    `Tok.supinteger`, and any other run of characters becomes a `Tok.symbol`.
    Malformed integers are reported by the parser when it reads them.
    """
    tokens: List[Token] = []
    state: Optional[Tok] = None  # None, symbol, integer or supinteger
    start = 0

    def flush(end: int) -> None:
        if state is None:
            return
        piece = text[start:end]
        if state is Tok.symbol:
            tokens.append(Token(Tok.symbol, piece))
        else:
            tokens.append(Token(state, piece, parse_int(piece)))

    for pos, ch in enumerate(text):
        if ch in _WHITESPACE:
            flush(pos)
            state, start = None, pos + 1
        elif ch in _SINGLE_CHAR_TOKENS:
            flush(pos)
            tokens.append(Token(_SINGLE_CHAR_TOKENS[ch], ch))
            state, start = None, pos + 1
        elif ch in _INT_CHARS:
            if state is not Tok.integer:
                flush(pos)
                state, start = Tok.integer, pos
        elif ch in _SUPINT_CHARS:
            if state is not Tok.supinteger:
                flush(pos)
                state, start = Tok.supinteger, pos
        else:
            if state is not Tok.symbol:
                flush(pos)
                state, start = Tok.symbol, pos

    flush(len(text))
    return tokens


__all__ = ["Tok", "Token", "lex", "is_plain_symbol"]
