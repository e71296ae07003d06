# quantparse.core.errors

from __future__ import annotations

from typing import Iterable, Optional, Tuple


class ParsingError(ValueError):
    """
    Raised when a quantity or unit expression cannot be parsed.

    Covers malformed integers, unexpected tokens and unresolvable symbols.

    Attributes
    ----------
    slice : str | None
        The piece of source text the parser choked on, if any.
    expected : tuple[str, ...]
        Names of the token kinds that would have been accepted at that point.
        Empty when the error is not about an unexpected token.
    """

    def __init__(
        self,
        message: str,
        slice: Optional[str] = None,
        expected: Iterable[str] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.slice = slice
        self.expected: Tuple[str, ...] = tuple(expected)


class DimensionError(ValueError):
    """Raised when an operation would give a non-integral or mismatched dimension."""


__all__ = ["ParsingError", "DimensionError"]
