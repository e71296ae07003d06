"""
quantparse: parse physical quantities and compound unit expressions.

``"6.3 L/(mmol*cm)"`` becomes a value in base units paired with a dimension
vector, with unit and prefix symbols resolved against a configurable symbol
table (SI by default). This module exposes a minimal, stable public API.
Heavy subsystems (the parser and the default symbol table) are imported
lazily to avoid import-time side effects and circular imports.
"""

import logging
from importlib import metadata as _metadata


__author__ = "quantparse contributors"
__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("quantparse")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Library logging: stay silent unless the application configures handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from quantparse.units.parser import QuantityParser

# name -> module that defines it
_LAZY_EXPORTS = {
    "parse_rt_quantity": "quantparse.units.parser",
    "parse_unit": "quantparse.units.parser",
    "parse_quantity": "quantparse.units.parser",
    "make_parser": "quantparse.units.parser",
    "QuantityParser": "quantparse.units.parser",
    "SymbolList": "quantparse.units.symbols",
    "declare_unit": "quantparse.units.symbols",
    "declare_prefix": "quantparse.units.symbols",
    "RTQuantity": "quantparse.core.quantity",
    "Dimensions": "quantparse.core.dimensions",
    "QuantityKind": "quantparse.core.kinds",
    "TypedQuantity": "quantparse.core.kinds",
    "ParsingError": "quantparse.core.errors",
    "DimensionError": "quantparse.core.errors",
}

# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__author__", "__license__", "q", *_LAZY_EXPORTS]


# Lazy access helpers -------------------------------------------------------

def _get_default_parser() -> "QuantityParser":
    # Import here to avoid import-time side-effects / circular imports.
    from quantparse.units.parser import QuantityParser  # local import
    return QuantityParser()

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'q' returns a parser bound to the
    default SI symbol table; other public names are imported on first use.
    """
    if name == "q":
        return _get_default_parser()
    module_name = _LAZY_EXPORTS.get(name)
    if module_name is not None:
        import importlib
        return getattr(importlib.import_module(module_name), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(set(globals().keys()) | set(__all__))
