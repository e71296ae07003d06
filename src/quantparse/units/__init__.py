from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from quantparse.units.symbols import SymbolList
# Lazy access helpers -------------------------------------------------------

def _get_default_symbols() -> "SymbolList":
    # Import here to avoid import-time side-effects / circular imports.
    from quantparse.units.symbols import SymbolList  # local import
    return SymbolList.si_list()

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'q' builds a parser over the default
    SI symbol table on first use.
    """
    if name == "q":
        from quantparse.units.parser import QuantityParser  # local import
        return QuantityParser(_get_default_symbols())
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["q"])
