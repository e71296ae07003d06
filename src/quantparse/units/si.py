"""
quantparse.units.si
===================

Symbols of the SI base and derived units, a few non-SI units accepted for
use with the SI, and the SI (decimal) and IEC (binary) prefixes.

This module is pure data: `SymbolList` turns it into the process-wide
default symbol table.
"""
from __future__ import annotations

from typing import Dict, Mapping

from quantparse.core.dimensions import (
    AMOUNT,
    CURRENT,
    DIM_0,
    LENGTH,
    LUMINOUS,
    MASS,
    TEMPERATURE,
    TIME,
    dim_div,
    dim_mul,
    dim_pow,
)
from quantparse.core.quantity import RTQuantity

# --- Helpful composite dimensions (readable + reuse) ---
FORCE        = dim_mul(MASS, dim_div(LENGTH, dim_pow(TIME, 2)))              # N
PRESSURE     = dim_div(FORCE, dim_pow(LENGTH, 2))                             # Pa
ENERGY       = dim_mul(FORCE, LENGTH)                                         # J
POWER        = dim_div(ENERGY, TIME)                                          # W
CHARGE       = dim_mul(CURRENT, TIME)                                         # C
VOLTAGE      = dim_div(POWER, CURRENT)                                        # V
CAPACITANCE  = dim_div(CHARGE, VOLTAGE)                                       # F
RESISTANCE   = dim_div(VOLTAGE, CURRENT)                                      # Ω
CONDUCTANCE  = dim_div(CURRENT, VOLTAGE)                                      # S
FLUX         = dim_mul(VOLTAGE, TIME)                                         # Wb
FLUX_DENSITY = dim_div(FLUX, dim_pow(LENGTH, 2))                              # T (tesla)
INDUCTANCE   = dim_div(FLUX, CURRENT)                                         # H
LUMEN        = LUMINOUS                                                       # lm = cd·sr, sr ≡ dimensionless
LUX          = dim_div(LUMEN, dim_pow(LENGTH, 2))                             # lx
FREQUENCY    = dim_pow(TIME, -1)                                              # Hz, Bq
DOSE         = dim_div(ENERGY, MASS)                                          # Gy, Sv
CATALYTIC    = dim_div(AMOUNT, TIME)                                          # kat
VOLUME       = dim_pow(LENGTH, 3)                                             # L

ELECTRON_VOLT = 1.602176634e-19   # J, exact since the 2019 SI redefinition
DALTON        = 1.66053906660e-27 # kg, CODATA 2018

# (symbol, value in base units, dims)
_UNIT_DEFINITIONS = (
    # Base SI units
    ("m",   1.0,  LENGTH),
    ("kg",  1.0,  MASS),
    ("s",   1.0,  TIME),
    ("A",   1.0,  CURRENT),
    ("K",   1.0,  TEMPERATURE),
    ("mol", 1.0,  AMOUNT),
    ("cd",  1.0,  LUMINOUS),

    # Named, dimensionless
    ("rad", 1.0,  DIM_0),
    ("sr",  1.0,  DIM_0),

    # Derived
    ("Hz",  1.0,  FREQUENCY),
    ("N",   1.0,  FORCE),
    ("Pa",  1.0,  PRESSURE),
    ("J",   1.0,  ENERGY),
    ("W",   1.0,  POWER),
    ("C",   1.0,  CHARGE),
    ("V",   1.0,  VOLTAGE),
    ("F",   1.0,  CAPACITANCE),
    ("Ω",   1.0,  RESISTANCE),
    ("S",   1.0,  CONDUCTANCE),
    ("Wb",  1.0,  FLUX),
    ("T",   1.0,  FLUX_DENSITY),
    ("H",   1.0,  INDUCTANCE),
    ("lm",  1.0,  LUMEN),
    ("lx",  1.0,  LUX),
    ("Bq",  1.0,  FREQUENCY),
    ("Gy",  1.0,  DOSE),
    ("Sv",  1.0,  DOSE),
    ("kat", 1.0,  CATALYTIC),

    # Accepted for use with the SI
    ("g",   1e-3,               MASS),     # gram
    ("min", 60.0,               TIME),     # minute
    ("h",   60.0 * 60.0,        TIME),     # hour
    ("d",   24.0 * 60.0 * 60.0, TIME),     # day
    ("l",   1e-3,               VOLUME),   # liter
    ("L",   1e-3,               VOLUME),   # liter
    ("t",   1e3,                MASS),     # tonne
    ("eV",  ELECTRON_VOLT,      ENERGY),   # electronvolt
    ("Da",  DALTON,             MASS),     # dalton
)

SI_UNITS: Mapping[str, RTQuantity] = {
    sym: RTQuantity(value, dims) for sym, value, dims in _UNIT_DEFINITIONS
}

SI_PREFIXES: Mapping[str, float] = {
    "Y":  1e24,
    "Z":  1e21,
    "E":  1e18,
    "P":  1e15,
    "T":  1e12,
    "G":  1e9,
    "M":  1e6,
    "k":  1e3,
    "h":  1e2,
    "da": 1e1,
    "d":  1e-1,
    "c":  1e-2,
    "m":  1e-3,
    "µ":  1e-6,   # U+00B5 MICRO SIGN
    "μ":  1e-6,   # U+03BC GREEK SMALL LETTER MU
    "n":  1e-9,
    "p":  1e-12,
    "f":  1e-15,
    "a":  1e-18,
    "z":  1e-21,
    "y":  1e-24,

    # Binary (IEC) prefixes
    "Yi": 2.0 ** 80,
    "Zi": 2.0 ** 70,
    "Ei": 2.0 ** 60,
    "Pi": 2.0 ** 50,
    "Ti": 2.0 ** 40,
    "Gi": 2.0 ** 30,
    "Mi": 2.0 ** 20,
    "Ki": 2.0 ** 10,
}

SI_MAX_PREFIX_LENGTH: int = max(len(p) for p in SI_PREFIXES)


def si_units() -> Dict[str, RTQuantity]:
    """Fresh copy of the SI unit definitions."""
    return dict(SI_UNITS)


def si_prefixes() -> Dict[str, float]:
    """Fresh copy of the SI prefix factors."""
    return dict(SI_PREFIXES)


__all__ = [
    "SI_UNITS",
    "SI_PREFIXES",
    "SI_MAX_PREFIX_LENGTH",
    "si_units",
    "si_prefixes",
]
