"""Element symbols, atomic numbers, and covalent radii (Cordero 2008).

The :class:`PeriodicTable` is the default element service used by the
reader and writer.  Any object that provides the two lookups declared
by :class:`ElementService` can be passed in its place.
"""

from __future__ import annotations

from typing import Protocol

# Index is the atomic number; index 0 is the "unknown element" slot.
ELEMENT_SYMBOLS: tuple[str, ...] = (
    "",
    "H", "He",
    "Li", "Be", "B", "C", "N", "O", "F", "Ne",
    "Na", "Mg", "Al", "Si", "P", "S", "Cl", "Ar",
    "K", "Ca", "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn",
    "Ga", "Ge", "As", "Se", "Br", "Kr",
    "Rb", "Sr", "Y", "Zr", "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd",
    "In", "Sn", "Sb", "Te", "I", "Xe",
    "Cs", "Ba",
    "La", "Ce", "Pr", "Nd", "Pm", "Sm", "Eu", "Gd", "Tb", "Dy", "Ho", "Er",
    "Tm", "Yb", "Lu",
    "Hf", "Ta", "W", "Re", "Os", "Ir", "Pt", "Au", "Hg",
    "Tl", "Pb", "Bi", "Po", "At", "Rn",
    "Fr", "Ra",
    "Ac", "Th", "Pa", "U", "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es", "Fm",
    "Md", "No", "Lr",
    "Rf", "Db", "Sg", "Bh", "Hs", "Mt", "Ds", "Rg", "Cn",
    "Nh", "Fl", "Mc", "Lv", "Ts", "Og",
)

MAX_ATOMIC_NUMBER: int = len(ELEMENT_SYMBOLS) - 1

# Covalent radii in angstroms, listed in atomic-number order from H.
# Superheavy elements have no tabulated radius and are left out.
_RADII_BY_NUMBER: tuple[float, ...] = (
    0.31, 0.28,
    1.28, 0.96, 0.84, 0.76, 0.71, 0.66, 0.57, 0.58,
    1.66, 1.41, 1.21, 1.11, 1.07, 1.05, 1.02, 1.06,
    2.03, 1.76, 1.70, 1.60, 1.53, 1.39, 1.39, 1.32, 1.26, 1.24, 1.32, 1.22,
    1.22, 1.20, 1.19, 1.20, 1.20, 1.16,
    2.20, 1.95, 1.90, 1.75, 1.64, 1.54, 1.47, 1.46, 1.42, 1.39, 1.45, 1.44,
    1.42, 1.39, 1.39, 1.38, 1.39, 1.40,
    2.44, 2.15,
    2.07, 2.04, 2.03, 2.01, 1.99, 1.98, 1.98, 1.96, 1.94, 1.92, 1.92, 1.89,
    1.90, 1.87, 1.87,
    1.75, 1.70, 1.62, 1.51, 1.44, 1.41, 1.36, 1.36, 1.32,
    1.45, 1.46, 1.48, 1.40, 1.50, 1.50,
    2.60, 2.21,
    2.15, 2.06, 2.00, 1.96, 1.90, 1.87, 1.80, 1.69, 1.68, 1.68, 1.65, 1.67,
    1.73, 1.76, 1.61,
)

COVALENT_RADII: dict[str, float] = {
    ELEMENT_SYMBOLS[z]: radius
    for z, radius in enumerate(_RADII_BY_NUMBER, start=1)
}
"""Covalent radius in angstroms, keyed by element symbol."""

_NUMBER_BY_SYMBOL: dict[str, int] = {
    symbol.lower(): z for z, symbol in enumerate(ELEMENT_SYMBOLS) if symbol
}


class ElementService(Protocol):
    """Lookups the reader and writer need from a periodic table."""

    def symbol_to_atomic_number(self, symbol: str) -> int:
        """Return the atomic number for *symbol*, or 0 if unknown."""
        ...

    def atomic_number_to_symbol(self, atomic_number: int) -> str:
        """Return the symbol for *atomic_number*, or ``""`` if it has none."""
        ...


class PeriodicTable:
    """Default :class:`ElementService` backed by :data:`ELEMENT_SYMBOLS`.

    Symbol lookup is case-insensitive, so ``"CL"``, ``"cl"`` and
    ``"Cl"`` all resolve to chlorine.
    """

    def symbol_to_atomic_number(self, symbol: str) -> int:
        return _NUMBER_BY_SYMBOL.get(symbol.strip().lower(), 0)

    def atomic_number_to_symbol(self, atomic_number: int) -> str:
        if 0 < atomic_number <= MAX_ATOMIC_NUMBER:
            return ELEMENT_SYMBOLS[atomic_number]
        return ""


PERIODIC_TABLE = PeriodicTable()
"""Shared default element service."""
