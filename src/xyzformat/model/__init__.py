"""Core data model for xyzformat: atoms, frames, bonds and molecules.

Everything is re-exported here so that ``from xyzformat.model import
Frame`` works without knowing the submodule layout.
"""

from xyzformat.model.atom_record import AtomRecord
from xyzformat.model.bond_spec import Bond, BondSpec
from xyzformat.model.frame import Frame
from xyzformat.model.molecule import Molecule, MoleculeBuilder
from xyzformat.model.snapshot import MoleculeSnapshot

__all__ = [
    "AtomRecord",
    "Bond",
    "BondSpec",
    "Frame",
    "Molecule",
    "MoleculeBuilder",
    "MoleculeSnapshot",
]
