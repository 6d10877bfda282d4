"""xyzformat: read and write XYZ chemical coordinate files.

An XYZ file holds an atom count, a comment line, and one
``element x y z`` line per atom.  Further blocks with the same atom
count are read as extra coordinate frames of a trajectory.

Example usage::

    from xyzformat import read_xyz, write_xyz

    snapshot = read_xyz("water.xyz")
    print(snapshot.name, snapshot.n_atoms, snapshot.n_frames)
    write_xyz(snapshot, "copy.xyz")
"""

from xyzformat._constants import DEFAULT_COMMENT, FILE_EXTENSIONS, MIME_TYPES
from xyzformat.bonds import default_bond_specs, perceive_bonds
from xyzformat.elements import (
    COVALENT_RADII,
    ELEMENT_SYMBOLS,
    PERIODIC_TABLE,
    ElementService,
    PeriodicTable,
)
from xyzformat.io import (
    AtomCountMismatchError,
    InvalidAtomError,
    InvalidHeaderError,
    MalformedCoordinateError,
    ParseError,
    TooFewTokensError,
    XyzFormat,
    decode,
    encode,
    read_xyz,
    write_xyz,
)
from xyzformat.model import (
    AtomRecord,
    Bond,
    BondSpec,
    Frame,
    Molecule,
    MoleculeBuilder,
    MoleculeSnapshot,
)
from xyzformat.settings import PerceptionSettings, load_settings, save_settings

__all__ = [
    "AtomCountMismatchError",
    "AtomRecord",
    "Bond",
    "BondSpec",
    "COVALENT_RADII",
    "DEFAULT_COMMENT",
    "ELEMENT_SYMBOLS",
    "ElementService",
    "FILE_EXTENSIONS",
    "Frame",
    "InvalidAtomError",
    "InvalidHeaderError",
    "MIME_TYPES",
    "MalformedCoordinateError",
    "Molecule",
    "MoleculeBuilder",
    "MoleculeSnapshot",
    "PERIODIC_TABLE",
    "ParseError",
    "PerceptionSettings",
    "PeriodicTable",
    "TooFewTokensError",
    "XyzFormat",
    "decode",
    "default_bond_specs",
    "encode",
    "load_settings",
    "perceive_bonds",
    "read_xyz",
    "save_settings",
    "write_xyz",
]
