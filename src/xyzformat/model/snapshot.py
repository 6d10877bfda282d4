from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from xyzformat.elements import PERIODIC_TABLE, ElementService
from xyzformat.model.atom_record import AtomRecord
from xyzformat.model.bond_spec import Bond
from xyzformat.model.frame import Frame

if TYPE_CHECKING:
    from pymatgen.core import Molecule as PymatgenMolecule


@dataclass
class MoleculeSnapshot:
    """One molecule with its initial geometry and any extra coordinate frames.

    Attributes:
        atoms: Atom records for frame 0, in file order.  The element
            and index of each atom are fixed across all frames.
        name: Free-text name read from (or written to) the comment
            line.  Empty means "no name".
        frames: Additional frames only (frame 1, 2, ...).  Frame 0
            positions live on :attr:`atoms`.
        bonds: Bonds perceived from the frame 0 geometry.

    Raises:
        ValueError: If any additional frame has a different number of
            atoms to *atoms*.
    """

    atoms: list[AtomRecord]
    name: str = ""
    frames: list[Frame] = field(default_factory=list)
    bonds: list[Bond] = field(default_factory=list)

    def __post_init__(self) -> None:
        n_atoms = len(self.atoms)
        for i, frame in enumerate(self.frames, start=1):
            if frame.n_atoms != n_atoms:
                raise ValueError(
                    f"snapshot has {n_atoms} atoms but frame {i} has "
                    f"{frame.n_atoms}"
                )

    @property
    def n_atoms(self) -> int:
        """Number of atoms."""
        return len(self.atoms)

    @property
    def n_frames(self) -> int:
        """Total number of coordinate frames, counting frame 0."""
        return 1 + len(self.frames)

    @property
    def atomic_numbers(self) -> list[int]:
        """Atomic number of each atom, in order."""
        return [atom.atomic_number for atom in self.atoms]

    @property
    def symbols(self) -> list[str]:
        """Element symbol of each atom (``""`` for unknown elements)."""
        return self.element_symbols()

    def element_symbols(
        self,
        elements: ElementService | None = None,
    ) -> list[str]:
        """Return the element symbol of each atom from *elements*.

        Args:
            elements: Element service used to name atoms.  Defaults to
                the built-in periodic table.
        """
        if elements is None:
            elements = PERIODIC_TABLE
        return [
            elements.atomic_number_to_symbol(z) for z in self.atomic_numbers
        ]

    @property
    def coords(self) -> np.ndarray:
        """Frame 0 coordinates, shape ``(n_atoms, 3)``."""
        if not self.atoms:
            return np.zeros((0, 3))
        return np.array([atom.position for atom in self.atoms])

    def positions(self, frame_index: int = 0) -> np.ndarray:
        """Return the coordinates of one frame.

        Args:
            frame_index: ``0`` for the initial geometry, ``k >= 1`` for
                the *k*-th additional frame.

        Returns:
            Coordinates array of shape ``(n_atoms, 3)``.

        Raises:
            IndexError: If *frame_index* is out of range.
        """
        if frame_index == 0:
            return self.coords
        if not 0 < frame_index <= len(self.frames):
            raise IndexError(
                f"frame_index {frame_index} out of range for snapshot "
                f"with {self.n_frames} frame(s)"
            )
        return self.frames[frame_index - 1].coords

    def to_pymatgen(
        self,
        frame_index: int = 0,
        elements: ElementService | None = None,
    ) -> PymatgenMolecule:
        """Convert one frame to a pymatgen ``Molecule``.

        Args:
            frame_index: Which frame's coordinates to use.
            elements: Element service used to name atoms.  Defaults to
                the built-in periodic table.

        Returns:
            A pymatgen ``Molecule`` with one site per atom.

        Raises:
            ImportError: If pymatgen is not installed.
            ValueError: If any atom has an unknown element.
        """
        try:
            from pymatgen.core import Molecule
        except ImportError:
            raise ImportError(
                "pymatgen is required for to_pymatgen(). "
                "Install it with: pip install pymatgen"
            )

        symbols = self.element_symbols(elements)
        if "" in symbols:
            index = symbols.index("")
            raise ValueError(
                f"atom {index} has no element symbol and cannot be "
                f"converted to pymatgen"
            )
        return Molecule(symbols, self.positions(frame_index))

    @classmethod
    def from_pymatgen(
        cls,
        molecule: PymatgenMolecule,
        name: str = "",
    ) -> MoleculeSnapshot:
        """Create a snapshot from a pymatgen ``Molecule``.

        Only element and Cartesian position are taken from each site.

        Args:
            molecule: A pymatgen ``Molecule``.
            name: Name to store on the snapshot.

        Returns:
            A snapshot with no additional frames and no bonds.
        """
        atoms = [
            AtomRecord(int(site.specie.Z), site.coords)
            for site in molecule
        ]
        return cls(atoms=atoms, name=name)
