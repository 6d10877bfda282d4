from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

import numpy as np

from xyzformat.elements import PERIODIC_TABLE, ElementService
from xyzformat.model.atom_record import AtomRecord
from xyzformat.model.bond_spec import Bond
from xyzformat.model.frame import Frame
from xyzformat.model.snapshot import MoleculeSnapshot
from xyzformat.settings import PerceptionSettings

logger = logging.getLogger(__name__)


class MoleculeBuilder(Protocol):
    """Mutable molecule the reader populates while decoding.

    The reader only talks to a molecule through these methods, so any
    object providing them can be passed as ``builder=`` to
    :func:`xyzformat.io.decode`.
    """

    def add_atom(self, atomic_number: int) -> int:
        """Append an atom and return its handle."""
        ...

    def set_position(self, handle: int, xyz: Sequence[float]) -> None:
        """Set the frame 0 position of an atom."""
        ...

    def atom_count(self) -> int:
        """Return the number of atoms added so far."""
        ...

    def set_name(self, name: str) -> None:
        """Store the molecule name."""
        ...

    def name(self) -> str:
        """Return the molecule name (``""`` if unset)."""
        ...

    def set_frame(
        self,
        positions: np.ndarray,
        frame_index: int,
        label: str = "",
    ) -> None:
        """Store a full set of positions as frame *frame_index*."""
        ...

    def positions(self, frame_index: int = 0) -> np.ndarray:
        """Return the positions of frame *frame_index*."""
        ...

    def perceive_bonds_from_geometry(
        self,
        settings: PerceptionSettings | None = None,
    ) -> None:
        """Infer bonds from the frame 0 geometry."""
        ...

    def to_snapshot(self) -> MoleculeSnapshot:
        """Return an immutable-by-convention snapshot of the molecule."""
        ...


class Molecule:
    """Default in-memory :class:`MoleculeBuilder`.

    Atom handles are plain indices.  Frame 0 is the per-atom positions
    set through :meth:`set_position`; further frames are whole
    coordinate arrays stored with :meth:`set_frame`.

    Args:
        elements: Element service used to name atoms for bond
            perception.  Defaults to the built-in periodic table.
    """

    def __init__(self, elements: ElementService | None = None) -> None:
        self._elements = elements if elements is not None else PERIODIC_TABLE
        self._atomic_numbers: list[int] = []
        self._positions: list[np.ndarray] = []
        self._frames: list[Frame] = []
        self._name = ""
        self._bonds: list[Bond] = []

    def add_atom(self, atomic_number: int) -> int:
        self._atomic_numbers.append(int(atomic_number))
        self._positions.append(np.zeros(3))
        return len(self._atomic_numbers) - 1

    def set_position(self, handle: int, xyz: Sequence[float]) -> None:
        position = np.asarray(xyz, dtype=float)
        if position.shape != (3,):
            raise ValueError(
                f"position must have shape (3,), got {position.shape}"
            )
        self._positions[handle] = position

    def atom_count(self) -> int:
        return len(self._atomic_numbers)

    def set_name(self, name: str) -> None:
        self._name = name

    def name(self) -> str:
        return self._name

    def set_frame(
        self,
        positions: np.ndarray,
        frame_index: int,
        label: str = "",
    ) -> None:
        """Store *positions* as frame *frame_index*.

        Frame 0 overwrites the per-atom positions.  Frame ``k >= 1``
        replaces an existing extra frame or appends the next one; gaps
        are not allowed.

        Raises:
            ValueError: If the number of positions differs from the
                atom count, or *frame_index* would leave a gap.
        """
        frame = Frame(coords=positions, label=label)
        if frame.n_atoms != self.atom_count():
            raise ValueError(
                f"molecule has {self.atom_count()} atoms but frame "
                f"{frame_index} has {frame.n_atoms} positions"
            )
        if frame_index == 0:
            self._positions = [row.copy() for row in frame.coords]
        elif 0 < frame_index <= len(self._frames):
            self._frames[frame_index - 1] = frame
        elif frame_index == len(self._frames) + 1:
            self._frames.append(frame)
        else:
            raise ValueError(
                f"frame_index {frame_index} would leave a gap after "
                f"{len(self._frames) + 1} frame(s)"
            )

    def positions(self, frame_index: int = 0) -> np.ndarray:
        if frame_index == 0:
            if not self._positions:
                return np.zeros((0, 3))
            return np.array(self._positions)
        if not 0 < frame_index <= len(self._frames):
            raise IndexError(
                f"frame_index {frame_index} out of range for molecule "
                f"with {len(self._frames) + 1} frame(s)"
            )
        return self._frames[frame_index - 1].coords.copy()

    def perceive_bonds_from_geometry(
        self,
        settings: PerceptionSettings | None = None,
    ) -> None:
        """Replace the bond list with bonds inferred from frame 0.

        Uses the sum-of-covalent-radii heuristic from
        :func:`~xyzformat.bonds.default_bond_specs`.
        """
        from xyzformat.bonds import default_bond_specs, perceive_bonds

        species = [
            self._elements.atomic_number_to_symbol(z)
            for z in self._atomic_numbers
        ]
        specs = default_bond_specs(species, settings)
        self._bonds = perceive_bonds(species, self.positions(0), specs)
        logger.debug(
            "Perceived %d bond(s) among %d atom(s)",
            len(self._bonds), self.atom_count(),
        )

    def bonds(self) -> list[Bond]:
        """Return the bonds found by the last bond perception."""
        return list(self._bonds)

    def to_snapshot(self) -> MoleculeSnapshot:
        atoms = [
            AtomRecord(z, pos)
            for z, pos in zip(self._atomic_numbers, self._positions)
        ]
        return MoleculeSnapshot(
            atoms=atoms,
            name=self._name,
            frames=list(self._frames),
            bonds=list(self._bonds),
        )
