from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class Frame:
    """One complete set of atom positions, aligned by index to the atom list.

    Attributes:
        coords: Cartesian coordinates in angstroms, shape ``(n_atoms, 3)``.
        label: Comment line read from the frame header, if any.

    Raises:
        ValueError: If *coords* does not have shape ``(n_atoms, 3)`` or
            contains non-finite values.
    """

    coords: np.ndarray
    label: str = ""

    def __post_init__(self) -> None:
        self.coords = np.asarray(self.coords, dtype=float)
        if self.coords.size == 0:
            # An empty list of positions is a valid zero-atom frame.
            self.coords = self.coords.reshape(0, 3)
        if self.coords.ndim != 2 or self.coords.shape[1] != 3:
            raise ValueError(
                f"coords must have shape (n_atoms, 3), got {self.coords.shape}"
            )
        if not np.all(np.isfinite(self.coords)):
            raise ValueError("coords must contain only finite values")

    @property
    def n_atoms(self) -> int:
        """Number of atoms in this frame."""
        return self.coords.shape[0]
