from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from xyzformat.elements import MAX_ATOMIC_NUMBER


@dataclass(frozen=True)
class AtomRecord:
    """An element identity plus a 3D position.

    Attributes:
        atomic_number: Atomic number in ``1..118``, or ``0`` for an
            element token that could not be resolved.
        position: Cartesian position in angstroms, shape ``(3,)``.

    Raises:
        ValueError: If *atomic_number* is out of range or *position*
            is not three finite numbers.
    """

    atomic_number: int
    position: np.ndarray

    def __post_init__(self) -> None:
        position = np.asarray(self.position, dtype=float)
        if position.shape != (3,):
            raise ValueError(
                f"position must have shape (3,), got {position.shape}"
            )
        if not np.all(np.isfinite(position)):
            raise ValueError(f"position must be finite, got {position.tolist()}")
        if not 0 <= self.atomic_number <= MAX_ATOMIC_NUMBER:
            raise ValueError(
                f"atomic_number must be in 0..{MAX_ATOMIC_NUMBER}, "
                f"got {self.atomic_number}"
            )
        # Frozen dataclass: bypass __setattr__ to store the coerced array.
        object.__setattr__(self, "position", position)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AtomRecord):
            return NotImplemented
        return (
            self.atomic_number == other.atomic_number
            and np.array_equal(self.position, other.position)
        )
