from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatch


class BondSpec:
    """Geometric rule for bond perception between a pair of elements.

    The *species* pair is stored in sorted order so that the rule is
    invariant under exchange of the two labels.  Species names support
    fnmatch-style wildcards (``*``, ``?``).

    A pair of atoms matching the species is bonded when their distance
    ``d`` satisfies ``min_length < d <= max_length``.

    Attributes:
        species: Sorted pair of element symbols or patterns.
        max_length: Maximum bond length in angstroms.
        min_length: Distances at or below this are never bonded.
            Defaults to ``0.0``.
    """

    def __init__(
        self,
        species: tuple[str, str],
        max_length: float,
        min_length: float = 0.0,
    ) -> None:
        a, b = sorted(species)
        self.species = (a, b)
        self.max_length = max_length
        self.min_length = min_length

        if self.max_length <= 0:
            raise ValueError(
                f"max_length must be positive, got {self.max_length}"
            )
        if self.min_length < 0:
            raise ValueError(
                f"min_length must be non-negative, got {self.min_length}"
            )
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) must not exceed "
                f"max_length ({self.max_length})"
            )

    def __repr__(self) -> str:
        return (
            f"BondSpec(species={self.species!r}, "
            f"max_length={self.max_length!r}, "
            f"min_length={self.min_length!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BondSpec):
            return NotImplemented
        return (
            self.species == other.species
            and self.max_length == other.max_length
            and self.min_length == other.min_length
        )

    __hash__ = None  # type: ignore[assignment]

    def matches(self, species_1: str, species_2: str) -> bool:
        """Check whether this spec matches a given species pair.

        Matching is symmetric: ``BondSpec(("C", "H"), ...).matches("H", "C")``
        returns ``True``.
        """
        a, b = self.species
        forward = fnmatch(species_1, a) and fnmatch(species_2, b)
        reverse = fnmatch(species_1, b) and fnmatch(species_2, a)
        return forward or reverse


@dataclass(frozen=True)
class Bond:
    """A perceived bond between two atoms.

    Attributes:
        index_a: Index of the first atom (always the smaller index).
        index_b: Index of the second atom.
        length: Interatomic distance in angstroms.
        spec: The BondSpec rule that produced this bond.
    """

    index_a: int
    index_b: int
    length: float
    spec: BondSpec

    def __hash__(self) -> int:
        return hash((self.index_a, self.index_b))
