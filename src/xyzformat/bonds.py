"""Geometric bond perception from covalent radii."""

from __future__ import annotations

import numpy as np
from scipy.spatial import cKDTree

from xyzformat.elements import COVALENT_RADII
from xyzformat.model.bond_spec import Bond, BondSpec
from xyzformat.settings import PerceptionSettings


def default_bond_specs(
    species: list[str],
    settings: PerceptionSettings | None = None,
) -> list[BondSpec]:
    """Generate BondSpec rules from covalent radii for a set of species.

    Creates one spec per unique pair (including self-pairs) using the
    sum-of-covalent-radii heuristic:
    ``max_length = r_a + r_b + settings.tolerance``.  Species with no
    known radius (including the empty symbol of unknown elements) are
    silently skipped.

    Args:
        species: Element symbols to generate rules for.
        settings: Tolerance, minimum distance and radius overrides.
            Defaults to :class:`PerceptionSettings` defaults.

    Returns:
        A list of BondSpec rules, one per unique pair.
    """
    if settings is None:
        settings = PerceptionSettings()
    radii = {**COVALENT_RADII, **settings.radius_overrides}

    known = [s for s in sorted(set(species)) if s in radii]

    specs: list[BondSpec] = []
    for i, sp_a in enumerate(known):
        for sp_b in known[i:]:
            max_len = radii[sp_a] + radii[sp_b] + settings.tolerance
            specs.append(BondSpec(
                species=(sp_a, sp_b),
                max_length=max_len,
                min_length=min(settings.min_distance, max_len),
            ))
    return specs


def perceive_bonds(
    species: list[str],
    coords: np.ndarray,
    bond_specs: list[BondSpec],
) -> list[Bond]:
    """Find bonds in a single frame from interatomic distances.

    For each pair of atoms (i < j), the bond specs are checked in
    order and the first one whose species match and whose
    ``(min_length, max_length]`` window contains the distance claims
    the pair.

    Candidate pairs come from a k-d tree query out to the longest
    ``max_length``, so memory grows with the number of close pairs
    rather than with the square of the atom count.

    Args:
        species: Element symbols, length ``n_atoms``.
        coords: Coordinates array of shape ``(n_atoms, 3)``.
        bond_specs: BondSpec rules to apply.

    Returns:
        Bonds ordered by spec, then by ``(index_a, index_b)``.

    Raises:
        ValueError: If *coords* does not match *species* in length or
            does not have three columns.
    """
    if len(species) == 0 or len(bond_specs) == 0:
        return []

    coords = np.asarray(coords, dtype=float)
    n_atoms = len(species)

    if coords.ndim != 2 or coords.shape[1] != 3:
        raise ValueError(
            f"coords must have 3 columns, got shape {coords.shape}"
        )
    if coords.shape[0] != n_atoms:
        raise ValueError(
            f"species has {n_atoms} entries but coords has "
            f"{coords.shape[0]} rows"
        )
    if n_atoms < 2:
        return []

    cutoff = max(spec.max_length for spec in bond_specs)
    # Padded so pairs at exactly max_length survive rounding in the tree.
    pairs = cKDTree(coords).query_pairs(
        r=cutoff * (1.0 + 1e-9), output_type="ndarray",
    )
    if len(pairs) == 0:
        return []
    pairs = pairs[np.lexsort((pairs[:, 1], pairs[:, 0]))]
    ii, jj = pairs[:, 0], pairs[:, 1]
    distances = np.linalg.norm(coords[ii] - coords[jj], axis=1)

    unique_species = sorted(set(species))
    code_of = {s: k for k, s in enumerate(unique_species)}
    codes = np.array([code_of[s] for s in species])
    codes_i, codes_j = codes[ii], codes[jj]
    claimed = np.zeros(len(pairs), dtype=bool)

    bonds: list[Bond] = []

    for spec in bond_specs:
        table = _species_pair_table(spec, unique_species)
        hits = (
            table[codes_i, codes_j]
            & (distances > spec.min_length)
            & (distances <= spec.max_length)
            & ~claimed
        )
        claimed |= hits
        for k in np.nonzero(hits)[0]:
            bonds.append(
                Bond(int(ii[k]), int(jj[k]), float(distances[k]), spec)
            )

    return bonds


def _species_pair_table(
    spec: BondSpec,
    unique_species: list[str],
) -> np.ndarray:
    """Build a boolean lookup of which species pairs *spec* matches."""
    n = len(unique_species)
    table = np.zeros((n, n), dtype=bool)
    for a in range(n):
        for b in range(a, n):
            if spec.matches(unique_species[a], unique_species[b]):
                table[a, b] = table[b, a] = True
    return table
