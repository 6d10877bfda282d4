"""Tests for xyzformat.bonds — geometric bond perception."""

import numpy as np
import pytest

from xyzformat.bonds import default_bond_specs, perceive_bonds
from xyzformat.model import BondSpec
from xyzformat.settings import PerceptionSettings


CH4_SPECIES = ["C", "H", "H", "H", "H"]
CH4_COORDS = np.array([
    [0.000, 0.000, 0.000],
    [0.629, 0.629, 0.629],
    [-0.629, -0.629, 0.629],
    [0.629, -0.629, -0.629],
    [-0.629, 0.629, -0.629],
])


class TestDefaultBondSpecs:
    def test_unique_pairs(self):
        specs = default_bond_specs(CH4_SPECIES)
        assert [s.species for s in specs] == [("C", "C"), ("C", "H"), ("H", "H")]

    def test_max_length_from_radii(self):
        specs = default_bond_specs(["C", "H"])
        ch = next(s for s in specs if s.species == ("C", "H"))
        assert ch.max_length == pytest.approx(0.76 + 0.31 + 0.45)
        assert ch.min_length == pytest.approx(0.32)

    def test_tolerance(self):
        settings = PerceptionSettings(tolerance=0.0)
        specs = default_bond_specs(["H"], settings)
        assert specs[0].max_length == pytest.approx(0.62)

    def test_radius_override(self):
        settings = PerceptionSettings(radius_overrides={"H": 0.5})
        specs = default_bond_specs(["H"], settings)
        assert specs[0].max_length == pytest.approx(1.45)

    def test_unknown_species_skipped(self):
        assert default_bond_specs(["", "Og"]) == []

    def test_min_length_clamped(self):
        settings = PerceptionSettings(tolerance=0.0, min_distance=5.0)
        specs = default_bond_specs(["H"], settings)
        assert specs[0].min_length == specs[0].max_length


class TestPerceiveBonds:
    def test_ch4_c_h_bonds(self):
        bonds = perceive_bonds(
            CH4_SPECIES, CH4_COORDS, default_bond_specs(CH4_SPECIES),
        )
        indices = {(b.index_a, b.index_b) for b in bonds}
        assert indices == {(0, 1), (0, 2), (0, 3), (0, 4)}

    def test_bond_length(self):
        bonds = perceive_bonds(
            CH4_SPECIES, CH4_COORDS, default_bond_specs(CH4_SPECIES),
        )
        for bond in bonds:
            assert bond.length == pytest.approx(np.sqrt(3) * 0.629, rel=1e-6)

    def test_empty_specs(self):
        assert perceive_bonds(CH4_SPECIES, CH4_COORDS, []) == []

    def test_empty_coords(self):
        specs = [BondSpec(("C", "H"), 1.5)]
        assert perceive_bonds([], np.zeros((0, 3)), specs) == []

    def test_overlapping_atoms_not_bonded(self):
        species = ["H", "H"]
        coords = np.array([[0.0, 0.0, 0.0], [0.1, 0.0, 0.0]])
        assert perceive_bonds(species, coords, default_bond_specs(species)) == []

    def test_max_length_inclusive(self):
        specs = [BondSpec(("H", "H"), 1.0)]
        coords = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
        assert len(perceive_bonds(["H", "H"], coords, specs)) == 1

    def test_first_spec_wins(self):
        spec_a = BondSpec(("C", "H"), 5.0)
        spec_b = BondSpec(("*", "*"), 5.0)
        bonds = perceive_bonds(CH4_SPECIES, CH4_COORDS, [spec_a, spec_b])
        assert len([b for b in bonds if b.spec is spec_a]) == 4
        assert len([b for b in bonds if b.spec is spec_b]) == 6

    def test_wrong_columns_raises(self):
        with pytest.raises(ValueError, match="3 columns"):
            perceive_bonds(["H"], np.zeros((1, 2)), [BondSpec(("H", "H"), 1.0)])

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError, match="species has 2 entries"):
            perceive_bonds(
                ["H", "H"], np.zeros((3, 3)), [BondSpec(("H", "H"), 1.0)],
            )

    def test_agrees_with_pairwise_distances(self):
        rng = np.random.default_rng(3)
        coords = rng.uniform(0.0, 6.0, size=(60, 3))
        species = ["C" if i % 3 == 0 else "H" for i in range(60)]
        specs = default_bond_specs(species)
        expected = set()
        for i in range(60):
            for j in range(i + 1, 60):
                spec = next(
                    s for s in specs if s.matches(species[i], species[j])
                )
                d = np.linalg.norm(coords[i] - coords[j])
                if spec.min_length < d <= spec.max_length:
                    expected.add((i, j))
        bonds = perceive_bonds(species, coords, specs)
        assert {(b.index_a, b.index_b) for b in bonds} == expected

    def test_ordered_by_spec_then_index(self):
        bonds = perceive_bonds(
            CH4_SPECIES, CH4_COORDS,
            [BondSpec(("H", "H"), 5.0), BondSpec(("C", "H"), 5.0)],
        )
        keys = [(b.spec.species, b.index_a, b.index_b) for b in bonds]
        assert keys[:6] == sorted(keys[:6])
        assert [b.spec.species for b in bonds[6:]] == [("C", "H")] * 4
        assert [(b.index_a, b.index_b) for b in bonds[6:]] == [
            (0, 1), (0, 2), (0, 3), (0, 4),
        ]
