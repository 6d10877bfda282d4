"""Tests for BondSpec validation, matching and equality."""

import pytest

from xyzformat.model.bond_spec import Bond, BondSpec


class TestBondSpec:
    def test_species_sorted(self):
        spec = BondSpec(("O", "C"), max_length=1.6)
        assert spec.species == ("C", "O")

    def test_default_min_length(self):
        assert BondSpec(("C", "H"), 1.5).min_length == 0.0

    def test_non_positive_max_raises(self):
        with pytest.raises(ValueError, match="max_length must be positive"):
            BondSpec(("C", "H"), 0.0)

    def test_negative_min_raises(self):
        with pytest.raises(ValueError, match="min_length must be non-negative"):
            BondSpec(("C", "H"), 1.0, min_length=-0.1)

    def test_min_exceeds_max_raises(self):
        with pytest.raises(ValueError, match="must not exceed"):
            BondSpec(("C", "H"), 1.0, min_length=2.0)

    def test_matches_symmetric(self):
        spec = BondSpec(("C", "H"), 1.5)
        assert spec.matches("C", "H")
        assert spec.matches("H", "C")
        assert not spec.matches("C", "C")

    def test_matches_wildcard(self):
        spec = BondSpec(("*", "H"), 1.5)
        assert spec.matches("N", "H")

    def test_equality(self):
        assert BondSpec(("C", "H"), 1.5) == BondSpec(("H", "C"), 1.5)
        assert BondSpec(("C", "H"), 1.5) != BondSpec(("C", "H"), 1.6)

    def test_repr(self):
        assert repr(BondSpec(("C", "H"), 1.5)) == (
            "BondSpec(species=('C', 'H'), max_length=1.5, min_length=0.0)"
        )


class TestBond:
    def test_hash_uses_indices(self):
        spec = BondSpec(("C", "H"), 1.5)
        assert hash(Bond(0, 1, 1.09, spec)) == hash(Bond(0, 1, 1.2, spec))
