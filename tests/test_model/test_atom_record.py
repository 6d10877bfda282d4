"""Tests for AtomRecord validation and equality."""

import numpy as np
import pytest

from xyzformat.model.atom_record import AtomRecord


class TestAtomRecord:
    def test_position_coerced(self):
        atom = AtomRecord(6, [1, 2, 3])
        assert atom.position.dtype == float
        np.testing.assert_allclose(atom.position, [1.0, 2.0, 3.0])

    def test_unknown_element_allowed(self):
        assert AtomRecord(0, [0, 0, 0]).atomic_number == 0

    @pytest.mark.parametrize("z", [-1, 119])
    def test_atomic_number_out_of_range(self, z):
        with pytest.raises(ValueError, match="atomic_number"):
            AtomRecord(z, [0, 0, 0])

    def test_wrong_shape(self):
        with pytest.raises(ValueError, match="shape \\(3,\\)"):
            AtomRecord(1, [0, 0])

    def test_non_finite(self):
        with pytest.raises(ValueError, match="finite"):
            AtomRecord(1, [0, np.inf, 0])

    def test_equality(self):
        assert AtomRecord(1, [0, 0, 1]) == AtomRecord(1, (0.0, 0.0, 1.0))
        assert AtomRecord(1, [0, 0, 1]) != AtomRecord(2, [0, 0, 1])
        assert AtomRecord(1, [0, 0, 1]) != AtomRecord(1, [0, 0, 2])

    def test_frozen(self):
        atom = AtomRecord(1, [0, 0, 0])
        with pytest.raises(AttributeError):
            atom.atomic_number = 2
