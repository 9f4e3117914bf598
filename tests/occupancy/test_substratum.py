"""Tests for carrier oracles and their factory."""

import numpy as np
import pytest

from occupancy.substratum import (
    FlatCarrier,
    MaskCarrier,
    NoCarrier,
    create_carrier_oracle,
)


def loop_mask(oracle, shape):
    """Per-voxel evaluation through is_carrier()."""
    out = np.zeros(shape, dtype=bool)
    for idx in np.ndindex(*shape):
        out[idx] = oracle.is_carrier(*idx)
    return out


class TestOracles:
    """Vectorised masks agree with per-voxel queries."""

    @pytest.mark.parametrize("axis", [0, 1, 2])
    def test_flat_carrier(self, axis):
        oracle = FlatCarrier(thickness=2, axis=axis)
        shape = (4, 5, 6)
        mask = oracle.mask(shape)
        assert mask.shape == shape
        assert np.array_equal(mask, loop_mask(oracle, shape))
        assert mask.sum() == 2 * np.prod(shape) // shape[axis]

    def test_no_carrier(self):
        assert not NoCarrier().mask((3, 3, 3)).any()

    def test_mask_carrier_outside_is_not_carrier(self):
        carrier = np.ones((2, 2, 2), dtype=bool)
        oracle = MaskCarrier(carrier)
        assert oracle.is_carrier(1, 1, 1)
        assert not oracle.is_carrier(2, 0, 0)
        assert not oracle.is_carrier(-1, 0, 0)
        # different shape falls back to per-voxel queries
        mask = oracle.mask((3, 3, 3))
        assert mask.sum() == 8

    def test_invalid_flat_carrier(self):
        with pytest.raises(ValueError):
            FlatCarrier(thickness=-1)
        with pytest.raises(ValueError):
            FlatCarrier(axis=3)


class TestFactory:
    """create_carrier_oracle()."""

    def test_methods(self):
        assert isinstance(create_carrier_oracle("none"), NoCarrier)
        flat = create_carrier_oracle("flat", thickness=3, axis=2)
        assert isinstance(flat, FlatCarrier)
        assert (flat.thickness, flat.axis) == (3, 2)
        mask = create_carrier_oracle("mask", carrier=np.zeros((2, 2, 2)))
        assert isinstance(mask, MaskCarrier)

    def test_unknown_method(self):
        with pytest.raises(ValueError, match="Unknown carrier method"):
            create_carrier_oracle("sphere")

    def test_mask_requires_array(self):
        with pytest.raises(ValueError):
            create_carrier_oracle("mask")
