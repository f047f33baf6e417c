"""
Tests for tolerance tiers and numeric configuration constants.
"""

import dataclasses

import pytest

from pyvector.core.tolerances import (
    DEFAULT,
    EXACT,
    ILL_CONDITIONED_THRESHOLD,
    LOOSE,
    PADE_DEFAULT_DEGREE,
    PADE_NORM_WARNING_THRESHOLD,
    ToleranceTier,
    select_tolerance,
)


class TestToleranceTier:

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT.rtol = 1.0

    def test_exact_is_zero(self):
        assert EXACT.rtol == 0.0
        assert EXACT.atol == 0.0

    def test_tiers_are_ordered(self):
        assert EXACT.rtol < DEFAULT.rtol < LOOSE.rtol
        assert EXACT.atol < DEFAULT.atol < LOOSE.atol

    def test_custom_tier(self):
        tier = ToleranceTier(rtol=1e-3, atol=0.0, name='coarse', description='test')
        assert tier.name == 'coarse'


class TestSelectTolerance:

    @pytest.mark.parametrize("tier", [EXACT, DEFAULT, LOOSE])
    def test_lookup_by_name(self, tier):
        assert select_tolerance(tier.name) is tier

    def test_unknown_name(self):
        with pytest.raises(KeyError, match="Unknown tolerance tier"):
            select_tolerance('sloppy')


class TestConstants:

    def test_pade_degree(self):
        assert PADE_DEFAULT_DEGREE == 6

    def test_thresholds_positive(self):
        assert PADE_NORM_WARNING_THRESHOLD > 0
        assert ILL_CONDITIONED_THRESHOLD > 1.0
