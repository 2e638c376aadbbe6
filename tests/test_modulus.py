"""
Unit tests for the modulus policy.
"""

import logging

import pytest

from hill.core import modulus as modulus_policy
from hill.core.errors import InvalidModulusError
from hill.core.modulus import MAX_MODULUS, MIN_MODULUS, clamp_modulus, normalize_modulus


class TestClamp:
    """Tests for clamp_modulus."""

    def test_in_range_unchanged(self):
        assert clamp_modulus(26) == 26

    def test_bounds(self):
        assert clamp_modulus(MIN_MODULUS) == MIN_MODULUS
        assert clamp_modulus(MAX_MODULUS) == MAX_MODULUS

    def test_below_minimum(self):
        assert clamp_modulus(2) == MIN_MODULUS
        assert clamp_modulus(-50) == MIN_MODULUS

    def test_above_maximum(self):
        assert clamp_modulus(MAX_MODULUS + 1) == MAX_MODULUS
        assert clamp_modulus(2**100) == MAX_MODULUS

    def test_max_modulus_fits_int64_twice(self):
        assert 2 * MAX_MODULUS < 2**63


class TestNormalize:
    """Tests for normalize_modulus in lenient and strict mode."""

    def test_lenient_clamps(self):
        assert normalize_modulus(5) == MIN_MODULUS

    def test_lenient_reports_adjustment(self, caplog):
        underlying = modulus_policy._log.underlying
        underlying.addHandler(caplog.handler)
        try:
            with caplog.at_level(logging.WARNING, logger=underlying.name):
                normalize_modulus(5)
        finally:
            underlying.removeHandler(caplog.handler)
        assert any("adjusted" in rec.getMessage() for rec in caplog.records)

    def test_strict_rejects(self):
        with pytest.raises(InvalidModulusError) as excinfo:
            normalize_modulus(5, strict=True)
        assert excinfo.value.requested == 5

    def test_strict_accepts_in_range(self):
        assert normalize_modulus(26, strict=True) == 26

    @pytest.mark.parametrize("bad", [True, 26.0, "26", None])
    def test_non_integer_rejected(self, bad):
        with pytest.raises(InvalidModulusError):
            normalize_modulus(bad)

    def test_error_is_value_error(self):
        """Callers catching ValueError still see modulus failures."""
        with pytest.raises(ValueError):
            normalize_modulus(1, strict=True)
