"""
Unit tests for the integer math primitives.

Tests:
- Residue reduction and cofactor signs
- gcd / extended gcd
- Scalar inverse (extended Euclid vs exhaustive search)
"""

import pytest

from shared.math_utils import (
    extended_gcd,
    gcd,
    parity_sign,
    positive_mod,
    scalar_inverse,
    scalar_inverse_search,
)


class TestResidues:
    """Tests for positive_mod and parity_sign."""

    def test_negative_value_reduced_into_range(self):
        assert positive_mod(-3, 26) == 23

    def test_large_value_reduced(self):
        assert positive_mod(26 * 1000 + 5, 26) == 5

    def test_non_positive_modulus_rejected(self):
        with pytest.raises(ValueError):
            positive_mod(5, 0)

    def test_parity_sign(self):
        assert [parity_sign(i) for i in range(5)] == [1, -1, 1, -1, 1]

    def test_parity_sign_large_index(self):
        """Sign stays exact far beyond float precision."""
        assert parity_sign(2**70 + 1) == -1


class TestGcd:
    """Tests for gcd and extended_gcd."""

    def test_gcd_basic(self):
        assert gcd(9, 26) == 1
        assert gcd(24, 26) == 2
        assert gcd(13, 26) == 13

    def test_gcd_with_zero(self):
        assert gcd(0, 26) == 26
        assert gcd(26, 0) == 26

    def test_gcd_negative(self):
        assert gcd(-4, 6) == 2

    def test_extended_gcd_bezout(self):
        g, x, y = extended_gcd(240, 46)
        assert g == 2
        assert 240 * x + 46 * y == g


class TestScalarInverse:
    """Tests for the two modular inverse routines."""

    def test_known_inverse(self):
        assert scalar_inverse(9, 26) == 3
        assert scalar_inverse(25, 26) == 25

    def test_negative_value(self):
        assert scalar_inverse(-17, 26) == scalar_inverse(9, 26)

    @pytest.mark.parametrize("modulus", [13, 26, 29, 97, 100])
    def test_euclid_matches_search(self, modulus):
        """Both methods return the same residue for every unit."""
        for value in range(modulus):
            if gcd(value, modulus) != 1:
                continue
            assert scalar_inverse(value, modulus) == scalar_inverse_search(value, modulus)

    def test_no_inverse_raises(self):
        with pytest.raises(ValueError):
            scalar_inverse(13, 26)
        with pytest.raises(ValueError):
            scalar_inverse_search(13, 26)

    def test_modulus_one_rejected(self):
        with pytest.raises(ValueError):
            scalar_inverse(1, 1)

    def test_large_modulus(self):
        modulus = 2**61 - 1  # Mersenne prime
        inv = scalar_inverse(123456789, modulus)
        assert (inv * 123456789) % modulus == 1
