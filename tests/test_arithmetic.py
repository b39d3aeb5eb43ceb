"""
Tests for arithmetic primitives.

Known values: gcd(56, 98) = 14, lcm(12, 18) = 36, 4^13 mod 497 = 445.
"""

import numpy as np
import pytest

from cntcl.arithmetic import (
    check_integral, gcd, lcm, modpow, extended_gcd, mod_inverse,
)


class TestGcdLcm:
    """gcd/lcm values and the gcd * lcm identity."""

    def test_known_values(self):
        assert gcd(56, 98) == 14
        assert lcm(12, 18) == 36

    def test_zero_arguments(self):
        assert gcd(0, 7) == 7
        assert gcd(7, 0) == 7
        assert lcm(0, 7) == 0

    @pytest.mark.parametrize("a", [1, 2, 6, 15, 28, 97, 360])
    @pytest.mark.parametrize("b", [1, 3, 10, 21, 64, 99, 1001])
    def test_gcd_times_lcm_is_product(self, a, b):
        """gcd(a,b) * lcm(a,b) == a*b for positive a, b."""
        assert gcd(a, b) * lcm(a, b) == a * b

    def test_accepts_numpy_integers(self):
        assert gcd(np.int64(12), np.int32(18)) == 6


class TestModpow:
    """Modular exponentiation."""

    def test_known_value(self):
        assert modpow(4, 13, 497) == 445

    def test_matches_builtin_pow(self):
        for base in range(0, 20):
            for exp in range(0, 15):
                for modulus in (1, 2, 7, 10, 97):
                    assert modpow(base, exp, modulus) == pow(base, exp, modulus)

    def test_modulus_one_is_zero(self):
        assert modpow(5, 3, 1) == 0

    def test_zero_modulus_rejected(self):
        with pytest.raises(ValueError):
            modpow(2, 10, 0)

    def test_negative_exponent_rejected(self):
        with pytest.raises(ValueError):
            modpow(2, -1, 7)


class TestExtendedGcdAndInverse:
    """Bezout coefficients and modular inverse."""

    def test_bezout_identity(self):
        x, y = extended_gcd(120, 23)
        assert 120 * x + 23 * y == 1

    @pytest.mark.parametrize("a,b", [(240, 46), (35, 15), (17, 5), (0, 9), (9, 0)])
    def test_bezout_equals_gcd(self, a, b):
        x, y = extended_gcd(a, b)
        assert a * x + b * y == gcd(a, b)

    def test_known_inverse(self):
        assert mod_inverse(3, 11) * 3 % 11 == 1

    def test_inverse_for_all_coprime_residues(self):
        """mod_inverse(a, m) * a == 1 (mod m) whenever gcd(a, m) == 1."""
        for m in range(2, 60):
            for a in range(1, m):
                if gcd(a, m) == 1:
                    inv = mod_inverse(a, m)
                    assert 0 <= inv < m
                    assert (inv * a) % m == 1

    def test_non_invertible_rejected(self):
        with pytest.raises(ValueError):
            mod_inverse(6, 9)

    def test_bad_modulus_rejected(self):
        with pytest.raises(ValueError):
            mod_inverse(3, 0)


class TestCheckIntegral:
    """Type validation shared by every public function."""

    def test_returns_plain_int(self):
        value = check_integral("n", np.int64(5))
        assert value == 5
        assert type(value) is int

    @pytest.mark.parametrize("bad", [1.5, 2.0, "3", None, True])
    def test_rejects_non_integers(self, bad):
        with pytest.raises(TypeError):
            check_integral("n", bad)

    def test_public_functions_reject_floats(self):
        with pytest.raises(TypeError):
            gcd(4.0, 2)
        with pytest.raises(TypeError):
            modpow(2, 3.0, 5)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
