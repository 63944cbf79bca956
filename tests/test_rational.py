"""Unit tests for the exact rational helpers."""

import math
from fractions import Fraction

import pytest

from moment_of_symmetry.errors import InvalidInputError, NotCoprimeError
from moment_of_symmetry.rational import (
    continued_fraction,
    cumsum,
    extended_euclid,
    farey_interior,
    get_convergents,
    mod_inv,
    simplify,
    to_fraction,
    wrap_generator_per_period,
)


class TestExtendedEuclid:
    """Tests for extended_euclid."""

    def test_bezout_identity(self):
        """Coefficients combine the inputs into their gcd."""
        divisor, x, y = extended_euclid(240, 46)
        assert divisor == 2
        assert 240 * x + 46 * y == 2

    def test_coprime(self):
        """Coprime inputs have gcd 1."""
        divisor, x, y = extended_euclid(7, 12)
        assert divisor == 1
        assert 7 * x + 12 * y == 1


class TestModInv:
    """Tests for the modular inverse."""

    @pytest.mark.parametrize("modulus", [2, 3, 4, 5, 6, 11, 79, 100])
    def test_round_trip(self, modulus):
        """Every unit has an inverse and every non-unit fails."""
        for i in range(1, modulus):
            if math.gcd(i, modulus) == 1:
                assert (i * mod_inv(i, modulus)) % modulus == 1
            else:
                with pytest.raises(NotCoprimeError):
                    mod_inv(i, modulus)

    def test_result_is_normalized(self):
        """The inverse lies in [0, modulus)."""
        assert mod_inv(2, 7) == 4
        assert mod_inv(6, 7) == 6


class TestContinuedFraction:
    """Tests for continued fraction expansion."""

    def test_seven_twelfths(self):
        """7/12 = [0; 1, 1, 2, 2]."""
        assert continued_fraction(Fraction(7, 12)) == [0, 1, 1, 2, 2]

    def test_integer(self):
        """An integer has a single partial quotient."""
        assert continued_fraction(Fraction(3)) == [3]

    def test_negative(self):
        """Only the leading quotient may be negative."""
        assert continued_fraction(Fraction(-1, 3)) == [-1, 1, 2]


class TestConvergents:
    """Tests for get_convergents."""

    def test_convergents_only(self):
        """Without semiconvergents only the principal convergents appear."""
        assert get_convergents(Fraction(7, 12)) == [
            Fraction(0), Fraction(1), Fraction(1, 2), Fraction(3, 5), Fraction(7, 12),
        ]

    def test_semiconvergents_follow_half_rule(self):
        """2/3 is exactly as far from 7/12 as 1/2 and is dropped, 4/7 is kept."""
        assert get_convergents(Fraction(7, 12), include_semiconvergents=True) == [
            Fraction(0), Fraction(1), Fraction(1, 2), Fraction(3, 5),
            Fraction(4, 7), Fraction(7, 12),
        ]

    def test_max_denominator(self):
        """Expansion stops before the first denominator that is too large."""
        result = get_convergents(Fraction(7, 12), max_denominator=5, include_semiconvergents=True)
        assert result[-1] == Fraction(3, 5)

    def test_max_length(self):
        """The result never exceeds the requested length."""
        assert len(get_convergents(Fraction(7, 12), max_length=3)) == 3

    def test_denominators_increase(self):
        """Denominators are strictly increasing after the leading integer."""
        convergents = get_convergents(math.pi - 3, include_semiconvergents=True)
        denominators = [c.denominator for c in convergents[1:]]
        assert denominators == sorted(set(denominators))


class TestFloatConversion:
    """Tests for float simplification."""

    def test_simplify_recovers_fraction(self):
        """Floats close to short fractions snap to them."""
        assert simplify(7 / 12) == Fraction(7, 12)
        assert simplify(0.1) == Fraction(1, 10)

    def test_to_fraction_passes_fractions_through(self):
        """Fractions are returned untouched."""
        value = Fraction(5, 11)
        assert to_fraction(value) is value

    def test_to_fraction_rejects_nan(self):
        """Non-finite floats cannot be turned into ratios."""
        with pytest.raises(InvalidInputError):
            to_fraction(float("nan"))
        with pytest.raises(InvalidInputError):
            to_fraction(float("inf"))

    def test_wrap_generator_per_period(self):
        """Ratios are reduced into [0, 1), negative ones included."""
        assert wrap_generator_per_period(Fraction(19, 12)) == Fraction(7, 12)
        assert wrap_generator_per_period(Fraction(-5, 12)) == Fraction(7, 12)
        assert wrap_generator_per_period(1) == 0


class TestFareyInterior:
    """Tests for farey_interior."""

    def test_order_five(self):
        """All reduced fractions strictly between 0 and 1 with denominator <= 5."""
        assert list(farey_interior(5)) == [
            Fraction(1, 5), Fraction(1, 4), Fraction(1, 3), Fraction(2, 5), Fraction(1, 2),
            Fraction(3, 5), Fraction(2, 3), Fraction(3, 4), Fraction(4, 5),
        ]

    def test_order_one_is_empty(self):
        """There is nothing strictly between 0/1 and 1/1."""
        assert list(farey_interior(1)) == []

    def test_neighbours(self):
        """Consecutive Farey fractions have determinant 1."""
        fractions = list(farey_interior(12))
        for a, b in zip(fractions, fractions[1:]):
            assert b.numerator * a.denominator - a.numerator * b.denominator == 1


class TestCumsum:
    """Tests for cumsum."""

    def test_running_total(self):
        assert cumsum([1, 2, 3]) == [1, 3, 6]

    def test_empty(self):
        assert cumsum([]) == []
