"""Exact rational arithmetic for generator ratios.

Python's Fraction already keeps numerator and denominator in lowest
terms with a positive denominator, so this module only adds what the
MOS calculations need on top of it: modular inverses, continued
fractions with (semi)convergents, Farey interiors and the conversion of
floats into short fractions.
"""

import math
from fractions import Fraction
from typing import Iterator, Optional, Union

from . import config
from .errors import InvalidInputError, NotCoprimeError

FractionLike = Union[int, float, Fraction]

ONE = Fraction(1)


def extended_euclid(a: int, b: int) -> tuple[int, int, int]:
    """Extended Euclidean algorithm.

    Args:
        a: First integer
        b: Second integer

    Returns:
        Tuple of (gcd, coef_a, coef_b) with a * coef_a + b * coef_b == gcd
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y
    return old_r, old_x, old_y


def mod_inv(a: int, modulus: int) -> int:
    """Find the inverse of a modulo `modulus`.

    Args:
        a: Integer to invert
        modulus: Positive modulus

    Returns:
        The unique x in [0, modulus) with a * x == 1 (mod modulus)

    Raises:
        NotCoprimeError: If a and modulus share a factor
    """
    divisor, coef_a, _ = extended_euclid(a, modulus)
    if divisor != 1:
        raise NotCoprimeError(
            f"{a} has no inverse modulo {modulus} (gcd is {divisor})"
        )
    return coef_a % modulus


def to_fraction(value: FractionLike) -> Fraction:
    """Convert an int, float or Fraction into a Fraction.

    Floats are snapped to the simplest nearby fraction so that values
    like 7 / 12 come back as exactly 7/12.
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidInputError(f"Ratio must be finite, got {value}")
        return simplify(value)
    return Fraction(value)


def wrap_generator_per_period(value: FractionLike) -> Fraction:
    """Reduce a generator / period ratio into [0, 1) as an exact fraction."""
    return to_fraction(value) % ONE


def continued_fraction(value: Fraction) -> list[int]:
    """Expand a fraction into its (finite) regular continued fraction.

    Args:
        value: Any rational number

    Returns:
        Partial quotients [a0; a1, a2, ...]. Only a0 may be non-positive.
    """
    numerator, denominator = value.numerator, value.denominator
    result = []
    while denominator:
        quotient = numerator // denominator
        result.append(quotient)
        numerator, denominator = denominator, numerator - quotient * denominator
    return result


def simplify(value: float, tolerance: float = config.FLOAT_SIMPLIFY_TOLERANCE) -> Fraction:
    """Find the first convergent of a float that lies within tolerance of it.

    Args:
        value: Finite float
        tolerance: Maximum absolute distance from the float

    Returns:
        The simplest convergent within tolerance, or the exact binary value
    """
    exact = Fraction(value)
    for convergent in get_convergents(exact):
        if abs(convergent - exact) < tolerance:
            return convergent
    return exact


def get_convergents(
    value: FractionLike,
    max_denominator: Optional[int] = None,
    max_length: Optional[int] = None,
    include_semiconvergents: bool = False,
) -> list[Fraction]:
    """Continued fraction convergents of a value.

    When semiconvergents are included only the ones that are best
    approximations are kept: for a partial quotient `a` the multipliers
    run from ceil(a / 2) to a, and the exact half is kept only if it is
    strictly closer to the value than the previous convergent.

    Args:
        value: Number to approximate
        max_denominator: Stop before the first fraction with a larger denominator
        max_length: Maximum number of fractions returned
        include_semiconvergents: Also return intermediate fractions

    Returns:
        Fractions ordered by increasing denominator, starting at a0/1 and
        ending at the value itself if nothing stopped the expansion earlier.
    """
    value = to_fraction(value)
    quotients = continued_fraction(value)

    result = [Fraction(quotients[0])]
    if max_length is not None and len(result) >= max_length:
        return result

    # (h_prev, k_prev) and (h, k) are the two most recent convergents
    h_prev, k_prev = 1, 0
    h, k = quotients[0], 1
    for quotient in quotients[1:]:
        if include_semiconvergents:
            multipliers = range((quotient + 1) // 2, quotient + 1)
        else:
            multipliers = range(quotient, quotient + 1)
        for i in multipliers:
            numerator = h_prev + i * h
            denominator = k_prev + i * k
            if max_denominator is not None and denominator > max_denominator:
                return result
            candidate = Fraction(numerator, denominator)
            if 2 * i == quotient and abs(candidate - value) >= abs(Fraction(h, k) - value):
                continue
            result.append(candidate)
            if max_length is not None and len(result) >= max_length:
                return result
        h_prev, h = h, h_prev + quotient * h
        k_prev, k = k, k_prev + quotient * k
    return result


def farey_interior(max_denominator: int) -> Iterator[Fraction]:
    """Yield the reduced fractions strictly between 0 and 1 in ascending order.

    Args:
        max_denominator: Largest denominator included (the Farey order)
    """
    if max_denominator < 2:
        return
    a, b, c, d = 0, 1, 1, max_denominator
    while c < d:
        yield Fraction(c, d)
        k = (max_denominator + b) // d
        a, b, c, d = c, d, k * c - a, k * d - b


def cumsum(values: list[int]) -> list[int]:
    """Cumulative sum of a list of steps."""
    result = []
    total = 0
    for value in values:
        total += value
        result.append(total)
    return result
