"""Brightest-mode word generation for two step sizes.

A MOS pattern with L large and S small steps is a necklace; the
brightest mode is the rotation that is lexicographically least when the
large symbol sorts before the small one. Two independent constructions
are provided and must always agree:

1. A string version of the subtractive Euclidean algorithm, where two
   words absorb each other until one of them occurs only once.
2. A Bresenham line walk that stays on or below the line y = S/L * x.

Multi-period patterns (gcd(L, S) > 1) repeat the primitive word.
"""

import math
from typing import Any, TypeVar

from .errors import InvalidInputError

T = TypeVar("T")

LARGE = "L"
SMALL = "s"


def validate_step_counts(number_of_large_steps: Any, number_of_small_steps: Any) -> None:
    """Reject step counts that are not non-negative finite integers."""
    for name, count in (
        ("large", number_of_large_steps),
        ("small", number_of_small_steps),
    ):
        if isinstance(count, float):
            if not math.isfinite(count) or not count.is_integer():
                raise InvalidInputError(
                    f"Number of {name} steps must be a finite integer, got {count}"
                )
        elif not isinstance(count, int):
            raise InvalidInputError(
                f"Number of {name} steps must be an integer, got {count!r}"
            )
        if count < 0:
            raise InvalidInputError(
                f"Number of {name} steps must be non-negative, got {count}"
            )


def _primitive_euclid(number_of_large_steps: int, number_of_small_steps: int) -> tuple[int, ...]:
    """Euclidean construction for coprime counts, large = 0 and small = 1."""
    first: tuple[int, ...] = (0,)
    second: tuple[int, ...] = (1,)
    count_first = number_of_large_steps
    count_second = number_of_small_steps

    while count_second != 1:
        if count_first > count_second:
            first, second = first + second, first
            count_first, count_second = count_second, count_first - count_second
        else:
            count_second -= count_first
            first = first + second
        # Keep the lexicographically smaller word in front
        if first > second:
            first, second = second, first
            count_first, count_second = count_second, count_first

    return first * count_first + second


def euclid(number_of_large_steps: int, number_of_small_steps: int, large: T, small: T) -> list[T]:
    """Brightest mode via the string Euclidean algorithm.

    Args:
        number_of_large_steps: Count of `large` symbols
        number_of_small_steps: Count of `small` symbols
        large: Symbol emitted for a large step
        small: Symbol emitted for a small step

    Returns:
        The brightest rotation as a list of symbols
    """
    validate_step_counts(number_of_large_steps, number_of_small_steps)
    number_of_large_steps = int(number_of_large_steps)
    number_of_small_steps = int(number_of_small_steps)

    if not number_of_large_steps:
        return [small] * number_of_small_steps
    if not number_of_small_steps:
        return [large] * number_of_large_steps

    periods = math.gcd(number_of_large_steps, number_of_small_steps)
    word = _primitive_euclid(
        number_of_large_steps // periods,
        number_of_small_steps // periods,
    )
    symbols = (large, small)
    return [symbols[index] for index in word] * periods


def bresenham(number_of_large_steps: int, number_of_small_steps: int, large: T, small: T) -> list[T]:
    """Brightest mode via a Bresenham line walk.

    Walks from (0, 0) to (L, S) where x counts large steps and y counts
    small steps, taking a small step whenever that does not go above
    the line y = S/L * x.

    Args:
        number_of_large_steps: Count of `large` symbols
        number_of_small_steps: Count of `small` symbols
        large: Symbol emitted for a large step
        small: Symbol emitted for a small step

    Returns:
        The brightest rotation as a list of symbols
    """
    validate_step_counts(number_of_large_steps, number_of_small_steps)
    a = int(number_of_large_steps)
    b = int(number_of_small_steps)

    if not a:
        return [small] * b
    if not b:
        return [large] * a

    periods = math.gcd(a, b)
    if periods > 1:
        return bresenham(a // periods, b // periods, large, small) * periods

    result = []
    x, y = 0, 0
    while x < a or y < b:
        if a * (y + 1) <= b * x:
            result.append(small)
            y += 1
        else:
            result.append(large)
            x += 1
    return result


def brightest_word(number_of_large_steps: int, number_of_small_steps: int) -> str:
    """Brightest mode of a MOS pattern as a string of 'L' and 's'.

    Examples:
        >>> brightest_word(5, 2)
        'LLLsLLs'
        >>> brightest_word(5, 8)
        'LsLssLsLssLss'
    """
    return "".join(euclid(number_of_large_steps, number_of_small_steps, LARGE, SMALL))


def step_trace(word: list[bool]) -> list[tuple[int, int]]:
    """Running (large, small) counts of a word, starting at (0, 0).

    Args:
        word: Sequence where truthy entries are large steps

    Returns:
        len(word) + 1 pairs of (large steps so far, small steps so far)
    """
    large_count, small_count = 0, 0
    trace = [(0, 0)]
    for is_large in word:
        if is_large:
            large_count += 1
        else:
            small_count += 1
        trace.append((large_count, small_count))
    return trace
