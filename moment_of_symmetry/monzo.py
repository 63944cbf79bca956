"""Bright generators expressed as counts of large and small steps.

The bright generator of a single-period MOS with l large and s small
steps is the interval reached after s⁻¹ mod (l + s) steps of the
brightest mode. Stacking it l + s times returns to the root.
"""

import logging
import math

from .errors import InvalidInputError, NotCoprimeError
from .rational import mod_inv
from .words import euclid, step_trace

log = logging.getLogger(__name__)

# Pre-calculated bright generators: (l, s) → (large steps, small steps)
BRIGHT_GENERATORS: dict[tuple[int, int], tuple[int, int]] = {
    (2, 5): (1, 2),
    (5, 2): (3, 1),
    (2, 9): (1, 4),
    (3, 8): (2, 5),
    (4, 7): (3, 5),
    (7, 4): (2, 1),
    (8, 3): (3, 1),
    (9, 2): (5, 1),
    (3, 5): (2, 3),
    (5, 3): (2, 1),
    (2, 7): (1, 3),
    (7, 2): (4, 1),
    (3, 7): (1, 2),
    (7, 3): (5, 2),
    (5, 7): (3, 4),
    (7, 5): (3, 2),
}


def general_generator_monzo(l: int, s: int) -> tuple[int, int]:
    """Bright generator from the brightest word, without any shortcuts.

    Args:
        l: Number of large steps (coprime with s)
        s: Number of small steps (coprime with l)

    Returns:
        Tuple of (large steps, small steps) in the bright generator

    Raises:
        NotCoprimeError: If gcd(l, s) != 1
    """
    if math.gcd(l, s) != 1:
        raise NotCoprimeError(f"Step counts {l}L {s}s are not coprime")
    size = l + s
    bright_generator_steps = mod_inv(s, size)
    log.debug(
        "Bright generator of %dL %ds spans %d steps", l, s, bright_generator_steps
    )
    trace = step_trace(euclid(l, s, True, False))
    return trace[bright_generator_steps]


def generator_monzo(l: int, s: int) -> tuple[int, int]:
    """Find the bright generator of a single-period MOS pattern.

    Tries closed forms for the simple shapes first, then the
    pre-calculated table, and finally the general algorithm.

    Args:
        l: Number of large steps (coprime with s)
        s: Number of small steps (coprime with l)

    Returns:
        Tuple of (large steps, small steps) in the bright generator

    Raises:
        NotCoprimeError: If the counts still contain more than one period

    Examples:
        >>> generator_monzo(5, 2)  # the perfect fifth of diatonic
        (3, 1)
    """
    if math.gcd(l, s) != 1:
        raise NotCoprimeError(
            f"Step counts {l}L {s}s are not coprime; divide out the periods first"
        )

    # Degenerate shapes
    if l == 0:
        return (0, 1)
    if s == 0:
        return (1, 0)

    # Shortcuts
    if s == 1:
        return (1, 0)
    if l == 1:
        return (1, s - 1)
    if l == s - 1:
        return (1, 1)
    if l == s + 1:
        return (l - 1, s - 1)

    if (l, s) in BRIGHT_GENERATORS:
        return BRIGHT_GENERATORS[(l, s)]

    return general_generator_monzo(l, s)


def bright_generator_monzo(number_of_large_steps: int, number_of_small_steps: int) -> tuple[int, int]:
    """Bright generator of any MOS pattern, dividing out the periods first.

    Args:
        number_of_large_steps: Number of large steps in the MOS pattern
        number_of_small_steps: Number of small steps in the MOS pattern

    Returns:
        Tuple of (large steps, small steps) in the bright generator
    """
    periods = math.gcd(number_of_large_steps, number_of_small_steps)
    if not periods:
        raise InvalidInputError("A MOS pattern needs at least one step")
    return generator_monzo(
        number_of_large_steps // periods,
        number_of_small_steps // periods,
    )
