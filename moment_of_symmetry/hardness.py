"""Names for the step ratio L:s of a MOS scale."""

import math

from .errors import UnableToClassifyError

# Named exact ratios: (name, large, small)
HARDNESS_RATIOS: list[tuple[str, int, int]] = [
    ("equalized", 1, 1),
    ("supersoft", 4, 3),
    ("soft", 3, 2),
    ("semisoft", 5, 3),
    ("basic", 2, 1),
    ("semihard", 5, 2),
    ("hard", 3, 1),
    ("superhard", 4, 1),
    ("collapsed", 1, 0),
]

# Open ranges of 6 * L/s: (name, low, high)
HARDNESS_RANGES: list[tuple[str, float, float]] = [
    ("ultrasoft", 6, 8),
    ("parasoft", 8, 9),
    ("quasisoft", 9, 10),
    ("minisoft", 10, 12),
    ("minihard", 12, 15),
    ("quasihard", 15, 18),
    ("parahard", 18, 24),
    ("ultrahard", 24, math.inf),
]


def get_hardness(size_of_large_step: float, size_of_small_step: float) -> str:
    """Get the TAMNAMS name for a step ratio L:s.

    Steps with opposite signs get a "trans-" prefix and ratios below 1
    get an "anti-" prefix, e.g. 1:2 is "anti-basic".

    Args:
        size_of_large_step: Size of the large step
        size_of_small_step: Size of the small step

    Returns:
        Name of the step ratio or of the hardness range it belongs to

    Raises:
        UnableToClassifyError: If no ratio or range matches
    """
    if not size_of_large_step and not size_of_small_step:
        return "stationary"

    sign = size_of_large_step * size_of_small_step
    large = abs(size_of_large_step)
    small = abs(size_of_small_step)
    prefix = ""
    if small > large:
        prefix = "anti-"
        large, small = small, large
    if sign < 0:
        prefix = "trans-" + prefix

    for name, ratio_large, ratio_small in HARDNESS_RATIOS:
        if large * ratio_small == ratio_large * small:
            return prefix + name

    for name, low, high in HARDNESS_RANGES:
        if low * small < 6 * large < high * small:
            return prefix + name

    raise UnableToClassifyError(
        f"Unable to determine hardness of {size_of_large_step}:{size_of_small_step}"
    )
