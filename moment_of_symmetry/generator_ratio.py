"""MOS patterns supported by a generator / period ratio.

A generator given as a fraction of the period (7/12 for the 12-EDO
fifth, log2(3) for a just fifth with octave period) supports a nested
family of MOS scales. Their sizes are the denominators of the
semiconvergents of the ratio.

Floats are snapped to the simplest fraction within
config.FLOAT_SIMPLIFY_TOLERANCE before any arithmetic, so the
analysis itself is exact.
"""

import logging
from fractions import Fraction
from typing import Optional

from .errors import InvalidRangeError, TooManyStepSizesError
from .info import MosInfo, ScaleInfo
from .names import DEFAULT_NAMES, NameTable
from .pattern import mos_pattern_string
from .rational import ONE, FractionLike, get_convergents, wrap_generator_per_period

log = logging.getLogger(__name__)


def mos_forms(
    generator_per_period: FractionLike,
    max_size: Optional[int] = None,
    max_length: Optional[int] = None,
) -> list[Fraction]:
    """Fractions "generator steps / scale size" of the MOS scales a ratio supports.

    Args:
        generator_per_period: Generator divided by period
        max_size: Maximum size of a MOS pattern
        max_length: Maximum length of the result

    Returns:
        Semiconvergents of the wrapped ratio, without the trivial 0/1 and 1/1

    Examples:
        >>> mos_forms(Fraction(7, 12))
        [Fraction(1, 2), Fraction(3, 5), Fraction(4, 7), Fraction(7, 12)]
    """
    if max_length is not None:
        max_length += 2
    convergents = get_convergents(
        wrap_generator_per_period(generator_per_period),
        max_denominator=max_size,
        max_length=max_length,
        include_semiconvergents=True,
    )
    return convergents[2:]


def mos_sizes(
    generator_per_period: FractionLike,
    max_size: Optional[int] = None,
    max_length: Optional[int] = None,
) -> list[int]:
    """Sizes of the MOS scales a ratio supports, in increasing order."""
    return [form.denominator for form in mos_forms(generator_per_period, max_size, max_length)]


def _stacked(generator: Fraction, size: int, generators_down: int = 0) -> list[Fraction]:
    """Sorted stack of `size` generators within one period, closed by the period."""
    scale = sorted((generator * (i - generators_down)) % ONE for i in range(size))
    scale.append(ONE)
    return scale


def is_bright(generator_per_period: FractionLike, size: int) -> bool:
    """Determine if a generator / period ratio is bright.

    The scale stacked from the generator is compared with the scale
    stacked from its inversion, smallest interval class first. The
    generator is bright if its scale has the larger interval at the first
    difference. A ratio that ties on every interval counts as bright.

    Args:
        generator_per_period: Generator divided by period
        size: Size of the scale

    Returns:
        True if the generator creates large intervals when stacked
    """
    generator = wrap_generator_per_period(generator_per_period)
    positive = _stacked(generator, size)
    negative = _stacked(ONE - generator, size)

    for i in range(1, len(positive)):
        positive_interval = positive[i] - positive[0]
        negative_interval = negative[i] - negative[0]
        if positive_interval > negative_interval:
            return True
        if positive_interval < negative_interval:
            return False

    # Ambiguous generator
    return True


def to_bright_generator_per_period(generator_per_period: FractionLike, size: int) -> FractionLike:
    """Flip a generator / period ratio to its bright version if necessary.

    Floats stay floats and fractions stay fractions.

    Args:
        generator_per_period: Generator divided by period
        size: Size of the scale

    Returns:
        The wrapped ratio, inverted if it was dark

    Examples:
        >>> to_bright_generator_per_period(Fraction(6, 11), 7)
        Fraction(5, 11)
    """
    bright = is_bright(generator_per_period, size)
    if isinstance(generator_per_period, float):
        if bright:
            return generator_per_period % 1
        return -generator_per_period % 1

    generator = wrap_generator_per_period(generator_per_period)
    if bright:
        return generator
    return ONE - generator


def mos_patterns(
    generator_per_period: FractionLike,
    number_of_periods: int = 1,
    max_size: Optional[int] = None,
    max_length: Optional[int] = None,
    names: NameTable = DEFAULT_NAMES,
) -> list[MosInfo]:
    """Information about the MOS patterns generated by a generator / period ratio.

    Each pair of consecutive forms yields one pattern: the earlier form's
    size, with step counts read off the scale stacked from the later form.

    Args:
        generator_per_period: Generator divided by period
        number_of_periods: Number of periods per equave
        max_size: Maximum size of a MOS pattern (counting all periods)
        max_length: Maximum length of the result
        names: Name table used for the naming fields

    Returns:
        MosInfo for every pattern in increasing size
    """
    if max_length is not None:
        max_length += 1
    forms = mos_forms(generator_per_period, max_length=max_length)
    log.debug("Forms of %s: %s", generator_per_period, [str(form) for form in forms])

    result = []
    size = None
    for form in forms:
        if size is not None:
            if max_size is not None and size * number_of_periods > max_size:
                break
            scale = _stacked(form, size)

            # The smallest of the first gaps that differ is the small step
            small = scale[1]
            for i in range(size):
                gap = scale[i + 1] - scale[i]
                if gap < small:
                    small = gap
                    break
                if gap > small:
                    break

            number_of_small_steps = sum(
                1 for i in range(size) if scale[i] + small == scale[i + 1]
            )
            number_of_large_steps = size - number_of_small_steps

            number_of_large_steps *= number_of_periods
            number_of_small_steps *= number_of_periods
            info = MosInfo(
                mos_pattern=mos_pattern_string(number_of_large_steps, number_of_small_steps),
                number_of_large_steps=number_of_large_steps,
                number_of_small_steps=number_of_small_steps,
                size=size * number_of_periods,
            )
            info.apply_names(names.lookup(number_of_large_steps, number_of_small_steps))
            result.append(info)
        size = form.denominator

    return result


def scale_pattern(scale: list[Fraction]) -> str:
    """Step pattern of an ascending scale that includes its root and period.

    Args:
        scale: Ascending degrees, first the root and last the period

    Returns:
        One of "L", "M", "s" per step. A single step size gives all "M";
        two sizes give "L"/"s"; three sizes give "L"/"M"/"s".

    Raises:
        TooManyStepSizesError: If there are four or more step sizes
    """
    steps = [scale[i] - scale[i - 1] for i in range(1, len(scale))]
    sizes = sorted(set(steps))
    if len(sizes) == 1:
        return "M" * len(steps)
    if len(sizes) == 2:
        symbols = {sizes[0]: "s", sizes[1]: "L"}
    elif len(sizes) == 3:
        symbols = {sizes[0]: "s", sizes[1]: "M", sizes[2]: "L"}
    else:
        raise TooManyStepSizesError(f"Too many step sizes ({len(sizes)})")
    return "".join(symbols[step] for step in steps)


def scale_info(
    generator_per_period: FractionLike,
    size: int,
    generators_down: int,
    number_of_periods: int = 1,
    names: NameTable = DEFAULT_NAMES,
) -> ScaleInfo:
    """Information about the scale stacked from a generator / period ratio.

    The scale doesn't need to be a MOS. Pattern and mode names are only
    filled in when it has exactly two step sizes.

    Args:
        generator_per_period: Generator divided by period
        size: Size of the scale (counting all periods)
        generators_down: How many generators to go downwards (counting all periods)
        number_of_periods: Number of periods per equave
        names: Name table used for the naming fields

    Returns:
        ScaleInfo with the step pattern and, for MOS scales, the names

    Raises:
        InvalidRangeError: If size or generators_down is not divisible
            by the number of periods
        TooManyStepSizesError: If the scale has four or more step sizes

    Examples:
        >>> scale_info(Fraction(7, 12), 7, 2).mode_name
        'Mixolydian'
    """
    if size % number_of_periods:
        raise InvalidRangeError(
            f"Size {size} must be divisible by the number of periods ({number_of_periods})"
        )
    if generators_down % number_of_periods:
        raise InvalidRangeError(
            f"Number of generators down ({generators_down}) must be divisible "
            f"by the number of periods ({number_of_periods})"
        )
    size //= number_of_periods
    generators_down //= number_of_periods

    generator = wrap_generator_per_period(generator_per_period)
    pattern = scale_pattern(_stacked(generator, size, generators_down))
    full_pattern = pattern * number_of_periods
    info = ScaleInfo(step_pattern=full_pattern)
    if "M" in pattern:
        return info

    number_of_small_steps = pattern.count("s") * number_of_periods
    number_of_large_steps = pattern.count("L") * number_of_periods
    info.mos_pattern = mos_pattern_string(number_of_large_steps, number_of_small_steps)
    info.mode_name = names.mode_name(full_pattern)
    info.apply_names(names.lookup(number_of_large_steps, number_of_small_steps))
    return info
