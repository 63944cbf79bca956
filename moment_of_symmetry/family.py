"""Concrete MOS tunings and their relatives.

The parent of a MOS is the smaller pattern obtained by merging each
small step into a neighbouring large step (or vice versa). The daughter
is the larger pattern obtained by splitting every large step into a
small step plus the chroma L - s.
"""

from fractions import Fraction
from typing import Union

from . import config
from .hardness import get_hardness
from .info import MosInfo, MosScaleInfo, RangeInfo
from .monzo import generator_monzo
from .names import DEFAULT_NAMES, NameTable
from .pattern import StepCountPair, mos_pattern_string


def mos_scale_info(
    number_of_large_steps: int,
    number_of_small_steps: int,
    size_of_large_step: int = config.DEFAULT_SIZE_OF_LARGE_STEP,
    size_of_small_step: int = config.DEFAULT_SIZE_OF_SMALL_STEP,
    names: NameTable = DEFAULT_NAMES,
) -> MosScaleInfo:
    """Describe a MOS pattern tuned with concrete step sizes.

    Args:
        number_of_large_steps: Number of large steps in the MOS pattern
        number_of_small_steps: Number of small steps in the MOS pattern
        size_of_large_step: Size of the large step in EDO steps
        size_of_small_step: Size of the small step in EDO steps
        names: Name table used for the naming fields

    Returns:
        MosScaleInfo with period, generators and hardness

    Examples:
        >>> info = mos_scale_info(5, 2)
        >>> info.edo, info.bright_generator, info.dark_generator
        (12, 7, 5)
    """
    counts = StepCountPair(number_of_large_steps, number_of_small_steps)
    primitive = counts.primitive()
    l = primitive.number_of_large_steps
    s = primitive.number_of_small_steps
    g_large, g_small = generator_monzo(l, s)

    period = l * size_of_large_step + s * size_of_small_step
    bright_generator = g_large * size_of_large_step + g_small * size_of_small_step
    mos_pattern = str(counts)

    info = MosScaleInfo(
        mos_pattern=mos_pattern,
        number_of_large_steps=counts.number_of_large_steps,
        number_of_small_steps=counts.number_of_small_steps,
        size_of_large_step=size_of_large_step,
        size_of_small_step=size_of_small_step,
        hardness=get_hardness(size_of_large_step, size_of_small_step),
        period=period,
        number_of_periods=counts.number_of_periods,
        edo=period * counts.number_of_periods,
        bright_generator=bright_generator,
        dark_generator=period - bright_generator,
        period_monzo=(l, s),
        bright_generator_monzo=(g_large, g_small),
    )
    info.apply_names(names.lookup(counts.number_of_large_steps, counts.number_of_small_steps))
    return info


def parent_mos(
    counts: Union[StepCountPair, str],
    names: NameTable = DEFAULT_NAMES,
) -> MosInfo:
    """Find the parent of a MOS pattern.

    Args:
        counts: Step counts, or a pattern string such as "5L 2s"
        names: Name table used for the naming fields

    Returns:
        MosInfo of the parent pattern

    Examples:
        >>> parent_mos(StepCountPair(5, 2)).mos_pattern
        '2L 3s'
    """
    if isinstance(counts, str):
        counts = StepCountPair.from_pattern(counts)
    size = max(counts.number_of_large_steps, counts.number_of_small_steps)
    number_of_large_steps = min(counts.number_of_large_steps, counts.number_of_small_steps)
    number_of_small_steps = size - number_of_large_steps

    info = MosInfo(
        mos_pattern=mos_pattern_string(number_of_large_steps, number_of_small_steps),
        number_of_large_steps=number_of_large_steps,
        number_of_small_steps=number_of_small_steps,
        size=size,
    )
    info.apply_names(names.lookup(number_of_large_steps, number_of_small_steps))
    return info


def daughter_mos(
    number_of_large_steps: int,
    number_of_small_steps: int,
    size_of_large_step: int,
    size_of_small_step: int,
    names: NameTable = DEFAULT_NAMES,
) -> MosScaleInfo:
    """Find the daughter of a tuned MOS pattern.

    Every large step splits into the old small step and the chroma
    L - s. Whichever of the two is larger becomes the new large step.

    Args:
        number_of_large_steps: Number of large steps in the parent
        number_of_small_steps: Number of small steps in the parent
        size_of_large_step: Size of the parent's large step
        size_of_small_step: Size of the parent's small step
        names: Name table used for the naming fields

    Returns:
        MosScaleInfo of the daughter in the same tuning
    """
    size = number_of_large_steps + number_of_small_steps
    if size_of_large_step >= 2 * size_of_small_step:
        number_of_small_steps = size
        size_of_large_step -= size_of_small_step
    else:
        number_of_small_steps = number_of_large_steps
        number_of_large_steps = size
        size_of_large_step, size_of_small_step = (
            size_of_small_step,
            size_of_large_step - size_of_small_step,
        )
    return mos_scale_info(
        number_of_large_steps,
        number_of_small_steps,
        size_of_large_step,
        size_of_small_step,
        names=names,
    )


def generator_ranges(size: int, include_multi_periods: bool = False) -> list[RangeInfo]:
    """Find the generators (as fractions of the equave) that span MOS scales.

    Each pattern gets a bright and a dark range. The bright range runs
    between the collapsed endpoint (s = 0) and the equalized endpoint
    (L = s).

    Args:
        size: Number of notes in the scales
        include_multi_periods: Also include patterns with more than one period

    Returns:
        Ranges grouped by period and otherwise sorted by lower bound
    """
    result = []
    for number_of_large_steps in range(1, size):
        counts = StepCountPair(number_of_large_steps, size - number_of_large_steps)
        if not include_multi_periods and not counts.is_single_period:
            continue

        period = Fraction(1, counts.number_of_periods)
        primitive = counts.primitive()
        g_large, g_small = generator_monzo(
            primitive.number_of_large_steps,
            primitive.number_of_small_steps,
        )

        lower_bound = Fraction(g_large, number_of_large_steps)   # Collapsed
        upper_bound = Fraction(g_large + g_small, size)           # Equalized
        if lower_bound > upper_bound:
            lower_bound, upper_bound = upper_bound, lower_bound

        result.append(RangeInfo(
            period=period,
            lower_bound=lower_bound,
            upper_bound=upper_bound,
            number_of_large_steps=counts.number_of_large_steps,
            number_of_small_steps=counts.number_of_small_steps,
            bright=True,
        ))
        result.append(RangeInfo(
            period=period,
            lower_bound=period - upper_bound,
            upper_bound=period - lower_bound,
            number_of_large_steps=counts.number_of_large_steps,
            number_of_small_steps=counts.number_of_small_steps,
            bright=False,
        ))

    result.sort(key=lambda r: (r.period, r.lower_bound))
    return result
