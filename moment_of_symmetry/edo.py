"""MOS patterns realizable inside an EDO.

A pattern with L large and S small steps is realized in an N-EDO when
L * size_of_large_step + S * size_of_small_step == N for positive
integer step sizes.
"""

import logging
from typing import Optional

from . import config
from .errors import InvalidInputError, NoPatternFoundError, OutOfRangeSearchError
from .family import mos_scale_info
from .info import MosScaleInfo
from .names import DEFAULT_NAMES, NameTable
from .rational import farey_interior

log = logging.getLogger(__name__)


def make_edo_map(
    max_size: int = config.DEFAULT_EDO_MAP_MAX_SIZE,
    names: NameTable = DEFAULT_NAMES,
) -> dict[int, list[MosScaleInfo]]:
    """Construct a mapping from EDO size to the MOS scales it supports.

    Only the step ratios in config.EDO_MAP_STEP_SIZES are considered,
    one per hardness class.

    Args:
        max_size: Maximum size of the MOS patterns to include
        names: Name table used for the naming fields

    Returns:
        EDO size → MosScaleInfo for each pattern and hardness that lands on it
    """
    result: dict[int, list[MosScaleInfo]] = {}
    for size_of_large_step, size_of_small_step in config.EDO_MAP_STEP_SIZES:
        for size in range(2, max_size + 1):
            for number_of_large_steps in range(1, size):
                info = mos_scale_info(
                    number_of_large_steps,
                    size - number_of_large_steps,
                    size_of_large_step,
                    size_of_small_step,
                    names=names,
                )
                result.setdefault(info.edo, []).append(info)
    return result


def _is_proper(size_of_large_step: int, size_of_small_step: int) -> bool:
    """Whether L:s lies between 3:2 and 3:1 inclusive."""
    return size_of_large_step <= 3 * size_of_small_step <= 2 * size_of_large_step


def any_for_edo(edo: int, names: NameTable = DEFAULT_NAMES) -> MosScaleInfo:
    """Find a MOS scale supported by the given EDO.

    Common shapes are tried first. For each shape the large step grows
    from 2 until the small steps no longer fit, and the first tuning with
    L:s between 3:2 and 3:1 is returned.

    Args:
        edo: Size of the EDO
        names: Name table used for the naming fields

    Returns:
        MosScaleInfo of the first match

    Raises:
        InvalidInputError: If edo is smaller than 2
        NoPatternFoundError: If no shape fits

    Examples:
        >>> any_for_edo(12).mos_pattern
        '5L 2s'
    """
    if edo <= 1:
        raise InvalidInputError(f"Minimum EDO size is 2, got {edo}")
    if edo == 2:
        return mos_scale_info(1, 1, 1, 1, names=names)

    for number_of_large_steps, number_of_small_steps in config.SEARCH_STEP_COUNTS:
        size_of_large_step = 2
        while True:
            small_part = edo - size_of_large_step * number_of_large_steps
            if small_part <= 0:
                break
            if small_part % number_of_small_steps == 0:
                size_of_small_step = small_part // number_of_small_steps
                if _is_proper(size_of_large_step, size_of_small_step):
                    log.debug(
                        "%d-EDO: %dL %ds with steps %d and %d",
                        edo, number_of_large_steps, number_of_small_steps,
                        size_of_large_step, size_of_small_step,
                    )
                    return mos_scale_info(
                        number_of_large_steps,
                        number_of_small_steps,
                        size_of_large_step,
                        size_of_small_step,
                        names=names,
                    )
            size_of_large_step += 1

    raise NoPatternFoundError(f"Failed to find a MOS pattern for {edo}-EDO")


def all_for_edo(
    edo: int,
    min_size: int = 2,
    max_size: Optional[int] = None,
    max_hardness: Optional[float] = None,
    names: NameTable = DEFAULT_NAMES,
) -> list[MosScaleInfo]:
    """Find all MOS scales supported by the given EDO within the given constraints.

    Args:
        edo: Size of the EDO
        min_size: Minimum size of a MOS scale in the result
        max_size: Maximum size of a MOS scale in the result (default: edo)
        max_hardness: Maximum hardness of the step ratio L/s
        names: Name table used for the naming fields

    Returns:
        MosScaleInfo of every match, by number of large steps, then number
        of small steps, then increasing s/L

    Raises:
        OutOfRangeSearchError: If min_size < 2 or max_size > edo
    """
    if max_size is None:
        max_size = edo
    if min_size < 2:
        raise OutOfRangeSearchError(f"Minimum size must be at least 2, got {min_size}")
    if max_size > edo:
        raise OutOfRangeSearchError(
            f"Maximum size must be smaller or equal to edo ({edo}), got {max_size}"
        )

    result = []
    for number_of_large_steps in range(1, max_size):
        for number_of_small_steps in range(max(1, min_size - number_of_large_steps),
                                           max_size - number_of_large_steps + 1):
            # Coprime step sizes s < L, at most edo - S large
            for ratio in farey_interior(edo - number_of_small_steps):
                size_of_small_step = ratio.numerator
                size_of_large_step = ratio.denominator
                if max_hardness and size_of_large_step > size_of_small_step * max_hardness:
                    continue
                total = (number_of_large_steps * size_of_large_step
                         + number_of_small_steps * size_of_small_step)
                if total == edo:
                    result.append(mos_scale_info(
                        number_of_large_steps,
                        number_of_small_steps,
                        size_of_large_step,
                        size_of_small_step,
                        names=names,
                    ))

    log.debug("%d-EDO supports %d MOS scales", edo, len(result))
    return result
