"""MOS scales as subsets of an EDO.

Scales are built by stacking the bright generator of the pattern
inside one period and repeating the result for every period. The
returned degrees leave out the root (0) but include the top degree,
which equals the size of the EDO.

Brightness is selected with UDP notation: `up` bright generators are
stacked above the root and `down` below it, with
up + down = size - number_of_periods.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from . import config
from .errors import IncompatibleParametersError, InvalidInputError, InvalidRangeError
from .info import ModeInfo
from .monzo import generator_monzo
from .names import DEFAULT_NAMES, NameTable
from .pattern import StepCountPair


class Accidentals(Enum):
    """How parent or daughter degrees relate to the main scale."""
    SHARP = "sharp"
    FLAT = "flat"
    BOTH = "both"


class DegreeRole(Enum):
    """Role of an EDO degree in a daughter overlay."""
    PARENT = "parent"
    SHARP = "sharp"
    FLAT = "flat"
    BOTH = "both"   # Sharp and flat of neighbouring degrees coincide


@dataclass(frozen=True)
class ScaleOptions:
    """Options shared by the scale builders.

    `down` defaults to 0 and `up` to the maximum possible, which selects
    the brightest mode. Giving both requires them to agree.
    """
    down: Optional[int] = None
    up: Optional[int] = None
    size_of_large_step: int = config.DEFAULT_SIZE_OF_LARGE_STEP
    size_of_small_step: int = config.DEFAULT_SIZE_OF_SMALL_STEP
    accidentals: Accidentals = Accidentals(config.DEFAULT_ACCIDENTALS)

    def __post_init__(self):
        # Accept "sharp" / "flat" / "both" as well as the enum
        if not isinstance(self.accidentals, Accidentals):
            object.__setattr__(self, "accidentals", Accidentals(self.accidentals))
        if self.size_of_large_step <= 0 or self.size_of_small_step <= 0:
            raise InvalidInputError(
                f"Step sizes must be positive, got {self.size_of_large_step} "
                f"and {self.size_of_small_step}"
            )


DEFAULT_OPTIONS = ScaleOptions()


def resolve_down(options: ScaleOptions, period: int, number_of_periods: int) -> int:
    """Number of bright generators to go down from the root.

    Args:
        options: Scale options with `up` and/or `down`
        period: Number of steps in one period
        number_of_periods: Number of periods in the equave

    Returns:
        Validated count of generators below the root

    Raises:
        IncompatibleParametersError: If `up` and `down` disagree
        InvalidRangeError: If the count is out of range or not divisible
            by the number of periods
    """
    size = period * number_of_periods
    down = 0
    if options.up is not None:
        down = size - number_of_periods - options.up
        if options.down is not None and down != options.down:
            raise IncompatibleParametersError(
                f"up={options.up} and down={options.down} are incompatible "
                f"with a scale of size {size}"
            )
    elif options.down is not None:
        down = options.down

    if down < 0:
        raise InvalidRangeError(f"Down must not be negative, got {down}")
    if down >= size:
        raise InvalidRangeError(f"Up must not be negative (down={down}, size={size})")
    if down % number_of_periods:
        raise InvalidRangeError(
            f"Up/down must be divisible by the number of periods ({number_of_periods})"
        )
    return down


@dataclass(frozen=True)
class _Layout:
    """Shared arithmetic of one scale request."""
    number_of_periods: int
    period: int           # Steps per period
    l: int
    s: int
    down: int             # Generators below the root, per period
    period_size: int      # EDO steps per period
    generator: int        # EDO steps in the bright generator

    def degree(self, index: int) -> int:
        """EDO degree of the index-th stacked generator within one period."""
        return ((index - self.down) * self.generator) % self.period_size


def _layout(number_of_large_steps: int, number_of_small_steps: int, options: ScaleOptions) -> _Layout:
    counts = StepCountPair(number_of_large_steps, number_of_small_steps)
    number_of_periods = counts.number_of_periods
    period = counts.period
    down = resolve_down(options, period, number_of_periods)

    primitive = counts.primitive()
    l = primitive.number_of_large_steps
    s = primitive.number_of_small_steps
    g_large, g_small = generator_monzo(l, s)
    return _Layout(
        number_of_periods=number_of_periods,
        period=period,
        l=l,
        s=s,
        down=down // number_of_periods,
        period_size=l * options.size_of_large_step + s * options.size_of_small_step,
        generator=g_large * options.size_of_large_step + g_small * options.size_of_small_step,
    )


def _repeat_periods(layout: _Layout, base: dict) -> dict:
    """Copy a one-period degree map to every period and move the root to the top."""
    result = {}
    degrees = sorted(base)
    for i in range(layout.number_of_periods):
        for degree in degrees:
            result[degree + i * layout.period_size] = base[degree]
    root = result.pop(0)
    result[layout.number_of_periods * layout.period_size] = root
    return result


def build_scale(
    number_of_large_steps: int,
    number_of_small_steps: int,
    options: Optional[ScaleOptions] = None,
) -> list[int]:
    """Generate a MOS pattern as a subset of an EDO.

    Args:
        number_of_large_steps: Number of large steps in the MOS pattern
        number_of_small_steps: Number of small steps in the MOS pattern
        options: Step sizes and brightness (default: brightest basic mode)

    Returns:
        Ascending EDO degrees without the root but with the top degree

    Examples:
        >>> build_scale(5, 2)  # Lydian
        [2, 4, 6, 7, 9, 11, 12]
    """
    options = options or DEFAULT_OPTIONS
    layout = _layout(number_of_large_steps, number_of_small_steps, options)

    base = sorted(layout.degree(i) for i in range(layout.period))
    result = []
    for i in range(layout.number_of_periods):
        result.extend(degree + i * layout.period_size for degree in base)
    result.pop(0)
    result.append(layout.number_of_periods * layout.period_size)
    return result


def build_scale_with_parent(
    number_of_large_steps: int,
    number_of_small_steps: int,
    options: Optional[ScaleOptions] = None,
) -> dict[int, bool]:
    """Generate a MOS scale with the degrees of its parent MOS marked.

    The parent takes the first max(l, s) generators of each period
    (sharp convention) or the last ones (flat convention).

    Args:
        number_of_large_steps: Number of large steps in the MOS pattern
        number_of_small_steps: Number of small steps in the MOS pattern
        options: Step sizes, brightness and accidentals

    Returns:
        Ascending EDO degree → True if it belongs to the parent MOS
    """
    options = options or DEFAULT_OPTIONS
    layout = _layout(number_of_large_steps, number_of_small_steps, options)
    parent_period = max(layout.l, layout.s)

    base = {}
    for i in range(layout.period):
        if options.accidentals == Accidentals.FLAT:
            is_parent = layout.period - i <= parent_period
        else:
            is_parent = i < parent_period
        base[layout.degree(i)] = is_parent
    return _repeat_periods(layout, base)


def build_scale_with_daughter(
    number_of_large_steps: int,
    number_of_small_steps: int,
    options: Optional[ScaleOptions] = None,
) -> dict[int, DegreeRole]:
    """Generate a MOS scale together with the extra degrees of its daughter.

    The daughter continues the generator chain to 2l + s notes per
    period, above the scale for sharps and below it for flats. When the
    large step is exactly two small steps, sharps and flats land on the
    same degrees and are marked BOTH.

    Args:
        number_of_large_steps: Number of large steps in the parent MOS
        number_of_small_steps: Number of small steps in the parent MOS
        options: Step sizes, brightness and accidentals

    Returns:
        Ascending EDO degree → DegreeRole
    """
    options = options or DEFAULT_OPTIONS
    layout = _layout(number_of_large_steps, number_of_small_steps, options)
    daughter_period = 2 * layout.l + layout.s
    collapsed = options.size_of_large_step == 2 * options.size_of_small_step

    base = {}
    for i in range(layout.period):
        base[layout.degree(i)] = DegreeRole.PARENT

    accidentals = options.accidentals
    if accidentals == Accidentals.FLAT or (accidentals == Accidentals.BOTH and not collapsed):
        for i in range(layout.period - daughter_period, 0):
            base[layout.degree(i)] = DegreeRole.FLAT
    if accidentals in (Accidentals.SHARP, Accidentals.BOTH):
        role = DegreeRole.BOTH if collapsed else DegreeRole.SHARP
        for i in range(layout.period, daughter_period):
            base[layout.degree(i)] = role
    return _repeat_periods(layout, base)


def step_pattern(degrees: list[int], size_of_large_step: int = config.DEFAULT_SIZE_OF_LARGE_STEP) -> str:
    """Turn scale degrees (with the implicit root) into a pattern like "LLsLLLs"."""
    pattern = []
    previous = 0
    for degree in degrees:
        pattern.append("L" if degree - previous == size_of_large_step else "s")
        previous = degree
    return "".join(pattern)


def _udp(up: int, down: int, number_of_periods: int) -> str:
    udp = f"{up}|{down}"
    if number_of_periods > 1:
        udp += f"({number_of_periods})"
    return udp


def mode_info(
    number_of_large_steps: int,
    number_of_small_steps: int,
    options: Optional[ScaleOptions] = None,
    extra_names: bool = False,
    names: NameTable = DEFAULT_NAMES,
) -> ModeInfo:
    """Information about a mode of a MOS scale.

    Only the brightness options are used; the mode is always read off
    the basic (2:1) tuning.

    Args:
        number_of_large_steps: Number of large steps in the MOS pattern
        number_of_small_steps: Number of small steps in the MOS pattern
        options: Brightness of the mode (default: brightest)
        extra_names: Add names like "Ionian (Major)"
        names: Name table used for the mode name

    Returns:
        ModeInfo with UDP notation and step pattern
    """
    options = options or DEFAULT_OPTIONS
    counts = StepCountPair(number_of_large_steps, number_of_small_steps)
    number_of_periods = counts.number_of_periods
    period = counts.period
    down = resolve_down(options, period, number_of_periods)

    scale = build_scale(
        number_of_large_steps,
        number_of_small_steps,
        ScaleOptions(down=down),
    )
    mode = step_pattern(scale)
    up = (period - 1) * number_of_periods - down
    return ModeInfo(
        period=period,
        number_of_periods=number_of_periods,
        udp=_udp(up, down, number_of_periods),
        mode=mode,
        mode_name=names.mode_name(mode, extra_names),
    )


def mos_modes(
    number_of_large_steps: int,
    number_of_small_steps: int,
    extra_names: bool = False,
    names: NameTable = DEFAULT_NAMES,
) -> list[ModeInfo]:
    """Information about every mode of a MOS scale, darkest first."""
    counts = StepCountPair(number_of_large_steps, number_of_small_steps)
    number_of_periods = counts.number_of_periods
    return [
        mode_info(
            number_of_large_steps,
            number_of_small_steps,
            ScaleOptions(up=u * number_of_periods),
            extra_names=extra_names,
            names=names,
        )
        for u in range(counts.period)
    ]


