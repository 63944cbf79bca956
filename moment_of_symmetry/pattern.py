"""Abstract MOS patterns such as "5L 2s"."""

import math
import re
from dataclasses import dataclass

from .errors import InvalidInputError
from .words import validate_step_counts

_PATTERN_RE = re.compile(r"^\s*(\d+)\s*L\s+(\d+)\s*s\s*$")


@dataclass(frozen=True)
class StepCountPair:
    """Numbers of large and small steps in a MOS pattern."""
    number_of_large_steps: int
    number_of_small_steps: int

    def __post_init__(self):
        validate_step_counts(self.number_of_large_steps, self.number_of_small_steps)
        # Whole floats such as 5.0 are stored as ints
        object.__setattr__(self, "number_of_large_steps", int(self.number_of_large_steps))
        object.__setattr__(self, "number_of_small_steps", int(self.number_of_small_steps))
        if not self.number_of_large_steps and not self.number_of_small_steps:
            raise InvalidInputError("A MOS pattern needs at least one step")

    @classmethod
    def from_counts(cls, number_of_large_steps: int, number_of_small_steps: int) -> "StepCountPair":
        return cls(int(number_of_large_steps), int(number_of_small_steps))

    @classmethod
    def from_pattern(cls, mos_pattern: str) -> "StepCountPair":
        return parse_mos_pattern(mos_pattern)

    @property
    def size(self) -> int:
        return self.number_of_large_steps + self.number_of_small_steps

    @property
    def number_of_periods(self) -> int:
        return math.gcd(self.number_of_large_steps, self.number_of_small_steps)

    @property
    def is_single_period(self) -> bool:
        return self.number_of_periods == 1

    @property
    def period(self) -> int:
        """Number of steps in one period."""
        return self.size // self.number_of_periods

    def primitive(self) -> "StepCountPair":
        """The single-period pattern repeated by this one."""
        periods = self.number_of_periods
        return StepCountPair(
            self.number_of_large_steps // periods,
            self.number_of_small_steps // periods,
        )

    def __str__(self) -> str:
        return mos_pattern_string(self.number_of_large_steps, self.number_of_small_steps)


def mos_pattern_string(number_of_large_steps: int, number_of_small_steps: int) -> str:
    """Format step counts like "5L 2s"."""
    return f"{number_of_large_steps}L {number_of_small_steps}s"


def parse_mos_pattern(mos_pattern: str) -> StepCountPair:
    """Split a string like "5L 2s" into its step counts.

    Args:
        mos_pattern: MOS pattern such as "5L 2s"

    Returns:
        The corresponding StepCountPair

    Raises:
        InvalidInputError: If the string is not of the form "<int>L <int>s"
    """
    match = _PATTERN_RE.match(mos_pattern)
    if match is None:
        raise InvalidInputError(f"Not a MOS pattern: {mos_pattern!r}")
    return StepCountPair(int(match.group(1)), int(match.group(2)))
